"""Row selection with wraparound for the list views"""

import dataclasses


class NoSelectionError(LookupError):
    """Raised when a selection-dependent query runs without a valid selection"""


def next_index(current: int, length: int) -> int:
    """Get the index after current, wrapping from the last row to the first"""
    if current >= length - 1:
        return 0
    return current + 1


def previous_index(current: int, length: int) -> int:
    """Get the index before current, wrapping from the first row to the last"""
    if current <= 0:
        return length - 1
    return current - 1


@dataclasses.dataclass(frozen=True)
class Selection:
    """The highlighted row of a list view, or None when nothing is selected.

    Selections are values: every move returns a new Selection, which lets the
    viewer state notice the change on assignment.
    """

    selected: int | None = None

    @classmethod
    def first(cls, length: int) -> "Selection":
        """Select the first row, or nothing if the list is empty"""
        return cls(0 if length > 0 else None)

    @property
    def is_empty(self) -> bool:
        """Whether no row is selected"""
        return self.selected is None

    def next(self, length: int) -> "Selection":
        """Move to the next row"""
        if self.selected is None or length <= 0:
            return self
        return Selection(next_index(self.selected, length))

    def previous(self, length: int) -> "Selection":
        """Move to the previous row"""
        if self.selected is None or length <= 0:
            return self
        return Selection(previous_index(self.selected, length))

    def clamp(self, length: int) -> "Selection":
        """Keep the current row if it still exists, otherwise start over"""
        if self.selected is not None and 0 <= self.selected < length:
            return self
        return Selection.first(length)

    def index(self) -> int:
        """Get the selected row, raising if there is none"""
        if self.selected is None:
            raise NoSelectionError("No row is selected")
        return self.selected
