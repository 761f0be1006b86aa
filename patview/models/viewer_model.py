"""State of the pattern viewer"""

import dataclasses
from enum import Enum

from patview.helpers.curses_utils import Size
from patview.helpers.state import State
from patview.models.pattern import Pattern
from patview.models.selection import Selection


class ViewMode(Enum):
    """The three screens of the viewer, in tab order"""

    PATTERNS = "Pattern"
    SAMPLES = "Sample"
    DETAILS = "Detail"

    @property
    def title(self) -> str:
        """Title shown in the tab bar"""
        return self.value

    def next(self) -> "ViewMode":
        """Get the mode to the right, wrapping around"""
        modes = list(ViewMode)
        return modes[(modes.index(self) + 1) % len(modes)]

    def previous(self) -> "ViewMode":
        """Get the mode to the left, wrapping around"""
        modes = list(ViewMode)
        return modes[(modes.index(self) - 1) % len(modes)]


@dataclasses.dataclass
class ViewerState(State):  # pylint: disable=too-many-instance-attributes
    """State of the viewer application"""

    terminal_size: Size = Size(0, 0)
    source_name: str = ""
    current_mode: ViewMode = ViewMode.PATTERNS
    pattern_selection: Selection = Selection()
    sample_selection: Selection = Selection()
    detail_text: str = ""
    scroll_offset: int = 0
    _patterns: list[Pattern] = dataclasses.field(default_factory=list)

    @property
    def patterns(self) -> list[Pattern]:
        """Get the patterns of the report"""
        return self._patterns.copy()

    @property
    def num_patterns(self) -> int:
        """Number of patterns in the report"""
        return len(self._patterns)

    def pattern_at(self, index: int) -> Pattern:
        """Get the pattern at a row of the pattern list"""
        return self._patterns[index]

    def set_patterns(self, patterns: list[Pattern]) -> None:
        """Set the report and select its first pattern and sample"""
        self._patterns = list(patterns)
        self._changed("patterns")
        self.pattern_selection = Selection.first(len(self._patterns))
        if self._patterns:
            self.sample_selection = Selection.first(self._patterns[0].sample_count)
        else:
            self.sample_selection = Selection()
