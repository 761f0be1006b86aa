"""Titled table drawing shared by the list views"""

from typing import NamedTuple

from patview.helpers.curses_utils import Color, Position, Size, TextAttribute, Viewport
from patview.output_controller import Window


class TableColumn(NamedTuple):
    """A column title and its share of the table width, in percent"""

    title: str
    share: int


class Table:
    """Draws rows into a window, keeping the highlighted row visible"""

    _HEADER_HEIGHT = 3

    def __init__(self, window: Window, title: str, columns: list[TableColumn]) -> None:
        self._window = window
        self._title = title
        self._columns = columns

    @property
    def window(self) -> Window:
        """The window the table draws into"""
        return self._window

    @property
    def visible_rows(self) -> int:
        """Number of data rows that fit in the window"""
        height, _ = self._window.getmaxyx()
        return max(0, height - self._HEADER_HEIGHT)

    def column_widths(self) -> list[int]:
        """Split the inner width between the columns"""
        _, width = self._window.getmaxyx()
        inner_width = max(0, width - 2)
        widths = [inner_width * col.share // 100 for col in self._columns]
        widths[-1] = max(0, inner_width - sum(widths[:-1]))
        return widths

    def first_visible_row(self, selected: int | None) -> int:
        """First row to draw so that the selected row is on screen"""
        if selected is None or self.visible_rows == 0:
            return 0
        return max(0, selected - self.visible_rows + 1)

    def draw(self, rows: list[list[str]], selected: int | None = None) -> None:
        """Draw the title, the column headers and the visible rows"""
        self._window.clear()
        height, width = self._window.getmaxyx()
        if height == 0 or width < 3:
            self._window.refresh()
            return

        widths = self.column_widths()
        self._window.addstr(
            Position(0, 1),
            self._title[: width - 2],
            color=Color.HEADER,
            attributes=[TextAttribute.BOLD],
        )
        if height > 1:
            self._window.addstr(
                Position(1, 1),
                self._format_row([col.title for col in self._columns], widths),
                color=Color.HEADER,
                attributes=[TextAttribute.BOLD],
            )
        if height > 2:
            self._window.addstr(
                Position(2, 1), "─" * (width - 2), color=Color.HEADER
            )

        first = self.first_visible_row(selected)
        visible = rows[first : first + self.visible_rows]
        for offset, row in enumerate(visible):
            is_selected = first + offset == selected
            self._window.addstr(
                Position(self._HEADER_HEIGHT + offset, 1),
                self._format_row(row, widths),
                color=Color.SELECTED if is_selected else Color.DEFAULT,
                attributes=[TextAttribute.REVERSE] if is_selected else None,
            )

        self._window.refresh()

    @staticmethod
    def _format_row(cells: list[str], widths: list[int]) -> str:
        parts = []
        for cell, col_width in zip(cells, widths):
            text = (
                cell.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
            )
            # one blank cell between columns
            parts.append(text[: max(0, col_width - 1)].ljust(col_width))
        return "".join(parts)


class SplitView:
    """Base for views made of two tables stacked vertically"""

    _TOP_SHARE = 50

    def __init__(self, window: Window) -> None:
        self._window = window
        top, bottom = self._viewports()
        self._top_win = window.derwin(top)
        self._bottom_win = window.derwin(bottom)

    def _viewports(self) -> tuple[Viewport, Viewport]:
        height, width = self._window.getmaxyx()
        top_height = height * self._TOP_SHARE // 100
        return (
            Viewport(Position(0, 0), Size(top_height, width)),
            Viewport(Position(top_height, 0), Size(height - top_height, width)),
        )

    def resize(self) -> None:
        """Fit both tables to the resized parent window"""
        top, bottom = self._viewports()
        self._top_win.resize(top.size)
        self._top_win.mvderwin(top.pos)
        self._bottom_win.resize(bottom.size)
        self._bottom_win.mvderwin(bottom.pos)
