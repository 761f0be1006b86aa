"""Details mode view - the rendered text of one sample"""

import textwrap

from patview.helpers.curses_utils import Color, Position, TextAttribute
from patview.models.viewer_model import ViewerState
from patview.output_controller import Window
from patview.viewmodels.navigation import NavigationController


class DetailsView:
    """Draws the detail text, wrapped to the window and scrolled"""

    _CONTENT_START_LINE = 2

    def __init__(
        self, state: ViewerState, controller: NavigationController, window: Window
    ) -> None:
        self._state = state
        self._controller = controller
        self._window = window

    def resize(self) -> None:
        """The details view draws straight into the body window"""

    def draw(self) -> None:
        """Draw the visible part of the detail text"""
        self._window.clear()
        height, width = self._window.getmaxyx()
        if height <= self._CONTENT_START_LINE or width < 3:
            self._window.refresh()
            return

        self._window.addstr(
            Position(0, 1),
            "Log sample"[: width - 2],
            color=Color.HEADER,
            attributes=[TextAttribute.BOLD],
        )
        self._window.addstr(Position(1, 1), "─" * (width - 2), color=Color.HEADER)

        lines = self.wrap_text(self._state.detail_text, width - 2)
        available_height = height - self._CONTENT_START_LINE
        self._controller.clamp_scroll(len(lines) - available_height)

        scroll_offset = self._state.scroll_offset
        for y_pos, line in enumerate(
            lines[scroll_offset : scroll_offset + available_height],
            start=self._CONTENT_START_LINE,
        ):
            self._window.addstr(Position(y_pos, 1), line, color=Color.DEFAULT)

        self._window.refresh()

    @staticmethod
    def wrap_text(text: str, width: int) -> list[str]:
        """Break the text into lines that fit the width, keeping indentation"""
        lines: list[str] = []
        for line in text.split("\n"):
            wrapped = textwrap.wrap(
                line,
                width,
                replace_whitespace=False,
                drop_whitespace=False,
                break_on_hyphens=False,
            )
            lines.extend(wrapped or [""])
        return lines
