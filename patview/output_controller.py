"""Output controller for wrapping curses operations to enable testing"""

import curses
from abc import ABC, abstractmethod

from patview.helpers.curses_utils import Color, Position, Size, TextAttribute, Viewport


class Window(ABC):
    """Abstract window interface for curses operations"""

    @abstractmethod
    def derwin(self, viewport: Viewport) -> "Window":
        """Create a derived window"""

    @abstractmethod
    def resize(self, size: Size) -> None:
        """Resize the window"""

    @abstractmethod
    def mvderwin(self, position: Position) -> None:
        """Move the derived window"""

    @abstractmethod
    def getmaxyx(self) -> Size:
        """Get the size of the window"""

    @abstractmethod
    def clear(self) -> None:
        """Clear the window"""

    @abstractmethod
    def refresh(self) -> None:
        """Refresh the window"""

    @abstractmethod
    def addstr(
        self,
        position: Position,
        text: str,
        *,
        color: Color | None = None,
        attributes: list[TextAttribute] | None = None,
    ) -> None:
        """Add a string to the window"""


class OutputController(ABC):
    """Abstract output controller interface for curses module operations"""

    @abstractmethod
    def create_main_window(self) -> Window:
        """Create the Window covering the whole terminal"""

    @abstractmethod
    def curs_set(self, visibility: int) -> None:
        """Set cursor visibility"""

    @abstractmethod
    def update_lines_cols(self) -> None:
        """Update LINES and COLS after terminal resize"""

    @abstractmethod
    def get_terminal_size(self) -> Size:
        """Get the terminal size as a Size tuple"""


class CursesWindow(Window):
    """Concrete implementation of Window wrapping a curses window"""

    def __init__(self, curses_window, color_to_pair: dict[Color, int]) -> None:
        self._window = curses_window
        self._color_to_pair = color_to_pair

    def derwin(self, viewport: Viewport) -> Window:
        return CursesWindow(
            self._window.derwin(
                viewport.height, viewport.width, viewport.y, viewport.x
            ),
            self._color_to_pair,
        )

    def resize(self, size: Size) -> None:
        self._window.resize(size.height, size.width)

    def mvderwin(self, position: Position) -> None:
        self._window.mvderwin(position.y, position.x)

    def getmaxyx(self) -> Size:
        return Size(*self._window.getmaxyx())

    def clear(self) -> None:
        self._window.clear()

    def refresh(self) -> None:
        self._window.refresh()

    def addstr(
        self,
        position: Position,
        text: str,
        *,
        color: Color | None = None,
        attributes: list[TextAttribute] | None = None,
    ) -> None:
        attr = 0
        if color is not None:
            attr = self._color_to_pair.get(color, 0)
        if attributes:
            for text_attr in attributes:
                attr |= text_attr.value
        self._window.addstr(position.y, position.x, text, attr)


class CursesOutputController(OutputController):
    """Concrete implementation of OutputController wrapping the curses module"""

    def __init__(self, stdscr) -> None:
        self._stdscr = stdscr
        self._color_to_pair: dict[Color, int] = {}
        curses.start_color()
        self._use_default_colors()

    def _use_default_colors(self) -> None:
        curses.use_default_colors()
        for i, color in enumerate(Color):
            pair_num = i + 1
            curses.init_pair(pair_num, color.value, -1)
            self._color_to_pair[color] = curses.color_pair(pair_num)

    def create_main_window(self) -> Window:
        return CursesWindow(self._stdscr, self._color_to_pair)

    def curs_set(self, visibility: int) -> None:
        curses.curs_set(visibility)

    def update_lines_cols(self) -> None:
        curses.update_lines_cols()

    def get_terminal_size(self) -> Size:
        return Size(curses.LINES, curses.COLS)  # pylint: disable=no-member
