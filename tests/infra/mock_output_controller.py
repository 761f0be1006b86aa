"""Mock implementations of OutputController and Window for testing"""

from typing import NamedTuple

from patview.helpers.curses_utils import Color, Position, Size, TextAttribute, Viewport
from patview.output_controller import OutputController, Window


class CharCell(NamedTuple):
    """Represents a single character cell in the screen buffer"""

    char: str
    color: Color | None
    attributes: list[TextAttribute] | None


class MockWindow(Window):
    """Mock implementation of Window for testing views

    All windows (main and derived) share the same content buffer.
    Derived windows have a viewport relative to their parent window.
    """

    def __init__(
        self,
        content: dict[Position, CharCell],
        viewport: Viewport,
        parent: "MockWindow | None" = None,
    ) -> None:
        self._content = content
        self._viewport = viewport
        self._parent = parent

    @property
    def _abs_pos(self) -> Position:
        if self._parent is None:
            return self._viewport.pos
        origin = self._parent._abs_pos  # pylint: disable=protected-access
        return Position(origin.y + self._viewport.y, origin.x + self._viewport.x)

    def derwin(self, viewport: Viewport) -> "MockWindow":
        return MockWindow(self._content, viewport, self)

    def resize(self, size: Size) -> None:
        self._viewport = Viewport(self._viewport.pos, size)

    def mvderwin(self, position: Position) -> None:
        self._viewport = Viewport(position, self._viewport.size)

    def getmaxyx(self) -> Size:
        return self._viewport.size

    def clear(self) -> None:
        top = self._abs_pos
        for y in range(self._viewport.height):
            for x in range(self._viewport.width):
                self._content.pop(Position(top.y + y, top.x + x), None)

    def refresh(self) -> None:
        pass

    def addstr(
        self,
        position: Position,
        text: str,
        *,
        color: Color | None = None,
        attributes: list[TextAttribute] | None = None,
    ) -> None:
        top = self._abs_pos
        for i, char in enumerate(text):
            local_pos = Position(position.y, position.x + i)
            if (
                local_pos.x < self._viewport.width
                and local_pos.y < self._viewport.height
            ):
                abs_pos = Position(top.y + local_pos.y, top.x + local_pos.x)
                self._content[abs_pos] = CharCell(char, color, attributes)

    def get_line(self, y: int) -> str:
        """Get the text content of a line (relative to this window)"""
        top = self._abs_pos
        line_chars = []
        for x in range(self._viewport.width):
            cell = self._content.get(Position(top.y + y, top.x + x))
            line_chars.append(cell.char if cell else " ")
        return "".join(line_chars).rstrip()

    def get_all_lines(self) -> list[str]:
        """Get all lines as a list of strings (relative to this window)"""
        return [self.get_line(y) for y in range(self._viewport.height)]

    def get_cell(self, position: Position) -> CharCell | None:
        """Get the cell at a position (relative to this window)"""
        top = self._abs_pos
        return self._content.get(Position(top.y + position.y, top.x + position.x))


class MockOutputController(OutputController):
    """Mock implementation of OutputController for testing views

    Maintains a shared screen buffer that all windows draw to.
    """

    def __init__(self, terminal_size: Size = Size(24, 80)) -> None:
        self._terminal_size = terminal_size
        self._cursor_visibility = 1
        self._screen_content: dict[Position, CharCell] = {}

    def create_main_window(self) -> MockWindow:
        viewport = Viewport(Position(0, 0), self._terminal_size)
        return MockWindow(self._screen_content, viewport)

    def curs_set(self, visibility: int) -> None:
        self._cursor_visibility = visibility

    def update_lines_cols(self) -> None:
        pass

    def get_terminal_size(self) -> Size:
        return self._terminal_size

    def set_terminal_size(self, size: Size) -> None:
        """Set the terminal size for testing"""
        self._terminal_size = size

    def get_screen_line(self, y: int) -> str:
        """Get a line from the entire screen"""
        line_chars = []
        for x in range(self._terminal_size.width):
            cell = self._screen_content.get(Position(y, x))
            line_chars.append(cell.char if cell else " ")
        return "".join(line_chars).rstrip()

    def get_screen(self) -> str:
        """Get all lines from the entire screen"""
        return "\n".join(
            self.get_screen_line(y) for y in range(self._terminal_size.height)
        )

    def get_cell(self, position: Position) -> CharCell | None:
        """Get the cell at an absolute screen position"""
        return self._screen_content.get(position)

    @property
    def cursor_visibility(self) -> int:
        """Get the current cursor visibility"""
        return self._cursor_visibility
