"""Main application view - header, footer, key handling and the main loop"""

import curses
import logging

from patview.helpers.curses_utils import (
    ESC,
    Color,
    Position,
    Size,
    TextAttribute,
    Viewport,
)
from patview.input_controller import InputController
from patview.models.pattern import Pattern
from patview.models.viewer_model import ViewerState, ViewMode
from patview.output_controller import OutputController
from patview.viewmodels.navigation import Action, NavigationController
from patview.views.details import DetailsView
from patview.views.patterns import PatternsView
from patview.views.samples import SamplesView

TITLE = "Log Pattern Viewer"

KEY_BINDINGS: dict[int, Action] = {
    curses.KEY_DOWN: Action.MOVE_DOWN,
    ord("j"): Action.MOVE_DOWN,
    curses.KEY_UP: Action.MOVE_UP,
    ord("k"): Action.MOVE_UP,
    curses.KEY_RIGHT: Action.MOVE_FORWARD,
    ord("l"): Action.MOVE_FORWARD,
    curses.KEY_LEFT: Action.MOVE_BACKWARD,
    ord("h"): Action.MOVE_BACKWARD,
    ord("d"): Action.ACTIVATE,
    ord("\n"): Action.ACTIVATE,
    curses.KEY_ENTER: Action.ACTIVATE,
    ord("p"): Action.JUMP_TO_SAMPLES,
}

QUIT_KEYS = {ord("q"), ESC}

KEY_HINTS = "↑/↓ move | ←/→ switch view | d/Enter open | p samples | q quit"

logger = logging.getLogger(__name__)


class App:  # pylint: disable=too-many-instance-attributes
    """Main application class"""

    HEADER_HEIGHT = 2
    FOOTER_HEIGHT = 2

    def __init__(
        self,
        output_controller: OutputController,
        input_controller: InputController,
        patterns: list[Pattern],
        source_name: str,
    ) -> None:
        self._output_controller = output_controller
        self._input_controller = input_controller
        self._needs_header_redraw = True
        self._needs_body_redraw = True
        self._needs_footer_redraw = True
        self._needs_resize = False

        self._state = ViewerState()
        self._state.terminal_size = output_controller.get_terminal_size()
        self._state.source_name = source_name
        self._state.set_patterns(patterns)
        self._controller = NavigationController(self._state)
        self._register_watchers()

        self._stdscr = output_controller.create_main_window()
        header, body, footer = self._viewports()
        self._header_win = self._stdscr.derwin(header)
        self._body_win = self._stdscr.derwin(body)
        self._footer_win = self._stdscr.derwin(footer)

        self._views = {
            ViewMode.PATTERNS: PatternsView(
                self._state, self._controller, self._body_win
            ),
            ViewMode.SAMPLES: SamplesView(
                self._state, self._controller, self._body_win
            ),
            ViewMode.DETAILS: DetailsView(
                self._state, self._controller, self._body_win
            ),
        }

    @property
    def state(self) -> ViewerState:
        """The viewer state"""
        return self._state

    @property
    def controller(self) -> NavigationController:
        """The navigation controller"""
        return self._controller

    def _register_watchers(self) -> None:
        for field in ["current_mode", "terminal_size", "source_name"]:
            self._state.register_watcher(field, self._update_needs_header_redraw)
        for field in [
            "current_mode",
            "terminal_size",
            "patterns",
            "pattern_selection",
            "sample_selection",
            "detail_text",
            "scroll_offset",
        ]:
            self._state.register_watcher(field, self._update_needs_body_redraw)
        for field in [
            "current_mode",
            "terminal_size",
            "pattern_selection",
            "sample_selection",
            "scroll_offset",
        ]:
            self._state.register_watcher(field, self._update_needs_footer_redraw)
        self._state.register_watcher("terminal_size", self._update_needs_resize)

    def _update_needs_header_redraw(self) -> None:
        self._needs_header_redraw = True

    def _update_needs_body_redraw(self) -> None:
        self._needs_body_redraw = True

    def _update_needs_footer_redraw(self) -> None:
        self._needs_footer_redraw = True

    def _update_needs_resize(self) -> None:
        self._needs_resize = True

    def _viewports(self) -> tuple[Viewport, Viewport, Viewport]:
        height, width = self._state.terminal_size
        footer_start = max(0, height - self.FOOTER_HEIGHT)
        body_height = max(0, footer_start - self.HEADER_HEIGHT)
        return (
            Viewport(Position(0, 0), Size(self.HEADER_HEIGHT, width)),
            Viewport(Position(self.HEADER_HEIGHT, 0), Size(body_height, width)),
            Viewport(Position(footer_start, 0), Size(self.FOOTER_HEIGHT, width)),
        )

    def run(self) -> None:
        """Main TUI loop"""
        self._output_controller.curs_set(0)
        while True:
            self.draw()
            if not self.handle_key(self._input_controller.get_input()):
                return

    def handle_key(self, key: int) -> bool:
        """Handle one key press. Returns False when the viewer should quit."""
        if key == -1:
            return True
        if key == curses.KEY_RESIZE:
            self._output_controller.update_lines_cols()
            self._state.terminal_size = self._output_controller.get_terminal_size()
            return True
        if key in QUIT_KEYS:
            logger.info("Quit requested")
            return False

        action = KEY_BINDINGS.get(key)
        if action is not None:
            self._controller.handle(action)
        return True

    def draw(self) -> None:
        """Redraw the parts of the screen whose state changed"""
        if self._needs_resize:
            self._resize_windows()
            self._needs_resize = False

        if self._needs_header_redraw:
            self._draw_header()
            self._needs_header_redraw = False

        if self._needs_body_redraw:
            self._views[self._state.current_mode].draw()
            self._needs_body_redraw = False

        if self._needs_footer_redraw:
            self._draw_footer()
            self._needs_footer_redraw = False

        self._state.clear_changes()

    def _resize_windows(self) -> None:
        header, body, footer = self._viewports()
        self._header_win.resize(header.size)
        self._body_win.resize(body.size)
        self._body_win.mvderwin(body.pos)
        self._footer_win.resize(footer.size)
        self._footer_win.mvderwin(footer.pos)
        for view in self._views.values():
            view.resize()

    def _draw_header(self) -> None:
        _, width = self._header_win.getmaxyx()
        self._header_win.clear()

        title = TITLE
        if self._state.source_name:
            title = f"{TITLE} - {self._state.source_name}"
        self._header_win.addstr(
            Position(0, 1), title[: width - 2], color=Color.HEADER
        )

        x_pos = 1
        for mode in ViewMode:
            tab = f" {mode.title} "[: max(0, width - 1 - x_pos)]
            if not tab:
                break
            is_active = mode == self._state.current_mode
            self._header_win.addstr(
                Position(1, x_pos),
                tab,
                color=Color.TAB if is_active else Color.INFO,
                attributes=(
                    [TextAttribute.REVERSE, TextAttribute.BOLD] if is_active else None
                ),
            )
            x_pos += len(tab) + 1

        self._header_win.refresh()

    def _draw_footer(self) -> None:
        _, width = self._footer_win.getmaxyx()
        self._footer_win.clear()
        self._footer_win.addstr(
            Position(0, 1), self.get_status_line()[: width - 2], color=Color.INFO
        )
        self._footer_win.addstr(
            Position(1, 1), KEY_HINTS[: width - 2], color=Color.DEFAULT
        )
        self._footer_win.refresh()

    def get_status_line(self) -> str:
        """Build the status line shown in the footer"""
        status_parts = [self._state.current_mode.title.upper()]

        pattern_position = self._controller.pattern_position()
        if pattern_position:
            status_parts.append("Pattern {}/{}".format(*pattern_position))

        sample_position = self._controller.sample_position()
        if sample_position:
            status_parts.append("Sample {}/{}".format(*sample_position))
        elif pattern_position:
            status_parts.append("No samples")

        if self._state.current_mode == ViewMode.DETAILS:
            status_parts.append(f"Line {self._state.scroll_offset + 1}")

        return " | ".join(status_parts)
