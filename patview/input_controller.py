"""Input controller for wrapping key reads to enable testing"""

from abc import ABC, abstractmethod

TICK_RATE_MS = 200


class InputController(ABC):
    """Abstract input controller interface"""

    @abstractmethod
    def get_input(self) -> int:
        """Get the next key, or -1 if none arrived within a tick"""


class CursesInputController(InputController):
    """Reads keys from a curses window"""

    def __init__(self, stdscr, tick_rate_ms: int = TICK_RATE_MS) -> None:
        self._stdscr = stdscr
        self._stdscr.keypad(True)
        self._stdscr.timeout(tick_rate_ms)

    def get_input(self) -> int:
        return self._stdscr.getch()
