"""Navigation viewmodel - translates viewer actions into state changes"""

import enum
import json
import logging

from patview.models.pattern import Pattern, Sample
from patview.models.selection import NoSelectionError, Selection
from patview.models.viewer_model import ViewerState, ViewMode

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    """Discrete navigation actions, already decoded from key presses"""

    MOVE_UP = enum.auto()
    MOVE_DOWN = enum.auto()
    MOVE_FORWARD = enum.auto()
    MOVE_BACKWARD = enum.auto()
    ACTIVATE = enum.auto()
    JUMP_TO_SAMPLES = enum.auto()


def render_detail_text(raw_log: str) -> str:
    """Pretty-print a raw log line if it is JSON, otherwise return it as is"""
    try:
        data = json.loads(raw_log)
    except (ValueError, RecursionError):
        return raw_log
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)


class NavigationController:
    """Owns every mutation of the viewer state made in response to input.

    The sample selection always matches the current pattern: it is reset when
    the pattern selection changes and re-clamped whenever the samples view
    becomes active, so the selection-dependent queries below cannot fail for
    any sequence of actions.
    """

    def __init__(self, state: ViewerState) -> None:
        self._state = state
        self._handlers = {
            Action.MOVE_UP: self.move_up,
            Action.MOVE_DOWN: self.move_down,
            Action.MOVE_FORWARD: self.advance_view,
            Action.MOVE_BACKWARD: self.retreat_view,
            Action.ACTIVATE: self.enter,
            Action.JUMP_TO_SAMPLES: self.jump_to_sample_list,
        }

    def handle(self, action: Action) -> None:
        """Apply a navigation action"""
        logger.debug("Handling %s in %s", action.name, self._state.current_mode.name)
        self._handlers[action]()

    @property
    def current_mode(self) -> ViewMode:
        """The active view"""
        return self._state.current_mode

    @property
    def detail_text(self) -> str:
        """The rendered sample shown in the details view"""
        return self._state.detail_text

    @property
    def scroll_offset(self) -> int:
        """First line of the detail text shown in the details view"""
        return self._state.scroll_offset

    def move_down(self) -> None:
        """Select the next row of the active list, or scroll the details down"""
        mode = self._state.current_mode
        if mode == ViewMode.PATTERNS:
            self._set_pattern_selection(
                self._state.pattern_selection.next(self._state.num_patterns)
            )
        elif mode == ViewMode.SAMPLES:
            self._state.sample_selection = self._state.sample_selection.next(
                self.current_sample_count()
            )
        else:
            self.scroll_down()

    def move_up(self) -> None:
        """Select the previous row of the active list, or scroll the details up"""
        mode = self._state.current_mode
        if mode == ViewMode.PATTERNS:
            self._set_pattern_selection(
                self._state.pattern_selection.previous(self._state.num_patterns)
            )
        elif mode == ViewMode.SAMPLES:
            self._state.sample_selection = self._state.sample_selection.previous(
                self.current_sample_count()
            )
        else:
            self.scroll_up()

    def advance_view(self) -> None:
        """Switch to the view on the right"""
        self._set_mode(self._state.current_mode.next())

    def retreat_view(self) -> None:
        """Switch to the view on the left"""
        self._set_mode(self._state.current_mode.previous())

    def jump_to_sample_list(self) -> None:
        """Switch to the samples of the selected pattern"""
        self._set_mode(ViewMode.SAMPLES)

    select_current_pattern = jump_to_sample_list

    def enter(self) -> None:
        """Activate the selected row of the active view"""
        mode = self._state.current_mode
        if mode == ViewMode.PATTERNS:
            return
        if mode == ViewMode.DETAILS:
            self.scroll_down()
            return

        if self._state.sample_selection.is_empty:
            logger.debug("No sample to show for the selected pattern")
            return
        self._state.detail_text = render_detail_text(self.current_sample_raw_log())
        self._state.scroll_offset = 0
        self._set_mode(ViewMode.DETAILS)

    def scroll_down(self) -> None:
        """Scroll the detail text down by one line"""
        self._state.scroll_offset += 1

    def scroll_up(self) -> None:
        """Scroll the detail text up by one line"""
        self._state.scroll_offset = max(0, self._state.scroll_offset - 1)

    def clamp_scroll(self, max_offset: int) -> None:
        """Keep the scroll offset within the rendered detail text"""
        self._state.scroll_offset = min(self._state.scroll_offset, max(0, max_offset))

    def current_pattern(self) -> Pattern:
        """Get the selected pattern"""
        return self._state.pattern_at(self._state.pattern_selection.index())

    def current_sample_count(self) -> int:
        """Number of samples of the selected pattern"""
        return self.current_pattern().sample_count

    def current_sample(self) -> Sample:
        """Get the selected sample of the selected pattern"""
        samples = self.current_pattern().samples
        index = self._state.sample_selection.index()
        if index >= len(samples):
            raise NoSelectionError(
                f"Sample {index} is out of range for a pattern with "
                f"{len(samples)} samples"
            )
        return samples[index]

    def current_sample_raw_log(self) -> str:
        """Get the raw text of the selected sample"""
        return self.current_sample().raw_log

    def pattern_position(self) -> tuple[int, int] | None:
        """One-based position of the selected pattern and the number of patterns"""
        selected = self._state.pattern_selection.selected
        if selected is None:
            return None
        return selected + 1, self._state.num_patterns

    def sample_position(self) -> tuple[int, int] | None:
        """One-based position of the selected sample and the number of samples"""
        selected = self._state.sample_selection.selected
        if selected is None or self._state.pattern_selection.is_empty:
            return None
        return selected + 1, self.current_sample_count()

    def _set_pattern_selection(self, selection: Selection) -> None:
        self._state.pattern_selection = selection
        self._state.sample_selection = Selection.first(
            self.current_sample_count()
        )

    def _set_mode(self, mode: ViewMode) -> None:
        if mode == ViewMode.SAMPLES and not self._state.pattern_selection.is_empty:
            self._state.sample_selection = self._state.sample_selection.clamp(
                self.current_sample_count()
            )
        self._state.current_mode = mode
