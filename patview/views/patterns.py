"""Patterns view - the pattern list with a preview of its samples"""

from patview.models.pattern import Pattern
from patview.models.viewer_model import ViewerState
from patview.output_controller import Window
from patview.viewmodels.navigation import NavigationController
from patview.views.table import SplitView, Table, TableColumn

PATTERN_COLUMNS = [
    TableColumn("Count", 10),
    TableColumn("Percent", 12),
    TableColumn("Pattern", 78),
]

SAMPLE_COLUMNS = [
    TableColumn("Date", 32),
    TableColumn("Log", 68),
]


def sample_rows(pattern: Pattern) -> list[list[str]]:
    """Rows of a samples table for a pattern"""
    return [[sample.display_date, sample.raw_log] for sample in pattern.samples]


class PatternsView(SplitView):
    """Draws all patterns on top and the selected pattern's samples below"""

    _TOP_SHARE = 40

    def __init__(
        self, state: ViewerState, controller: NavigationController, window: Window
    ) -> None:
        super().__init__(window)
        self._state = state
        self._controller = controller
        self._patterns_table = Table(self._top_win, "Patterns", PATTERN_COLUMNS)
        self._samples_table = Table(self._bottom_win, "Samples", SAMPLE_COLUMNS)

    def draw(self) -> None:
        """Draw the patterns table and the samples preview"""
        rows = [
            [str(pattern.count), f"{pattern.percent or 0.0:.2f}%", pattern.text]
            for pattern in self._state.patterns
        ]
        self._patterns_table.draw(rows, self._state.pattern_selection.selected)

        preview: list[list[str]] = []
        if not self._state.pattern_selection.is_empty:
            preview = sample_rows(self._controller.current_pattern())
        self._samples_table.draw(preview)
