"""Samples view - the samples of the selected pattern"""

from patview.models.viewer_model import ViewerState
from patview.output_controller import Window
from patview.viewmodels.navigation import NavigationController
from patview.views.patterns import SAMPLE_COLUMNS, sample_rows
from patview.views.table import SplitView, Table, TableColumn


class SamplesView(SplitView):
    """Draws the selected pattern on top and its samples below"""

    _TOP_SHARE = 20

    def __init__(
        self, state: ViewerState, controller: NavigationController, window: Window
    ) -> None:
        super().__init__(window)
        self._state = state
        self._controller = controller
        self._pattern_table = Table(
            self._top_win,
            "Pattern",
            [TableColumn("Count", 10), TableColumn("Pattern", 90)],
        )
        self._samples_table = Table(self._bottom_win, "Samples", SAMPLE_COLUMNS)

    def draw(self) -> None:
        """Draw the selected pattern and its samples"""
        if self._state.pattern_selection.is_empty:
            self._pattern_table.draw([])
            self._samples_table.draw([])
            return

        pattern = self._controller.current_pattern()
        self._pattern_table.draw([[str(pattern.count), pattern.text]])
        self._samples_table.draw(
            sample_rows(pattern), self._state.sample_selection.selected
        )
