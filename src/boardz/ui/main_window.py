# Rev 0.1.3
# boardZ: Main Window
# Header | Sidebar | Metrics / Board + Recent Activity

from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter, QDialog

from boardz.ui.board_view import BoardView
from boardz.ui.header_bar import HeaderBar
from boardz.ui.panels.activity_panel import ActivityPanel
from boardz.ui.panels.metric_cards import MetricCards
from boardz.ui.panels.sidebar_panel import SidebarPanel
from boardz.ui.task_editor_dialog import TaskEditorDialog
from boardz.ui.window_mode import apply_window_settings, collect_window_settings
from boardz.utils.config import save_settings
from boardz.viewmodels.dashboard_viewmodel import DashboardViewModel

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        dashboard: DashboardViewModel,
        *,
        settings: Optional[Dict[str, Any]] = None,
        logfile=None,
        persist_settings: bool = True,
        parent=None,
    ):
        super().__init__(parent)
        self._vm = dashboard
        self._settings = settings or {}
        self._persist = persist_settings
        self._logfile = logfile

        self.setWindowTitle("boardZ — Dashboard")

        # ---- widgets ----
        self._header = HeaderBar(self)
        self._sidebar = SidebarPanel(dashboard.projects, dashboard.team_members, self)
        self._metrics = MetricCards(dashboard.metrics, self)
        self._board = BoardView(self)
        self._activity = ActivityPanel(self)

        content_split = QSplitter(Qt.Horizontal)
        content_split.addWidget(self._board)
        content_split.addWidget(self._activity)
        content_split.setStretchFactor(0, 2)
        content_split.setStretchFactor(1, 1)

        main = QWidget()
        mv = QVBoxLayout(main)
        mv.addWidget(self._metrics)
        mv.addWidget(content_split, 1)

        body = QSplitter(Qt.Horizontal)
        body.addWidget(self._sidebar)
        body.addWidget(main)
        body.setStretchFactor(0, 0)
        body.setStretchFactor(1, 1)
        body.setSizes([240, 1000])

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.addWidget(self._header)
        v.addWidget(body, 1)
        self.setCentralWidget(central)

        if self._settings:
            apply_window_settings(self, self._settings)

        # ---- wiring: widgets -> view model ----
        self._header.searchChanged.connect(lambda q: self._vm.set_search("header", q))
        self._sidebar.searchChanged.connect(lambda q: self._vm.set_search("sidebar", q))
        self._board.dragFinished.connect(self._vm.on_drag_end)
        self._board.taskActivated.connect(self.open_task)

        # ---- wiring: view model -> widgets ----
        self._vm.lanesChanged.connect(self._on_lanes_changed)
        self._vm.activitiesChanged.connect(self._activity.set_activities)

        self._vm.reload()

    # ---------- Public API ----------
    def open_task(self, task_id: str) -> None:
        if not self._vm.select_task(task_id):
            return
        dlg = TaskEditorDialog(self, task=self._vm.working_copy)
        dlg.fieldEdited.connect(self._vm.edit_field)
        if dlg.exec() == int(QDialog.DialogCode.Accepted):
            self._vm.save()
        else:
            self._vm.cancel()

    # ---------- Internals ----------
    def _on_lanes_changed(self, lanes: dict) -> None:
        self._board.set_lanes(lanes)
        self._metrics.set_counts(self._vm.counts())

    def closeEvent(self, ev):
        if self._persist:
            try:
                save_settings(collect_window_settings(self, self._settings))
            except OSError as e:
                log.warning("Could not save window settings: %s", e)
        super().closeEvent(ev)
