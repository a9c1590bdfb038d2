# Rev 0.1.1
from __future__ import annotations
from typing import Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QLineEdit, QListWidget, QListWidgetItem

from boardz.models.entities import TeamMember
from boardz.services.filter_engine import filter_items

_PRESENCE_MARK = {"online": "●", "busy": "◐", "offline": "○"}


class SidebarPanel(QWidget):
    """
    Projects + team lists with their own search box. The query is forwarded
    via searchChanged and narrows only these two lists.
    """

    searchChanged = Signal(str)

    def __init__(self, projects: Sequence[str] = (), team: Sequence[TeamMember] = (), parent=None):
        super().__init__(parent)
        self._projects = list(projects)
        self._team = list(team)

        self._search = QLineEdit()
        self._search.setPlaceholderText("Search projects or people...")
        self._search.setClearButtonEnabled(True)
        self._search.textChanged.connect(self._on_search)

        self._lst_projects = QListWidget()
        self._lst_team = QListWidget()
        self._lst_team.setSelectionMode(QListWidget.NoSelection)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._search)
        root.addWidget(QLabel("Projects"))
        root.addWidget(self._lst_projects, 1)
        root.addWidget(QLabel("Team"))
        root.addWidget(self._lst_team, 1)

        self._render("")

    # ---- Public API
    def visible_projects(self) -> list[str]:
        return [self._lst_projects.item(i).text() for i in range(self._lst_projects.count())]

    def visible_members(self) -> list[str]:
        return [self._lst_team.item(i).data(Qt.UserRole) for i in range(self._lst_team.count())]

    # ---- Internals
    def _on_search(self, text: str) -> None:
        self._render(text)
        self.searchChanged.emit(text)

    def _render(self, query: str) -> None:
        self._lst_projects.clear()
        for name in filter_items(self._projects, query, (str,)):
            self._lst_projects.addItem(name)

        self._lst_team.clear()
        for m in filter_items(self._team, query, ("name", "role")):
            item = QListWidgetItem(f"{_PRESENCE_MARK.get(m.presence, '')} {m.name} — {m.role}")
            item.setData(Qt.UserRole, m.id)
            item.setToolTip(m.presence)
            self._lst_team.addItem(item)
