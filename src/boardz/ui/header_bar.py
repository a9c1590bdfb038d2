# Rev 0.1.0
from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QLineEdit


class HeaderBar(QWidget):
    searchChanged = Signal(str)

    def __init__(self, parent=None, *, title: str = "boardZ"):
        super().__init__(parent)
        self._title = QLabel(f"<b>{title}</b>")
        self._search = QLineEdit()
        self._search.setObjectName("HeaderSearch")
        self._search.setPlaceholderText("Search tasks and activity...")
        self._search.setClearButtonEnabled(True)
        self._search.textChanged.connect(self.searchChanged)

        row = QHBoxLayout(self)
        row.setContentsMargins(12, 8, 12, 8)
        row.addWidget(self._title)
        row.addSpacing(24)
        row.addWidget(self._search, 1)

    def set_query(self, text: str) -> None:
        self._search.setText(text)
