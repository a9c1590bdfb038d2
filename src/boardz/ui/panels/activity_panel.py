# Rev 0.1.1: Recent Activity feed, cards rebuilt on every emit
from __future__ import annotations
from html import escape
from typing import List

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QFrame, QSizePolicy

from boardz.models.entities import Activity


class ActivityPanel(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)

        self._title = QLabel("Recent Activity")
        self._title.setObjectName("ActivityPanelTitle")
        self._title.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Fixed)

        self._list_layout = QVBoxLayout()
        self._list_layout.setContentsMargins(12, 8, 12, 12)
        self._list_layout.setSpacing(8)

        body = QWidget()
        body.setObjectName("ActivityPanelBody")
        body.setLayout(self._list_layout)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setWidget(body)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self._title)
        root.addWidget(self._scroll, 1)

        self.set_activities([])

    # ---- Public API
    def set_activities(self, activities: List[Activity]) -> None:
        self._clear()
        if not activities:
            self._list_layout.addWidget(self._empty_state())
        for a in activities:
            self._list_layout.addWidget(self._make_card(a))
        self._list_layout.addStretch(1)

    def card_count(self) -> int:
        return sum(1 for i in range(self._list_layout.count())
                   if (w := self._list_layout.itemAt(i).widget()) and w.objectName() == "ActivityCard")

    # ---- Internals
    def _clear(self) -> None:
        while (item := self._list_layout.takeAt(0)):
            w = item.widget()
            if w: w.deleteLater()

    def _empty_state(self) -> QWidget:
        lbl = QLabel("No matching activity.")
        lbl.setAlignment(Qt.AlignCenter)
        lbl.setObjectName("ActivityEmpty")
        return lbl

    def _make_card(self, a: Activity) -> QWidget:
        card = QFrame()
        card.setObjectName("ActivityCard")
        card.setFrameShape(QFrame.StyledPanel)

        row = QHBoxLayout(card)
        row.setContentsMargins(8, 6, 8, 6)
        row.setSpacing(8)

        # initials stand in for the avatar image
        initials = "".join(part[:1] for part in a.user.split()[:2]).upper() or "?"
        badge = QLabel(initials); badge.setObjectName("ActivityAvatar"); badge.setToolTip(a.avatar)
        badge.setFixedSize(32, 32); badge.setAlignment(Qt.AlignCenter)
        badge.setStyleSheet("QLabel#ActivityAvatar { border-radius: 16px; border: 1px solid palette(mid); }")
        row.addWidget(badge, 0, Qt.AlignTop)

        text = QVBoxLayout()
        text.setSpacing(2)
        line = QLabel(f"<b>{escape(a.user)}</b> {escape(a.action)}"); line.setWordWrap(True)
        ts = QLabel(a.timestamp); ts.setObjectName("ActivityTimestamp"); ts.setProperty("dim", True)
        text.addWidget(line); text.addWidget(ts)
        row.addLayout(text, 1)
        return card
