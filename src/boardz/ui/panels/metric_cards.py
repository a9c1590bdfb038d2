# Rev 0.1.0
from __future__ import annotations
from typing import Dict, Sequence

from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame, QProgressBar

from boardz.models.entities import STATUSES, STATUS_NAMES, ProjectMetric


class MetricCards(QWidget):
    def __init__(self, metrics: Sequence[ProjectMetric] = (), parent=None):
        super().__init__(parent)
        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(12)
        for m in metrics:
            row.addWidget(self._make_card(m), 1)

        # live board card
        self._board_card = QFrame(); self._board_card.setFrameShape(QFrame.StyledPanel)
        lay = QVBoxLayout(self._board_card)
        lay.addWidget(QLabel("Board"))
        self._counts = QLabel("")
        self._done_bar = QProgressBar(); self._done_bar.setRange(0, 100); self._done_bar.setTextVisible(True)
        lay.addWidget(self._counts)
        lay.addWidget(self._done_bar)
        row.addWidget(self._board_card, 1)

    def set_counts(self, counts: Dict[str, int]) -> None:
        self._counts.setText("  ·  ".join(f"{STATUS_NAMES[s]} {counts.get(s, 0)}" for s in STATUSES))
        total = sum(counts.values())
        self._done_bar.setValue(int(round(100 * counts.get("done", 0) / total)) if total else 0)
        self._done_bar.setFormat("%p% done")

    @staticmethod
    def _make_card(m: ProjectMetric) -> QFrame:
        card = QFrame(); card.setObjectName("MetricCard"); card.setFrameShape(QFrame.StyledPanel)
        lay = QVBoxLayout(card)
        lay.addWidget(QLabel(m.title))
        value = QLabel(f"<span style='font-size:18pt; font-weight:600'>{m.value}</span>")
        change = QLabel(m.change_label)
        change.setStyleSheet(f"color: {'#16a34a' if m.change >= 0 else '#dc2626'};")
        lay.addWidget(value)
        lay.addWidget(change)
        return card
