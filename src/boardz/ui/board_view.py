# src/boardz/ui/board_view.py
# Rev 0.1.4: drops only report a DragResult; lanes re-render from the view model
from __future__ import annotations
from typing import Dict, List

from PySide6.QtCore import Qt, Signal, QTimer
from PySide6.QtGui import QDrag
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QListWidget, QListWidgetItem, QAbstractItemView,
)

from boardz.models.entities import STATUSES, STATUS_NAMES, Task
from boardz.models.events import DragResult


def lane_drop_index(src_row: int, target_row: int, same_lane: bool) -> int:
    """Destination index counted without the dragged card."""
    if same_lane and src_row < target_row:
        return target_row - 1
    return target_row


class LaneList(QListWidget):
    """
    One status lane. Items are never moved by Qt itself: a finished drag
    is reported through `dropped` (or `dragCancelled` when released outside
    every lane) and the board is redrawn from the view model.
    """

    dropped = Signal(str, int, str, int)   # src status, src index, dst status, dst index
    dragCancelled = Signal(str, int)
    taskActivated = Signal(str)

    def __init__(self, status: str, parent=None):
        super().__init__(parent)
        self.status = status
        self._drag_row = -1

        self.setObjectName(f"Lane_{status}")
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setDragDropMode(QAbstractItemView.DragDrop)
        self.setDefaultDropAction(Qt.MoveAction)
        self.setDragEnabled(True)
        self.setAcceptDrops(True)
        self.setDropIndicatorShown(True)
        self.setWordWrap(True)
        self.setSpacing(4)

        self.itemDoubleClicked.connect(self._on_double_clicked)

    # ---- rendering
    def set_tasks(self, tasks: List[Task]) -> None:
        self.clear()
        for t in tasks:
            text = f"{t.title}\nAssigned to: {t.assignee or '—'}    Due: {t.due_date or '—'}"
            item = QListWidgetItem(text)
            item.setData(Qt.UserRole, t.id)
            item.setToolTip(t.title)
            self.addItem(item)

    # ---- drag source
    def startDrag(self, supported_actions):
        item = self.currentItem()
        if item is None:
            return
        row = self.row(item)
        self._drag_row = row
        drag = QDrag(self)
        drag.setMimeData(self.mimeData([item]))
        result = drag.exec(Qt.MoveAction)
        if result == Qt.IgnoreAction:
            self.dragCancelled.emit(self.status, row)
        self._drag_row = -1

    # ---- drop target
    def dragEnterEvent(self, ev):
        if isinstance(ev.source(), LaneList):
            ev.setDropAction(Qt.MoveAction)
            ev.accept()
        else:
            ev.ignore()

    def dragMoveEvent(self, ev):
        if isinstance(ev.source(), LaneList):
            ev.setDropAction(Qt.MoveAction)
            ev.accept()
        else:
            ev.ignore()

    def dropEvent(self, ev):
        src = ev.source()
        if not isinstance(src, LaneList) or src._drag_row < 0:
            ev.ignore()
            return
        src_row = src._drag_row
        index = lane_drop_index(src_row, self.drop_index(ev.position().toPoint()), src is self)
        ev.setDropAction(Qt.MoveAction)
        ev.accept()
        # defer: the source is still inside QDrag.exec()
        QTimer.singleShot(0, lambda: self.dropped.emit(src.status, src_row, self.status, index))

    def drop_index(self, pos) -> int:
        item = self.itemAt(pos)
        if item is None:
            return self.count()
        row = self.row(item)
        rect = self.visualItemRect(item)
        return row + 1 if pos.y() > rect.center().y() else row

    def _on_double_clicked(self, item: QListWidgetItem):
        tid = item.data(Qt.UserRole) if item else None
        if tid is not None:
            self.taskActivated.emit(str(tid))


class BoardView(QWidget):
    dragFinished = Signal(object)   # DragResult
    taskActivated = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._headers: Dict[str, QLabel] = {}
        self._lanes: Dict[str, LaneList] = {}

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(12)
        for status in STATUSES:
            col = QVBoxLayout()
            hdr = QLabel(STATUS_NAMES[status])
            hdr.setObjectName("LaneHeader")
            lane = LaneList(status, self)
            lane.dropped.connect(self._on_dropped)
            lane.dragCancelled.connect(self._on_cancelled)
            lane.taskActivated.connect(self.taskActivated)
            col.addWidget(hdr)
            col.addWidget(lane, 1)
            row.addLayout(col, 1)
            self._headers[status] = hdr
            self._lanes[status] = lane

    # ---- Public API
    def set_lanes(self, lanes: Dict[str, List[Task]]) -> None:
        for status in STATUSES:
            tasks = lanes.get(status, [])
            self._lanes[status].set_tasks(tasks)
            self._headers[status].setText(f"{STATUS_NAMES[status]} ({len(tasks)})")

    def lane(self, status: str) -> LaneList:
        return self._lanes[status]

    # ---- Internals
    def _on_dropped(self, src_status: str, src_index: int, dst_status: str, dst_index: int):
        self.dragFinished.emit(DragResult(src_status, src_index, dst_status, dst_index))

    def _on_cancelled(self, src_status: str, src_index: int):
        self.dragFinished.emit(DragResult(src_status, src_index))
