# src/boardz/ui/task_editor_dialog.py
# Rev 0.1.3: field edits stream to the view model; OK saves, Cancel discards
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import Qt, QDate, Signal
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QDialogButtonBox,
    QComboBox, QDateEdit, QCheckBox, QWidget, QHBoxLayout,
)

from boardz.models.entities import STATUS_NAMES, Task
from boardz.ui.window_mode import lock_dialog_fixed

_ISO = "yyyy-MM-dd"


class TaskEditorDialog(QDialog):
    """
    "Task Details" dialog over the edit session's working copy.

    Emits fieldEdited(field, value) for every user change; the caller decides
    what to do on accept/reject (save/cancel the session).
    Fields: title, status, assignee, due_date (empty when "No due date").
    """

    fieldEdited = Signal(str, str)

    def __init__(self, parent: QWidget | None = None, *, task: Optional[Task] = None):
        super().__init__(parent)
        self.setWindowTitle("Task Details")
        self._loading = False

        # --- fields
        self._title = QLineEdit()

        self._cmb_status = QComboBox()
        for key, label in STATUS_NAMES.items():
            self._cmb_status.addItem(label, key)

        self._assignee = QLineEdit()

        self._due = QDateEdit()
        self._due.setCalendarPopup(True)
        self._due.setDisplayFormat(_ISO)
        self._no_due = QCheckBox("No due date")

        due_row = QWidget()
        due_lay = QHBoxLayout(due_row)
        due_lay.setContentsMargins(0, 0, 0, 0)
        due_lay.addWidget(self._due, 1)
        due_lay.addWidget(self._no_due)

        form = QFormLayout()
        form.addRow("Title:", self._title)
        form.addRow("Status:", self._cmb_status)
        form.addRow("Assignee:", self._assignee)
        form.addRow("Due Date:", due_row)

        btns = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        btns.accepted.connect(self.accept)
        btns.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addStretch(1)
        root.addWidget(btns)

        lock_dialog_fixed(self)

        if task is not None:
            self.load(task)

        # --- wire after load so populating does not count as an edit
        self._title.textEdited.connect(lambda s: self._emit("title", s))
        self._assignee.textEdited.connect(lambda s: self._emit("assignee", s))
        self._cmb_status.activated.connect(lambda _ix: self._emit("status", self._cmb_status.currentData()))
        self._due.dateChanged.connect(lambda _d: self._emit("due_date", self._due_value()))
        self._no_due.toggled.connect(self._on_no_due_toggled)

        self._title.setFocus(Qt.OtherFocusReason)

    # ---- public
    def load(self, task: Task) -> None:
        self._loading = True
        try:
            self._title.setText(task.title)
            ix = self._cmb_status.findData(task.status)
            if ix >= 0:
                self._cmb_status.setCurrentIndex(ix)
            self._assignee.setText(task.assignee)
            if task.due_date:
                self._due.setDate(QDate.fromString(task.due_date, _ISO))
                self._no_due.setChecked(False)
            else:
                self._due.setDate(QDate.currentDate())
                self._no_due.setChecked(True)
            self._due.setEnabled(not self._no_due.isChecked())
        finally:
            self._loading = False

    def values(self) -> dict[str, str]:
        return {
            "title": self._title.text(),
            "status": str(self._cmb_status.currentData()),
            "assignee": self._assignee.text(),
            "due_date": self._due_value(),
        }

    # ---- internals
    def _due_value(self) -> str:
        if self._no_due.isChecked():
            return ""
        return self._due.date().toString(_ISO)

    def _on_no_due_toggled(self, on: bool) -> None:
        self._due.setEnabled(not on)
        self._emit("due_date", self._due_value())

    def _emit(self, field: str, value: str) -> None:
        if not self._loading:
            self.fieldEdited.emit(field, value)
