# Rev 0.1.3

"""Edit session for the task dialog (Rev 0.1.3)
- closed -> open-clean on select(); any edit() -> open-dirty
- save() closes first, then commits to the TaskStore
- edit/save/cancel while closed raise InvalidTransitionError
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from boardz.models.entities import TASK_EDITABLE_FIELDS, Task, check_due_date, check_status
from boardz.models.errors import InvalidTransitionError
from boardz.models.types import EditState
from boardz.repositories.task_store import TaskStore

log = logging.getLogger(__name__)

CLOSED: EditState = "closed"
OPEN_CLEAN: EditState = "open-clean"
OPEN_DIRTY: EditState = "open-dirty"

_FIELD_ALIASES = {"dueDate": "due_date"}


class EditSession:
    """Draft over one task. Invalid transitions raise; callers own the recovery."""

    def __init__(self, store: TaskStore):
        self._store = store
        self._state: EditState = CLOSED
        self._loaded: Optional[Task] = None
        self._draft: Dict[str, Any] = {}

    # ---- state
    @property
    def state(self) -> EditState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state != CLOSED

    @property
    def is_dirty(self) -> bool:
        return self._state == OPEN_DIRTY

    @property
    def loaded(self) -> Optional[Task]:
        return self._loaded

    @property
    def working_copy(self) -> Optional[Task]:
        if not self.is_open:
            return None
        return Task(**self._draft)

    def changed_fields(self) -> Dict[str, Tuple[Any, Any]]:
        if self._loaded is None:
            return {}
        return {
            name: (getattr(self._loaded, name), self._draft[name])
            for name in TASK_EDITABLE_FIELDS
            if self._draft[name] != getattr(self._loaded, name)
        }

    # ---- transitions
    def select(self, task: Task) -> None:
        if self.is_open:
            log.debug("edit session: replacing draft for %s with %s", self._loaded.id, task.id)
        self._loaded = task
        self._draft = {"id": task.id, **{name: getattr(task, name) for name in TASK_EDITABLE_FIELDS}}
        self._state = OPEN_CLEAN

    def edit(self, field: str, value: Any) -> None:
        if not self.is_open:
            raise InvalidTransitionError("edit", self._state)
        name = _FIELD_ALIASES.get(field, field)
        if name == "id":
            raise ValueError("task id is immutable")
        if name not in TASK_EDITABLE_FIELDS:
            raise ValueError(f"unknown task field {field!r}")

        value = "" if value is None else str(value)
        if name == "status":
            check_status(value)
        elif name == "due_date":
            check_due_date(value)

        self._draft[name] = value
        self._state = OPEN_DIRTY

    def cancel(self) -> None:
        if not self.is_open:
            raise InvalidTransitionError("cancel", self._state)
        log.debug("edit session: discarded draft for %s", self._loaded.id)
        self._close()

    def save(self) -> Task:
        """Close the session and commit the draft. NotFoundError propagates after closing."""
        if not self.is_open:
            raise InvalidTransitionError("save", self._state)
        task = Task(**self._draft)
        changes = self.changed_fields()
        self._close()
        self._store.update_task(task)
        log.info("Saved task %s (%s)", task.id, ", ".join(changes) or "no changes")
        return task

    def _close(self) -> None:
        self._state = CLOSED
        self._loaded = None
        self._draft = {}
