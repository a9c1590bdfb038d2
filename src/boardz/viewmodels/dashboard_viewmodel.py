# Rev 0.1.5: recompute + emit after every handled event
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from boardz.models.entities import Activity, ProjectMetric, Task, TeamMember
from boardz.models.errors import InvalidTransitionError, NotFoundError
from boardz.models.events import (
    DragResult, SearchText, TaskCancel, TaskFieldEdit, TaskSave, TaskSelect,
)
from boardz.models.types import EditState
from boardz.repositories.task_store import TaskStore
from boardz.services.board_controller import BoardController
from boardz.services.edit_session import EditSession
from boardz.services.filter_engine import filter_activities

log = logging.getLogger(__name__)


class DashboardViewModel(QObject):
    """
    Owns the board state for the window and turns UI events into store
    mutations. Derived views are recomputed and re-emitted after each event.

    Emits:
      lanesChanged({"todo": [Task], "in-progress": [Task], "done": [Task]})
      activitiesChanged([Activity])
      editSessionChanged(state, Task | None)
      searchChanged(scope, query)

    Stale ids and closed-session edits are logged and skipped; nothing is
    raised to the widgets.
    """

    lanesChanged = Signal(object)        # dict[str, list[Task]]
    activitiesChanged = Signal(object)   # list[Activity]
    editSessionChanged = Signal(str, object)
    searchChanged = Signal(str, str)

    def __init__(
        self,
        store: TaskStore,
        activities: Iterable[Activity] = (),
        *,
        metrics: Sequence[ProjectMetric] = (),
        team: Sequence[TeamMember] = (),
        projects: Sequence[str] = (),
        controller: Optional[BoardController] = None,
        session: Optional[EditSession] = None,
    ):
        super().__init__()
        self._store = store
        self._activities: Tuple[Activity, ...] = tuple(activities)
        self._controller = controller or BoardController(store)
        self._session = session or EditSession(store)
        self._header_query = ""
        self._sidebar_query = ""

        self.metrics: Tuple[ProjectMetric, ...] = tuple(metrics)
        self.team_members: Tuple[TeamMember, ...] = tuple(team)
        self.projects: Tuple[str, ...] = tuple(projects)

    # ---- queries
    @property
    def header_query(self) -> str:
        return self._header_query

    @property
    def sidebar_query(self) -> str:
        return self._sidebar_query

    @property
    def edit_state(self) -> EditState:
        return self._session.state

    @property
    def working_copy(self) -> Optional[Task]:
        return self._session.working_copy

    def snapshot(self) -> Tuple[Task, ...]:
        return self._store.snapshot()

    def filtered_tasks(self) -> List[Task]:
        return self._controller.visible_tasks()

    def lanes(self) -> Dict[str, List[Task]]:
        return self._controller.lanes()

    def filtered_activities(self) -> List[Activity]:
        return filter_activities(self._activities, self._header_query)

    def counts(self) -> Dict[str, int]:
        return self._store.counts()

    def reload(self) -> None:
        self.lanesChanged.emit(self.lanes())
        self.activitiesChanged.emit(self.filtered_activities())
        self.editSessionChanged.emit(self._session.state, self._session.working_copy)

    # ---- search
    def set_search(self, scope: str, query: str) -> None:
        event = SearchText(scope, query or "")
        if event.scope == "header":
            self._header_query = event.query
            self._controller.set_query(event.query)
            self.lanesChanged.emit(self.lanes())
            self.activitiesChanged.emit(self.filtered_activities())
        else:
            # captured only; sidebar lists narrow themselves
            self._sidebar_query = event.query
        self.searchChanged.emit(event.scope, event.query)

    # ---- board
    def on_drag_end(self, result: DragResult) -> bool:
        try:
            moved = self._controller.apply_drag(result)
        except NotFoundError as e:
            log.warning("Drag skipped: %s", e)
            moved = False
        self.lanesChanged.emit(self.lanes())
        return moved

    # ---- edit dialog
    def select_task(self, task_id: str) -> bool:
        try:
            task = self._store.get(task_id)
        except NotFoundError as e:
            log.warning("Select skipped: %s", e)
            return False
        self._session.select(task)
        self._emit_session()
        return True

    def edit_field(self, field: str, value: Any) -> bool:
        try:
            self._session.edit(field, value)
        except InvalidTransitionError as e:
            log.warning("Edit ignored: %s", e)
            return False
        except ValueError as e:
            log.warning("Edit rejected: %s", e)
            return False
        finally:
            self._emit_session()
        return True

    def save(self) -> bool:
        try:
            self._session.save()
        except InvalidTransitionError as e:
            log.warning("Save ignored: %s", e)
            return False
        except NotFoundError as e:
            log.warning("Save dropped, task vanished: %s", e)
            self._emit_session()
            return False
        self.lanesChanged.emit(self.lanes())
        self._emit_session()
        return True

    def cancel(self) -> bool:
        try:
            self._session.cancel()
        except InvalidTransitionError as e:
            log.warning("Cancel ignored: %s", e)
            return False
        self._emit_session()
        return True

    # ---- event routing
    def dispatch(self, event: object) -> bool:
        if isinstance(event, DragResult):
            return self.on_drag_end(event)
        if isinstance(event, SearchText):
            self.set_search(event.scope, event.query)
            return True
        if isinstance(event, TaskSelect):
            return self.select_task(event.task_id)
        if isinstance(event, TaskFieldEdit):
            return self.edit_field(event.field, event.value)
        if isinstance(event, TaskSave):
            return self.save()
        if isinstance(event, TaskCancel):
            return self.cancel()
        raise TypeError(f"unsupported event {type(event).__name__}")

    # ---- internals
    def _emit_session(self) -> None:
        self.editSessionChanged.emit(self._session.state, self._session.working_copy)
