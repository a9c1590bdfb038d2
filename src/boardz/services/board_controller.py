# Rev 0.1.4
"""Board controller: drag results in, per-lane task lists out.

Indices carried by a DragResult refer to the lanes as displayed, i.e. after
the header search filter. The controller maps the displayed source slot to a
task id and the displayed destination slot to an index in the full lane, then
hands the move to the TaskStore.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from boardz.models.entities import STATUSES, Task
from boardz.models.errors import NotFoundError
from boardz.models.events import DragResult
from boardz.repositories.task_store import TaskStore
from boardz.services.filter_engine import filter_tasks

log = logging.getLogger(__name__)


class BoardController:
    def __init__(self, store: TaskStore, query: str = ""):
        self._store = store
        self._query = query

    # ---- filters
    @property
    def query(self) -> str:
        return self._query

    def set_query(self, query: str) -> None:
        self._query = query or ""

    # ---- views
    def visible_tasks(self) -> List[Task]:
        return filter_tasks(self._store.snapshot(), self._query)

    def lanes(self) -> Dict[str, List[Task]]:
        return self.group(self.visible_tasks())

    @staticmethod
    def group(tasks: Sequence[Task]) -> Dict[str, List[Task]]:
        out: Dict[str, List[Task]] = {s: [] for s in STATUSES}
        for t in tasks:
            out[t.status].append(t)
        return out

    # ---- commands
    def apply_drag(self, result: DragResult) -> bool:
        """Apply a finished drag. Returns True when the store was mutated.

        Raises NotFoundError when the source slot no longer holds a task.
        """
        if result.cancelled:
            log.debug("drag from %s[%d] dropped outside any lane", result.source_status, result.source_index)
            return False

        if (result.source_status == result.destination_status
                and result.source_index == result.destination_index):
            return False

        visible = self.visible_tasks()
        src_lane = [t for t in visible if t.status == result.source_status]
        if result.source_index >= len(src_lane):
            raise NotFoundError(
                None, f"no task at {result.source_status}[{result.source_index}] (lane shows {len(src_lane)})"
            )
        task = src_lane[result.source_index]

        full_index = self._full_lane_index(task.id, result.destination_status, result.destination_index, visible)
        self._store.move_task(task.id, result.destination_status, full_index)
        log.info("Moved task %s: %s[%d] -> %s[%d]", task.id, result.source_status, result.source_index,
                 result.destination_status, result.destination_index)
        return True

    # ---- internals
    def _full_lane_index(self, task_id: str, status: str, index: int, visible: Sequence[Task]) -> int:
        if not self._query:
            return index
        full_lane = [t.id for t in self._store.lane(status) if t.id != task_id]
        shown = [t.id for t in visible if t.status == status and t.id != task_id]
        if index < len(shown):
            return full_lane.index(shown[index])
        if shown:
            return full_lane.index(shown[-1]) + 1
        return len(full_lane)
