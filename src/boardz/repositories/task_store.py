# Rev 0.1.3
from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from boardz.models.entities import STATUSES, Task, check_status
from boardz.models.errors import NotFoundError

log = logging.getLogger(__name__)


class TaskStore:
    """
    Canonical ordered task sequence, held in memory for the session.

    Lanes are not stored separately: a lane is the subsequence of tasks that
    share a status, so lane order is always inherited from the canonical
    order. Records are frozen Task values; every mutation swaps records.
    """

    def __init__(self, seed: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = []
        self._initialized = False
        if seed is not None:
            self.initialize(seed)

    # -------------------------
    # Lifecycle
    # -------------------------
    def initialize(self, seed: Iterable[Task]) -> None:
        tasks = list(seed)
        dupes = [tid for tid, n in Counter(t.id for t in tasks).items() if n > 1]
        if dupes:
            raise ValueError(f"duplicate task ids in seed: {', '.join(sorted(dupes))}")
        if self._initialized:
            log.info("TaskStore re-initialized (%d -> %d tasks)", len(self._tasks), len(tasks))
        self._tasks = tasks
        self._initialized = True
        log.debug("TaskStore initialized with %d tasks", len(tasks))

    # -------------------------
    # Queries
    # -------------------------
    def snapshot(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index_of(task_id)]

    def ids(self) -> List[str]:
        return [t.id for t in self._tasks]

    def lane(self, status: str) -> List[Task]:
        check_status(status)
        return [t for t in self._tasks if t.status == status]

    def counts(self) -> Dict[str, int]:
        out = {s: 0 for s in STATUSES}
        for t in self._tasks:
            out[t.status] += 1
        return out

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    # -------------------------
    # Mutations
    # -------------------------
    def move_task(self, task_id: str, destination_status: str, destination_index: int) -> Tuple[Task, ...]:
        """
        Move a task to `destination_index` within the `destination_status` lane.

        The lane index is counted over the lane *without* the moved task:
        the task is inserted before the n-th remaining lane member, or right
        after the lane's last member when the index reaches past the end
        (end of the sequence if the lane is empty). Dropping a task on its
        own slot leaves the sequence untouched.
        """
        check_status(destination_status)
        if destination_index < 0:
            raise ValueError("destination_index must be >= 0")

        pos = self._index_of(task_id)
        moved = self._tasks[pos]
        if moved.status == destination_status:
            lane_ids = [t.id for t in self._tasks if t.status == destination_status]
            if lane_ids.index(task_id) == min(destination_index, len(lane_ids) - 1):
                return self.snapshot()

        remaining = self._tasks[:pos] + self._tasks[pos + 1:]

        lane_positions = [i for i, t in enumerate(remaining) if t.status == destination_status]
        if destination_index < len(lane_positions):
            insert_at = lane_positions[destination_index]
        elif lane_positions:
            insert_at = lane_positions[-1] + 1
        else:
            insert_at = len(remaining)

        if moved.status != destination_status:
            moved = moved.with_changes(status=destination_status)
        remaining.insert(insert_at, moved)
        self._tasks = remaining

        log.debug("move_task %s -> %s[%d] (global %d -> %d)",
                  task_id, destination_status, destination_index, pos, insert_at)
        return self.snapshot()

    def update_task(self, updated: Task) -> Tuple[Task, ...]:
        """Replace the record with the same id, keeping its position."""
        pos = self._index_of(updated.id)
        self._tasks[pos] = updated
        log.debug("update_task %s at %d", updated.id, pos)
        return self.snapshot()

    # -------------------------
    # Internals
    # -------------------------
    def _index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise NotFoundError(task_id)
