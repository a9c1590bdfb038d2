# Rev 0.1.1
"""Inbound UI events.

Drag indices are positions within the lane as currently displayed (after
the header search filter), never positions in the canonical sequence.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .entities import check_status
from .types import SearchScope, TaskStatus

SEARCH_SCOPES: Tuple[str, ...] = ("header", "sidebar")


@dataclass(frozen=True)
class DragResult:
    source_status: TaskStatus
    source_index: int
    destination_status: Optional[TaskStatus] = None
    destination_index: Optional[int] = None

    def __post_init__(self):
        check_status(self.source_status)
        if self.source_index < 0:
            raise ValueError("source_index must be >= 0")
        if self.destination_status is not None:
            check_status(self.destination_status)
            if self.destination_index is None:
                raise ValueError("destination_index is required with destination_status")
            if self.destination_index < 0:
                raise ValueError("destination_index must be >= 0")

    @property
    def cancelled(self) -> bool:
        """Dropped outside any lane."""
        return self.destination_status is None


@dataclass(frozen=True)
class SearchText:
    scope: SearchScope
    query: str

    def __post_init__(self):
        if self.scope not in SEARCH_SCOPES:
            raise ValueError(f"invalid search scope {self.scope!r}")


@dataclass(frozen=True)
class TaskSelect:
    task_id: str


@dataclass(frozen=True)
class TaskFieldEdit:
    field: str
    value: Any


@dataclass(frozen=True)
class TaskSave:
    pass


@dataclass(frozen=True)
class TaskCancel:
    pass
