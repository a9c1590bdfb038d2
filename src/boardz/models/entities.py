# Rev 0.1.2
"""Value records for the board (Task, Activity) and the dashboard chrome
(ProjectMetric, TeamMember).

Records are frozen; the store swaps whole records instead of mutating them,
so a snapshot handed to the UI can never alias the canonical sequence.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict, replace, fields
from datetime import date
from typing import Any, Dict, Mapping, Tuple

from .types import Presence, TaskStatus

STATUSES: Tuple[str, ...] = ("todo", "in-progress", "done")
STATUS_NAMES: Dict[str, str] = {"todo": "To Do", "in-progress": "In Progress", "done": "Done"}

PRESENCES: Tuple[str, ...] = ("online", "offline", "busy")


def check_status(status: str) -> str:
    if status not in STATUSES:
        raise ValueError(f"invalid status {status!r}; expected one of {', '.join(STATUSES)}")
    return status


def check_due_date(value: str) -> str:
    # empty is allowed (the dialog's date input can be cleared)
    if value:
        try:
            date.fromisoformat(value)
        except (TypeError, ValueError):
            raise ValueError(f"invalid due date {value!r}; expected YYYY-MM-DD") from None
    return value


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    status: TaskStatus = "todo"
    assignee: str = ""
    due_date: str = ""

    def __post_init__(self):
        if not self.id:
            raise ValueError("task id must be a non-empty string")
        check_status(self.status)
        check_due_date(self.due_date)

    def with_changes(self, **changes: Any) -> "Task":
        if "id" in changes and changes["id"] != self.id:
            raise ValueError("task id is immutable")
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status,
            "assignee": self.assignee,
            "dueDate": self.due_date,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        due = raw.get("dueDate", raw.get("due_date")) or ""
        return cls(
            id=str(raw["id"]),
            title=str(raw.get("title") or ""),
            status=str(raw.get("status") or "todo"),
            assignee=str(raw.get("assignee") or ""),
            due_date=str(due),
        )


# Fields the edit dialog may change (id is immutable)
TASK_EDITABLE_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(Task) if f.name != "id")


@dataclass(frozen=True)
class Activity:
    id: str
    user: str
    action: str
    timestamp: str = ""
    avatar: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Activity":
        return cls(
            id=str(raw["id"]),
            user=str(raw.get("user") or ""),
            action=str(raw.get("action") or ""),
            timestamp=str(raw.get("timestamp") or ""),
            avatar=str(raw.get("avatar") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectMetric:
    title: str
    value: str
    change: int = 0      # percent, signed

    @property
    def change_label(self) -> str:
        return f"{'+' if self.change >= 0 else ''}{self.change}%"


@dataclass(frozen=True)
class TeamMember:
    id: str
    name: str
    role: str = ""
    avatar: str = ""
    presence: Presence = "offline"

    def __post_init__(self):
        if self.presence not in PRESENCES:
            raise ValueError(f"invalid presence {self.presence!r}")
