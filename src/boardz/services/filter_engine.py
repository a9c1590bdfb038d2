# Rev 0.1.1

"""Search filter shared by the board, the activity feed and the sidebar.
Stateless; order of the input is always preserved.
"""
from __future__ import annotations
from typing import Any, Callable, Iterable, List, Sequence, TypeVar, Union

from boardz.models.entities import Activity, Task

T = TypeVar("T")
Accessor = Union[str, Callable[[Any], Any]]

TASK_SEARCH_FIELDS: tuple[str, ...] = ("title", "assignee")
ACTIVITY_SEARCH_FIELDS: tuple[str, ...] = ("user", "action")


def _read(item: Any, accessor: Accessor) -> Any:
    if callable(accessor):
        return accessor(item)
    return getattr(item, accessor, None)


def filter_items(items: Iterable[T], query: str, fields: Sequence[Accessor]) -> List[T]:
    """Keep items where any field contains `query`, ignoring case."""
    items = list(items)
    if not query:
        return items
    needle = query.lower()
    out: List[T] = []
    for item in items:
        for acc in fields:
            value = _read(item, acc)
            if value is not None and needle in str(value).lower():
                out.append(item)
                break
    return out


def filter_tasks(tasks: Iterable[Task], query: str) -> List[Task]:
    return filter_items(tasks, query, TASK_SEARCH_FIELDS)


def filter_activities(activities: Iterable[Activity], query: str) -> List[Activity]:
    return filter_items(activities, query, ACTIVITY_SEARCH_FIELDS)
