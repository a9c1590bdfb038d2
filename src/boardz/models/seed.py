# Rev 0.1.2
"""
Default board content shown when the caller supplies nothing, plus a JSON
seed loader.

Seed file shape:
    {"tasks": [{"id": "1", "title": "...", "status": "todo",
                "assignee": "...", "dueDate": "2024-02-28"}, ...],
     "activities": [{"id": "1", "user": "...", "action": "...",
                     "timestamp": "...", "avatar": "..."}, ...]}
Missing keys fall back to the defaults below.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from .entities import Activity, ProjectMetric, Task, TeamMember

log = logging.getLogger(__name__)

_AVATAR = "https://api.dicebear.com/7.x/avataaars/svg?seed={}"

DEFAULT_TASKS: Tuple[Task, ...] = (
    Task("1", "Design System Implementation", "in-progress", "Alice Cooper", "2024-02-28"),
    Task("2", "User Research", "todo", "Bob Wilson", "2024-03-05"),
    Task("3", "Frontend Development", "done", "Carol Smith", "2024-02-25"),
)

DEFAULT_ACTIVITIES: Tuple[Activity, ...] = (
    Activity("1", "Alice Cooper", 'completed task "Design Review"', "5 minutes ago", _AVATAR.format("Alice")),
    Activity("2", "Bob Wilson", 'started working on "API Integration"', "1 hour ago", _AVATAR.format("Bob")),
)

DEFAULT_METRICS: Tuple[ProjectMetric, ...] = (
    ProjectMetric("Total Projects", "12", 8),
    ProjectMetric("In Progress", "5", 2),
    ProjectMetric("Team Members", "24", 12),
    ProjectMetric("Completed Tasks", "128", 24),
)

DEFAULT_TEAM: Tuple[TeamMember, ...] = (
    TeamMember("1", "Alice Cooper", "Project Manager", _AVATAR.format("Alice"), "online"),
    TeamMember("2", "Bob Wilson", "Developer", _AVATAR.format("Bob"), "busy"),
    TeamMember("3", "Carol Smith", "Designer", _AVATAR.format("Carol"), "offline"),
)

DEFAULT_PROJECTS: Tuple[str, ...] = (
    "Website Redesign",
    "Mobile App Development",
    "Marketing Campaign",
)


@dataclass
class Seed:
    tasks: List[Task] = field(default_factory=lambda: list(DEFAULT_TASKS))
    activities: List[Activity] = field(default_factory=lambda: list(DEFAULT_ACTIVITIES))
    metrics: List[ProjectMetric] = field(default_factory=lambda: list(DEFAULT_METRICS))
    team: List[TeamMember] = field(default_factory=lambda: list(DEFAULT_TEAM))
    projects: List[str] = field(default_factory=lambda: list(DEFAULT_PROJECTS))


def load_seed_file(path: str | Path) -> Seed:
    """Read a JSON seed. Raises ValueError on a malformed file."""
    p = Path(path).expanduser()
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"seed file {p} is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"seed file {p} must hold a JSON object")

    seed = Seed()
    if "tasks" in raw:
        try:
            seed.tasks = [Task.from_dict(t) for t in raw["tasks"]]
        except (KeyError, TypeError) as e:
            raise ValueError(f"seed file {p}: bad task entry ({e})") from e
    if "activities" in raw:
        try:
            seed.activities = [Activity.from_dict(a) for a in raw["activities"]]
        except (KeyError, TypeError) as e:
            raise ValueError(f"seed file {p}: bad activity entry ({e})") from e

    log.info("Loaded seed from %s: %d tasks, %d activities", p, len(seed.tasks), len(seed.activities))
    return seed
