# Rev 0.1.1

"""Pytest fixtures for boardZ (Rev 0.1.1)"""
from __future__ import annotations
import os

# before any Qt import: widgets tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from boardz.models.entities import Activity, Task
from boardz.repositories.task_store import TaskStore


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def seed_tasks() -> list[Task]:
    return [
        Task("1", "Design System Implementation", "in-progress", "Alice Cooper", "2024-02-28"),
        Task("2", "User Research", "todo", "Bob Wilson", "2024-03-05"),
        Task("3", "Frontend Development", "done", "Carol Smith", "2024-02-25"),
        Task("4", "API Integration", "todo", "Alice Cooper", "2024-03-10"),
        Task("5", "Write Docs", "todo", "Dave Jones", "2024-03-12"),
        Task("6", "Release Notes", "in-progress", "Bob Wilson", ""),
    ]


@pytest.fixture()
def store(seed_tasks) -> TaskStore:
    return TaskStore(seed_tasks)


@pytest.fixture()
def activities() -> list[Activity]:
    return [
        Activity("1", "Alice Cooper", 'completed task "Design Review"', "5 minutes ago"),
        Activity("2", "Bob Wilson", 'started working on "API Integration"', "1 hour ago"),
        Activity("3", "Carol Smith", "commented on Alice's mockups", "2 hours ago"),
    ]
