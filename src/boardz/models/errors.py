# Rev 0.1.0
"""Board error kinds. Both are recovered by the dashboard view model."""
from __future__ import annotations


class BoardError(Exception):
    pass


class NotFoundError(BoardError):
    """A mutation referenced a task id (or lane slot) the store does not hold."""

    def __init__(self, task_id: str | None, message: str | None = None):
        self.task_id = task_id
        super().__init__(message or f"task {task_id!r} not found")


class InvalidTransitionError(BoardError):
    """An edit-session operation arrived in a state that does not allow it."""

    def __init__(self, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"cannot {operation} while edit session is {state}")
