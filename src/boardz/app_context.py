# boardZ application context
# Rev 0.1.1

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models.seed import Seed, load_seed_file
from .repositories.task_store import TaskStore
from .services.board_controller import BoardController
from .services.edit_session import EditSession
from .utils.logging_setup import get_logger
from .viewmodels.dashboard_viewmodel import DashboardViewModel


@dataclass
class AppContext:
    """Central container for the board state of one window."""
    seed: Seed
    store: TaskStore
    controller: BoardController
    session: EditSession
    dashboard: DashboardViewModel

    @classmethod
    def create(cls, seed_file: Optional[str | Path] = None, *, seed: Optional[Seed] = None) -> "AppContext":
        """Build store, controller, edit session and view model from seed data."""
        log = get_logger("AppContext")
        if seed is None:
            seed = load_seed_file(seed_file) if seed_file else Seed()
        store = TaskStore(seed.tasks)
        controller = BoardController(store)
        session = EditSession(store)
        dashboard = DashboardViewModel(
            store,
            seed.activities,
            metrics=seed.metrics,
            team=seed.team,
            projects=seed.projects,
            controller=controller,
            session=session,
        )
        log.info("AppContext initialized with %d tasks (seed=%s)", len(store), seed_file or "defaults")
        return cls(seed=seed, store=store, controller=controller, session=session, dashboard=dashboard)
