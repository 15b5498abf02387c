# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the in-memory TaskStore (optionally seeded with sample tasks),
- wires it into AppState with the configured default filter/sort.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import FilterMode, SortMode, Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def sample_tasks() -> list[Task]:
    """The two demo tasks a fresh session starts with."""
    return [
        Task(
            id=1,
            text="Sample completed task",
            completed=True,
            created_at=datetime(2024, 12, 1, tzinfo=UTC).timestamp(),
        ),
        Task(
            id=2,
            text="Sample pending task",
            completed=False,
            created_at=datetime(2024, 12, 2, tzinfo=UTC).timestamp(),
        ),
    ]


def create_initial_state(
    *,
    settings=None,
    clock: Callable[[], float] = time.time,
) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    seed = sample_tasks() if getattr(settings, "seed_samples", False) else []
    store = TaskStore(seed, clock=clock)

    state = AppState(
        settings=settings,
        task_store=store,
        filter_mode=FilterMode.parse(getattr(settings, "default_filter", None)),
        sort_mode=SortMode.parse(getattr(settings, "default_sort", None)),
    )
    logger.info(
        "State ready tasks=%s filter=%s sort=%s",
        store.count_tasks(),
        state.filter_mode,
        state.sort_mode,
    )
    return state
