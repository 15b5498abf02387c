# src/tasklist/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import replace

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Holds the canonical collection in insertion order. Display order is never
    taken from here; see task_query.derive_view.

    Semantics:
    - add() trusts its input (validation happens before it is called)
    - toggle()/remove() on a missing id are no-ops
    - bulk operations on an empty store are no-ops
    """

    def __init__(
        self,
        initial: Iterable[Task] | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._tasks: list[Task] = list(initial or [])
        self._clock = clock

        start = max((t.id for t in self._tasks), default=0) + 1
        self._ids = itertools.count(start)
        logger.debug("TaskStore ready total=%s next_id=%s", len(self._tasks), start)

    # ---- helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- reads ----

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in storage (insertion) order."""
        return list(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def count_tasks(self) -> int:
        return len(self._tasks)

    # ---- creation ----

    def create_task(self, text: str) -> Task:
        """Build a fresh task with the next id. Does not insert it."""
        return Task(id=next(self._ids), text=text, created_at=float(self._clock()))

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added id=%s text=%r", task.id, task.text)

    # ---- mutations ----

    def toggle(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle: no task id=%s", task_id)
            return
        t = self._tasks[idx]
        self._tasks[idx] = replace(t, completed=not t.completed)
        logger.debug("Task toggled id=%s completed=%s", task_id, not t.completed)

    def remove(self, task_id: int) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("remove: no task id=%s", task_id)
            return
        del self._tasks[idx]
        logger.debug("Task removed id=%s", task_id)

    def complete_all(self) -> None:
        self._tasks = [t if t.completed else replace(t, completed=True) for t in self._tasks]
        logger.debug("All tasks completed total=%s", len(self._tasks))

    def clear_completed(self) -> None:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        logger.debug("Cleared completed tasks removed=%s", before - len(self._tasks))

    def clear_all(self) -> None:
        removed = len(self._tasks)
        self._tasks = []
        logger.debug("Cleared all tasks removed=%s", removed)
