# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task API.

task_api depends on this Protocol instead of the concrete TaskStore,
so tests and alternative stores can be plugged in.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Reads
    def list_tasks(self) -> list[Task]: ...
    def get_task(self, task_id: int) -> Task | None: ...
    def count_tasks(self) -> int: ...

    # Creation (create_task builds, add inserts)
    def create_task(self, text: str) -> Task: ...
    def add(self, task: Task) -> None: ...

    # Mutations (all no-ops when nothing matches)
    def toggle(self, task_id: int) -> None: ...
    def remove(self, task_id: int) -> None: ...
    def complete_all(self) -> None: ...
    def clear_completed(self) -> None: ...
    def clear_all(self) -> None: ...
