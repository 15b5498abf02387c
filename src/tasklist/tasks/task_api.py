# src/tasklist/tasks/task_api.py

"""
Task operations exposed to the presentation layer.

Everything goes through AppState so connectors never touch the store directly:
- add_task() validates first and only then inserts
- the other mutators are direct pass-throughs to the store
- get_view()/get_counts() recompute from current store contents on every call
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.state import AppState
from .task_models import FilterMode, SortMode, Task, TaskCounts
from .task_query import ValidationFailure, count_tasks, derive_view, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddResult:
    task: Task | None = None
    failure: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def add_task(state: AppState, text: str) -> AddResult:
    """Validate `text` and store it as a new task. The store is untouched on rejection."""
    result = validate(text, state.task_store.list_tasks())

    if result.failure is not None or result.text is None:
        state.input_error = result.failure
        logger.info("Task rejected reason=%s text=%r", result.failure, text)
        return AddResult(failure=result.failure)

    task = state.task_store.create_task(result.text)
    state.task_store.add(task)
    state.input_error = None
    logger.info("Task created id=%s", task.id)
    return AddResult(task=task)


def toggle_task(state: AppState, task_id: int) -> None:
    state.task_store.toggle(task_id)


def remove_task(state: AppState, task_id: int) -> None:
    state.task_store.remove(task_id)


def complete_all(state: AppState) -> None:
    state.task_store.complete_all()


def clear_completed(state: AppState) -> None:
    state.task_store.clear_completed()


def clear_all(state: AppState) -> None:
    state.task_store.clear_all()


def set_filter(state: AppState, raw: str | None) -> FilterMode:
    state.filter_mode = FilterMode.parse(raw)
    return state.filter_mode


def set_sort(state: AppState, raw: str | None) -> SortMode:
    state.sort_mode = SortMode.parse(raw)
    return state.sort_mode


def get_view(
    state: AppState,
    filter_mode: FilterMode | str | None = None,
    sort_mode: SortMode | str | None = None,
) -> list[Task]:
    """
    Filtered and sorted projection of the store.
    Omitted modes fall back to the state's current selection.
    """
    fm = state.filter_mode if filter_mode is None else filter_mode
    sm = state.sort_mode if sort_mode is None else sort_mode
    return derive_view(state.task_store.list_tasks(), fm, sm)


def get_counts(state: AppState) -> TaskCounts:
    return count_tasks(state.task_store.list_tasks())
