# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import FilterMode, SortMode
from ..tasks.task_query import ValidationFailure
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (tasklist.config.Settings or a test namespace).
    settings: object

    task_store: TaskRepo

    # Current view selection.
    filter_mode: FilterMode = FilterMode.ALL
    sort_mode: SortMode = SortMode.NEWEST

    # Last rejected input, cleared on the next successful add.
    input_error: ValidationFailure | None = None
