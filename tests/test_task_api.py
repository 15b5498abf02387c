# tests/test_task_api.py

from __future__ import annotations

from tasklist.core.state import AppState
from tasklist.tasks import task_api
from tasklist.tasks.task_models import FilterMode, SortMode
from tasklist.tasks.task_query import ValidationFailure


def test_add_task_stores_trimmed_text(state: AppState) -> None:
    result = task_api.add_task(state, "  Buy milk  ")

    assert result.ok
    assert result.task is not None
    assert result.task.text == "Buy milk"
    assert state.task_store.list_tasks() == [result.task]
    assert state.input_error is None


def test_rejected_add_leaves_store_unchanged(state: AppState) -> None:
    task_api.add_task(state, "Buy milk")
    before = state.task_store.list_tasks()

    result = task_api.add_task(state, "BUY MILK")

    assert not result.ok
    assert result.failure is ValidationFailure.DUPLICATE_TASK
    assert state.input_error is ValidationFailure.DUPLICATE_TASK
    assert state.task_store.list_tasks() == before


def test_successful_add_clears_previous_error(state: AppState) -> None:
    task_api.add_task(state, "x")
    assert state.input_error is ValidationFailure.TOO_SHORT

    task_api.add_task(state, "xy")
    assert state.input_error is None


def test_passthrough_mutators(state: AppState) -> None:
    a = task_api.add_task(state, "first task").task
    b = task_api.add_task(state, "second task").task
    assert a is not None and b is not None

    task_api.toggle_task(state, a.id)
    assert task_api.get_counts(state).completed == 1

    task_api.remove_task(state, b.id)
    assert [t.id for t in state.task_store.list_tasks()] == [a.id]

    task_api.clear_all(state)
    assert task_api.get_counts(state).total == 0


def test_complete_all_counts_then_clear_completed(state: AppState) -> None:
    for text in ("wash car", "pay rent", "feed cat"):
        task_api.add_task(state, text)

    task_api.complete_all(state)
    counts = task_api.get_counts(state)
    assert counts.completed == counts.total == 3
    assert counts.remaining == 0

    task_api.clear_completed(state)
    assert state.task_store.list_tasks() == []


def test_get_view_uses_state_selection_by_default(state: AppState) -> None:
    for text in ("bravo", "alpha", "charlie"):
        task_api.add_task(state, text)

    assert [t.text for t in task_api.get_view(state)] == ["charlie", "alpha", "bravo"]

    assert task_api.set_sort(state, "alphabetical") is SortMode.ALPHABETICAL
    assert [t.text for t in task_api.get_view(state)] == ["alpha", "bravo", "charlie"]

    # Explicit modes override the selection without changing it.
    assert [t.text for t in task_api.get_view(state, "all", "oldest")] == [
        "bravo",
        "alpha",
        "charlie",
    ]
    assert state.sort_mode is SortMode.ALPHABETICAL


def test_set_filter_falls_back_to_all(state: AppState) -> None:
    assert task_api.set_filter(state, "completed") is FilterMode.COMPLETED
    assert task_api.set_filter(state, "whatever") is FilterMode.ALL
    assert task_api.set_sort(state, "nope") is SortMode.NEWEST
