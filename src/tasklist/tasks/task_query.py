# src/tasklist/tasks/task_query.py

"""
Pure functions over task collections.

- validate(): decides whether candidate text may become a Task
- derive_view(): filter + sort projection shown to the user
- count_tasks(): running totals

Nothing here mutates its inputs or keeps state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from pyuca import Collator

from .task_models import FilterMode, SortMode, Task, TaskCounts

MIN_TEXT_LENGTH = 2
MAX_TEXT_LENGTH = 100

# Loads the DUCET table once per process.
_COLLATOR = Collator()


class ValidationFailure(StrEnum):
    EMPTY_TASK = "EmptyTask"
    TOO_SHORT = "TooShort"
    TOO_LONG = "TooLong"
    DUPLICATE_TASK = "DuplicateTask"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[ValidationFailure, str] = {
    ValidationFailure.EMPTY_TASK: "Task cannot be empty",
    ValidationFailure.TOO_SHORT: f"Task must be at least {MIN_TEXT_LENGTH} characters long",
    ValidationFailure.TOO_LONG: f"Task must be less than {MAX_TEXT_LENGTH} characters",
    ValidationFailure.DUPLICATE_TASK: "Task already exists",
}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Either `text` (trimmed, ready for creation) or `failure` is set."""

    text: str | None = None
    failure: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def validate(candidate_text: str, existing_tasks: Iterable[Task]) -> ValidationResult:
    """
    Check candidate text against the rules below, in order; first failure wins:
    empty, too short, too long, duplicate (case-insensitive).

    Only case is folded for the duplicate check. Inner whitespace and
    punctuation stay significant.
    """
    text = (candidate_text or "").strip()

    if not text:
        return ValidationResult(failure=ValidationFailure.EMPTY_TASK)
    # Lengths are in code points: one emoji is one character.
    if len(text) < MIN_TEXT_LENGTH:
        return ValidationResult(failure=ValidationFailure.TOO_SHORT)
    if len(text) > MAX_TEXT_LENGTH:
        return ValidationResult(failure=ValidationFailure.TOO_LONG)

    folded = text.casefold()
    if any(t.text.casefold() == folded for t in existing_tasks):
        return ValidationResult(failure=ValidationFailure.DUPLICATE_TASK)

    return ValidationResult(text=text)


def filter_tasks(tasks: Iterable[Task], filter_mode: FilterMode | str | None) -> list[Task]:
    mode = FilterMode.parse(filter_mode)
    if mode is FilterMode.ACTIVE:
        return [t for t in tasks if not t.completed]
    if mode is FilterMode.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def collation_key(text: str) -> tuple[int, ...]:
    """
    Locale ordering key (Unicode Collation Algorithm, root collation).

    Punctuation and symbols sort before digits, digits before letters.
    Accents and case only break ties; lowercase comes before uppercase.
    """
    return _COLLATOR.sort_key(text)


def sort_tasks(tasks: Iterable[Task], sort_mode: SortMode | str | None) -> list[Task]:
    """Return a new sorted list. Ties on created_at are broken by id."""
    mode = SortMode.parse(sort_mode)
    if mode is SortMode.OLDEST:
        return sorted(tasks, key=lambda t: (t.created_at, t.id))
    if mode is SortMode.ALPHABETICAL:
        return sorted(tasks, key=lambda t: collation_key(t.text))
    return sorted(tasks, key=lambda t: (t.created_at, t.id), reverse=True)


def derive_view(
    tasks: Sequence[Task],
    filter_mode: FilterMode | str | None,
    sort_mode: SortMode | str | None,
) -> list[Task]:
    return sort_tasks(filter_tasks(tasks, filter_mode), sort_mode)


def count_tasks(tasks: Iterable[Task]) -> TaskCounts:
    total = 0
    completed = 0
    for t in tasks:
        total += 1
        if t.completed:
            completed += 1
    return TaskCounts(total=total, completed=completed)
