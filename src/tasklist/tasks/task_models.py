# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FilterMode(StrEnum):
    """Which tasks the view keeps."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> FilterMode:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALL


class SortMode(StrEnum):
    """How the view orders the filtered tasks."""

    NEWEST = "newest"
    OLDEST = "oldest"
    ALPHABETICAL = "alphabetical"

    @classmethod
    def parse(cls, raw: str | None) -> SortMode:
        if not raw:
            return cls.NEWEST
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.NEWEST


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    created_at: float
    completed: bool = False


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    completed: int

    @property
    def remaining(self) -> int:
        return self.total - self.completed
