# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import FilterMode, SortMode, Task

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers get the raw argument text (inner whitespace preserved).
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        argline = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, argline)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


EMPTY_VIEW_MESSAGES: dict[FilterMode, str] = {
    FilterMode.ACTIVE: "No active tasks!",
    FilterMode.COMPLETED: "No completed tasks yet.",
    FilterMode.ALL: "No tasks yet. Add one above!",
}


def _parse_id(argline: str) -> int | None:
    token = argline.strip().split(maxsplit=1)[0] if argline.strip() else ""
    token = token.lstrip("#")
    try:
        return int(token)
    except ValueError:
        return None


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    day = datetime.fromtimestamp(task.created_at).strftime("%Y-%m-%d")
    return f"[{mark}] #{task.id} {task.text}  ({day})"


def format_counts(state: AppState) -> str:
    c = task_api.get_counts(state)
    return f"{c.total} total tasks • {c.completed} completed • {c.remaining} remaining"


def render_view(
    state: AppState,
    filter_mode: FilterMode | None = None,
    sort_mode: SortMode | None = None,
) -> str:
    fm = state.filter_mode if filter_mode is None else filter_mode
    sm = state.sort_mode if sort_mode is None else sort_mode
    view = task_api.get_view(state, fm, sm)
    lines = [format_counts(state), f"filter={fm} sort={sm}"]
    if not view:
        lines.append(EMPTY_VIEW_MESSAGES[fm])
    else:
        lines.extend(format_task(t) for t in view)
    return "\n".join(lines)


def cmd_help(state: AppState, argline: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, argline: str) -> str:
    result = task_api.add_task(state, argline)
    if result.task is None:
        reason = result.failure.message if result.failure else "invalid task"
        return f"Rejected: {reason}"
    return f"Added #{result.task.id}: {result.task.text}"


def cmd_toggle(state: AppState, argline: str) -> str:
    task_id = _parse_id(argline)
    if task_id is None:
        return "Usage: /toggle <id>"
    task_api.toggle_task(state, task_id)
    task = state.task_store.get_task(task_id)
    if task is None:
        return f"No task #{task_id}."
    return format_task(task)


def cmd_remove(state: AppState, argline: str) -> str:
    task_id = _parse_id(argline)
    if task_id is None:
        return "Usage: /rm <id>"
    existed = state.task_store.get_task(task_id) is not None
    task_api.remove_task(state, task_id)
    return f"Removed #{task_id}." if existed else f"No task #{task_id}."


def cmd_list(state: AppState, argline: str) -> str:
    """
    /list                 -> current filter/sort
    /list active oldest   -> one-off view, selection unchanged
    """
    fm = state.filter_mode
    sm = state.sort_mode
    for a in argline.split():
        low = a.lower()
        if low in {m.value for m in FilterMode}:
            fm = FilterMode(low)
        elif low in {m.value for m in SortMode}:
            sm = SortMode(low)
        else:
            return f"Unknown view option: {a}. Usage: /list [all|active|completed] [newest|oldest|alphabetical]"

    return render_view(state, fm, sm)


def cmd_filter(state: AppState, argline: str) -> str:
    """
    /filter                        -> show current filter
    /filter all|active|completed   -> change it (unknown values mean all)
    """
    if not argline.strip():
        return f"Filter is {state.filter_mode}. Use /filter all | active | completed."
    mode = task_api.set_filter(state, argline)
    return f"Filter set to {mode}.\n{render_view(state)}"


def cmd_sort(state: AppState, argline: str) -> str:
    """
    /sort                              -> show current sort
    /sort newest|oldest|alphabetical   -> change it (unknown values mean newest)
    """
    if not argline.strip():
        return f"Sort is {state.sort_mode}. Use /sort newest | oldest | alphabetical."
    mode = task_api.set_sort(state, argline)
    return f"Sort set to {mode}.\n{render_view(state)}"


def cmd_complete_all(state: AppState, argline: str) -> str:
    if state.task_store.count_tasks() == 0:
        return "The list is empty."
    task_api.complete_all(state)
    return f"All tasks completed.\n{format_counts(state)}"


def cmd_clear_completed(state: AppState, argline: str) -> str:
    if state.task_store.count_tasks() == 0:
        return "The list is empty."
    task_api.clear_completed(state)
    return f"Completed tasks cleared.\n{format_counts(state)}"


def cmd_clear_all(state: AppState, argline: str) -> str:
    if state.task_store.count_tasks() == 0:
        return "The list is empty."
    task_api.clear_all(state)
    return f"All tasks cleared.\n{format_counts(state)}"


def cmd_status(state: AppState, argline: str) -> str:
    return (
        "Status:\n"
        f"  {format_counts(state)}\n"
        f"  Filter: {state.filter_mode}\n"
        f"  Sort: {state.sort_mode}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text> (plain text works too).")
registry.register("toggle", cmd_toggle, help_text="Toggle completion: /toggle <id>.", aliases=["t"])
registry.register("rm", cmd_remove, help_text="Delete a task: /rm <id>.", aliases=["remove", "del"])
registry.register(
    "list", cmd_list, help_text="Show tasks: /list [all|active|completed] [newest|oldest|alphabetical].",
    aliases=["ls"],
)
registry.register("filter", cmd_filter, help_text="Set filter: /filter all | active | completed.")
registry.register("sort", cmd_sort, help_text="Set sort: /sort newest | oldest | alphabetical.")
registry.register("done-all", cmd_complete_all, help_text="Mark every task completed.")
registry.register("clear-done", cmd_clear_completed, help_text="Delete completed tasks.")
registry.register("clear-all", cmd_clear_all, help_text="Delete all tasks.")
registry.register("status", cmd_status, help_text="Show counts and current filter/sort.")
