# src/focus_matrix/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
import shlex
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..llm.prompt import build_summary_request
from ..matrix.categorizer import is_high
from ..matrix.schemes import SCHEMES, get_scheme
from ..tasks.task_models import AXIS_MIDPOINT, parse_axis
from .views import render_matrix, render_summary_slot, render_task_detail, render_task_list

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like '/command args'. Arguments are shell-split, so
        names with spaces can be quoted.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_positions(args: list[str], count: int) -> list[int]:
    """1-based positions from the user -> 0-based offsets. Raises ValueError."""
    out: list[int] = []
    for a in args:
        try:
            n = int(a)
        except ValueError:
            raise ValueError(f"Not a task number: {a!r}") from None
        if not 1 <= n <= count:
            raise ValueError(f"No task #{n}")
        out.append(n - 1)
    return out


def split_add_args(args: list[str]) -> tuple[str, float, float]:
    """
    /add <name...> [a b]

    When the last two arguments are valid scores (numbers in 1-10) they are
    the scores; otherwise the whole argument list is the name and both scores
    default to the midpoint.
    """
    if len(args) >= 3:
        try:
            a = parse_axis(args[-2])
            b = parse_axis(args[-1])
        except ValueError:
            pass
        else:
            return " ".join(args[:-2]), a, b
    return " ".join(args), AXIS_MIDPOINT, AXIS_MIDPOINT


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    client = state.summary_client
    configured = bool(getattr(client, "is_configured", True))
    model = str(getattr(client, "model", "?"))
    slot = state.desk.slot
    if slot.is_loading:
        summary = "loading"
    elif slot.is_error:
        summary = "error"
    elif slot.text is not None:
        summary = "ready"
    else:
        summary = "none"
    return (
        "Status:\n"
        f"  Scheme: {state.scheme.name} ({state.scheme.axis_a_label} x {state.scheme.axis_b_label})\n"
        f"  Tasks: {len(state.task_store)}\n"
        f"  Model: {model}\n"
        f"  API key: {'configured' if configured else 'missing'}\n"
        f"  Summary: {summary}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state.task_store.list_tasks(), state.scheme)


def cmd_add(state: AppState, args: list[str]) -> str:
    usage = (
        f"Usage: /add <name> [{state.scheme.axis_a_label.lower()} {state.scheme.axis_b_label.lower()}]"
        " (scores 1-10, default 5)"
    )
    try:
        name, a, b = split_add_args(args)
        task = state.task_store.add(name, a, b)
    except ValueError as e:
        return f"{e}. {usage}"

    q = state.scheme.quadrant_for(is_high(task.axis_a), is_high(task.axis_b))
    return f"Plotted '{task.name}' in {q.label}."


def cmd_del(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /del <n> [n ...] (positions from /list)"
    try:
        offsets = _parse_positions(args, len(state.task_store))
    except ValueError as e:
        return f"{e}. Use /list to see task numbers."

    removed = state.task_store.delete_at(offsets)
    names = ", ".join(f"'{t.name}'" for t in removed)
    return f"Deleted {len(removed)} task(s): {names}"


def cmd_show(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /show <n>"
    try:
        (offset,) = _parse_positions(args, len(state.task_store))
    except ValueError as e:
        return f"{e}. Use /list to see task numbers."

    task = state.task_store.at(offset)
    if task is None:
        return "Task not found."
    return render_task_detail(task, state.scheme)


def cmd_matrix(state: AppState, args: list[str]) -> str:
    return render_matrix(state.buckets(), state.scheme)


def cmd_scheme(state: AppState, args: list[str]) -> str:
    if not args:
        known = ", ".join(SCHEMES)
        return f"Current scheme: {state.scheme.name}. Available: {known}."
    try:
        state.scheme = get_scheme(args[0])
    except KeyError as e:
        return str(e.args[0])
    return f"Scheme set to {state.scheme.name} ({state.scheme.axis_a_label} x {state.scheme.axis_b_label})."


def cmd_summary(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /summary       -> request a new AI summary (supersedes a running one)
    /summary last  -> show the current summary slot
    """
    if args and args[0].lower() in ("last", "show"):
        return render_summary_slot(state.desk.slot)

    if len(state.task_store) == 0:
        return "Add some tasks first, there is nothing to summarize."

    settings = state.settings
    client = state.summary_client
    request = build_summary_request(
        state.buckets(),
        state.scheme,
        model=str(getattr(client, "model", None) or getattr(settings, "llm_model", "")),
        temperature=getattr(client, "temperature", None),
    )

    if emit:
        with contextlib.suppress(Exception):
            emit("[AI] Sending your matrix for analysis...")

    state.desk.start(client, request)
    logger.debug("Summary requested gen=%d tasks=%d", state.desk.slot.generation, len(state.task_store))
    return render_summary_slot(state.desk.slot)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show scheme, task count and AI configuration.")
registry.register("list", cmd_list, help_text="List tasks with their numbers.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Plot a task: /add <name> [a b].")
registry.register("del", cmd_del, help_text="Delete tasks: /del <n> [n ...].", aliases=["rm"])
registry.register("show", cmd_show, help_text="Show one task: /show <n>.")
registry.register("matrix", cmd_matrix, help_text="Show the priority matrix.", aliases=["m"])
registry.register("scheme", cmd_scheme, help_text="Show or switch the quadrant scheme.")
registry.register(
    "summary", cmd_summary, help_text="Ask the AI for a strategic summary: /summary | /summary last."
)
