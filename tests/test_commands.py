# tests/test_commands.py

from __future__ import annotations

import pytest

from focus_matrix.cli.commands import CommandRegistry, registry, split_add_args
from focus_matrix.llm.errors import NoContent

from .fakes import FakeSummaryService


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=lambda _: None) == "h3"
    assert called["h2"] == 1
    assert called["h3"] == 1


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Could not parse" in (reg.handle(state, '/add "unterminated') or "")


def test_split_add_args() -> None:
    assert split_add_args(["Write", "blog", "post", "8", "3"]) == ("Write blog post", 8.0, 3.0)
    assert split_add_args(["Call", "911"]) == ("Call 911", 5.0, 5.0)
    assert split_add_args(["Read", "docs"]) == ("Read docs", 5.0, 5.0)
    assert split_add_args(["Too", "high", "11", "3"]) == ("Too high 11 3", 5.0, 5.0)
    assert split_add_args(["Plan", "Q4", "2025", "2026"]) == ("Plan Q4 2025 2026", 5.0, 5.0)


def test_add_list_show_and_delete(state) -> None:
    reply = registry.handle(state, '/add "Ship release" 9 9')
    assert reply == "Plotted 'Ship release' in Do."
    registry.handle(state, "/add Plan roadmap 8 2")

    listing = registry.handle(state, "/list") or ""
    assert "1. Ship release" in listing
    assert "2. Plan roadmap" in listing and "-> Plan" in listing

    detail = registry.handle(state, "/show 2") or ""
    assert "Quadrant: Plan" in detail

    assert "Deleted 1 task(s): 'Ship release'" == registry.handle(state, "/del 1")
    assert [t.name for t in state.task_store] == ["Plan roadmap"]
    assert "No task #5" in (registry.handle(state, "/del 5") or "")


def test_add_rejects_empty_name(state) -> None:
    assert "must not be empty" in (registry.handle(state, "/add") or "")
    assert len(state.task_store) == 0


def test_add_keeps_trailing_non_scores_in_name(state) -> None:
    reply = registry.handle(state, "/add Plan Q4 2025 2026")

    assert reply == "Plotted 'Plan Q4 2025 2026' in Delete."
    (task,) = state.task_store.list_tasks()
    assert (task.axis_a, task.axis_b) == (5.0, 5.0)


def test_matrix_and_scheme_switch(state) -> None:
    registry.handle(state, "/add Quick 8 2")

    assert "[Plan] Important, Not Urgent - 1" in (registry.handle(state, "/matrix") or "")

    assert "effort_impact" in (registry.handle(state, "/scheme effort_impact") or "")
    assert "[Quick Wins] High Impact, Low Effort - 1" in (registry.handle(state, "/matrix") or "")
    assert "Unknown scheme" in (registry.handle(state, "/scheme nope") or "")


def test_summary_refused_without_tasks(state, summary_service: FakeSummaryService) -> None:
    reply = registry.handle(state, "/summary") or ""

    assert "Add some tasks first" in reply
    assert summary_service.calls == []


@pytest.mark.asyncio
async def test_summary_starts_request_and_lands_in_slot(state, summary_service: FakeSummaryService) -> None:
    registry.handle(state, "/add A 8 8")
    registry.handle(state, "/add B 2 2")
    notes: list[str] = []

    reply = registry.handle(state, "/summary", emit=notes.append)

    assert reply == "AI is analyzing your tasks..."
    assert notes and "Sending" in notes[0]

    await state.desk.inflight
    state.desk.apply(await state.desk.next_outcome())

    assert registry.handle(state, "/summary last") == "Focus on Do first."
    (req,) = summary_service.calls
    assert req.model == "fake-model"
    assert '"A"' in req.messages[1]["content"]


def test_status_reports_scheme_and_key(state) -> None:
    text = registry.handle(state, "/status") or ""
    assert "Scheme: eisenhower" in text
    assert "API key: configured" in text


@pytest.mark.asyncio
async def test_status_reports_error_summary(state, summary_service: FakeSummaryService) -> None:
    registry.handle(state, "/add A 8 8")
    summary_service.next_error = NoContent()

    registry.handle(state, "/summary")
    assert "Summary: loading" in (registry.handle(state, "/status") or "")

    await state.desk.inflight
    state.desk.apply(await state.desk.next_outcome())

    assert "Summary: error" in (registry.handle(state, "/status") or "")
