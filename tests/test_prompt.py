# tests/test_prompt.py

from __future__ import annotations

import json

from focus_matrix.llm.prompt import (
    SUMMARY_SYSTEM_PROMPT,
    SummaryRequest,
    build_summary_request,
    build_user_prompt,
)
from focus_matrix.matrix.categorizer import categorize
from focus_matrix.matrix.schemes import EFFORT_IMPACT, EISENHOWER
from focus_matrix.tasks.task_models import Task


def test_empty_collection_renders_none_for_every_bucket() -> None:
    text = build_user_prompt(categorize([]), EISENHOWER)

    lines = text.splitlines()[1:]
    assert len(lines) == 4
    for label, line in zip(["Do", "Plan", "Delegate", "Delete"], lines):
        assert line.startswith(f"- {label} (")
        assert line.endswith(": 0 tasks: none")


def test_user_prompt_lists_label_count_and_names(mixed_tasks: list[Task]) -> None:
    text = build_user_prompt(categorize(mixed_tasks), EISENHOWER)

    assert '- Do (Important, Urgent): 1 task: "Ship release"' in text
    assert '- Delete (Not Important, Not Urgent): 2 tasks: "Sort old mail", "Edge case"' in text


def test_names_are_serialized_as_opaque_text() -> None:
    tricky = [
        Task.create('Call "Bob", then Alice', 9, 9),
        Task.create("Überprüfen\nReport", 9, 9),
    ]

    text = build_user_prompt(categorize(tricky), EISENHOWER)
    do_line = next(line for line in text.splitlines() if line.startswith("- Do"))
    members = do_line.split(": ", 2)[2]

    decoded = json.loads(f"[{members}]")
    assert decoded == ['Call "Bob", then Alice', "Überprüfen\nReport"]


def test_request_has_system_then_user_message() -> None:
    req = build_summary_request(categorize([]), EFFORT_IMPACT, model="m-1", temperature=0.3)

    assert [m["role"] for m in req.messages] == ["system", "user"]
    assert req.messages[0]["content"] == SUMMARY_SYSTEM_PROMPT
    assert "Quick Wins" in req.messages[1]["content"]
    assert req.model == "m-1"
    assert req.temperature == 0.3


def test_system_prompt_shape() -> None:
    sp = SUMMARY_SYSTEM_PROMPT.lower()
    assert "productivity coach" in sp
    assert "120 words" in sp
    assert "use only" in sp


def test_wire_round_trip_preserves_roles_content_and_model(mixed_tasks: list[Task]) -> None:
    req = build_summary_request(categorize(mixed_tasks), EISENHOWER, model="gpt-test", temperature=0.7)

    wire = json.loads(json.dumps(req.to_wire()))
    back = SummaryRequest.from_wire(wire)

    assert back == req


def test_temperature_is_omitted_when_unset() -> None:
    req = build_summary_request(categorize([]), EISENHOWER, model="gpt-test")

    wire = req.to_wire()

    assert "temperature" not in wire
    assert SummaryRequest.from_wire(wire).temperature is None
