# src/focus_matrix/llm/prompt.py

"""
Summary prompt construction.

The request is always two messages: a fixed system persona and a user message
listing every quadrant with its count and task names.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from ..core.ports import ChatMessage
from ..matrix.categorizer import Bucket
from ..matrix.schemes import QuadrantScheme

SUMMARY_SYSTEM_PROMPT: Final[str] = """
You are a world-class productivity coach and strategic advisor.

Input: a snapshot of the user's tasks, already sorted into the four quadrants
of a priority matrix.

Task:
- Start with one short, encouraging sentence about the current situation.
- Then give 2-3 specific bulleted recommendations on what to focus on or change.

Rules:
- Use only the tasks and counts in the snapshot. Do not invent tasks.
- At most 120 words.
- Format the answer as plain markdown (bullets and bold only, no headings, no tables).
""".strip()

EMPTY_BUCKET_PLACEHOLDER: Final[str] = "none"


def _quote_name(name: str) -> str:
    # JSON string literal: keeps commas, quotes and newlines inside a name opaque.
    return json.dumps(name, ensure_ascii=False)


def format_bucket_line(bucket: Bucket) -> str:
    q = bucket.quadrant
    members = ", ".join(_quote_name(n) for n in bucket.names) or EMPTY_BUCKET_PLACEHOLDER
    noun = "task" if bucket.count == 1 else "tasks"
    return f"- {q.label} ({q.subtitle}): {bucket.count} {noun}: {members}"


def build_user_prompt(buckets: Mapping[str, Bucket], scheme: QuadrantScheme) -> str:
    lines = [
        f"Matrix snapshot ({scheme.axis_a_label} x {scheme.axis_b_label}, scores 1-10, high means above 5):",
    ]
    for q in scheme.quadrants:
        bucket = buckets.get(q.key) or Bucket(quadrant=q, tasks=())
        lines.append(format_bucket_line(bucket))
    return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class SummaryRequest:
    model: str
    messages: tuple[ChatMessage, ...]
    temperature: float | None = None

    def to_wire(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": m["role"], "content": m["content"]} for m in self.messages],
        }
        if self.temperature is not None:
            body["temperature"] = self.temperature
        return body

    @classmethod
    def from_wire(cls, body: Mapping[str, Any]) -> SummaryRequest:
        messages = tuple(
            {"role": str(m["role"]), "content": str(m["content"])} for m in body["messages"]
        )
        temperature = body.get("temperature")
        return cls(
            model=str(body["model"]),
            messages=messages,
            temperature=None if temperature is None else float(temperature),
        )


def build_summary_request(
    buckets: Mapping[str, Bucket],
    scheme: QuadrantScheme,
    *,
    model: str,
    temperature: float | None = None,
) -> SummaryRequest:
    return SummaryRequest(
        model=model,
        messages=(
            {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(buckets, scheme)},
        ),
        temperature=temperature,
    )
