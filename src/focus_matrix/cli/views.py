# src/focus_matrix/cli/views.py

"""Plain-text renderings of the matrix, the task list and a task's details."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..core.summary import SummarySlot
from ..matrix.categorizer import Bucket, is_high
from ..matrix.schemes import QuadrantScheme
from ..tasks.task_models import AXIS_MAX, Task


def fmt_score(value: float) -> str:
    return f"{value:g}/{AXIS_MAX:g}"


def render_task_line(index: int, task: Task, scheme: QuadrantScheme) -> str:
    q = scheme.quadrant_for(is_high(task.axis_a), is_high(task.axis_b))
    return (
        f"{index}. {task.name} "
        f"({scheme.axis_a_label} {fmt_score(task.axis_a)}, "
        f"{scheme.axis_b_label} {fmt_score(task.axis_b)}) -> {q.label}"
    )


def render_task_list(tasks: Sequence[Task], scheme: QuadrantScheme) -> str:
    if not tasks:
        return "No tasks yet. Use /add <name> [a b] to plot one."
    lines = [f"Tasks ({len(tasks)}):"]
    lines.extend(render_task_line(i, t, scheme) for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)


def render_task_detail(task: Task, scheme: QuadrantScheme) -> str:
    q = scheme.quadrant_for(is_high(task.axis_a), is_high(task.axis_b))
    return (
        f"{task.name}\n"
        f"  {scheme.axis_a_label}: {fmt_score(task.axis_a)}\n"
        f"  {scheme.axis_b_label}: {fmt_score(task.axis_b)}\n"
        f"  Quadrant: {q.label} ({q.subtitle})\n"
        f"  id: {task.id}"
    )


def render_matrix(buckets: Mapping[str, Bucket], scheme: QuadrantScheme) -> str:
    lines = [f"Priority matrix ({scheme.axis_a_label} x {scheme.axis_b_label}):"]
    for q in scheme.quadrants:
        bucket = buckets[q.key]
        lines.append(f"[{q.label}] {q.subtitle} - {bucket.count}")
        if not bucket.tasks:
            lines.append("    (empty)")
        for t in bucket.tasks:
            lines.append(f"    * {t.name} ({fmt_score(t.axis_a)}, {fmt_score(t.axis_b)})")
    return "\n".join(lines)


def render_summary_slot(slot: SummarySlot) -> str:
    if slot.is_loading:
        return "AI is analyzing your tasks..."
    if slot.text is None:
        return "No summary available."
    return slot.text
