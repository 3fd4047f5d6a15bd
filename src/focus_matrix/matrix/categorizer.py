# src/focus_matrix/matrix/categorizer.py

"""
Split tasks into the four quadrants of a scheme.

A score counts as "high" only when strictly greater than the midpoint, so 5.0
always lands on the low side.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..tasks.task_models import AXIS_MIDPOINT, Task
from .schemes import EISENHOWER, Quadrant, QuadrantScheme


@dataclass(frozen=True, slots=True)
class Bucket:
    quadrant: Quadrant
    tasks: tuple[Task, ...]

    @property
    def count(self) -> int:
        return len(self.tasks)

    @property
    def names(self) -> list[str]:
        return [t.name for t in self.tasks]


def is_high(value: float) -> bool:
    return value > AXIS_MIDPOINT


def categorize(
    tasks: Iterable[Task],
    scheme: QuadrantScheme = EISENHOWER,
) -> dict[str, Bucket]:
    """Stable partition keyed by quadrant key, in the scheme's display order."""
    grouped: dict[str, list[Task]] = {q.key: [] for q in scheme.quadrants}
    for task in tasks:
        q = scheme.quadrant_for(is_high(task.axis_a), is_high(task.axis_b))
        grouped[q.key].append(task)

    return {q.key: Bucket(quadrant=q, tasks=tuple(grouped[q.key])) for q in scheme.quadrants}
