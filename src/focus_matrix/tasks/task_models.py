# src/focus_matrix/tasks/task_models.py

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from typing import Final

AXIS_MIN: Final[float] = 1.0
AXIS_MAX: Final[float] = 10.0
AXIS_MIDPOINT: Final[float] = 5.0
AXIS_STEP: Final[float] = 0.5


def parse_axis(raw: str | float | int) -> float:
    """
    Parse a user-supplied axis score and snap it to the 0.5 step.

    Raises ValueError for non-numeric or out-of-range input.
    """
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Not a number: {raw!r}") from None

    if math.isnan(value) or not (AXIS_MIN <= value <= AXIS_MAX):
        raise ValueError(f"Score must be between {AXIS_MIN:g} and {AXIS_MAX:g}, got {raw!r}")

    # Ties round up: 5.25 -> 5.5.
    return math.floor(value / AXIS_STEP + 0.5) * AXIS_STEP


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Task:
    """
    A task plotted on the matrix.

    axis_a / axis_b are the two priority dimensions (importance/urgency in the
    Eisenhower scheme, impact/effort in the older one). Identity is `id` only.
    """

    name: str = field(compare=False)
    axis_a: float = field(default=AXIS_MIDPOINT, compare=False)
    axis_b: float = field(default=AXIS_MIDPOINT, compare=False)
    id: str = field(default_factory=_new_id)

    @classmethod
    def create(
        cls,
        name: str,
        axis_a: float = AXIS_MIDPOINT,
        axis_b: float = AXIS_MIDPOINT,
    ) -> Task:
        clean = (name or "").strip()
        if not clean:
            raise ValueError("Task name must not be empty")
        return cls(name=clean, axis_a=float(axis_a), axis_b=float(axis_b))


# Demo data the app starts with (name, importance, urgency).
DEMO_TASKS: Final[tuple[tuple[str, float, float], ...]] = (
    ("Design new app icon", 8, 3),
    ("Refactor database schema", 9, 9),
    ("Write weekly blog post", 6, 4),
    ("Fix minor UI bug", 4, 1),
    ("Organize team meeting", 2, 2),
    ("Research Q4 strategy", 10, 10),
    ("Update dependencies", 3, 6),
    ("Answer support emails", 4, 7),
)
