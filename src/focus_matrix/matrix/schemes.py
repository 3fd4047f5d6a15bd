# src/focus_matrix/matrix/schemes.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Quadrant:
    key: str
    label: str
    subtitle: str
    high_a: bool
    high_b: bool


@dataclass(frozen=True, slots=True)
class QuadrantScheme:
    """
    A labelling of the four (high/low, high/low) cells of the grid.

    `quadrants` is also the display order (top-left, top-right, bottom-left,
    bottom-right).
    """

    name: str
    axis_a_label: str
    axis_b_label: str
    quadrants: tuple[Quadrant, Quadrant, Quadrant, Quadrant]

    def quadrant_for(self, high_a: bool, high_b: bool) -> Quadrant:
        for q in self.quadrants:
            if q.high_a == high_a and q.high_b == high_b:
                return q
        raise LookupError(f"Scheme {self.name!r} has no quadrant for ({high_a}, {high_b})")


EISENHOWER: Final[QuadrantScheme] = QuadrantScheme(
    name="eisenhower",
    axis_a_label="Importance",
    axis_b_label="Urgency",
    quadrants=(
        Quadrant("do", "Do", "Important, Urgent", high_a=True, high_b=True),
        Quadrant("plan", "Plan", "Important, Not Urgent", high_a=True, high_b=False),
        Quadrant("delegate", "Delegate", "Not Important, Urgent", high_a=False, high_b=True),
        Quadrant("delete", "Delete", "Not Important, Not Urgent", high_a=False, high_b=False),
    ),
)

# Historical grid: axis A = impact, axis B = effort.
EFFORT_IMPACT: Final[QuadrantScheme] = QuadrantScheme(
    name="effort_impact",
    axis_a_label="Impact",
    axis_b_label="Effort",
    quadrants=(
        Quadrant("quick_wins", "Quick Wins", "High Impact, Low Effort", high_a=True, high_b=False),
        Quadrant("major_projects", "Major Projects", "High Impact, High Effort", high_a=True, high_b=True),
        Quadrant("fill_ins", "Fill-ins", "Low Impact, Low Effort", high_a=False, high_b=False),
        Quadrant("thankless", "Thankless Tasks", "Low Impact, High Effort", high_a=False, high_b=True),
    ),
)

SCHEMES: Final[dict[str, QuadrantScheme]] = {s.name: s for s in (EISENHOWER, EFFORT_IMPACT)}


def get_scheme(name: str) -> QuadrantScheme:
    key = (name or "").strip().lower().replace("-", "_")
    try:
        return SCHEMES[key]
    except KeyError:
        raise KeyError(f"Unknown scheme: {name!r}. Known: {', '.join(SCHEMES)}") from None
