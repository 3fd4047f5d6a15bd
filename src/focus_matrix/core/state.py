# src/focus_matrix/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..matrix.categorizer import Bucket, categorize
from ..matrix.schemes import EISENHOWER, QuadrantScheme
from ..tasks.task_store import TaskStore
from .ports import SummaryService
from .summary import SummaryDesk


@dataclass
class AppState:
    """
    Everything the front end mutates.

    Owned by the event-loop thread: command handlers and the summary drain
    task are the only writers.
    """

    settings: Any
    task_store: TaskStore
    summary_client: SummaryService
    scheme: QuadrantScheme = EISENHOWER
    desk: SummaryDesk = field(default_factory=SummaryDesk)

    def buckets(self) -> dict[str, Bucket]:
        # Recomputed on every read; never cached.
        return categorize(self.task_store.list_tasks(), self.scheme)
