# src/focus_matrix/tasks/task_store.py

"""
In-memory task store.

The store is owned by AppState and only touched from the event-loop thread.
Nothing is persisted: every start begins from the seed (or empty) list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import AXIS_MIDPOINT, Task

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def seed(self, rows: Iterable[tuple[str, float, float]]) -> int:
        """Append demo rows (name, axis_a, axis_b). Returns how many were added."""
        n = 0
        for name, axis_a, axis_b in rows:
            self.add(name, axis_a, axis_b)
            n += 1
        logger.debug("Seeded %d tasks", n)
        return n

    def add(self, name: str, axis_a: float = AXIS_MIDPOINT, axis_b: float = AXIS_MIDPOINT) -> Task:
        task = Task.create(name, axis_a, axis_b)
        self._tasks.append(task)
        logger.info("Task added id=%s a=%.1f b=%.1f", task.id, task.axis_a, task.axis_b)
        return task

    def get(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def at(self, offset: int) -> Task | None:
        if 0 <= offset < len(self._tasks):
            return self._tasks[offset]
        return None

    def list_tasks(self) -> list[Task]:
        """Snapshot copy in insertion order."""
        return list(self._tasks)

    def delete(self, task_id: str) -> bool:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                del self._tasks[i]
                logger.info("Task deleted id=%s", task_id)
                return True
        return False

    def delete_at(self, offsets: Iterable[int]) -> list[Task]:
        """
        Remove tasks by list position (0-based), like swipe-to-delete on a list.
        Out-of-range offsets are ignored. Returns removed tasks in list order.
        """
        wanted = {i for i in offsets if 0 <= i < len(self._tasks)}
        if not wanted:
            return []

        removed = [t for i, t in enumerate(self._tasks) if i in wanted]
        self._tasks = [t for i, t in enumerate(self._tasks) if i not in wanted]
        logger.info("Tasks deleted count=%d", len(removed))
        return removed

    def clear(self) -> None:
        self._tasks.clear()
