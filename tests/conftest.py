# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from focus_matrix.core.state import AppState
from focus_matrix.tasks.task_models import Task
from focus_matrix.tasks.task_store import TaskStore

from .fakes import FakeSummaryService


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="focus-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        credentials_path=tmp_path / "Secrets.plist",
        credential_key="OPENAI_API_KEY",
        llm_endpoint="https://llm.test/v1",
        llm_model="test-model",
        llm_temperature=0.7,
        scheme="eisenhower",
        seed_demo_tasks=False,
    )


@pytest.fixture()
def summary_service() -> FakeSummaryService:
    return FakeSummaryService(next_text="Focus on Do first.")


@pytest.fixture()
def state(settings: SimpleNamespace, summary_service: FakeSummaryService) -> AppState:
    """AppState wired with an empty in-memory store and a fake summary service."""
    return AppState(
        settings=settings,
        task_store=TaskStore(),
        summary_client=summary_service,
    )


@pytest.fixture()
def mixed_tasks() -> list[Task]:
    return [
        Task.create("Ship release", 9, 9),
        Task.create("Plan roadmap", 8, 2),
        Task.create("Answer pings", 3, 8),
        Task.create("Sort old mail", 2, 2),
        Task.create("Edge case", 5, 5),
    ]
