# src/focus_matrix/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- resolves the API key from the credentials file,
- wires the task store, summary client and scheme into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..llm.client import SummaryClient
from ..llm.credentials import load_api_key
from ..matrix.schemes import EISENHOWER, get_scheme
from ..tasks.task_models import DEMO_TASKS
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, summary_client=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the client) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()

    if summary_client is None:
        api_key = load_api_key(settings.credentials_path, settings.credential_key)
        if not api_key:
            logger.warning("No API key in %s; AI insights are disabled.", settings.credentials_path)
        summary_client = SummaryClient(
            api_key,
            endpoint=settings.llm_endpoint,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
        )

    try:
        scheme = get_scheme(settings.scheme)
    except KeyError:
        logger.warning("Unknown scheme %r, using %s", settings.scheme, EISENHOWER.name)
        scheme = EISENHOWER

    task_store = TaskStore()
    if settings.seed_demo_tasks:
        task_store.seed(DEMO_TASKS)

    return AppState(
        settings=settings,
        task_store=task_store,
        summary_client=summary_client,
        scheme=scheme,
    )
