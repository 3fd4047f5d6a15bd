# src/focus_matrix/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The summary desk depends on a Protocol instead of the concrete SDK client,
so tests can plug in a fake.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..llm.prompt import SummaryRequest

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class SummaryService(Protocol):
    """Anything that turns a SummaryRequest into summary text (or raises SummaryError)."""

    async def request_summary(self, request: SummaryRequest) -> str: ...
