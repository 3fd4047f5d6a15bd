# src/focus_matrix/core/summary.py

"""
Summary desk: the single owner of the "current summary" display slot.

- start() runs on the event loop, cancels the previous in-flight request and
  schedules a new one as an asyncio task.
- The task never touches the slot. It posts a SummaryOutcome onto a queue.
- The owner (console loop) pulls outcomes and calls apply(), which ignores
  outcomes from superseded requests.

The slot always ends in either summary text or an error message.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from ..llm.errors import SummaryError, friendly_summary_error_message
from ..llm.prompt import SummaryRequest
from .ports import SummaryService

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred while generating the summary."


@dataclass(slots=True)
class SummarySlot:
    text: str | None = None
    is_loading: bool = False
    is_error: bool = False
    generation: int = 0


@dataclass(slots=True, frozen=True)
class SummaryOutcome:
    generation: int
    text: str | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class SummaryDesk:
    slot: SummarySlot = field(default_factory=SummarySlot)
    outcomes: asyncio.Queue[SummaryOutcome] = field(default_factory=asyncio.Queue)
    _inflight: asyncio.Task[None] | None = None

    @property
    def inflight(self) -> asyncio.Task[None] | None:
        return self._inflight

    def start(self, service: SummaryService, request: SummaryRequest) -> asyncio.Task[None]:
        """Supersede any running request and start a new one. Must run on the loop."""
        prev = self._inflight
        if prev is not None and not prev.done():
            logger.info("Cancelling superseded summary request gen=%d", self.slot.generation)
            prev.cancel()

        self.slot.generation += 1
        self.slot.is_loading = True
        self.slot.is_error = False
        self.slot.text = None

        gen = self.slot.generation
        task = asyncio.get_running_loop().create_task(
            self._run(gen, service, request), name=f"summary-{gen}"
        )
        self._inflight = task
        return task

    async def _run(self, generation: int, service: SummaryService, request: SummaryRequest) -> None:
        try:
            text = await service.request_summary(request)
        except SummaryError as e:
            logger.info("Summary gen=%d failed: %s", generation, e)
            outcome = SummaryOutcome(generation=generation, error=e)
        except asyncio.CancelledError:
            logger.debug("Summary gen=%d cancelled", generation)
            raise
        except Exception as e:
            logger.exception("Summary gen=%d crashed", generation)
            outcome = SummaryOutcome(generation=generation, error=e)
        else:
            outcome = SummaryOutcome(generation=generation, text=text)

        await self.outcomes.put(outcome)

    def apply(self, outcome: SummaryOutcome) -> bool:
        """
        Owner side: write an outcome into the slot.
        Returns False (and changes nothing) when the outcome is stale.
        """
        if outcome.generation != self.slot.generation:
            logger.debug(
                "Dropping stale summary gen=%d (current=%d)", outcome.generation, self.slot.generation
            )
            return False

        if outcome.ok:
            self.slot.text = outcome.text
            self.slot.is_error = False
        else:
            err = outcome.error
            if isinstance(err, SummaryError):
                self.slot.text = friendly_summary_error_message(err)
            else:
                self.slot.text = GENERIC_ERROR_MESSAGE
            self.slot.is_error = True

        self.slot.is_loading = False
        self._inflight = None
        return True

    async def next_outcome(self) -> SummaryOutcome:
        return await self.outcomes.get()

    async def cancel(self) -> None:
        task = self._inflight
        self._inflight = None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        self.slot.is_loading = False
