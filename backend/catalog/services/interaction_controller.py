"""Interaction Controller: async state machine between grid intents and the catalog.

Invariants:
    - States: IDLE -> LOADING -> READY | ERRORED; READY/ERRORED -> LOADING on intent
    - Sort intents are always effective; an empty-to-empty filter change is a no-op
    - Each operation logs before it touches state (info on start, error on failure)
    - Only the latest request (highest sequence number) settles phase/is_loading;
      stale settles are ignored; a stale failure is held until the latest
      settles, or applied at once when nothing is LOADING
    - Failures surface as generic user text; cause detail goes to the logger only
    - The product source is consulted at most once per controller

Design Decisions:
    - submit_* accepts synchronously and schedules the delay as a task, so a
      caller observes LOADING immediately; on_* awaits the same task
    - No debouncing and no cancellation of superseded delays (last write wins)
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from catalog.core.domain_types import ControllerPhase, IntentKind, RequestSeq
from catalog.core.errors import (
    CatalogError, DisplayError, ErrorContext, FilterError, LoadError, SortError,
)
from catalog.core.interaction_state import InteractionState
from catalog.core.repository_protocols import (
    DelaySource, EventLogger, ProductSource,
)
from catalog.schemas.grid_models import FilterModel, SortModel

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

_INTENT_ERRORS: dict[IntentKind, type[CatalogError]] = {
    IntentKind.FILTER: FilterError,
    IntentKind.SORT: SortError,
}


class InteractionController:
    """Owns InteractionState and orchestrates load/filter/sort operations."""

    def __init__(
        self,
        source: ProductSource,
        latency: DelaySource,
        events: EventLogger,
        sleep: Sleep = asyncio.sleep,
    ):
        self.source = source
        self.latency = latency
        self.events = events
        self.sleep = sleep
        self.state = InteractionState()
        self._seq = 0
        self._initialized = False
        self._loaded = False
        self._tasks: set[asyncio.Task] = set()

    # ─── Read side ──────────────────────────────────────────────

    @property
    def phase(self) -> ControllerPhase:
        return self.state.phase

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def loaded(self) -> bool:
        """True once the product payload has been fetched successfully."""
        return self._loaded

    @property
    def latest_seq(self) -> int:
        return self._seq

    def snapshot(self) -> dict:
        return self.state.snapshot()

    # ─── Load ───────────────────────────────────────────────────

    async def initialize(self) -> None:
        """IDLE -> LOADING -> READY | ERRORED. Later calls are no-ops."""
        if self._initialized:
            return
        self._initialized = True
        seq = self._begin()
        try:
            records = await self.source.load()
        except Exception as e:
            err = e if isinstance(e, LoadError) else LoadError(
                f"Unexpected load failure: {e}", cause=e,
            )
            err.context.request_seq = seq
            self.events.error("Failed to load products", err.cause or err)
            self._fail(seq, err.user_message)
            return
        self.state.records = list(records)
        self._loaded = True
        self._settle(seq)

    # ─── Intents ────────────────────────────────────────────────

    def submit_filter(self, filter_model: FilterModel) -> asyncio.Task | None:
        """Accept a filter intent. Returns None for an empty-to-empty no-op."""
        self.events.info(f"Applying filter: {filter_model.model_dump_json()}")
        value = filter_model.effective_value
        if not value and not self.state.active_filter_value:
            return None
        self.state.active_filter_value = value
        return self._schedule(IntentKind.FILTER)

    def submit_sort(self, sort_model: SortModel) -> asyncio.Task:
        self.events.info(f"Applying sort: {sort_model.model_dump_json()}")
        self.state.active_sort = [item.model_dump() for item in sort_model.items]
        return self._schedule(IntentKind.SORT)

    async def on_filter_change(self, filter_model: FilterModel) -> None:
        task = self.submit_filter(filter_model)
        if task is not None:
            await task

    async def on_sort_change(self, sort_model: SortModel) -> None:
        await self.submit_sort(sort_model)

    def on_display_error(self, cause: BaseException) -> None:
        """Rendering fault raised by the Display Surface."""
        err = DisplayError(f"Display surface failure: {cause}", cause=cause)
        self.events.error("DataGrid error occurred", cause)
        if self.state.is_loading:
            self.state.error = err.user_message
        else:
            self.state.fail(err.user_message)

    # ─── Lifecycle ──────────────────────────────────────────────

    async def drain(self) -> None:
        """Wait for every scheduled operation to settle."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def close(self) -> None:
        """Teardown: cancel in-flight delays."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    # ─── Internals ──────────────────────────────────────────────

    def _begin(self) -> RequestSeq:
        self._seq += 1
        self.state.begin()
        return RequestSeq(self._seq)

    def _schedule(self, kind: IntentKind) -> asyncio.Task:
        seq = self._begin()
        task = asyncio.get_running_loop().create_task(self._simulate(seq, kind))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _simulate(self, seq: RequestSeq, kind: IntentKind) -> None:
        try:
            delay_ms = self.latency.next_delay()
            logger.debug(
                "Simulating operation latency",
                extra={"request_seq": seq, "intent": kind.value, "delay_ms": delay_ms},
            )
            await self.sleep(delay_ms / 1000)
        except Exception as e:
            err = _INTENT_ERRORS[kind](
                f"{kind.value} simulation failed: {e}", cause=e,
                context=ErrorContext(request_seq=seq, intent=kind.value),
            )
            self.events.error(f"{kind.value.capitalize()} operation failed", err)
            self._fail(seq, err.user_message)
            return
        self._settle(seq)

    def _is_latest(self, seq: RequestSeq) -> bool:
        if seq == self._seq:
            return True
        logger.debug(
            f"Superseded by request {self._seq}", extra={"request_seq": seq},
        )
        return False

    def _settle(self, seq: RequestSeq) -> None:
        if self._is_latest(seq):
            self.state.settle()

    def _fail(self, seq: RequestSeq, user_message: str) -> None:
        if self._is_latest(seq):
            self.state.fail(user_message)
        elif self.state.is_loading:
            # Recorded now, applied when the latest request settles.
            self.state.error = user_message
        else:
            self.state.fail(user_message)
