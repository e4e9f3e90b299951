"""Remote Logger: leveled console logging plus fire-and-forget forwarding to a sink.

Invariants:
    - Every call writes one console line synchronously before returning
    - Every call schedules at most one sink write, as an independent asyncio task
    - Sink failures are caught and reported to the console only, never raised
    - No batching, no retention: a LogRecord is built, forwarded, and dropped

Design Decisions:
    - Pending tasks held in a set until done (the event loop keeps only weak refs)
    - Without a running loop the console line is still written and forwarding is skipped
"""

import asyncio
import logging

import httpx

from catalog.core.domain_types import LogLevel
from catalog.core.errors import describe_cause
from catalog.core.repository_protocols import LogSink
from catalog.schemas.log_record import ErrorDetail, LogRecord

logger = logging.getLogger(__name__)


class HttpLogSink:
    """POSTs LogRecords as JSON. The response is ignored."""

    def __init__(self, client: httpx.AsyncClient, url: str):
        self.client = client
        self.url = url

    async def write(self, record: LogRecord) -> None:
        await self.client.post(self.url, json=record.model_dump(mode="json"))


class RemoteLogger:
    """info/warn/error logger injected into the loader and controller."""

    def __init__(self, sink: LogSink, name: str = "catalog.events"):
        self.sink = sink
        self.console = logging.getLogger(name)
        self._pending: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def info(self, message: str) -> None:
        self.console.info(message)
        self._dispatch(LogRecord(level=LogLevel.INFO, message=f"[INFO] {message}"))

    def warn(self, message: str) -> None:
        self.console.warning(message)
        self._dispatch(LogRecord(level=LogLevel.WARN, message=f"[WARN] {message}"))

    def error(self, message: str, cause: BaseException | None = None) -> None:
        self.console.error(message, exc_info=cause)
        detail = describe_cause(cause)
        self._dispatch(LogRecord(
            level=LogLevel.ERROR,
            message=f"[ERROR] {message}",
            error=ErrorDetail(**detail) if detail else None,
        ))

    async def drain(self) -> None:
        """Wait for every in-flight forward to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def _dispatch(self, record: LogRecord) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, log record not forwarded")
            return
        task = loop.create_task(self._forward(record))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _forward(self, record: LogRecord) -> None:
        try:
            await self.sink.write(record)
        except Exception as e:
            logger.error(f"Failed to write to log sink: {e}")
