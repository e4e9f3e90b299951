"""Boundary Protocols: contracts between the controller and its collaborators.

Invariants:
    - services/ depends on these Protocols, never on concrete httpx-backed classes
    - Implementations are provided by infrastructure/ via constructor injection
"""

from typing import Protocol

from catalog.schemas.log_record import LogRecord


class LogSink(Protocol):
    """Destination of forwarded log records (remote endpoint in production)."""
    async def write(self, record: LogRecord) -> None: ...


class EventLogger(Protocol):
    """Leveled logger consumed by the loader and controller."""
    def info(self, message: str) -> None: ...
    def warn(self, message: str) -> None: ...
    def error(self, message: str, cause: BaseException | None = None) -> None: ...


class ProductSource(Protocol):
    """Loads the full record set once per session."""
    async def load(self) -> list[dict]: ...


class DelaySource(Protocol):
    """Produces the simulated latency for one filter/sort operation."""
    def next_delay(self) -> int: ...
