"""Log Record Schema: the body POSTed to the remote log sink.

Invariants:
    - timestamp is ISO-8601 UTC, stamped at creation
    - Records are frozen: created once per emission, never mutated
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from catalog.core.domain_types import LogLevel


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ErrorDetail(BaseModel):
    """Serialized exception attached to ERROR records."""
    model_config = ConfigDict(frozen=True)

    name: str
    message: str
    stack: str | None = None


class LogRecord(BaseModel):
    """One emission of the remote logger."""
    model_config = ConfigDict(frozen=True)

    timestamp: str = Field(default_factory=_now_iso)
    level: LogLevel
    message: str
    error: ErrorDetail | None = None
