"""Domain Types: enums that replace bare strings across the codebase.

Invariants:
    - ControllerPhase covers every state of the interaction controller
    - LogLevel values are the wire values of LogRecord.level
    - str Enums serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

RequestSeq = NewType("RequestSeq", int)   # monotonically increasing per controller
DelayMs = NewType("DelayMs", int)


# ─── Enums ───────────────────────────────────────────────────────

class ControllerPhase(str, Enum):
    """Interaction controller states. is_loading <=> LOADING."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERRORED = "errored"


class LogLevel(str, Enum):
    """Levels accepted by the remote log sink."""
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class IntentKind(str, Enum):
    """User intents raised by the Display Surface."""
    FILTER = "filter"
    SORT = "sort"
