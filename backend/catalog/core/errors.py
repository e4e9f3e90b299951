"""Error Hierarchy: typed, categorized exceptions for catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - user_message is the short generic string shown to the Display Surface
    - message/cause carry internal detail and are only ever logged
    - FormatError never reaches InteractionState (recovered where raised)
"""

import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERACTION = "interaction"
    PRESENTATION = "presentation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_seq: int | None = None
    intent: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def user_message(self) -> str:
        return self.context.user_message or self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "request_seq": self.context.request_seq,
                    "intent": self.context.intent,
                },
            }
        }


def describe_cause(cause: BaseException | None) -> dict | None:
    """Project an exception onto the {name, message, stack} log shape."""
    if cause is None:
        return None
    stack = getattr(cause, "stack", None)
    if not isinstance(stack, str):
        stack = "".join(
            traceback.format_exception(type(cause), cause, cause.__traceback__),
        )
    name = getattr(cause, "name", None)
    return {
        "name": name if isinstance(name, str) else type(cause).__name__,
        "message": str(cause),
        "stack": stack,
    }


# ─── Interaction Errors ─────────────────────────────────────────

class LoadError(CatalogError):
    """Product payload could not be fetched or is not a well-formed list."""
    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Failed to load products"
        super().__init__(
            message, "LOAD_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, 502, cause,
        )


class FilterError(CatalogError):
    """Fault during a simulated filter operation."""
    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Failed to filter products"
        super().__init__(
            message, "FILTER_ERROR", ErrorCategory.INTERACTION,
            ErrorSeverity.ERROR, ctx, 500, cause,
        )


class SortError(CatalogError):
    """Fault during a simulated sort operation."""
    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Failed to sort products"
        super().__init__(
            message, "SORT_ERROR", ErrorCategory.INTERACTION,
            ErrorSeverity.ERROR, ctx, 500, cause,
        )


class DisplayError(CatalogError):
    """Rendering fault reported back by the Display Surface."""
    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = (
            ctx.user_message or "An error occurred while displaying products"
        )
        super().__init__(
            message, "DISPLAY_ERROR", ErrorCategory.PRESENTATION,
            ErrorSeverity.ERROR, ctx, 500, cause,
        )


# ─── Presentation Errors (recovered locally) ────────────────────

class FormatError(CatalogError):
    """A display value could not be formatted."""
    def __init__(
        self,
        message: str,
        field: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "FORMAT_ERROR", ErrorCategory.PRESENTATION,
            ErrorSeverity.WARNING, context, 500, cause,
        )
        self.field = field


class DisplaySurfaceFault(Exception):
    """A fault reported by the grid, rebuilt server-side for logging."""

    def __init__(self, name: str, message: str, stack: str | None = None):
        super().__init__(message)
        self.name = name
        self.stack = stack
