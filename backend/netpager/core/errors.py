"""Error Hierarchy: typed, categorized exceptions for the tool and API layers.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Filter, Paginator and Listing never raise any of these (soft normalization only)
    - to_response() produces REST envelope; to_tool_result() produces tool envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with NetPagerError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

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
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    capture_id: str | None = None
    tool_name: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class NetPagerError(Exception):
    """Base exception for all netpager errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "capture_id": self.context.capture_id,
                    "tool_name": self.context.tool_name,
                },
            }
        }

    def to_tool_result(self) -> dict:
        """Convert to the error result a tool call returns."""
        return {
            "status": "error",
            "error_code": self.code,
            "message": self.context.user_message or self.message,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ToolValidationError(NetPagerError):
    """Tool input validation failed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class UnknownToolError(NetPagerError):
    """Tool name has no registered handler."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Tool '{tool_name}' does not exist.",
            "UNKNOWN_TOOL", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.tool_name = tool_name


class ResourceNotFoundError(NetPagerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
