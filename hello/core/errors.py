"""Error Hierarchy - typed, categorized exceptions for every Hello failure mode.

Invariants:
    - Every error has a code (str or HelloWorldReturnCode), category (ErrorCategory), severity (ErrorSeverity)
    - HelloWorldError.code is always a HelloWorldReturnCode; its message comes from
      a fixed per-code template, formatted under the current culture
    - An unknown HelloWorldReturnCode fails the template lookup loudly (KeyError)
    - to_dict() produces the structured envelope used by the shell's log records

Design Decisions:
    - Single hierarchy with HelloError base: run() catches one type at the edge
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from hello.core.culture import Culture, current_culture
from hello.core.domain_types import HelloWorldReturnCode


class ErrorSeverity(str, Enum):
    """Error severity for observability and exit handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CANCELLED = "cancelled"
    TIMEOUT = "timeout"
    STARTUP = "startup"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    property_name: str | None = None
    debug_info: dict[str, Any] | None = None


class HelloError(Exception):
    """Base exception for all Hello errors."""

    def __init__(
        self,
        message: str,
        code: str | HelloWorldReturnCode,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to the structured error envelope."""
        return {
            "error": {
                "code": self.code.name if isinstance(self.code, Enum) else self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "property_name": self.context.property_name,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Argument & Lookup Errors ──────────────────────────────────

class NullArgumentError(HelloError):
    """A required value was None."""
    def __init__(self, argument: str, message: str = "Cannot set to null"):
        super().__init__(
            f"{argument}: {message}", "NULL_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ErrorContext(property_name=argument),
        )
        self.argument = argument


class InvalidArgumentError(HelloError):
    """A value had the wrong kind for a comparison or conversion."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class UnsupportedOperationError(HelloError):
    """A conversion strategy was called outside its accepted contract."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UNSUPPORTED_OPERATION", ErrorCategory.UNSUPPORTED,
            ErrorSeverity.ERROR, context,
        )


class TextNotFoundError(HelloError):
    """A text key is missing from the lookup registry."""
    def __init__(self, text_id: object, context: ErrorContext | None = None):
        super().__init__(
            f'Text "{text_id}" is not present in text dictionary',
            "KEY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context,
        )
        self.text_id = text_id


class PropertyNameRetrievalTimeoutError(HelloError):
    """Background property-name resolution missed its deadline."""
    def __init__(self, variable_name: str, expected_name: str, timeout_seconds: float):
        super().__init__(
            f'Could not retrieve {variable_name} "{expected_name}" '
            f"within {timeout_seconds:g} seconds.",
            "PROPERTY_NAME_RETRIEVAL_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, ErrorContext(property_name=expected_name),
        )
        self.expected_name = expected_name
        self.timeout_seconds = timeout_seconds


# ─── Startup Errors (mapped to exit status) ────────────────────

_MESSAGE_TEMPLATES: dict[HelloWorldReturnCode, str] = {
    HelloWorldReturnCode.SUCCESS: "The operation completed successfully.",
    HelloWorldReturnCode.PROPERTY_NAME_RETRIEVAL_CANCELLED: (
        'The retrieval of {0} which should be "{1}" was cancelled'
    ),
    HelloWorldReturnCode.NO_WINDOW_CLASS: "Window has no class name",
}

_CATEGORIES: dict[HelloWorldReturnCode, ErrorCategory] = {
    HelloWorldReturnCode.SUCCESS: ErrorCategory.STARTUP,
    HelloWorldReturnCode.PROPERTY_NAME_RETRIEVAL_CANCELLED: ErrorCategory.CANCELLED,
    HelloWorldReturnCode.NO_WINDOW_CLASS: ErrorCategory.STARTUP,
}


def format_error_message(
    code: HelloWorldReturnCode, *params: object, culture: Culture | None = None,
) -> str:
    """Format the fixed template for code. Pure; unknown codes raise KeyError."""
    template = _MESSAGE_TEMPLATES[code]
    culture = culture or current_culture()
    return template.format(*(culture.format_value(p) for p in params))


class HelloWorldError(HelloError):
    """Startup failure carrying a HelloWorldReturnCode for exit-status dispatch."""

    def __init__(
        self,
        cause: BaseException | None,
        code: HelloWorldReturnCode,
        *params: object,
    ):
        super().__init__(
            format_error_message(code, *params), code, _CATEGORIES[code],
            ErrorSeverity.CRITICAL,
            ErrorContext(debug_info={"params": list(params)} if params else None),
        )
        self.__cause__ = cause

    @property
    def exit_code(self) -> int:
        return int(self.code)
