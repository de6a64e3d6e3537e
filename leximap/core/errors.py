"""Error Hierarchy — typed, categorized exceptions for LexiMap failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the client envelope {"error": <message>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LexiMapError base: one global handler catches all
    - Relation-service failures are NOT in this hierarchy: they are absorbed
      at the relation client and never reach the request boundary
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    word: str | None = None
    relation: str | None = None
    debug_info: dict[str, Any] | None = None


class LexiMapError(Exception):
    """Base exception for all LexiMap errors."""

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
        """Convert to the REST error envelope returned to clients."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingWordError(LexiMapError):
    """Query word absent or empty after normalization."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Missing word", "MISSING_WORD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class LexiconUnavailableError(LexiMapError):
    """Lexical database could not be loaded at startup."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Lexical database unavailable: {message}",
            "LEXICON_UNAVAILABLE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
