"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (parser failures)
        4000-4999: Input errors (rejected before parsing)
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    URI_PARSE_FAILED = 3002
    URI_TRAILING_INPUT = 3003

    # Input errors (4000-4999)
    SOURCE_TOO_LARGE = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line/column
                are less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when not tied to a position)
        hint: Suggestion for fixing the error
        context_path: Grammar components the failure unwound through,
            innermost first
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    context_path: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[URI_PARSE_FAILED]: Invalid URI: expected literal tag
              --> column 1
              = context: scheme < uri
              = help: Only http:// and https:// URIs are supported
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
