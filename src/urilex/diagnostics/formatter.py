"""Diagnostic formatting service.

Renders a Diagnostic as multi-line text, a single line, or JSON.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style block (default)
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # One JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(URIParser().parse("bla://yay").to_diagnostic()))
        URI_PARSE_FAILED: Invalid URI: expected literal tag
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {diagnostic.message}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Header line, then one indented line per span, context and hint.

        Example output:
            error[URI_PARSE_FAILED]: Invalid URI: expected alphanumeric
              --> column 8
              = context: host < ip or host < uri
              = help: Host labels may contain only ASCII letters, digits and '-'
        """
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.span is not None:
            lines.append(f"  --> column {diagnostic.span.column}")
        if diagnostic.context_path:
            lines.append(f"  = context: {' < '.join(diagnostic.context_path)}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | list[str]] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        if diagnostic.span is not None:
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end
        if diagnostic.context_path:
            data["context_path"] = list(diagnostic.context_path)
        if diagnostic.hint:
            data["hint"] = diagnostic.hint
        return json.dumps(data, ensure_ascii=False)
