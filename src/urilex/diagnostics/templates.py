"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

# Hints keyed by the outermost grammar component that failed.
_COMPONENT_HINTS: dict[str, str] = {
    "scheme": "Only http:// and https:// URIs are supported",
    "authority": "User info must be alphanumeric: user[:password]@",
    "host": "Host labels may contain only ASCII letters, digits and '-'",
    "ip": "IPv4 addresses need four dot-separated groups of 0-255",
    "ip number": "Each IPv4 group must be 1-3 digits and at most 255",
    "ip or host": "Expected a dotted IPv4 address or a host name",
}


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Parser reached end of input unexpectedly.

        Args:
            position: Character offset where EOF was hit

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=SourceSpan(start=position, end=position, line=1, column=position + 1),
        )

    @staticmethod
    def uri_parse_failed(
        cause: str,
        position: int,
        context_path: tuple[str, ...],
    ) -> Diagnostic:
        """URI failed to parse.

        Args:
            cause: Innermost mismatch reason
            position: Character offset of the innermost failure
            context_path: Grammar components unwound through, innermost first

        Returns:
            Diagnostic for URI_PARSE_FAILED
        """
        msg = f"Invalid URI: {cause}"
        # First named component below "uri" is the most specific hint.
        hint = next(
            (_COMPONENT_HINTS[c] for c in context_path if c in _COMPONENT_HINTS),
            None,
        )
        return Diagnostic(
            code=DiagnosticCode.URI_PARSE_FAILED,
            message=msg,
            span=SourceSpan(start=position, end=position, line=1, column=position + 1),
            hint=hint,
            context_path=context_path,
        )

    @staticmethod
    def uri_trailing_input(remainder: str, position: int, last_component: str) -> Diagnostic:
        """URI parsed but left unconsumed input.

        Args:
            remainder: Unconsumed text
            position: Character offset where the remainder starts
            last_component: Last grammar component the URI consumed

        Returns:
            Diagnostic for URI_TRAILING_INPUT
        """
        msg = f"Unexpected trailing input {remainder!r} after URI"
        return Diagnostic(
            code=DiagnosticCode.URI_TRAILING_INPUT,
            message=msg,
            span=SourceSpan(
                start=position,
                end=position + len(remainder),
                line=1,
                column=position + 1,
            ),
            hint=(
                f"Parsing stopped after the {last_component}; "
                f"{remainder[0]!r} cannot continue it"
            ),
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds configured size limit.

        Args:
            size: Source length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure max_source_size in URIParser constructor to increase limit",
        )
