"""urilex exception hierarchy with structured diagnostics.

Parse failures are ordinary return values (ParseFailure). Exceptions are
reserved for the opt-in strict API and for contract violations.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class UriError(Exception):
    """Base exception for all urilex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize UriError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UriSyntaxError(UriError):
    """Input is not a complete URI in the accepted dialect.

    Raised only by URIParser.parse_complete(). Carries the source and the
    failing position so callers can report without re-parsing.

    Attributes:
        source: The text that failed to parse
        position: Character offset of the innermost failure
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        source: str = "",
        position: int = 0,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.position = position
