"""Core URI parser implementation.

This module provides the URIParser class that wraps the grammar rules in
:mod:`urilex.syntax.parser.rules` with input limits, logging and an opt-in
strict mode.

Architecture:
    Every grammar rule takes an immutable :class:`~urilex.syntax.cursor.Cursor`
    and returns either a :class:`~urilex.syntax.cursor.ParseResult` (value plus
    advanced cursor) or a :class:`~urilex.syntax.cursor.ParseFailure` carrying
    the context chain. URIParser starts the cursor at offset 0 and hands back
    whichever of the two the top-level rule produced.

Security:
    Includes configurable input size limit so that callers parsing untrusted
    input cannot be made to scan arbitrarily large strings.
"""

import logging

from urilex.constants import MAX_SOURCE_SIZE
from urilex.diagnostics import ErrorTemplate, UriSyntaxError
from urilex.enums import GrammarContext
from urilex.syntax.cursor import Cursor, ParseFailure, ParseResult
from urilex.syntax.model import URI
from urilex.syntax.parser.rules import parse_uri

__all__ = ["URIParser"]

logger = logging.getLogger(__name__)


def _last_component(uri: URI) -> GrammarContext:
    """Last component present in uri. A fragment always runs to end of input."""
    if uri.query is not None:
        return GrammarContext.QUERY
    if uri.path is not None:
        return GrammarContext.PATH
    if uri.port is not None:
        return GrammarContext.PORT
    return GrammarContext.HOST


class URIParser:
    """URI parser using the immutable cursor pattern.

    Design:
    - Stateless between calls; one instance may be shared across threads
    - Parse failures are returned, not raised
    - parse_complete() is the only method that raises on bad input

    Attributes:
        max_source_size: Maximum accepted source length in characters
            (default: 64 KiB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_source_size: Maximum source length (default: 64 KiB).
                Set to 0 to disable the limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum accepted source length in characters."""
        return self._max_source_size

    def parse(self, source: str) -> ParseResult[URI] | ParseFailure:
        """Parse a URI from the start of source.

        Args:
            source: Text starting with a URI

        Returns:
            ParseResult whose value is the URI and whose remainder is whatever
            followed it, or ParseFailure with the context chain (innermost
            first, "uri" last).

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> result = URIParser().parse("http://localhost rest")
            >>> result.value.host
            HostName(name='localhost')
            >>> result.remainder
            ' rest'
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            logger.warning("Rejected URI source: %s", diagnostic.message)
            raise ValueError(diagnostic.message)

        result = parse_uri(Cursor(source, 0))
        if isinstance(result, ParseFailure):
            logger.debug("URI parse failed: %s", result.format_error())
        return result

    def parse_complete(self, source: str) -> URI:
        """Parse source that must consist of exactly one URI.

        Raises:
            UriSyntaxError: If parsing fails or input remains after the URI
            ValueError: If source exceeds max_source_size
        """
        result = self.parse(source)
        if isinstance(result, ParseFailure):
            raise UriSyntaxError(
                result.to_diagnostic(), source=source, position=result.position
            )
        if not result.cursor.is_eof:
            diagnostic = ErrorTemplate.uri_trailing_input(
                result.remainder, result.cursor.pos, _last_component(result.value)
            )
            raise UriSyntaxError(diagnostic, source=source, position=result.cursor.pos)
        return result.value
