"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern: every parser takes a Cursor and
returns either a ParseResult (value plus advanced cursor) or a ParseFailure
(the diagnostic context chain). Nothing is mutated, so retrying an
alternative from the same start position needs no rollback.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Failures are values, never exceptions

Pattern Reference:
    - Haskell Parsec
"""

from dataclasses import dataclass

from urilex.diagnostics import Diagnostic, ErrorTemplate
from urilex.enums import ErrorKind, GrammarContext

__all__ = ["Cursor", "FailureEntry", "ParseFailure", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("http://x", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance(7).rest
        'x'
        >>> cursor.pos  # Original unchanged (immutability)
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def rest(self) -> str:
        """Unconsumed remainder of the source."""
        return self.source[self.pos :]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Example:
            >>> start = Cursor("www.example.org", 0)
            >>> start.slice_to(3)
            'www'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters near EOF.
        """
        return self.source[self.pos : self.pos + n]

    def skip_while(self, chars: frozenset[str] | str) -> "Cursor":
        """Advance past consecutive characters contained in chars."""
        pos = self.pos
        source = self.source
        end = len(source)
        while pos < end and source[pos] in chars:
            pos += 1
        return Cursor(source, pos)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> result = ParseResult("http", Cursor("http://x", 4))
        >>> result.value
        'http'
        >>> result.remainder
        '://x'
    """

    value: T
    cursor: Cursor

    @property
    def remainder(self) -> str:
        """Input left after this parse."""
        return self.cursor.rest


@dataclass(frozen=True, slots=True)
class FailureEntry:
    """One link in a failure's context chain.

    Attributes:
        cursor: Position at which this cause was recorded
        cause: Low-level mismatch reason or grammar component tag
    """

    cursor: Cursor
    cause: ErrorKind | GrammarContext

    @property
    def remainder(self) -> str:
        """Input slice remaining at the point of failure."""
        return self.cursor.rest

    @property
    def position(self) -> int:
        """Character offset of this entry."""
        return self.cursor.pos

    @property
    def is_context(self) -> bool:
        """True if this entry names a grammar component."""
        return isinstance(self.cause, GrammarContext)


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Failed parse with its accumulated diagnostic context chain.

    Entries are ordered innermost first: the precise mismatch comes first and
    each enclosing grammar component appends itself as the failure unwinds,
    so the outermost context is listed last. Components never rewrite or
    drop an inner cause.

    Example:
        >>> failure = ParseFailure.of(Cursor("bla://yay", 0), ErrorKind.TAG)
        >>> failure = failure.append(Cursor("bla://yay", 0), GrammarContext.SCHEME)
        >>> [str(c) for c in failure.causes]
        ['expected literal tag', 'scheme']
    """

    entries: tuple[FailureEntry, ...] = ()

    @classmethod
    def of(cls, cursor: Cursor, cause: ErrorKind | GrammarContext) -> "ParseFailure":
        """Create a single-entry failure."""
        return cls((FailureEntry(cursor, cause),))

    def append(self, cursor: Cursor, cause: ErrorKind | GrammarContext) -> "ParseFailure":
        """Return a new failure with one more (outer) entry."""
        return ParseFailure((*self.entries, FailureEntry(cursor, cause)))

    @property
    def causes(self) -> tuple[ErrorKind | GrammarContext, ...]:
        """All causes, innermost first."""
        return tuple(entry.cause for entry in self.entries)

    @property
    def contexts(self) -> tuple[GrammarContext, ...]:
        """Only the grammar component tags, innermost first."""
        return tuple(
            entry.cause for entry in self.entries if isinstance(entry.cause, GrammarContext)
        )

    @property
    def remainders(self) -> tuple[str, ...]:
        """Input remainder recorded with each entry, innermost first."""
        return tuple(entry.remainder for entry in self.entries)

    @property
    def innermost(self) -> FailureEntry | None:
        """The most specific entry, or None for an empty chain."""
        return self.entries[0] if self.entries else None

    @property
    def position(self) -> int:
        """Offset of the innermost entry (0 for an empty chain)."""
        innermost = self.innermost
        return innermost.position if innermost is not None else 0

    def format_error(self) -> str:
        """Format failure as a single line.

        Example:
            >>> failure.format_error()
            "1: expected literal tag (in: scheme < uri)"
        """
        innermost = self.innermost
        if innermost is None:
            return "parse failed"
        error_msg = f"{innermost.position + 1}: {innermost.cause}"
        if self.contexts:
            error_msg += f" (in: {' < '.join(self.contexts)})"
        return error_msg

    def format_with_context(self) -> str:
        """Format failure with the source line and a caret at the failure.

        Example:
            >>> print(failure.format_with_context())
            8: expected alphanumeric (in: host < ip or host < uri)
            <BLANKLINE>
              | http://$$$.com
              |        ^
        """
        innermost = self.innermost
        if innermost is None:
            return self.format_error()
        source = innermost.cursor.source
        pointer = " " * innermost.position + "^"
        return "\n".join([self.format_error(), "", f"  | {source}", f"  | {pointer}"])

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a structured Diagnostic."""
        innermost = self.innermost
        cause = str(innermost.cause) if innermost is not None else "parse failed"
        return ErrorTemplate.uri_parse_failed(
            cause,
            self.position,
            tuple(str(c) for c in self.contexts),
        )
