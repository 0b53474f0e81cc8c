"""Primitive parsing utilities for the URI grammar.

Leaf parsers that recognize literals and character-class runs. Each takes a
Cursor and returns ParseResult[str] on success or a single-entry
ParseFailure naming the low-level mismatch.

All primitives use complete-input semantics: running out of input is a
failure, reported as ErrorKind.INCOMPLETE when the input ended before the
primitive could decide, never as a request for more data.
"""

import uuid
from collections.abc import Callable

from urilex.constants import ASCII_DIGITS, ASCII_LETTERS
from urilex.enums import ErrorKind
from urilex.syntax.cursor import Cursor, ParseFailure, ParseResult

__all__ = [
    "ALPHANUMERIC_CHARS",
    "ALPHANUMERIC_HYPHEN_CHARS",
    "alpha1",
    "alphanumeric1",
    "alphanumeric_hyphen1",
    "digit1",
    "one_of",
    "parse_uuid",
    "rest",
    "tag",
    "tag_no_case",
    "take_till1",
    "take_while1",
]

ALPHA_CHARS: frozenset[str] = frozenset(ASCII_LETTERS)
DIGIT_CHARS: frozenset[str] = frozenset(ASCII_DIGITS)
ALPHANUMERIC_CHARS: frozenset[str] = ALPHA_CHARS | DIGIT_CHARS
ALPHANUMERIC_HYPHEN_CHARS: frozenset[str] = ALPHANUMERIC_CHARS | {"-"}

type StrParser = Callable[[Cursor], ParseResult[str] | ParseFailure]


def _literal_failure(cursor: Cursor, literal: str, *, fold: bool) -> ParseFailure:
    """Classify a literal mismatch as structural or as input ending early."""
    ahead = cursor.rest
    if fold:
        ahead, literal = ahead.lower(), literal.lower()
    if len(ahead) < len(literal) and literal.startswith(ahead):
        return ParseFailure.of(cursor, ErrorKind.INCOMPLETE)
    return ParseFailure.of(cursor, ErrorKind.TAG)


def tag(literal: str) -> StrParser:
    """Match an exact literal.

    Example:
        >>> tag("@")(Cursor("@host", 0)).remainder
        'host'
    """
    size = len(literal)

    def parse_tag(cursor: Cursor) -> ParseResult[str] | ParseFailure:
        if cursor.slice_ahead(size) == literal:
            return ParseResult(literal, cursor.advance(size))
        return _literal_failure(cursor, literal, fold=False)

    return parse_tag


def tag_no_case(literal: str) -> StrParser:
    """Match a literal ignoring ASCII case.

    The returned value is the input slice as written, not the literal.
    """
    size = len(literal)
    folded = literal.lower()

    def parse_tag_no_case(cursor: Cursor) -> ParseResult[str] | ParseFailure:
        matched = cursor.slice_ahead(size)
        if matched.lower() == folded:
            return ParseResult(matched, cursor.advance(size))
        return _literal_failure(cursor, literal, fold=True)

    return parse_tag_no_case


def one_of(chars: str) -> StrParser:
    """Match a single character from chars."""
    allowed = frozenset(chars)

    def parse_one_of(cursor: Cursor) -> ParseResult[str] | ParseFailure:
        if cursor.is_eof:
            return ParseFailure.of(cursor, ErrorKind.INCOMPLETE)
        ch = cursor.current
        if ch in allowed:
            return ParseResult(ch, cursor.advance())
        return ParseFailure.of(cursor, ErrorKind.ONE_OF)

    return parse_one_of


def take_while1(chars: frozenset[str], kind: ErrorKind) -> StrParser:
    """Match a maximal non-empty run of characters contained in chars.

    Args:
        chars: Allowed characters
        kind: Mismatch reason reported when the run is empty
    """

    def parse_run(cursor: Cursor) -> ParseResult[str] | ParseFailure:
        end = cursor.skip_while(chars)
        if end.pos == cursor.pos:
            if cursor.is_eof:
                return ParseFailure.of(cursor, ErrorKind.INCOMPLETE)
            return ParseFailure.of(cursor, kind)
        return ParseResult(cursor.slice_to(end.pos), end)

    return parse_run


def take_till1(stop_chars: frozenset[str]) -> StrParser:
    """Match a maximal non-empty run of characters NOT in stop_chars."""

    def parse_till(cursor: Cursor) -> ParseResult[str] | ParseFailure:
        source = cursor.source
        pos = cursor.pos
        while pos < len(source) and source[pos] not in stop_chars:
            pos += 1
        if pos == cursor.pos:
            if cursor.is_eof:
                return ParseFailure.of(cursor, ErrorKind.INCOMPLETE)
            return ParseFailure.of(cursor, ErrorKind.TAKE_TILL)
        return ParseResult(cursor.slice_to(pos), Cursor(source, pos))

    return parse_till


def rest(cursor: Cursor) -> ParseResult[str]:
    """Consume everything that is left (possibly nothing)."""
    end = len(cursor.source)
    return ParseResult(cursor.slice_to(end), Cursor(cursor.source, end))


alpha1: StrParser = take_while1(ALPHA_CHARS, ErrorKind.ALPHA)
digit1: StrParser = take_while1(DIGIT_CHARS, ErrorKind.DIGIT)
alphanumeric1: StrParser = take_while1(ALPHANUMERIC_CHARS, ErrorKind.ALPHANUMERIC)

# Host labels and UUID tokens share this class; reported as alphanumeric.
alphanumeric_hyphen1: StrParser = take_while1(
    ALPHANUMERIC_HYPHEN_CHARS, ErrorKind.ALPHANUMERIC
)


def parse_uuid(cursor: Cursor) -> ParseResult[uuid.UUID] | ParseFailure:
    """Parse an identifier token and validate it as a UUID.

    Consumes a maximal alphanumeric-or-hyphen run; the whole run must be a
    valid UUID or nothing is consumed.

    Example:
        >>> parse_uuid(Cursor("c15a23cd-22d8-4351-b738-396b274599f8 WTF", 0)).remainder
        ' WTF'
    """
    token = alphanumeric_hyphen1(cursor)
    if isinstance(token, ParseFailure):
        return token
    try:
        value = uuid.UUID(token.value)
    except ValueError:
        return ParseFailure.of(cursor, ErrorKind.UUID)
    return ParseResult(value, token.cursor)
