"""Parser combinators.

Small higher-order functions that compose primitive parsers into grammar
rules. Every parser shares one contract:

    Parser[T] = Callable[[Cursor], ParseResult[T] | ParseFailure]

Failure Chains:
    Combinators extend the failure they propagate instead of replacing it,
    so a caller sees the full path from the outermost rule down to the
    precise mismatch:

    - alt: keeps the LAST branch's chain, then appends ALT
    - many1: appends MANY1 when the first repetition fails
    - many_m_n: appends MANY_M_N where it stopped short of the minimum
    - count: appends COUNT at the position where the repetition started
    - context: appends its grammar tag at the position where it started
    - map_result: replaces a rejected value with a MAP_RES entry

Backtracking:
    Cursors are immutable, so an alternative is retried from the same start
    cursor with no rollback machinery. A repetition that fails partway
    through an item resumes from the end of the last complete item.
"""

from collections.abc import Callable

from urilex.enums import ErrorKind, GrammarContext
from urilex.syntax.cursor import Cursor, ParseFailure, ParseResult

__all__ = [
    "Parser",
    "alt",
    "context",
    "count",
    "many0",
    "many1",
    "many_m_n",
    "map_result",
    "map_value",
    "opt",
    "pair",
    "preceded",
    "recognize",
    "separated_pair",
    "terminated",
]

type Parser[T] = Callable[[Cursor], ParseResult[T] | ParseFailure]


def context[T](tag: GrammarContext, parser: Parser[T]) -> Parser[T]:
    """Name a grammar component in the failure chain."""

    def parse_in_context(cursor: Cursor) -> ParseResult[T] | ParseFailure:
        result = parser(cursor)
        if isinstance(result, ParseFailure):
            return result.append(cursor, tag)
        return result

    return parse_in_context


def alt[T](*parsers: Parser[T]) -> Parser[T]:
    """Try parsers in order; first success wins."""
    if not parsers:
        msg = "alt() requires at least one parser"
        raise ValueError(msg)

    def parse_alt(cursor: Cursor) -> ParseResult[T] | ParseFailure:
        failure = ParseFailure()
        for parser in parsers:
            result = parser(cursor)
            if not isinstance(result, ParseFailure):
                return result
            failure = result
        return failure.append(cursor, ErrorKind.ALT)

    return parse_alt


def opt[T](parser: Parser[T]) -> Parser[T | None]:
    """Make a parser optional: failure becomes None with nothing consumed."""

    def parse_opt(cursor: Cursor) -> ParseResult[T | None]:
        result = parser(cursor)
        if isinstance(result, ParseFailure):
            return ParseResult(None, cursor)
        return ParseResult(result.value, result.cursor)

    return parse_opt


def _repeat[T](
    parser: Parser[T], cursor: Cursor, values: list[T], limit: int | None
) -> Cursor:
    """Apply parser until it fails or limit items are collected."""
    while limit is None or len(values) < limit:
        result = parser(cursor)
        if isinstance(result, ParseFailure):
            break
        # Zero-width match would repeat forever
        if result.cursor.pos == cursor.pos:
            break
        values.append(result.value)
        cursor = result.cursor
    return cursor


def many0[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Zero or more repetitions. Never fails."""

    def parse_many0(cursor: Cursor) -> ParseResult[tuple[T, ...]]:
        values: list[T] = []
        end = _repeat(parser, cursor, values, None)
        return ParseResult(tuple(values), end)

    return parse_many0


def many1[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """One or more repetitions."""

    def parse_many1(cursor: Cursor) -> ParseResult[tuple[T, ...]] | ParseFailure:
        first = parser(cursor)
        if isinstance(first, ParseFailure):
            return first.append(cursor, ErrorKind.MANY1)
        values: list[T] = [first.value]
        end = _repeat(parser, first.cursor, values, None)
        return ParseResult(tuple(values), end)

    return parse_many1


def many_m_n[T](minimum: int, maximum: int, parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Between minimum and maximum repetitions (inclusive).

    Stops after maximum items even when more would match; whatever follows
    is left for the caller.
    """
    if minimum < 0 or maximum < minimum:
        msg = f"many_m_n bounds must satisfy 0 <= minimum <= maximum, got {minimum}, {maximum}"
        raise ValueError(msg)

    def parse_many_m_n(cursor: Cursor) -> ParseResult[tuple[T, ...]] | ParseFailure:
        values: list[T] = []
        while len(values) < maximum:
            result = parser(cursor)
            if isinstance(result, ParseFailure):
                if len(values) < minimum:
                    return result.append(cursor, ErrorKind.MANY_M_N)
                break
            if result.cursor.pos == cursor.pos:
                break
            values.append(result.value)
            cursor = result.cursor
        return ParseResult(tuple(values), cursor)

    return parse_many_m_n


def count[T](parser: Parser[T], times: int) -> Parser[tuple[T, ...]]:
    """Exactly `times` repetitions."""

    def parse_count(cursor: Cursor) -> ParseResult[tuple[T, ...]] | ParseFailure:
        start = cursor
        values: list[T] = []
        for _ in range(times):
            result = parser(cursor)
            if isinstance(result, ParseFailure):
                return result.append(start, ErrorKind.COUNT)
            values.append(result.value)
            cursor = result.cursor
        return ParseResult(tuple(values), cursor)

    return parse_count


def pair[A, B](first: Parser[A], second: Parser[B]) -> Parser[tuple[A, B]]:
    """Two parsers in sequence."""

    def parse_pair(cursor: Cursor) -> ParseResult[tuple[A, B]] | ParseFailure:
        left = first(cursor)
        if isinstance(left, ParseFailure):
            return left
        right = second(left.cursor)
        if isinstance(right, ParseFailure):
            return right
        return ParseResult((left.value, right.value), right.cursor)

    return parse_pair


def separated_pair[A, S, B](
    first: Parser[A], separator: Parser[S], second: Parser[B]
) -> Parser[tuple[A, B]]:
    """first, separator, second; the separator's value is discarded."""
    return pair(terminated(first, separator), second)


def preceded[P, T](prefix: Parser[P], parser: Parser[T]) -> Parser[T]:
    """prefix then parser; keep parser's value."""

    def parse_preceded(cursor: Cursor) -> ParseResult[T] | ParseFailure:
        head = prefix(cursor)
        if isinstance(head, ParseFailure):
            return head
        return parser(head.cursor)

    return parse_preceded


def terminated[T, S](parser: Parser[T], suffix: Parser[S]) -> Parser[T]:
    """parser then suffix; keep parser's value."""

    def parse_terminated(cursor: Cursor) -> ParseResult[T] | ParseFailure:
        body = parser(cursor)
        if isinstance(body, ParseFailure):
            return body
        tail = suffix(body.cursor)
        if isinstance(tail, ParseFailure):
            return tail
        return ParseResult(body.value, tail.cursor)

    return parse_terminated


def map_value[T, U](parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform a successful value."""

    def parse_mapped(cursor: Cursor) -> ParseResult[U] | ParseFailure:
        result = parser(cursor)
        if isinstance(result, ParseFailure):
            return result
        return ParseResult(fn(result.value), result.cursor)

    return parse_mapped


def map_result[T, U](parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform a successful value with a conversion that may reject it.

    A ValueError from fn fails the parse at the starting position.
    """

    def parse_converted(cursor: Cursor) -> ParseResult[U] | ParseFailure:
        result = parser(cursor)
        if isinstance(result, ParseFailure):
            return result
        try:
            value = fn(result.value)
        except ValueError:
            return ParseFailure.of(cursor, ErrorKind.MAP_RES)
        return ParseResult(value, result.cursor)

    return parse_converted


def recognize[T](parser: Parser[T]) -> Parser[str]:
    """Return the consumed input slice instead of the parser's value."""

    def parse_recognized(cursor: Cursor) -> ParseResult[str] | ParseFailure:
        result = parser(cursor)
        if isinstance(result, ParseFailure):
            return result
        return ParseResult(cursor.slice_to(result.cursor.pos), result.cursor)

    return parse_recognized
