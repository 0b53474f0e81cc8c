"""Type guards for parse result narrowing.

Every parse function returns ``ParseResult[T] | ParseFailure``. These guards
let mypy narrow the union without isinstance checks at call sites.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> result = parse_uri("https://example.org/")
    >>> if is_parse_success(result):
    ...     print(result.value.host)
    example.org
"""

from typing import TypeIs

from .cursor import ParseFailure, ParseResult

__all__ = ["is_parse_failure", "is_parse_success"]


def is_parse_failure(result: object) -> TypeIs[ParseFailure]:
    """Type guard: True if result is a ParseFailure."""
    return isinstance(result, ParseFailure)


def is_parse_success(result: object) -> TypeIs[ParseResult[object]]:
    """Type guard: True if result is a ParseResult."""
    return isinstance(result, ParseResult)
