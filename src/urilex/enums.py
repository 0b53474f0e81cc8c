"""Enumerations for urilex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so failure causes compare equal
to their plain-text descriptions.

Python 3.13+.
"""

from enum import StrEnum

from urilex.constants import HTTP_LITERAL, HTTPS_LITERAL


class Scheme(StrEnum):
    """URI scheme. Closed set: only the two web schemes are recognized.

    StrEnum provides automatic string conversion: str(Scheme.HTTPS) == "https"
    """

    HTTP = "http"
    HTTPS = "https"

    @property
    def literal(self) -> str:
        """Canonical prefix for this scheme, e.g. ``"https://"``."""
        return f"{self.value}://"

    @classmethod
    def from_literal(cls, literal: str) -> "Scheme":
        """Map a matched scheme prefix (any case) to its enum member.

        Only the scheme parser calls this, and it only ever matches one of the
        two prefixes. Anything else is a programming error.

        Raises:
            ValueError: If literal is not ``http://`` or ``https://``
        """
        match literal.lower():
            case "http://":
                return cls.HTTP
            case "https://":
                return cls.HTTPS
        msg = f"Unsupported scheme literal {literal!r} (expected {HTTP_LITERAL!r} or {HTTPS_LITERAL!r})"
        raise ValueError(msg)


class ErrorKind(StrEnum):
    """Low-level mismatch reason recorded by a primitive or combinator."""

    TAG = "expected literal tag"
    ALPHANUMERIC = "expected alphanumeric"
    ALPHA = "expected alphabetic"
    DIGIT = "expected digit"
    ONE_OF = "expected one of the allowed characters"
    TAKE_TILL = "expected at least one character before separator"
    ALT = "expected one of the alternatives"
    MANY1 = "expected at least one repetition"
    MANY_M_N = "expected repetition count within bounds"
    COUNT = "expected valid count of repetitions"
    MAP_RES = "expected value within range"
    UUID = "expected valid UUID"
    INCOMPLETE = "unexpected end of input"


class GrammarContext(StrEnum):
    """Named grammar component, appended to a failure as it unwinds."""

    SCHEME = "scheme"
    AUTHORITY = "authority"
    HOST = "host"
    IP = "ip"
    IP_NUMBER = "ip number"
    IP_OR_HOST = "ip or host"
    PORT = "port"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"
    URI = "uri"


__all__ = [
    "ErrorKind",
    "GrammarContext",
    "Scheme",
]
