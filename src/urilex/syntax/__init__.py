"""URI syntax package.

Provides the parser, the URI data model, the cursor/result types and
serialization.

Python 3.13+.
"""

from .cursor import Cursor, FailureEntry, ParseFailure, ParseResult
from .guards import is_parse_failure, is_parse_success
from .model import (
    URI,
    Authority,
    Host,
    HostAddress,
    HostName,
    Path,
    QueryParam,
    QueryParams,
)
from .parser import URIParser
from .serializer import serialize

__all__ = [
    "URI",
    "Authority",
    "Cursor",
    "FailureEntry",
    "Host",
    "HostAddress",
    "HostName",
    "ParseFailure",
    "ParseResult",
    "Path",
    "QueryParam",
    "QueryParams",
    "URIParser",
    "is_parse_failure",
    "is_parse_success",
    "parse",
    "serialize",
]


def parse(source: str) -> ParseResult[URI] | ParseFailure:
    """Parse a URI from the start of source.

    Convenience function for URIParser().parse() without a size limit:
    every outcome, success or failure, is returned as a value. Use
    URIParser(max_source_size=...) directly when parsing untrusted input.

    Example:
        >>> from urilex.syntax import parse
        >>> parse("http://localhost").value.host
        HostName(name='localhost')
    """
    parser = URIParser(max_source_size=0)
    return parser.parse(source)
