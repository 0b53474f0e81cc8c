"""urilex - typed parser for web URIs.

Decomposes an http/https URI into scheme, user info, host (name or IPv4),
port, path segments, query pairs and fragment. Failures are returned as
values carrying the chain of grammar components they unwound through.

Public API:
    parse_uri - Parse a URI from the start of a string
    URIParser - Configurable parser (size limit, strict mode)
    serialize_uri - Render a URI back to text
    URI, Scheme, HostName, HostAddress, Authority, QueryParam - Data model
    ParseResult, ParseFailure - Parse outcomes

Exceptions:
    UriError - Base exception class
    UriSyntaxError - Raised by URIParser.parse_complete()

Submodules:
    urilex.syntax.parser.rules - Individual grammar rules (parse_host, parse_ip, ...)
    urilex.syntax.parser.primitives - Leaf parsers, including parse_uuid
    urilex.diagnostics - Diagnostic codes, templates and formatter
"""

from .diagnostics import UriError, UriSyntaxError
from .enums import ErrorKind, GrammarContext, Scheme
from .syntax import (
    URI,
    Authority,
    HostAddress,
    HostName,
    ParseFailure,
    ParseResult,
    QueryParam,
    URIParser,
    is_parse_failure,
    is_parse_success,
)
from .syntax import parse as parse_uri
from .syntax import serialize as serialize_uri

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("urilex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "URI",
    "Authority",
    "ErrorKind",
    "GrammarContext",
    "HostAddress",
    "HostName",
    "ParseFailure",
    "ParseResult",
    "QueryParam",
    "Scheme",
    "URIParser",
    "UriError",
    "UriSyntaxError",
    "__version__",
    "is_parse_failure",
    "is_parse_success",
    "parse_uri",
    "serialize_uri",
]
