"""Shared constants for urilex.

Centralized configuration constants used across the syntax and diagnostics
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Grammar literals: scheme prefixes and component separators
- Character classes: allowed characters per grammar component
- Numeric bounds: IPv4 group and port ranges

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Grammar literals
    "HTTP_LITERAL",
    "HTTPS_LITERAL",
    "AUTHORITY_SEPARATOR",
    "PASSWORD_SEPARATOR",
    "LABEL_SEPARATOR",
    "PORT_SEPARATOR",
    "PATH_SEPARATOR",
    "QUERY_SEPARATOR",
    "QUERY_PAIR_SEPARATOR",
    "QUERY_VALUE_SEPARATOR",
    "FRAGMENT_SEPARATOR",
    # Character classes
    "ASCII_DIGITS",
    "ASCII_LETTERS",
    "PATH_SEGMENT_CHARS",
    "QUERY_KEY_STOP_CHARS",
    "QUERY_VALUE_STOP_CHARS",
    # Numeric bounds
    "IPV4_GROUPS",
    "IPV4_GROUP_MIN_DIGITS",
    "IPV4_GROUP_MAX_DIGITS",
    "MAX_OCTET",
    "MAX_PORT",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum accepted source length in characters. Browsers cap URLs well below
# this; anything larger is rejected before parsing starts.
MAX_SOURCE_SIZE: int = 64 * 1024

# ============================================================================
# GRAMMAR LITERALS
# ============================================================================

# Scheme prefixes, matched case-insensitively and tried in this order.
HTTP_LITERAL: str = "http://"
HTTPS_LITERAL: str = "https://"

AUTHORITY_SEPARATOR: str = "@"
PASSWORD_SEPARATOR: str = ":"
LABEL_SEPARATOR: str = "."
PORT_SEPARATOR: str = ":"
PATH_SEPARATOR: str = "/"
QUERY_SEPARATOR: str = "?"
QUERY_PAIR_SEPARATOR: str = "&"
QUERY_VALUE_SEPARATOR: str = "="
FRAGMENT_SEPARATOR: str = "#"

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII only: str.isdigit()/str.isalpha() accept Unicode digits and letters
# that the grammar does not.
ASCII_DIGITS: str = "0123456789"
ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# RFC 3986 unreserved characters.
PATH_SEGMENT_CHARS: frozenset[str] = frozenset(ASCII_LETTERS + ASCII_DIGITS + "-._~")

QUERY_KEY_STOP_CHARS: frozenset[str] = frozenset("=&#")
QUERY_VALUE_STOP_CHARS: frozenset[str] = frozenset("&#")

# ============================================================================
# NUMERIC BOUNDS
# ============================================================================

IPV4_GROUPS: int = 4
IPV4_GROUP_MIN_DIGITS: int = 1
IPV4_GROUP_MAX_DIGITS: int = 3
MAX_OCTET: int = 0xFF
MAX_PORT: int = 0xFFFF
