"""URI data model.

Immutable value types produced by the grammar rules. Every string field is
an exact substring of the parsed input, except HostName.name which is
joined from several labels.

Optional fields are None exactly when their grammar component was absent
from the input, never as an error placeholder.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import NamedTuple, TypeIs

from urilex.constants import IPV4_GROUPS, MAX_OCTET, MAX_PORT
from urilex.enums import Scheme

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Components
    "Authority",
    "HostName",
    "HostAddress",
    "QueryParam",
    # Root
    "URI",
    # Type aliases
    "Host",
    "Path",
    "QueryParams",
]


class Authority(NamedTuple):
    """User info from ``user[:password]@``.

    Attributes:
        username: Non-empty alphanumeric user name
        password: Password, or None if no ``:password`` part was given
    """

    username: str
    password: str | None = None


class QueryParam(NamedTuple):
    """One ``key=value`` pair from the query string."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class HostName:
    """Host given by name, e.g. ``www.example.org`` or ``localhost``."""

    name: str

    def __str__(self) -> str:
        return self.name

    @staticmethod
    def guard(host: object) -> TypeIs["HostName"]:
        """Type guard for HostName."""
        return isinstance(host, HostName)


@dataclass(frozen=True, slots=True)
class HostAddress:
    """Host given as a dotted IPv4 address.

    Attributes:
        octets: Exactly four 8-bit values in written (network) order

    Example:
        >>> str(HostAddress((127, 0, 0, 1)))
        '127.0.0.1'
    """

    octets: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        """Validate address invariants."""
        if len(self.octets) != IPV4_GROUPS:
            msg = f"IPv4 address needs {IPV4_GROUPS} octets, got {len(self.octets)}"
            raise ValueError(msg)
        for octet in self.octets:
            if not 0 <= octet <= MAX_OCTET:
                msg = f"IPv4 octet must be in 0..{MAX_OCTET}, got {octet}"
                raise ValueError(msg)

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self.octets)

    @staticmethod
    def guard(host: object) -> TypeIs["HostAddress"]:
        """Type guard for HostAddress."""
        return isinstance(host, HostAddress)


type Host = HostName | HostAddress
type Path = tuple[str, ...]
type QueryParams = tuple[QueryParam, ...]


@dataclass(frozen=True, slots=True)
class URI:
    """Parsed URI.

    Attributes:
        scheme: http or https
        authority: User info, or None if absent
        host: Host name or IPv4 address
        port: Port number, or None if absent
        path: Path segments in input order, or None if no path was given.
            A bare ``/`` is an empty tuple.
        query: Query pairs in input order (duplicates kept), or None
        fragment: Everything after ``#``, or None if no ``#`` was given
    """

    scheme: Scheme
    host: Host
    authority: Authority | None = None
    port: int | None = None
    path: Path | None = None
    query: QueryParams | None = None
    fragment: str | None = None

    def __post_init__(self) -> None:
        """Validate URI invariants."""
        if self.port is not None and not 0 <= self.port <= MAX_PORT:
            msg = f"Port must be in 0..{MAX_PORT}, got {self.port}"
            raise ValueError(msg)

    def query_values(self, key: str) -> tuple[str, ...]:
        """All values for key, in input order.

        Example:
            >>> uri.query_values("a")  # ?a=1&a=2&b=3
            ('1', '2')
        """
        if self.query is None:
            return ()
        return tuple(param.value for param in self.query if param.key == key)
