"""Serialize a URI back to text.

Emits the accepted dialect only: lower-case scheme, dotted IPv4, components
in grammar order. Parsing the output yields an equal URI for any URI this
package produced.

Python 3.13+.
"""

from urilex.constants import (
    AUTHORITY_SEPARATOR,
    FRAGMENT_SEPARATOR,
    PASSWORD_SEPARATOR,
    PATH_SEPARATOR,
    PORT_SEPARATOR,
    QUERY_PAIR_SEPARATOR,
    QUERY_SEPARATOR,
    QUERY_VALUE_SEPARATOR,
)

from .model import URI

__all__ = ["serialize"]


def serialize(uri: URI) -> str:
    """Render uri as a string.

    Example:
        >>> serialize(URI(scheme=Scheme.HTTP, host=HostAddress((127, 0, 0, 1)), port=8080))
        'http://127.0.0.1:8080'
    """
    parts = [uri.scheme.literal]

    if uri.authority is not None:
        parts.append(uri.authority.username)
        if uri.authority.password is not None:
            parts.append(PASSWORD_SEPARATOR + uri.authority.password)
        parts.append(AUTHORITY_SEPARATOR)

    parts.append(str(uri.host))

    if uri.port is not None:
        parts.append(f"{PORT_SEPARATOR}{uri.port}")

    if uri.path is not None:
        parts.append(PATH_SEPARATOR + PATH_SEPARATOR.join(uri.path))

    if uri.query is not None:
        pairs = (f"{p.key}{QUERY_VALUE_SEPARATOR}{p.value}" for p in uri.query)
        parts.append(QUERY_SEPARATOR + QUERY_PAIR_SEPARATOR.join(pairs))

    if uri.fragment is not None:
        parts.append(FRAGMENT_SEPARATOR + uri.fragment)

    return "".join(parts)
