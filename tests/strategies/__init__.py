"""Hypothesis strategies for urilex property-based testing.

Usage:
    from tests.strategies import host_names, uris
"""

from .uri import (
    authorities,
    host_addresses,
    host_labels,
    host_names,
    hosts,
    octets,
    paths,
    query_params,
    scheme_literals,
    uris,
)

__all__ = [
    "authorities",
    "host_addresses",
    "host_labels",
    "host_names",
    "hosts",
    "octets",
    "paths",
    "query_params",
    "scheme_literals",
    "uris",
]
