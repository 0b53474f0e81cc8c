"""Grammar rules for the URI parser.

This module provides one parsing rule per URI component, composed from the
primitives and combinators, plus the top-level rule that sequences them:

    uri        ::= scheme authority? ip_or_host port? path? query? fragment?
    scheme     ::= "http://" | "https://"                 (case-insensitive)
    authority  ::= alnum+ ":"? alnum+? "@"
    ip_or_host ::= ip | host
    ip         ::= (ip_number ".") x3 ip_number
    ip_number  ::= digit{1,3}                              (value <= 255)
    host       ::= (label ".")+ alpha+ | label
    label      ::= [A-Za-z0-9-]+
    port       ::= ":" digit+                             (value <= 65535)
    path       ::= "/" (segment "/")* segment?
    query      ::= "?" key "=" value ("&" key "=" value)*
    fragment   ::= "#" .*

Ordering:
    ip is tried before host. Dotted-decimal input such as ``192.168.0.1``
    also matches the first host branch's label repetition, and the host rule
    would then settle for the bare label ``192``.

    An ip_number stops after three digits even if more follow; the extra
    digit is left for the next rule. ``192.168.0.1444`` therefore parses as
    192.168.0.144 with ``4`` remaining.

Failure Reporting:
    Required components return their ParseFailure with the component tag
    appended. Optional components are wrapped in opt() at the call site in
    parse_uri, so their failure means "absent" and nothing is consumed.
"""

from urilex.constants import (
    ASCII_DIGITS,
    AUTHORITY_SEPARATOR,
    FRAGMENT_SEPARATOR,
    HTTP_LITERAL,
    HTTPS_LITERAL,
    IPV4_GROUP_MAX_DIGITS,
    IPV4_GROUP_MIN_DIGITS,
    IPV4_GROUPS,
    LABEL_SEPARATOR,
    MAX_OCTET,
    MAX_PORT,
    PASSWORD_SEPARATOR,
    PATH_SEGMENT_CHARS,
    PATH_SEPARATOR,
    PORT_SEPARATOR,
    QUERY_KEY_STOP_CHARS,
    QUERY_PAIR_SEPARATOR,
    QUERY_SEPARATOR,
    QUERY_VALUE_SEPARATOR,
    QUERY_VALUE_STOP_CHARS,
)
from urilex.enums import ErrorKind, GrammarContext, Scheme
from urilex.syntax.cursor import Cursor, ParseFailure, ParseResult
from urilex.syntax.model import (
    URI,
    Authority,
    Host,
    HostAddress,
    HostName,
    Path,
    QueryParam,
    QueryParams,
)
from urilex.syntax.parser.combinators import (
    alt,
    context,
    count,
    many0,
    many1,
    many_m_n,
    map_result,
    map_value,
    opt,
    pair,
    preceded,
    recognize,
    separated_pair,
    terminated,
)
from urilex.syntax.parser.primitives import (
    alpha1,
    alphanumeric1,
    alphanumeric_hyphen1,
    digit1,
    one_of,
    rest,
    tag,
    tag_no_case,
    take_till1,
    take_while1,
)

__all__ = [
    "parse_authority",
    "parse_fragment",
    "parse_host",
    "parse_ip",
    "parse_ip_number",
    "parse_ip_or_host",
    "parse_path",
    "parse_port",
    "parse_query",
    "parse_scheme",
    "parse_uri",
]


# =============================================================================
# Scheme
# =============================================================================

_SCHEME = context(
    GrammarContext.SCHEME,
    map_value(
        alt(tag_no_case(HTTP_LITERAL), tag_no_case(HTTPS_LITERAL)),
        Scheme.from_literal,
    ),
)


def parse_scheme(cursor: Cursor) -> ParseResult[Scheme] | ParseFailure:
    """Parse scheme: "http://" | "https://" (case-insensitive).

    Consumes exactly the matched literal.

    Examples:
        https://yay -> Scheme.HTTPS, remainder "yay"
        HTTP://yay  -> Scheme.HTTP, remainder "yay"
        bla://yay   -> failure [TAG, ALT, "scheme"]
    """
    return _SCHEME(cursor)


# =============================================================================
# Authority
# =============================================================================

_AUTHORITY = context(
    GrammarContext.AUTHORITY,
    map_value(
        terminated(
            separated_pair(
                alphanumeric1,
                opt(tag(PASSWORD_SEPARATOR)),
                opt(alphanumeric1),
            ),
            tag(AUTHORITY_SEPARATOR),
        ),
        lambda parts: Authority(*parts),
    ),
)


def parse_authority(cursor: Cursor) -> ParseResult[Authority] | ParseFailure:
    """Parse user info: user[:password]@

    Consumes through the "@" on success and nothing on failure. Callers treat
    a failure as "no authority present".

    Examples:
        username:password@zupzup.org -> ("username", "password")
        username@zupzup.org          -> ("username", None)
        zupzup.org                   -> failure [TAG at ".org", "authority"]
    """
    return _AUTHORITY(cursor)


# =============================================================================
# Host name
# =============================================================================


def _join_labels(parts: tuple[tuple[str, ...], str]) -> HostName:
    labels, top_level = parts
    return HostName(LABEL_SEPARATOR.join((*labels, top_level)))


_HOST = context(
    GrammarContext.HOST,
    alt(
        map_value(
            pair(many1(terminated(alphanumeric_hyphen1, tag(LABEL_SEPARATOR))), alpha1),
            _join_labels,
        ),
        map_value(
            many_m_n(1, 1, alphanumeric_hyphen1),
            lambda labels: HostName(labels[0]),
        ),
    ),
)


def parse_host(cursor: Cursor) -> ParseResult[HostName] | ParseFailure:
    """Parse host name: (label ".")+ alpha+ | label

    The multi-label form is tried first. Its last label must be alphabetic,
    and a trailing non-alphabetic part is left unconsumed. Otherwise a single
    bare label is taken (e.g. ``localhost``).

    A leading character outside [A-Za-z0-9-] fails immediately; nothing is
    skipped.

    Examples:
        localhost:8080                -> "localhost", remainder ":8080"
        some-subsite.example.org:8080 -> "some-subsite.example.org"
        $$$.com                       -> failure [ALPHANUMERIC, MANY_M_N, ALT, "host"]
    """
    return _HOST(cursor)


# =============================================================================
# IPv4 address
# =============================================================================

_IP_DIGITS = context(
    GrammarContext.IP_NUMBER,
    recognize(many_m_n(IPV4_GROUP_MIN_DIGITS, IPV4_GROUP_MAX_DIGITS, one_of(ASCII_DIGITS))),
)


def parse_ip_number(cursor: Cursor) -> ParseResult[int] | ParseFailure:
    """Parse one IPv4 group: 1-3 ASCII digits with value <= 255.

    At most three digits are consumed; a fourth digit stays in the input.

    Examples:
        192.168 -> 192, remainder ".168"
        1444    -> 144, remainder "4"
        999     -> failure [MAP_RES, "ip number"]
    """
    digits = _IP_DIGITS(cursor)
    if isinstance(digits, ParseFailure):
        return digits
    value = int(digits.value)
    if value > MAX_OCTET:
        return ParseFailure.of(cursor, ErrorKind.MAP_RES).append(
            cursor, GrammarContext.IP_NUMBER
        )
    return ParseResult(value, digits.cursor)


def _to_address(parts: tuple[tuple[int, ...], int]) -> HostAddress:
    head, last = parts
    a, b, c = head
    return HostAddress((a, b, c, last))


_IP = context(
    GrammarContext.IP,
    map_value(
        pair(
            count(terminated(parse_ip_number, tag(LABEL_SEPARATOR)), IPV4_GROUPS - 1),
            parse_ip_number,
        ),
        _to_address,
    ),
)


def parse_ip(cursor: Cursor) -> ParseResult[HostAddress] | ParseFailure:
    """Parse dotted IPv4 address: four ip_numbers separated by three dots.

    Examples:
        192.168.0.1:8080     -> (192, 168, 0, 1), remainder ":8080"
        192.168.0.1444:8080  -> (192, 168, 0, 144), remainder "4:8080"
        1924.168.0.1:8080    -> failure [TAG at "4.168...", COUNT, "ip"]
        192.168.0:8080       -> failure [TAG at ":8080", COUNT, "ip"]
    """
    return _IP(cursor)


_IP_OR_HOST = context(GrammarContext.IP_OR_HOST, alt(parse_ip, parse_host))


def parse_ip_or_host(cursor: Cursor) -> ParseResult[Host] | ParseFailure:
    """Parse host: IPv4 address first, host name only if that fails."""
    return _IP_OR_HOST(cursor)


# =============================================================================
# Port, path, query, fragment
# =============================================================================


def _to_port(digits: str) -> int:
    port = int(digits)
    if port > MAX_PORT:
        msg = f"Port {port} exceeds {MAX_PORT}"
        raise ValueError(msg)
    return port


_PORT = context(
    GrammarContext.PORT,
    map_result(preceded(tag(PORT_SEPARATOR), digit1), _to_port),
)


def parse_port(cursor: Cursor) -> ParseResult[int] | ParseFailure:
    """Parse port: ":" digit+ with value <= 65535."""
    return _PORT(cursor)


_SEGMENT = take_while1(PATH_SEGMENT_CHARS, ErrorKind.ALPHANUMERIC)


def _collect_segments(parts: tuple[tuple[str, ...], str | None]) -> Path:
    segments, last = parts
    return segments if last is None else (*segments, last)


_PATH = context(
    GrammarContext.PATH,
    map_value(
        preceded(
            tag(PATH_SEPARATOR),
            pair(many0(terminated(_SEGMENT, tag(PATH_SEPARATOR))), opt(_SEGMENT)),
        ),
        _collect_segments,
    ),
)


def parse_path(cursor: Cursor) -> ParseResult[Path] | ParseFailure:
    """Parse path: "/" (segment "/")* segment?

    A trailing slash does not produce an empty segment, and a bare "/"
    yields an empty tuple.

    Examples:
        /about/   -> ("about",)
        /a/b.html -> ("a", "b.html")
        /         -> ()
    """
    return _PATH(cursor)


_QUERY_PAIR = map_value(
    separated_pair(
        take_till1(QUERY_KEY_STOP_CHARS),
        tag(QUERY_VALUE_SEPARATOR),
        take_till1(QUERY_VALUE_STOP_CHARS),
    ),
    lambda kv: QueryParam(*kv),
)

_QUERY = context(
    GrammarContext.QUERY,
    map_value(
        preceded(
            tag(QUERY_SEPARATOR),
            pair(_QUERY_PAIR, many0(preceded(tag(QUERY_PAIR_SEPARATOR), _QUERY_PAIR))),
        ),
        lambda parts: (parts[0], *parts[1]),
    ),
)


def parse_query(cursor: Cursor) -> ParseResult[QueryParams] | ParseFailure:
    """Parse query: "?" key "=" value ("&" key "=" value)*

    Pairs keep input order and duplicate keys.

    Example:
        ?a=1&a=2&b=3 -> (("a", "1"), ("a", "2"), ("b", "3"))
    """
    return _QUERY(cursor)


_FRAGMENT = context(GrammarContext.FRAGMENT, preceded(tag(FRAGMENT_SEPARATOR), rest))


def parse_fragment(cursor: Cursor) -> ParseResult[str] | ParseFailure:
    """Parse fragment: "#" followed by the whole remaining input."""
    return _FRAGMENT(cursor)


# =============================================================================
# URI
# =============================================================================


def parse_uri(cursor: Cursor) -> ParseResult[URI] | ParseFailure:
    """Parse a URI.

    Runs each component rule in fixed order on the remainder of the previous
    one. The first failing required component (scheme, ip_or_host) aborts the
    parse with "uri" appended to its chain. There is no retry and no
    alternative top-level grammar.

    Example:
        https://www.zupzup.org:443/about/?someVal=5#anchor
        -> URI(HTTPS, host="www.zupzup.org", port=443, path=("about",),
               query=(("someVal", "5"),), fragment="anchor"), remainder ""
    """
    start = cursor

    scheme = parse_scheme(cursor)
    if isinstance(scheme, ParseFailure):
        return scheme.append(start, GrammarContext.URI)

    authority = opt(parse_authority)(scheme.cursor)

    host = parse_ip_or_host(authority.cursor)
    if isinstance(host, ParseFailure):
        return host.append(start, GrammarContext.URI)

    port = opt(parse_port)(host.cursor)
    path = opt(parse_path)(port.cursor)
    query = opt(parse_query)(path.cursor)
    fragment = opt(parse_fragment)(query.cursor)

    uri = URI(
        scheme=scheme.value,
        authority=authority.value,
        host=host.value,
        port=port.value,
        path=path.value,
        query=query.value,
        fragment=fragment.value,
    )
    return ParseResult(uri, fragment.cursor)
