"""Tests for syntax.parser.rules module.

One class per grammar component. Failure chains are asserted in full
(innermost first) because their exact shape is part of the public contract.
"""

from __future__ import annotations

from urilex.enums import ErrorKind, GrammarContext, Scheme
from urilex.syntax.cursor import Cursor, ParseFailure, ParseResult
from urilex.syntax.model import Authority, HostAddress, HostName, QueryParam
from urilex.syntax.parser.rules import (
    parse_authority,
    parse_fragment,
    parse_host,
    parse_ip,
    parse_ip_number,
    parse_ip_or_host,
    parse_path,
    parse_port,
    parse_query,
    parse_scheme,
)


def _ok[T](result: ParseResult[T] | ParseFailure) -> tuple[str, T]:
    assert isinstance(result, ParseResult), result
    return result.remainder, result.value


def _chain(result: object) -> list[tuple[str, str]]:
    assert isinstance(result, ParseFailure), result
    return [(entry.remainder, str(entry.cause)) for entry in result.entries]


# ============================================================================
# Scheme
# ============================================================================


class TestScheme:
    """scheme ::= "http://" | "https://" (case-insensitive)."""

    def test_https(self) -> None:
        assert _ok(parse_scheme(Cursor("https://yay", 0))) == ("yay", Scheme.HTTPS)

    def test_http(self) -> None:
        assert _ok(parse_scheme(Cursor("http://yay", 0))) == ("yay", Scheme.HTTP)

    def test_upper_case(self) -> None:
        assert _ok(parse_scheme(Cursor("HTTPS://yay", 0))) == ("yay", Scheme.HTTPS)

    def test_unknown_scheme(self) -> None:
        """Chain: literal mismatch, alternation, then scheme."""
        assert _chain(parse_scheme(Cursor("bla://yay", 0))) == [
            ("bla://yay", ErrorKind.TAG),
            ("bla://yay", ErrorKind.ALT),
            ("bla://yay", GrammarContext.SCHEME),
        ]

    def test_truncated_scheme_is_incomplete(self) -> None:
        """Input ending inside the literal is reported as incomplete."""
        chain = _chain(parse_scheme(Cursor("https:/", 0)))

        assert chain[0] == ("https:/", ErrorKind.INCOMPLETE)
        assert chain[-1] == ("https:/", GrammarContext.SCHEME)


# ============================================================================
# Authority
# ============================================================================


class TestAuthority:
    """authority ::= alnum+ ":"? alnum+? "@"."""

    def test_user_and_password(self) -> None:
        assert _ok(parse_authority(Cursor("username:password@zupzup.org", 0))) == (
            "zupzup.org",
            Authority("username", "password"),
        )

    def test_user_only(self) -> None:
        assert _ok(parse_authority(Cursor("username@zupzup.org", 0))) == (
            "zupzup.org",
            Authority("username", None),
        )

    def test_missing_at(self) -> None:
        assert _chain(parse_authority(Cursor("zupzup.org", 0))) == [
            (".org", ErrorKind.TAG),
            ("zupzup.org", GrammarContext.AUTHORITY),
        ]

    def test_missing_username(self) -> None:
        assert _chain(parse_authority(Cursor(":zupzup.org", 0))) == [
            (":zupzup.org", ErrorKind.ALPHANUMERIC),
            (":zupzup.org", GrammarContext.AUTHORITY),
        ]

    def test_malformed_separator(self) -> None:
        assert _chain(parse_authority(Cursor("username:passwordzupzup.org", 0))) == [
            (".org", ErrorKind.TAG),
            ("username:passwordzupzup.org", GrammarContext.AUTHORITY),
        ]

    def test_bare_at(self) -> None:
        assert _chain(parse_authority(Cursor("@zupzup.org", 0))) == [
            ("@zupzup.org", ErrorKind.ALPHANUMERIC),
            ("@zupzup.org", GrammarContext.AUTHORITY),
        ]


# ============================================================================
# Host
# ============================================================================


class TestHost:
    """host ::= (label ".")+ alpha+ | label."""

    def test_bare_label(self) -> None:
        assert _ok(parse_host(Cursor("localhost:8080", 0))) == (
            ":8080",
            HostName("localhost"),
        )

    def test_two_labels(self) -> None:
        assert _ok(parse_host(Cursor("example.org:8080", 0))) == (
            ":8080",
            HostName("example.org"),
        )

    def test_hyphenated_label(self) -> None:
        assert _ok(parse_host(Cursor("some-subsite.example.org:8080", 0))) == (
            ":8080",
            HostName("some-subsite.example.org"),
        )

    def test_non_alpha_top_level_is_left(self) -> None:
        """Only the alphabetic prefix of the last label is taken."""
        assert _ok(parse_host(Cursor("sub.example.com1", 0))) == (
            "1",
            HostName("sub.example.com"),
        )

    def test_dotted_decimal_reads_as_single_label(self) -> None:
        """Why ip must be tried first: host alone stops after one label."""
        assert _ok(parse_host(Cursor("192.168.0.1", 0))) == (
            ".168.0.1",
            HostName("192"),
        )

    def test_invalid_leading_characters(self) -> None:
        assert _chain(parse_host(Cursor("$$$.com", 0))) == [
            ("$$$.com", ErrorKind.ALPHANUMERIC),
            ("$$$.com", ErrorKind.MANY_M_N),
            ("$$$.com", ErrorKind.ALT),
            ("$$$.com", GrammarContext.HOST),
        ]

    def test_leading_dot(self) -> None:
        assert _chain(parse_host(Cursor(".com", 0))) == [
            (".com", ErrorKind.ALPHANUMERIC),
            (".com", ErrorKind.MANY_M_N),
            (".com", ErrorKind.ALT),
            (".com", GrammarContext.HOST),
        ]


# ============================================================================
# IPv4
# ============================================================================


class TestIpNumber:
    """ip_number ::= digit{1,3} with value <= 255."""

    def test_three_digits(self) -> None:
        assert _ok(parse_ip_number(Cursor("192.168", 0))) == (".168", 192)

    def test_truncates_at_three_digits(self) -> None:
        assert _ok(parse_ip_number(Cursor("1444", 0))) == ("4", 144)

    def test_out_of_range(self) -> None:
        assert _chain(parse_ip_number(Cursor("999", 0))) == [
            ("999", ErrorKind.MAP_RES),
            ("999", GrammarContext.IP_NUMBER),
        ]

    def test_not_a_digit(self) -> None:
        assert _chain(parse_ip_number(Cursor("x1", 0))) == [
            ("x1", ErrorKind.ONE_OF),
            ("x1", ErrorKind.MANY_M_N),
            ("x1", GrammarContext.IP_NUMBER),
        ]


class TestIp:
    """ip ::= (ip_number ".") x3 ip_number."""

    def test_address(self) -> None:
        assert _ok(parse_ip(Cursor("192.168.0.1:8080", 0))) == (
            ":8080",
            HostAddress((192, 168, 0, 1)),
        )

    def test_all_zero(self) -> None:
        assert _ok(parse_ip(Cursor("0.0.0.0:8080", 0))) == (
            ":8080",
            HostAddress((0, 0, 0, 0)),
        )

    def test_four_digit_first_group(self) -> None:
        assert _chain(parse_ip(Cursor("1924.168.0.1:8080", 0))) == [
            ("4.168.0.1:8080", ErrorKind.TAG),
            ("1924.168.0.1:8080", ErrorKind.COUNT),
            ("1924.168.0.1:8080", GrammarContext.IP),
        ]

    def test_four_digit_inner_group(self) -> None:
        assert _chain(parse_ip(Cursor("192.168.0000.144:8080", 0))) == [
            ("0.144:8080", ErrorKind.TAG),
            ("192.168.0000.144:8080", ErrorKind.COUNT),
            ("192.168.0000.144:8080", GrammarContext.IP),
        ]

    def test_four_digit_last_group_truncates(self) -> None:
        """The fourth digit of the last group stays in the remainder."""
        assert _ok(parse_ip(Cursor("192.168.0.1444:8080", 0))) == (
            "4:8080",
            HostAddress((192, 168, 0, 144)),
        )

    def test_three_groups(self) -> None:
        assert _chain(parse_ip(Cursor("192.168.0:8080", 0))) == [
            (":8080", ErrorKind.TAG),
            ("192.168.0:8080", ErrorKind.COUNT),
            ("192.168.0:8080", GrammarContext.IP),
        ]

    def test_group_out_of_range(self) -> None:
        assert _chain(parse_ip(Cursor("999.168.0.0:8080", 0))) == [
            ("999.168.0.0:8080", ErrorKind.MAP_RES),
            ("999.168.0.0:8080", GrammarContext.IP_NUMBER),
            ("999.168.0.0:8080", ErrorKind.COUNT),
            ("999.168.0.0:8080", GrammarContext.IP),
        ]

    def test_last_group_out_of_range(self) -> None:
        """The final group is range-checked like the others."""
        chain = _chain(parse_ip(Cursor("1.2.3.256", 0)))

        assert chain == [
            ("256", ErrorKind.MAP_RES),
            ("256", GrammarContext.IP_NUMBER),
            ("1.2.3.256", GrammarContext.IP),
        ]


class TestIpOrHost:
    """ip_or_host ::= ip | host."""

    def test_prefers_address(self) -> None:
        assert _ok(parse_ip_or_host(Cursor("192.168.0.1:8080", 0))) == (
            ":8080",
            HostAddress((192, 168, 0, 1)),
        )

    def test_falls_back_to_name(self) -> None:
        assert _ok(parse_ip_or_host(Cursor("example.org:8080", 0))) == (
            ":8080",
            HostName("example.org"),
        )

    def test_both_fail(self) -> None:
        """Host branch chain is kept, then ALT and the selector tag."""
        assert _chain(parse_ip_or_host(Cursor("$$$", 0))) == [
            ("$$$", ErrorKind.ALPHANUMERIC),
            ("$$$", ErrorKind.MANY_M_N),
            ("$$$", ErrorKind.ALT),
            ("$$$", GrammarContext.HOST),
            ("$$$", ErrorKind.ALT),
            ("$$$", GrammarContext.IP_OR_HOST),
        ]


# ============================================================================
# Port, path, query, fragment
# ============================================================================


class TestPort:
    """port ::= ":" digit+."""

    def test_port(self) -> None:
        assert _ok(parse_port(Cursor(":8080/x", 0))) == ("/x", 8080)

    def test_max_port(self) -> None:
        assert _ok(parse_port(Cursor(":65535", 0))) == ("", 65535)

    def test_out_of_range(self) -> None:
        assert _chain(parse_port(Cursor(":65536", 0))) == [
            (":65536", ErrorKind.MAP_RES),
            (":65536", GrammarContext.PORT),
        ]

    def test_no_colon(self) -> None:
        assert _chain(parse_port(Cursor("/x", 0))) == [
            ("/x", ErrorKind.TAG),
            ("/x", GrammarContext.PORT),
        ]


class TestPath:
    """path ::= "/" (segment "/")* segment?."""

    def test_trailing_slash(self) -> None:
        assert _ok(parse_path(Cursor("/about/", 0))) == ("", ("about",))

    def test_no_trailing_slash(self) -> None:
        assert _ok(parse_path(Cursor("/a/b.html?x=1", 0))) == ("?x=1", ("a", "b.html"))

    def test_bare_slash_is_empty(self) -> None:
        assert _ok(parse_path(Cursor("/", 0))) == ("", ())

    def test_empty_segment_stops_path(self) -> None:
        assert _ok(parse_path(Cursor("//x", 0))) == ("/x", ())

    def test_requires_leading_slash(self) -> None:
        assert _chain(parse_path(Cursor("about", 0))) == [
            ("about", ErrorKind.TAG),
            ("about", GrammarContext.PATH),
        ]


class TestQuery:
    """query ::= "?" key "=" value ("&" key "=" value)*."""

    def test_order_and_duplicates(self) -> None:
        assert _ok(parse_query(Cursor("?a=1&a=2&b=3", 0))) == (
            "",
            (QueryParam("a", "1"), QueryParam("a", "2"), QueryParam("b", "3")),
        )

    def test_stops_at_fragment(self) -> None:
        assert _ok(parse_query(Cursor("?someVal=5#anchor", 0))) == (
            "#anchor",
            (QueryParam("someVal", "5"),),
        )

    def test_dangling_ampersand_left(self) -> None:
        assert _ok(parse_query(Cursor("?a=1&", 0))) == ("&", (QueryParam("a", "1"),))

    def test_key_without_value(self) -> None:
        assert _chain(parse_query(Cursor("?a", 0))) == [
            ("", ErrorKind.INCOMPLETE),
            ("?a", GrammarContext.QUERY),
        ]


class TestFragment:
    """fragment ::= "#" .*."""

    def test_takes_rest(self) -> None:
        assert _ok(parse_fragment(Cursor("#anchor/with?anything", 0))) == (
            "",
            "anchor/with?anything",
        )

    def test_empty_fragment(self) -> None:
        assert _ok(parse_fragment(Cursor("#", 0))) == ("", "")
