from __future__ import annotations

from typing import Mapping

import pytest

from weburl import grammar


def _full_match(rule: grammar.RuleName, text: str) -> Mapping[str, str | None] | None:
    match = grammar.get_regex(rule).match(text)
    if match is None or match.end() != len(text):
        return None
    return match.groupdict()


@pytest.mark.parametrize(
    "rule,text,groups",
    [
        ("scheme", "http:", {"scheme": "http"}),
        ("scheme", "svn+ssh:", {"scheme": "svn+ssh"}),
        ("scheme", "x-custom:", {"scheme": "x-custom"}),
        ("scheme", "example.com:", None),
        ("scheme", "www.example.com:", None),
        ("scheme", "1http:", None),
        ("scheme", ":", None),
        ("scheme", "http", None),
        ("slashes", "//", {}),
        ("userinfo", "user@", {"username": "user", "password": None}),
        ("userinfo", "user:pass@", {"username": "user", "password": "pass"}),
        ("userinfo", "user:@", {"username": "user", "password": ""}),
        ("userinfo", ":pass@", None),
        ("userinfo", "us/er@", None),
        (
            "host",
            "example.com",
            {"host": "example.com", "www": None, "hostname": "example.com", "port": None},
        ),
        (
            "host",
            "www.example.com",
            {"host": "www.example.com", "www": "www.", "hostname": "example.com", "port": None},
        ),
        (
            "host",
            "example.com:8080",
            {"host": "example.com:8080", "www": None, "hostname": "example.com", "port": "8080"},
        ),
        ("host", "www.", {"host": "www.", "www": None, "hostname": "www.", "port": None}),
        ("host", "example.com:http", None),
        ("host", "example.com:", None),
        ("host", "exa mple.com", None),
        ("port", "443", {}),
        ("port", "44a", None),
        ("path-abempty", "/a/b:c", {"path": "/a/b:c"}),
        ("path-abempty", "a/b", None),
        ("path-rootless", "user@example.com", {"path": "user@example.com"}),
        ("path-noscheme", "a/b:c", {"path": "a/b:c"}),
        ("path-noscheme", "/a", {"path": "/a"}),
        ("path-noscheme", "a:b", None),
        ("path-noscheme", "a b", None),
        ("query", "?", {"query": ""}),
        ("query", "?a=1&b=2", {"query": "a=1&b=2"}),
        ("query", "?a#b", None),
        ("fragment", "#", {"fragment": ""}),
        ("fragment", "#a?b=1#c", {"fragment": "a?b=1#c"}),
        ("fragment", "#a b", None),
    ],
)
def test_rule(
    rule: grammar.RuleName, text: str, groups: Mapping[str, str | None] | None
) -> None:
    assert _full_match(rule, text) == groups


@pytest.mark.parametrize(
    "text,end",
    [
        # A port after the colon means it's a host, not a scheme
        ("localhost:8080", None),
        ("localhost:8080/x", None),
        ("http://x", 5),
        ("mailto:80x", 7),
    ],
)
def test_scheme_is_not_a_host_with_port(text: str, end: int | None) -> None:
    match = grammar.get_regex("scheme").match(text)
    if end is None:
        assert match is None
    else:
        assert match is not None and match.end() == end


def test_host_must_end_at_authority_delimiter() -> None:
    assert grammar.get_regex("host").match("a.com@b") is None
    match = grammar.get_regex("host").match("a.com?q")
    assert match is not None and match.group("host") == "a.com"


def test_authority() -> None:
    match = grammar.get_regex("authority").match("u:p@www.a.com:1/x")
    assert match is not None
    assert match.group() == "u:p@www.a.com:1"


def test_get_regex_is_cached() -> None:
    assert grammar.get_regex("host") is grammar.get_regex("host")


def test_get_regex_rejects_unknown_rule() -> None:
    with pytest.raises(ValueError, match="Unknown rule name"):
        grammar.get_regex("bogus")  # type: ignore[arg-type]
