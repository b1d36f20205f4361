from __future__ import annotations

import pytest

from weburl import Components, InvalidUrlError, Url, construct, match, parse


def test_url_properties() -> None:
    url = Url("https://user:pw@www.example.com:8080/a/b?x=1&y=2#top")
    assert url.href == "https://user:pw@www.example.com:8080/a/b?x=1&y=2#top"
    assert url.origin == "https://user:pw@www.example.com:8080"
    assert url.protocol == "https:"
    assert url.scheme == "https"
    assert url.slashes is True
    assert url.auth == "user:pw"
    assert url.username == "user"
    assert url.password == "pw"
    assert url.host == "www.example.com:8080"
    assert url.www is True
    assert url.hostname == "example.com"
    assert url.port == 8080
    assert url.uri == "/a/b?x=1&y=2"
    assert url.pathname == "/a/b"
    assert url.path == "/a/b"
    assert url.search == "?x=1&y=2"
    assert url.query == "x=1&y=2"
    assert url.hash == "#top"
    assert url.fragment == "top"


def test_url_without_optional_parts() -> None:
    url = Url("http://a.com")
    assert url.pathname == ""
    assert url.search == ""
    assert url.hash == ""
    assert url.port is None
    assert url.auth is None
    assert url.origin == "http://a.com"


def test_url_with_base() -> None:
    url = Url("/img.png", "https://example.com/a/b?x=1")
    assert url.href == "https://example.com/img.png"


def test_url_with_url_base() -> None:
    base = Url("https://example.com/a?x=1")
    assert Url("#f", base).href == "https://example.com/a?x=1#f"


def test_url_with_components_base() -> None:
    base = match("https://example.com/a")
    assert Url("?q", base).href == "https://example.com/a?q"


def test_url_requires_host() -> None:
    with pytest.raises(InvalidUrlError):
        Url("/no/host")


def test_url_invalid_base() -> None:
    with pytest.raises(InvalidUrlError) as excinfo:
        Url("rel", "not a url")
    assert excinfo.value.role == "base"


def test_search_params() -> None:
    url = Url("https://a.com/?q=python&page=2&q=url")
    assert url.search_params.get("q") == "python"
    assert url.search_params.get_all("q") == ["python", "url"]
    assert url.search_params is url.search_params


def test_search_params_without_query() -> None:
    assert len(Url("https://a.com/").search_params) == 0


def test_url_is_immutable() -> None:
    url = Url("https://a.com/")
    with pytest.raises(AttributeError):
        url.href = "https://b.com/"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        url.extra = 1  # type: ignore[attr-defined]


def test_components_are_frozen() -> None:
    components = match("https://a.com/")
    with pytest.raises(AttributeError):
        components.host = "b.com"  # type: ignore[misc]


def test_str_and_repr() -> None:
    url = Url("https://a.com/p")
    assert str(url) == "https://a.com/p"
    assert repr(url) == "Url('https://a.com/p')"


def test_construct() -> None:
    components = construct("/q", "https://a.com/p")
    assert isinstance(components, Components)
    assert components == parse("https://a.com/q")
    assert construct("https://a.com/p") == parse("https://a.com/p")


def test_construct_against_scheme_less_base() -> None:
    components = construct("#f", "//a.com/p")
    assert components.href == "a.com/p?#f"
    assert components.host == "a.com"
    assert components.path == "/p"
    assert components.query == ""
    assert components.fragment == "f"

    url = Url("/x", Url("//a.com/p"))
    assert url.hostname == "a.com"
    assert url.pathname == "/x"


def test_static_helpers() -> None:
    assert Url.parse("https://a.com/p?x=1", parse_query=True).query_params is not None
    assert Url.resolve("https://a.com/p?x=1", "#f") == "https://a.com/p?x=1#f"
    assert Url.format(match("https://a.com/p")) == "https://a.com/p"
    assert Url.format({"scheme": "http", "host": "b.com"}) == "http://b.com/"
