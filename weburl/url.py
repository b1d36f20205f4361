from __future__ import annotations

from typing import Union

from weburl import formatter, parser, resolver
from weburl.components import Components
from weburl.searchparams import SearchParams

__all__ = ["Url", "construct"]

UrlBase = Union[str, Components, "Url", None]


def construct(input: str, base: UrlBase = None) -> Components:
    """
    Parse ``input``, resolving it against ``base`` if one is given.

    The result always has a host. ``base`` may be a string, the
    :py:class:`~weburl.components.Components` of a parsed URL or a
    :py:class:`Url`.
    """
    if isinstance(base, Url):
        base = base.components
    return resolver.resolve(input, base)


class Url(object):
    """
    An immutable URL object, shaped like the browser's ``URL``.

    >>> url = Url("/img.png?v=2", "https://example.com/a/b")
    >>> url.href
    'https://example.com/img.png?v=2'
    >>> url.search_params.get("v")
    '2'
    """

    __slots__ = ("_components", "_search_params")

    _components: Components
    _search_params: SearchParams | None

    def __init__(self, input: str, base: UrlBase = None) -> None:
        self._components = construct(input, base)
        self._search_params = None

    @property
    def components(self) -> Components:
        return self._components

    @property
    def href(self) -> str:
        return self._components.href

    @property
    def origin(self) -> str | None:
        return self._components.origin

    @property
    def protocol(self) -> str | None:
        return self._components.protocol

    @property
    def scheme(self) -> str | None:
        return self._components.scheme

    @property
    def slashes(self) -> bool:
        return self._components.slashes

    @property
    def auth(self) -> str | None:
        return self._components.auth

    @property
    def username(self) -> str | None:
        return self._components.username

    @property
    def password(self) -> str | None:
        return self._components.password

    @property
    def host(self) -> str | None:
        return self._components.host

    @property
    def www(self) -> bool:
        return self._components.www

    @property
    def hostname(self) -> str | None:
        return self._components.hostname

    @property
    def port(self) -> int | None:
        return self._components.port

    @property
    def uri(self) -> str:
        return self._components.uri

    @property
    def pathname(self) -> str:
        return self._components.pathname

    @property
    def path(self) -> str | None:
        return self._components.path

    @property
    def search(self) -> str:
        return self._components.search

    @property
    def query(self) -> str | None:
        return self._components.query

    @property
    def hash(self) -> str:
        return self._components.hash

    @property
    def fragment(self) -> str | None:
        return self._components.fragment

    @property
    def search_params(self) -> SearchParams:
        if self._search_params is None:
            self._search_params = SearchParams(self._components.query or "")
        return self._search_params

    # Module-level operations, also reachable from the class like the
    # browser's static URL methods

    @staticmethod
    def parse(
        url: str, parse_query: bool = False, slashes_denote_host: bool = False
    ) -> Components:
        return parser.parse(
            url, parse_query=parse_query, slashes_denote_host=slashes_denote_host
        )

    @staticmethod
    def resolve(from_: str, to: str) -> str:
        """Resolve ``to`` against the base ``from_``, returning a string."""
        return resolver.resolve(to, from_).href

    @staticmethod
    def format(components: formatter.ComponentsInput) -> str:
        return formatter.format_url(components)

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return "{0}({1!r})".format(type(self).__name__, self.href)
