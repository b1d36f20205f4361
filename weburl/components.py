from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Union

from typing_extensions import Final

from weburl.searchparams import SearchParams

__all__ = ["Components", "FIELD_NAMES", "Fields"]

# The primitive fields a URL is assembled from. "host" here is the hostname
# including any www. prefix, without the port.
FIELD_NAMES: Final = (
    "scheme",
    "username",
    "password",
    "host",
    "port",
    "path",
    "query",
    "fragment",
)

Fields = Dict[str, Union[str, int]]


@dataclass(frozen=True)
class Components:
    """
    The parts of a parsed URL.

    Absent parts are ``None``; an empty string means the part was present but
    empty, e.g. the query of ``http://a.com/p?``.

    >>> from weburl import parse
    >>> url = parse("https://user:pw@www.example.com:8080/p?q=1#top")
    >>> url.hostname, url.host, url.port
    ('example.com', 'www.example.com:8080', 8080)
    >>> url.origin
    'https://user:pw@www.example.com:8080'
    """

    href: str
    scheme: str | None = None
    slashes: bool = False
    username: str | None = None
    password: str | None = None
    host: str | None = None
    www: bool = False
    hostname: str | None = None
    port: int | None = None
    path: str | None = None
    query: str | None = None
    fragment: str | None = None
    query_params: SearchParams | None = field(default=None, compare=False, repr=False)

    @property
    def protocol(self) -> str | None:
        if self.scheme is None:
            return None
        return self.scheme + ":"

    @property
    def auth(self) -> str | None:
        if self.username is None:
            return None
        if self.password is None:
            return self.username
        return "{0}:{1}".format(self.username, self.password)

    @property
    def origin(self) -> str | None:
        if self.scheme is None or self.host is None:
            return None
        auth = self.auth
        return "".join(
            [
                self.scheme,
                ":",
                "//" if self.slashes else "",
                "" if auth is None else auth + "@",
                self.host,
            ]
        )

    @property
    def pathname(self) -> str:
        return self.path or ""

    @property
    def search(self) -> str:
        return "" if self.query is None else "?" + self.query

    @property
    def hash(self) -> str:
        return "" if self.fragment is None else "#" + self.fragment

    @property
    def uri(self) -> str:
        return self.pathname + self.search

    def fields(self) -> Fields:
        """
        Get the present primitive fields, keyed by :py:data:`FIELD_NAMES`.

        This is the form the resolver merges and the formatter consumes.
        """
        host = None
        if self.hostname is not None:
            host = ("www." if self.www else "") + self.hostname
        values = {
            "scheme": self.scheme,
            "username": self.username,
            "password": self.password,
            "host": host,
            "port": self.port,
            "path": self.path,
            "query": self.query,
            "fragment": self.fragment,
        }
        return {k: v for k, v in values.items() if v is not None}

    def as_dict(self) -> dict[str, Any]:
        """All parts and derived views, suitable for JSON serialisation."""
        return {
            "href": self.href,
            "origin": self.origin,
            "protocol": self.protocol,
            "scheme": self.scheme,
            "slashes": self.slashes,
            "auth": self.auth,
            "username": self.username,
            "password": self.password,
            "host": self.host,
            "www": self.www,
            "hostname": self.hostname,
            "port": self.port,
            "uri": self.uri,
            "pathname": self.pathname,
            "path": self.path,
            "search": self.search,
            "query": self.query,
            "hash": self.hash,
            "fragment": self.fragment,
            "query_params": (
                None if self.query_params is None else self.query_params.to_dict()
            ),
        }
