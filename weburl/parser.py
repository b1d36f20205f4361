"""
Splits URL strings into their :py:class:`~weburl.components.Components`.

The matcher is a small recursive-descent walk over the input: at each
position it tries the rule for the next component from
:py:mod:`weburl.grammar`, and gives up if the whole input isn't consumed.
The grammar is deliberately permissive. It accepts absolute URLs, hosts
without a scheme, bare paths and lone queries or fragments alike.
"""
from __future__ import annotations

import dataclasses
import re

from weburl import grammar
from weburl.components import Components
from weburl.exceptions import InvalidUrlError
from weburl.searchparams import SearchParams

__all__ = ["match", "parse"]


class _Matcher(object):
    text: str
    pos: int
    groups: dict[str, str]
    authority: bool

    def __init__(self, text: str, authority: bool = False) -> None:
        self.text = text
        self.pos = 0
        self.groups = {}
        self.authority = authority

    def peek(self, rule: grammar.RuleName) -> re.Match[str] | None:
        return grammar.get_regex(rule).match(self.text, self.pos)

    def commit(self, match: re.Match[str]) -> None:
        self.pos = match.end()
        self.groups.update(
            (name, value)
            for (name, value) in match.groupdict().items()
            if value is not None
        )

    def accept(self, rule: grammar.RuleName) -> bool:
        match = self.peek(rule)
        if match is None:
            return False
        self.commit(match)
        return True

    def accept_scheme(self) -> bool:
        match = self.peek("scheme")
        if match is None:
            return False
        # A known authority only follows a scheme through "//", so "u:pw@h"
        # is userinfo rather than the scheme "u".
        if self.authority and not self.text.startswith("//", match.end()):
            return False
        self.commit(match)
        return True

    def is_authority(self, match: re.Match[str], scheme: bool, slashes: bool) -> bool:
        """
        Decide whether a candidate authority really is one.

        After ``//`` anything host-like is a host, as is any candidate when
        the caller knows the text holds an authority. Otherwise the text must
        be unambiguous: it has userinfo or the www. marker, or (without a
        scheme) an explicit port. Anything else is left to be read as a path,
        so ``page.html`` stays a relative path.
        """
        if slashes or self.authority:
            return True
        if match.group("username") is not None or match.group("www") is not None:
            return True
        return not scheme and match.group("port") is not None

    def run(self) -> Components:
        scheme = self.accept_scheme()
        slashes = self.accept("slashes")

        authority = self.peek("authority")
        if authority is not None and self.is_authority(authority, scheme, slashes):
            self.commit(authority)

        if "host" in self.groups or slashes:
            self.accept("path-abempty")
        elif scheme:
            self.accept("path-rootless")
        else:
            self.accept("path-noscheme")

        self.accept("query")
        self.accept("fragment")

        if self.pos != len(self.text):
            raise InvalidUrlError(self.text)

        return self.build(slashes)

    def build(self, slashes: bool) -> Components:
        groups = self.groups
        port = groups.get("port")
        return Components(
            href=self.text,
            scheme=groups.get("scheme"),
            slashes=slashes,
            username=groups.get("username"),
            password=groups.get("password"),
            host=groups.get("host"),
            www="www" in groups,
            hostname=groups.get("hostname"),
            port=None if port is None else int(port),
            path=groups.get("path"),
            query=groups.get("query"),
            fragment=groups.get("fragment"),
        )


def match(text: str, authority: bool = False) -> Components:
    """
    Match ``text`` against the URL grammar.

    Args:
        text: The URL string.
        authority: If True, ``text`` is known to hold a host, either after
            ``scheme://`` or at its very start, as :py:func:`format_url`
            writes fields that have a host. A host-like start is then read
            as a host even without ``//``.

    Returns:
        The components of ``text``, with ``href`` set to ``text`` itself.

    Raises:
        InvalidUrlError: if ``text`` is empty or isn't entirely matched.

    >>> match("//example.com/a?b").hostname
    'example.com'
    >>> match("page.html").path
    'page.html'
    >>> match("a.com/p", authority=True).host
    'a.com'
    """
    if not text:
        raise InvalidUrlError(text)
    return _Matcher(text, authority).run()


def parse(
    url: str, parse_query: bool = False, slashes_denote_host: bool = False
) -> Components:
    """
    Parse a URL string.

    Args:
        url: The URL. Relative references and host-less URLs are accepted.
        parse_query: If True, ``query_params`` of the result holds the
            decoded query as a :py:class:`~weburl.searchparams.SearchParams`.
        slashes_denote_host: Accepted for compatibility with Node's
            ``url.parse()``. A leading ``//`` always denotes a host here.

    Raises:
        InvalidUrlError: if ``url`` can't be parsed.
    """
    components = match(url)
    if parse_query:
        components = dataclasses.replace(
            components, query_params=SearchParams(components.query or "")
        )
    return components
