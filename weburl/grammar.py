"""
Regular expressions for each component of a URL.

Rather than one monolithic pattern, every component has its own rule. The
matcher in :py:mod:`weburl.parser` applies them in order at a position in
the input, so each rule can be tested on its own. Rules carry named capture
groups for the parts of the component they recognise.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Mapping

from typing_extensions import Literal as TypingLiteral

from weburl.regexbuilder import (
    Capture,
    Choice,
    End,
    Lookahead,
    Literal,
    NegativeLookahead,
    NotSet,
    OneOrMore,
    Optional,
    Regex,
    Sequence,
    Set,
    ZeroOrMore,
)

ALPHA = Set(("a", "z"), ("A", "Z"))
DIGIT = Set(("0", "9"))
# ASCII control chars and space never appear in a URL
CONTROL = Set((0x00, 0x20), 0x7F)

# Chars ending the authority and the path
authority_delims = Set(*"/?#")
path_delims = Set(*"?#")

scheme_char = Set(ALPHA, DIGIT, *"+-")

userinfo_char = NotSet(CONTROL, authority_delims, *"@[]\\")

hostname_char = NotSet(CONTROL, authority_delims, *":@[]\\")

path_char = NotSet(CONTROL, path_delims)

segment_nc_char = NotSet(CONTROL, path_delims, *":/")

_authority_end = Lookahead(Choice(authority_delims, End()))

port = OneOrMore(DIGIT)

# A scheme has no dots and is not taken when the colon is followed by a
# port, so "localhost:8080" and "example.com:80a" are never schemes
scheme = Sequence(
    Capture(ALPHA, ZeroOrMore(scheme_char), name="scheme"),
    Literal(":"),
    NegativeLookahead(Sequence(port, _authority_end)),
)

slashes = Literal("//")

userinfo = Sequence(
    Capture(OneOrMore(NotSet(userinfo_char, ":")), name="username"),
    Optional(
        Sequence(Literal(":"), Capture(ZeroOrMore(userinfo_char), name="password"))
    ),
    Literal("@"),
)

www = Literal("www.")

host = Sequence(
    Capture(
        Optional(Capture(www, name="www")),
        Capture(OneOrMore(hostname_char), name="hostname"),
        Optional(Sequence(Literal(":"), Capture(port, name="port"))),
        name="host",
    ),
    _authority_end,
)

authority = Sequence(Optional(userinfo), host)

path_abempty = Capture(Literal("/"), ZeroOrMore(path_char), name="path")

path_rootless = Capture(OneOrMore(path_char), name="path")

# A relative path's first segment can't contain ":", or it would be a scheme
path_noscheme = Capture(
    Choice(
        Sequence(Literal("/"), ZeroOrMore(path_char)),
        Sequence(
            OneOrMore(segment_nc_char),
            Optional(Sequence(Literal("/"), ZeroOrMore(path_char))),
        ),
    ),
    name="path",
)

query = Sequence(Literal("?"), Capture(ZeroOrMore(NotSet(CONTROL, "#")), name="query"))

fragment = Sequence(Literal("#"), Capture(ZeroOrMore(NotSet(CONTROL)), name="fragment"))

RuleName = TypingLiteral[
    "scheme",
    "slashes",
    "userinfo",
    "host",
    "authority",
    "port",
    "path-abempty",
    "path-rootless",
    "path-noscheme",
    "query",
    "fragment",
]

_rules: Mapping[RuleName, Regex] = {
    "scheme": scheme,
    "slashes": slashes,
    "userinfo": userinfo,
    "host": host,
    "authority": authority,
    "port": port,
    "path-abempty": path_abempty,
    "path-rootless": path_rootless,
    "path-noscheme": path_noscheme,
    "query": query,
    "fragment": fragment,
}


@lru_cache(maxsize=len(_rules))
def get_regex(rule_name: RuleName) -> re.Pattern[str]:
    """
    Get the compiled regex for a rule. Rules are unanchored; match them with
    ``pattern.match(text, pos)`` at the position the component starts.
    """
    if rule_name not in _rules:
        raise ValueError("Unknown rule name: {0}".format(rule_name))
    return _rules[rule_name].compile()


__all__ = ["get_regex", "RuleName"] + (
    [n for (n, v) in list(locals().items()) if not n.startswith("_") and isinstance(v, Regex)]
)
