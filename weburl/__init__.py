"""
Parse, resolve and format URLs with the object model of the browser's
``URL`` and ``URLSearchParams``.

>>> from weburl import construct, format_url
>>> url = construct("#sec2", "https://a.com/p?x=1#sec1")
>>> url.href
'https://a.com/p?x=1#sec2'
>>> format_url(url)
'https://a.com/p?x=1#sec2'
"""
from __future__ import annotations

from importlib_metadata import version

from weburl.components import Components
from weburl.exceptions import InvalidUrlError, WebUrlError
from weburl.formatter import format_url
from weburl.parser import match, parse
from weburl.resolver import merge, resolve
from weburl.searchparams import SearchParams
from weburl.url import Url, construct

__version__ = version("weburl")

__all__ = [
    "Components",
    "InvalidUrlError",
    "SearchParams",
    "Url",
    "WebUrlError",
    "construct",
    "format_url",
    "match",
    "merge",
    "parse",
    "resolve",
]
