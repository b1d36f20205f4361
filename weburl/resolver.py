"""
Resolution of a URL reference against a base URL.

This follows the browser's ``new URL(input, base)`` in spirit rather than
RFC 3986 section 5.2: the parts the reference supplies replace the base's,
and supplying a part resets the parts of the base that follow it.
"""
from __future__ import annotations

from typing import Union

from weburl.components import Components, Fields
from weburl.exceptions import InvalidUrlError
from weburl.formatter import format_url
from weburl.parser import match

__all__ = ["resolve", "merge"]

BaseInput = Union[str, Components, None]


def resolve(reference: str, base: BaseInput = None) -> Components:
    """
    Resolve ``reference`` against ``base``.

    Without a base, ``reference`` must itself be a URL with a host. With a
    base, the two are merged (see :py:func:`merge`), and the merged URL is
    formatted and parsed again so every part of the result is consistent
    with its ``href``.

    Raises:
        InvalidUrlError: naming the reference or the base, whichever can't
            be parsed or lacks a host.

    >>> resolve("/new/path", "https://a.com/old?x=1#y").href
    'https://a.com/new/path'
    >>> resolve("?x=2", "https://a.com/p?x=1#y").href
    'https://a.com/p?x=2'
    """
    ref = match(reference)

    if base is None:
        if ref.host is None:
            raise InvalidUrlError(reference)
        return ref

    if isinstance(base, Components):
        base_components = base
    else:
        try:
            base_components = match(base)
        except InvalidUrlError as e:
            raise InvalidUrlError(base, role="base") from e

    if base_components.host is None:
        raise InvalidUrlError(base_components.href, role="base")

    merged = merge(ref, base_components)
    return match(format_url(merged), authority="host" in merged)


def merge(reference: Components, base: Components) -> Fields:
    """
    Merge the fields of ``reference`` over those of ``base``.

    Before merging, parts of the base are dropped according to what the
    reference provides. Each rule sees the base as left by the rules before
    it:

    1. a query drops the base's query and fragment
    2. a fragment drops the base's fragment
    3. a host drops the base's whole authority
    4. a path, or a host, drops the base's path, query and fragment

    Empty reference parts don't trigger a rule, but still take precedence
    over the base's value when merged.

    Returns:
        A new fields dict. Neither argument is modified.
    """
    ref_fields = reference.fields()
    base_fields = base.fields()

    def drop(*names: str) -> None:
        for name in names:
            base_fields.pop(name, None)

    if ref_fields.get("query"):
        drop("query", "fragment")

    if ref_fields.get("fragment"):
        drop("fragment")

    has_host = bool(ref_fields.get("host"))
    if has_host:
        drop("host", "port", "username", "password")

    if ref_fields.get("path") or has_host:
        drop("path", "query", "fragment")

    merged = dict(base_fields)
    merged.update(ref_fields)
    return merged
