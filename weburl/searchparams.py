"""
A read-only counterpart of the browser's ``URLSearchParams``.
"""
from __future__ import annotations

from typing import Iterator, Tuple, Union
from urllib.parse import parse_qsl, urlencode

__all__ = ["SearchParams"]

Pair = Tuple[str, str]


class SearchParams(object):
    """
    The decoded name/value pairs of a query string, in order. Names may
    repeat.

    >>> params = SearchParams("a=1&b=2&a=3")
    >>> params.get("a"), params.get_all("a")
    ('1', ['1', '3'])
    >>> params.to_dict()
    {'a': ['1', '3'], 'b': '2'}
    """

    __slots__ = ("_pairs",)

    _pairs: tuple[Pair, ...]

    def __init__(self, query: str = "") -> None:
        if query.startswith("?"):
            query = query[1:]
        self._pairs = tuple(parse_qsl(query, keep_blank_values=True))

    def get(self, name: str, default: str | None = None) -> str | None:
        for key, value in self._pairs:
            if key == name:
                return value
        return default

    def get_all(self, name: str) -> list[str]:
        return [value for key, value in self._pairs if key == name]

    def keys(self) -> list[str]:
        return list(self)

    def items(self) -> list[Pair]:
        return list(self._pairs)

    def to_dict(self) -> dict[str, Union[str, list[str]]]:
        """
        Single values map to a string, repeated names to a list of their
        values.
        """
        result: dict[str, Union[str, list[str]]] = {}
        for key, value in self._pairs:
            existing = result.get(key)
            if existing is None:
                result[key] = value
            elif isinstance(existing, list):
                existing.append(value)
            else:
                result[key] = [existing, value]
        return result

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        seen = set()
        for key, _ in self._pairs:
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        # Counts pairs, not distinct names, like URLSearchParams.size
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchParams):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __str__(self) -> str:
        return urlencode(self._pairs)

    def __repr__(self) -> str:
        return "{0}({1!r})".format(type(self).__name__, str(self))
