from __future__ import annotations

from typing import Mapping, Union

from weburl.components import Components

__all__ = ["format_url"]

ComponentsInput = Union[Components, Mapping[str, Union[str, int]]]


def format_url(components: ComponentsInput) -> str:
    """
    Assemble a URL string from its components.

    Accepts a :py:class:`~weburl.components.Components` or a mapping keyed
    like :py:meth:`Components.fields() <weburl.components.Components.fields>`.
    This is plain concatenation: nothing is escaped or normalised.

    When a host is present it is always followed by ``/``, and the path's
    leading slashes are dropped in favour of it. Query and fragment form a
    tail that is joined to the path with ``?``, even when only a fragment is
    present.

    >>> format_url({"scheme": "https", "host": "a.com", "path": "/p", "query": "x=1"})
    'https://a.com/p?x=1'
    >>> format_url({"scheme": "https", "host": "a.com", "path": "/p", "fragment": "f"})
    'https://a.com/p?#f'
    """
    fields = components.fields() if isinstance(components, Components) else components

    scheme = fields.get("scheme")
    username = fields.get("username")
    password = fields.get("password")
    host = fields.get("host")
    port = fields.get("port")
    path = fields.get("path")
    query = fields.get("query")
    fragment = fields.get("fragment")

    out = []

    if scheme:
        out.append("{0}://".format(scheme))

    path = "" if path is None else str(path)
    if host:
        if username:
            out.append(str(username))
            if password is not None:
                out.append(":{0}".format(password))
            out.append("@")
        out.append(str(host))
        if port is not None:
            out.append(":{0}".format(port))
        out.append("/")
        path = path.lstrip("/")
    out.append(path)

    if query is not None or fragment is not None:
        out.append("?")
        out.append("" if query is None else str(query))
        if fragment is not None:
            out.append("#{0}".format(fragment))

    return "".join(out)
