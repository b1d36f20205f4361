from __future__ import annotations

import json
import sys
from typing import Union, cast

import docopt
from typing_extensions import TypedDict

from weburl import __version__, parser, resolver
from weburl.components import Components
from weburl.exceptions import WebUrlError

# - Assign doc to DOC to keep it if python -OO is used (which strips docstrings)
# - We format spaces into blank lines to work around a bug in docopt-ng's usage
#   parser.
USAGE = """\
usage: weburl [options] <url> [<base>]
       weburl --help\
"""

__doc__ = DOC = f"""
Split a URL into its components, optionally resolving it against a base URL
first.

{USAGE}

options:
    <url>
        The URL to parse. Without <base> it must include a host.
{" "}
    <base>
        A URL with a host to resolve <url> against.
{" "}
    --json
        Print all components and derived values as a JSON object.
{" "}
    --href
        Print only the resulting URL.
{" "}
    --parse-query
        Also decode the query string into name/value pairs.
{" "}
    --traceback
        Print the Python traceback on errors.
{" "}
    --version
        Print the version and exit.
{" "}
    --help, -h
        Show this help.
"""

ParsedArgs = TypedDict(
    "ParsedArgs",
    {
        "<url>": str,
        "<base>": Union[str, None],
        "--json": bool,
        "--href": bool,
        "--parse-query": bool,
        "--traceback": bool,
        "--version": bool,
        "--help": bool,
        "-h": bool,
    },
)

# Components listed in the default output, in URL order
LISTED = (
    "href",
    "origin",
    "scheme",
    "username",
    "password",
    "host",
    "hostname",
    "port",
    "path",
    "query",
    "fragment",
)


def format_listing(components: Components) -> str:
    values = components.as_dict()
    lines = [
        "{0}: {1}".format(name, values[name])
        for name in LISTED
        if values[name] is not None
    ]
    if components.query_params is not None:
        lines += [
            "query[{0}]: {1}".format(name, value)
            for (name, value) in components.query_params.items()
        ]
    return "\n".join(lines)


def _main(args: ParsedArgs) -> None:
    components = resolver.resolve(args["<url>"], args["<base>"])

    if args["--parse-query"]:
        components = parser.parse(components.href, parse_query=True)

    if args["--href"]:
        output = components.href
    elif args["--json"]:
        output = json.dumps(components.as_dict(), indent=2)
    else:
        output = format_listing(components)

    print(output)


def main(argv: list[str] | None = None) -> None:
    try:
        args = cast(ParsedArgs, docopt.docopt(DOC, version=__version__, argv=argv))
    except docopt.DocoptExit as e:
        if e.code:
            # docopt-ng's own messages for bad options are confusing, so print
            # the usage with a short explanation instead.
            print(
                f"""\
weburl couldn't understand the command line options it received. Run again \
with --help for more info.

{USAGE}
""",
                file=sys.stderr,
                end="",
            )
            raise SystemExit(1) from e
        raise e
    try:
        _main(args)
    except WebUrlError as e:
        print(f"fatal: {e}", file=sys.stderr)

        if args["--traceback"]:
            import traceback

            print("\n--traceback on, full traceback follows:\n", file=sys.stderr)
            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    main()
