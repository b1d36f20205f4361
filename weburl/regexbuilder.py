"""
Nodes the URL component rules in :py:mod:`weburl.grammar` are written with.

A rule such as the optional port after a hostname is a tree of nodes, and
each node knows whether it renders as one expression, so the grammar never
spells out its own non-capturing groups:

>>> Optional(Sequence(Literal(":"), OneOrMore(Set(("0", "9"))))).render()
'(?::[0-9]+)?'
"""
from __future__ import annotations

import re
from abc import abstractmethod, abstractproperty
from typing import Sequence as TypingSequence
from typing import Union

SetItem = Union["Set", "SetRange", int, str, "tuple[int | str, int | str]"]


class Regex:
    @abstractmethod
    def render(self) -> str:
        ...

    def compile(self) -> re.Pattern[str]:
        return re.compile(self.render())

    def is_singular(self) -> bool:
        return False

    def is_expansive(self) -> bool:
        """
        True if rendering this node bare inside a rule would change what its
        neighbours match, as an unwrapped ``http|https`` would.
        """
        return False

    def render_singular(self) -> str:
        """
        Render as one expression, grouping if needed, for use as the operand
        of ``?`` or ``+`` (the ``(?::[0-9]+)?`` of an optional port).
        """
        rendered = self.render()
        if self.is_singular():
            return rendered
        return "(?:{0})".format(rendered)

    def render_non_expansive(self) -> str:
        if self.is_expansive():
            return self.render_singular()
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} -> {str(self)!r}>"


class BaseSequence(Regex):
    expressions: TypingSequence[Regex]

    def __init__(self, *expressions: Regex) -> None:
        assert all(isinstance(e, Regex) for e in expressions), expressions
        self.expressions = expressions

    def is_singular(self) -> bool:
        return len(self.expressions) == 1 and self.expressions[0].is_singular()

    def get_operator(self) -> str:
        return ""

    def render(self) -> str:
        return self.get_operator().join(
            e.render_non_expansive() for e in self.expressions
        )


class Sequence(BaseSequence):
    pass


class Choice(BaseSequence):
    def get_operator(self) -> str:
        return "|"

    def is_expansive(self) -> bool:
        # "/x|seg" next to a query rule would read as "/x" or "seg?q"
        return not self.is_singular()


class Literal(Regex):
    text: str

    def __init__(self, text: str) -> None:
        self.text = text

    def is_singular(self) -> bool:
        return len(self.text) == 1

    def render(self) -> str:
        return re.escape(self.text)


class Capture(Sequence):
    name: str | None

    def __init__(self, *expressions: Regex, name: str | None = None) -> None:
        """
        Capture a URL component.

        Args:
            name: The component name the match is reported under, e.g.
                ``hostname``. Unnamed captures only group.
        """
        super(Capture, self).__init__(*expressions)

        if name is not None and not is_name(name):
            raise ValueError("Invalid capture group name: {0}".format(name))
        self.name = name

    def render(self) -> str:
        expressions = super(Capture, self).render()

        if self.name is not None:
            return "(?P<{0}>{1})".format(self.name, expressions)
        return "({0})".format(expressions)

    def is_singular(self) -> bool:
        return True


class Set(Regex):
    """
    The characters allowed in a component, e.g. ``Set(ALPHA, DIGIT, "+")``.
    Items are single characters or code points, ``(start, end)`` ranges, or
    other sets whose ranges are merged in.
    """

    ranges: list[SetRange]

    def __init__(self, *items: SetItem) -> None:
        if len(items) == 0:
            raise ValueError("empty {0}()".format(type(self).__name__))
        self.ranges = [SetRange.create(i) for i in items if not isinstance(i, Set)]
        self.ranges += [r for s in items if isinstance(s, Set) for r in s.ranges]

    @property
    def prefix(self) -> str:
        return ""

    def render(self) -> str:
        contents = "".join(
            r.render(pos == 0 and not self.prefix) for pos, r in enumerate(self.ranges)
        )
        return "[{0}{1}]".format(self.prefix, contents)

    def is_singular(self) -> bool:
        return True


class NotSet(Set):
    """The characters a component stops at, such as ``/?#`` after a host."""

    @property
    def prefix(self) -> str:
        return "^"


class SetRange(object):
    start: int
    end: int

    def __init__(self, start: int, end: int) -> None:
        if end < start:
            raise ValueError("end < start. start: {0}, end: {1}".format(start, end))
        self.start = start
        self.end = end

    def is_single(self) -> bool:
        return self.start == self.end

    @classmethod
    def create(cls, item: SetRange | int | str | tuple[int | str, int | str]) -> SetRange:
        if isinstance(item, SetRange):
            return item
        if isinstance(item, (int, str)):
            codepoint = cls.get_codepoint(item)
            return SetRange(codepoint, codepoint)
        if len(item) == 2:
            start, end = item
            return SetRange(cls.get_codepoint(start), cls.get_codepoint(end))
        raise ValueError("Don't know how to create a SetRange from: {0!r}".format(item))

    @staticmethod
    def get_codepoint(item: int | str) -> int:
        if isinstance(item, int):
            return item
        return ord(item)

    def render_char(self, code_point: int, is_first: bool) -> str:
        char = chr(code_point)
        if (is_first and char == "^") or char in "\\]-[":
            return "\\" + char
        # Controls and space are excluded from every component; keep them
        # readable in the rendered rules
        if not char.isprintable() or char == " ":
            if code_point <= 0xFF:
                return "\\x{0:02x}".format(code_point)
            return "\\u{0:04x}".format(code_point)
        return char

    def render(self, is_first: bool) -> str:
        if self.is_single():
            return self.render_char(self.start, is_first)
        return "{0}-{1}".format(
            self.render_char(self.start, is_first), self.render_char(self.end, False)
        )


class UnaryOperator(Regex):
    expression: Regex

    def __init__(self, expression: Regex) -> None:
        assert isinstance(expression, Regex), expression
        self.expression = expression

    @abstractproperty
    def operator(self) -> str:
        ...

    def render(self) -> str:
        return "{0}{1}".format(self.expression.render_singular(), self.operator)


class Repeat(UnaryOperator):
    min: int | None
    max: int | None

    def __init__(
        self,
        expression: Regex,
        min: int | None = None,
        max: int | None = None,
        count: int | None = None,
    ) -> None:
        super(Repeat, self).__init__(expression)

        if count is not None:
            assert min is None and max is None
            min = count
            max = count

        assert min is None or min >= 0
        assert max is None or max >= 0
        assert min is None or max is None or min <= max, (min, max)

        self.min = min
        self.max = max

    @property
    def operator(self) -> str:
        if self.min is None and self.max is None:
            return "*"
        elif self.min == 1 and self.max is None:
            return "+"
        elif self.min == 0 and self.max == 1:
            return "?"
        elif self.min == self.max:
            return "{{{0:d}}}".format(self.min)
        elif self.min is None:
            return "{{,{0:d}}}".format(self.max)
        elif self.max is None:
            return "{{{0:d},}}".format(self.min)
        return "{{{0:d},{1:d}}}".format(self.min, self.max)


class ZeroOrMore(Repeat):
    def __init__(self, expression: Regex) -> None:
        super(ZeroOrMore, self).__init__(expression)


class OneOrMore(Repeat):
    def __init__(self, expression: Regex) -> None:
        super(OneOrMore, self).__init__(expression, min=1)


class Optional(Repeat):
    def __init__(self, expression: Regex) -> None:
        super(Optional, self).__init__(expression, min=0, max=1)


class Lookahead(Regex):
    """Checks what follows without consuming it, as a host does for ``/?#``."""

    expression: Regex
    template = "(?={0})"

    def __init__(self, expression: Regex) -> None:
        assert isinstance(expression, Regex), expression
        self.expression = expression

    def render(self) -> str:
        return self.template.format(self.expression.render())

    def is_singular(self) -> bool:
        return True


class NegativeLookahead(Lookahead):
    template = "(?!{0})"


class StandAlone(Regex):
    """Anchors that match a position in the URL, not its characters."""

    @abstractproperty
    def representation(self) -> str:
        ...

    def render(self) -> str:
        return self.representation

    def is_singular(self) -> bool:
        return True


class Start(StandAlone):
    representation = "^"


class End(StandAlone):
    # $ would let "http://a.com\n" through
    representation = r"\Z"


NAME = re.compile(r"^[a-zA-Z_]\w*$")


def is_name(string: str) -> bool:
    """Returns: True if string can name a captured component."""
    return bool(NAME.match(string))
