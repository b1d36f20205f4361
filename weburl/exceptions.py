from __future__ import annotations

from typing_extensions import Literal

InputRole = Literal["input", "base"]


class WebUrlError(Exception):
    pass


class InvalidUrlError(WebUrlError, ValueError):
    """
    Raised when a string can't be parsed as a URL, or when a URL lacks a
    host where one is required.

    Attributes:
        input: The offending string.
        role: ``"base"`` if the string was the base URL of a resolution,
            ``"input"`` otherwise.
    """

    input: str
    role: InputRole

    def __init__(self, input: str, role: InputRole = "input") -> None:
        self.input = input
        self.role = role
        super(InvalidUrlError, self).__init__(self._format_message(input, role))

    @staticmethod
    def _format_message(input: str, role: InputRole) -> str:
        if role == "base":
            return "Invalid base URL: {0!r}".format(input)
        return "Invalid URL input: {0!r}".format(input)
