"""DEFENV FILE PURPOSE
Purpose: parse error taxonomy (syntax vs range) shared by parsers and accessors.
Hot path: no (constructed only on parse failure).
Feature flags: none.
Failure mode: n/a.
"""

from __future__ import annotations

SYNTAX = "invalid syntax"
RANGE = "value out of range"


class EnvParseError(ValueError):
    """Present environment text could not be converted to the requested type.

    ``category`` tells syntax problems from magnitude problems; ``detail``
    narrows the syntax case where the grammar allows it (duration units).
    ``name`` is filled in by the accessors and stays ``None`` for direct
    parser calls.
    """

    category = "parse failed"

    def __init__(self, type_name: str, text: str, detail: str | None = None, name: str | None = None):
        self.type_name = type_name
        self.text = text
        self.detail = detail
        self.name = name
        super().__init__(self._message())

    def _message(self) -> str:
        msg = f"parsing {self.text!r} as {self.type_name}: {self.category}"
        if self.detail:
            msg = f"{msg} ({self.detail})"
        if self.name:
            msg = f"{self.name}: {msg}"
        return msg

    def for_variable(self, name: str) -> EnvParseError:
        return type(self)(self.type_name, self.text, self.detail, name=name)


class EnvSyntaxError(EnvParseError):
    category = SYNTAX


class EnvRangeError(EnvParseError):
    category = RANGE
