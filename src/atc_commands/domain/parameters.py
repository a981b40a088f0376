"""
Parameter specifications.

A ParameterSpec describes one positional argument of a canonical command:
what kind of token it is, which values are legal and how it is spoken back.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any

from atc_commands.domain.base import ValueObject

Number = int | float


class ParameterKind(str, Enum):
    """Kinds of positional arguments."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    ALTITUDE = "altitude"
    ENUM = "enum"
    IDENTIFIER = "identifier"
    TEXT = "text"


class ParameterSpec(ValueObject):
    """Describes one positional argument.

    Bounds are inclusive. For ``ALTITUDE`` they are expressed in feet while
    the written form is hundreds of feet.
    """

    name: str
    kind: ParameterKind
    optional: bool = False
    minimum: Number | None = None
    maximum: Number | None = None
    width: int | None = None
    places: int = 0
    pattern: str | None = None
    choices: tuple[str, ...] = ()
    prefix: str = ""
    unit: str = ""

    @property
    def bounds(self) -> tuple[Number | None, Number | None]:
        return (self.minimum, self.maximum)

    @property
    def placeholder(self) -> str:
        return f"[{self.name}]" if self.optional else f"<{self.name}>"

    def in_bounds(self, value: Number) -> bool:
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True

    def accepts(self, value: Any) -> bool:
        """Return True when ``value`` is a legal typed value for this parameter."""
        kind = self.kind
        if kind is ParameterKind.INTEGER:
            if not _is_int(value):
                return False
        elif kind is ParameterKind.ALTITUDE:
            if not _is_int(value) or value % 100 != 0:
                return False
        elif kind is ParameterKind.DECIMAL:
            if not (_is_int(value) or isinstance(value, float)):
                return False
            if not math.isfinite(value) or round(value, self.places) != value:
                return False
        elif kind is ParameterKind.ENUM:
            return isinstance(value, str) and value in self.choices
        elif kind is ParameterKind.IDENTIFIER:
            return (
                isinstance(value, str)
                and self.pattern is not None
                and re.fullmatch(self.pattern, value) is not None
            )
        else:
            return isinstance(value, str) and value != "" and value.isprintable()
        return self.in_bounds(value)

    def problems(self) -> list[str]:
        """Return internal inconsistencies of this spec (empty when sound)."""
        found: list[str] = []
        if not self.name.strip():
            found.append("parameter without a name")
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            found.append(f"parameter '{self.name}' has minimum above maximum")
        if self.kind is ParameterKind.ENUM and not self.choices:
            found.append(f"enum parameter '{self.name}' has no choices")
        if self.kind is ParameterKind.IDENTIFIER:
            if not self.pattern:
                found.append(f"identifier parameter '{self.name}' has no pattern")
            else:
                try:
                    re.compile(self.pattern)
                except re.error as exc:
                    found.append(f"parameter '{self.name}' has a bad pattern: {exc}")
        if self.kind is not ParameterKind.DECIMAL and self.places:
            found.append(f"parameter '{self.name}' sets places but is not decimal")
        return found


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
