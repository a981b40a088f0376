"""
Parse error values.

The parser never raises for bad input. It returns one of these frozen
variants instead; each carries enough detail for a precise message.
"""

from __future__ import annotations

from enum import Enum

from atc_commands.domain.base import ValueObject
from atc_commands.domain.command_types import CanonicalCommandType
from atc_commands.domain.parameters import Number


class MalformedReason(str, Enum):
    """Why a token could not be converted to an argument value."""

    NOT_NUMERIC = "not-numeric"
    NOT_HUNDREDS = "not-hundreds"
    PRECISION = "precision"
    INVALID_FORMAT = "invalid-format"
    UNKNOWN_CHOICE = "unknown-choice"
    UNEXPECTED = "unexpected-argument"
    EMPTY = "empty"
    TOO_LONG = "too-long"


_REASON_TEXT = {
    MalformedReason.NOT_NUMERIC: "is not a number",
    MalformedReason.NOT_HUNDREDS: "is not a whole number of hundreds of feet",
    MalformedReason.PRECISION: "has too many decimal places",
    MalformedReason.INVALID_FORMAT: "has an invalid format",
    MalformedReason.UNKNOWN_CHOICE: "is not one of the accepted values",
    MalformedReason.UNEXPECTED: "was not expected",
    MalformedReason.EMPTY: "is empty",
    MalformedReason.TOO_LONG: "has too many digits",
}


class ParseError(ValueObject):
    """Base class of every parse failure."""

    @property
    def message(self) -> str:
        raise NotImplementedError


class UnknownCallsign(ParseError):
    token: str

    @property
    def message(self) -> str:
        return f"Unknown callsign '{self.token}'"


class UnknownVerb(ParseError):
    token: str

    @property
    def message(self) -> str:
        if not self.token:
            return "Missing command"
        return f"Unknown command '{self.token}'"


class AmbiguousVerb(ParseError):
    token: str
    candidates: tuple[CanonicalCommandType, ...]

    @property
    def message(self) -> str:
        names = ", ".join(candidate.name for candidate in self.candidates)
        return f"Command '{self.token}' is ambiguous between {names}"


class MalformedArgument(ParseError):
    index: int
    reason: MalformedReason
    token: str = ""

    @property
    def message(self) -> str:
        return f"Argument {self.index + 1} '{self.token}' {_REASON_TEXT[self.reason]}"


class ArgumentOutOfRange(ParseError):
    index: int
    bounds: tuple[Number | None, Number | None]
    value: Number

    @property
    def message(self) -> str:
        low, high = self.bounds
        if low is not None and high is not None:
            expected = f"between {low} and {high}"
        elif low is not None:
            expected = f"at least {low}"
        else:
            expected = f"at most {high}"
        return f"Argument {self.index + 1} value {self.value} must be {expected}"


class MissingArgument(ParseError):
    index: int
    name: str

    @property
    def message(self) -> str:
        return f"Missing argument {self.index + 1} ({self.name})"


class EmptyInput(ParseError):
    @property
    def message(self) -> str:
        return "Empty command"


class UnbalancedQuote(ParseError):
    text: str

    @property
    def message(self) -> str:
        return "Unbalanced quote in command"
