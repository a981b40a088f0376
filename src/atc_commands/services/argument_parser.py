from __future__ import annotations

import re
from collections.abc import Sequence

from atc_commands.domain.commands import ArgumentValue
from atc_commands.domain.metadata import CommandMetadataEntry
from atc_commands.domain.parameters import ParameterKind, ParameterSpec
from atc_commands.domain.parse_errors import (
    ArgumentOutOfRange,
    MalformedArgument,
    MalformedReason,
    MissingArgument,
    ParseError,
)
from atc_commands.domain.scheme import CommandPattern

_INTEGER = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.(\d*))?|\.(\d+))")
_DIGITS = re.compile(r"\d+")
_MAX_DIGITS = 18


class CommandArgumentParser:
    """Extracts and converts the arguments of one command.

    - The attached argument (text inside the verb token) fills slot 0
    - Remaining tokens fill the other slots in order
    - A text parameter takes everything that is left
    - Trailing optional arguments may be left out
    """

    def parse(
        self,
        pattern: CommandPattern,
        entry: CommandMetadataEntry,
        attached_text: str | None,
        tokens: Sequence[str],
    ) -> tuple[ArgumentValue, ...] | ParseError:
        queue = list(tokens)
        values: list[ArgumentValue] = []

        for index, spec in enumerate(entry.parameters):
            token: str | None
            if index == 0 and pattern.attached:
                token = attached_text
            elif spec.kind is ParameterKind.TEXT:
                token = queue[0] if len(queue) == 1 else (" ".join(queue) or None)
                queue.clear()
            else:
                token = queue.pop(0) if queue else None

            if token is None:
                if spec.optional:
                    break
                return MissingArgument(index=index, name=spec.name)

            value = convert_argument(spec, index, token)
            if isinstance(value, ParseError):
                return value
            values.append(value)

        if queue:
            return MalformedArgument(
                index=len(values), reason=MalformedReason.UNEXPECTED, token=queue[0]
            )
        return tuple(values)


def convert_argument(
    spec: ParameterSpec, index: int, token: str
) -> ArgumentValue | ParseError:
    """Convert one token to the typed value ``spec`` describes."""

    def malformed(reason: MalformedReason) -> MalformedArgument:
        return MalformedArgument(index=index, reason=reason, token=token)

    if token == "":
        return malformed(MalformedReason.EMPTY)

    kind = spec.kind
    value: ArgumentValue
    if kind is ParameterKind.INTEGER:
        if not _INTEGER.fullmatch(token):
            return malformed(MalformedReason.NOT_NUMERIC)
        if len(token.lstrip("+-")) > _MAX_DIGITS:
            return malformed(MalformedReason.TOO_LONG)
        value = int(token)
    elif kind is ParameterKind.DECIMAL:
        match = _DECIMAL.fullmatch(token)
        if not match:
            return malformed(MalformedReason.NOT_NUMERIC)
        fraction = match.group(1) or match.group(2) or ""
        if len(fraction.rstrip("0")) > spec.places:
            return malformed(MalformedReason.PRECISION)
        value = float(token)
    elif kind is ParameterKind.ALTITUDE:
        if not _DIGITS.fullmatch(token):
            return malformed(MalformedReason.NOT_NUMERIC)
        if len(token) > _MAX_DIGITS:
            return malformed(MalformedReason.TOO_LONG)
        number = int(token)
        if number < 1000:
            value = number * 100
        elif number % 100:
            return malformed(MalformedReason.NOT_HUNDREDS)
        else:
            value = number
    elif kind is ParameterKind.ENUM:
        value = token.upper()
        if value not in spec.choices:
            return malformed(MalformedReason.UNKNOWN_CHOICE)
        return value
    elif kind is ParameterKind.IDENTIFIER:
        value = token.upper()
        if spec.pattern is None or not re.fullmatch(spec.pattern, value):
            return malformed(MalformedReason.INVALID_FORMAT)
        return value
    else:
        if not token.isprintable():
            return malformed(MalformedReason.INVALID_FORMAT)
        return token

    if not spec.in_bounds(value):
        return ArgumentOutOfRange(index=index, bounds=spec.bounds, value=value)
    return value
