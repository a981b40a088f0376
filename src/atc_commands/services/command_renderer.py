"""
Command renderer.

Writes a canonical Command back as text in a given scheme, reads it out as a
plain-language sentence, and prints usage lines for help listings.
"""

from __future__ import annotations

from atc_commands.common.exceptions import SchemeValidationError
from atc_commands.domain.command_types import CanonicalCommandType
from atc_commands.domain.commands import ArgumentValue, Command
from atc_commands.domain.metadata import metadata_for
from atc_commands.domain.parameters import ParameterKind, ParameterSpec
from atc_commands.domain.scheme import CommandPattern, IssueKind, Scheme, SchemeIssue
from atc_commands.services.tokenizer import quote


def _pattern(scheme: Scheme, command_type: CanonicalCommandType) -> CommandPattern:
    pattern = scheme.get_pattern(command_type)
    if pattern is None:
        raise SchemeValidationError(
            scheme.name,
            [SchemeIssue(command_type=command_type, problem=IssueKind.MISSING)],
        )
    return pattern


def format_argument(spec: ParameterSpec, value: ArgumentValue) -> str:
    """Return the written form of one argument value."""
    kind = spec.kind
    if kind is ParameterKind.INTEGER:
        if spec.width:
            return f"{value:0{spec.width}d}"
        return str(value)
    if kind is ParameterKind.DECIMAL:
        text = f"{value:.{spec.places}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    if kind is ParameterKind.ALTITUDE:
        return f"{int(value) // 100:03d}"
    if kind is ParameterKind.TEXT:
        text = str(value)
        if " ".join(text.split()) == text and '"' not in text and "\\" not in text:
            return text
        return quote(text)
    return quote(str(value))


def render(command: Command, scheme: Scheme) -> str:
    """Write ``command`` in ``scheme``; parse() reads the result back unchanged.

    Raises:
        SchemeValidationError: If the scheme has no pattern for the command type
    """
    pattern = _pattern(scheme, command.command_type)
    specs = metadata_for(command.command_type).parameters
    written = [
        format_argument(spec, value) for spec, value in zip(specs, command.arguments)
    ]

    parts: list[str] = []
    if command.target_callsign is not None:
        parts.append(quote(command.target_callsign))
    if pattern.attached and written:
        parts.append(f"{pattern.verb}{written[0]}{pattern.suffix}")
        parts.extend(written[1:])
    else:
        parts.append(pattern.verb)
        parts.extend(written)
    return " ".join(parts)


def usage(command_type: CanonicalCommandType, scheme: Scheme) -> str:
    """Return the verb followed by argument placeholders, e.g. ``FH <heading>``."""
    pattern = _pattern(scheme, command_type)
    placeholders = [spec.placeholder for spec in metadata_for(command_type).parameters]
    if pattern.attached:
        head = f"{pattern.verb}{placeholders[0]}{pattern.suffix}"
        return " ".join([head, *placeholders[1:]])
    return " ".join([pattern.verb, *placeholders])


def _spoken_value(spec: ParameterSpec, value: ArgumentValue) -> str:
    if spec.kind is ParameterKind.ALTITUDE:
        return f"{int(value):,}"
    if spec.kind is ParameterKind.TEXT:
        return str(value)
    return format_argument(spec, value)


def describe(command: Command) -> str:
    """Read a command out in plain language.

    >>> describe(Command(command_type=CanonicalCommandType.RELATIVE_LEFT,
    ...                  target_callsign="UAL123", arguments=(20,)))
    'Turn left 20 degrees'
    """
    entry = command.metadata
    sentence = entry.phrase
    for spec, value in zip(entry.parameters, command.arguments):
        prefix = spec.prefix
        joiner = " "
        if prefix.startswith(","):
            joiner = ", "
            prefix = prefix[1:].strip()
        words = " ".join(
            part for part in (prefix, _spoken_value(spec, value), spec.unit) if part
        )
        sentence = f"{sentence}{joiner}{words}"
    return sentence
