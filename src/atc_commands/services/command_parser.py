"""
Command line parser.

Turns one typed line into a canonical Command, or into a ParseError value
that says precisely what is wrong with it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from atc_commands.domain.commands import Command
from atc_commands.domain.metadata import metadata_for
from atc_commands.domain.parse_errors import (
    EmptyInput,
    ParseError,
    UnbalancedQuote,
    UnknownCallsign,
)
from atc_commands.domain.scheme import CallsignPosition, Scheme
from atc_commands.services.argument_parser import CommandArgumentParser
from atc_commands.services.tokenizer import tokenize

logger = logging.getLogger(__name__)

_arguments = CommandArgumentParser()


def _find_callsign(
    tokens: list[str], scheme: Scheme, known: dict[str, str]
) -> tuple[int, str] | None:
    if scheme.callsign_position is CallsignPosition.LEADING:
        candidates = tokens[:1]
    else:
        candidates = tokens
    for position, token in enumerate(candidates):
        callsign = known.get(token.upper())
        if callsign is not None:
            return position, callsign
    return None


def parse(
    line: str, scheme: Scheme, known_callsigns: Iterable[str | None]
) -> Command | ParseError:
    """Parse ``line`` in ``scheme`` against a snapshot of known callsigns.

    Args:
        line: The text the controller typed
        scheme: Dialect to read the line in
        known_callsigns: Aircraft that can currently be addressed; ``None``
            entries are ignored

    Returns:
        The parsed Command, or the ParseError describing the first problem
    """
    try:
        tokens = tokenize(line)
    except ValueError:
        return UnbalancedQuote(text=line)
    if not tokens:
        return EmptyInput()

    known = {
        callsign.upper(): callsign
        for callsign in known_callsigns
        if isinstance(callsign, str)
    }
    found = _find_callsign(tokens, scheme, known)
    if found is None:
        callsign = None
        rest = tokens
    else:
        position, callsign = found
        rest = tokens[:position] + tokens[position + 1 :]

    match = scheme.verb_index.resolve(rest)
    if isinstance(match, ParseError):
        if callsign is None:
            return UnknownCallsign(token=tokens[0])
        return match

    entry = metadata_for(match.pattern.command_type)
    if callsign is None and not entry.is_global:
        return UnknownCallsign(token=tokens[0])

    arguments = _arguments.parse(
        match.pattern, entry, match.attached_text, rest[match.consumed :]
    )
    if isinstance(arguments, ParseError):
        return arguments

    command = Command(
        command_type=entry.command_type,
        target_callsign=None if entry.is_global else callsign,
        arguments=arguments,
    )
    logger.debug(
        "Parsed %r in scheme %s as %s", line, scheme.name, command.command_type.name
    )
    return command
