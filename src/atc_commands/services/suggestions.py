"""
Autocomplete for a partially typed command line.

Offers callsigns while the first word is being typed and verbs once the
aircraft is known. Results are ordered deterministically: callsigns
alphabetically, verbs in the scheme's pattern order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from atc_commands.domain.base import ValueObject
from atc_commands.domain.metadata import metadata_for
from atc_commands.domain.scheme import (
    CallsignPosition,
    CommandPattern,
    Scheme,
    normalize_verb,
)
from atc_commands.services.command_renderer import usage


class SuggestionKind(str, Enum):
    CALLSIGN = "callsign"
    VERB = "verb"


class Suggestion(ValueObject):
    """One completion: what to show and the full line to put in the input box."""

    kind: SuggestionKind
    text: str
    insert_text: str
    description: str = ""


def _verbs(scheme: Scheme, global_only: bool) -> Iterator[tuple[CommandPattern, str]]:
    seen: set[tuple[str, object]] = set()
    for pattern in scheme.patterns:
        if global_only and not metadata_for(pattern.command_type).is_global:
            continue
        for verb in pattern.verbs:
            key = normalize_verb(verb)
            if key and (key, pattern.command_type) not in seen:
                seen.add((key, pattern.command_type))
                yield pattern, key


def _verb_suggestions(
    scheme: Scheme, partial: str, lead: str, global_only: bool
) -> list[Suggestion]:
    found: list[Suggestion] = []
    for pattern, verb in _verbs(scheme, global_only):
        if not verb.startswith(partial):
            continue
        entry = metadata_for(pattern.command_type)
        trailing = " " if entry.takes_arguments and not pattern.attached else ""
        found.append(
            Suggestion(
                kind=SuggestionKind.VERB,
                text=verb,
                insert_text=f"{lead}{verb}{trailing}",
                description=f"{entry.display_name}: {usage(pattern.command_type, scheme)}",
            )
        )
    return found


def suggest(
    text: str,
    scheme: Scheme,
    known_callsigns: Iterable[str],
    limit: int = 10,
) -> list[Suggestion]:
    """Return up to ``limit`` completions for the partially typed ``text``."""
    words = text.split()
    if not words or limit <= 0:
        return []
    ends_with_space = text[-1].isspace()
    known = {
        callsign.upper(): callsign
        for callsign in known_callsigns
        if isinstance(callsign, str)
    }
    global_only = scheme.callsign_position is CallsignPosition.LEADING

    first = words[0].upper()
    if len(words) == 1 and not ends_with_space:
        results = [
            Suggestion(
                kind=SuggestionKind.CALLSIGN,
                text=known[key],
                insert_text=f"{known[key]} ",
                description="Aircraft",
            )
            for key in sorted(known)
            if key.startswith(first)
        ]
        results.extend(_verb_suggestions(scheme, first, "", global_only))
        return results[:limit]

    callsign = known.get(first)
    if callsign is None:
        return []

    typed = " ".join(words[1:]).upper()
    complete = {verb for _, verb in _verbs(scheme, False)}
    if ends_with_space:
        if typed in complete:
            return []
        if typed:
            typed += " "
    return _verb_suggestions(scheme, typed, f"{callsign} ", False)[:limit]
