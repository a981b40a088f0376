"""
Command schemes.

A scheme is a named dialect: for every canonical command type it holds the
verb(s) and argument grammar used to read and write that command.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Mapping
from enum import Enum
from functools import cached_property
from types import MappingProxyType
from typing import TYPE_CHECKING

from atc_commands.domain.base import ValueObject
from atc_commands.domain.command_types import CanonicalCommandType, all_command_types
from atc_commands.domain.metadata import CATALOG, CommandCatalog
from atc_commands.domain.parameters import ParameterKind

if TYPE_CHECKING:
    from atc_commands.domain.verb_index import VerbIndex


class CallsignPosition(str, Enum):
    """Where the addressed aircraft appears in a command line."""

    LEADING = "leading"
    ANYWHERE = "anywhere"


class ArgumentSlot(ValueObject):
    """One token-extraction rule of a pattern's grammar."""

    kind: ParameterKind
    optional: bool = False
    attached: bool = False


def normalize_verb(text: str) -> str:
    """Upper-case a verb and collapse inner whitespace."""
    return " ".join(text.upper().split())


class CommandPattern(ValueObject):
    """How one canonical command is written in one scheme.

    ``verb`` is the primary spelling used when rendering; ``aliases`` are
    accepted when parsing. When the first grammar slot is attached the
    argument is written inside the verb token, closed by ``suffix``
    (``T20L``).
    """

    command_type: CanonicalCommandType
    verb: str
    aliases: tuple[str, ...] = ()
    grammar: tuple[ArgumentSlot, ...] = ()
    suffix: str = ""

    @property
    def verbs(self) -> tuple[str, ...]:
        return (self.verb, *self.aliases)

    @property
    def attached(self) -> bool:
        return bool(self.grammar) and self.grammar[0].attached

    def signatures(self) -> tuple[str, ...]:
        """Return the verb shapes this pattern claims inside its scheme.

        A spaced verb claims its own text. An attached verb claims
        ``VERB{}SUFFIX`` and, when the argument is optional, the bare verb too.
        """
        suffix = self.suffix.upper()
        found: list[str] = []
        for verb in self.verbs:
            key = normalize_verb(verb)
            if self.attached:
                found.append(f"{key}{{}}{suffix}")
                if self.grammar[0].optional:
                    found.append(key)
            else:
                found.append(key)
        return tuple(found)


def pattern_for(
    command_type: CanonicalCommandType,
    verb: str,
    *aliases: str,
    attached: bool = False,
    suffix: str = "",
    catalog: CommandCatalog = CATALOG,
) -> CommandPattern:
    """Build a pattern whose grammar follows the catalog's parameter specs."""
    specs = catalog.get(command_type).parameters
    grammar = tuple(
        ArgumentSlot(
            kind=spec.kind,
            optional=spec.optional,
            attached=attached and index == 0,
        )
        for index, spec in enumerate(specs)
    )
    return CommandPattern(
        command_type=command_type,
        verb=verb,
        aliases=aliases,
        grammar=grammar,
        suffix=suffix,
    )


class Scheme(ValueObject):
    """A complete, named command dialect."""

    name: str
    patterns: tuple[CommandPattern, ...]
    callsign_position: CallsignPosition = CallsignPosition.LEADING

    @cached_property
    def pattern_map(self) -> Mapping[CanonicalCommandType, CommandPattern]:
        by_type: dict[CanonicalCommandType, CommandPattern] = {}
        for pattern in self.patterns:
            by_type.setdefault(pattern.command_type, pattern)
        return MappingProxyType(by_type)

    @cached_property
    def verb_index(self) -> VerbIndex:
        from atc_commands.domain.verb_index import VerbIndex

        return VerbIndex(self.patterns)

    def get_pattern(self, command_type: CanonicalCommandType) -> CommandPattern | None:
        return self.pattern_map.get(command_type)


class IssueKind(str, Enum):
    """Problems a scheme validation can report."""

    MISSING = "missing"
    DUPLICATE_PATTERN = "duplicate-pattern"
    EMPTY_VERB = "empty-verb"
    DUPLICATE_VERB = "duplicate-verb"
    GRAMMAR_MISMATCH = "grammar-mismatch"


class SchemeIssue(ValueObject):
    """One validation finding, always naming the offending command type."""

    command_type: CanonicalCommandType
    problem: IssueKind
    detail: str = ""

    def __str__(self) -> str:
        text = f"{self.command_type.name}: {self.problem.value}"
        return f"{text} ({self.detail})" if self.detail else text


def validate_scheme(
    scheme: Scheme, catalog: CommandCatalog = CATALOG
) -> list[SchemeIssue]:
    """Check completeness, verb sanity and grammar consistency of a scheme."""
    issues: list[SchemeIssue] = []
    counts = Counter(pattern.command_type for pattern in scheme.patterns)
    for command_type in all_command_types():
        if counts[command_type] == 0:
            issues.append(SchemeIssue(command_type=command_type, problem=IssueKind.MISSING))
        elif counts[command_type] > 1:
            issues.append(
                SchemeIssue(
                    command_type=command_type,
                    problem=IssueKind.DUPLICATE_PATTERN,
                    detail=f"{counts[command_type]} patterns",
                )
            )

    claimed: dict[str, set[CanonicalCommandType]] = defaultdict(set)
    for pattern in scheme.patterns:
        command_type = pattern.command_type
        if any(not verb.strip() for verb in pattern.verbs):
            issues.append(SchemeIssue(command_type=command_type, problem=IssueKind.EMPTY_VERB))
            continue

        signatures = pattern.signatures()
        repeated = sorted(s for s, n in Counter(signatures).items() if n > 1)
        if repeated:
            issues.append(
                SchemeIssue(
                    command_type=command_type,
                    problem=IssueKind.DUPLICATE_VERB,
                    detail=f"{', '.join(repeated)} repeated within the pattern",
                )
            )
        for signature in signatures:
            claimed[signature].add(command_type)

        if command_type in catalog:
            for problem in catalog.check_pattern(pattern):
                issues.append(
                    SchemeIssue(
                        command_type=command_type,
                        problem=IssueKind.GRAMMAR_MISMATCH,
                        detail=problem,
                    )
                )

    order = {t: i for i, t in enumerate(all_command_types())}
    for signature, owners in sorted(claimed.items()):
        if len(owners) < 2:
            continue
        for command_type in sorted(owners, key=order.__getitem__):
            others = ", ".join(
                o.name for o in sorted(owners, key=order.__getitem__) if o != command_type
            )
            issues.append(
                SchemeIssue(
                    command_type=command_type,
                    problem=IssueKind.DUPLICATE_VERB,
                    detail=f"'{signature}' also used by {others}",
                )
            )

    issues.sort(key=lambda issue: order[issue.command_type])
    return issues
