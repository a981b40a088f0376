"""
Longest-match verb index.

Built once per scheme. Holds every exact verb (single or multi-word) keyed
by its first word, and every attached verb keyed by its first character, so a
lookup only touches the candidates that can possibly match the line.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from atc_commands.domain.parse_errors import AmbiguousVerb, ParseError, UnknownVerb
from atc_commands.domain.scheme import CommandPattern, normalize_verb


@dataclass(frozen=True)
class VerbMatch:
    """A resolved verb: the pattern, how many tokens the verb used and any
    argument text found inside the verb token."""

    pattern: CommandPattern
    verb: str
    consumed: int
    attached_text: str | None = None
    score: int = 0


@dataclass(frozen=True)
class _ExactVerb:
    words: tuple[str, ...]
    pattern: CommandPattern
    verb: str


@dataclass(frozen=True)
class _AttachedVerb:
    prefix: str
    suffix: str
    pattern: CommandPattern
    verb: str


class VerbIndex:
    """Resolves the verb at the start of a token list."""

    def __init__(self, patterns: Iterable[CommandPattern]) -> None:
        self._exact: dict[str, list[_ExactVerb]] = defaultdict(list)
        self._attached: dict[str, list[_AttachedVerb]] = defaultdict(list)
        for pattern in patterns:
            for verb in pattern.verbs:
                key = normalize_verb(verb)
                if not key:
                    continue
                if pattern.attached:
                    suffix = pattern.suffix.upper()
                    self._attached[key[0]].append(
                        _AttachedVerb(key, suffix, pattern, verb)
                    )
                    if not pattern.grammar[0].optional:
                        continue
                words = tuple(key.split(" "))
                self._exact[words[0]].append(_ExactVerb(words, pattern, verb))

    def resolve(self, tokens: Sequence[str]) -> VerbMatch | ParseError:
        """Pick the verb that covers the most characters of ``tokens``.

        Returns UnknownVerb when nothing matches and AmbiguousVerb when
        distinct command types tie for the best score.
        """
        if not tokens:
            return UnknownVerb(token="")
        upper = [token.upper() for token in tokens]
        first = upper[0]
        candidates: list[VerbMatch] = []

        for exact in self._exact.get(first, ()):
            size = len(exact.words)
            if tuple(upper[:size]) == exact.words:
                candidates.append(
                    VerbMatch(
                        pattern=exact.pattern,
                        verb=exact.verb,
                        consumed=size,
                        score=sum(len(word) for word in exact.words),
                    )
                )

        original = tokens[0]
        if original:
            # offsets are taken on the typed token; upper() may change lengths
            for attached in self._attached.get(original[0].upper(), ()):
                head, tail = attached.prefix, attached.suffix
                end = len(original) - len(tail)
                if (
                    end > len(head)
                    and original[: len(head)].upper() == head
                    and original[end:].upper() == tail
                ):
                    candidates.append(
                        VerbMatch(
                            pattern=attached.pattern,
                            verb=attached.verb,
                            consumed=1,
                            attached_text=original[len(head) : end],
                            score=len(head) + len(tail),
                        )
                    )

        if not candidates:
            return UnknownVerb(token=tokens[0])
        best = max(match.score for match in candidates)
        winners = [match for match in candidates if match.score == best]
        types = list(dict.fromkeys(match.pattern.command_type for match in winners))
        if len(types) > 1:
            return AmbiguousVerb(token=tokens[0], candidates=tuple(types))
        return winners[0]
