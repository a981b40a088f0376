"""
Command interpreter.

Front door for a UI or batch caller: resolves the scheme by name on every
call, parses the line and produces the text to echo back.
"""

from __future__ import annotations

from collections.abc import Iterable

from atc_commands.common.logging import get_logger
from atc_commands.config.app_config import EngineConfig
from atc_commands.domain.base import ValueObject
from atc_commands.domain.commands import Command
from atc_commands.domain.metadata import CATALOG
from atc_commands.domain.parse_errors import ParseError
from atc_commands.domain.scheme import Scheme
from atc_commands.services.command_parser import parse
from atc_commands.services.command_renderer import describe, render, usage
from atc_commands.services.scheme_registry import (
    SchemeRegistry,
    create_default_registry,
)
from atc_commands.services.suggestions import Suggestion, suggest

logger = get_logger(__name__)


class Interpretation(ValueObject):
    """Outcome of one submitted line.

    ``text`` is the canonical echo of the command, or the error message.
    """

    line: str
    command: Command | None = None
    error: ParseError | None = None
    text: str

    @property
    def ok(self) -> bool:
        return self.command is not None

    @property
    def readback(self) -> str | None:
        return describe(self.command) if self.command is not None else None


class CommandInterpreter:
    """Parses submitted lines in a named scheme."""

    def __init__(
        self,
        registry: SchemeRegistry | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.registry = registry or create_default_registry(self.config)

    def scheme(self, scheme_name: str | None = None) -> Scheme:
        return self.registry.get(scheme_name or self.config.default_scheme)

    def interpret(
        self,
        line: str,
        known_callsigns: Iterable[str],
        scheme_name: str | None = None,
    ) -> Interpretation:
        """Parse one line against a snapshot of the known callsigns.

        Raises:
            UnknownSchemeError: If ``scheme_name`` is not registered
        """
        scheme = self.scheme(scheme_name)
        result = parse(line, scheme, frozenset(known_callsigns))
        if isinstance(result, ParseError):
            logger.debug(
                "command_rejected",
                scheme=scheme.name,
                line=line,
                error=type(result).__name__,
            )
            return Interpretation(line=line, error=result, text=result.message)

        text = render(result, scheme)
        logger.debug(
            "command_parsed",
            scheme=scheme.name,
            line=line,
            command_type=result.command_type.value,
            callsign=result.target_callsign,
        )
        return Interpretation(line=line, command=result, text=text)

    def suggest(
        self,
        text: str,
        known_callsigns: Iterable[str],
        scheme_name: str | None = None,
    ) -> list[Suggestion]:
        return suggest(
            text,
            self.scheme(scheme_name),
            frozenset(known_callsigns),
            limit=self.config.max_suggestions,
        )

    def help_lines(self, scheme_name: str | None = None) -> list[str]:
        """One line per command: usage in the scheme, display name and help text."""
        scheme = self.scheme(scheme_name)
        rows = [(usage(entry.command_type, scheme), entry) for entry in CATALOG]
        width = max(len(text) for text, _ in rows)
        lines = []
        category = None
        for text, entry in rows:
            if entry.category is not category:
                category = entry.category
                lines.append(f"[{category.value}]")
            lines.append(f"  {text:<{width}}  {entry.display_name}: {entry.help_text}")
        return lines
