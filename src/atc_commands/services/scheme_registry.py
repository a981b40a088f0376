from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from atc_commands.common.exceptions import (
    ConfigurationError,
    SchemeValidationError,
    UnknownSchemeError,
)
from atc_commands.domain.command_types import CanonicalCommandType
from atc_commands.domain.metadata import CATALOG, CommandCatalog
from atc_commands.domain.presets import BUILTIN_SCHEMES
from atc_commands.domain.scheme import Scheme, SchemeIssue, validate_scheme

if TYPE_CHECKING:
    from atc_commands.config.app_config import EngineConfig

logger = logging.getLogger(__name__)


def normalize_scheme_name(name: str) -> str:
    """Fold case and drop punctuation so "atc trainer" finds "ATC-Trainer"."""
    return re.sub(r"[^a-z0-9]", "", name.lower())


def _command_type_for(key: CanonicalCommandType | str) -> CanonicalCommandType:
    if isinstance(key, CanonicalCommandType):
        return key
    text = key.strip()
    for command_type in CanonicalCommandType:
        if text.upper() == command_type.name or text.lower() == command_type.value:
            return command_type
    raise ConfigurationError(
        f"Unknown command type '{key}' in scheme customization",
        {"command_type": key},
    )


class SchemeRegistry:
    """Holds every scheme available for parsing and rendering."""

    def __init__(self, catalog: CommandCatalog = CATALOG) -> None:
        self._catalog = catalog
        self._schemes: dict[str, Scheme] = {}
        self._builtin: dict[str, Scheme] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def names(self) -> list[str]:
        """Returns the registered scheme names in registration order."""
        return list(self._schemes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._lookup(name) is not None

    def validate(self, scheme: Scheme) -> list[SchemeIssue]:
        return validate_scheme(scheme, self._catalog)

    def register(self, scheme: Scheme, *, builtin: bool = False) -> None:
        """Registers a scheme after validating it.

        Raises:
            ConfigurationError: If the registry is sealed or the name is taken
            SchemeValidationError: If the scheme is incomplete or ambiguous
        """
        if self._sealed:
            raise ConfigurationError(
                f"Cannot register scheme '{scheme.name}': the registry is sealed",
                {"scheme": scheme.name},
            )
        if not scheme.name.strip():
            raise ConfigurationError("Scheme name must be a non-empty string.")
        existing = self._lookup(scheme.name)
        if existing is not None:
            raise ConfigurationError(
                f"Scheme '{scheme.name}' conflicts with registered scheme '{existing.name}'",
                {"scheme": scheme.name, "existing": existing.name},
            )

        issues = self.validate(scheme)
        if issues:
            logger.error(
                "Rejected command scheme %s with %d issue(s)", scheme.name, len(issues)
            )
            raise SchemeValidationError(scheme.name, issues)

        self._schemes[scheme.name] = scheme
        if builtin:
            self._builtin[scheme.name] = scheme
        logger.info(
            "Registered command scheme %s (%d patterns)",
            scheme.name,
            len(scheme.patterns),
        )

    def seal(self) -> None:
        """Freeze the registry; later registrations fail."""
        self._sealed = True

    def _lookup(self, name: str) -> Scheme | None:
        scheme = self._schemes.get(name)
        if scheme is not None:
            return scheme
        wanted = normalize_scheme_name(name)
        for candidate in self._schemes.values():
            if normalize_scheme_name(candidate.name) == wanted:
                return candidate
        return None

    def get(self, name: str) -> Scheme:
        """Returns the scheme registered under ``name``.

        Raises:
            UnknownSchemeError: If no scheme matches the name
        """
        scheme = self._lookup(name)
        if scheme is None:
            raise UnknownSchemeError(name, self._schemes)
        return scheme

    def customize(
        self,
        base: str,
        name: str,
        verbs: Mapping[CanonicalCommandType | str, Sequence[str]],
    ) -> Scheme:
        """Build a scheme from a registered one with some verb lists replaced.

        The first verb of each list becomes the primary spelling. Grammar,
        suffixes and the callsign rule are inherited from ``base``. The result
        is not registered.

        Raises:
            UnknownSchemeError: If ``base`` is not registered
            ConfigurationError: If a key names no command type or a list is empty
        """
        base_scheme = self.get(base)
        replacements: dict[CanonicalCommandType, tuple[str, ...]] = {}
        for key, spellings in verbs.items():
            command_type = _command_type_for(key)
            cleaned = tuple(" ".join(verb.split()) for verb in spellings)
            if not cleaned:
                raise ConfigurationError(
                    f"No verbs given for {command_type.name} in scheme '{name}'",
                    {"scheme": name, "command_type": command_type.name},
                )
            replacements[command_type] = cleaned

        patterns = tuple(
            pattern.model_copy(
                update={
                    "verb": replacements[pattern.command_type][0],
                    "aliases": replacements[pattern.command_type][1:],
                }
            )
            if pattern.command_type in replacements
            else pattern
            for pattern in base_scheme.patterns
        )
        return Scheme(
            name=name,
            patterns=patterns,
            callsign_position=base_scheme.callsign_position,
        )

    def detect_preset(self, scheme: Scheme) -> str | None:
        """Return the built-in scheme whose primary verbs and grammar ``scheme`` uses."""
        for preset in self._builtin.values():
            if len(preset.pattern_map) != len(scheme.pattern_map):
                continue
            if all(
                (other := scheme.get_pattern(command_type)) is not None
                and other.verb.upper() == pattern.verb.upper()
                and other.grammar == pattern.grammar
                and other.suffix.upper() == pattern.suffix.upper()
                for command_type, pattern in preset.pattern_map.items()
            ):
                return preset.name
        return None


def create_default_registry(config: EngineConfig | None = None) -> SchemeRegistry:
    """Build a sealed registry with the built-in presets and configured schemes.

    Raises:
        SchemeValidationError: If a built-in or configured scheme is invalid
        ConfigurationError: If the configuration refers to unknown names
    """
    registry = SchemeRegistry()
    for scheme in BUILTIN_SCHEMES:
        registry.register(scheme, builtin=True)

    if config is not None:
        for name, custom in config.custom_schemes.items():
            registry.register(registry.customize(custom.base, name, custom.verbs))
        if config.default_scheme not in registry:
            raise UnknownSchemeError(config.default_scheme, registry.names())

    registry.seal()
    return registry
