"""
Canonical commands.

A Command is the dialect-independent result of a successful parse and the
input of the renderer.
"""

from __future__ import annotations

from pydantic import model_validator

from atc_commands.domain.base import ValueObject
from atc_commands.domain.command_types import CanonicalCommandType
from atc_commands.domain.metadata import CommandMetadataEntry, metadata_for

ArgumentValue = int | float | str


class Command(ValueObject):
    """A canonical command addressed to an aircraft or to the simulation.

    Arguments follow the parameter order of the command's metadata entry.
    Trailing optional arguments are left out rather than stored as ``None``.
    """

    command_type: CanonicalCommandType
    target_callsign: str | None = None
    arguments: tuple[ArgumentValue, ...] = ()

    @model_validator(mode="after")
    def _check_against_metadata(self) -> Command:
        entry = metadata_for(self.command_type)
        if entry.is_global:
            if self.target_callsign is not None:
                raise ValueError(
                    f"{self.command_type.name} addresses the simulation and takes no callsign"
                )
        elif not (self.target_callsign or "").strip():
            raise ValueError(f"{self.command_type.name} requires a target callsign")

        specs = entry.parameters
        if not entry.required_count <= len(self.arguments) <= len(specs):
            raise ValueError(
                f"{self.command_type.name} takes {entry.required_count} to "
                f"{len(specs)} argument(s), got {len(self.arguments)}"
            )
        for index, (spec, value) in enumerate(zip(specs, self.arguments)):
            if not spec.accepts(value):
                raise ValueError(
                    f"{self.command_type.name} argument {index + 1} ({spec.name}) "
                    f"does not accept {value!r}"
                )
        return self

    @property
    def metadata(self) -> CommandMetadataEntry:
        return metadata_for(self.command_type)

    @property
    def is_global(self) -> bool:
        return self.metadata.is_global
