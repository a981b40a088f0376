# ATC command scheme engine

from atc_commands.domain.command_types import CanonicalCommandType, all_command_types
from atc_commands.domain.commands import Command
from atc_commands.domain.metadata import metadata_for
from atc_commands.domain.scheme import Scheme
from atc_commands.services.command_interpreter import CommandInterpreter
from atc_commands.services.command_parser import parse
from atc_commands.services.command_renderer import describe, render
from atc_commands.services.scheme_registry import (
    SchemeRegistry,
    create_default_registry,
)

__version__ = "0.1.0"

__all__ = [
    "CanonicalCommandType",
    "Command",
    "CommandInterpreter",
    "Scheme",
    "SchemeRegistry",
    "all_command_types",
    "create_default_registry",
    "describe",
    "metadata_for",
    "parse",
    "render",
]
