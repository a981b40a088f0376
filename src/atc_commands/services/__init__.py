# Services package

from .command_interpreter import CommandInterpreter, Interpretation
from .command_parser import parse
from .command_renderer import describe, format_argument, render, usage
from .scheme_registry import SchemeRegistry, create_default_registry
from .suggestions import Suggestion, SuggestionKind, suggest

__all__ = [
    "CommandInterpreter",
    "Interpretation",
    "SchemeRegistry",
    "Suggestion",
    "SuggestionKind",
    "create_default_registry",
    "describe",
    "format_argument",
    "parse",
    "render",
    "suggest",
    "usage",
]
