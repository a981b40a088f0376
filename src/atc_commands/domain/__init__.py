# Domain package

from .command_types import CanonicalCommandType, all_command_types
from .commands import ArgumentValue, Command
from .metadata import CATALOG, CommandCatalog, CommandMetadataEntry, metadata_for
from .parameters import ParameterKind, ParameterSpec
from .parse_errors import (
    AmbiguousVerb,
    ArgumentOutOfRange,
    EmptyInput,
    MalformedArgument,
    MalformedReason,
    MissingArgument,
    ParseError,
    UnbalancedQuote,
    UnknownCallsign,
    UnknownVerb,
)
from .scheme import (
    ArgumentSlot,
    CallsignPosition,
    CommandPattern,
    IssueKind,
    Scheme,
    SchemeIssue,
    pattern_for,
    validate_scheme,
)

__all__ = [
    "CATALOG",
    "AmbiguousVerb",
    "ArgumentOutOfRange",
    "ArgumentSlot",
    "ArgumentValue",
    "CallsignPosition",
    "CanonicalCommandType",
    "Command",
    "CommandCatalog",
    "CommandMetadataEntry",
    "CommandPattern",
    "EmptyInput",
    "IssueKind",
    "MalformedArgument",
    "MalformedReason",
    "MissingArgument",
    "ParameterKind",
    "ParameterSpec",
    "ParseError",
    "Scheme",
    "SchemeIssue",
    "UnbalancedQuote",
    "UnknownCallsign",
    "UnknownVerb",
    "all_command_types",
    "metadata_for",
    "pattern_for",
    "validate_scheme",
]
