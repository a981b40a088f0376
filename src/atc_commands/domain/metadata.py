"""
Command metadata catalog.

One entry per canonical command type: display name, help text, parameter
specifications and the phrase used for natural-language readback. The
module-level catalog verifies itself on import so an incomplete table stops
the process before any line is parsed.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from atc_commands.common.exceptions import (
    CatalogConsistencyError,
    UnknownCommandTypeError,
)
from atc_commands.domain.base import ValueObject
from atc_commands.domain.command_types import CanonicalCommandType, all_command_types
from atc_commands.domain.parameters import ParameterKind, ParameterSpec

if TYPE_CHECKING:
    from atc_commands.domain.scheme import CommandPattern

logger = logging.getLogger(__name__)

T = CanonicalCommandType


class CommandCategory(str, Enum):
    """Groups used for help listings."""

    HEADING = "heading"
    ALTITUDE_SPEED = "altitude/speed"
    TRANSPONDER = "transponder"
    NAVIGATION = "navigation"
    TOWER = "tower"
    PATTERN = "pattern"
    GROUND = "ground"
    TRACK = "track operations"
    BROADCAST = "broadcast"
    SIM_CONTROL = "sim control"


class CommandMetadataEntry(ValueObject):
    """Descriptive and validation metadata for one canonical command type."""

    command_type: CanonicalCommandType
    display_name: str
    category: CommandCategory
    help_text: str
    phrase: str
    parameters: tuple[ParameterSpec, ...] = ()
    sample: str | None = None
    is_global: bool = False

    @property
    def required_count(self) -> int:
        return sum(1 for spec in self.parameters if not spec.optional)

    @property
    def takes_arguments(self) -> bool:
        return bool(self.parameters)


FIX_PATTERN = r"[A-Z0-9][A-Z0-9./_-]{1,31}"
RUNWAY_PATTERN = r"(0[1-9]|[12][0-9]|3[0-6])[LCR]?"
POSITION_PATTERN = r"[0-9][A-Z0-9]{0,2}"
SQUAWK_PATTERN = r"[0-7]{4}"
APPROACH_PATTERN = r"[A-Z][A-Z0-9]{1,7}"
CALLSIGN_PATTERN = r"[A-Z][A-Z0-9]{1,7}"
SCRATCHPAD_PATTERN = r"[A-Z0-9./+*]{1,4}"


def _heading(*, optional: bool = False, prefix: str = "") -> ParameterSpec:
    return ParameterSpec(
        name="heading",
        kind=ParameterKind.INTEGER,
        minimum=0,
        maximum=359,
        width=3,
        optional=optional,
        prefix=prefix,
    )


def _degrees() -> ParameterSpec:
    return ParameterSpec(
        name="degrees",
        kind=ParameterKind.INTEGER,
        minimum=1,
        maximum=359,
        unit="degrees",
    )


def _altitude(*, optional: bool = False, prefix: str = "") -> ParameterSpec:
    return ParameterSpec(
        name="altitude",
        kind=ParameterKind.ALTITUDE,
        minimum=100,
        maximum=60000,
        optional=optional,
        prefix=prefix,
    )


def _identifier(
    name: str, pattern: str, *, optional: bool = False, prefix: str = ""
) -> ParameterSpec:
    return ParameterSpec(
        name=name,
        kind=ParameterKind.IDENTIFIER,
        pattern=pattern,
        optional=optional,
        prefix=prefix,
    )


def _fix() -> ParameterSpec:
    return _identifier("fix", FIX_PATTERN)


def _runway(*, optional: bool = True) -> ParameterSpec:
    return _identifier("runway", RUNWAY_PATTERN, optional=optional, prefix="runway")


def _position() -> ParameterSpec:
    return _identifier("position", POSITION_PATTERN)


def _entry(
    command_type: CanonicalCommandType,
    display_name: str,
    category: CommandCategory,
    help_text: str,
    phrase: str,
    *parameters: ParameterSpec,
    sample: str | None = None,
    is_global: bool = False,
) -> CommandMetadataEntry:
    return CommandMetadataEntry(
        command_type=command_type,
        display_name=display_name,
        category=category,
        help_text=help_text,
        phrase=phrase,
        parameters=parameters,
        sample=sample,
        is_global=is_global,
    )


C = CommandCategory

# fmt: off
_ENTRIES: tuple[CommandMetadataEntry, ...] = (
    # Heading
    _entry(T.CHANGE_HEADING, "Fly Heading", C.HEADING,
           "Fly the assigned magnetic heading, turning the shorter way.",
           "Fly heading", _heading(), sample="270"),
    _entry(T.TURN_LEFT, "Turn Left", C.HEADING,
           "Turn left onto the assigned heading.",
           "Turn left heading", _heading(), sample="270"),
    _entry(T.TURN_RIGHT, "Turn Right", C.HEADING,
           "Turn right onto the assigned heading.",
           "Turn right heading", _heading(), sample="090"),
    _entry(T.RELATIVE_LEFT, "Relative Left", C.HEADING,
           "Turn left by the given number of degrees.",
           "Turn left", _degrees(), sample="20"),
    _entry(T.RELATIVE_RIGHT, "Relative Right", C.HEADING,
           "Turn right by the given number of degrees.",
           "Turn right", _degrees(), sample="30"),
    _entry(T.FLY_PRESENT_HEADING, "Fly Present Heading", C.HEADING,
           "Stop turning and hold the current heading.",
           "Fly present heading"),
    # Altitude / speed
    _entry(T.CLIMB_MAINTAIN, "Climb/Maintain", C.ALTITUDE_SPEED,
           "Climb to and maintain the altitude, written in hundreds of feet.",
           "Climb and maintain", _altitude(), sample="240"),
    _entry(T.DESCEND_MAINTAIN, "Descend/Maintain", C.ALTITUDE_SPEED,
           "Descend to and maintain the altitude, written in hundreds of feet.",
           "Descend and maintain", _altitude(), sample="050"),
    _entry(T.CHANGE_SPEED, "Speed", C.ALTITUDE_SPEED,
           "Maintain the indicated airspeed; 0 resumes normal speed.",
           "Speed",
           ParameterSpec(name="speed", kind=ParameterKind.INTEGER,
                         minimum=0, maximum=600, unit="knots"),
           sample="250"),
    # Transponder
    _entry(T.SQUAWK, "Squawk", C.TRANSPONDER,
           "Set the beacon code; without a code the assigned code is reset.",
           "Squawk", _identifier("code", SQUAWK_PATTERN, optional=True),
           sample="1234"),
    _entry(T.SQUAWK_VFR, "Squawk VFR", C.TRANSPONDER,
           "Set the VFR beacon code.", "Squawk VFR"),
    _entry(T.SQUAWK_NORMAL, "Squawk Normal", C.TRANSPONDER,
           "Set the transponder to mode C.", "Squawk normal"),
    _entry(T.SQUAWK_STANDBY, "Squawk Standby", C.TRANSPONDER,
           "Set the transponder to standby.", "Squawk standby"),
    _entry(T.IDENT, "Ident", C.TRANSPONDER,
           "Press the ident button.", "Ident"),
    _entry(T.RANDOM_SQUAWK, "Random Squawk", C.TRANSPONDER,
           "Assign a random discrete beacon code.", "Squawk a random code"),
    # Navigation
    _entry(T.DIRECT, "Direct To", C.NAVIGATION,
           "Proceed direct to the fix.", "Proceed direct", _fix(),
           sample="SUNOL"),
    _entry(T.CLEARED_APPROACH, "Cleared Approach", C.NAVIGATION,
           "Cleared for the named approach procedure.", "Cleared approach",
           _identifier("approach", APPROACH_PATTERN), sample="I28R"),
    _entry(T.HOLD_AT_FIX_LEFT, "Hold at Fix (Left)", C.NAVIGATION,
           "Fly to the fix and orbit with left 360s.", "Hold left orbits at",
           _fix(), sample="SUNOL"),
    _entry(T.HOLD_AT_FIX_RIGHT, "Hold at Fix (Right)", C.NAVIGATION,
           "Fly to the fix and orbit with right 360s.", "Hold right orbits at",
           _fix(), sample="SUNOL"),
    _entry(T.HOLD_AT_FIX_HOVER, "Hold at Fix", C.NAVIGATION,
           "Fly to the fix and hover (helicopters).", "Hold at",
           _fix(), sample="SUNOL"),
    _entry(T.HOLD_PRESENT_POSITION_LEFT, "Hold (360 Left)", C.NAVIGATION,
           "Orbit the present position with left 360s.",
           "Hold present position, left 360s"),
    _entry(T.HOLD_PRESENT_POSITION_RIGHT, "Hold (360 Right)", C.NAVIGATION,
           "Orbit the present position with right 360s.",
           "Hold present position, right 360s"),
    _entry(T.HOLD_PRESENT_POSITION_HOVER, "Hold Present Position", C.NAVIGATION,
           "Hover at the present position (helicopters).",
           "Hold present position"),
    # Tower
    _entry(T.LINE_UP_AND_WAIT, "Line Up and Wait", C.TOWER,
           "Taxi onto the departure runway and hold.", "Line up and wait"),
    _entry(T.CLEARED_FOR_TAKEOFF, "Cleared for Takeoff", C.TOWER,
           "Cleared for takeoff, optionally with an assigned heading.",
           "Cleared for takeoff", _heading(optional=True, prefix=", fly heading"),
           sample="270"),
    _entry(T.CANCEL_TAKEOFF_CLEARANCE, "Cancel Takeoff Clearance", C.TOWER,
           "Cancel a takeoff clearance.", "Cancel takeoff clearance"),
    _entry(T.GO_AROUND, "Go Around", C.TOWER,
           "Go around, optionally with heading and altitude.", "Go around",
           _heading(optional=True, prefix=", fly heading"),
           _altitude(optional=True, prefix=", climb and maintain"),
           sample="270 030"),
    _entry(T.CLEARED_TO_LAND, "Cleared to Land", C.TOWER,
           "Cleared to land; NODEL keeps the aircraft after landing.",
           "Cleared to land",
           ParameterSpec(name="option", kind=ParameterKind.ENUM,
                         choices=("NODEL",), optional=True, prefix=","),
           sample="NODEL"),
    _entry(T.CANCEL_LANDING_CLEARANCE, "Cancel Landing Clearance", C.TOWER,
           "Cancel a landing clearance.", "Cancel landing clearance"),
    _entry(T.TOUCH_AND_GO, "Touch and Go", C.TOWER,
           "Cleared touch-and-go.", "Cleared touch-and-go"),
    _entry(T.STOP_AND_GO, "Stop and Go", C.TOWER,
           "Cleared stop-and-go.", "Cleared stop-and-go"),
    _entry(T.LOW_APPROACH, "Low Approach", C.TOWER,
           "Cleared low approach.", "Cleared low approach"),
    _entry(T.CLEARED_FOR_OPTION, "Cleared for the Option", C.TOWER,
           "Cleared for the option.", "Cleared for the option"),
    # Pattern
    _entry(T.ENTER_LEFT_DOWNWIND, "Enter Left Downwind", C.PATTERN,
           "Enter a left downwind.", "Enter left downwind", _runway(),
           sample="28R"),
    _entry(T.ENTER_RIGHT_DOWNWIND, "Enter Right Downwind", C.PATTERN,
           "Enter a right downwind.", "Enter right downwind", _runway(),
           sample="28R"),
    _entry(T.ENTER_LEFT_BASE, "Enter Left Base", C.PATTERN,
           "Enter a left base, optionally at a final distance.",
           "Enter left base", _runway(),
           ParameterSpec(name="distance", kind=ParameterKind.DECIMAL,
                         minimum=0.5, maximum=20, places=1, optional=True,
                         prefix=",", unit="nm final"),
           sample="28R 3"),
    _entry(T.ENTER_RIGHT_BASE, "Enter Right Base", C.PATTERN,
           "Enter a right base, optionally at a final distance.",
           "Enter right base", _runway(),
           ParameterSpec(name="distance", kind=ParameterKind.DECIMAL,
                         minimum=0.5, maximum=20, places=1, optional=True,
                         prefix=",", unit="nm final"),
           sample="28R 3"),
    _entry(T.ENTER_FINAL, "Enter Final", C.PATTERN,
           "Enter a straight-in final.", "Enter straight-in final", _runway(),
           sample="28R"),
    _entry(T.MAKE_LEFT_TRAFFIC, "Make Left Traffic", C.PATTERN,
           "Fly left closed traffic.", "Make left traffic"),
    _entry(T.MAKE_RIGHT_TRAFFIC, "Make Right Traffic", C.PATTERN,
           "Fly right closed traffic.", "Make right traffic"),
    _entry(T.TURN_CROSSWIND, "Turn Crosswind", C.PATTERN,
           "Turn onto the crosswind leg now.", "Turn crosswind"),
    _entry(T.TURN_DOWNWIND, "Turn Downwind", C.PATTERN,
           "Turn onto the downwind leg now.", "Turn downwind"),
    _entry(T.TURN_BASE, "Turn Base", C.PATTERN,
           "Turn onto the base leg now.", "Turn base"),
    _entry(T.EXTEND_DOWNWIND, "Extend Downwind", C.PATTERN,
           "Extend the downwind leg until told to turn base.", "Extend downwind"),
    # Ground
    _entry(T.PUSHBACK, "Pushback", C.GROUND,
           "Push back, optionally facing a heading.", "Push back",
           _heading(optional=True, prefix=", face heading"), sample="270"),
    _entry(T.HOLD_POSITION, "Hold Position", C.GROUND,
           "Stop and hold position.", "Hold position"),
    _entry(T.RESUME_TAXI, "Resume Taxi", C.GROUND,
           "Continue taxiing.", "Resume taxi"),
    _entry(T.CROSS_RUNWAY, "Cross Runway", C.GROUND,
           "Cleared to cross the runway.", "Cross", _runway(optional=False),
           sample="28R"),
    _entry(T.FOLLOW, "Follow", C.GROUND,
           "Follow another aircraft.", "Follow",
           _identifier("callsign", CALLSIGN_PATTERN), sample="SWA456"),
    # Track operations
    _entry(T.HANDOFF, "Handoff", C.TRACK,
           "Initiate a handoff to another position.", "Hand off to",
           _position(), sample="2B"),
    _entry(T.ACCEPT_HANDOFF, "Accept Handoff", C.TRACK,
           "Accept an inbound handoff.", "Accept handoff"),
    _entry(T.CANCEL_HANDOFF, "Cancel Handoff", C.TRACK,
           "Retract an outbound handoff.", "Cancel handoff"),
    _entry(T.POINT_OUT, "Point Out", C.TRACK,
           "Point the track out to another position.", "Point out to",
           _position(), sample="2B"),
    _entry(T.TRACK_AIRCRAFT, "Track", C.TRACK,
           "Start tracking the aircraft.", "Track"),
    _entry(T.DROP_TRACK, "Drop Track", C.TRACK,
           "Drop the track.", "Drop track"),
    _entry(T.SCRATCHPAD, "Scratchpad", C.TRACK,
           "Set the data block scratchpad.", "Set scratchpad",
           _identifier("text", SCRATCHPAD_PATTERN), sample="ILS"),
    _entry(T.TEMPORARY_ALTITUDE, "Temporary Altitude", C.TRACK,
           "Set the temporary altitude shown in the data block.",
           "Set temporary altitude", _altitude(), sample="110"),
    _entry(T.CRUISE, "Cruise", C.TRACK,
           "Set the cruise altitude.", "Set cruise altitude", _altitude(),
           sample="350"),
    _entry(T.FREQUENCY_CHANGE, "Frequency Change", C.TRACK,
           "Approve a frequency change.", "Frequency change approved"),
    _entry(T.CONTACT_POSITION, "Contact Position", C.TRACK,
           "Instruct the aircraft to contact another position.", "Contact",
           _position(), sample="2B"),
    _entry(T.CONTACT_TOWER, "Contact Tower", C.TRACK,
           "Instruct the aircraft to contact tower.", "Contact tower"),
    # Broadcast
    _entry(T.SAY, "Say", C.BROADCAST,
           "Transmit free text to the pilot.", "Say",
           ParameterSpec(name="message", kind=ParameterKind.TEXT),
           sample="hello"),
    # Sim control
    _entry(T.DELETE, "Delete", C.SIM_CONTROL,
           "Remove the aircraft from the simulation.", "Delete aircraft"),
    _entry(T.PAUSE, "Pause", C.SIM_CONTROL,
           "Pause the simulation.", "Pause simulation", is_global=True),
    _entry(T.UNPAUSE, "Unpause", C.SIM_CONTROL,
           "Resume the simulation.", "Resume simulation", is_global=True),
    _entry(T.SIM_RATE, "Sim Rate", C.SIM_CONTROL,
           "Set the simulation speed multiplier.", "Set sim rate",
           ParameterSpec(name="rate", kind=ParameterKind.INTEGER,
                         minimum=1, maximum=16, prefix="to"),
           sample="2", is_global=True),
    _entry(T.WAIT, "Wait (seconds)", C.SIM_CONTROL,
           "Delay the aircraft's next instruction by seconds.", "Wait",
           ParameterSpec(name="seconds", kind=ParameterKind.DECIMAL,
                         minimum=0.1, maximum=3600, places=1, unit="seconds"),
           sample="30"),
    _entry(T.WAIT_DISTANCE, "Wait (distance)", C.SIM_CONTROL,
           "Delay the aircraft's next instruction by distance flown.", "Wait",
           ParameterSpec(name="distance", kind=ParameterKind.DECIMAL,
                         minimum=0.1, maximum=100, places=1, unit="nm"),
           sample="4"),
    _entry(T.SPAWN_NOW, "Spawn Now", C.SIM_CONTROL,
           "Spawn a delayed aircraft immediately.", "Spawn now"),
    _entry(T.SPAWN_DELAY, "Set Spawn Delay", C.SIM_CONTROL,
           "Set the spawn delay of a pending aircraft.", "Set spawn delay",
           ParameterSpec(name="seconds", kind=ParameterKind.INTEGER,
                         minimum=0, maximum=3600, unit="seconds"),
           sample="120"),
)
# fmt: on


class CommandCatalog:
    """Read-only collection of metadata entries keyed by command type."""

    def __init__(self, entries: Iterable[CommandMetadataEntry]) -> None:
        self._entries = tuple(entries)
        by_type: dict[CanonicalCommandType, CommandMetadataEntry] = {}
        for entry in self._entries:
            by_type.setdefault(entry.command_type, entry)
        self._by_type = MappingProxyType(by_type)

    def __iter__(self) -> Iterator[CommandMetadataEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, command_type: object) -> bool:
        return command_type in self._by_type

    def get(self, command_type: CanonicalCommandType) -> CommandMetadataEntry:
        """
        Get the metadata entry for a command type.

        Raises:
            UnknownCommandTypeError: If the catalog has no entry for the type
        """
        try:
            return self._by_type[command_type]
        except KeyError:
            raise UnknownCommandTypeError(command_type) from None

    def problems(self) -> list[str]:
        """Return every inconsistency of the catalog, naming the command type."""
        found: list[str] = []
        counts = Counter(entry.command_type for entry in self._entries)
        for command_type in all_command_types():
            if counts[command_type] == 0:
                found.append(f"{command_type.name}: missing metadata entry")
            elif counts[command_type] > 1:
                found.append(
                    f"{command_type.name}: {counts[command_type]} metadata entries"
                )

        for entry in self._entries:
            name = entry.command_type.name
            if not entry.display_name.strip():
                found.append(f"{name}: empty display name")
            seen_optional = False
            for index, spec in enumerate(entry.parameters):
                found.extend(f"{name}: {problem}" for problem in spec.problems())
                if spec.optional:
                    seen_optional = True
                elif seen_optional:
                    found.append(
                        f"{name}: required parameter '{spec.name}' follows an optional one"
                    )
                if (
                    spec.kind is ParameterKind.TEXT
                    and index != len(entry.parameters) - 1
                ):
                    found.append(f"{name}: text parameter '{spec.name}' is not last")
        return found

    def verify(self) -> None:
        """
        Run the startup self-check.

        Raises:
            CatalogConsistencyError: If any entry is missing, duplicated or unsound
        """
        problems = self.problems()
        if problems:
            logger.error("Command metadata catalog failed verification: %s", problems)
            raise CatalogConsistencyError(problems)
        logger.debug("Verified command metadata catalog (%d entries)", len(self))

    def check_pattern(self, pattern: CommandPattern) -> list[str]:
        """Return the ways a pattern's grammar disagrees with the parameter specs."""
        entry = self.get(pattern.command_type)
        specs = entry.parameters
        grammar = pattern.grammar
        found: list[str] = []
        if len(grammar) != len(specs):
            found.append(
                f"grammar extracts {len(grammar)} argument(s), "
                f"metadata declares {len(specs)}"
            )
            return found
        for index, (slot, spec) in enumerate(zip(grammar, specs)):
            if slot.kind is not spec.kind:
                found.append(
                    f"argument {index} is {slot.kind.value} in grammar, "
                    f"{spec.kind.value} in metadata"
                )
            if slot.optional != spec.optional:
                found.append(f"argument {index} optional flag differs from metadata")
            if slot.attached and index != 0:
                found.append(f"argument {index} is attached but not first")
            if slot.attached and spec.kind is ParameterKind.TEXT:
                found.append(f"argument {index} attaches free text")
        if pattern.suffix and not (grammar and grammar[0].attached):
            found.append("suffix given without an attached argument")
        if pattern.suffix and grammar and grammar[0].optional:
            found.append("suffix given with an optional attached argument")
        return found


CATALOG = CommandCatalog(_ENTRIES)
CATALOG.verify()


def metadata_for(command_type: CanonicalCommandType) -> CommandMetadataEntry:
    """Return the metadata entry for a command type."""
    return CATALOG.get(command_type)
