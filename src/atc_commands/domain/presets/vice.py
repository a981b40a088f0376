"""The "VICE" dialect: arguments glued to short verbs, e.g. ``UAL123 H270``.

Attached arguments always start with a digit and no spaced verb of this
dialect contains one, so rendered text never reads back as another verb.
"""

from __future__ import annotations

from atc_commands.domain.command_types import CanonicalCommandType as T
from atc_commands.domain.scheme import CallsignPosition, Scheme, pattern_for

NAME = "VICE"

# fmt: off
PATTERNS = (
    # Heading
    pattern_for(T.CHANGE_HEADING, "H", attached=True),
    pattern_for(T.TURN_LEFT, "L", attached=True),
    pattern_for(T.TURN_RIGHT, "R", attached=True),
    pattern_for(T.RELATIVE_LEFT, "T", attached=True, suffix="L"),
    pattern_for(T.RELATIVE_RIGHT, "T", attached=True, suffix="R"),
    pattern_for(T.FLY_PRESENT_HEADING, "H"),
    # Altitude / speed
    pattern_for(T.CLIMB_MAINTAIN, "C", attached=True),
    pattern_for(T.DESCEND_MAINTAIN, "D", attached=True),
    pattern_for(T.CHANGE_SPEED, "S", attached=True),
    # Transponder
    pattern_for(T.SQUAWK, "SQ", attached=True),
    pattern_for(T.SQUAWK_VFR, "SQVFR"),
    pattern_for(T.SQUAWK_NORMAL, "SQNORM", "SQA", "SQON"),
    pattern_for(T.SQUAWK_STANDBY, "SQSBY", "SQS"),
    pattern_for(T.IDENT, "ID", "IDENT", "SQI"),
    pattern_for(T.RANDOM_SQUAWK, "RANDSQ"),
    # Navigation
    pattern_for(T.DIRECT, "DCT"),
    pattern_for(T.CLEARED_APPROACH, "CAPP"),
    pattern_for(T.HOLD_AT_FIX_LEFT, "HFIXL"),
    pattern_for(T.HOLD_AT_FIX_RIGHT, "HFIXR"),
    pattern_for(T.HOLD_AT_FIX_HOVER, "HFIX"),
    pattern_for(T.HOLD_PRESENT_POSITION_LEFT, "HPPL"),
    pattern_for(T.HOLD_PRESENT_POSITION_RIGHT, "HPPR"),
    pattern_for(T.HOLD_PRESENT_POSITION_HOVER, "HPP"),
    # Tower
    pattern_for(T.LINE_UP_AND_WAIT, "LUAW"),
    pattern_for(T.CLEARED_FOR_TAKEOFF, "CTO"),
    pattern_for(T.CANCEL_TAKEOFF_CLEARANCE, "CTOC"),
    pattern_for(T.GO_AROUND, "GA"),
    pattern_for(T.CLEARED_TO_LAND, "CTL"),
    pattern_for(T.CANCEL_LANDING_CLEARANCE, "CTLC"),
    pattern_for(T.TOUCH_AND_GO, "TG"),
    pattern_for(T.STOP_AND_GO, "SG"),
    pattern_for(T.LOW_APPROACH, "LA"),
    pattern_for(T.CLEARED_FOR_OPTION, "COPT"),
    # Pattern
    pattern_for(T.ENTER_LEFT_DOWNWIND, "ELD"),
    pattern_for(T.ENTER_RIGHT_DOWNWIND, "ERD"),
    pattern_for(T.ENTER_LEFT_BASE, "ELB"),
    pattern_for(T.ENTER_RIGHT_BASE, "ERB"),
    pattern_for(T.ENTER_FINAL, "EF"),
    pattern_for(T.MAKE_LEFT_TRAFFIC, "MLT"),
    pattern_for(T.MAKE_RIGHT_TRAFFIC, "MRT"),
    pattern_for(T.TURN_CROSSWIND, "TC"),
    pattern_for(T.TURN_DOWNWIND, "TD"),
    pattern_for(T.TURN_BASE, "TB"),
    pattern_for(T.EXTEND_DOWNWIND, "EXT"),
    # Ground
    pattern_for(T.PUSHBACK, "PUSH"),
    pattern_for(T.HOLD_POSITION, "HOLD"),
    pattern_for(T.RESUME_TAXI, "RES"),
    pattern_for(T.CROSS_RUNWAY, "CROSS"),
    pattern_for(T.FOLLOW, "FOLLOW"),
    # Track operations
    pattern_for(T.HANDOFF, "HO"),
    pattern_for(T.ACCEPT_HANDOFF, "ACCEPT"),
    pattern_for(T.CANCEL_HANDOFF, "CANCEL"),
    pattern_for(T.POINT_OUT, "PO"),
    pattern_for(T.TRACK_AIRCRAFT, "TRACK"),
    pattern_for(T.DROP_TRACK, "DROP"),
    pattern_for(T.SCRATCHPAD, "SP"),
    pattern_for(T.TEMPORARY_ALTITUDE, "TA"),
    pattern_for(T.CRUISE, "CRUISE"),
    pattern_for(T.FREQUENCY_CHANGE, "FC"),
    pattern_for(T.CONTACT_POSITION, "CT", attached=True),
    pattern_for(T.CONTACT_TOWER, "TO"),
    # Broadcast
    pattern_for(T.SAY, "SAY"),
    # Sim control
    pattern_for(T.DELETE, "X"),
    pattern_for(T.PAUSE, "PAUSE"),
    pattern_for(T.UNPAUSE, "UNPAUSE"),
    pattern_for(T.SIM_RATE, "SIMRATE"),
    pattern_for(T.WAIT, "WAIT"),
    pattern_for(T.WAIT_DISTANCE, "WAITD"),
    pattern_for(T.SPAWN_NOW, "SPAWN"),
    pattern_for(T.SPAWN_DELAY, "DELAY"),
)
# fmt: on

VICE = Scheme(
    name=NAME,
    patterns=PATTERNS,
    callsign_position=CallsignPosition.LEADING,
)
