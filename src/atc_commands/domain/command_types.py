"""
Canonical command vocabulary.

Every dialect maps onto this closed set of intents. Adding a member means
adding a metadata entry and a pattern in every built-in scheme; the catalog
self-check and the scheme registry refuse to start otherwise.
"""

from __future__ import annotations

from enum import Enum


class CanonicalCommandType(str, Enum):
    """Dialect-independent controller instruction."""

    # Heading
    CHANGE_HEADING = "change_heading"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    RELATIVE_LEFT = "relative_left"
    RELATIVE_RIGHT = "relative_right"
    FLY_PRESENT_HEADING = "fly_present_heading"
    # Altitude / speed
    CLIMB_MAINTAIN = "climb_maintain"
    DESCEND_MAINTAIN = "descend_maintain"
    CHANGE_SPEED = "change_speed"
    # Transponder
    SQUAWK = "squawk"
    SQUAWK_VFR = "squawk_vfr"
    SQUAWK_NORMAL = "squawk_normal"
    SQUAWK_STANDBY = "squawk_standby"
    IDENT = "ident"
    RANDOM_SQUAWK = "random_squawk"
    # Navigation
    DIRECT = "direct"
    CLEARED_APPROACH = "cleared_approach"
    HOLD_AT_FIX_LEFT = "hold_at_fix_left"
    HOLD_AT_FIX_RIGHT = "hold_at_fix_right"
    HOLD_AT_FIX_HOVER = "hold_at_fix_hover"
    HOLD_PRESENT_POSITION_LEFT = "hold_present_position_left"
    HOLD_PRESENT_POSITION_RIGHT = "hold_present_position_right"
    HOLD_PRESENT_POSITION_HOVER = "hold_present_position_hover"
    # Tower
    LINE_UP_AND_WAIT = "line_up_and_wait"
    CLEARED_FOR_TAKEOFF = "cleared_for_takeoff"
    CANCEL_TAKEOFF_CLEARANCE = "cancel_takeoff_clearance"
    GO_AROUND = "go_around"
    CLEARED_TO_LAND = "cleared_to_land"
    CANCEL_LANDING_CLEARANCE = "cancel_landing_clearance"
    TOUCH_AND_GO = "touch_and_go"
    STOP_AND_GO = "stop_and_go"
    LOW_APPROACH = "low_approach"
    CLEARED_FOR_OPTION = "cleared_for_option"
    # Pattern
    ENTER_LEFT_DOWNWIND = "enter_left_downwind"
    ENTER_RIGHT_DOWNWIND = "enter_right_downwind"
    ENTER_LEFT_BASE = "enter_left_base"
    ENTER_RIGHT_BASE = "enter_right_base"
    ENTER_FINAL = "enter_final"
    MAKE_LEFT_TRAFFIC = "make_left_traffic"
    MAKE_RIGHT_TRAFFIC = "make_right_traffic"
    TURN_CROSSWIND = "turn_crosswind"
    TURN_DOWNWIND = "turn_downwind"
    TURN_BASE = "turn_base"
    EXTEND_DOWNWIND = "extend_downwind"
    # Ground
    PUSHBACK = "pushback"
    HOLD_POSITION = "hold_position"
    RESUME_TAXI = "resume_taxi"
    CROSS_RUNWAY = "cross_runway"
    FOLLOW = "follow"
    # Track operations
    HANDOFF = "handoff"
    ACCEPT_HANDOFF = "accept_handoff"
    CANCEL_HANDOFF = "cancel_handoff"
    POINT_OUT = "point_out"
    TRACK_AIRCRAFT = "track_aircraft"
    DROP_TRACK = "drop_track"
    SCRATCHPAD = "scratchpad"
    TEMPORARY_ALTITUDE = "temporary_altitude"
    CRUISE = "cruise"
    FREQUENCY_CHANGE = "frequency_change"
    CONTACT_POSITION = "contact_position"
    CONTACT_TOWER = "contact_tower"
    # Broadcast
    SAY = "say"
    # Sim control
    DELETE = "delete"
    PAUSE = "pause"
    UNPAUSE = "unpause"
    SIM_RATE = "sim_rate"
    WAIT = "wait"
    WAIT_DISTANCE = "wait_distance"
    SPAWN_NOW = "spawn_now"
    SPAWN_DELAY = "spawn_delay"


def all_command_types() -> tuple[CanonicalCommandType, ...]:
    """Return every command type in declaration order."""
    return tuple(CanonicalCommandType)
