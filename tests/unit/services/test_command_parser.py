import pytest
from atc_commands.domain.command_types import CanonicalCommandType as T
from atc_commands.domain.commands import Command
from atc_commands.domain.parse_errors import (
    AmbiguousVerb,
    ArgumentOutOfRange,
    EmptyInput,
    MalformedArgument,
    MalformedReason,
    MissingArgument,
    UnbalancedQuote,
    UnknownCallsign,
    UnknownVerb,
)
from atc_commands.domain.presets import ATC_TRAINER, VICE
from atc_commands.domain.scheme import CallsignPosition, Scheme, pattern_for
from atc_commands.services.command_parser import parse
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import callsigns

KNOWN = frozenset({"UAL123", "DAL45"})


def _command(command_type: T, *arguments: object, callsign: str | None = "UAL123") -> Command:
    return Command(command_type=command_type, target_callsign=callsign, arguments=arguments)


def test_turn_heading_scenario() -> None:
    result = parse("UAL123 turn heading 270", ATC_TRAINER, {"UAL123"})
    assert result == _command(T.CHANGE_HEADING, 270)


def test_abc_heading_is_not_numeric() -> None:
    result = parse("UAL123 turn heading abc", ATC_TRAINER, {"UAL123"})
    assert result == MalformedArgument(
        index=0, reason=MalformedReason.NOT_NUMERIC, token="abc"
    )


def test_unknown_callsign_scenario() -> None:
    result = parse("DAL999 turn heading 270", ATC_TRAINER, {"UAL123"})
    assert result == UnknownCallsign(token="DAL999")


@pytest.mark.parametrize("value", ["-10", "370"])
def test_heading_out_of_range(value: str) -> None:
    result = parse(f"UAL123 FH {value}", ATC_TRAINER, KNOWN)
    assert result == ArgumentOutOfRange(index=0, bounds=(0, 359), value=int(value))


@pytest.mark.parametrize("value, expected", [("0", 0), ("359", 359), ("000", 0), ("090", 90)])
def test_heading_bounds_accepted(value: str, expected: int) -> None:
    assert parse(f"UAL123 FH {value}", ATC_TRAINER, KNOWN) == _command(
        T.CHANGE_HEADING, expected
    )


@pytest.mark.parametrize(
    "line, expected",
    [
        ("UAL123 FH 270", (T.CHANGE_HEADING, 270)),
        ("ual123 fly heading 270", (T.CHANGE_HEADING, 270)),
        ("UAL123 TURN LEFT HEADING 180", (T.TURN_LEFT, 180)),
        ("UAL123 LT 20", (T.RELATIVE_LEFT, 20)),
        ("UAL123 CM 240", (T.CLIMB_MAINTAIN, 24000)),
        ("UAL123 DM 050", (T.DESCEND_MAINTAIN, 5000)),
        ("UAL123 DM 5000", (T.DESCEND_MAINTAIN, 5000)),
        ("UAL123 climb and maintain 110", (T.CLIMB_MAINTAIN, 11000)),
        ("UAL123 SPD 250", (T.CHANGE_SPEED, 250)),
        ("UAL123 SQ", (T.SQUAWK,)),
        ("UAL123 SQ 4521", (T.SQUAWK, "4521")),
        ("UAL123 DCT sunol", (T.DIRECT, "SUNOL")),
        ("UAL123 CAPP i28r", (T.CLEARED_APPROACH, "I28R")),
        ("UAL123 CTO", (T.CLEARED_FOR_TAKEOFF,)),
        ("UAL123 CTO 270", (T.CLEARED_FOR_TAKEOFF, 270)),
        ("UAL123 GA 270 030", (T.GO_AROUND, 270, 3000)),
        ("UAL123 CTL nodel", (T.CLEARED_TO_LAND, "NODEL")),
        ("UAL123 ELB 28r 2.5", (T.ENTER_LEFT_BASE, "28R", 2.5)),
        ("UAL123 CROSS 1L", None),
        ("UAL123 HO 2b", (T.HANDOFF, "2B")),
        ("UAL123 FOLLOW dal45", (T.FOLLOW, "DAL45")),
        ("UAL123 WAIT 30", (T.WAIT, 30.0)),
        ("UAL123 DEL", (T.DELETE,)),
    ],
)
def test_atc_trainer_lines(line: str, expected: tuple | None) -> None:
    result = parse(line, ATC_TRAINER, KNOWN)
    if expected is None:
        assert isinstance(result, MalformedArgument)
        assert result.reason is MalformedReason.INVALID_FORMAT
    else:
        assert result == _command(*expected)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("UAL123 H270", (T.CHANGE_HEADING, 270)),
        ("UAL123 h090", (T.CHANGE_HEADING, 90)),
        ("UAL123 H", (T.FLY_PRESENT_HEADING,)),
        ("UAL123 L180", (T.TURN_LEFT, 180)),
        ("UAL123 R010", (T.TURN_RIGHT, 10)),
        ("UAL123 T20L", (T.RELATIVE_LEFT, 20)),
        ("UAL123 t30r", (T.RELATIVE_RIGHT, 30)),
        ("UAL123 C240", (T.CLIMB_MAINTAIN, 24000)),
        ("UAL123 D50", (T.DESCEND_MAINTAIN, 5000)),
        ("UAL123 S210", (T.CHANGE_SPEED, 210)),
        ("UAL123 SQ1200", (T.SQUAWK, "1200")),
        ("UAL123 SQ", (T.SQUAWK,)),
        ("UAL123 SQVFR", (T.SQUAWK_VFR,)),
        ("UAL123 CT2B", (T.CONTACT_POSITION, "2B")),
        ("UAL123 CTO", (T.CLEARED_FOR_TAKEOFF,)),
        ("UAL123 CTL", (T.CLEARED_TO_LAND,)),
        ("UAL123 TO", (T.CONTACT_TOWER,)),
        ("UAL123 X", (T.DELETE,)),
        ("UAL123 DCT SUNOL", (T.DIRECT, "SUNOL")),
    ],
)
def test_vice_lines(line: str, expected: tuple) -> None:
    assert parse(line, VICE, KNOWN) == _command(*expected)


def test_callsign_spelling_comes_from_known_set() -> None:
    result = parse("dal45 FH 090", ATC_TRAINER, KNOWN)
    assert isinstance(result, Command)
    assert result.target_callsign == "DAL45"


def test_say_keeps_case_and_joins_words() -> None:
    result = parse("UAL123 SAY Traffic   twelve o'clock", ATC_TRAINER, KNOWN)
    assert result == _command(T.SAY, "Traffic twelve o'clock")
    quoted = parse('UAL123 SAY "Traffic   twelve"', ATC_TRAINER, KNOWN)
    assert quoted == _command(T.SAY, "Traffic   twelve")


@pytest.mark.parametrize("line", ["PAUSE", "UAL123 PAUSE", "p"])
def test_global_commands_have_no_target(line: str) -> None:
    assert parse(line, ATC_TRAINER, KNOWN) == Command(command_type=T.PAUSE)


def test_sim_rate_without_callsign() -> None:
    assert parse("SIMRATE 4", VICE, KNOWN) == Command(
        command_type=T.SIM_RATE, arguments=(4,)
    )


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", EmptyInput()),
        ("   ", EmptyInput()),
        ('UAL123 SAY "hello', UnbalancedQuote(text='UAL123 SAY "hello')),
        ("UAL123", UnknownVerb(token="")),
        ("UAL123 FLY 270", UnknownVerb(token="FLY")),
        ("FH 270", UnknownCallsign(token="FH")),
        ("UAL123 FH", MissingArgument(index=0, name="heading")),
        ("UAL123 SAY", MissingArgument(index=0, name="message")),
        (
            "UAL123 FH 270 090",
            MalformedArgument(index=1, reason=MalformedReason.UNEXPECTED, token="090"),
        ),
        (
            "UAL123 CM 0",
            ArgumentOutOfRange(index=0, bounds=(100, 60000), value=0),
        ),
        (
            "UAL123 CM 24050",
            MalformedArgument(index=0, reason=MalformedReason.NOT_HUNDREDS, token="24050"),
        ),
        (
            "UAL123 CM -10",
            MalformedArgument(index=0, reason=MalformedReason.NOT_NUMERIC, token="-10"),
        ),
        (
            "UAL123 WAIT 1.25",
            MalformedArgument(index=0, reason=MalformedReason.PRECISION, token="1.25"),
        ),
        (
            "UAL123 CTL now",
            MalformedArgument(index=0, reason=MalformedReason.UNKNOWN_CHOICE, token="now"),
        ),
        (
            "UAL123 SQ 8888",
            MalformedArgument(index=0, reason=MalformedReason.INVALID_FORMAT, token="8888"),
        ),
        (
            'UAL123 DCT ""',
            MalformedArgument(index=0, reason=MalformedReason.EMPTY, token=""),
        ),
    ],
)
def test_parse_errors(line: str, expected: object) -> None:
    assert parse(line, ATC_TRAINER, KNOWN) == expected


def test_vice_attached_argument_errors() -> None:
    assert parse("UAL123 H370", VICE, KNOWN) == ArgumentOutOfRange(
        index=0, bounds=(0, 359), value=370
    )
    assert parse("UAL123 HX", VICE, KNOWN) == MalformedArgument(
        index=0, reason=MalformedReason.NOT_NUMERIC, token="X"
    )
    assert parse("UAL123 SQ 1200", VICE, KNOWN) == MalformedArgument(
        index=0, reason=MalformedReason.UNEXPECTED, token="1200"
    )


@pytest.mark.parametrize(
    "verb, scheme",
    [("FH ", ATC_TRAINER), ("CM ", ATC_TRAINER), ("H", VICE), ("C", VICE)],
    ids=["spaced-integer", "spaced-altitude", "attached-integer", "attached-altitude"],
)
def test_huge_numbers_are_rejected(verb: str, scheme: Scheme) -> None:
    digits = "9" * 5000
    assert parse(f"UAL123 {verb}{digits}", scheme, KNOWN) == MalformedArgument(
        index=0, reason=MalformedReason.TOO_LONG, token=digits
    )


def test_signed_integer_digit_limit() -> None:
    result = parse("UAL123 FH -" + "0" * 19, ATC_TRAINER, KNOWN)
    assert isinstance(result, MalformedArgument)
    assert result.reason is MalformedReason.TOO_LONG
    assert parse("UAL123 FH " + "0" * 15 + "270", ATC_TRAINER, KNOWN) == _command(
        T.CHANGE_HEADING, 270
    )


def test_attached_text_is_cut_from_the_typed_token() -> None:
    # "ß" upper-cases to "SS", which must not read as the S verb
    assert parse("UAL123 ß", VICE, KNOWN) == UnknownVerb(token="ß")
    assert parse("UAL123 t20l", VICE, KNOWN) == _command(T.RELATIVE_LEFT, 20)
    assert parse("UAL123 Tßl", VICE, KNOWN) == MalformedArgument(
        index=0, reason=MalformedReason.NOT_NUMERIC, token="ß"
    )


def test_backslash_outside_quotes_is_kept() -> None:
    assert parse(r"UAL123 SAY C:\temp", ATC_TRAINER, KNOWN) == _command(T.SAY, "C:\\temp")
    assert parse("UAL123 SAY done\\", ATC_TRAINER, KNOWN) == _command(T.SAY, "done\\")


def test_none_in_known_callsigns_is_ignored() -> None:
    assert parse("PAUSE", ATC_TRAINER, {None}) == _command(T.PAUSE, callsign=None)
    assert parse("UAL123 FH 270", ATC_TRAINER, {None}) == UnknownCallsign(token="UAL123")


def test_ambiguous_verb_from_invalid_scheme() -> None:
    patterns = tuple(
        pattern_for(T.TURN_LEFT, "FH") if p.command_type is T.TURN_LEFT else p
        for p in ATC_TRAINER.patterns
    )
    broken = Scheme(name="Broken", patterns=patterns)
    result = parse("UAL123 FH 270", broken, KNOWN)
    assert result == AmbiguousVerb(
        token="FH", candidates=(T.CHANGE_HEADING, T.TURN_LEFT)
    )
    assert "CHANGE_HEADING, TURN_LEFT" in result.message


def test_callsign_anywhere() -> None:
    scheme = Scheme(
        name="Anywhere",
        patterns=ATC_TRAINER.patterns,
        callsign_position=CallsignPosition.ANYWHERE,
    )
    assert parse("FH 270 UAL123", scheme, KNOWN) == _command(T.CHANGE_HEADING, 270)
    assert parse("UAL123 FH 270", scheme, KNOWN) == _command(T.CHANGE_HEADING, 270)
    assert parse("FH 270 DAL999", scheme, KNOWN) == UnknownCallsign(token="FH")


def test_leading_callsign_must_come_first() -> None:
    assert parse("FH 270 UAL123", ATC_TRAINER, KNOWN) == UnknownCallsign(token="FH")


@given(callsign=callsigns, scheme=st.sampled_from([ATC_TRAINER, VICE]))
def test_unknown_callsign_always_rejected(callsign: str, scheme: Scheme) -> None:
    for line in (f"{callsign} FH 270", f"{callsign} H270", f"{callsign} PAUSE"):
        assert parse(line, scheme, {"ZZZ"}) == UnknownCallsign(token=callsign)


def test_messages() -> None:
    assert UnknownCallsign(token="DAL999").message == "Unknown callsign 'DAL999'"
    assert MissingArgument(index=0, name="heading").message == "Missing argument 1 (heading)"
    assert (
        ArgumentOutOfRange(index=0, bounds=(0, 359), value=370).message
        == "Argument 1 value 370 must be between 0 and 359"
    )
    assert (
        MalformedArgument(index=0, reason=MalformedReason.NOT_NUMERIC, token="abc").message
        == "Argument 1 'abc' is not a number"
    )
    assert UnknownVerb(token="").message == "Missing command"
    assert EmptyInput().message == "Empty command"
