import pytest
from atc_commands.domain.command_types import CanonicalCommandType as T
from atc_commands.domain.metadata import metadata_for
from atc_commands.domain.parameters import ParameterKind, ParameterSpec


@pytest.fixture
def heading() -> ParameterSpec:
    return metadata_for(T.CHANGE_HEADING).parameters[0]


@pytest.mark.parametrize("value", [0, 1, 180, 359])
def test_heading_accepts_bounds(heading: ParameterSpec, value: int) -> None:
    assert heading.accepts(value)


@pytest.mark.parametrize("value", [-10, -1, 360, 370, 270.0, "270", True])
def test_heading_rejects(heading: ParameterSpec, value: object) -> None:
    assert not heading.accepts(value)


def test_altitude_must_be_whole_hundreds() -> None:
    altitude = metadata_for(T.CLIMB_MAINTAIN).parameters[0]
    assert altitude.accepts(24000)
    assert altitude.accepts(100)
    assert not altitude.accepts(24050)
    assert not altitude.accepts(0)
    assert not altitude.accepts(60100)


def test_decimal_respects_places() -> None:
    seconds = metadata_for(T.WAIT).parameters[0]
    assert seconds.accepts(2.5)
    assert seconds.accepts(30)
    assert not seconds.accepts(2.55)
    assert not seconds.accepts(float("nan"))
    assert not seconds.accepts(0.0)


def test_identifier_and_enum() -> None:
    code = metadata_for(T.SQUAWK).parameters[0]
    assert code.accepts("1234")
    assert not code.accepts("1289")
    option = metadata_for(T.CLEARED_TO_LAND).parameters[0]
    assert option.accepts("NODEL")
    assert not option.accepts("nodel")


def test_text_must_be_printable() -> None:
    message = metadata_for(T.SAY).parameters[0]
    assert message.accepts("Traffic 2 o'clock")
    assert not message.accepts("")
    assert not message.accepts("line\nbreak")


def test_placeholder() -> None:
    assert ParameterSpec(name="fix", kind=ParameterKind.IDENTIFIER, pattern="X").placeholder == "<fix>"
    assert metadata_for(T.SQUAWK).parameters[0].placeholder == "[code]"


def test_places_on_non_decimal_is_a_problem() -> None:
    spec = ParameterSpec(name="n", kind=ParameterKind.INTEGER, places=2)
    assert spec.problems() == ["parameter 'n' sets places but is not decimal"]
