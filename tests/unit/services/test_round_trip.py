"""Rendering then parsing must give back the original command in every scheme."""

import pytest
from atc_commands.domain.command_types import CanonicalCommandType as T
from atc_commands.domain.command_types import all_command_types
from atc_commands.domain.commands import Command
from atc_commands.domain.metadata import metadata_for
from atc_commands.domain.presets import ATC_TRAINER, BUILTIN_SCHEMES, VICE
from atc_commands.domain.scheme import Scheme
from atc_commands.services.command_parser import parse
from atc_commands.services.command_renderer import render
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import commands


@given(command=commands(), scheme=st.sampled_from(BUILTIN_SCHEMES))
def test_parse_is_left_inverse_of_render(command: Command, scheme: Scheme) -> None:
    text = render(command, scheme)
    assert parse(text, scheme, {command.target_callsign}) == command


@pytest.mark.parametrize("command_type", all_command_types(), ids=lambda t: t.name)
def test_metadata_samples_round_trip(command_type: T) -> None:
    entry = metadata_for(command_type)
    callsign = None if entry.is_global else "UAL123"
    verb = ATC_TRAINER.get_pattern(command_type).verb
    line = " ".join(part for part in (callsign, verb, entry.sample) if part)
    command = parse(line, ATC_TRAINER, {"UAL123"})
    assert isinstance(command, Command), (line, command)
    for scheme in BUILTIN_SCHEMES:
        assert parse(render(command, scheme), scheme, {"UAL123"}) == command


def test_scheme_switch_keeps_the_command() -> None:
    original = parse("UAL123 turn heading 270", ATC_TRAINER, {"UAL123"})
    vice_text = render(original, VICE)
    assert vice_text == "UAL123 H270"
    assert parse(vice_text, VICE, {"UAL123"}) == original
    assert render(parse(vice_text, VICE, {"UAL123"}), ATC_TRAINER) == "UAL123 FH 270"


@pytest.mark.parametrize("scheme", BUILTIN_SCHEMES, ids=lambda s: s.name)
def test_global_command_with_its_own_callsign_set(scheme: Scheme) -> None:
    command = Command(command_type=T.PAUSE)
    assert parse(render(command, scheme), scheme, {command.target_callsign}) == command
