import io
from pathlib import Path

import pytest
from atc_commands.cli import build_cli_parser, main


@pytest.fixture(autouse=True)
def _isolated(clean_env: None, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)


def _run(argv: list[str], stdin: str = "") -> tuple[int, str]:
    out = io.StringIO()
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr("sys.stdin", io.StringIO(stdin))
        code = main(argv, out=out)
    return code, out.getvalue()


def test_echoes_lines_from_stdin() -> None:
    code, output = _run(["-c", "UAL123"], "ual123 turn heading 270\nUAL123 cm 240\n")
    assert code == 0
    assert output == "UAL123 FH 270\nUAL123 CM 240\n"


def test_renders_in_selected_scheme(tmp_path: Path) -> None:
    commands = tmp_path / "commands.txt"
    commands.write_text("UAL123 T20L\n\nDAL45 SQ1200\n", encoding="utf-8")
    code, output = _run(
        ["--scheme", "vice", "-c", "UAL123", "--callsign", "DAL45", "--describe", str(commands)]
    )
    assert code == 0
    assert output == (
        "UAL123 T20L\n  Turn left 20 degrees\nDAL45 SQ1200\n  Squawk 1200\n"
    )


def test_failed_line_sets_exit_status() -> None:
    code, output = _run(["-c", "UAL123"], "DAL999 FH 270\nUAL123 FH 270\n")
    assert code == 1
    assert output == (
        "error: DAL999 FH 270: Unknown callsign 'DAL999'\nUAL123 FH 270\n"
    )


def test_list_commands() -> None:
    code, output = _run(["--list", "--scheme", "VICE"])
    lines = output.splitlines()
    assert code == 0
    assert lines[0] == "Commands of scheme VICE:"
    assert lines[1] == "[heading]"
    assert any(line.strip().startswith("T<degrees>L") for line in lines)


def test_config_file_selects_scheme(temp_config_path: Path) -> None:
    code, output = _run(["--config", str(temp_config_path), "-c", "UAL123"], "UAL123 H270\n")
    assert code == 0
    assert output == "UAL123 H270\n"


def test_custom_scheme_from_config(temp_config_path: Path) -> None:
    code, output = _run(
        ["--config", str(temp_config_path), "--scheme", "My-Trainer", "-c", "UAL123"],
        "UAL123 FH 270\n",
    )
    assert code == 0
    assert output == "UAL123 HDG 270\n"


def test_unknown_scheme_is_reported(capsys: pytest.CaptureFixture[str]) -> None:
    code, output = _run(["--scheme", "Euroscope"])
    assert code == 2
    assert output == ""
    assert "Unknown command scheme 'Euroscope'" in capsys.readouterr().err


def test_parser_defaults() -> None:
    args = build_cli_parser().parse_args([])
    assert args.callsigns == []
    assert args.scheme is None
    assert not args.describe
