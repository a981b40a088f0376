"""
Command line front end.

Reads command lines from a file or stdin, one per line, and prints the
canonical echo of each or the reason it was rejected.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from atc_commands.common.exceptions import CommandSchemeError
from atc_commands.common.logging import LogFormat, configure_logging
from atc_commands.config.app_config import load_config
from atc_commands.services.command_interpreter import CommandInterpreter


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="atc-commands",
        description="Parse ATC trainer command lines and echo them in canonical form",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="File with one command per line (default: stdin)",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="PATH",
        help="YAML configuration file",
    )
    parser.add_argument(
        "--scheme",
        help="Command scheme to read and write lines in (e.g. ATC-Trainer, VICE)",
    )
    parser.add_argument(
        "-c",
        "--callsign",
        dest="callsigns",
        action="append",
        default=[],
        metavar="CALLSIGN",
        help="Known aircraft callsign; repeat for several aircraft",
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Also print a plain-language readback of each command",
    )
    parser.add_argument(
        "--list",
        dest="list_commands",
        action="store_true",
        help="List the commands of the scheme and exit",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Override the configured log level",
    )
    parser.add_argument(
        "--log-format",
        dest="log_format",
        choices=[f.value for f in LogFormat],
        help="Override the configured log format",
    )
    return parser


def _run(
    interpreter: CommandInterpreter,
    lines: TextIO,
    out: TextIO,
    callsigns: Sequence[str],
    scheme_name: str | None,
    describe: bool,
) -> int:
    failures = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        result = interpreter.interpret(line, callsigns, scheme_name)
        if result.ok:
            out.write(f"{result.text}\n")
            if describe and result.readback:
                out.write(f"  {result.readback}\n")
        else:
            failures += 1
            out.write(f"error: {line}: {result.text}\n")
    return 1 if failures else 0


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Entry point of the ``atc-commands`` console script."""
    args = build_cli_parser().parse_args(argv)
    out = out or sys.stdout

    try:
        config = load_config(args.config_file)
        configure_logging(
            args.log_level or config.log_level,
            args.log_format or config.log_format,
        )
        interpreter = CommandInterpreter(config=config)
        scheme = interpreter.scheme(args.scheme)
    except CommandSchemeError as e:
        sys.stderr.write(f"error: {e.message}\n")
        return 2

    if args.list_commands:
        out.write(f"Commands of scheme {scheme.name}:\n")
        for line in interpreter.help_lines(scheme.name):
            out.write(f"{line}\n")
        return 0

    lines = args.input or sys.stdin
    try:
        return _run(interpreter, lines, out, args.callsigns, scheme.name, args.describe)
    finally:
        if args.input is not None:
            args.input.close()


if __name__ == "__main__":
    sys.exit(main())
