"""
Command line tokenizer.

Tokens are separated by whitespace. A double-quoted segment is one token;
inside it ``\\"`` and ``\\\\`` are escapes. Outside quotes a backslash is an
ordinary character, as are single quotes and ``#``.
"""

from __future__ import annotations

import shlex

_SPECIAL = ('"', "\\")


def _double_bare_backslashes(line: str) -> str:
    # shlex treats a backslash as an escape everywhere in posix mode
    out: list[str] = []
    quoted = False
    i = 0
    while i < len(line):
        ch = line[i]
        if quoted and ch == "\\" and i + 1 < len(line):
            out.append(line[i : i + 2])
            i += 2
            continue
        if ch == '"':
            quoted = not quoted
        elif ch == "\\" and not quoted:
            ch = "\\\\"
        out.append(ch)
        i += 1
    return "".join(out)


def tokenize(line: str) -> list[str]:
    """Split a command line into tokens.

    Raises:
        ValueError: If a double quote is not closed
    """
    lexer = shlex.shlex(_double_bare_backslashes(line), posix=True)
    lexer.whitespace_split = True
    lexer.quotes = '"'
    lexer.escapedquotes = '"'
    lexer.escape = "\\"
    lexer.commenters = ""
    return list(lexer)


def needs_quoting(text: str) -> bool:
    return (
        not text
        or any(ch.isspace() for ch in text)
        or any(ch in text for ch in _SPECIAL)
    )


def quote(text: str) -> str:
    """Return ``text`` as a single token that tokenize() reads back unchanged."""
    if not needs_quoting(text):
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
