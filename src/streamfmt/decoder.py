from __future__ import annotations

import json
from typing import Any


class MalformedLine(ValueError):
    """A non-blank input line that is not valid JSON."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"not a JSON line: {raw[:80]!r}")
        self.raw = raw


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def strip_newline(line: str) -> str:
    return line.rstrip("\r\n")


def decode_line(line: str) -> Any | None:
    """Decode one NDJSON line.

    Blank lines decode to ``None``. Anything else that fails to parse raises
    ``MalformedLine`` with the line as read, minus its line terminator.
    ``NaN`` and ``Infinity`` are rejected, and nesting too deep to decode
    counts as malformed.
    """
    raw = strip_newline(line)
    if not raw.strip():
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise MalformedLine(raw) from exc
