"""Final ``result`` record -> run summary."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .util import format_duration

# Producers have used several names for the same totals; earlier wins.
COST_FIELDS: tuple[tuple[str, ...], ...] = (("total_cost_usd",), ("cost_usd",))
INPUT_TOKEN_FIELDS: tuple[tuple[str, ...], ...] = (
    ("total_input_tokens",),
    ("input_tokens",),
    ("usage", "input_tokens"),
    ("session_input_tokens",),
)
OUTPUT_TOKEN_FIELDS: tuple[tuple[str, ...], ...] = (
    ("total_output_tokens",),
    ("output_tokens",),
    ("usage", "output_tokens"),
    ("session_output_tokens",),
)


def _lookup(record: dict[str, Any], path: tuple[str, ...]) -> Any:
    value: Any = record
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return value if math.isfinite(float(value)) else None
        except OverflowError:
            return None
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, float) and math.isfinite(value):
        return value
    return None


def first_number(record: dict[str, Any], paths: tuple[tuple[str, ...], ...]) -> float:
    """Return the first non-zero numeric value among ``paths``, else 0."""
    for path in paths:
        number = _as_number(_lookup(record, path))
        if number:
            return number
    return 0


@dataclass(frozen=True)
class RunSummary:
    duration_ms: float = 0
    cost_usd: float = 0
    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def elapsed(self) -> str:
        return format_duration(max(0, int(self.duration_ms // 1000)))

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> RunSummary:
        return cls(
            duration_ms=first_number(record, (("duration_ms",),)),
            cost_usd=first_number(record, COST_FIELDS),
            input_tokens=int(first_number(record, INPUT_TOKEN_FIELDS)),
            output_tokens=int(first_number(record, OUTPUT_TOKEN_FIELDS)),
        )

    def describe(self, tool_uses: int) -> str:
        return (
            f"in {self.elapsed} | Cost: ${self.cost_usd:.4f} | "
            f"Tokens: ↓{self.input_tokens:,} ↑{self.output_tokens:,} | "
            f"Tools: {tool_uses}"
        )
