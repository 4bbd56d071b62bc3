from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Literal, Mapping

from .util import env_flag, env_int

COLOR_CHOICES = ("auto", "always", "never")
ColorMode = Literal["auto", "always", "never"]

_LIMIT_ENV = {
    "detail_lines": "STREAMFMT_MAX_DETAIL_LINES",
    "detail_line_length": "STREAMFMT_MAX_DETAIL_CHARS",
    "result_lines": "STREAMFMT_MAX_RESULT_LINES",
    "result_line_length": "STREAMFMT_MAX_RESULT_CHARS",
}


class ConfigError(ValueError):
    pass


def normalize_color(raw: str | None, *, source: str) -> ColorMode | None:
    if raw is None:
        return None
    value = raw.strip().lower()
    if not value:
        return None
    if value not in COLOR_CHOICES:
        expected = ", ".join(COLOR_CHOICES)
        raise ConfigError(f"invalid {source} value {raw!r}; expected one of: {expected}")
    return value  # type: ignore[return-value]


@dataclass(frozen=True)
class RenderLimits:
    """Line budgets for echoed tool input and tool results.

    Tool-input details and tool results are clipped independently: input
    echoes are short (one command, one path), results can be whole files.
    """

    detail_lines: int = 3
    detail_line_length: int = 100
    result_lines: int = 5
    result_line_length: int = 120

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 1:
                raise ConfigError(f"{f.name} must be a positive integer, got {value}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RenderLimits:
        defaults = cls()
        try:
            values = {
                key: env_int(var, getattr(defaults, key), environ)
                for key, var in _LIMIT_ENV.items()
            }
        except ValueError as exc:
            raise ConfigError(str(exc)) from None
        return cls(**values)


@dataclass(frozen=True)
class StreamConfig:
    color: ColorMode = "auto"
    debug: bool = False
    limits: RenderLimits = field(default_factory=RenderLimits)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StreamConfig:
        env = os.environ if environ is None else environ
        color = normalize_color(env.get("STREAMFMT_COLOR"), source="STREAMFMT_COLOR")
        return cls(
            color=color or "auto",
            debug=env_flag("STREAMFMT_DEBUG", env),
            limits=RenderLimits.from_env(env),
        )
