#!/usr/bin/env python3
"""Render an agent's stream-json output as a readable terminal transcript."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field, replace
from typing import IO, Any, Iterable

from . import __version__
from .config import COLOR_CHOICES, ConfigError, StreamConfig
from .decoder import MalformedLine, decode_line
from .events import StreamEventSink
from .machine import process_event
from .render import TerminalRenderer
from .state import StreamContext


@dataclass
class StreamFormatter:
    stdout: IO[str]
    stderr: IO[str]
    config: StreamConfig = field(default_factory=StreamConfig)
    event_sink: StreamEventSink | None = None
    context: StreamContext = field(default_factory=StreamContext)
    processed_events: int = 0
    malformed_lines: int = 0

    renderer: TerminalRenderer = field(init=False)

    def __post_init__(self) -> None:
        self.renderer = TerminalRenderer(
            stdout=self.stdout,
            stderr=self.stderr,
            color=self.config.color,
            limits=self.config.limits,
            debug_enabled=self.config.debug,
        )

    def _parse_json_line(self, line: str) -> Any | None:
        try:
            return decode_line(line)
        except MalformedLine as exc:
            self.malformed_lines += 1
            self.renderer.passthrough(exc.raw)
            return None

    def process_line(self, line: str) -> None:
        event = self._parse_json_line(line)
        if event is None:
            return

        self.processed_events += 1

        if not isinstance(event, dict):
            self.renderer.debug(f"ignored non-object line: {type(event).__name__}")
            return

        process_event(event, self.context, self.renderer, emit=self.event_sink)

    def finish(self) -> int:
        if self.processed_events == 0:
            if self.malformed_lines == 0:
                self.renderer.warn("No events received")
            return 1
        return 0


def format_lines(
    lines: Iterable[str],
    *,
    stdout: IO[str],
    stderr: IO[str],
    config: StreamConfig | None = None,
    event_sink: StreamEventSink | None = None,
) -> StreamContext:
    """Render every line of ``lines`` and return the final stream state."""
    formatter = StreamFormatter(
        stdout=stdout,
        stderr=stderr,
        config=config or StreamConfig(),
        event_sink=event_sink,
    )
    for line in lines:
        formatter.process_line(line)
    return formatter.context


def main(argv: list[str] | None = None, stdin: IO[str] | None = None) -> None:
    p = argparse.ArgumentParser(
        prog="streamfmt",
        description="Format stream-json agent output read from stdin.",
    )
    p.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        help="Color output: auto (default), always, or never",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Report result record keys and ignored events on stderr",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = p.parse_args(argv)

    try:
        config = StreamConfig.from_env()
    except ConfigError as exc:
        p.error(str(exc))

    if args.color:
        config = replace(config, color=args.color)
    if args.debug:
        config = replace(config, debug=True)

    formatter = StreamFormatter(stdout=sys.stdout, stderr=sys.stderr, config=config)

    inp = sys.stdin if stdin is None else stdin
    for line in inp:
        formatter.process_line(line)

    raise SystemExit(formatter.finish())


if __name__ == "__main__":
    main()
