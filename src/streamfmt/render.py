from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO

from rich.console import Console
from rich.text import Text

from .config import ColorMode, RenderLimits
from .summary import RunSummary
from .tools import clip_lines, more_lines_marker

SEPARATOR = "━" * 40

# Category -> (indent, style)
_CATEGORIES: dict[str, tuple[str, str]] = {
    "tool_header": ("", "cyan"),
    "tool_detail": ("   ", "dim"),
    "result_ok": ("   ", "green"),
    "result_error": ("   ", "red"),
    "result_body": ("     ", "bright_black"),
    "result_more": ("     ", "dim"),
    "subagent": ("  ", "magenta"),
    "info": ("", "yellow"),
    "error": ("", "red"),
    "debug": ("", "dim"),
}


def make_console(file: IO[str], color: ColorMode = "auto") -> Console:
    # Payload text is printed as-is: no wrapping, markup, emoji codes or
    # highlighting.
    options: dict[str, object] = {}
    if color == "always":
        options.update(force_terminal=True, color_system="standard")
    elif color == "never":
        options.update(force_terminal=False, no_color=True, color_system=None)
    return Console(
        file=file,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
        **options,
    )


@dataclass
class TerminalRenderer:
    stdout: IO[str]
    stderr: IO[str]
    color: ColorMode = "auto"
    limits: RenderLimits = field(default_factory=RenderLimits)
    debug_enabled: bool = False

    console: Console = field(init=False)
    err_console: Console = field(init=False)

    def __post_init__(self) -> None:
        self.console = make_console(self.stdout, self.color)
        self.err_console = make_console(self.stderr, self.color)

    def _line(self, category: str, text: str, *, lead: str = "") -> None:
        indent, style = _CATEGORIES[category]
        self.console.print(Text(f"{lead}{indent}{text}", style=style))

    def text(self, chunk: str) -> None:
        """Assistant text, written through unchanged."""
        self.stdout.write(chunk)
        self.stdout.flush()

    def passthrough(self, raw: str) -> None:
        self.stderr.write(raw + "\n")
        self.stderr.flush()

    def tool_header(self, name: str) -> None:
        self._line("tool_header", f"🔧 {name}", lead="\n")

    def tool_detail(self, details: str) -> None:
        kept, hidden = clip_lines(
            details.split("\n"),
            max_lines=self.limits.detail_lines,
            max_length=self.limits.detail_line_length,
        )
        for line in kept:
            self._line("tool_detail", line)
        if hidden:
            self._line("tool_detail", more_lines_marker(hidden))

    def tool_result(
        self, name: str, lines: list[str], hidden: int = 0, *, is_error: bool
    ) -> None:
        if is_error:
            self._line("result_error", f"✗ Error ({name}):")
        else:
            self._line("result_ok", f"↳ Result ({name}):")
        for line in lines:
            self._line("result_body", line)
        if hidden:
            self._line("result_more", more_lines_marker(hidden))

    def subagent(self, kind: str, status: str) -> None:
        self._line("subagent", f"↳ [{kind}] {status}", lead="\n")

    def info(self, message: str) -> None:
        self._line("info", f"ℹ️  {message}")

    def error(self, message: str) -> None:
        self._line("error", f"❌ Error: {message}", lead="\n")

    def summary(self, summary: RunSummary, tool_uses: int) -> None:
        self.console.print(f"\n\n{SEPARATOR}")
        self.console.print(
            Text.assemble(("✅ Done", "green"), " ", summary.describe(tool_uses))
        )

    def warn(self, message: str) -> None:
        self.err_console.print(Text(f"⚠ {message}", style="yellow"))

    def debug(self, message: str) -> None:
        if not self.debug_enabled:
            return
        indent, style = _CATEGORIES["debug"]
        self.err_console.print(Text(f"{indent}{message}", style=style))
