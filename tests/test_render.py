"""Tests for TerminalRenderer presentation policy."""

from __future__ import annotations

import io

from streamfmt.config import RenderLimits
from streamfmt.render import SEPARATOR, TerminalRenderer
from streamfmt.summary import RunSummary


def _renderer(stdout: io.StringIO, stderr: io.StringIO, **kwargs) -> TerminalRenderer:
    kwargs.setdefault("color", "never")
    return TerminalRenderer(stdout=stdout, stderr=stderr, **kwargs)


def _lines(buf: io.StringIO) -> list[str]:
    return [line.rstrip() for line in buf.getvalue().splitlines()]


class TestPlain:
    def test_no_ansi_when_never(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr)
        r.tool_header("Bash")
        r.error("bad")
        assert "\x1b[" not in stdout.getvalue()

    def test_long_lines_not_wrapped(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr)
        r.tool_result("Read", ["z" * 120], is_error=False)
        assert _lines(stdout)[-1] == "     " + "z" * 120

    def test_markup_not_interpreted(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr)
        r.info("[bold]x[/bold] :smile:")
        assert _lines(stdout) == ["ℹ️  [bold]x[/bold] :smile:"]


class TestColor:
    def test_always_emits_ansi(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr, color="always")
        r.tool_header("Bash")
        out = stdout.getvalue()
        assert "\x1b[" in out
        assert "🔧 Bash" in out


class TestDetail:
    def test_custom_limits(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr, limits=RenderLimits(detail_lines=1, detail_line_length=8))
        r.tool_detail("$ make all\nsecond")
        assert _lines(stdout) == ["   $ mak...", "   ... +1 more lines"]


class TestSummary:
    def test_separator_and_done(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr)
        r.summary(RunSummary(duration_ms=5_000, cost_usd=1.5, input_tokens=10, output_tokens=2), 3)
        assert _lines(stdout) == ["", "", SEPARATOR, "✅ Done in 5s | Cost: $1.5000 | Tokens: ↓10 ↑2 | Tools: 3"]


class TestStderr:
    def test_passthrough_verbatim(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr)
        r.passthrough("[not markup] raw")
        assert stderr.getvalue() == "[not markup] raw\n"

    def test_debug_off(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr)
        r.debug("hidden")
        assert stderr.getvalue() == ""

    def test_warn(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr)
        r.warn("careful")
        assert _lines(stderr) == ["⚠ careful"]
        assert stdout.getvalue() == ""


class TestResultLines:
    def test_hidden_marker_dimmed(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr, color="always")
        r.tool_result("Bash", ["ok"], 3, is_error=False)
        last = stdout.getvalue().splitlines()[-1]
        assert "... +3 more lines" in last
        assert "\x1b[2m" in last

    def test_marker_lookalike_is_body(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr, color="always")
        r.tool_result("Bash", ["... +3 more lines"], is_error=False)
        last = stdout.getvalue().splitlines()[-1]
        assert "\x1b[2m" not in last
        assert "\x1b[90m" in last

    def test_plain_lines(self, stdout: io.StringIO, stderr: io.StringIO) -> None:
        r = _renderer(stdout, stderr)
        r.tool_result("Grep", ["a", "b"], 2, is_error=True)
        assert _lines(stdout) == ["   ✗ Error (Grep):", "     a", "     b", "     ... +2 more lines"]
