"""Short display strings for tool inputs and tool results.

Neither formatter raises: a payload that cannot be described yields ``None``
and the caller simply renders nothing for it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

RESULT_MAX_LINES = 5
RESULT_MAX_LINE_LENGTH = 120

_FALLBACK_VALUE_MAX = 80


class ToolKind(Protocol):
    def describe(self, params: dict[str, Any]) -> str | None:
        ...


@dataclass(frozen=True)
class FieldTool:
    """Show one designated input field through a template."""

    field: str
    template: str

    def describe(self, params: dict[str, Any]) -> str | None:
        value = params.get(self.field)
        if not value:
            return None
        return self.template.format(value=value)


@dataclass(frozen=True)
class SubagentTool:
    def describe(self, params: dict[str, Any]) -> str | None:
        desc = params.get("description") or ""
        subagent = params.get("subagent_type") or ""
        if subagent:
            return f"{subagent}({desc})"
        return str(desc) or None


@dataclass(frozen=True)
class CountTool:
    field: str
    noun: str

    def describe(self, params: dict[str, Any]) -> str | None:
        value = params.get(self.field)
        if isinstance(value, (list, dict)) or (isinstance(value, str) and value):
            return f"{len(value)} {self.noun}"
        return None


@dataclass(frozen=True)
class FallbackTool:
    """Unknown tools: ``key: value`` for a short string first parameter."""

    max_value_length: int = _FALLBACK_VALUE_MAX

    def describe(self, params: dict[str, Any]) -> str | None:
        if not params:
            return None
        key, value = next(iter(params.items()))
        if isinstance(value, str) and len(value) < self.max_value_length:
            return f"{key}: {value}"
        return None


TOOL_KINDS: dict[str, ToolKind] = {
    "Bash": FieldTool("command", "$ {value}"),
    "Task": SubagentTool(),
    "Read": FieldTool("file_path", "📄 {value}"),
    "Write": FieldTool("file_path", "✏️  {value}"),
    "Edit": FieldTool("file_path", "🔨 {value}"),
    "Glob": FieldTool("pattern", "🔍 {value}"),
    "Grep": FieldTool("pattern", '🔎 "{value}"'),
    "WebFetch": FieldTool("url", "🌐 {value}"),
    "WebSearch": FieldTool("query", '🔍 "{value}"'),
    "TodoWrite": CountTool("todos", "tasks"),
    "TaskCreate": CountTool("todos", "tasks"),
}

FALLBACK_TOOL: ToolKind = FallbackTool()


def tool_kind(name: str) -> ToolKind:
    return TOOL_KINDS.get(name, FALLBACK_TOOL)


def format_tool_input(name: str, raw: str) -> str | None:
    """Describe a tool call from its complete (reassembled) JSON input."""
    try:
        params = json.loads(raw)
    except (ValueError, RecursionError):
        return None
    if not isinstance(params, dict):
        return None
    try:
        return tool_kind(name).describe(params)
    except Exception:
        return None


def truncate_line(line: str, max_length: int) -> str:
    if len(line) <= max_length:
        return line
    if max_length <= 3:
        return line[:max_length]
    return line[: max_length - 3] + "..."


def clip_lines(
    lines: Sequence[str], *, max_lines: int, max_length: int
) -> tuple[list[str], int]:
    """Keep at most ``max_lines`` lines of at most ``max_length`` chars.

    Returns the kept lines and how many lines were dropped. Clipping an
    already clipped list returns it unchanged.
    """
    kept = [truncate_line(line, max_length) for line in lines[:max_lines]]
    return kept, max(0, len(lines) - max_lines)


def more_lines_marker(hidden: int) -> str:
    return f"... +{hidden} more lines"


def _result_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for block in content:
            if isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text") or ""))
        return "".join(parts)
    if isinstance(content, dict):
        text = content.get("text")
        return str(text) if text else ""
    return ""


def clip_result(
    content: Any,
    *,
    max_lines: int = RESULT_MAX_LINES,
    max_length: int = RESULT_MAX_LINE_LENGTH,
) -> tuple[list[str], int] | None:
    """Non-blank lines of a tool result payload, clipped, plus the hidden count.

    ``content`` may be a string, an object with a ``text`` field, or a list
    of content blocks of which only ``text`` blocks are used. Returns ``None``
    when the payload carries no text.
    """
    try:
        text = _result_text(content)
        lines = [line for line in text.split("\n") if line.strip()]
        if not lines:
            return None
        return clip_lines(lines, max_lines=max_lines, max_length=max_length)
    except Exception:
        return None


def format_tool_result(
    content: Any,
    *,
    max_lines: int = RESULT_MAX_LINES,
    max_length: int = RESULT_MAX_LINE_LENGTH,
) -> str | None:
    """Render a tool result payload as at most ``max_lines`` short lines."""
    clipped = clip_result(content, max_lines=max_lines, max_length=max_length)
    if clipped is None:
        return None
    kept, hidden = clipped
    if hidden:
        return "\n".join([*kept, more_lines_marker(hidden)])
    return "\n".join(kept)
