"""Apply decoded stream events to a ``StreamContext`` and render them."""

from __future__ import annotations

from typing import Any

from .events import StreamEventSink
from .render import TerminalRenderer
from .state import StreamContext
from .summary import RunSummary
from .tools import clip_result, format_tool_input
from .util import json_dumps_compact


def _emit(emit: StreamEventSink | None, event_type: str, payload: dict[str, Any]) -> None:
    if emit:
        emit(event_type, payload)


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _index(ev: dict[str, Any]) -> int | None:
    index = ev.get("index")
    if isinstance(index, int) and not isinstance(index, bool):
        return index
    return None


def _render_result(
    out: TerminalRenderer,
    name: str,
    content: Any,
    *,
    is_error: bool,
    emit: StreamEventSink | None,
) -> None:
    lines, hidden = clip_result(
        content,
        max_lines=out.limits.result_lines,
        max_length=out.limits.result_line_length,
    ) or ([], 0)
    _emit(
        emit,
        "stream.tool.result",
        {"name": name, "is_error": is_error, "text": "\n".join(lines) or None, "hidden": hidden},
    )
    out.tool_result(name, lines, hidden, is_error=is_error)


def _on_stream_event(
    ev: dict[str, Any],
    ctx: StreamContext,
    out: TerminalRenderer,
    emit: StreamEventSink | None,
) -> None:
    ev_type = ev.get("type")

    if ev_type == "content_block_start":
        cb = _as_dict(ev.get("content_block"))
        if cb.get("type") == "tool_use":
            name = str(cb.get("name") or "unknown")
            tool_use_id = cb.get("id") if isinstance(cb.get("id"), str) else None
            ctx.open_tool(_index(ev), name, tool_use_id)
            _emit(emit, "stream.tool.start", {"name": name, "id": tool_use_id})
            out.tool_header(name)
        return

    if ev_type == "content_block_delta":
        delta = _as_dict(ev.get("delta"))
        text = delta.get("text")
        if text:
            text = str(text)
            _emit(emit, "stream.text", {"text": text})
            out.text(text)
        fragment = delta.get("partial_json")
        if fragment is not None:
            call = ctx.find_tool(_index(ev))
            if call is not None:
                call.append(str(fragment))
        return

    if ev_type == "content_block_stop":
        call = ctx.close_tool(_index(ev))
        if call is None or not call.input_buffer:
            return
        details = format_tool_input(call.name, call.input_buffer)
        _emit(emit, "stream.tool", {"name": call.name, "input": call.input_buffer})
        if details:
            out.tool_detail(details)
        return

    if ev_type == "message_start":
        ctx.counters.message_count += 1
        return

    if ev_type == "message_stop":
        return


def process_event(
    event: dict[str, Any],
    ctx: StreamContext,
    out: TerminalRenderer,
    *,
    emit: StreamEventSink | None = None,
) -> None:
    """Apply one decoded event to ``ctx`` and render what it calls for.

    Unknown event types are ignored so newer producers keep working.
    """
    ev_type = event.get("type")

    if ev_type == "stream_event":
        ev = event.get("event")
        if isinstance(ev, dict):
            _on_stream_event(ev, ctx, out, emit)
        return

    if ev_type == "tool_result":
        content = event.get("result") or event.get("content")
        tool_name = event.get("tool_name")
        name = ctx.result_tool_name(str(tool_name) if tool_name else None)
        _render_result(out, name, content, is_error=bool(event.get("is_error")), emit=emit)
        return

    if ev_type == "user":
        content = _as_dict(event.get("message")).get("content")
        if not isinstance(content, list):
            return
        for block in content:
            if not isinstance(block, dict) or block.get("type") != "tool_result":
                continue
            tool_use_id = block.get("tool_use_id")
            name = ctx.result_tool_name(
                tool_use_id=tool_use_id if isinstance(tool_use_id, str) else None
            )
            _render_result(
                out, name, block.get("content"), is_error=bool(block.get("is_error")), emit=emit
            )
        return

    if ev_type == "assistant":
        subagent = _as_dict(event.get("message")).get("subagent")
        if subagent:
            info = _as_dict(subagent)
            out.subagent(str(info.get("type") or "subagent"), str(info.get("status") or ""))
        return

    if ev_type == "error":
        error = event.get("error") or event
        message = error.get("message") if isinstance(error, dict) else None
        text = str(message) if message else json_dumps_compact(error)
        _emit(emit, "stream.error", {"message": text})
        out.error(text)
        return

    if ev_type == "system":
        message = event.get("message")
        if message:
            out.info(message if isinstance(message, str) else json_dumps_compact(message))
        return

    if ev_type == "result":
        summary = RunSummary.from_record(event)
        out.debug(f"result keys: {', '.join(str(k) for k in event)}")
        _emit(
            emit,
            "stream.result",
            {
                "duration_ms": summary.duration_ms,
                "cost_usd": summary.cost_usd,
                "input_tokens": summary.input_tokens,
                "output_tokens": summary.output_tokens,
                "tool_uses": ctx.counters.tool_use_count,
                "messages": ctx.counters.message_count,
            },
        )
        out.summary(summary, ctx.counters.tool_use_count)
        return

    out.debug(f"ignored event type: {ev_type!r}")
