from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_TOOL_LABEL = "tool"


@dataclass
class ToolCallState:
    index: int | None
    name: str
    tool_use_id: str | None = None
    input_buffer: str = ""

    def append(self, fragment: str) -> None:
        self.input_buffer += fragment


@dataclass
class SessionCounters:
    message_count: int = 0
    tool_use_count: int = 0


@dataclass
class StreamContext:
    """Accumulation state for one stream, from first line to end of input.

    Open tool calls are keyed by their content block index so interleaved
    tool blocks accumulate separately. Events without an ``index`` address
    the most recently opened call.
    """

    counters: SessionCounters = field(default_factory=SessionCounters)
    open_tools: dict[int | None, ToolCallState] = field(default_factory=dict)
    last_tool_name: str | None = None
    tool_names: dict[str, str] = field(default_factory=dict)

    @property
    def current_tool(self) -> ToolCallState | None:
        if not self.open_tools:
            return None
        return next(reversed(self.open_tools.values()))

    def open_tool(
        self, index: int | None, name: str, tool_use_id: str | None = None
    ) -> ToolCallState:
        # Re-opening an index starts over; move it to the end so it is current.
        self.open_tools.pop(index, None)
        call = ToolCallState(index=index, name=name, tool_use_id=tool_use_id)
        self.open_tools[index] = call
        self.last_tool_name = name
        if tool_use_id:
            self.tool_names[tool_use_id] = name
        self.counters.tool_use_count += 1
        return call

    def _resolve(self, index: int | None) -> int | None:
        if index is None:
            call = self.current_tool
            return call.index if call else None
        if index in self.open_tools:
            return index
        if None in self.open_tools:
            return None
        return index

    def find_tool(self, index: int | None) -> ToolCallState | None:
        return self.open_tools.get(self._resolve(index))

    def close_tool(self, index: int | None) -> ToolCallState | None:
        return self.open_tools.pop(self._resolve(index), None)

    def result_tool_name(
        self, name: str | None = None, tool_use_id: str | None = None
    ) -> str:
        if name:
            return name
        if tool_use_id and tool_use_id in self.tool_names:
            return self.tool_names.pop(tool_use_id)
        return self.last_tool_name or DEFAULT_TOOL_LABEL
