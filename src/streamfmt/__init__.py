from __future__ import annotations

from typing import TYPE_CHECKING

__all__ = [
    "__version__",
    "StreamConfig",
    "StreamContext",
    "StreamFormatter",
    "format_lines",
    "format_tool_input",
    "format_tool_result",
]

__version__ = "0.1.0"

if TYPE_CHECKING:
    from .config import StreamConfig
    from .format_stream import StreamFormatter, format_lines
    from .state import StreamContext
    from .tools import format_tool_input, format_tool_result


def __getattr__(name: str):
    if name == "StreamConfig":
        from .config import StreamConfig

        return StreamConfig
    if name == "StreamContext":
        from .state import StreamContext

        return StreamContext
    if name in {"StreamFormatter", "format_lines"}:
        from .format_stream import StreamFormatter, format_lines

        return {"StreamFormatter": StreamFormatter, "format_lines": format_lines}[name]
    if name in {"format_tool_input", "format_tool_result"}:
        from .tools import format_tool_input, format_tool_result

        return {
            "format_tool_input": format_tool_input,
            "format_tool_result": format_tool_result,
        }[name]
    raise AttributeError(f"module 'streamfmt' has no attribute {name!r}")
