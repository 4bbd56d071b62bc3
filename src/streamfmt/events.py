from __future__ import annotations

from typing import Any, Callable

StreamEventSink = Callable[[str, dict[str, Any]], None]
