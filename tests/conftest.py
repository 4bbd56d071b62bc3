from __future__ import annotations

import io

import pytest

from streamfmt.config import StreamConfig
from streamfmt.format_stream import StreamFormatter

PLAIN = StreamConfig(color="never")


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stderr() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def formatter(stdout: io.StringIO, stderr: io.StringIO) -> StreamFormatter:
    return StreamFormatter(stdout=stdout, stderr=stderr, config=PLAIN)
