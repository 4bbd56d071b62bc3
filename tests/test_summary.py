from __future__ import annotations

import pytest

from streamfmt.summary import RunSummary


class TestElapsed:
    @pytest.mark.parametrize(
        ("ms", "expected"),
        [(0, "0s"), (999, "0s"), (59_999, "59s"), (65_000, "1m 5s"), (3_725_000, "62m 5s"), (-10, "0s")],
    )
    def test_format(self, ms: int, expected: str) -> None:
        assert RunSummary(duration_ms=ms).elapsed == expected


class TestFromRecord:
    def test_defaults(self) -> None:
        s = RunSummary.from_record({"type": "result"})
        assert s == RunSummary()
        assert s.describe(0) == "in 0s | Cost: $0.0000 | Tokens: ↓0 ↑0 | Tools: 0"

    def test_cost_aliases(self) -> None:
        assert RunSummary.from_record({"cost_usd": 0.5}).cost_usd == 0.5
        assert RunSummary.from_record({"total_cost_usd": 0.25, "cost_usd": 0.5}).cost_usd == 0.25
        assert RunSummary.from_record({"total_cost_usd": 0, "cost_usd": 0.5}).cost_usd == 0.5

    def test_token_alias_priority(self) -> None:
        record = {
            "input_tokens": 20,
            "usage": {"input_tokens": 30, "output_tokens": 3},
            "session_input_tokens": 40,
            "session_output_tokens": 4,
        }
        s = RunSummary.from_record(record)
        assert s.input_tokens == 20
        assert s.output_tokens == 3

    def test_session_aliases_last(self) -> None:
        s = RunSummary.from_record({"usage": {}, "session_input_tokens": 40, "session_output_tokens": 4})
        assert (s.input_tokens, s.output_tokens) == (40, 4)

    def test_non_numeric_skipped(self) -> None:
        s = RunSummary.from_record({"total_input_tokens": "n/a", "input_tokens": "12", "usage": "x", "cost_usd": True})
        assert s.input_tokens == 12
        assert s.cost_usd == 0

    def test_describe_groups_thousands(self) -> None:
        s = RunSummary(duration_ms=65_000, cost_usd=0.1234, input_tokens=1_234_567, output_tokens=300)
        assert s.describe(4) == "in 1m 5s | Cost: $0.1234 | Tokens: ↓1,234,567 ↑300 | Tools: 4"


class TestOversizedNumbers:
    def test_huge_int_skipped(self) -> None:
        huge = int("9" * 400)
        s = RunSummary.from_record({"total_cost_usd": huge, "input_tokens": huge, "usage": {"input_tokens": 8}})
        assert s.cost_usd == 0
        assert s.input_tokens == 8
        assert "Cost: $0.0000" in s.describe(0)

    def test_large_int_within_float_range(self) -> None:
        assert RunSummary.from_record({"total_input_tokens": 10**20}).input_tokens == 10**20
