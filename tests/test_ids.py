"""Tests for identifier generators."""

from __future__ import annotations

import re

from hukuk_analyzer.analyzer import ClauseAnalyzer
from hukuk_analyzer.ids import SequentialIdGenerator, UuidIdGenerator


class TestSequentialIdGenerator:
    def test_counts_per_prefix(self) -> None:
        ids = SequentialIdGenerator()
        assert [ids("clause"), ids("clause"), ids("flag")] == ["clause_1", "clause_2", "flag_1"]

    def test_start_and_reset(self) -> None:
        ids = SequentialIdGenerator(start=10)
        ids("result")
        assert ids("result") == "result_11"
        ids.reset()
        assert ids("result") == "result_10"


class TestUuidIdGenerator:
    def test_format_and_uniqueness(self) -> None:
        ids = UuidIdGenerator()
        values = {ids("clause") for _ in range(50)}
        assert len(values) == 50
        assert all(re.fullmatch(r"clause_[0-9a-f]{12}", v) for v in values)

    def test_injected_into_analyzer(self, employment_text: str) -> None:
        result = ClauseAnalyzer(id_generator=UuidIdGenerator()).analyze(employment_text)
        assert re.fullmatch(r"extraction_[0-9a-f]{12}", result.id)
        assert all(c.id.startswith("clause_") for c in result.clauses)
