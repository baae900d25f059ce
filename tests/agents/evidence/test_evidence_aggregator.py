"""Tests for EvidenceAggregator fan-out and deduplication.

Tests cover:
- Query variant construction
- Concurrent execution of all three queries
- First-query-wins URL deduplication
- Partial failure (one query fails or raises)
- Missing API key short-circuit
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from factcheck_system.agents.evidence.evidence_aggregator import (
    EvidenceAggregator,
    build_queries,
    deduplicate,
)
from factcheck_system.data_management.schemas import EvidenceItem
from factcheck_system.utils.outcome import Outcome


def _item(url: str, title: str = "") -> EvidenceItem:
    return EvidenceItem(title=title or url, url=url, snippet="", source="brave")


def _executor(results_by_query: dict) -> MagicMock:
    executor = MagicMock()
    executor.configured = True

    async def search(query: str):
        value = results_by_query[query]
        if isinstance(value, Exception):
            raise value
        return value

    executor.search = AsyncMock(side_effect=search)
    return executor


class TestBuildQueries:
    def test_three_variants(self) -> None:
        queries = build_queries("Bananas cure colds")
        assert queries == [
            "Bananas cure colds",
            "Bananas cure colds fact check",
            "Bananas cure colds site:reuters.com OR site:apnews.com OR site:bbc.com",
        ]


class TestDeduplicate:
    def test_keeps_first_occurrence(self) -> None:
        items = [_item("a", "first-a"), _item("b"), _item("a", "second-a")]
        unique = deduplicate(items)
        assert [(i.url, i.title) for i in unique] == [("a", "first-a"), ("b", "b")]


class TestGather:
    @pytest.mark.asyncio
    async def test_dedup_across_queries(self) -> None:
        claim = "claim"
        q1, q2, q3 = build_queries(claim)
        executor = _executor({
            q1: Outcome.success([_item("a", "from-q1")]),
            q2: Outcome.success([_item("b")]),
            q3: Outcome.success([_item("a", "from-q3")]),
        })
        evidence = await EvidenceAggregator(search_executor=executor).gather(claim)

        assert [i.url for i in evidence] == ["a", "b"]
        assert evidence[0].title == "from-q1"
        assert executor.search.await_count == 3

    @pytest.mark.asyncio
    async def test_queries_run_concurrently(self) -> None:
        in_flight = 0
        peak = 0

        async def search(query: str):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return Outcome.success([_item(query)])

        executor = MagicMock()
        executor.configured = True
        executor.search = AsyncMock(side_effect=search)

        evidence = await EvidenceAggregator(search_executor=executor).gather("c")
        assert peak == 3
        assert len(evidence) == 3

    @pytest.mark.asyncio
    async def test_failed_query_contributes_nothing(self) -> None:
        q1, q2, q3 = build_queries("c")
        executor = _executor({
            q1: Outcome.failure("HTTP error 500"),
            q2: Outcome.success([_item("b")]),
            q3: RuntimeError("boom"),
        })
        evidence = await EvidenceAggregator(search_executor=executor).gather("c")
        assert [i.url for i in evidence] == ["b"]

    @pytest.mark.asyncio
    async def test_all_queries_fail(self) -> None:
        q1, q2, q3 = build_queries("c")
        executor = _executor({
            q1: Outcome.failure("timeout"),
            q2: Outcome.failure("timeout"),
            q3: Outcome.failure("timeout"),
        })
        assert await EvidenceAggregator(search_executor=executor).gather("c") == []

    @pytest.mark.asyncio
    async def test_missing_key_returns_empty_without_calls(self) -> None:
        executor = MagicMock()
        executor.configured = False
        executor.search = AsyncMock()

        evidence = await EvidenceAggregator(search_executor=executor).gather("c")
        assert evidence == []
        executor.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_close_closes_executor(self) -> None:
        executor = MagicMock()
        executor.close = AsyncMock()
        await EvidenceAggregator(search_executor=executor).close()
        executor.close.assert_awaited_once()
