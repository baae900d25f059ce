"""Concurrent evidence gathering with first-query-wins deduplication.

Builds three query variants for a claim, runs them against the search
executor concurrently, and merges the results:

1. The raw claim
2. The claim suffixed with "fact check"
3. The claim restricted to trusted wire/broadcast domains

Results are flattened in query order and deduplicated by exact URL. The first
occurrence is kept and later duplicates are dropped entirely (not merged).

gather() never raises: a failed query contributes nothing, and a missing API
key short-circuits to an empty list with a warning.

Usage:
    from factcheck_system.agents.evidence.evidence_aggregator import EvidenceAggregator

    aggregator = EvidenceAggregator()
    evidence = await aggregator.gather("The Eiffel Tower was moved to Rome")
"""

import asyncio
from typing import Optional

import structlog

from factcheck_system.agents.evidence.search_executor import SearchExecutor
from factcheck_system.config.source_tiers import TRUSTED_SEARCH_DOMAINS
from factcheck_system.data_management.schemas import EvidenceItem


def build_queries(claim: str) -> list[str]:
    """Return the three search variants for a claim, in merge priority order."""
    site_filter = " OR ".join(f"site:{domain}" for domain in TRUSTED_SEARCH_DOMAINS)
    return [
        claim,
        f"{claim} fact check",
        f"{claim} {site_filter}",
    ]


def deduplicate(results: list[EvidenceItem]) -> list[EvidenceItem]:
    """Keep the first item for each URL, preserving order."""
    seen: set[str] = set()
    unique: list[EvidenceItem] = []
    for item in results:
        if item.url in seen:
            continue
        seen.add(item.url)
        unique.append(item)
    return unique


class EvidenceAggregator:
    """Fan out search variants for a claim and merge their results."""

    def __init__(self, search_executor: Optional[SearchExecutor] = None) -> None:
        """Initialize EvidenceAggregator.

        Args:
            search_executor: Executor for individual queries. Created from
                settings if not provided.
        """
        self.search_executor = search_executor or SearchExecutor()
        self._logger = structlog.get_logger().bind(component="EvidenceAggregator")

    async def close(self) -> None:
        """Close the search executor's HTTP client."""
        await self.search_executor.close()

    async def gather(self, claim: str) -> list[EvidenceItem]:
        """Gather deduplicated evidence for a claim.

        Args:
            claim: Normalized claim text.

        Returns:
            Evidence items, first-query-wins on duplicate URLs. Empty on any
            failure.
        """
        if not self.search_executor.configured:
            self._logger.warning(
                "search_disabled",
                msg="BRAVE_API_KEY not set, returning no evidence",
            )
            return []

        queries = build_queries(claim)
        outcomes = await asyncio.gather(
            *[self.search_executor.search(q) for q in queries],
            return_exceptions=True,
        )

        all_results: list[EvidenceItem] = []
        for query, outcome in zip(queries, outcomes):
            if isinstance(outcome, BaseException):
                self._logger.error("query_crashed", query=query[:60], error=str(outcome))
                continue
            if not outcome.ok:
                self._logger.warning("query_failed", query=query[:60], error=outcome.error)
            all_results.extend(outcome.unwrap_or([]))

        unique = deduplicate(all_results)
        self._logger.info(
            "evidence_gathered",
            unique=len(unique),
            total=len(all_results),
            queries=len(queries),
        )
        return unique
