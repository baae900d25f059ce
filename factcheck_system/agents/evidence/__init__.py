"""Evidence gathering submodule.

- SearchExecutor: single Brave Web Search query with timeout, returns Outcome
- EvidenceAggregator: three concurrent query variants, URL-deduplicated
"""

from factcheck_system.agents.evidence.evidence_aggregator import EvidenceAggregator
from factcheck_system.agents.evidence.search_executor import SearchExecutor

__all__ = ["EvidenceAggregator", "SearchExecutor"]
