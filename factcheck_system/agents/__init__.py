"""Pipeline stage components.

- claim_normalizer: whitespace normalization and question detection
- credibility: source tiering and prompt priority brief
- evidence: Brave search executor and concurrent evidence aggregator
- media: image authenticity analysis through a vision model
- verdict: verdict generation, parsing and composite confidence scoring
"""

from factcheck_system.agents.claim_normalizer import is_question, normalize_claim
from factcheck_system.agents.credibility import SourceAssessor
from factcheck_system.agents.evidence import EvidenceAggregator, SearchExecutor
from factcheck_system.agents.media import MediaAnalyzer
from factcheck_system.agents.verdict import ConfidenceScorer, VerdictGenerator, parse_verdict

__all__ = [
    "is_question",
    "normalize_claim",
    "SourceAssessor",
    "EvidenceAggregator",
    "SearchExecutor",
    "MediaAnalyzer",
    "ConfidenceScorer",
    "VerdictGenerator",
    "parse_verdict",
]
