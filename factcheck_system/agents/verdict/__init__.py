"""Verdict submodule.

- VerdictGenerator: grounding prompt and chat-model call
- parse_verdict: strict JSON parse with keyword fallback
- ConfidenceScorer: weighted composite score and recommendation
"""

from factcheck_system.agents.verdict.confidence_scorer import ConfidenceScorer
from factcheck_system.agents.verdict.verdict_generator import VerdictGenerator
from factcheck_system.agents.verdict.verdict_parser import parse_verdict

__all__ = ["ConfidenceScorer", "VerdictGenerator", "parse_verdict"]
