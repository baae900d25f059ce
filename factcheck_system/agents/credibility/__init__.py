"""Source credibility submodule.

Tier-based credibility assessment for evidence URLs:
- SourceAssessor: classify URLs, rank evidence, render the prompt priority brief
"""

from factcheck_system.agents.credibility.source_assessor import SourceAssessor

__all__ = ["SourceAssessor"]
