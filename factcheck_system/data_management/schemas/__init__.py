"""Schema package for the fact-check pipeline data structures.

Primary exports:
- EvidenceItem / TierInfo: search evidence and its credibility tier
- MediaAnalysisResult: authenticity judgment for uploaded media
- ParsedVerdict / ConfidenceResult: model verdict and composite score
- FactCheckVerdict: final record returned to callers
- AnalysisRecord: lifecycle record held in the analysis store

Usage:
    from factcheck_system.data_management.schemas import AnalysisRecord
    record = AnalysisRecord(analysis_id="a-1").advance(10, "Claim normalized")
"""

from factcheck_system.data_management.schemas.evidence_schema import (
    EvidenceItem,
    MediaAnalysisResult,
    MediaType,
    TierInfo,
)
from factcheck_system.data_management.schemas.verdict_schema import (
    AssessedSource,
    ConfidenceBreakdown,
    ConfidenceResult,
    FactCheckVerdict,
    InputType,
    ParsedVerdict,
    Recommendation,
    SourceStance,
    Stance,
    VerdictLabel,
)
from factcheck_system.data_management.schemas.analysis_schema import (
    AnalysisRecord,
    AnalysisStateError,
    AnalysisStatus,
)

__all__ = [
    "EvidenceItem",
    "MediaAnalysisResult",
    "MediaType",
    "TierInfo",
    "AssessedSource",
    "ConfidenceBreakdown",
    "ConfidenceResult",
    "FactCheckVerdict",
    "InputType",
    "ParsedVerdict",
    "Recommendation",
    "SourceStance",
    "Stance",
    "VerdictLabel",
    "AnalysisRecord",
    "AnalysisStateError",
    "AnalysisStatus",
]
