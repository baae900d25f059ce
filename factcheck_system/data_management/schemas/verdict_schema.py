"""Verdict, confidence and final-record schemas.

ParsedVerdict is the structured reading of a language-model reply.
ConfidenceResult is the composite score. FactCheckVerdict is the record a
caller receives once an analysis completes.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from factcheck_system.data_management.schemas.evidence_schema import (
    MediaAnalysisResult,
)


class VerdictLabel(str, Enum):
    """The eight verdicts a claim can receive."""

    TRUE = "TRUE"
    FALSE = "FALSE"
    MOSTLY_TRUE = "MOSTLY_TRUE"
    MOSTLY_FALSE = "MOSTLY_FALSE"
    MISLEADING = "MISLEADING"
    UNVERIFIED = "UNVERIFIED"
    SATIRE = "SATIRE"
    OPINION = "OPINION"


class Stance(str, Enum):
    """Position a source takes towards the claim."""

    SUPPORTS = "supports"
    CONTRADICTS = "contradicts"
    NEUTRAL = "neutral"


class Recommendation(str, Enum):
    """Coarse recommendation derived from the composite score."""

    AUTHENTIC = "AUTHENTIC"
    NEEDS_REVIEW = "NEEDS_REVIEW"
    DUBIOUS = "DUBIOUS"


class InputType(str, Enum):
    """What the caller supplied for an analysis."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    TEXT_MEDIA = "text+media"


class SourceStance(BaseModel):
    """A source the model cited, with the stance it assigned."""

    url: str
    stance: Stance = Stance.NEUTRAL


class ParsedVerdict(BaseModel):
    """Structured verdict extracted from a model reply."""

    verdict: VerdictLabel = VerdictLabel.UNVERIFIED
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    explanation: str = ""
    sources: list[SourceStance] = Field(default_factory=list)


class ConfidenceBreakdown(BaseModel):
    """Clamped input signals that went into the composite score."""

    source_agreement: float
    source_quality: float
    ai_confidence: float
    media_authenticity: Optional[float] = None


class ConfidenceResult(BaseModel):
    """Composite confidence score with its breakdown and recommendation."""

    score: float = Field(..., ge=0.0, le=1.0)
    breakdown: ConfidenceBreakdown
    recommendation: Recommendation


class AssessedSource(BaseModel):
    """Evidence item as it appears in the final record."""

    title: str
    url: str
    snippet: str
    tier: Optional[int] = None
    tier_label: str = "Unranked"
    stance: Stance = Stance.NEUTRAL


class FactCheckVerdict(BaseModel):
    """Final record for a completed analysis."""

    analysis_id: str
    input_type: InputType
    claim: str
    verdict: VerdictLabel
    explanation: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    confidence_breakdown: ConfidenceBreakdown
    sources: list[AssessedSource] = Field(default_factory=list)
    media_analysis: Optional[MediaAnalysisResult] = None
    recommendation: Recommendation
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
