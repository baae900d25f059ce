"""Composite confidence scoring.

Combines four signals into one weighted score:

    with media:    0.35*agreement + 0.25*quality + 0.30*ai + 0.10*media
    without media: 0.39*agreement + 0.28*quality + 0.33*ai

The three-signal weights are the four-signal weights renormalized over the
signals that remain. Every input is clamped to [0, 1], falsy inputs count as
0, and the score is rounded to 4 decimal places before the recommendation is
chosen.
"""

from typing import Optional

from factcheck_system.data_management.schemas import (
    ConfidenceBreakdown,
    ConfidenceResult,
    Recommendation,
)

WEIGHTS_WITH_MEDIA = {
    "source_agreement": 0.35,
    "source_quality": 0.25,
    "ai_confidence": 0.30,
    "media_authenticity": 0.10,
}

WEIGHTS_WITHOUT_MEDIA = {
    "source_agreement": 0.39,
    "source_quality": 0.28,
    "ai_confidence": 0.33,
}

AUTHENTIC_THRESHOLD = 0.75
NEEDS_REVIEW_THRESHOLD = 0.50


def clamp(value: Optional[float]) -> float:
    """Clamp to [0, 1]; None and other falsy values become 0."""
    return max(0.0, min(1.0, float(value or 0.0)))


def recommend(score: float) -> Recommendation:
    if score >= AUTHENTIC_THRESHOLD:
        return Recommendation.AUTHENTIC
    if score >= NEEDS_REVIEW_THRESHOLD:
        return Recommendation.NEEDS_REVIEW
    return Recommendation.DUBIOUS


class ConfidenceScorer:
    """Pure weighted scorer; holds no state and performs no I/O."""

    def score(
        self,
        source_agreement: Optional[float],
        source_quality: Optional[float],
        ai_confidence: Optional[float],
        media_authenticity: Optional[float] = None,
    ) -> ConfidenceResult:
        breakdown = ConfidenceBreakdown(
            source_agreement=clamp(source_agreement),
            source_quality=clamp(source_quality),
            ai_confidence=clamp(ai_confidence),
            media_authenticity=clamp(media_authenticity) if media_authenticity is not None else None,
        )

        weights = WEIGHTS_WITH_MEDIA if breakdown.media_authenticity is not None else WEIGHTS_WITHOUT_MEDIA
        signals = breakdown.model_dump()
        raw = sum(weight * signals[name] for name, weight in weights.items())
        score = round(raw, 4)

        return ConfidenceResult(
            score=score,
            breakdown=breakdown,
            recommendation=recommend(score),
        )
