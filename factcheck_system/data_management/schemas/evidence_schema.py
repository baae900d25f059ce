"""Evidence and media schemas for the fact-check pipeline.

EvidenceItem is what the search executor produces and what the source
assessor decorates with TierInfo. MediaAnalysisResult is the structured
authenticity judgment for an uploaded file.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TierInfo(BaseModel):
    """Credibility tier matched for a source hostname.

    Exactly one tier matches a hostname, or none (the item is unranked and
    carries ``tier_info=None``).
    """

    tier: int = Field(..., ge=1, le=4, description="Tier number, 1 is most trusted")
    label: str = Field(..., description="Human-readable tier label")
    trust_level: str = Field(..., description="Qualitative trust descriptor")
    weight: float = Field(..., ge=0.0, le=1.0, description="Numeric tier weight")
    domain: str = Field(..., description="Hostname that matched, without www.")

    model_config = {"frozen": True}


class EvidenceItem(BaseModel):
    """Single search result gathered as evidence for a claim."""

    title: str = Field(default="", description="Result title")
    url: str = Field(default="", description="Result URL, unique within a gathered set")
    snippet: str = Field(default="", description="Result description text")
    source: str = Field(default="brave", description="Search provider that returned it")
    tier_info: Optional[TierInfo] = Field(
        default=None,
        description="Credibility tier, set by the source assessor",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Fact check: No, the moon landing was not staged",
                    "url": "https://apnews.com/article/fact-check-moon-landing",
                    "snippet": "Claims that the 1969 landing was filmed in a studio are false.",
                    "source": "brave",
                }
            ]
        }
    }


class MediaType(str, Enum):
    """Media category derived from the file extension."""

    IMAGE = "image"
    VIDEO = "video"
    UNKNOWN = "unknown"


class MediaAnalysisResult(BaseModel):
    """Authenticity judgment for an uploaded media file.

    ``authenticity_score=None`` means no judgment is available, which is
    different from a judgment of 0.0 (certainly manipulated).
    """

    filename: str
    type: MediaType
    deepfake_indicators: list[str] = Field(default_factory=list)
    authenticity_score: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    notes: str = ""
