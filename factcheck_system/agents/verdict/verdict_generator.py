"""Verdict generation over tiered evidence and media findings.

Builds a grounding prompt (role, source priority brief, instructions, the
required JSON block) plus a user message listing every evidence item with its
tier label, then makes a single chat-completion call. Any failure yields
None; the orchestrator decides what verdict to fall back on.

Usage:
    from factcheck_system.agents.verdict.verdict_generator import VerdictGenerator

    generator = VerdictGenerator()
    raw = await generator.generate_verdict(claim, ranked_evidence, media_result)
    verdict = generator.parse_verdict(raw) if raw else None
"""

import re
from typing import Optional

import structlog

from factcheck_system.agents.credibility.source_assessor import SourceAssessor
from factcheck_system.agents.verdict.verdict_parser import parse_verdict
from factcheck_system.config.prompts import (
    REPLY_SENTINEL_TOKENS,
    VERDICT_EVIDENCE_ITEM,
    VERDICT_NO_EVIDENCE,
    VERDICT_SYSTEM_PROMPT,
)
from factcheck_system.data_management.schemas import (
    EvidenceItem,
    MediaAnalysisResult,
    ParsedVerdict,
)
from factcheck_system.llm.gateway_client import GatewayClient

_SENTINELS = re.compile(
    r"\b(?:" + "|".join(re.escape(t) for t in REPLY_SENTINEL_TOKENS) + r")\b"
)


def strip_sentinels(text: str) -> str:
    """Remove gateway keep-alive tokens and surrounding whitespace."""
    return _SENTINELS.sub("", text).strip()


class VerdictGenerator:
    """Ask the language model for a verdict grounded in gathered evidence."""

    def __init__(
        self,
        gateway_client: Optional[GatewayClient] = None,
        source_assessor: Optional[SourceAssessor] = None,
    ) -> None:
        """Initialize VerdictGenerator.

        Args:
            gateway_client: Chat gateway client. Created from settings if None.
            source_assessor: Provides the priority brief for the system prompt.
        """
        self.gateway_client = gateway_client or GatewayClient()
        self.source_assessor = source_assessor or SourceAssessor()
        self._logger = structlog.get_logger().bind(component="VerdictGenerator")

    async def close(self) -> None:
        await self.gateway_client.close()

    def build_system_prompt(self) -> str:
        return VERDICT_SYSTEM_PROMPT.format(
            priority_brief=self.source_assessor.priority_brief()
        )

    def build_user_message(
        self,
        claim: str,
        evidence: list[EvidenceItem],
        media: Optional[MediaAnalysisResult],
    ) -> str:
        """Claim, numbered tiered evidence, then media findings if any."""
        message = f"CLAIM: {claim}\n\n"

        if evidence:
            message += "SEARCH EVIDENCE:\n"
            for index, item in enumerate(evidence, start=1):
                tier_label = (
                    f"[Tier {item.tier_info.tier} - {item.tier_info.label}]"
                    if item.tier_info
                    else "[Unranked]"
                )
                message += VERDICT_EVIDENCE_ITEM.format(
                    index=index,
                    tier_label=tier_label,
                    title=item.title,
                    url=item.url,
                    snippet=item.snippet,
                )
        else:
            message += VERDICT_NO_EVIDENCE

        if media is not None:
            message += "MEDIA ANALYSIS:\n"
            message += f"  File: {media.filename}\n"
            message += f"  Type: {media.type.value}\n"
            if media.authenticity_score is not None:
                message += f"  Authenticity Score: {media.authenticity_score * 100:.1f}%\n"
            if media.deepfake_indicators:
                message += f"  Deepfake Indicators: {', '.join(media.deepfake_indicators)}\n"
            if media.notes:
                message += f"  Notes: {media.notes}\n"

        return message

    async def generate_verdict(
        self,
        claim: str,
        evidence: list[EvidenceItem],
        media: Optional[MediaAnalysisResult] = None,
    ) -> Optional[str]:
        """Request a verdict from the model.

        Args:
            claim: Normalized claim text.
            evidence: Ranked evidence with tier info.
            media: Media analysis result, if media was supplied.

        Returns:
            Reply text with sentinel tokens removed, or None on any failure.
        """
        messages = [
            {"role": "system", "content": self.build_system_prompt()},
            {"role": "user", "content": self.build_user_message(claim, evidence, media)},
        ]
        self._logger.info(
            "verdict_requested",
            evidence=len(evidence),
            has_media=media is not None,
        )

        outcome = await self.gateway_client.complete(messages, user="factcheck")
        if not outcome.ok:
            self._logger.warning("verdict_unavailable", error=outcome.error)
            return None

        reply = strip_sentinels(outcome.value or "")
        return reply or None

    @staticmethod
    def parse_verdict(raw_text: str) -> ParsedVerdict:
        return parse_verdict(raw_text)
