"""Tests for VerdictGenerator prompt assembly and model call.

Tests cover:
- System prompt embeds the source priority brief and JSON block
- User message lists tiered evidence and media findings
- Sentinel tokens stripped from replies
- Gateway failure yields None
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from factcheck_system.agents.credibility.source_assessor import SourceAssessor
from factcheck_system.agents.verdict.verdict_generator import (
    VerdictGenerator,
    strip_sentinels,
)
from factcheck_system.data_management.schemas import (
    EvidenceItem,
    MediaAnalysisResult,
    MediaType,
    TierInfo,
    VerdictLabel,
)
from factcheck_system.utils.outcome import Outcome


@pytest.fixture
def gateway() -> MagicMock:
    client = MagicMock()
    client.complete = AsyncMock(return_value=Outcome.success(
        '```json\n{"verdict":"FALSE","confidence":70,"explanation":"Debunked."}\n```'
    ))
    return client


@pytest.fixture
def generator(gateway: MagicMock) -> VerdictGenerator:
    return VerdictGenerator(gateway_client=gateway, source_assessor=SourceAssessor())


@pytest.fixture
def ranked_evidence() -> list[EvidenceItem]:
    return [
        EvidenceItem(
            title="Fact check: no",
            url="https://www.snopes.com/x",
            snippet="Rated false",
            tier_info=TierInfo(tier=1, label="Fact-Check / Primary Source", trust_level="highest", weight=1.0, domain="snopes.com"),
        ),
        EvidenceItem(title="Some blog", url="https://blog.example/y", snippet="It's true!"),
    ]


class TestPrompts:
    def test_system_prompt(self, generator: VerdictGenerator) -> None:
        prompt = generator.build_system_prompt()
        assert "SOURCE PRIORITY" in prompt
        assert "TIER 1 - Fact-Check / Primary Source" in prompt
        assert '{"verdict":"TRUE|FALSE|MOSTLY_TRUE' in prompt
        assert "{priority_brief}" not in prompt

    def test_user_message_with_evidence(self, generator, ranked_evidence) -> None:
        message = generator.build_user_message("Vaccines contain chips", ranked_evidence, None)
        assert message.startswith("CLAIM: Vaccines contain chips\n\n")
        assert "1. [Tier 1 - Fact-Check / Primary Source] Fact check: no" in message
        assert "   URL: https://www.snopes.com/x" in message
        assert "2. [Unranked] Some blog" in message
        assert "MEDIA ANALYSIS" not in message

    def test_user_message_without_evidence(self, generator) -> None:
        message = generator.build_user_message("c", [], None)
        assert "SEARCH EVIDENCE: No search results found." in message

    def test_user_message_with_media(self, generator) -> None:
        media = MediaAnalysisResult(
            filename="photo.jpg",
            type=MediaType.IMAGE,
            deepfake_indicators=["warped ears", "lighting"],
            authenticity_score=0.315,
            notes="likely edited",
        )
        message = generator.build_user_message("c", [], media)
        assert "MEDIA ANALYSIS:\n  File: photo.jpg\n  Type: image\n" in message
        assert "  Authenticity Score: 31.5%\n" in message
        assert "  Deepfake Indicators: warped ears, lighting\n" in message
        assert "  Notes: likely edited\n" in message


class TestGenerateVerdict:
    @pytest.mark.asyncio
    async def test_returns_reply(self, generator, gateway, ranked_evidence) -> None:
        raw = await generator.generate_verdict("claim", ranked_evidence)
        assert raw is not None
        assert generator.parse_verdict(raw).verdict == VerdictLabel.FALSE

        messages = gateway.complete.await_args.args[0]
        assert [m["role"] for m in messages] == ["system", "user"]

    @pytest.mark.asyncio
    async def test_sentinels_removed(self, generator, gateway) -> None:
        gateway.complete.return_value = Outcome.success("HEARTBEAT_OK\nMostly true.\nNO_REPLY")
        assert await generator.generate_verdict("claim", []) == "Mostly true."

    @pytest.mark.asyncio
    async def test_only_sentinels_is_none(self, generator, gateway) -> None:
        gateway.complete.return_value = Outcome.success("NO_REPLY")
        assert await generator.generate_verdict("claim", []) is None

    @pytest.mark.asyncio
    async def test_gateway_failure_is_none(self, generator, gateway) -> None:
        gateway.complete.return_value = Outcome.failure("gateway timed out after 120s")
        assert await generator.generate_verdict("claim", []) is None


def test_strip_sentinels_keeps_other_text() -> None:
    assert strip_sentinels("  NO_REPLY verdict TRUE  ") == "verdict TRUE"
