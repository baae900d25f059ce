"""Fact-check pipeline orchestrating every stage of an analysis.

Stage checkpoints written to the analysis store:

    0%   submitted
    10%  Claim normalized
    20%  Searching for evidence...   (search || media analysis)
    60%  Evidence gathered
    70%  Sources assessed
    80%  Verdict generated
    90%  Confidence calculated
    100% complete

Collaborators degrade softly: a failed search contributes no evidence, a
failed media analysis contributes no media result, and a missing verdict
falls back to UNVERIFIED. Only a defect in the orchestration itself moves an
analysis to ``error``.

Usage:
    from factcheck_system.pipeline import FactCheckPipeline

    pipeline = FactCheckPipeline()
    analysis_id = await pipeline.submit("5G towers spread viruses")
    status = await pipeline.get_status(analysis_id)
"""

import asyncio
from typing import Any, Optional, Union

from factcheck_system.agents.claim_normalizer import is_question, normalize_claim
from factcheck_system.agents.credibility.source_assessor import SourceAssessor
from factcheck_system.agents.evidence.evidence_aggregator import EvidenceAggregator
from factcheck_system.agents.media.media_analyzer import MediaAnalyzer
from factcheck_system.agents.verdict.confidence_scorer import ConfidenceScorer
from factcheck_system.agents.verdict.verdict_generator import VerdictGenerator
from factcheck_system.data_management.analysis_store import (
    AnalysisStore,
    InMemoryAnalysisStore,
)
from factcheck_system.data_management.schemas import (
    AnalysisRecord,
    AnalysisStateError,
    AnalysisStatus,
    AssessedSource,
    EvidenceItem,
    FactCheckVerdict,
    InputType,
    MediaAnalysisResult,
    MediaType,
    ParsedVerdict,
    Stance,
    VerdictLabel,
)
from factcheck_system.utils.logging import (
    analysis_context,
    get_structured_logger,
    new_analysis_id,
)
from factcheck_system.utils.outcome import settle

# Neutral priors used when a signal is absent
NO_STANCE_AGREEMENT = 0.5
NO_TIER_QUALITY = 0.3
NO_MODEL_CONFIDENCE = 0.5


def source_agreement(verdict: ParsedVerdict) -> float:
    """Share of stanced sources that support the claim; 0.5 with no stances."""
    supports = sum(1 for s in verdict.sources if s.stance == Stance.SUPPORTS)
    contradicts = sum(1 for s in verdict.sources if s.stance == Stance.CONTRADICTS)
    total = supports + contradicts
    return supports / total if total > 0 else NO_STANCE_AGREEMENT


def source_quality(evidence: list[EvidenceItem]) -> float:
    """Mean tier weight over tiered evidence; 0.3 when nothing is tiered."""
    weights = [item.tier_info.weight for item in evidence if item.tier_info and item.tier_info.weight]
    return sum(weights) / len(weights) if weights else NO_TIER_QUALITY


def derive_input_type(claim: str, media: Optional[MediaAnalysisResult]) -> InputType:
    if media is not None and claim:
        return InputType.TEXT_MEDIA
    if media is not None:
        return InputType.VIDEO if media.type == MediaType.VIDEO else InputType.IMAGE
    return InputType.TEXT


def unable_to_determine() -> ParsedVerdict:
    return ParsedVerdict(
        verdict=VerdictLabel.UNVERIFIED,
        confidence=0.0,
        explanation="Unable to determine",
    )


class FactCheckPipeline:
    """Orchestrates claim verification and tracks analysis progress.

    Each analysis record is written only by the task running that analysis;
    status and result queries read snapshots from the store.
    """

    def __init__(
        self,
        store: Optional[AnalysisStore] = None,
        evidence_aggregator: Optional[EvidenceAggregator] = None,
        media_analyzer: Optional[MediaAnalyzer] = None,
        source_assessor: Optional[SourceAssessor] = None,
        verdict_generator: Optional[VerdictGenerator] = None,
        confidence_scorer: Optional[ConfidenceScorer] = None,
    ) -> None:
        """Initialize FactCheckPipeline.

        Args:
            store: Analysis status store. In-memory if not provided.
            evidence_aggregator: Web-search evidence gatherer.
            media_analyzer: Image authenticity analyzer.
            source_assessor: Credibility tiering for evidence.
            verdict_generator: Language-model verdict stage.
            confidence_scorer: Composite confidence scorer.
        """
        self.store = store or InMemoryAnalysisStore()
        self.source_assessor = source_assessor or SourceAssessor()
        self.evidence_aggregator = evidence_aggregator or EvidenceAggregator()
        self.media_analyzer = media_analyzer or MediaAnalyzer()
        self.verdict_generator = verdict_generator or VerdictGenerator(
            source_assessor=self.source_assessor
        )
        self.confidence_scorer = confidence_scorer or ConfidenceScorer()
        self._background: set[asyncio.Task] = set()
        self._active: set[str] = set()
        self._logger = get_structured_logger("FactCheckPipeline")

    async def submit(
        self,
        claim_text: str,
        media_path: Optional[str] = None,
        analysis_id: Optional[str] = None,
    ) -> str:
        """Register an analysis and run it in the background.

        The record exists as processing/0% before this returns, so an
        immediate status poll always finds it.

        Args:
            claim_text: Raw claim text (may be empty when media is supplied).
            media_path: Local path of an uploaded file, or None.
            analysis_id: Caller-supplied identifier. Generated if None.

        Returns:
            The analysis identifier.

        Raises:
            ValueError: If an analysis with this identifier already exists.
        """
        analysis_id = analysis_id or new_analysis_id()
        if analysis_id in self._active:
            raise ValueError(f"analysis {analysis_id} already exists")
        self._active.add(analysis_id)
        try:
            if await self.store.get(analysis_id) is not None:
                raise ValueError(f"analysis {analysis_id} already exists")
            record = AnalysisRecord(analysis_id=analysis_id)
            await self.store.set(record)
        except BaseException:
            self._active.discard(analysis_id)
            raise

        task = asyncio.create_task(self._run_claimed(record, claim_text, media_path))
        self._background.add(task)
        task.add_done_callback(self._background.discard)

        self._logger.info("analysis_submitted", analysis_id=analysis_id, has_media=bool(media_path))
        return analysis_id

    async def wait_all(self) -> None:
        """Wait for every background analysis started by submit()."""
        if self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)

    async def aclose(self) -> None:
        """Close the HTTP clients held by the search and gateway collaborators."""
        await self.evidence_aggregator.close()
        await self.media_analyzer.close()
        await self.verdict_generator.close()

    async def run(
        self,
        analysis_id: str,
        claim_text: str,
        media_path: Optional[str] = None,
    ) -> Optional[FactCheckVerdict]:
        """Run the full pipeline for one claim and optional media file.

        A new record is created when none exists. An existing record is only
        picked up while it is still processing at 0% and not owned by another
        run, so a finished analysis is never reopened.

        Args:
            analysis_id: Identifier the progress is recorded under.
            claim_text: Raw claim text.
            media_path: Local path of an uploaded file, or None.

        Returns:
            The final verdict, or None if the analysis ended in error.

        Raises:
            AnalysisStateError: If the analysis is already running or finished.
        """
        record = await self._claim(analysis_id)
        return await self._run_claimed(record, claim_text, media_path)

    async def _claim(self, analysis_id: str) -> AnalysisRecord:
        """Reserve ``analysis_id`` for one run and return its starting record."""
        if analysis_id in self._active:
            raise AnalysisStateError(f"analysis {analysis_id} is already running")
        self._active.add(analysis_id)
        try:
            record = await self.store.get(analysis_id)
            if record is None:
                record = AnalysisRecord(analysis_id=analysis_id)
                await self.store.set(record)
            elif record.is_terminal:
                raise AnalysisStateError(
                    f"analysis {analysis_id} is already {record.status.value}"
                )
            elif record.progress > 0:
                raise AnalysisStateError(f"analysis {analysis_id} is already running")
        except BaseException:
            self._active.discard(analysis_id)
            raise
        return record

    async def _run_claimed(
        self,
        record: AnalysisRecord,
        claim_text: str,
        media_path: Optional[str],
    ) -> Optional[FactCheckVerdict]:
        try:
            with analysis_context(record.analysis_id):
                return await self._execute(record, claim_text, media_path)
        finally:
            self._active.discard(record.analysis_id)

    async def _execute(
        self,
        record: AnalysisRecord,
        claim_text: str,
        media_path: Optional[str],
    ) -> Optional[FactCheckVerdict]:
        log = self._logger
        analysis_id = record.analysis_id

        try:
            claim = normalize_claim(claim_text)
            log.debug("claim_normalized", length=len(claim), is_question=is_question(claim))
            record = await self._checkpoint(record, 10, "Claim normalized")

            record = await self._checkpoint(record, 20, "Searching for evidence...")
            evidence, media = await self._gather_evidence(claim, media_path, log)
            record = await self._checkpoint(record, 60, "Evidence gathered")

            ranked = self.source_assessor.rank(evidence)
            record = await self._checkpoint(record, 70, "Sources assessed")

            verdict = await self._generate_verdict(claim, ranked, media, log)
            record = await self._checkpoint(record, 80, "Verdict generated")

            confidence = self.confidence_scorer.score(
                source_agreement=source_agreement(verdict),
                source_quality=source_quality(ranked),
                ai_confidence=verdict.confidence or NO_MODEL_CONFIDENCE,
                media_authenticity=media.authenticity_score if media is not None else None,
            )
            record = await self._checkpoint(record, 90, "Confidence calculated")

            stances = {s.url: s.stance for s in verdict.sources}
            result = FactCheckVerdict(
                analysis_id=analysis_id,
                input_type=derive_input_type(claim, media),
                claim=claim,
                verdict=verdict.verdict,
                explanation=verdict.explanation or "Unable to determine",
                confidence=confidence.score,
                confidence_breakdown=confidence.breakdown,
                sources=[
                    AssessedSource(
                        title=item.title,
                        url=item.url,
                        snippet=item.snippet,
                        tier=item.tier_info.tier if item.tier_info else None,
                        tier_label=item.tier_info.label if item.tier_info else "Unranked",
                        stance=stances.get(item.url, Stance.NEUTRAL),
                    )
                    for item in ranked
                ],
                media_analysis=media,
                recommendation=confidence.recommendation,
            )
            record = record.complete(result)
            await self.store.set(record)

            log.info(
                "analysis_complete",
                verdict=result.verdict.value,
                confidence=f"{result.confidence * 100:.1f}%",
                recommendation=result.recommendation.value,
            )
            return result

        except Exception as e:
            log.error("analysis_failed", error=str(e), exc_info=True)
            if record.is_terminal:
                return record.result
            await self.store.set(record.fail(str(e) or type(e).__name__))
            return None

    async def get_status(self, analysis_id: str) -> Optional[dict[str, Any]]:
        """Current status, progress and stage message, or None if unknown."""
        record = await self.store.get(analysis_id)
        if record is None:
            return None
        return {
            "status": record.status.value,
            "progress": record.progress,
            "progress_message": record.progress_message,
        }

    async def get_result(
        self,
        analysis_id: str,
    ) -> Optional[Union[FactCheckVerdict, dict[str, str]]]:
        """Final verdict, ``{"error": message}``, or None while processing/unknown."""
        record = await self.store.get(analysis_id)
        if record is None:
            return None
        if record.status == AnalysisStatus.COMPLETE:
            return record.result
        if record.status == AnalysisStatus.ERROR:
            return {"error": record.error or "Unknown error"}
        return None

    async def _checkpoint(self, record: AnalysisRecord, progress: int, message: str) -> AnalysisRecord:
        updated = record.advance(progress, message)
        await self.store.set(updated)
        self._logger.info("progress", progress=progress, message=message)
        return updated

    async def _gather_evidence(
        self,
        claim: str,
        media_path: Optional[str],
        log: Any,
    ) -> tuple[list[EvidenceItem], Optional[MediaAnalysisResult]]:
        """Run search and media analysis concurrently, each failing independently."""
        search_outcome, media_outcome = await asyncio.gather(
            settle(self.evidence_aggregator.gather(claim)),
            settle(self.media_analyzer.analyze(media_path)),
        )
        if not search_outcome.ok:
            log.error("evidence_search_failed", error=search_outcome.error)
        if not media_outcome.ok:
            log.error("media_analysis_failed", error=media_outcome.error)

        evidence = search_outcome.unwrap_or([]) or []
        media = media_outcome.unwrap_or(None)
        return evidence, media

    async def _generate_verdict(
        self,
        claim: str,
        ranked: list[EvidenceItem],
        media: Optional[MediaAnalysisResult],
        log: Any,
    ) -> ParsedVerdict:
        outcome = await settle(self.verdict_generator.generate_verdict(claim, ranked, media))
        raw = outcome.unwrap_or(None)
        if not outcome.ok:
            log.error("verdict_generation_failed", error=outcome.error)
        if not raw:
            log.warning("verdict_missing", msg="No model reply, using UNVERIFIED")
            return unable_to_determine()
        return self.verdict_generator.parse_verdict(raw)
