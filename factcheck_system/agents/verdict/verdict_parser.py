"""Two-stage parsing of verdict replies.

Stage 1 decodes the fenced JSON block the verdict prompt asks for.
Stage 2, used only when stage 1 fails, is a deliberately blunt keyword scan:

- verdict: first match in a fixed priority order over the lowercased text
- confidence: a "confidence: NN%" pattern, 0 when absent
- explanation: the first 300 characters of the raw reply
"""

import re
from typing import Any

import structlog

from factcheck_system.data_management.schemas import (
    ParsedVerdict,
    SourceStance,
    Stance,
    VerdictLabel,
)
from factcheck_system.utils.json_blocks import JSONBlockError, parse_json_block

DEFAULT_JSON_CONFIDENCE = 0.5
EXPLANATION_FALLBACK_LIMIT = 300

_CONFIDENCE_PATTERN = re.compile(r"confidence:\s*(\d+)%", re.IGNORECASE)

_logger = structlog.get_logger().bind(component="VerdictParser")


def parse_verdict(raw_text: str) -> ParsedVerdict:
    """Parse a verdict reply, falling back to keyword extraction."""
    if not raw_text:
        return ParsedVerdict(
            verdict=VerdictLabel.UNVERIFIED,
            confidence=0.0,
            explanation="No response received",
        )

    try:
        parsed = parse_json_block(raw_text)
    except JSONBlockError as e:
        _logger.info("verdict_fallback_parse", reason=str(e))
        return ParsedVerdict(
            verdict=extract_verdict_label(raw_text),
            confidence=extract_confidence(raw_text),
            explanation=raw_text[:EXPLANATION_FALLBACK_LIMIT],
        )

    explanation = parsed.get("explanation")
    return ParsedVerdict(
        verdict=_coerce_label(parsed.get("verdict")),
        confidence=_coerce_confidence(parsed.get("confidence")),
        explanation=explanation if isinstance(explanation, str) and explanation else "No explanation provided",
        sources=_coerce_sources(parsed.get("sources")),
    )


def extract_verdict_label(text: str) -> VerdictLabel:
    """Keyword scan for a verdict, in fixed priority order."""
    if not text:
        return VerdictLabel.UNVERIFIED
    lowered = text.lower()
    if "false" in lowered and "mostly false" not in lowered:
        return VerdictLabel.FALSE
    if "mostly false" in lowered:
        return VerdictLabel.MOSTLY_FALSE
    if "misleading" in lowered:
        return VerdictLabel.MISLEADING
    if "mostly true" in lowered:
        return VerdictLabel.MOSTLY_TRUE
    if "true" in lowered and "mostly true" not in lowered:
        return VerdictLabel.TRUE
    if "satire" in lowered:
        return VerdictLabel.SATIRE
    if "unverified" in lowered:
        return VerdictLabel.UNVERIFIED
    if "opinion" in lowered:
        return VerdictLabel.OPINION
    return VerdictLabel.UNVERIFIED


def extract_confidence(text: str) -> float:
    """Confidence from a "confidence: NN%" mention, 0.0 when absent."""
    match = _CONFIDENCE_PATTERN.search(text or "")
    if not match:
        return 0.0
    return min(1.0, int(match.group(1)) / 100)


def _coerce_label(value: Any) -> VerdictLabel:
    if isinstance(value, str):
        try:
            return VerdictLabel(value.strip().upper())
        except ValueError:
            pass
    return VerdictLabel.UNVERIFIED


def _coerce_confidence(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_JSON_CONFIDENCE
    try:
        confidence = float(value) / 100
    except OverflowError:
        return DEFAULT_JSON_CONFIDENCE
    if confidence != confidence:  # NaN
        return DEFAULT_JSON_CONFIDENCE
    return max(0.0, min(1.0, confidence))


def _coerce_sources(value: Any) -> list[SourceStance]:
    if not isinstance(value, list):
        return []
    sources: list[SourceStance] = []
    for entry in value:
        if not isinstance(entry, dict) or not isinstance(entry.get("url"), str):
            continue
        stance = entry.get("stance")
        try:
            stance = Stance(stance.strip().lower()) if isinstance(stance, str) else Stance.NEUTRAL
        except ValueError:
            stance = Stance.NEUTRAL
        sources.append(SourceStance(url=entry["url"], stance=stance))
    return sources
