"""Image authenticity analysis through a vision-capable chat model.

Flow for an image:
1. Classify the file by extension (image / video / unknown)
2. Read and base64-encode it as a MIME-prefixed data URL
3. Send it with the eight-category inspection rubric to the chat gateway
4. Parse the fenced JSON block {authenticityScore, indicators, notes}

Every path yields a MediaAnalysisResult (or None when no file was supplied).
Video and unknown types are defined, non-error outcomes with no score.
Gateway failures, unreadable files and unparseable replies all surface as a
result with authenticity_score=None and an explanatory note.

Usage:
    from factcheck_system.agents.media.media_analyzer import MediaAnalyzer

    analyzer = MediaAnalyzer()
    result = await analyzer.analyze("/tmp/upload.jpg")
"""

import base64
import os
from pathlib import Path
from typing import Any, Optional

import structlog

from factcheck_system.config.prompts import MEDIA_USER_PROMPT, build_media_system_prompt
from factcheck_system.data_management.schemas import MediaAnalysisResult, MediaType
from factcheck_system.llm.gateway_client import GatewayClient
from factcheck_system.utils.json_blocks import JSONBlockError, parse_json_block

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".gif"}
VIDEO_EXTENSIONS = {".mp4", ".webm", ".mov", ".avi"}

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
}

# Characters of raw reply kept as notes when no JSON block can be parsed
RAW_NOTES_LIMIT = 500


def classify_media(path: str) -> MediaType:
    """Media type from the file extension (case-insensitive)."""
    ext = os.path.splitext(path)[1].lower()
    if ext in IMAGE_EXTENSIONS:
        return MediaType.IMAGE
    if ext in VIDEO_EXTENSIONS:
        return MediaType.VIDEO
    return MediaType.UNKNOWN


def to_data_url(path: str) -> str:
    """Read a file and encode it as a data URL with its MIME type."""
    ext = os.path.splitext(path)[1].lower()
    mime = MIME_TYPES.get(ext, "application/octet-stream")
    encoded = base64.b64encode(Path(path).read_bytes()).decode("ascii")
    return f"data:{mime};base64,{encoded}"


class MediaAnalyzer:
    """Authenticity judgment for an uploaded media file."""

    def __init__(self, gateway_client: Optional[GatewayClient] = None) -> None:
        """Initialize MediaAnalyzer.

        Args:
            gateway_client: Chat gateway client. Lazy-initialized from
                settings if not provided, so a run without media never
                constructs one.
        """
        self._gateway_client = gateway_client
        self._logger = structlog.get_logger().bind(component="MediaAnalyzer")

    def _get_gateway_client(self) -> GatewayClient:
        if self._gateway_client is None:
            self._gateway_client = GatewayClient()
        return self._gateway_client

    async def close(self) -> None:
        """Close the gateway client if one was created."""
        if self._gateway_client is not None:
            await self._gateway_client.close()

    async def analyze(self, path: Optional[str]) -> Optional[MediaAnalysisResult]:
        """Analyze a media file.

        Args:
            path: Local path of the uploaded file, or None if none was supplied.

        Returns:
            MediaAnalysisResult, or None when ``path`` is None.
        """
        if not path:
            return None

        filename = os.path.basename(path)
        media_type = classify_media(path)

        if media_type == MediaType.VIDEO:
            self._logger.info("video_not_supported", filename=filename)
            return MediaAnalysisResult(
                filename=filename,
                type=media_type,
                notes="Video analysis is not supported in this version; no authenticity judgment was made.",
            )
        if media_type == MediaType.UNKNOWN:
            self._logger.info("unsupported_media", filename=filename)
            return MediaAnalysisResult(
                filename=filename,
                type=media_type,
                notes="Unsupported file type",
            )

        try:
            data_url = to_data_url(path)
        except OSError as e:
            self._logger.error("media_read_failed", filename=filename, error=str(e))
            return self._failed(filename, media_type, str(e))

        self._logger.info(
            "image_analysis_started",
            filename=filename,
            encoded_bytes=len(data_url),
        )

        messages = [
            {"role": "system", "content": build_media_system_prompt()},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": MEDIA_USER_PROMPT.format(filename=filename)},
                    {"type": "image_url", "image_url": {"url": data_url}},
                ],
            },
        ]
        outcome = await self._get_gateway_client().complete(messages, user="factcheck-media")
        if not outcome.ok:
            return self._failed(filename, media_type, outcome.error or "unknown error")

        result = self.parse_response(outcome.value or "", filename, media_type)
        self._logger.info(
            "image_analysis_complete",
            filename=filename,
            authenticity_score=result.authenticity_score,
            indicators=len(result.deepfake_indicators),
        )
        return result

    def parse_response(
        self,
        reply: str,
        filename: str,
        media_type: MediaType = MediaType.IMAGE,
    ) -> MediaAnalysisResult:
        """Read the model's fenced JSON verdict on an image.

        Falls back to the first RAW_NOTES_LIMIT characters of the reply as
        notes when no block can be decoded.
        """
        try:
            parsed = parse_json_block(reply)
        except JSONBlockError as e:
            self._logger.warning("media_reply_unparsed", filename=filename, reason=str(e))
            return MediaAnalysisResult(
                filename=filename,
                type=media_type,
                notes=reply[:RAW_NOTES_LIMIT],
            )

        indicators = parsed.get("indicators")
        notes = parsed.get("notes")
        return MediaAnalysisResult(
            filename=filename,
            type=media_type,
            deepfake_indicators=[str(i) for i in indicators] if isinstance(indicators, list) else [],
            authenticity_score=_coerce_score(parsed.get("authenticityScore")),
            notes=notes if isinstance(notes, str) else "",
        )

    @staticmethod
    def _failed(filename: str, media_type: MediaType, error: str) -> MediaAnalysisResult:
        return MediaAnalysisResult(
            filename=filename,
            type=media_type,
            notes=f"Analysis failed: {error}",
        )


def _coerce_score(value: Any) -> Optional[float]:
    """Numeric score clamped to [0, 1], or None if absent/non-numeric."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        score = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if score != score:  # NaN
        return None
    return max(0.0, min(1.0, score))
