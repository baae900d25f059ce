"""Prompt templates for model-backed stages.

Modules:
    verdict_prompts: System prompt and evidence formatting for verdicts
    media_prompts: Eight-category image inspection rubric
"""

from factcheck_system.config.prompts.verdict_prompts import (
    REPLY_SENTINEL_TOKENS,
    VERDICT_EVIDENCE_ITEM,
    VERDICT_NO_EVIDENCE,
    VERDICT_SYSTEM_PROMPT,
)
from factcheck_system.config.prompts.media_prompts import (
    MEDIA_INSPECTION_CATEGORIES,
    MEDIA_SYSTEM_PROMPT,
    MEDIA_USER_PROMPT,
    build_media_system_prompt,
)

__all__ = [
    "REPLY_SENTINEL_TOKENS",
    "VERDICT_EVIDENCE_ITEM",
    "VERDICT_NO_EVIDENCE",
    "VERDICT_SYSTEM_PROMPT",
    "MEDIA_INSPECTION_CATEGORIES",
    "MEDIA_SYSTEM_PROMPT",
    "MEDIA_USER_PROMPT",
    "build_media_system_prompt",
]
