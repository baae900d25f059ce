"""Claim text normalization and phrasing classification."""

import re

MAX_CLAIM_LENGTH = 5000

QUESTION_STARTERS = frozenset({
    "who", "what", "where", "when", "why", "how",
    "is", "are", "was", "were",
    "do", "does", "did",
    "can", "could",
    "will", "would", "should",
})

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_claim(text: object) -> str:
    """Trim, collapse whitespace runs and cap the claim at MAX_CLAIM_LENGTH.

    Non-string or empty input yields an empty string. The result is a fixed
    point: normalizing it again returns it unchanged.
    """
    if not text or not isinstance(text, str):
        return ""
    collapsed = _WHITESPACE_RUN.sub(" ", text.strip())
    # the cut can land right after a collapsed space
    return collapsed[:MAX_CLAIM_LENGTH].rstrip()


def is_question(text: object) -> bool:
    """True if the text ends with '?' or opens with a question word."""
    if not text or not isinstance(text, str):
        return False

    trimmed = text.strip()
    if not trimmed:
        return False
    if trimmed.endswith("?"):
        return True

    first_word = trimmed.split()[0].lower()
    return first_word in QUESTION_STARTERS
