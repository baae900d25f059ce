"""Extraction of fenced JSON blocks from free-text model replies.

Only blocks tagged ``json`` are considered; plain fences (quoted claims,
code samples) are skipped.
"""

import json
import re
from typing import Any, Optional

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)```", re.IGNORECASE)


class JSONBlockError(ValueError):
    """No decodable fenced JSON object was found."""


def find_json_block(text: str) -> Optional[str]:
    """Return the body of the first ```json fenced block, or None."""
    if not text:
        return None
    match = _FENCED_JSON.search(text)
    return match.group(1).strip() if match else None


def parse_json_block(text: str) -> dict[str, Any]:
    """
    Decode the first ```json fenced block of ``text`` as a JSON object.

    Raises:
        JSONBlockError: No fenced block, invalid JSON, or a non-object value
    """
    block = find_json_block(text)
    if block is None:
        raise JSONBlockError("no fenced JSON block in reply")
    try:
        parsed = json.loads(block)
    except ValueError as e:
        # JSONDecodeError, or an integer literal past the int-conversion limit
        raise JSONBlockError(f"fenced block is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise JSONBlockError(f"fenced block decoded to {type(parsed).__name__}, not an object")
    return parsed
