"""
Recovery of a single JSON object from free-form model output.

Model responses may wrap the object in a code fence, surround it with prose, or
trail off into malformed content. The scanner isolates the first balanced
object by brace depth, ignoring braces inside quoted strings, and parses exactly
that slice.
"""

import json
import re
from typing import Any, Optional

_FENCED_BLOCK_RE = re.compile(r"^```(?:json)?\s*([\s\S]*?)```\s*$", re.IGNORECASE)

# Single quotes are not JSON, but models use them informally; treating them as
# delimiters keeps a stray brace inside such a string from ending the scan.
_QUOTES = ('"', "'")


def strip_code_fence(text: str) -> str:
    """Unwrap a fenced code block that encloses the whole (trimmed) input."""
    trimmed = text.strip()
    match = _FENCED_BLOCK_RE.match(trimmed)
    if match:
        return match.group(1).strip()
    return trimmed


def find_balanced_object(text: str) -> Optional[str]:
    """
    Return the substring from the first '{' to its matching '}'.

    Returns None when there is no '{' or the braces never balance.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    quote: Optional[str] = None
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if escaped:
            escaped = False
            continue
        if quote is not None:
            if char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in _QUOTES:
            quote = char
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]
    return None


def extract_first_json_object(text: str) -> Optional[dict[str, Any]]:
    """
    Extract and parse the first JSON object embedded in text.

    Args:
        text: Raw model output.

    Returns:
        The parsed object, or None if no balanced object exists or it fails to
        parse. None means "no JSON found"; it is never an exception.
    """
    candidate = find_balanced_object(strip_code_fence(text))
    if candidate is None:
        return None
    try:
        parsed = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None
