"""
JSON object extraction from model output.

Models asked for raw JSON still sometimes wrap it in prose or markdown.
Recovery is an ordered chain, each step tried only when the previous one
did not yield an object:

1. Strip whitespace and ```json / ``` fence markers
2. Parse directly when the text starts with '{'
3. Parse the first brace-balanced {...} span
4. Give up with ParseError
"""

import json
import logging
import re
from typing import Any

from cv_analyzer.errors import ParseError

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)


def strip_fences(text: str) -> str:
    """Remove code-fence markers anywhere in the text, then trim."""
    return FENCE_PATTERN.sub("", text).strip()


def try_direct(text: str) -> dict[str, Any] | None:
    """Parse the whole text if it looks like a JSON object."""
    if not text.startswith("{"):
        return None
    try:
        result = json.loads(text)
    except json.JSONDecodeError:
        return None
    return result if isinstance(result, dict) else None


def try_balanced(text: str) -> dict[str, Any] | None:
    """Parse the first brace-balanced {...} span."""
    start = text.find("{")
    if start == -1:
        return None
    span = _extract_balanced(text, start, "{", "}")
    if span is None:
        return None
    try:
        result = json.loads(span)
    except json.JSONDecodeError:
        return None
    return result if isinstance(result, dict) else None


def _extract_balanced(text: str, start: int, open_char: str, close_char: str) -> str | None:
    """Extract balanced brackets/braces starting from position."""
    depth = 0
    in_string = False
    escape_next = False

    for i, char in enumerate(text[start:], start):
        if escape_next:
            escape_next = False
            continue

        if char == "\\" and in_string:
            escape_next = True
            continue

        if char == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    return None


def extract_json_object(raw_text: str | None) -> dict[str, Any]:
    """
    Recover a JSON object from raw provider text.

    Args:
        raw_text: Model output, possibly fenced or wrapped in prose

    Returns:
        The parsed object

    Raises:
        ParseError: No step produced a JSON object
    """
    if not raw_text or not raw_text.strip():
        raise ParseError(raw_text or "", reason="Model returned empty output")

    text = strip_fences(raw_text)

    result = try_direct(text)
    if result is not None:
        return result

    result = try_balanced(text)
    if result is not None:
        logger.info("Recovered JSON object from surrounding text")
        return result

    logger.debug(f"Unparseable model output: {raw_text[:200]!r}")
    raise ParseError(raw_text)
