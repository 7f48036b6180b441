"""Tolerant parsing of model replies (code fences, trailing commas, surrounding prose)."""
import json
import logging
import re
from json import JSONDecodeError
from typing import List, Optional

from omniplan.ai.types import AIProviderError, ScheduleItem
from omniplan.utilities.constants import AI_EMPTY_FOCUS

logger = logging.getLogger(__name__)

MAX_FOCUS_LENGTH = 60


def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```(?:json)?|```$", "", text.strip())
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _extract_json_by_balancing(text: str, opening: str = "[") -> Optional[str]:
    """Extract the first balanced JSON value that starts with ``opening``."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if start is None:
            if ch == opening:
                start = i
                stack.append(ch)
            continue
        if escape:
            escape = False
            continue
        if ch == "\\" and in_string:
            escape = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch in "{[":
            stack.append(ch)
        elif ch in "}]":
            if not stack:
                return None
            open_ch = stack.pop()
            if (open_ch == "{" and ch != "}") or (open_ch == "[" and ch != "]"):
                return None
            if not stack:
                return text[start:i + 1]
    return None


def clean_focus(text: Optional[str]) -> str:
    '''Single-line focus title without quotes; empty replies become the default focus.'''
    text = _strip_code_fences(text or "")
    line = next((ln.strip() for ln in text.splitlines() if ln.strip()), "")
    line = line.strip("\"'“”` ").strip()
    if not line:
        return AI_EMPTY_FOCUS
    return line[:MAX_FOCUS_LENGTH].rstrip()


def parse_schedule(text: str) -> List[ScheduleItem]:
    """Parse a schedule reply into items; unusable entries are skipped.

    Raises AIProviderError when the reply holds no JSON array at all.
    """
    cleaned = _remove_trailing_commas(_strip_code_fences(text or ""))
    candidate = _extract_json_by_balancing(cleaned, "[")
    if candidate is None:
        raise AIProviderError("AI reply does not contain a JSON array")
    try:
        raw_items = json.loads(candidate)
    except JSONDecodeError as e:
        raise AIProviderError(f"AI schedule is not valid JSON: {e}") from e

    items = []
    for raw in raw_items:
        try:
            items.append(ScheduleItem.from_dict(raw))
        except ValueError as e:
            logger.warning(f"Skipping schedule item: {e}")
    return items
