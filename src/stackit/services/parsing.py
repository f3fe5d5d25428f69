"""Tolerant parsing of model output."""

import json
import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from ..core.constants import ScoreConstants, PromptConstants

logger = logging.getLogger(__name__)

_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")
_TAG_SPLIT_RE = re.compile(r"[,\n]")
_TAG_STRIP = " \t\"'`*•[]"
_LIST_MARKER_RE = re.compile(r"^(?:[-*•]\s+|\d+[.)]\s+)")


class ParseStatus(str, Enum):
    OK = "ok"
    UNPARSABLE = "unparsable"
    NO_RESPONSE = "no_response"
    ERROR = "error"  # the call itself raised


@dataclass
class ParsedResponse:
    """Outcome of parsing one model response.

    ``data`` is set only when ``status`` is OK. ``raw`` keeps the model text
    for heuristics that work on prose.
    """
    status: ParseStatus
    data: Optional[Dict[str, Any]] = None
    raw: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK


def _loads_object(candidate: str) -> Optional[Dict[str, Any]]:
    for attempt in (candidate, _TRAILING_COMMA_RE.sub(r"\1", candidate)):
        try:
            value = json.loads(attempt)
        except ValueError:
            continue
        return value if isinstance(value, dict) else None
    return None


def parse_model_output(text: Optional[str]) -> ParsedResponse:
    """Extract the first ``{...}`` object (greedy) from model text."""
    if text is None or not text.strip():
        return ParsedResponse(ParseStatus.NO_RESPONSE)
    
    match = _OBJECT_RE.search(text)
    if not match:
        logger.warning("No JSON object found in model response")
        return ParsedResponse(ParseStatus.UNPARSABLE, raw=text)
    
    data = _loads_object(match.group(0))
    if data is None:
        logger.warning("JSON parsing failed for model response")
        return ParsedResponse(ParseStatus.UNPARSABLE, raw=text)
    return ParsedResponse(ParseStatus.OK, data=data, raw=text)


def wrap_text(text: Optional[str]) -> ParsedResponse:
    """Free-text counterpart of ``parse_model_output``."""
    if text is None or not text.strip():
        return ParsedResponse(ParseStatus.NO_RESPONSE)
    return ParsedResponse(ParseStatus.OK, raw=text)


def clamp_score(value: Any, default: float) -> float:
    """Coerce a score into [0, 100], using ``default`` for missing or non-numeric values."""
    if isinstance(value, bool) or value is None:
        number = default
    elif isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip().rstrip("%"))
        except ValueError:
            number = default
    else:
        number = default
    
    if isinstance(number, float) and math.isnan(number):
        number = default
    return float(max(ScoreConstants.MIN_SCORE, min(ScoreConstants.MAX_SCORE, number)))


def coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1"):
            return True
        if lowered in ("false", "no", "0"):
            return False
    return default


def coerce_text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def string_list(value: Any, limit: int = PromptConstants.MAX_LIST_ITEMS) -> List[str]:
    """Non-empty strings from a list value, capped at ``limit``."""
    if not isinstance(value, list):
        return []
    items = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return items[:limit]


def canonicalize_tags(tags: Iterable[str], vocabulary: Iterable[str], limit: int = PromptConstants.MAX_TAGS) -> List[str]:
    """Map tags onto the vocabulary's spelling, dropping unknown ones and duplicates."""
    lookup = {tag.lower(): tag for tag in vocabulary}
    result = []
    for tag in tags:
        if not isinstance(tag, str):
            continue
        cleaned = _LIST_MARKER_RE.sub("", tag.strip()).strip(_TAG_STRIP)
        canonical = None
        for candidate in (cleaned, cleaned.lstrip("#"), cleaned.rstrip(".")):
            canonical = lookup.get(candidate.lower())
            if canonical:
                break
        if canonical and canonical not in result:
            result.append(canonical)
        if len(result) >= limit:
            break
    return result


def parse_tag_list(text: str, vocabulary: Iterable[str], limit: int = PromptConstants.MAX_TAGS) -> List[str]:
    """Parse a comma separated tag answer such as ``"Tags: React, CSS"``."""
    if not isinstance(text, str):
        return []
    if ":" in text.split("\n", 1)[0]:
        text = text.split(":", 1)[1]
    return canonicalize_tags(_TAG_SPLIT_RE.split(text), vocabulary, limit)
