"""Turn model output into an ExtractionResult."""

import json
import logging
from datetime import date, datetime

from ...domain.errors import InferenceError
from ...domain.models import ExtractionResult
from ...domain.naming import DEFAULT_FALLBACK_DATE, DEFAULT_FALLBACK_LABEL
from .validation import looks_suspicious, sanitize_field, strip_code_fences

logger = logging.getLogger(__name__)


def parse_date(value: object, fallback: date) -> date:
    """Parse an ISO-like date, falling back when absent or invalid."""
    if not isinstance(value, str) or not value.strip():
        return fallback
    value = value.strip()
    if value.lower() in ("null", "unknown", "none"):
        return fallback
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        logger.warning(f"Invalid date format: {value[:50]}")
        return fallback


def parse_extraction(
    text: str,
    fallback_date: date = DEFAULT_FALLBACK_DATE,
    fallback_label: str = DEFAULT_FALLBACK_LABEL,
) -> ExtractionResult:
    """Parse the model's JSON answer.

    Missing, null or suspicious fields fall back to defaults. Anything that
    is not a JSON object raises InferenceError.
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise InferenceError(f"Invalid JSON in model output: {cleaned[:200]!r}") from e

    if not isinstance(data, dict):
        raise InferenceError(f"Expected a JSON object, got {type(data).__name__}")

    for key in ("title", "category"):
        value = data.get(key)
        if isinstance(value, str) and looks_suspicious(value):
            logger.warning(f"Suspicious {key} rejected: {value[:50]}")

    return ExtractionResult(
        date=parse_date(data.get("date"), fallback_date),
        category=sanitize_field(data.get("category"), fallback_label),
        title=sanitize_field(data.get("title"), fallback_label),
    )
