"""Canonical filename rules."""

import re
import unicodedata
from datetime import date

from .models import ExtractionResult

CANONICAL_PATTERN = re.compile(r"^\d{8}.*\.pdf$")
DEFAULT_FALLBACK_LABEL = "unknown"
DEFAULT_FALLBACK_DATE = date(2021, 12, 31)
DEFAULT_MAX_SLUG_LENGTH = 60

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def is_canonical(name: str) -> bool:
    """Check if a basename already has the ``YYYYMMDD...pdf`` form."""
    return bool(CANONICAL_PATTERN.match(name))


def slugify(
    text: str,
    fallback: str = DEFAULT_FALLBACK_LABEL,
    max_length: int = DEFAULT_MAX_SLUG_LENGTH,
) -> str:
    """Lowercase ASCII slug with words separated by single hyphens."""
    # Transliterate accents (für -> fur) and drop what has no ASCII form
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    slug = _NON_SLUG.sub("-", text.lower()).strip("-")
    if len(slug) > max_length:
        slug = slug[:max_length]
        if "-" in slug:
            slug = slug.rsplit("-", 1)[0]
        slug = slug.strip("-")
    return slug or fallback


def target_filename(
    result: ExtractionResult,
    fallback_label: str = DEFAULT_FALLBACK_LABEL,
    max_slug_length: int = DEFAULT_MAX_SLUG_LENGTH,
) -> str:
    """Build ``YYYYMMDD-title-category.pdf`` from an extraction result."""
    title = slugify(result.title, fallback_label, max_slug_length)
    category = slugify(result.category, fallback_label, max_slug_length)
    d = result.date
    return f"{d.year:04d}{d.month:02d}{d.day:02d}-{title}-{category}.pdf"
