"""LLM response validation for prompt injection mitigation."""

import re

# Path traversal. Markup and control characters are left for slugify.
_SUSPICIOUS_PATTERN = re.compile(r"\.\.[/\\]")

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*\n?|\n?\s*```$")


def looks_suspicious(text: str) -> bool:
    """Check if text looks like injection attempt."""
    if not text:
        return False
    return bool(_SUSPICIOUS_PATTERN.search(text))


def sanitize_field(text: object, fallback: str) -> str:
    """Return text if it is a safe non-blank string, otherwise fallback."""
    if not isinstance(text, str) or not text.strip():
        return fallback
    if text.strip().lower() in ("null", "none", "unknown", "n/a"):
        return fallback
    if looks_suspicious(text):
        return fallback
    return text.strip()


def strip_code_fences(text: str) -> str:
    """Remove a Markdown code fence wrapped around a JSON answer."""
    return _CODE_FENCE.sub("", text.strip()).strip()
