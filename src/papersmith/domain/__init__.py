"""Domain layer - core business logic."""

from .models import (
    BatchSummary,
    Candidate,
    EncodedDocument,
    ExtractionResult,
    RenameResult,
)

__all__ = [
    "BatchSummary",
    "Candidate",
    "EncodedDocument",
    "ExtractionResult",
    "RenameResult",
]
