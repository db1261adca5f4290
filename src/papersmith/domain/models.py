"""Domain models."""

import base64
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

PDF_MEDIA_TYPE = "application/pdf"


@dataclass(frozen=True)
class Candidate:
    """A file selected for renaming."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class EncodedDocument:
    """Base64 payload of a document, ready for transport."""

    filename: str
    data: str  # base64 text
    size: int = 0  # raw byte count

    @classmethod
    def from_bytes(cls, filename: str, content: bytes) -> "EncodedDocument":
        return cls(
            filename=filename,
            data=base64.b64encode(content).decode("ascii"),
            size=len(content),
        )

    @property
    def data_url(self) -> str:
        return f"data:{PDF_MEDIA_TYPE};base64,{self.data}"


@dataclass(frozen=True)
class ExtractionResult:
    """Structured document facts returned by the model."""

    date: date
    category: str
    title: str


@dataclass
class RenameResult:
    """Outcome of running one file through the pipeline."""

    source_path: Path
    extraction: ExtractionResult | None = None
    target_name: str | None = None
    output_path: Path | None = None
    dry_run: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0 and self.target_name is not None


@dataclass
class BatchSummary:
    """Aggregated outcome of a batch run."""

    results: list[RenameResult] = field(default_factory=list)

    @property
    def renamed(self) -> int:
        return sum(1 for r in self.results if r.success and not r.dry_run)

    @property
    def previewed(self) -> int:
        return sum(1 for r in self.results if r.success and r.dry_run)

    @property
    def failed(self) -> list[RenameResult]:
        return [r for r in self.results if not r.success]

    def __str__(self) -> str:
        return (
            f"Renamed: {self.renamed}, previewed: {self.previewed}, "
            f"errors: {len(self.failed)}"
        )
