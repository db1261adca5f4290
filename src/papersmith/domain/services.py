"""Domain services - orchestrate business logic."""

import logging
from collections.abc import Iterable
from pathlib import Path

from ..ports.llm import LLMPort
from ..ports.storage import StoragePort
from .errors import PapersmithError, TargetExistsError
from .models import BatchSummary, Candidate, RenameResult
from .naming import DEFAULT_FALLBACK_LABEL, DEFAULT_MAX_SLUG_LENGTH, target_filename

logger = logging.getLogger(__name__)


class RenamingService:
    """Orchestrates the select → encode → analyze → rename pipeline."""

    def __init__(
        self,
        llm: LLMPort,
        storage: StoragePort,
        dry_run: bool = False,
        fallback_label: str = DEFAULT_FALLBACK_LABEL,
        max_slug_length: int = DEFAULT_MAX_SLUG_LENGTH,
    ) -> None:
        self.llm = llm
        self.storage = storage
        self.dry_run = dry_run
        self.fallback_label = fallback_label
        self.max_slug_length = max_slug_length
        # Targets already handed out by this dry run
        self._previewed: set[Path] = set()

    def process(self, candidate: Candidate) -> RenameResult:
        """Run a single file through the pipeline.

        Pipeline:
            1. Read and encode the file
            2. LLM analysis
            3. Derive the canonical filename
            4. Rename in place (or check the target is free, if dry_run)

        Failures are recorded on the result, never raised.
        """
        result = RenameResult(source_path=candidate.path, dry_run=self.dry_run)

        if candidate.path.suffix.lower() != ".pdf":
            result.errors.append(f"Unsupported file type: {candidate.path.suffix}")
            logger.warning(f"Skipping {candidate.name}: not a PDF")
            return result

        logger.info(f"Processing {candidate.name}")

        try:
            # 1. Encode
            document = self.storage.read_document(candidate.path)

            # 2. LLM analysis
            result.extraction = self.llm.analyze(document)

            # 3. Target name
            result.target_name = target_filename(
                result.extraction, self.fallback_label, self.max_slug_length
            )

            # 4. Rename
            if self.dry_run:
                self._preview(candidate, result.target_name)
            else:
                result.output_path = self.storage.rename(
                    candidate.path, result.target_name
                )
                logger.info(f"Renamed {candidate.name} -> {result.target_name}")

        except PapersmithError as e:
            logger.error(f"{candidate.name}: {e}")
            result.errors.append(str(e))
        except Exception as e:
            logger.exception(f"Processing failed for {candidate.name}: {e}")
            result.errors.append(str(e) or type(e).__name__)

        return result

    def _preview(self, candidate: Candidate, target_name: str) -> None:
        """Fail the way the real rename would, without touching anything."""
        dest = self.storage.check_target(candidate.path, target_name)
        if dest in self._previewed:
            raise TargetExistsError(dest)
        self._previewed.add(dest)
        logger.info(f"Would rename {candidate.name} -> {target_name} (dry-run)")

    def process_all(self, candidates: Iterable[Candidate]) -> BatchSummary:
        """Process candidates one after another; failures don't stop the batch."""
        self._previewed.clear()
        summary = BatchSummary()
        for candidate in candidates:
            summary.results.append(self.process(candidate))
        return summary
