"""Candidate selection from a glob pattern."""

import glob
import logging
from pathlib import Path

from .models import Candidate
from .naming import is_canonical

logger = logging.getLogger(__name__)


def select_candidates(pattern: str) -> list[Candidate]:
    """Expand a glob pattern into files that still need renaming.

    Directories and files already named ``YYYYMMDD...pdf`` are skipped.
    ``**`` matches recursively. No matches is not an error.
    """
    matches = glob.glob(str(Path(pattern).expanduser()), recursive=True)

    candidates: list[Candidate] = []
    seen: set[Path] = set()
    for match in sorted(matches):
        path = Path(match)
        if path in seen or not path.is_file():
            continue
        seen.add(path)

        if is_canonical(path.name):
            logger.debug(f"Skipping {path.name}")
            continue

        candidates.append(Candidate(path=path))

    logger.debug(f"Selected {len(candidates)} of {len(matches)} matches")
    return candidates
