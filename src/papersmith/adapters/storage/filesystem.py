"""Storage adapter using local filesystem."""

import logging
import os
from pathlib import Path

from ...domain.errors import DocumentReadError, RenameFailedError, TargetExistsError
from ...domain.models import EncodedDocument
from ...ports.storage import StoragePort

logger = logging.getLogger(__name__)


class FilesystemAdapter(StoragePort):
    """Storage implementation using local filesystem."""

    def read_document(self, path: Path) -> EncodedDocument:
        try:
            content = path.read_bytes()
        except OSError as e:
            raise DocumentReadError(path, e.strerror or str(e)) from e

        logger.debug(f"Read {len(content)} bytes from {path.name}")
        return EncodedDocument.from_bytes(path.name, content)

    def check_target(self, path: Path, new_name: str) -> Path:
        dest = path.with_name(new_name)
        if dest.exists():
            raise TargetExistsError(dest)
        return dest

    def rename(self, path: Path, new_name: str) -> Path:
        """Rename within the same directory. Existing targets are never replaced.

        Hard-links the new name first, so a target that appears concurrently
        makes the link fail instead of being replaced. Filesystems without
        hard links fall back to check-then-rename.
        """
        dest = path.with_name(new_name)

        try:
            os.link(path, dest)
        except FileExistsError as e:
            raise TargetExistsError(dest) from e
        except FileNotFoundError as e:
            raise RenameFailedError(path, e.strerror or str(e)) from e
        except OSError as e:
            logger.debug(f"Hard link not possible for {path.name} ({e}), renaming")
            return self._rename_unless_exists(path, dest)

        try:
            os.unlink(path)
        except OSError as e:
            dest.unlink(missing_ok=True)
            raise RenameFailedError(path, e.strerror or str(e)) from e

        return dest

    def _rename_unless_exists(self, path: Path, dest: Path) -> Path:
        if dest.exists():
            raise TargetExistsError(dest)

        try:
            path.rename(dest)
        except OSError as e:
            raise RenameFailedError(path, e.strerror or str(e)) from e

        return dest
