"""Storage port - interface for reading and renaming files."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import EncodedDocument


class StoragePort(ABC):
    """Interface for file access."""

    @abstractmethod
    def read_document(self, path: Path) -> "EncodedDocument":
        """Read a file and encode it for transport.

        Raises DocumentReadError if the file cannot be read.
        """
        pass

    @abstractmethod
    def check_target(self, path: Path, new_name: str) -> Path:
        """Return where a rename would land, without renaming.

        Raises TargetExistsError if that name is already taken.
        """
        pass

    @abstractmethod
    def rename(self, path: Path, new_name: str) -> Path:
        """Rename a file within its directory, never overwriting.

        Returns path to renamed file.
        """
        pass
