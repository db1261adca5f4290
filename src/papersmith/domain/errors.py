"""Error taxonomy.

Only ``ConfigurationError`` is fatal. Everything else is reported against
the file it concerns and the batch moves on.
"""

from pathlib import Path


class PapersmithError(Exception):
    """Base class for all papersmith errors."""


class ConfigurationError(PapersmithError):
    """Required configuration is missing or invalid."""


class DocumentReadError(PapersmithError):
    """A candidate file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path.name}: {reason}")
        self.path = path


class InferenceError(PapersmithError):
    """The inference call failed or returned an unusable answer."""


class TargetExistsError(PapersmithError):
    """The computed target filename is already taken."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"Target already exists: {target.name}")
        self.target = target


class RenameFailedError(PapersmithError):
    """The filesystem refused the rename."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot rename {path.name}: {reason}")
        self.path = path
