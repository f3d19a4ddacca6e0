"""Exception hierarchy raised by the packaging pipeline."""
from __future__ import annotations

from pathlib import Path


class PackagingError(Exception):
    """Base class for every failure surfaced by :mod:`project_packager`."""


class PreconditionError(PackagingError, FileNotFoundError):
    """A required input or output directory does not exist."""


class CollisionError(PackagingError, FileExistsError):
    """The resolved package path exists and policy forbids replacing it."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Attempting to overwrite file when overwrite is disabled: {self.path}")


class ExhaustedError(PackagingError):
    """No free increment suffix was found within the attempt limit."""

    def __init__(self, attempts: int, last_path: Path) -> None:
        self.attempts = attempts
        self.last_path = Path(last_path)
        super().__init__(f"No free package filename after {attempts} attempts (last tried {self.last_path})")


class ArchiveError(PackagingError):
    """The archive writer failed to produce the package."""
