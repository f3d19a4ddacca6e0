"""Archive writer that streams a directory tree into a zip or tar file."""
from __future__ import annotations

import logging
import tarfile
import zipfile
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import ArchiveError

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("zip", "tar")
_KNOWN_OPTIONS = {
    "zip": {"compresslevel", "store"},
    "tar": {"compresslevel", "gzip"},
}


class ArchiveWriter:
    """Collects directories and writes them into a single archive on :meth:`finalize`."""

    def __init__(self, format: str, options: Optional[Mapping[str, Any]] = None) -> None:
        if format not in SUPPORTED_FORMATS:
            raise ArchiveError(f"Unsupported archive format {format!r}; expected one of {', '.join(SUPPORTED_FORMATS)}")
        self.format = format
        self.options: Dict[str, Any] = dict(options or {})
        self._directories: List[Path] = []
        for key in sorted(set(self.options) - _KNOWN_OPTIONS[format]):
            logger.debug("Ignoring archiver option %r for %s archives", key, format)

    def add_directory(self, path: Path) -> None:
        """Queue *path*; its contents are stored relative to *path* itself."""
        self._directories.append(Path(path))

    def finalize(self, destination: Path) -> int:
        """Write the archive to *destination* and return its size in bytes."""
        destination = Path(destination)
        try:
            if self.format == "zip":
                self._write_zip(destination)
            else:
                self._write_tar(destination)
            size = destination.stat().st_size
        except Exception as exc:
            if destination.is_file():
                destination.unlink()
            raise ArchiveError(f"Failed to write {self.format} archive {destination}: {exc}") from exc
        return size

    def _write_zip(self, destination: Path) -> None:
        store = bool(self.options.get("store", False))
        compression = zipfile.ZIP_STORED if store else zipfile.ZIP_DEFLATED
        compresslevel = None if store else self.options.get("compresslevel")
        with zipfile.ZipFile(destination, "w", compression=compression, compresslevel=compresslevel) as archive:
            for file_path, arcname in self._entries(destination):
                archive.write(file_path, arcname=arcname)

    def _write_tar(self, destination: Path) -> None:
        kwargs: Dict[str, Any] = {}
        mode = "w"
        if self.options.get("gzip"):
            mode = "w:gz"
            if self.options.get("compresslevel") is not None:
                kwargs["compresslevel"] = self.options["compresslevel"]
        with tarfile.open(destination, mode, **kwargs) as archive:
            for file_path, arcname in self._entries(destination):
                archive.add(file_path, arcname=arcname, recursive=False)

    def _entries(self, destination: Path) -> Iterator[Tuple[Path, str]]:
        skip = destination.resolve()
        for root in self._directories:
            for file_path in sorted(root.rglob("*")):
                if file_path.resolve() == skip:
                    continue
                yield file_path, file_path.relative_to(root).as_posix()
