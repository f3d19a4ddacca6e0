"""
Project Packager - bundle a build directory into a collision-free zip or tar archive.

``create_package`` is the main entry point; ``get_filepath`` and ``get_timestamp``
are exposed for callers that only need the filename resolution.
"""

from importlib.metadata import PackageNotFoundError, version

from .archiver import SUPPORTED_FORMATS, ArchiveWriter
from .config import PackagingRequest, resolve_options
from .errors import ArchiveError, CollisionError, ExhaustedError, PackagingError, PreconditionError
from .filepath import get_filepath, get_timestamp
from .packager import create_package

try:
    __version__ = version("project-packager")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout without installing
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ArchiveError",
    "ArchiveWriter",
    "CollisionError",
    "ExhaustedError",
    "PackagingError",
    "PackagingRequest",
    "PreconditionError",
    "SUPPORTED_FORMATS",
    "create_package",
    "get_filepath",
    "get_timestamp",
    "resolve_options",
]
