"""Async entry point tying option resolution, path allocation and archiving together."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .archiver import ArchiveWriter
from .config import PackagingRequest, resolve_options
from .filepath import get_filepath

logger = logging.getLogger(__name__)


async def create_package(
    config: Union[PackagingRequest, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> None:
    """
    Archive ``input_dir`` into a uniquely named file under ``output_dir``.

    Raises ``PreconditionError``, ``CollisionError``, ``ExhaustedError`` or
    ``ArchiveError``; failures are never logged and swallowed here.
    """
    options = await asyncio.to_thread(resolve_options, config, **overrides)
    filepath = await asyncio.to_thread(get_filepath, options)
    size = await _write_archive(options, filepath)
    logger.info("Package created (%s bytes): %s", size, filepath)


async def _write_archive(options: PackagingRequest, filepath: Path) -> int:
    writer = ArchiveWriter(options.format, options.archiver_options)
    writer.add_directory(options.input_dir)
    return await asyncio.to_thread(writer.finalize, filepath)
