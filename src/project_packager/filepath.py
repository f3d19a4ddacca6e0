"""Collision-avoiding filename allocation for package archives."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import PackagingRequest
from .errors import CollisionError, ExhaustedError

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10_000


def get_timestamp(now: Optional[datetime] = None) -> str:
    """Return the local calendar date as ``YYYYMMDD``."""
    now = now or datetime.now()
    return f"{now.year:04d}{now.month:02d}{now.day:02d}"


def build_filename(options: PackagingRequest, stamp: str = "", count: int = 0) -> str:
    """Compose ``<name>[-<stamp>][-<count>].<format>``."""
    parts = [options.name]
    if stamp:
        parts.append(stamp)
    if options.increment and count:
        parts.append(str(count))
    return f"{'-'.join(parts)}.{options.format}"


def get_filepath(options: PackagingRequest, count: int = 0, max_attempts: int = MAX_ATTEMPTS) -> Path:
    """
    Find the destination path for the package described by *options*.

    The first probe carries no numeric suffix. When the candidate exists:

    * ``increment`` enabled: probe the next suffix until a free path is found.
    * ``increment`` disabled and ``overwrite`` enabled: return the existing path.
    * otherwise raise :class:`CollisionError`.

    Raises :class:`ExhaustedError` once *max_attempts* candidates have been taken.
    Only existence checks touch the filesystem.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    stamp = get_timestamp() if options.timestamp else ""

    for attempt in range(max_attempts):
        candidate = options.output_dir / build_filename(options, stamp, count + attempt)
        if not candidate.exists():
            return candidate
        if not options.increment:
            if not options.overwrite:
                raise CollisionError(candidate)
            logger.debug("Overwriting existing package %s", candidate)
            return candidate
        logger.debug("Package path %s is taken", candidate)

    raise ExhaustedError(max_attempts, candidate)
