"""Packaging options and the defaults they are resolved against."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import PreconditionError

logger = logging.getLogger(__name__)

DEFAULT_NAME = "project-package"
DEFAULT_OUTPUT_DIR = Path("./dist/packages/")
DEFAULT_FORMAT = "zip"


class PackagingRequest(BaseModel):
    """Fully populated options for a single packaging invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str = Field(default=DEFAULT_NAME, description="Base filename of the package, without extension.")
    input_dir: Optional[Path] = Field(
        default=None,
        alias="inputDir",
        description="Directory whose contents are archived. Required; must exist.",
    )
    output_dir: Path = Field(
        default=DEFAULT_OUTPUT_DIR,
        alias="outputDir",
        description="Directory the package is written into. Must exist.",
    )
    timestamp: bool = Field(default=True, description="Append a YYYYMMDD date stamp to the filename.")
    increment: bool = Field(
        default=True,
        description="On a filename clash, append the next free numeric suffix instead of failing.",
    )
    overwrite: bool = Field(
        default=False,
        description="Reuse an existing path when increment is disabled. Ignored when increment is enabled.",
    )
    format: str = Field(default=DEFAULT_FORMAT, description="Archive format; doubles as the file extension.")
    archiver_options: Dict[str, Any] = Field(
        default_factory=dict,
        alias="archiverOptions",
        description="Options forwarded verbatim to the archive writer.",
    )


_FIELD_NAMES = {
    **{name: name for name in PackagingRequest.model_fields},
    **{field.alias: name for name, field in PackagingRequest.model_fields.items() if field.alias},
}


def resolve_options(
    config: Union[PackagingRequest, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> PackagingRequest:
    """
    Overlay *config* and *overrides* onto the defaults and verify the directories.

    The merge is shallow: a supplied ``archiver_options`` replaces the default
    mapping wholesale. ``output_dir`` is checked before ``input_dir``.
    """
    if isinstance(config, PackagingRequest):
        payload: Dict[str, Any] = config.model_dump()
    else:
        payload = _normalise_keys(config or {})
    payload.update(_normalise_keys(overrides))

    options = PackagingRequest.model_validate(payload)

    if not options.output_dir.exists():
        raise PreconditionError(f"outputDir does not exist: {options.output_dir}")
    if options.input_dir is None or not options.input_dir.exists():
        raise PreconditionError(f"inputDir does not exist: {options.input_dir}")
    if not options.input_dir.is_dir():
        raise PreconditionError(f"inputDir is not a directory: {options.input_dir}")

    logger.debug(
        "Resolved packaging options name=%s format=%s input=%s output=%s",
        options.name,
        options.format,
        options.input_dir,
        options.output_dir,
    )
    return options


def _normalise_keys(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Map camelCase aliases onto field names; unknown keys pass through for validation."""
    return {_FIELD_NAMES.get(key, key): value for key, value in payload.items()}
