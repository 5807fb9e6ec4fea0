"""File collaborators for the store.

Each call opens, uses and closes one handle. Any :class:`OSError` is
re-raised as :class:`~envfile.exceptions.EnvFileIOError` naming the path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from envfile.exceptions import EnvFileIOError

_logger = logging.getLogger(__name__)


def read_file(path: Path) -> bytes:
    """Return the full contents of *path*."""
    _logger.debug("Reading env file %s", path)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise EnvFileIOError(f"unable to open file at {str(path)!r}: {exc}", path=path, operation="open") from exc


def write_file(path: Path, data: bytes) -> None:
    """Create or truncate *path* and write *data* to it."""
    _logger.debug("Writing %d bytes to env file %s", len(data), path)
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise EnvFileIOError(f"unable to create file at {str(path)!r}: {exc}", path=path, operation="create") from exc
