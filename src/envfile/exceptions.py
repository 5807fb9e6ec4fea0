"""Custom exception hierarchy for envfile."""

from __future__ import annotations

from pathlib import Path


class EnvFileError(Exception):
    """Base exception for all envfile errors."""


class EnvFileConfigError(EnvFileError):
    """Invalid or missing configuration."""


class EnvFileIOError(EnvFileError):
    """The environment file could not be opened, created, read or written.

    The original :class:`OSError` is chained as ``__cause__``; its text is
    also folded into the message so the failure reads on one line.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        operation: str = "",
    ) -> None:
        self.path = path
        self.operation = operation
        super().__init__(message)
