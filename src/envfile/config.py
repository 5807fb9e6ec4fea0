"""Store configuration for envfile."""

from __future__ import annotations

import codecs
import dataclasses
import os
from typing import Any

from envfile.exceptions import EnvFileConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class EnvFileConfig:
    """Store configuration.

    Parameters
    ----------
    encoding : str
        Text encoding used to decode keys and values on load and to
        encode them on write. It must encode ``=`` and newline as their
        ASCII bytes. Decoding is strict: a key or value that does not
        decode causes its whole line to be skipped.
    log_skipped : bool
        Emit a DEBUG log record for every line dropped while parsing.
        Parsing stays permissive either way.
    """

    encoding: str = "utf-8"
    log_skipped: bool = False

    def __post_init__(self) -> None:
        try:
            info = codecs.lookup(self.encoding)
        except LookupError as exc:
            raise EnvFileConfigError(f"Unknown encoding: {self.encoding!r}") from exc
        if not getattr(info, "_is_text_encoding", True):
            raise EnvFileConfigError(f"Not a text encoding: {self.encoding!r}")
        # Lines are split on raw ASCII bytes before decoding.
        try:
            delimiters = "=\n".encode(info.name)
        except UnicodeError:
            delimiters = b""
        if delimiters != b"=\n":
            raise EnvFileConfigError(f"Encoding must be ASCII compatible: {self.encoding!r}")

    @classmethod
    def from_env(cls, **overrides: Any) -> EnvFileConfig:
        """Create configuration from environment variables.

        Reads ``ENVFILE_ENCODING`` and ``ENVFILE_LOG_SKIPPED``. Explicit
        keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        EnvFileConfig
            Populated configuration.
        """
        env = os.environ

        kwargs: dict[str, Any] = {
            "encoding": env.get("ENVFILE_ENCODING", cls.encoding),
            "log_skipped": _env_bool(env.get("ENVFILE_LOG_SKIPPED"), cls.log_skipped),
        }
        kwargs.update(overrides)
        return cls(**kwargs)
