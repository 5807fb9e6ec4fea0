"""In-memory store for a ``KEY=VALUE`` environment file.

An :class:`EnvStore` is loaded once from disk, read and updated in
memory, and written back only when :meth:`EnvStore.write` is called.
Entries are always iterated and written in ascending key order, whatever
order the source file used.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path

from envfile._codec import SkipCallback, iter_entries, serialize_entries
from envfile._io import read_file, write_file
from envfile.config import EnvFileConfig
from envfile.models import SkippedLine

_logger = logging.getLogger(__name__)


class EnvStore:
    """Parsed contents of one environment file.

    Parameters
    ----------
    path : str or os.PathLike
        File this store writes back to.
    entries : Mapping[str, str] or None
        Initial entries (copied).
    config : EnvFileConfig or None
        Encoding and diagnostics settings. Defaults to ``EnvFileConfig()``.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        entries: Mapping[str, str] | None = None,
        *,
        config: EnvFileConfig | None = None,
    ) -> None:
        self.path = Path(path)
        self.config = config or EnvFileConfig()
        self._entries: dict[str, str] = dict(entries) if entries else {}

    @classmethod
    def load(
        cls,
        path: str | os.PathLike[str],
        *,
        config: EnvFileConfig | None = None,
        on_skip: SkipCallback | None = None,
    ) -> EnvStore:
        """Open and parse the environment file at *path*.

        Raises
        ------
        EnvFileIOError
            The file could not be opened or read.
        """
        path = Path(path)
        return cls.from_bytes(path, read_file(path), config=config, on_skip=on_skip)

    @classmethod
    def from_bytes(
        cls,
        path: str | os.PathLike[str],
        data: bytes,
        *,
        config: EnvFileConfig | None = None,
        on_skip: SkipCallback | None = None,
    ) -> EnvStore:
        """Parse *data* as the contents of *path* without reading the file."""
        store = cls(path, config=config)
        skipped = 0

        def _skip(line: SkippedLine) -> None:
            nonlocal skipped
            skipped += 1
            if store.config.log_skipped:
                _logger.debug("Skipping line %d of %s: %s", line.line_number, store.path, line.reason)
            if on_skip is not None:
                on_skip(line)

        # Later duplicates overwrite earlier ones.
        for key, value in iter_entries(data, encoding=store.config.encoding, on_skip=_skip):
            store._entries[key] = value

        _logger.debug("Loaded %d entries from %s (%d lines skipped)", len(store._entries), store.path, skipped)
        return store

    @property
    def entries(self) -> dict[str, str]:
        """Copy of all entries, in ascending key order."""
        return dict(self.items())

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._entries.get(key, default)

    def update(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._entries[key] = value

    def keys(self) -> list[str]:
        return sorted(self._entries)

    def items(self) -> list[tuple[str, str]]:
        return sorted(self._entries.items())

    def to_bytes(self) -> bytes:
        """Return exactly what :meth:`write` would put on disk.

        Raises
        ------
        UnicodeEncodeError
            A key or value cannot be represented in the configured encoding.
        """
        return serialize_entries(self.items(), encoding=self.config.encoding)

    def write(self) -> None:
        """Write the entries back to :attr:`path`, replacing its contents.

        Keys are written in ascending order, one ``KEY=VALUE`` per line.
        Values are not escaped, so a value holding a newline will not
        read back as the same entry.

        Raises
        ------
        EnvFileIOError
            The file could not be created or written.
        UnicodeEncodeError
            A key or value cannot be represented in the configured
            encoding. Nothing is written in that case.
        """
        write_file(self.path, self.to_bytes())
        _logger.debug("Wrote %d entries to %s", len(self._entries), self.path)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"EnvStore(path={str(self.path)!r}, entries={len(self._entries)})"
