"""Byte-level parser and serializer for ``KEY=VALUE`` lines.

The format has no quoting, escaping or comments. A line is split on its
first ``=`` and nothing else is interpreted, so a trailing ``\\r`` or any
later ``=`` stays part of the value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from envfile.models import SkippedLine, SkipReason

_NEWLINE = b"\n"
_SEPARATOR = b"="

SkipCallback = Callable[[SkippedLine], None]


def _decode(raw: bytes, encoding: str) -> str | None:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError:
        return None


def iter_entries(
    data: bytes,
    *,
    encoding: str = "utf-8",
    on_skip: SkipCallback | None = None,
) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` pairs from *data* in file order.

    Lines without a separator, or whose key or value does not decode,
    are dropped. *on_skip* is called with a :class:`SkippedLine` for each
    of them. The empty remainder after a final newline is not a line.
    """
    segments = data.split(_NEWLINE)
    if segments and segments[-1] == b"":
        segments.pop()

    for line_number, segment in enumerate(segments, start=1):
        reason: SkipReason | None = None
        pos = segment.find(_SEPARATOR)
        if pos < 0:
            reason = SkipReason.NO_SEPARATOR
        else:
            key = _decode(segment[:pos], encoding)
            value = _decode(segment[pos + 1 :], encoding)
            if key is None:
                reason = SkipReason.UNDECODABLE_KEY
            elif value is None:
                reason = SkipReason.UNDECODABLE_VALUE
            else:
                yield key, value
                continue

        if on_skip is not None:
            on_skip(SkippedLine(line_number=line_number, raw=segment, reason=reason))


def serialize_entries(items: Iterable[tuple[str, str]], *, encoding: str = "utf-8") -> bytes:
    """Render *items* as ``KEY=VALUE\\n`` lines, in the order given."""
    buffer = bytearray()
    for key, value in items:
        buffer += key.encode(encoding)
        buffer += _SEPARATOR
        buffer += value.encode(encoding)
        buffer += _NEWLINE
    return bytes(buffer)
