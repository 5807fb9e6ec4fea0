from __future__ import annotations

import pytest
from pydantic import ValidationError

from envfile._codec import iter_entries, serialize_entries
from envfile.models import SkippedLine, SkipReason


def test_iter_entries_yields_in_file_order() -> None:
    pairs = list(iter_entries(b"B=2\nA=1\nB=3\n"))

    assert pairs == [("B", "2"), ("A", "1"), ("B", "3")]


def test_iter_entries_without_trailing_newline() -> None:
    assert list(iter_entries(b"A=1\nB=2")) == [("A", "1"), ("B", "2")]


def test_iter_entries_empty_input() -> None:
    skipped: list[SkippedLine] = []

    assert list(iter_entries(b"", on_skip=skipped.append)) == []
    assert skipped == []


def test_iter_entries_empty_key_is_kept() -> None:
    assert list(iter_entries(b"=value\n")) == [("", "value")]


def test_serialize_entries_does_not_escape() -> None:
    data = serialize_entries([("A", "x=y"), ("B", "line1\nline2")])

    assert data == b"A=x=y\nB=line1\nline2\n"


def test_serialize_entries_empty() -> None:
    assert serialize_entries([]) == b""


def test_skipped_line_is_frozen_and_validated() -> None:
    line = SkippedLine(line_number=3, raw=b"noise", reason=SkipReason.NO_SEPARATOR)

    with pytest.raises(ValidationError):
        line.line_number = 4  # type: ignore[misc]
    with pytest.raises(ValidationError):
        SkippedLine(line_number=0, raw=b"", reason=SkipReason.NO_SEPARATOR)
