"""Parse diagnostics.

The parser never fails on a bad line; it drops it. When a caller asks to
be told about dropped lines, each one is described by a :class:`SkippedLine`.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class SkipReason(StrEnum):
    """Why a line contributed no entry."""

    NO_SEPARATOR = "no_separator"
    UNDECODABLE_KEY = "undecodable_key"
    UNDECODABLE_VALUE = "undecodable_value"


class SkippedLine(BaseModel):
    """A line of the source file that contributed no entry."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=1, description="1-based line number in the source file")
    raw: bytes = Field(..., description="Line content without the trailing newline")
    reason: SkipReason
