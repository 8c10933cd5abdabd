"""Conversion errors."""

from __future__ import annotations

import enum


class Pm3FlipError(Exception):
    """Base class for all conversion failures."""


class DecodeErrorKind(enum.Enum):
    MALFORMED_INPUT = "malformed input"
    WRONG_SOURCE = "wrong source"
    WRONG_CARD_TYPE = "wrong card type"
    BAD_HEX_FIELD = "bad hex field"
    MISSING_BLOCK = "missing block"


class DecodeError(Pm3FlipError, ValueError):
    """The source document is not a usable Proxmark3 Mifare dump."""

    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        field: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.index = index


class IOFailure(Pm3FlipError, OSError):
    """Reading the source or writing the target file failed."""

    def __init__(self, stage: str, path: str, reason: str) -> None:
        super().__init__(f"failed to {stage} '{path}': {reason}")
        self.stage = stage
        self.path = path
