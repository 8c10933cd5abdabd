from pm3flip.core.card import MifareCard
from pm3flip.core.errors import DecodeError, DecodeErrorKind, IOFailure, Pm3FlipError
from pm3flip.core.flipper import encode
from pm3flip.core.hexdata import HexData
from pm3flip.core.logging import TRACE
from pm3flip.core.proxmark3 import decode

__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "HexData",
    "IOFailure",
    "MifareCard",
    "Pm3FlipError",
    "TRACE",
    "decode",
    "encode",
]
