"""Hex text codec shared by the Proxmark3 and Flipper formats."""

from __future__ import annotations

import re

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]*")


class HexData(bytes):
    """Byte string rendered as space-separated uppercase hex pairs."""

    @classmethod
    def parse(cls, text: str) -> HexData:
        """Decode a contiguous hex string such as ``"0A1B"``.

        Both letter cases are accepted. Separators are not.
        """
        if not _HEX_DIGITS.fullmatch(text):
            raise ValueError(f"invalid hex data {text!r}: non-hexadecimal character")
        if len(text) % 2:
            raise ValueError(f"invalid hex data {text!r}: odd length")
        return cls(bytes.fromhex(text))

    def __str__(self) -> str:
        return self.hex(" ").upper()

    def __repr__(self) -> str:
        return f"HexData({self.hex().upper()})"
