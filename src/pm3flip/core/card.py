from __future__ import annotations

from dataclasses import dataclass

from pm3flip.core.hexdata import HexData

# Mifare Classic capacity in KB, keyed by block count.
_CAPACITY_KB: dict[int, int] = {
    64: 1,
    128: 2,
    256: 4,
}


@dataclass(frozen=True)
class MifareCard:
    """Decoded Mifare Classic dump."""

    uid: HexData
    atqa: HexData
    sak: HexData
    blocks: tuple[HexData, ...] = ()

    @property
    def capacity_kb(self) -> int:
        """1, 2 or 4 for a 1K/2K/4K card, 0 for any other block count."""
        return _CAPACITY_KB.get(len(self.blocks), 0)
