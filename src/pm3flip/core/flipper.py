"""Flipper Zero ``.nfc`` encoding for Mifare Classic cards."""

from __future__ import annotations

import logging

from pm3flip.core.card import MifareCard

lg = logging.getLogger(__name__)

DEVICE_TYPE = "Mifare Classic"

_HEADER = [
    "Filetype: Flipper NFC device",
    "Version: 2",
    "# Nfc device type can be UID, Mifare Ultralight, Mifare Classic, Bank card",
    f"Device type: {DEVICE_TYPE}",
    "# UID, ATQA and SAK are common for all formats",
]

_BLOCKS_HEADER = [
    "Data format version: 2",
    "# Mifare Classic blocks, '??' means unknown data",
]


def format_nfc(card: MifareCard) -> str:
    """Render *card* as the text of a Flipper NFC file."""
    if card.capacity_kb == 0:
        lg.warning("unexpected block count %d, writing type 0K", len(card.blocks))

    lines = list(_HEADER)
    lines.append(f"UID: {card.uid}")
    lines.append(f"ATQA: {card.atqa}")
    lines.append(f"SAK: {card.sak}")
    lines.append("# Mifare Classic specific data")
    lines.append(f"Mifare Classic type: {card.capacity_kb}K")
    lines.extend(_BLOCKS_HEADER)
    for i, block in enumerate(card.blocks):
        lines.append(f"Block {i}: {block}")
    return "".join(f"{line}\n" for line in lines)


def encode(card: MifareCard) -> bytes:
    return format_nfc(card).encode("utf-8")
