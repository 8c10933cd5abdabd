# filename : main.py
# created  : 10/19/2026


import contextlib
import logging
from pathlib import Path

from pm3flip.core import IOFailure, MifareCard, decode, encode

lg = logging.getLogger(__name__)


def read_dump(path: str) -> MifareCard:
    """Read and decode a Proxmark3 JSON dump file."""
    try:
        source = Path(path).read_bytes()
    except OSError as exc:
        raise IOFailure("read source", path, exc.strerror or str(exc)) from exc
    return decode(source)


def write_nfc(path: str, card: MifareCard) -> None:
    """Write *card* to a Flipper NFC file, removing it again if the write fails."""
    data = encode(card)
    try:
        f = open(path, "wb")
    except OSError as exc:
        raise IOFailure("write target", path, exc.strerror or str(exc)) from exc
    try:
        with f:
            f.write(data)
    except OSError as exc:
        with contextlib.suppress(OSError):
            Path(path).unlink(missing_ok=True)
        raise IOFailure("write target", path, exc.strerror or str(exc)) from exc


def main(input_file: str, output_file: str) -> MifareCard:
    lg.debug("converting %s -> %s", input_file, output_file)
    card = read_dump(input_file)
    write_nfc(output_file, card)
    lg.info(
        "UID %s, Mifare Classic %dK, %d blocks written to %s",
        card.uid,
        card.capacity_kb,
        len(card.blocks),
        output_file,
    )
    return card
