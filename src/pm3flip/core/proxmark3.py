"""Proxmark3 JSON dump decoding.

The Proxmark3 client saves Mifare Classic dumps (``hf mf dump`` and friends)
as a JSON document::

    {
      "Created": "proxmark3",
      "FileType": "mfcard",
      "Card": {"UID": "04112233", "ATQA": "0004", "SAK": "08", ...},
      "blocks": {"0": "0411223316080400...", "1": "...", ...},
      "SectorKeys": {...}
    }

Only the fields above are read; anything else is ignored.
"""

from __future__ import annotations

import json
import logging

from pm3flip.core.card import MifareCard
from pm3flip.core.errors import DecodeError, DecodeErrorKind
from pm3flip.core.hexdata import HexData
from pm3flip.core.logging import TRACE

lg = logging.getLogger(__name__)

CREATED_BY = "proxmark3"
FILE_TYPE = "mfcard"


def decode(source: bytes) -> MifareCard:
    """Decode a Proxmark3 JSON dump into a :class:`MifareCard`.

    Raises :class:`DecodeError` on the first problem found.
    """
    doc = _load(source)

    created = _get(doc, "Created", str, "")
    if created != CREATED_BY:
        raise DecodeError(
            DecodeErrorKind.WRONG_SOURCE,
            f"JSON file must be produced by Proxmark3 (Created is {created!r})",
        )

    file_type = _get(doc, "FileType", str, "")
    if file_type != FILE_TYPE:
        raise DecodeError(
            DecodeErrorKind.WRONG_CARD_TYPE,
            f"expecting Mifare card dump (FileType is {file_type!r})",
        )

    info = _get(doc, "Card", dict, {})
    uid = _parse_field(_get(info, "UID", str, ""), "UID")
    atqa = _parse_field(_get(info, "ATQA", str, ""), "ATQA")
    sak = _parse_field(_get(info, "SAK", str, ""), "SAK")

    blocks = _parse_blocks(_get(doc, "blocks", dict, {}))

    lg.debug("decoded UID %s, %d blocks", uid, len(blocks))
    return MifareCard(uid=uid, atqa=atqa, sak=sak, blocks=blocks)


def _load(source: bytes) -> dict:
    try:
        doc = json.loads(source.decode("utf-8"))
    except (ValueError, RecursionError) as exc:
        raise DecodeError(
            DecodeErrorKind.MALFORMED_INPUT,
            f"failed to decode Proxmark3 JSON file: {exc}",
        ) from exc
    if not isinstance(doc, dict):
        raise DecodeError(
            DecodeErrorKind.MALFORMED_INPUT,
            f"failed to decode Proxmark3 JSON file: expected an object, got {type(doc).__name__}",
        )
    return doc


def _get(obj: dict, key: str, kind: type, default):
    """Fetch *key* from *obj*, falling back to *default* when absent or null."""
    value = obj.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise DecodeError(
            DecodeErrorKind.MALFORMED_INPUT,
            f"failed to decode Proxmark3 JSON file: field {key!r} must be {_JSON_NAMES[kind]}",
        )
    return value


_JSON_NAMES: dict[type, str] = {
    str: "a string",
    dict: "an object",
}


def _parse_field(text: str, name: str) -> HexData:
    try:
        return HexData.parse(text)
    except ValueError as exc:
        raise DecodeError(
            DecodeErrorKind.BAD_HEX_FIELD,
            f"cannot parse card {name}: {exc}",
            field=name,
        ) from exc


def _parse_blocks(blocks_map: dict) -> tuple[HexData, ...]:
    """Collect blocks 0..N-1 where N is the number of entries in *blocks_map*.

    Keys are looked up by their decimal string, so a gap anywhere in the range
    (or a key such as ``"01"``) leaves an index unmatched.
    """
    blocks: list[HexData] = []
    for i in range(len(blocks_map)):
        key = str(i)
        if key not in blocks_map:
            raise DecodeError(
                DecodeErrorKind.MISSING_BLOCK,
                f"cannot find Mifare card data for block {i}",
                index=i,
            )
        text = blocks_map[key]
        if text is None:
            text = ""
        elif not isinstance(text, str):
            raise DecodeError(
                DecodeErrorKind.MALFORMED_INPUT,
                f"failed to decode Proxmark3 JSON file: block {i} must be a string",
                index=i,
            )
        try:
            block = HexData.parse(text)
        except ValueError as exc:
            raise DecodeError(
                DecodeErrorKind.BAD_HEX_FIELD,
                f"cannot parse block {i} data: {exc}",
                field=f"block {i}",
                index=i,
            ) from exc
        lg.log(TRACE, "block %3d: %s", i, block)
        blocks.append(block)
    return tuple(blocks)
