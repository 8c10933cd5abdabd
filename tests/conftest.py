import json

import pytest


def make_dump(n_blocks=64, block="00" * 16, **overrides):
    doc = {
        "Created": "proxmark3",
        "FileType": "mfcard",
        "Card": {
            "UID": "04112233",
            "ATQA": "0004",
            "SAK": "08",
            "PRNG": "weak",
        },
        "blocks": {str(i): block for i in range(n_blocks)},
        "SectorKeys": {},
    }
    doc.update(overrides)
    return doc


def to_bytes(doc):
    return json.dumps(doc).encode("utf-8")


@pytest.fixture
def dump_file(tmp_path):
    path = tmp_path / "hf-mf-04112233-dump.json"
    path.write_bytes(to_bytes(make_dump()))
    return path
