import json

import pytest

from wilayah.emit import to_json, write_json
from wilayah.emit import EmitError
from wilayah.records import Province, Regency


def test_empty_sequence_is_empty_array(tmp_path):
    path = tmp_path / "regencies" / "12.json"

    write_json(path, [])

    assert path.read_bytes() == b"[]"


def test_layout_and_key_order():
    text = to_json([Regency("1101", "11", "Simeulue")])

    assert text == (
        "[\n"
        "  {\n"
        '    "id": "1101",\n'
        '    "province_id": "11",\n'
        '    "name": "Simeulue"\n'
        "  }\n"
        "]"
    )


def test_non_ascii_is_written_as_utf8(tmp_path):
    path = tmp_path / "provinces.json"

    write_json(path, [Province("91", "Papua Barat Daya – Sorong")])

    raw = path.read_bytes()
    assert "–".encode("utf-8") in raw
    assert json.loads(raw.decode("utf-8"))[0]["name"] == "Papua Barat Daya – Sorong"


def test_creates_parent_dirs_and_overwrites(tmp_path):
    path = tmp_path / "static" / "api" / "provinces.json"

    write_json(path, [Province("11", "Aceh"), Province("12", "Sumatera Utara")])
    write_json(path, [Province("11", "Aceh")])

    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": "11", "name": "Aceh"}]


def test_write_failure_is_reported(tmp_path):
    blocker = tmp_path / "static"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(EmitError, match="failed to write file"):
        write_json(blocker / "api" / "provinces.json", [])


def test_markup_characters_are_left_as_is():
    text = to_json([Province("99", "Bangka & <Belitung>")])

    assert '"name": "Bangka & <Belitung>"' in text
