import pytest

from openmenu.datfile import DatFile, build_dat, write_dat
from openmenu.genres import Accessory, Genre, MetaRecord
from openmenu.metadb import MetaDatabase, format_players, format_vmu_blocks

RECORD_A = MetaRecord(
    num_players=2,
    vmu_blocks=5,
    accessories=Accessory.JUMP_PACK | Accessory.VGA,
    genre=Genre.RACING,
    description="A racing game",
)
RECORD_B = MetaRecord(num_players=1, vmu_blocks=0, genre=Genre.PUZZLE, description="Puzzles")


def _image():
    return build_dat(MetaRecord.SIZE, [("T1234N", RECORD_A.pack()), ("T9706N", RECORD_B.pack())])


def test_get_returns_records():
    db = MetaDatabase(DatFile.parse(_image()))
    assert len(db) == 2
    assert db.get("T1234N") == RECORD_A
    assert db.get("T9706N") == RECORD_B


def test_get_uses_meta_remap():
    db = MetaDatabase(DatFile.parse(_image()))
    assert db.get("T9705D50") == RECORD_B


def test_get_missing_is_none():
    db = MetaDatabase(DatFile.parse(_image()))
    assert db.get("NOPE") is None


def test_header_chunks_are_respected():
    image = build_dat(MetaRecord.SIZE, [("T1234N", RECORD_A.pack())], header_chunks=1)
    db = MetaDatabase(DatFile.parse(image))
    assert db.get("T1234N") == RECORD_A


def test_load_from_disc(tmp_path):
    path = tmp_path / "META.DAT"
    write_dat(path, MetaRecord.SIZE, [("T1234N", RECORD_A.pack())])
    db = MetaDatabase.load(path)
    assert db.get("T1234N").description == "A racing game"


def test_empty_database():
    db = MetaDatabase(DatFile.parse(build_dat(MetaRecord.SIZE, [])))
    assert len(db) == 0
    assert db.get("T1234N") is None


@pytest.mark.parametrize(
    "count, expected", [(1, "1 Player"), (2, "2 Players"), (0, "0 Player")]
)
def test_format_players(count, expected):
    assert format_players(count) == expected


@pytest.mark.parametrize("count, expected", [(1, "1 Block"), (0, "0 Blocks"), (3, "3 Blocks")])
def test_format_vmu_blocks(count, expected):
    assert format_vmu_blocks(count) == expected