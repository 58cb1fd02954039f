from pathlib import Path

from openmenu.datfile import DatFile
from openmenu.genres import Accessory, Genre, MetaRecord
from openmenu.metadb import MetaDatabase
from openmenu.metapacker import main, pack_meta_folder, read_meta

SAMPLE = (
    "[ITEM]\n"
    "num_players=4\n"
    "vmu_blocks=12\n"
    "accessories=JUMP+VGA\n"
    "network=0\n"
    "genre=Action+Racing\n"
    "description=A fast game: with cars\n"
    "padding1=0\n"
    "padding2=0\n"
)


def test_read_meta_fields(tmp_path):
    path = tmp_path / "T1234N.txt"
    path.write_text(SAMPLE)
    record = read_meta(path)
    assert record.num_players == 4
    assert record.vmu_blocks == 12
    assert record.genre == Genre.ACTION | Genre.RACING
    assert record.accessories == Accessory.JUMP_PACK | Accessory.VGA
    assert record.description == "A fast game: with cars"


def test_read_meta_defaults_when_missing(tmp_path):
    path = tmp_path / "x.txt"
    path.write_text("[ITEM]\nnum_players=2\n")
    record = read_meta(path)
    assert record.num_players == 2
    assert record.genre == Genre.NONE
    assert record.description == ""


def test_read_meta_long_description_truncated(tmp_path):
    path = tmp_path / "x.txt"
    path.write_text("[ITEM]\ndescription=" + "d" * 500 + "\n")
    record = read_meta(path)
    assert len(record.description) == MetaRecord.DESCRIPTION_SIZE - 1
    assert MetaRecord.unpack(record.pack()).description == record.description


def test_pack_and_lookup(tmp_path):
    src = tmp_path / "meta"
    src.mkdir()
    (src / "T1234N.txt").write_text(SAMPLE)
    (src / "MK51000.txt").write_text("[ITEM]\nnum_players=1\ngenre=Puzzle\n")
    out = tmp_path / "META.DAT"

    idents = pack_meta_folder(src, out)
    assert sorted(idents) == ["MK51000", "T1234N"]

    dat = DatFile.load(out)
    assert dat.chunk_size == MetaRecord.SIZE
    db = MetaDatabase(dat)
    first = db.get("T1234N")
    assert first == read_meta(src / "T1234N.txt")
    second = db.get("MK51000")
    assert second.genre == Genre.PUZZLE
    assert db.get("UNKNOWN") is None


def test_many_files_use_extra_header_chunk(tmp_path):
    src = tmp_path / "meta"
    src.mkdir()
    for number in range(24):
        (src / f"T{number:04d}N.txt").write_text(f"[ITEM]\nvmu_blocks={number}\n")
    out = tmp_path / "META.DAT"
    pack_meta_folder(src, out)

    dat = DatFile.load(out)
    assert min(entry.offset for entry in dat.entries) == 2
    db = MetaDatabase(dat)
    assert all(db.get(f"T{number:04d}N").vmu_blocks == number for number in range(24))


def test_long_name_skipped(tmp_path):
    src = tmp_path / "meta"
    src.mkdir()
    (src / "ABCDEFGHIJKLMNOP.txt").write_text(SAMPLE)
    (src / "T1.txt").write_text(SAMPLE)
    assert pack_meta_folder(src, tmp_path / "out.dat") == ["T1"]


def test_main_usage_error():
    assert main(["only-one"]) == 1


def test_main_writes_file(tmp_path):
    src = tmp_path / "meta"
    src.mkdir()
    (src / "T9.txt").write_text(SAMPLE)
    out = tmp_path / "out.dat"
    assert main([str(src), str(out)]) == 0
    assert "T9" in DatFile.load(out)