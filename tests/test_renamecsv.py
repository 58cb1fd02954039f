from pathlib import Path

import pytest

from openmenu.renamecsv import main, rename_from_csv


def test_renames_listed_files(tmp_path: Path):
    (tmp_path / "a.pvr").write_bytes(b"A")
    (tmp_path / "b.pvr").write_bytes(b"B")
    csv = tmp_path / "list.csv"
    csv.write_bytes(b"a.pvr,T1.pvr\r\nb.pvr,T2.pvr\r\n")
    renamed = rename_from_csv(tmp_path, csv)
    assert len(renamed) == 2
    assert (tmp_path / "T1.pvr").read_bytes() == b"A"
    assert (tmp_path / "T2.pvr").read_bytes() == b"B"
    assert not (tmp_path / "a.pvr").exists()


def test_extension_replaces_both_names(tmp_path: Path):
    (tmp_path / "a.pvr").write_bytes(b"A")
    csv = tmp_path / "list.csv"
    csv.write_text("a.png,T1.png\n")
    renamed = rename_from_csv(tmp_path, csv, "pvr")
    assert [Path(target).name for _, target in renamed] == ["T1.pvr"]
    assert (tmp_path / "T1.pvr").read_bytes() == b"A"


def test_missing_file_is_skipped(tmp_path: Path, capsys):
    csv = tmp_path / "list.csv"
    csv.write_text("ghost.pvr,T1.pvr\n")
    assert rename_from_csv(tmp_path, csv) == []
    assert "missing" in capsys.readouterr().out
    assert not (tmp_path / "T1.pvr").exists()


def test_line_without_comma_is_an_error(tmp_path: Path):
    csv = tmp_path / "list.csv"
    csv.write_text("nocomma\n")
    with pytest.raises(ValueError):
        rename_from_csv(tmp_path, csv)


def test_main_with_extension_flag(tmp_path: Path):
    (tmp_path / "x.pvr").write_bytes(b"X")
    csv = tmp_path / "list.csv"
    csv.write_text("x.jpg,Y.jpg\n")
    assert main([str(tmp_path), str(csv), "-ext", "pvr"]) == 0
    assert (tmp_path / "Y.pvr").read_bytes() == b"X"


def test_main_usage_error():
    assert main(["folder"]) == 1