"""Pack a folder of per-game metadata INI files into a metadata DAT."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from .datfile import HEADER, ITEM, DatFormatError, ident_from_filename, write_dat
from .genres import MetaRecord, parse_accessories, parse_genres
from .ini import IniError, parse_ini

_SECTION = "item"
_BYTE_FIELDS = frozenset({"num_players", "vmu_blocks", "network", "padding1", "padding2"})
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_meta(path: str | os.PathLike[str]) -> MetaRecord:
    """Read one game's metadata INI into a record."""
    text = Path(path).read_bytes().decode("latin-1")
    record = MetaRecord()
    for section, name, value in parse_ini(text):
        if section.lower() != _SECTION:
            continue
        key = name.lower()
        if key in _BYTE_FIELDS:
            setattr(record, key, _atoi(value) & 0xFF)
        elif key == "genre":
            record.genre = parse_genres(value)
        elif key == "accessories":
            record.accessories = parse_accessories(value)
        elif key == "description":
            record.description = value[: MetaRecord.DESCRIPTION_SIZE - 1]
    return record


def _regular_files(folder: str | os.PathLike[str]) -> list[os.DirEntry[str]]:
    with os.scandir(folder) as listing:
        return sorted((entry for entry in listing if entry.is_file()), key=lambda entry: entry.name)


def pack_meta_folder(folder: str | os.PathLike[str], output: str | os.PathLike[str]) -> list[str]:
    """Pack every metadata file in ``folder`` into the DAT ``output``.

    Returns the identifiers written, in chunk order.
    """
    files = _regular_files(folder)
    chunk_size = MetaRecord.SIZE
    header_chunks = (HEADER.size + len(files) * ITEM.size) // chunk_size
    print(f"Total header chunks: {header_chunks + 1}\n")

    entries: list[tuple[str, bytes]] = []
    for file in files:
        try:
            ident = ident_from_filename(file.name)
        except ValueError as error:
            print(f"Err: {error}")
            continue
        try:
            record = read_meta(file.path)
        except (OSError, IniError) as error:
            print(f"INI:Error Parsing {file.path}: {error}")
            continue
        print(
            f"id:{ident}\nnum_players:{record.num_players}\nvmu_blocks:{record.vmu_blocks}\n"
            f"accessories:{int(record.accessories)}\ngenre:{int(record.genre)}\n"
            f"desc:{record.description}\n"
        )
        entries.append((ident, record.pack()))
        print(f"Added[{header_chunks + len(entries)}] as {ident}")

    write_dat(output, chunk_size, entries, header_chunks)
    return [ident for ident, _ in entries]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry: ``FOLDER output.dat``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Incorrect usage!\n\t./datpack FOLDER output.dat")
        return 1
    try:
        pack_meta_folder(args[0], args[1])
    except (OSError, DatFormatError, ValueError) as error:
        print(f"ERR: {error}")
        return 1
    print("done!")
    return 0