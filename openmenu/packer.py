"""Pack a folder of equally sized texture files into a DAT container."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .datfile import DatFormatError, ident_from_filename, write_dat


def _regular_files(folder: str | os.PathLike[str]) -> list[os.DirEntry[str]]:
    with os.scandir(folder) as listing:
        return sorted((entry for entry in listing if entry.is_file()), key=lambda entry: entry.name)


def pack_folder(folder: str | os.PathLike[str], output: str | os.PathLike[str]) -> list[str]:
    """Pack every regular file in ``folder`` into the DAT ``output``.

    The first file fixes the chunk size; files of another size, and files whose
    name is too long to serve as an identifier, are skipped. Returns the
    identifiers written, in chunk order.
    """
    chunk_size: Optional[int] = None
    entries: list[tuple[str, bytes]] = []
    for file in _regular_files(folder):
        size = file.stat().st_size
        if chunk_size is None:
            chunk_size = size
        elif size != chunk_size:
            print(f"Err: Filesize mismatch for {file.name}, found {size} vs {chunk_size}!")
            continue
        try:
            ident = ident_from_filename(file.name)
        except ValueError as error:
            print(f"Err: {error}")
            continue
        try:
            data = Path(file.path).read_bytes()
        except OSError:
            print(f"ERR: cant read {file.path}")
            continue
        if len(data) != chunk_size:
            print(f"Err: Filesize mismatch for {file.name}, found {len(data)} vs {chunk_size}!")
            continue
        print(f"Working on {file.name}")
        entries.append((ident, data))
        print(f"Added[{len(entries)}] as {ident}")

    if chunk_size is None:
        raise DatFormatError(f"no files to pack in {os.fspath(folder)}")
    write_dat(output, chunk_size, entries)
    return [ident for ident, _ in entries]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry: ``FOLDER output.dat``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Incorrect usage!\n\t./datpack FOLDER output.dat")
        return 1
    try:
        pack_folder(args[0], args[1])
    except (OSError, DatFormatError, ValueError) as error:
        print(f"ERR: {error}")
        return 1
    print("done!")
    return 0