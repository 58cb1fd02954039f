"""Reading and writing DAT containers: a header, an ID table and fixed-size chunks."""

from __future__ import annotations

import logging
import os
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

HEADER = struct.Struct("<3sBIII")
ITEM = struct.Struct("<12sI")
MAGIC = b"DAT"
VERSION = 1
MAX_IDENT_LENGTH = 11


class DatFormatError(Exception):
    """Raised when a DAT file is malformed or cannot be laid out."""


@dataclass(frozen=True)
class DatEntry:
    """One record in the ID table: an identifier and the chunk number it lives at."""

    ident: str
    offset: int


class DatFile:
    """An in-memory DAT container addressed by chunk number."""

    def __init__(self, chunk_size: int, entries: Sequence[DatEntry], data: bytes) -> None:
        self.chunk_size = chunk_size
        self.entries = list(entries)
        self.data = bytes(data)
        self._by_ident = {entry.ident: entry for entry in self.entries}

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "DatFile":
        """Read and parse a DAT file from disc."""
        data = Path(path).read_bytes()
        logger.info("DAT:Open %s", path)
        return cls.parse(data)

    @classmethod
    def parse(cls, data: bytes) -> "DatFile":
        """Parse a complete DAT image."""
        if len(data) < HEADER.size:
            raise DatFormatError("truncated DAT header")
        _magic, version, chunk_size, num_chunks, _padding = HEADER.unpack_from(data)
        if version != VERSION:
            raise DatFormatError("incorrect input file format")
        table_end = HEADER.size + num_chunks * ITEM.size
        if len(data) < table_end:
            raise DatFormatError("truncated DAT item table")
        entries = [
            DatEntry(raw.split(b"\0", 1)[0].decode("latin-1"), offset)
            for raw, offset in ITEM.iter_unpack(data[HEADER.size:table_end])
        ]
        return cls(chunk_size, entries, data)

    def offset_of(self, ident: str) -> Optional[int]:
        """Byte position of ``ident``'s chunk, or None when it is absent."""
        entry = self._by_ident.get(ident)
        return None if entry is None else entry.offset * self.chunk_size

    def index_of(self, ident: str) -> Optional[int]:
        """Chunk number of ``ident``, or None when it is absent."""
        entry = self._by_ident.get(ident)
        return None if entry is None else entry.offset

    def _chunk_at(self, position: int) -> bytes:
        chunk = self.data[position:position + self.chunk_size]
        if len(chunk) != self.chunk_size:
            raise DatFormatError(f"chunk at 0x{position:X} is truncated")
        return chunk

    def read(self, ident: str) -> bytes:
        """Return the chunk stored under ``ident``; KeyError if there is none."""
        position = self.offset_of(ident)
        if position is None:
            raise KeyError(ident)
        return self._chunk_at(position)

    def read_chunk(self, number: int) -> bytes:
        """Return chunk ``number`` of the file."""
        if number < 0 or number > len(self.entries):
            raise IndexError(f"chunk {number} out of range")
        return self._chunk_at(number * self.chunk_size)

    def info(self) -> str:
        """A human readable listing of the container."""
        lines = [
            "DAT:Stats",
            f"Chunk Size: {self.chunk_size}",
            f"Num Chunks: {len(self.entries)}",
            "",
        ]
        lines.extend(
            f"Record[{entry.offset}] {entry.ident} at 0x{entry.offset * self.chunk_size:X}"
            for entry in self.entries
        )
        return "\n".join(lines) + "\n"

    def __contains__(self, ident: object) -> bool:
        return ident in self._by_ident

    def __len__(self) -> int:
        return len(self.entries)


def ident_from_filename(filename: str) -> str:
    """Derive a chunk identifier from a file name: no extension, upper case."""
    dot = filename.rfind(".")
    if dot < 0 or dot > MAX_IDENT_LENGTH:
        raise ValueError(f'filename too long "{filename}", maxlength = {MAX_IDENT_LENGTH}!')
    ident = filename[:MAX_IDENT_LENGTH]
    cut = ident.rfind(".")
    if cut >= 0:
        ident = ident[:cut]
    return ident.upper()[:MAX_IDENT_LENGTH - 1]


def build_dat(
    chunk_size: int,
    entries: Iterable[tuple[str, bytes]],
    header_chunks: int = 0,
) -> bytes:
    """Lay out a DAT image from ``(ident, chunk)`` pairs.

    The header and ID table occupy ``header_chunks + 1`` chunks; the data
    chunks follow and are numbered from there.
    """
    items = list(entries)
    table = bytearray()
    for number, (ident, chunk) in enumerate(items):
        raw_ident = ident.encode("latin-1")
        if len(raw_ident) > MAX_IDENT_LENGTH:
            raise ValueError(f"identifier {ident!r} is longer than {MAX_IDENT_LENGTH}")
        if len(chunk) != chunk_size:
            raise ValueError(f"chunk {ident!r} is {len(chunk)} bytes, expected {chunk_size}")
        table += ITEM.pack(raw_ident, header_chunks + number + 1)

    header = HEADER.pack(MAGIC, VERSION, chunk_size, len(items), header_chunks)
    used = len(header) + len(table)
    padding = (header_chunks + 1) * chunk_size - used
    if padding < 0:
        raise DatFormatError("corrupted header: item table does not fit its chunks")
    body = b"".join(chunk for _, chunk in items)
    return header + bytes(table) + bytes(padding) + body


def write_dat(
    path: str | os.PathLike[str],
    chunk_size: int,
    entries: Iterable[tuple[str, bytes]],
    header_chunks: int = 0,
) -> None:
    """Build a DAT image and write it to ``path``."""
    image = build_dat(chunk_size, entries, header_chunks)
    Path(path).write_bytes(image)


def dump_dat(dat: DatFile, output_dir: str | os.PathLike[str]) -> list[Path]:
    """Write every chunk to ``output_dir/<ident>.pvr`` and return the paths."""
    folder = Path(output_dir)
    folder.mkdir(parents=True, exist_ok=True)
    written = []
    for entry in dat.entries:
        target = folder / f"{entry.ident}.pvr"
        target.write_bytes(dat._chunk_at(entry.offset * dat.chunk_size))
        written.append(target)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show a DAT file's contents, or dump its chunks with ``-d``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Incorrect usage!\n\t./datread input.dat (-d)")
        return 1

    output_dir = None
    if len(args) == 2 and args[1].lower() == "-d":
        candidate = "." + os.sep + args[0]
        output_dir = candidate[:candidate.rfind(".")] + os.sep

    try:
        dat = DatFile.load(args[0])
    except (OSError, DatFormatError) as error:
        print(f"DAT:Error Cant read input {args[0]}: {error}")
        return 1

    if output_dir is not None:
        print(dat.info(), end="")
        dump_dat(dat, output_dir)
    else:
        print(dat.info())

    for label, ident in (("known", "T40502N"), ("missing", "MISSING")):
        print(f"\nSearching {label}:")
        print(f"Found {ident} at {dat.offset_of(ident) or 0:X}")
    return 0