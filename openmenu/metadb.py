"""Game metadata looked up by disc serial from a metadata DAT."""

from __future__ import annotations

import os
from typing import Optional

from .datfile import DatFile
from .genres import MetaRecord
from .serials import sanitize_meta


class MetaDatabase:
    """Holds every metadata record of a DAT and finds them by serial."""

    def __init__(self, dat: DatFile) -> None:
        self.dat = dat
        self._first_index = dat.entries[0].offset if dat.entries else 0
        start = self._first_index * dat.chunk_size
        size = MetaRecord.SIZE
        self._records = [
            MetaRecord.unpack(dat.data[start + number * size:start + (number + 1) * size])
            for number in range(len(dat))
        ]

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "MetaDatabase":
        """Load the metadata DAT at ``path``."""
        return cls(DatFile.load(path))

    def get(self, serial: str) -> Optional[MetaRecord]:
        """The record for ``serial`` after serial remapping, or None."""
        index = self.dat.index_of(sanitize_meta(serial))
        if index is None:
            return None
        position = index - self._first_index
        if 0 <= position < len(self._records):
            return self._records[position]
        return None

    def __len__(self) -> int:
        return len(self._records)


def format_players(count: int) -> str:
    """E.g. ``1 Player`` or ``4 Players``."""
    return f"{count} Player{'s' if count > 1 else ''}"


def format_vmu_blocks(count: int) -> str:
    """E.g. ``1 Block`` or ``12 Blocks``."""
    return f"{count} Block{'s' if count != 1 else ''}"