"""Cut a DAT down to the entries needed by the games listed in a menu INI."""

from __future__ import annotations

import os
import sys
from typing import Iterable, Optional, Protocol, Sequence

from .datfile import DatFile, DatFormatError, build_dat
from .gamelist import GameList
from .ini import IniError


class _HasProduct(Protocol):
    product: str


def strip_dat(dat: DatFile, games: Iterable[_HasProduct]) -> bytes:
    """A new DAT image holding, in game order, the chunks of ``dat`` used by ``games``.

    Games whose product serial is not in ``dat`` are left out.
    """
    entries: list[tuple[str, bytes]] = []
    for game in games:
        if not dat.offset_of(game.product):
            continue
        entries.append((game.product, dat.read(game.product)))
    print(f"Making new DAT with {len(entries)} entries!")
    return build_dat(dat.chunk_size, entries, 0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry: ``input.dat openmenu.ini output.dat``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Incorrect usage!\n\t./datstrip input.dat openmenu.ini output.dat")
        return 1
    source, ini_path, output = args[:3]
    if source == output:
        print("Incorrect usage: input and output cannot be the same file!")
        return 1
    try:
        dat = DatFile.load(source)
    except (OSError, DatFormatError) as error:
        print(f"DAT:Error opening {source}: {error}")
        return 1
    try:
        games = GameList.read(ini_path).items()
    except (OSError, IniError) as error:
        print(f"INI:Error Parsing {ini_path}: {error}")
        return 1
    try:
        image = strip_dat(dat, games)
    except (DatFormatError, ValueError) as error:
        print(f"DAT:Corrupted Header while writing! {error}")
        return 1
    try:
        with open(os.fspath(output), "wb") as handle:
            handle.write(image)
    except OSError:
        print(f"ERR: unable to open {output} for writing!")
        return 1
    print("done!")
    return 0