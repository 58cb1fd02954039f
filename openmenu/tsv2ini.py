"""Turn a tab separated game sheet into one metadata INI file per serial."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence

_TEMPLATE = (
    "[ITEM]\n"
    "num_players={players}\n"
    "vmu_blocks={vmu_blocks}\n"
    "accessories={accessories}\n"
    "network=0\n"
    "genre={genre}\n"
    "description={synopsis}\n"
    "padding1=0\n"
    "padding2=0\n"
)

# Region | Players | VMU Blocks | Genre | Network | Accessories | Product ID | Name | Synopsis
_COLUMNS = 9
_PRODUCT_COLUMN = 6


def _or_zero(value: Optional[str]) -> str:
    return value if value else "0"


def meta_ini_text(
    players: Optional[str],
    vmu_blocks: Optional[str],
    accessories: Optional[str],
    genre: Optional[str],
    synopsis: Optional[str],
) -> str:
    """The metadata INI for one game; empty fields become ``0``."""
    description = _or_zero(synopsis)
    if synopsis and synopsis.startswith('"'):
        description = description[1:]
    return _TEMPLATE.format(
        players=_or_zero(players),
        vmu_blocks=_or_zero(vmu_blocks),
        accessories=_or_zero(accessories),
        genre=_or_zero(genre),
        synopsis=description,
    )


def _trim_synopsis(synopsis: str) -> str:
    # The line ending goes together with the closing quote before it.
    end = synopsis.rfind("\r")
    if end < 0:
        end = synopsis.rfind("\n")
    if end >= 0:
        return synopsis[: max(end - 1, 0)]
    return synopsis


def convert_tsv(tsv_path: str | os.PathLike[str], folder: str | os.PathLike[str]) -> list[Path]:
    """Write ``folder/<serial>.txt`` for every row of ``tsv_path``; return the paths written."""
    text = Path(tsv_path).read_bytes().decode("latin-1")
    out_dir = Path(folder)
    written: list[Path] = []
    for lineno, line in enumerate(text.split("\n"), 1):
        if not line:
            continue
        fields: list[Optional[str]] = list(line.split("\t", _COLUMNS - 1))
        if len(fields) <= _PRODUCT_COLUMN:
            raise ValueError(f"line {lineno}: no product id column")
        fields += [None] * (_COLUMNS - len(fields))
        _region, players, vmu_blocks, genre, _network, accessories, product, _name, synopsis = fields
        last = synopsis.split("\t", 1)[0] if synopsis is not None else None
        if last is not None:
            last = _trim_synopsis(last)
        target = out_dir / f"{product}.txt"
        try:
            target.write_text(
                meta_ini_text(players, vmu_blocks, accessories, genre, last), encoding="latin-1"
            )
        except OSError:
            print(f"Error: Couldn't write {target}!")
            continue
        written.append(target)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry: ``input.tsv FOLDER``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Incorrect usage!\n\t./tsv2ini input.tsv FOLDER")
        return 1
    try:
        written = convert_tsv(args[0], args[1])
    except (OSError, ValueError) as error:
        print(f"ERR: {error}")
        return 1
    print(f"TSV: Wrote {len(written)} records out to {args[1]}!")
    return 0