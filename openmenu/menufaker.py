"""Build a menu INI listing every game named in a CSV file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence

DEFAULT_NUM_ITEMS = 256
OUTPUT_NAME = "OPENMENU.INI"

_ITEMS_HEADER = (
    "[ITEMS]\n"
    "01.name=openMenu\n"
    "01.disc=1/1\n"
    "01.vga=1\n"
    "01.region=JUE\n"
    "01.version=V0.1.0\n"
    "01.date=20210609\n"
    "01.product=NEODC_1\n\n"
)


def _game_entry(number: int, product: str, name: str) -> str:
    prefix = f"{number:02d}"
    return (
        f"{prefix}.name={name}\n"
        f"{prefix}.disc=1/1\n"
        f"{prefix}.vga=1\n"
        f"{prefix}.region=JUE\n"
        f"{prefix}.version=V0.1.0\n"
        f"{prefix}.date=20210609\n"
        f"{prefix}.product={product}\n\n"
    )


def _split_line(line: str) -> tuple[str, str]:
    game_name, comma, product = line.rpartition(",")
    if not comma:
        raise ValueError(f"no comma in line {line!r}")
    paren = game_name.rfind("(")
    if paren < 1:
        raise ValueError(f"no region in parentheses in {game_name!r}")
    dot = product.rfind(".")
    if dot < 0:
        raise ValueError(f"no file extension in {product!r}")
    return game_name[: paren - 1], product[:dot]


def build_menu_ini(csv_lines: Iterable[str], num_items: int = DEFAULT_NUM_ITEMS) -> str:
    """Menu INI text for CSV lines of the form ``Name (Region),SERIAL.ext``.

    Games are numbered from slot 2; slot 1 is the menu itself.
    """
    parts = [f"[OPENMENU]\nnum_items={num_items}\n\n", _ITEMS_HEADER]
    number = 2
    for raw in csv_lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue
        name, product = _split_line(line)
        parts.append(_game_entry(number, product, name))
        number += 1
    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry: ``filelist.csv``; writes OPENMENU.INI in the current folder."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Incorrect usage!\n\t./menufaker filelist.csv")
        return 1
    try:
        lines = Path(args[0]).read_bytes().decode("latin-1").splitlines()
        text = build_menu_ini(lines, DEFAULT_NUM_ITEMS)
        Path(OUTPUT_NAME).write_text(text, encoding="latin-1")
    except (OSError, ValueError) as error:
        print(f"ERR: {error}")
        return 1
    return 0