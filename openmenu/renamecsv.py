"""Rename the files of a folder as listed in a CSV of ``current,new`` names."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence


def _with_extension(filename: str, extension: str) -> str:
    dot = filename.rfind(".")
    if dot < 0:
        raise ValueError(f"no extension in {filename!r}")
    return filename[: dot + 1] + extension[:3]


def rename_from_csv(
    folder: str | os.PathLike[str],
    csv_path: str | os.PathLike[str],
    extension: Optional[str] = None,
) -> list[tuple[str, str]]:
    """Rename files in ``folder`` per ``csv_path``; return the ``(old, new)`` paths renamed.

    With ``extension``, both names get that extension instead of the one in the CSV.
    Files that are missing or cannot be renamed are reported and skipped.
    """
    text = Path(csv_path).read_bytes().decode("latin-1")
    base = os.fspath(folder)
    print(f"REN: Renaming files in {base} as per {os.fspath(csv_path)}")
    renamed: list[tuple[str, str]] = []
    for line in text.split("\n"):
        if not line.strip("\r"):
            continue
        current, comma, new = line.rpartition(",")
        if not comma:
            raise ValueError(f"no comma in line {line!r}")
        cut = new.rfind("\r")
        if cut >= 0:
            new = new[:cut]
        if extension is not None:
            current = _with_extension(current, extension)
            new = _with_extension(new, extension)
        source = os.path.join(base, current)
        target = os.path.join(base, new)
        if not os.path.exists(source):
            print(f"REN:Error {source} missing!")
            continue
        try:
            os.rename(source, target)
        except OSError as error:
            print(f"{source} -> [{target}]")
            print(f"{source}: {error.strerror}")
            continue
        renamed.append((source, target))
    return renamed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry: ``FOLDER filelist.csv (-ext pvr)``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Incorrect usage!\n\t./renamecsv FOLDER filelist.csv (-ext pvr)")
        return 1
    extension = args[3] if len(args) == 4 and args[2] == "-ext" else None
    try:
        rename_from_csv(args[0], args[1], extension)
    except (OSError, ValueError) as error:
        print(f"ERR: {error}")
        return 1
    return 0