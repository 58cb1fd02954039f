"""A small INI reader producing ``(section, name, value)`` triples."""

from __future__ import annotations


class IniError(ValueError):
    """Raised when a line of an INI document cannot be parsed."""

    def __init__(self, lineno: int, message: str) -> None:
        super().__init__(f"line {lineno}: {message}")
        self.lineno = lineno


def parse_ini(text: str) -> list[tuple[str, str, str]]:
    """Parse INI text into ``(section, name, value)`` triples in document order.

    Blank lines and lines starting with ``;`` or ``#`` are skipped. A key and its
    value are split at the first ``=`` or ``:``; surrounding whitespace is removed.
    """
    section = ""
    result: list[tuple[str, str, str]] = []
    for lineno, raw in enumerate(text.splitlines(), 1):
        if lineno == 1:
            raw = raw.lstrip("\ufeff")
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("["):
            end = line.find("]")
            if end < 0:
                raise IniError(lineno, "section header is missing ']'")
            section = line[1:end].strip()
            continue
        positions = [pos for pos in (line.find("="), line.find(":")) if pos >= 0]
        if not positions:
            raise IniError(lineno, f"expected name=value, got {line!r}")
        cut = min(positions)
        result.append((section, line[:cut].strip(), line[cut + 1:].strip()))
    return result