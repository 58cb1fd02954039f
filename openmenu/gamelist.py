"""The list of games on the card, read from the menu INI file."""

from __future__ import annotations

import enum
import logging
import os
import re
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path
from typing import Callable, Iterable, Optional

from .genres import MetaRecord
from .ini import parse_ini

logger = logging.getLogger(__name__)

MULTIDISC_MAX_GAMES_PER_SET = 4

MetaLookup = Callable[[str], Optional[MetaRecord]]


@dataclass
class GameItem:
    """One slot of the card as described by the menu INI."""

    name: str = ""
    date: str = ""
    product: str = ""
    disc: str = ""
    version: str = ""
    region: str = ""
    slot_num: int = 0
    vga: str = ""


_TEXT_FIELDS = frozenset({"name", "date", "product", "disc", "version", "region", "vga"})


class SortOrder(enum.IntEnum):
    """How a game listing is ordered."""

    DEFAULT = 0
    NAME = 1
    DATE = 2
    PRODUCT = 3


_SORT_KEYS = {
    SortOrder.NAME: attrgetter("name"),
    SortOrder.DATE: attrgetter("date"),
    SortOrder.PRODUCT: attrgetter("product"),
}

# (product, date, corrected product): discs whose serial collides with another release.
_SERIAL_FIXES = (
    ("T15117N", "20010423", "T15112D05"),
    ("MK51035", "20000120", "MK5103550"),
    ("T17714D50", "20001116", "T17719N"),
    ("MK51114", "20010920", "MK5111450"),
    ("T36802N", "19991220", "T36803D05"),
    ("MK51178", "20011129", "MK5117850"),
    ("T9706D50", "19991201", "T9705D50"),
    ("T9504M", "20000407", "T9504N"),
    ("T7005D", "20000711", "T7003D"),
    ("MK51052", "20010306", "MK5105250"),
    ("T13008N", "20010402", "T13011D50"),
    ("T0000M", "19990813", "T13701N"),
    ("T0006M", "20030609", "T0010M"),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def fix_sega_serials(items: Iterable[GameItem]) -> None:
    """Correct, in place, product serials that clash with another game's."""
    for item in items:
        for product, date, corrected in _SERIAL_FIXES:
            if item.product == product and item.date == date:
                item.product = corrected
        if item.product == "T0009M" and "orth" in item.name:
            item.product = "T0026M"


def _disc_digit(disc: str, index: int) -> int:
    return ord(disc[index]) - ord("0") if index < len(disc) else -ord("0")


def _is_extra_disc(item: GameItem) -> bool:
    return _disc_digit(item.disc, 0) > 1 and _disc_digit(item.disc, 2) > 1


def _sort_order(sort: int) -> SortOrder:
    try:
        return SortOrder(sort)
    except ValueError:
        return SortOrder.DEFAULT


class GameList:
    """All slots of the card; slot 1 is the menu itself and is never listed."""

    def __init__(self, items: Iterable[GameItem]) -> None:
        self.slots = list(items)

    @classmethod
    def read(cls, path: str | os.PathLike[str]) -> "GameList":
        """Read the menu INI at ``path``."""
        text = Path(path).read_bytes().decode("latin-1")
        logger.info("INI:Open %s", path)
        return cls.parse(text)

    @classmethod
    def parse(cls, text: str) -> "GameList":
        """Build the list from menu INI text."""
        slots: dict[int, GameItem] = {}
        declared: Optional[int] = None
        last_slot = 0
        for section, name, value in parse_ini(text):
            if section == "OPENMENU" and name == "num_items":
                declared = _atoi(value)
                slots.clear()
                continue
            prefix, separator, field = name.partition(".")
            if not separator:
                logger.warning("INI:Error unknown [%s] %s: %s", section, name, value)
                continue
            slot = _atoi(prefix)
            last_slot = slot
            if slot < 1:
                logger.warning("INI:Error bad slot [%s] %s: %s", section, name, value)
                continue
            item = slots.setdefault(slot, GameItem(slot_num=slot))
            field = field.lower()
            if field in _TEXT_FIELDS:
                setattr(item, field, value)

        count = max(last_slot, 0)
        logger.info("Info: Loaded %d items from %s", count, declared)
        items = [slots.get(number) or GameItem() for number in range(1, count + 1)]
        fix_sega_serials(items[1:])
        return cls(items)

    def _games(self, hide_multidisc: bool) -> list[GameItem]:
        return [item for item in self.slots[1:] if not (hide_multidisc and _is_extra_disc(item))]

    @staticmethod
    def _ordered(items: list[GameItem], sort: int) -> list[GameItem]:
        key = _SORT_KEYS.get(_sort_order(sort))
        return sorted(items, key=key) if key else items

    def items(self, sort: int = SortOrder.DEFAULT, hide_multidisc: bool = False) -> list[GameItem]:
        """Every game, in the requested order."""
        return self._ordered(self._games(hide_multidisc), sort)

    def by_genre(
        self,
        genre: int,
        sort: int = SortOrder.DEFAULT,
        meta_lookup: Optional[MetaLookup] = None,
        hide_multidisc: bool = False,
    ) -> list[GameItem]:
        """Games whose metadata has genre bit ``genre`` set, in the requested order."""
        if meta_lookup is None:
            return []
        matching = 1 << genre
        chosen = [
            item
            for item in self._games(hide_multidisc)
            if (meta := meta_lookup(item.product)) is not None and int(meta.genre) & matching
        ]
        return self._ordered(chosen, sort)

    def select(
        self,
        sort: int = SortOrder.DEFAULT,
        genre_filter: int = 0,
        meta_lookup: Optional[MetaLookup] = None,
        hide_multidisc: bool = False,
    ) -> list[GameItem]:
        """The listing the menu shows: ``genre_filter`` 0 means no filter, else genre bit + 1."""
        if not genre_filter:
            order = _sort_order(sort)
            if order not in (SortOrder.NAME, SortOrder.DATE):
                order = SortOrder.DEFAULT
            return self.items(order, hide_multidisc)
        return self.by_genre(genre_filter - 1, sort, meta_lookup, hide_multidisc)

    def multidisc(self, product: str) -> list[GameItem]:
        """All discs of the set with serial ``product``, at most four."""
        discs = [item for item in self.slots[1:] if item.product == product]
        return discs[:MULTIDISC_MAX_GAMES_PER_SET]

    def __len__(self) -> int:
        return max(len(self.slots) - 1, 0)