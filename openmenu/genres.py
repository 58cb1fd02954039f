"""Genre and accessory flags, and the fixed-size metadata record."""

from __future__ import annotations

import enum
import logging
import struct
from dataclasses import dataclass
from typing import ClassVar

logger = logging.getLogger(__name__)


class Genre(enum.IntFlag):
    """Game genres as stored in the metadata database."""

    NONE = 0
    ACTION = 1 << 0
    RACING = 1 << 1
    SIMULATION = 1 << 2
    SPORTS = 1 << 3
    LIGHTGUN = 1 << 4
    FIGHTING = 1 << 5
    SHOOTER = 1 << 6
    SURVIVAL = 1 << 7
    ADVENTURE = 1 << 8
    PLATFORMER = 1 << 9
    RPG = 1 << 10
    SHMUP = 1 << 11
    STRATEGY = 1 << 12
    PUZZLE = 1 << 13
    ARCADE = 1 << 14
    MUSIC = 1 << 15


class Accessory(enum.IntFlag):
    """Peripherals a game supports."""

    NONE = 0
    JUMP_PACK = 1 << 0
    KEYBOARD = 1 << 1
    VGA = 1 << 2
    MOUSE = 1 << 3
    MARACAS = 1 << 4
    RACING_WHEEL = 1 << 5
    MICROPHONE = 1 << 6
    ARCADE_STICK = 1 << 7
    LIGHTGUN = 1 << 8
    BBA = 1 << 9
    FISHING_ROD = 1 << 10
    ASCII_PAD = 1 << 11
    DREAMEYE = 1 << 12
    MODEM = 1 << 13
    UNUSED = 1 << 14
    UNUSED2 = 1 << 15


_GENRE_NAMES = {
    "Action": Genre.ACTION,
    "Racing": Genre.RACING,
    "Simulation": Genre.SIMULATION,
    "Sports": Genre.SPORTS,
    "Lightgun": Genre.LIGHTGUN,
    "Fighting": Genre.FIGHTING,
    "Shooter": Genre.SHOOTER,
    "Survival": Genre.SURVIVAL,
    "Adventure": Genre.ADVENTURE,
    "Platformer": Genre.PLATFORMER,
    "RPG": Genre.RPG,
    "Shmup": Genre.SHMUP,
    "Strategy": Genre.STRATEGY,
    "Puzzle": Genre.PUZZLE,
    "Arcade": Genre.ARCADE,
    "Music": Genre.MUSIC,
    "0": Genre.NONE,
}

_ACCESSORY_NAMES = {
    "JUMP": Accessory.JUMP_PACK,
    "KEY": Accessory.KEYBOARD,
    "VGA": Accessory.VGA,
    "MS": Accessory.MOUSE,
    "OLE": Accessory.MARACAS,
    "RACE": Accessory.RACING_WHEEL,
    "MIC": Accessory.MICROPHONE,
    "ARC": Accessory.ARCADE_STICK,
    "GUN": Accessory.LIGHTGUN,
    "ETH": Accessory.BBA,
    "FISH": Accessory.FISHING_ROD,
    "ASC": Accessory.ASCII_PAD,
    "CAM": Accessory.DREAMEYE,
    "MOD": Accessory.MODEM,
    "0": Accessory.NONE,
    "-": Accessory.NONE,
}


def genre_from_name(name: str) -> Genre:
    """Return the genre flag for a name; unknown names give ``Genre.NONE``."""
    try:
        return _GENRE_NAMES[name]
    except KeyError:
        logger.warning("META: Unknown genre: %s", name)
        return Genre.NONE


def accessory_from_name(name: str) -> Accessory:
    """Return the accessory flag for a short code; unknown codes give ``Accessory.NONE``."""
    try:
        return _ACCESSORY_NAMES[name]
    except KeyError:
        logger.warning("META: Unknown accessory: %s", name)
        return Accessory.NONE


def _tokens(text: str) -> list[str]:
    return [token for token in text.split("+") if token]


def parse_genres(text: str) -> Genre:
    """Combine a ``+`` separated list of genre names into flags."""
    total = sum(genre_from_name(token) for token in _tokens(text))
    return Genre(total & 0xFFFF)


def parse_accessories(text: str) -> Accessory:
    """Combine a ``+`` separated list of accessory codes into flags."""
    total = sum(accessory_from_name(token) for token in _tokens(text))
    return Accessory(total & 0xFFFF)


@dataclass
class MetaRecord:
    """One game's metadata as stored in a chunk of the metadata DAT."""

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<4BH2B376s")
    SIZE: ClassVar[int] = FORMAT.size
    DESCRIPTION_SIZE: ClassVar[int] = 376

    num_players: int = 0
    vmu_blocks: int = 0
    accessories: Accessory = Accessory.NONE
    network: int = 0
    genre: Genre = Genre.NONE
    description: str = ""
    padding1: int = 0
    padding2: int = 0

    def pack(self) -> bytes:
        """Serialise to the on-disc record layout."""
        return self.FORMAT.pack(
            self.num_players & 0xFF,
            self.vmu_blocks & 0xFF,
            int(self.accessories) & 0xFF,
            self.network & 0xFF,
            int(self.genre) & 0xFFFF,
            self.padding1 & 0xFF,
            self.padding2 & 0xFF,
            self.description.encode("latin-1", errors="replace"),
        )

    @classmethod
    def unpack(cls, data: bytes) -> "MetaRecord":
        """Read a record from the start of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError(f"metadata record needs {cls.SIZE} bytes, got {len(data)}")
        (
            num_players,
            vmu_blocks,
            accessories,
            network,
            genre,
            padding1,
            padding2,
            raw_description,
        ) = cls.FORMAT.unpack_from(data)
        description = raw_description.split(b"\0", 1)[0].decode("latin-1")
        return cls(
            num_players=num_players,
            vmu_blocks=vmu_blocks,
            accessories=Accessory(accessories),
            network=network,
            genre=Genre(genre),
            description=description,
            padding1=padding1,
            padding2=padding2,
        )