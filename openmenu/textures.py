"""Cached loading of game artwork from DAT containers into fixed slots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .block_pool import BlockPool, PoolFullError
from .datfile import DatFile
from .lru import LruCache
from .serials import sanitize_art

SMALL_SLOT_NUM = 16
SMALL_SLOT_SIZE = 128 * 128 * 2
LARGE_SLOT_NUM = 4
LARGE_SLOT_SIZE = 256 * 256 * 2


@dataclass
class Image:
    """A decoded texture and its geometry."""

    width: int = 0
    height: int = 0
    format: int = 0
    texture: bytes = b""


Loader = Callable[[bytes], Image]


def _raw_loader(chunk: bytes) -> Image:
    return Image(texture=bytes(chunk))


class TextureSet:
    """Artwork from an add-on and a primary DAT, kept in a pool of cached slots."""

    def __init__(
        self,
        primary: Optional[DatFile],
        addon: Optional[DatFile] = None,
        slots: int = SMALL_SLOT_NUM,
        slot_size: int = SMALL_SLOT_SIZE,
        loader: Optional[Loader] = None,
    ) -> None:
        self.primary = primary
        self.addon = addon
        self.loader = loader or _raw_loader
        self.pool = BlockPool(slots * slot_size, slots)
        self.buffer = bytearray(slots * slot_size)
        self._lengths = [0] * slots
        self.cache = LruCache(slots, on_add=self._claim_slot, on_remove=self._free_slot)

    def _claim_slot(self, key: str) -> Optional[int]:
        try:
            return self.pool.allocate()
        except PoolFullError:
            return None

    def _free_slot(self, key: str, slot: int) -> None:
        self.pool.release(slot)

    def _source(self, ident: str) -> Optional[DatFile]:
        for dat in (self.addon, self.primary):
            if dat is not None and dat.offset_of(ident):
                return dat
        return None

    def get(self, serial: str) -> Optional[Image]:
        """The artwork for ``serial``, or None when neither DAT holds it."""
        ident = sanitize_art(serial)
        source = self._source(ident)
        if source is None:
            return None

        slot = self.cache.find(ident)
        if slot is None:
            image = self.loader(source.read(ident))
            if len(image.texture) > self.pool.slot_size:
                raise ValueError(
                    f"texture {ident} is {len(image.texture)} bytes, slots hold {self.pool.slot_size}"
                )
            self.cache.add(ident, 0)
            slot = self.cache.find(ident)
            offset = self.pool.slot_offset(slot)
            self.buffer[offset:offset + len(image.texture)] = image.texture
            self._lengths[slot] = len(image.texture)
            self.pool.set_slot_format(slot, image.width, image.height, image.format)

        fmt = self.pool.slot_format(slot)
        offset = self.pool.slot_offset(slot)
        data = bytes(self.buffer[offset:offset + self._lengths[slot]])
        return Image(fmt.width, fmt.height, fmt.format, data)

    def clear(self) -> None:
        """Drop every cached texture and free all slots."""
        self.cache.clear()
        self.pool.release_all()