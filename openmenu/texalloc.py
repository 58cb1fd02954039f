"""A bump allocator handing out aligned texture space from one buffer."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

TEX_ALIGNMENT = 32
TEXMAN_BUFFER_SIZE = 1 * 1024 * 1024
MAX_TEXTURES = 32
MIN_FREE_SPACE = 32 * 1024


@dataclass
class Texture:
    """A texture's place in the buffer and its size."""

    offset: int = 0
    width: int = 0
    height: int = 0
    bpp: int = 0


class TextureAllocator:
    """Stores up to 32 textures one after another in a single buffer."""

    def __init__(self, size: int = TEXMAN_BUFFER_SIZE) -> None:
        self.reset(size)

    def reset(self, size: int) -> None:
        """Start over with a fresh buffer of ``size`` bytes."""
        self.buffer = bytearray(size)
        self.clear()

    def clear(self) -> None:
        """Forget every texture and rewind to the start of the buffer."""
        self._textures = [Texture() for _ in range(MAX_TEXTURES)]
        self._number = 0
        self._position = 0

    def space_available(self) -> int:
        """Bytes left after the current position."""
        return len(self.buffer) - self._position

    def has_space(self) -> bool:
        """Whether more than 32 KiB remain."""
        return self.space_available() > MIN_FREE_SPACE

    def create(self) -> int:
        """Start a new texture at the current position and return its number."""
        number = self._number + 1
        if number >= MAX_TEXTURES:
            raise IndexError(f"no more than {MAX_TEXTURES - 1} textures can be created")
        self._number = number
        self._textures[number] = Texture(offset=self._position)
        return number

    def reserve(self, width: int, height: int, bpp: int) -> Texture:
        """Advance past room for the current texture, aligned to 32 bytes."""
        if self.has_space():
            end = self._position + width * height * bpp
            self._position = (end + TEX_ALIGNMENT - 1) // TEX_ALIGNMENT * TEX_ALIGNMENT
        else:
            logger.warning(
                "TEX_MAN: potential memory overrun! free space: %d bytes",
                self.space_available(),
            )
        return self._textures[self._number]

    def upload(self, width: int, height: int, bpp: int, data: bytes) -> Texture:
        """Reserve space for the current texture and copy ``data`` into it."""
        texture = self.reserve(width, height, bpp)
        size = width * height * bpp
        if texture.offset + size > len(self.buffer):
            raise MemoryError("texture does not fit in the remaining buffer")
        if len(data) < size:
            raise ValueError(f"texture data is {len(data)} bytes, expected {size}")
        texture.width = width
        texture.height = height
        texture.bpp = bpp
        self.buffer[texture.offset:texture.offset + size] = data[:size]
        return texture

    def texture_data(self, number: int) -> bytes:
        """The bytes of texture ``number``."""
        texture = self._textures[number]
        size = texture.width * texture.height * texture.bpp
        return bytes(self.buffer[texture.offset:texture.offset + size])