"""A fixed pool of equally sized slots carved out of one buffer."""

from __future__ import annotations

from dataclasses import dataclass


class PoolFullError(Exception):
    """Raised when every slot in a pool is in use."""


@dataclass
class SlotFormat:
    """Texture geometry stored alongside a slot."""

    width: int = 0
    height: int = 0
    format: int = 0


class BlockPool:
    """Hands out slots of ``size // slots`` bytes each, lowest free slot first."""

    def __init__(self, size: int, slots: int) -> None:
        if slots <= 0:
            raise ValueError("a pool needs at least one slot")
        self.size = size
        self.slots = slots
        self.slot_size = size // slots
        self._used = [False] * slots
        self._formats = [SlotFormat() for _ in range(slots)]

    def allocate(self) -> int:
        """Mark the lowest free slot as used and return its number."""
        for slot, used in enumerate(self._used):
            if not used:
                self._used[slot] = True
                return slot
        raise PoolFullError(f"all {self.slots} slots are in use")

    def release(self, slot: int) -> None:
        """Free one slot; numbers outside the pool are ignored."""
        if 0 <= slot < self.slots:
            self._used[slot] = False

    def release_all(self) -> None:
        """Free every slot."""
        self._used = [False] * self.slots

    def is_used(self, slot: int) -> bool:
        """Whether ``slot`` is currently allocated."""
        return self._used[slot]

    def slot_offset(self, slot: int) -> int:
        """Byte offset of ``slot`` within the pool's buffer."""
        return slot * self.slot_size

    def slot_format(self, slot: int) -> SlotFormat:
        """The format recorded for ``slot``."""
        return self._formats[slot]

    def set_slot_format(self, slot: int, width: int, height: int, fmt: int) -> None:
        """Record the format of the texture held in ``slot``."""
        self._formats[slot] = SlotFormat(width, height, fmt)