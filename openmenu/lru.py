"""A small least-recently-used cache with add and remove hooks."""

from __future__ import annotations

from collections import OrderedDict
from typing import Callable, Iterator, Optional

AddHook = Callable[[str], Optional[int]]
RemoveHook = Callable[[str, int], object]


class LruCache:
    """Maps string keys to integer values, evicting the oldest entry when full.

    ``on_add(key)`` is called when a key is added; if it returns an integer that
    becomes the stored value. ``on_remove(key, value)`` is called for each entry
    that is evicted or cleared. When an eviction happens and ``on_remove`` is set,
    ``on_add`` is called again for the new key so it can claim freed resources.
    """

    def __init__(
        self,
        max_size: int,
        on_add: Optional[AddHook] = None,
        on_remove: Optional[RemoveHook] = None,
    ) -> None:
        self.max_size = max_size
        self.on_add = on_add
        self.on_remove = on_remove
        self._entries: OrderedDict[str, int] = OrderedDict()

    def find(self, key: str) -> Optional[int]:
        """Return the value for ``key``, or None; a hit refreshes the entry."""
        if key not in self._entries:
            return None
        oldest = next(iter(self._entries))
        if key != oldest:
            self._entries.move_to_end(key)
        return self._entries[key]

    def add(self, key: str, value: int) -> None:
        """Insert ``key``, evicting the oldest entry if the cache grows too large."""
        claimed = self.on_add(key) if self.on_add else None
        if claimed is not None:
            value = claimed
        self._entries.pop(key, None)
        self._entries[key] = value

        if len(self._entries) <= self.max_size:
            return
        old_key, old_value = self._entries.popitem(last=False)
        if self.on_remove is None:
            return
        self.on_remove(old_key, old_value)
        if self.on_add is not None:
            claimed = self.on_add(key)
        if claimed is not None and old_key != key:
            self._entries[key] = claimed

    def clear(self) -> None:
        """Remove every entry, oldest first, calling ``on_remove`` for each."""
        while self._entries:
            old_key, old_value = self._entries.popitem(last=False)
            if self.on_remove is not None:
                self.on_remove(old_key, old_value)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)