"""Built-in in-process backend stores."""

from __future__ import annotations

from collections import OrderedDict

from assetstash.constants.cache import DEFAULT_MEMORY_CACHE_SIZE


class NullStore:
    """Store that never retains anything; every lookup is a miss."""

    def get(self, key: str) -> object:
        return None

    def set(self, key: str, value: object) -> object:
        return value


class MemoryStore:
    """Least-recently-used store held in process memory.

    Not synchronized. Share one instance across threads only behind a lock.
    """

    def __init__(self, max_size: int = DEFAULT_MEMORY_CACHE_SIZE) -> None:
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._entries: OrderedDict[str, object] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> object:
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: str, value: object) -> object:
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
        return value
