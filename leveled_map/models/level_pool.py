"""
LevelPool - Per-level entry storage plus the child index.
"""

from collections.abc import Hashable, Iterator
from typing import Any

from leveled_map.models.entry import Entry
from leveled_map.models.exceptions import LevelPoolCorruptionError


class LevelPool:
    """
    Two parallel lists of dicts, one slot per level.

    - pool[L]: key -> Entry(parent, value)
    - child_index[L]: key -> set of keys at level L+1 owned by key

    Both lists always have the same length and the same key domain per
    level, so child_index[L] doubles as the key set of level L. Callers are
    expected to have validated levels and lineage (see ChainResolver);
    inconsistencies found here raise LevelPoolCorruptionError.
    """

    def __init__(self) -> None:
        self._pool: list[dict[Hashable, Entry]] = []
        self._child_index: list[dict[Hashable, set[Hashable]]] = []

    @property
    def level_count(self) -> int:
        return len(self._pool)

    def push_level(self) -> int:
        """
        Append an empty deepest level.

        Returns:
            Index of the new level.
        """
        self._pool.append({})
        self._child_index.append({})
        return len(self._pool) - 1

    def lookup(self, level: int, key: Hashable) -> Entry | None:
        """
        Find the entry stored for key at an existing level.

        Args:
            level: Level to search (must exist).
            key: The key to look up.

        Returns:
            The Entry if found, None otherwise.
        """
        return self._pool[level].get(key)

    def add_entry(
        self, level: int, key: Hashable, parent: Hashable | None, value: Any
    ) -> Entry:
        """
        Store a brand-new key at level and link it under parent.

        Args:
            level: Existing level to write into.
            key: Key not yet present at level.
            parent: Key at level - 1 owning the new key (None at level 0).
            value: Value to store.

        Returns:
            The stored Entry.
        """
        # Below level 0 every entry has a parent, which may itself be the key None
        if level > 0:
            siblings = self._children_or_fail(level - 1, parent)
            siblings.add(key)

        entry = Entry(parent=parent, value=value)
        self._pool[level][key] = entry
        self._child_index[level][key] = set()
        return entry

    def pop_entry(
        self, level: int, key: Hashable, detach: bool = True
    ) -> tuple[Entry, set[Hashable]]:
        """
        Remove key from level and hand back its entry and child set.

        Args:
            level: Level holding the key.
            key: The key to remove.
            detach: Also drop key from its parent's child set. Pass False
                when the parent itself has already been removed.

        Returns:
            Tuple of (entry, keys of its direct children at level + 1).
        """
        entry = self._pool[level].pop(key, None)
        if entry is None:
            raise LevelPoolCorruptionError(level, key, "entry missing from pool")

        children = self._child_index[level].pop(key, None)
        if children is None:
            raise LevelPoolCorruptionError(level, key, "entry missing from child index")

        if detach and level > 0:
            self._children_or_fail(level - 1, entry.parent).discard(key)

        return entry, children

    def child_index(self, level: int) -> dict[Hashable, set[Hashable]] | None:
        if level < len(self._child_index):
            return self._child_index[level]
        return None

    def entry_count(self) -> int:
        return sum(len(level) for level in self._pool)

    def __iter__(self) -> Iterator[dict[Hashable, Entry]]:
        return iter(self._pool)

    def _children_or_fail(self, level: int, key: Hashable) -> set[Hashable]:
        """Child set of key at level; its absence means the pool is corrupt."""
        if level < 0 or level >= len(self._child_index):
            raise LevelPoolCorruptionError(level, key, "parent level does not exist")
        children = self._child_index[level].get(key)
        if children is None:
            raise LevelPoolCorruptionError(level, key, "parent missing from child index")
        return children
