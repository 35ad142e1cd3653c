"""
LeveledMap - Main leveled map API.
"""

import logging
from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from leveled_map.engine.resolver import ChainResolver
from leveled_map.engine.subtree_remover import SubtreeRemover
from leveled_map.interfaces.leveled_container import LeveledContainer
from leveled_map.models.entry import DescendantLevel, ValueHandle
from leveled_map.models.exceptions import (
    KeyChainEmptyError,
    KeyChainIncorrectError,
    KeyNotExistError,
    KeyTooManyError,
)
from leveled_map.models.level_pool import LevelPool

logger = logging.getLogger(__name__)


class LeveledMap(LeveledContainer):
    """
    A map that separates values into levels addressed by key chains.

    Every entry below level 0 has a parent key one level up. Keys are
    unique within a level no matter which parent they have, so a key chain
    is only valid when it follows the recorded parent links.

    Provides:
    - get / get_advanced / get_detailed (and *_mut variants)
    - insert(key_chain, value): insert or overwrite a single entry
    - insert_many(key_chain, values, start_level): insert children in bulk
    - remove / remove_advanced / remove_detailed: cut an entry and its subtree
    - keys(level): key set of a level with each key's children

    Architecture:
    - LevelPool holds per-level entries and the child index
    - ChainResolver validates chains for reads and as write pre-checks
    - SubtreeRemover cuts subtrees and groups them by relative depth

    Not thread-safe: callers sharing a map must serialize access.
    """

    def __init__(self) -> None:
        self._pool = LevelPool()
        self._resolver = ChainResolver(self._pool)
        self._remover = SubtreeRemover(self._pool)

    @property
    def level_count(self) -> int:
        return self._pool.level_count

    def get_detailed(
        self, key_chain: Sequence[Hashable], start_level: int = 0
    ) -> tuple[Hashable | None, Any]:
        """
        Retrieve the value at the end of a key chain.

        Args:
            key_chain: Keys for levels start_level, start_level + 1, ...
            start_level: Level of key_chain[0].

        Returns:
            Tuple of (parent key of the last key, value).

        Raises:
            LeveledMapError: The chain does not resolve (see ChainResolver).
        """
        _check_level_arg("start_level", start_level)
        parent, entry = self._resolver.resolve(key_chain, start_level)
        return parent, entry.value

    def get_detailed_mut(
        self, key_chain: Sequence[Hashable], start_level: int = 0
    ) -> tuple[Hashable | None, ValueHandle]:
        """Like get_detailed, but the value comes back as a write-through ValueHandle."""
        _check_level_arg("start_level", start_level)
        parent, entry = self._resolver.resolve(key_chain, start_level)
        return parent, ValueHandle(entry)

    def insert(self, key_chain: Sequence[Hashable], value: Any) -> Any | None:
        """
        Insert or overwrite the value at the end of a key chain.

        The chain always starts at level 0. It may reach at most one level
        below the deepest existing level, in which case that level is
        created.

        Args:
            key_chain: Full chain from level 0 to the target key.
            value: The value to store.

        Returns:
            The previous value, or None if the key is new.

        Raises:
            KeyChainEmptyError: key_chain is empty.
            KeyTooManyError: The chain skips a level.
            KeyNotExistError: A key above the target does not exist.
            KeyChainIncorrectError: The chain does not follow the recorded
                parent links.
        """
        if not key_chain:
            raise KeyChainEmptyError()

        target_level = len(key_chain) - 1
        if target_level > self._pool.level_count:
            raise KeyTooManyError()

        try:
            _, entry = self._resolver.resolve(key_chain)
        except KeyTooManyError:
            # target_level == level_count: the chain ends one level deeper
            entry = None
        except KeyNotExistError as e:
            if e.level != target_level:
                raise
            # Everything above the leaf validated, the leaf itself is new
            parent = key_chain[-2] if target_level > 0 else None
            self._pool.add_entry(target_level, key_chain[-1], parent, value)
            return None

        if entry is None:
            self._insert_into_new_level(key_chain, value)
            return None

        previous = entry.value
        entry.value = value
        return previous

    def _insert_into_new_level(self, key_chain: Sequence[Hashable], value: Any) -> None:
        """Append the deepest level and seed it with the chain's last key."""
        parent = None
        if len(key_chain) > 1:
            # The parent must exist with a valid lineage before the level grows
            self._resolver.resolve(key_chain[:-1])
            parent = key_chain[-2]

        level = self._pool.push_level()
        self._pool.add_entry(level, key_chain[-1], parent, value)
        logger.debug(f"Created level {level} for key {key_chain[-1]!r}")

    def insert_many(
        self,
        key_chain: Sequence[Hashable],
        values: Mapping[Hashable, Any],
        start_level: int = 0,
    ) -> dict[Hashable, Any]:
        """
        Insert several children under the entry named by key_chain.

        An empty key_chain with start_level 0 writes the values straight
        into level 0. Every incoming key is checked against existing keys of
        the target level before anything is written, so a key already owned
        by a different parent fails the whole batch.

        Args:
            key_chain: Chain naming the parent entry.
            values: Mapping of child key to value.
            start_level: Level of key_chain[0].

        Returns:
            Mapping of overwritten keys to their previous values.

        Raises:
            KeyChainEmptyError: key_chain is empty and start_level > 0.
            KeyTooManyError: The target level would skip a level.
            KeyNotExistError: The parent chain does not resolve.
            KeyChainIncorrectError: The parent chain is inconsistent, or an
                incoming key already belongs to another parent.
        """
        _check_level_arg("start_level", start_level)

        if len(key_chain) > self._pool.level_count + 1:
            raise KeyTooManyError()

        if not key_chain:
            if start_level > 0:
                raise KeyChainEmptyError()
            return self._insert_roots(values)

        self._resolver.resolve(key_chain, start_level)

        level = len(key_chain) + start_level
        parent = key_chain[-1]

        if level < self._pool.level_count:
            for key in values:
                existing = self._pool.lookup(level, key)
                if existing is not None and existing.parent != parent:
                    raise KeyChainIncorrectError(level, key, existing.parent)
        else:
            self._pool.push_level()
            logger.debug(f"Created level {level} for children of {parent!r}")

        previous = {}
        for key, value in values.items():
            existing = self._pool.lookup(level, key)
            if existing is not None:
                previous[key] = existing.value
                existing.value = value
            else:
                self._pool.add_entry(level, key, parent, value)

        return previous

    def _insert_roots(self, values: Mapping[Hashable, Any]) -> dict[Hashable, Any]:
        """Write values directly into level 0."""
        if self._pool.level_count == 0:
            self._pool.push_level()
            logger.debug("Created level 0")

        previous = {}
        for key, value in values.items():
            existing = self._pool.lookup(0, key)
            if existing is not None:
                previous[key] = existing.value
                existing.value = value
            else:
                self._pool.add_entry(0, key, None, value)

        return previous

    def remove_detailed(
        self, key_chain: Sequence[Hashable], start_level: int = 0
    ) -> tuple[Hashable | None, Any, list[DescendantLevel]]:
        """
        Remove the entry at the end of a key chain with its whole subtree.

        Empty levels left behind are kept.

        Args:
            key_chain: Keys for levels start_level, start_level + 1, ...
            start_level: Level of key_chain[0].

        Returns:
            Tuple of (parent key, value, descendants) where descendants[d]
            maps every removed key d + 1 levels below the entry to its
            (parent key, value).
        """
        _check_level_arg("start_level", start_level)
        parent, _ = self._resolver.resolve(key_chain, start_level)

        level = start_level + len(key_chain) - 1
        entry, descendants = self._remover.remove(level, key_chain[-1])
        return parent, entry.value, descendants

    def keys(self, level: int) -> dict[Hashable, set[Hashable]] | None:
        """
        Return the live child index of a level.

        Args:
            level: The level to enumerate.

        Returns:
            Mapping of every key at level to its child keys, or None if the
            level does not exist.
        """
        _check_level_arg("level", level)
        return self._pool.child_index(level)

    def __len__(self) -> int:
        return self._pool.entry_count()

    def __repr__(self) -> str:
        levels = [
            {key: entry.as_tuple() for key, entry in level.items()}
            for level in self._pool
        ]
        return f"LeveledMap({levels!r})"


def _check_level_arg(name: str, level: int) -> None:
    if level < 0:
        raise ValueError(f"{name} must be >= 0, got {level}")
