"""
LeveledContainer abstract base class for leveled key-chain containers.
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from leveled_map.models.entry import DescendantLevel, ValueHandle
from leveled_map.models.exceptions import LeveledMapError


class LeveledContainer(ABC):
    """
    Abstract base class for containers addressed by key chains.

    Implementations provide the detailed operations, which raise a
    LeveledMapError subclass on a bad chain. The convenience operations
    defined here wrap them and return None instead.

    Implementations:
    - LeveledMap: dict-per-level storage with a child index
    """

    @abstractmethod
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
        """
        pass

    @abstractmethod
    def get_detailed_mut(
        self, key_chain: Sequence[Hashable], start_level: int = 0
    ) -> tuple[Hashable | None, ValueHandle]:
        """
        Like get_detailed, but returns a handle that writes through to the
        stored value.
        """
        pass

    @abstractmethod
    def insert(self, key_chain: Sequence[Hashable], value: Any) -> Any | None:
        """
        Insert or overwrite the value at the end of a key chain.

        Args:
            key_chain: Full chain starting at level 0.
            value: The value to store.

        Returns:
            The previous value, or None if the key is new.
        """
        pass

    @abstractmethod
    def insert_many(
        self,
        key_chain: Sequence[Hashable],
        values: Mapping[Hashable, Any],
        start_level: int = 0,
    ) -> dict[Hashable, Any]:
        """
        Insert several children under the entry named by key_chain.

        Args:
            key_chain: Chain naming the parent (empty targets level 0).
            values: Mapping of child key to value.
            start_level: Level of key_chain[0].

        Returns:
            Mapping of overwritten keys to their previous values.
        """
        pass

    @abstractmethod
    def remove_detailed(
        self, key_chain: Sequence[Hashable], start_level: int = 0
    ) -> tuple[Hashable | None, Any, list[DescendantLevel]]:
        """
        Remove the entry at the end of a key chain with its whole subtree.

        Args:
            key_chain: Keys for levels start_level, start_level + 1, ...
            start_level: Level of key_chain[0].

        Returns:
            Tuple of (parent key, value, descendants by relative depth).
        """
        pass

    @abstractmethod
    def keys(self, level: int) -> dict[Hashable, set[Hashable]] | None:
        """
        Return the child index of a level.

        Args:
            level: The level to enumerate.

        Returns:
            Mapping of every key at level to its child keys, or None if the
            level does not exist.
        """
        pass

    def get(self, key_chain: Sequence[Hashable]) -> Any | None:
        """Value at the end of a chain starting at level 0, or None if it does not resolve."""
        return self.get_advanced(key_chain, 0)

    def get_mut(self, key_chain: Sequence[Hashable]) -> ValueHandle | None:
        """Write-through handle for a chain starting at level 0, or None."""
        return self.get_advanced_mut(key_chain, 0)

    def get_advanced(self, key_chain: Sequence[Hashable], start_level: int) -> Any | None:
        """Value at the end of key_chain, or None if the chain does not resolve."""
        try:
            return self.get_detailed(key_chain, start_level)[1]
        except LeveledMapError:
            return None

    def get_advanced_mut(
        self, key_chain: Sequence[Hashable], start_level: int
    ) -> ValueHandle | None:
        """
        Write-through handle for the value at the end of key_chain.

        Args:
            key_chain: Keys for levels start_level, start_level + 1, ...
            start_level: Level of key_chain[0].

        Returns:
            A ValueHandle, or None if the chain does not resolve.
        """
        try:
            return self.get_detailed_mut(key_chain, start_level)[1]
        except LeveledMapError:
            return None

    def remove(
        self, key_chain: Sequence[Hashable]
    ) -> tuple[Any, list[DescendantLevel]] | None:
        """Remove a chain starting at level 0; see remove_advanced."""
        return self.remove_advanced(key_chain, 0)

    def remove_advanced(
        self, key_chain: Sequence[Hashable], start_level: int
    ) -> tuple[Any, list[DescendantLevel]] | None:
        """
        Remove an entry and its subtree.

        Returns:
            Tuple of (value, descendants by relative depth), or None if the
            chain does not resolve.
        """
        try:
            _, value, descendants = self.remove_detailed(key_chain, start_level)
        except LeveledMapError:
            return None
        return value, descendants
