"""
ChainResolver - Validate a key chain against the stored lineage.
"""

from collections.abc import Hashable, Sequence

from leveled_map.models.entry import Entry
from leveled_map.models.exceptions import (
    KeyChainEmptyError,
    KeyChainIncorrectError,
    KeyNotExistError,
    KeyTooManyError,
)
from leveled_map.models.level_pool import LevelPool


class ChainResolver:
    """
    Walks a key chain level by level and checks every parent link.

    Used by every read path and as the pre-check of every write path, so
    the errors it raises are the public error contract of the map.
    """

    def __init__(self, pool: LevelPool) -> None:
        self._pool = pool

    def resolve(
        self, key_chain: Sequence[Hashable], start_level: int = 0
    ) -> tuple[Hashable | None, Entry]:
        """
        Resolve a key chain to the entry of its last key.

        Args:
            key_chain: Keys for levels start_level, start_level + 1, ...
            start_level: Level of key_chain[0].

        Returns:
            Tuple of (stored parent of the last key, its Entry).

        Raises:
            KeyChainEmptyError: key_chain is empty.
            KeyTooManyError: The chain reaches below the deepest level.
            KeyNotExistError: A key is missing; reports the shallowest level.
            KeyChainIncorrectError: A key's stored parent is not the
                previous chain key.
        """
        if not key_chain:
            raise KeyChainEmptyError()
        if len(key_chain) + start_level > self._pool.level_count:
            raise KeyTooManyError()

        entry: Entry | None = None
        previous: Hashable | None = None

        for offset, key in enumerate(key_chain):
            level = start_level + offset
            entry = self._pool.lookup(level, key)
            if entry is None:
                raise KeyNotExistError(level, key)

            # The first key may sit under any parent
            if offset > 0 and entry.parent != previous:
                raise KeyChainIncorrectError(level, key, entry.parent)

            previous = key

        return entry.parent, entry
