"""
Custom exceptions for the leveled map.
"""

from collections.abc import Hashable


class LeveledMapError(Exception):
    """Base class for every key chain error raised by a LeveledMap."""


class KeyChainEmptyError(LeveledMapError):
    """Raised when a key chain has no elements."""

    def __init__(self) -> None:
        super().__init__("The key chain is empty.")


class KeyTooManyError(LeveledMapError):
    """
    Raised when a key chain (plus its start level) addresses a level
    beyond the deepest existing one.

    Inserts are allowed to create exactly one new level, so for them the
    error means the chain skips a level.
    """

    def __init__(self) -> None:
        super().__init__(
            "The length of a key chain is over the max level of a LeveledMap."
        )


class KeyNotExistError(LeveledMapError):
    """
    Raised when the chain is consistent up to `level` but `key` is absent
    from that level.
    """

    def __init__(self, level: int, key: Hashable):
        """
        Initialize the error.

        Args:
            level: Level at which the lookup failed.
            key: The missing key.
        """
        self.level = level
        self.key = key
        super().__init__(
            f"The key chain is correct, but the last key at level {level} "
            f"in the key chain does not exist."
        )


class KeyChainIncorrectError(LeveledMapError):
    """
    Raised when `key` exists at `level` but its recorded parent is not the
    preceding key of the chain.
    """

    def __init__(self, level: int, key: Hashable, last_key: Hashable | None):
        """
        Initialize the error.

        Args:
            level: Level of the offending key.
            key: The key whose lineage does not match.
            last_key: The parent actually recorded for `key`.
        """
        self.level = level
        self.key = key
        self.last_key = last_key
        super().__init__(f"The key chain is incorrect at level {level}.")


class LevelPoolCorruptionError(RuntimeError):
    """
    Raised when the level pool and child index disagree.

    This is a fail-fast error: it indicates a broken internal invariant,
    never bad caller input.
    """

    def __init__(self, level: int, key: Hashable, detail: str):
        self.level = level
        self.key = key
        super().__init__(f"Level pool corrupted at level {level} (key {key!r}): {detail}")
