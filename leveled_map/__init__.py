"""
Leveled hash map: values separated into levels and addressed by key chains.

This package provides a hierarchical in-memory container with:
- get(key_chain) - Resolve a chain along recorded parent links
- insert(key_chain, value) - Insert or overwrite, growing at most one level
- insert_many(key_chain, values, start_level) - Batch insert under one parent
- remove(key_chain) - Cut an entry and its subtree, grouped by relative depth
- keys(level) - Key set of a level with each key's children
"""

from leveled_map.engine.leveled_map import LeveledMap
from leveled_map.models.entry import ValueHandle
from leveled_map.models.exceptions import (
    KeyChainEmptyError,
    KeyChainIncorrectError,
    KeyNotExistError,
    KeyTooManyError,
    LeveledMapError,
    LevelPoolCorruptionError,
)

__all__ = [
    "LeveledMap",
    "ValueHandle",
    "LeveledMapError",
    "KeyChainEmptyError",
    "KeyTooManyError",
    "KeyNotExistError",
    "KeyChainIncorrectError",
    "LevelPoolCorruptionError",
]
