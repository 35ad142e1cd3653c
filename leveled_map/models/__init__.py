"""
Data models for the leveled map.
"""

from leveled_map.models.entry import DescendantLevel, Entry, ValueHandle
from leveled_map.models.level_pool import LevelPool

__all__ = [
    "DescendantLevel",
    "Entry",
    "ValueHandle",
    "LevelPool",
]
