"""
Abstract base classes for the leveled map.
"""

from leveled_map.interfaces.leveled_container import LeveledContainer

__all__ = ["LeveledContainer"]
