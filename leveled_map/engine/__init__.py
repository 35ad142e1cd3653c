"""
Chain resolution, subtree removal and the LeveledMap facade.
"""

from leveled_map.engine.leveled_map import LeveledMap

__all__ = ["LeveledMap"]
