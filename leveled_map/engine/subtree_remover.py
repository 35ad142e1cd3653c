"""
SubtreeRemover - Cut an entry and everything below it out of a LevelPool.
"""

import logging
from collections.abc import Hashable

from leveled_map.models.entry import DescendantLevel, Entry
from leveled_map.models.level_pool import LevelPool

logger = logging.getLogger(__name__)


class SubtreeRemover:
    """
    Removes an already-validated entry together with its whole subtree.

    Descendants are collected one relative depth at a time, so the
    subtrees of sibling children are merged by depth rather than
    concatenated: index 0 of the result holds the direct children, index 1
    the grandchildren, and so on. Keys are unique per level, so merging
    siblings never collides.

    The traversal keeps an explicit frontier instead of recursing, which
    keeps arbitrarily deep subtrees within the interpreter's stack limit.
    """

    def __init__(self, pool: LevelPool) -> None:
        self._pool = pool

    def remove(self, level: int, key: Hashable) -> tuple[Entry, list[DescendantLevel]]:
        """
        Remove key from level, detach it from its parent and cut its subtree.

        Args:
            level: Level of the entry (already validated).
            key: Key of the entry (already validated).

        Returns:
            Tuple of (removed entry, descendants by relative depth).
        """
        entry, children = self._pool.pop_entry(level, key)

        descendants: list[DescendantLevel] = []
        frontier = children
        depth_level = level + 1

        while frontier:
            removed: DescendantLevel = {}
            next_frontier: set[Hashable] = set()

            for child in frontier:
                # Parent is already gone, nothing to detach from
                child_entry, grandchildren = self._pool.pop_entry(
                    depth_level, child, detach=False
                )
                removed[child] = child_entry.as_tuple()
                next_frontier.update(grandchildren)

            descendants.append(removed)
            frontier = next_frontier
            depth_level += 1

        if descendants:
            logger.debug(
                f"Removed subtree of {key!r} at level {level}: "
                f"{sum(len(d) for d in descendants)} descendants "
                f"across {len(descendants)} levels"
            )

        return entry, descendants
