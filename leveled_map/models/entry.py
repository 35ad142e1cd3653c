"""
Entry and ValueHandle for representing stored values with their lineage.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any


@dataclass
class Entry:
    """
    A value stored at some level of the map.

    Attributes:
        parent: Key of the owning entry one level up (None at level 0).
        value: The stored value.
    """

    parent: Hashable | None
    value: Any

    def as_tuple(self) -> tuple[Hashable | None, Any]:
        return (self.parent, self.value)


class ValueHandle:
    """
    Mutable access to a value that stays inside the map.

    Writes through `value` or `update()` replace the stored value in place;
    the entry's parent link is not reachable through the handle.
    """

    __slots__ = ("_entry",)

    def __init__(self, entry: Entry) -> None:
        self._entry = entry

    @property
    def value(self) -> Any:
        return self._entry.value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._entry.value = new_value

    def update(self, func: Callable[[Any], Any]) -> Any:
        """
        Replace the stored value with `func(value)`.

        Args:
            func: Function computing the new value from the current one.

        Returns:
            The new stored value.
        """
        self._entry.value = func(self._entry.value)
        return self._entry.value

    def __repr__(self) -> str:
        return f"ValueHandle({self._entry.value!r})"


# Removed entries at one relative depth: key -> (parent, value)
DescendantLevel = dict[Hashable, tuple[Hashable | None, Any]]
