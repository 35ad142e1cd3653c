"""
Shared pytest fixtures for leveled map tests.
"""

import pytest

from leveled_map import LeveledMap
from leveled_map.models.level_pool import LevelPool


@pytest.fixture
def leveled_map():
    """Provide an empty LeveledMap instance."""
    return LeveledMap()


@pytest.fixture
def level_pool():
    """Provide an empty LevelPool instance."""
    return LevelPool()


@pytest.fixture
def food_map():
    """
    Provide a three-level map:

    food(10) -> dessert(21) -> cake(30), pudding(31)
    animal(11) -> mammal(77)
    plant(13)
    """
    m = LeveledMap()
    m.insert(["food"], 10)
    m.insert(["animal"], 11)
    m.insert(["plant"], 13)
    m.insert(["food", "dessert"], 21)
    m.insert(["food", "dessert", "cake"], 30)
    m.insert(["food", "dessert", "pudding"], 31)
    m.insert(["animal", "mammal"], 77)
    return m


@pytest.fixture
def country_map():
    """Provide a country -> state map with US (NY, CA) and CN (GD)."""
    m = LeveledMap()
    m.insert(["US"], "CountryUS")
    m.insert(["US", "NY"], "StateNY")
    m.insert(["US", "CA"], "StateCA")
    m.insert(["CN"], "CountryCN")
    m.insert(["CN", "GD"], "ProvinceGD")
    return m
