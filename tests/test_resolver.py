"""
Tests for ChainResolver lineage validation.
"""

import pytest

from leveled_map.engine.resolver import ChainResolver
from leveled_map.models.exceptions import (
    KeyChainEmptyError,
    KeyChainIncorrectError,
    KeyNotExistError,
    KeyTooManyError,
)
from leveled_map.models.level_pool import LevelPool


@pytest.fixture
def resolver():
    """
    Provide a resolver over:

    US -> NY -> NYC
    CN -> GD
    """
    pool = LevelPool()
    for _ in range(3):
        pool.push_level()
    pool.add_entry(0, "US", None, "CountryUS")
    pool.add_entry(0, "CN", None, "CountryCN")
    pool.add_entry(1, "NY", "US", "StateNY")
    pool.add_entry(1, "GD", "CN", "ProvinceGD")
    pool.add_entry(2, "NYC", "NY", "CityNYC")
    return ChainResolver(pool)


class TestChainResolver:
    """Tests for ChainResolver."""

    def test_resolve_root(self, resolver):
        """Test resolving a level 0 key."""
        parent, entry = resolver.resolve(["US"])

        assert parent is None
        assert entry.value == "CountryUS"

    def test_resolve_full_chain(self, resolver):
        """Test resolving a chain down to level 2."""
        parent, entry = resolver.resolve(["US", "NY", "NYC"])

        assert parent == "NY"
        assert entry.value == "CityNYC"

    def test_resolve_with_start_level(self, resolver):
        """Test that the first key is not checked against a parent."""
        parent, entry = resolver.resolve(["NY", "NYC"], 1)
        assert parent == "NY"
        assert entry.value == "CityNYC"

        parent, entry = resolver.resolve(["NYC"], 2)
        assert parent == "NY"

    def test_empty_chain(self, resolver):
        """Test empty chain error."""
        with pytest.raises(KeyChainEmptyError):
            resolver.resolve([])

    def test_too_many(self, resolver):
        """Test that chains reaching below the deepest level fail."""
        with pytest.raises(KeyTooManyError):
            resolver.resolve(["US", "NY", "NYC", "Manhattan"])

        with pytest.raises(KeyTooManyError):
            resolver.resolve(["NY", "NYC"], 2)

    def test_not_exist_reports_level(self, resolver):
        """Test missing key error carries the failing level and key."""
        with pytest.raises(KeyNotExistError) as exc_info:
            resolver.resolve(["US", "CA"])

        assert exc_info.value.level == 1
        assert exc_info.value.key == "CA"

    def test_not_exist_reports_shallowest_level(self, resolver):
        """Test the first missing key is reported."""
        with pytest.raises(KeyNotExistError) as exc_info:
            resolver.resolve(["JP", "Tokyo"])

        assert exc_info.value.level == 0
        assert exc_info.value.key == "JP"

    def test_wrong_lineage(self, resolver):
        """Test that an existing key under another parent is rejected."""
        with pytest.raises(KeyChainIncorrectError) as exc_info:
            resolver.resolve(["CN", "NY"])

        assert exc_info.value.level == 1
        assert exc_info.value.key == "NY"
        assert exc_info.value.last_key == "US"

    def test_wrong_lineage_in_middle(self, resolver):
        """Test lineage is checked at every step, not only the last."""
        with pytest.raises(KeyChainIncorrectError) as exc_info:
            resolver.resolve(["CN", "GD", "NYC"])

        assert exc_info.value.level == 2
        assert exc_info.value.last_key == "NY"
