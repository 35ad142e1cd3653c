"""
Tests for the country/city demonstration program.
"""

import importlib.util
import logging

import country_city
from country_city import MultiName, build_earth_map, main


class TestEarthMap:
    """Tests for the map built by the demo."""

    def test_countries_and_children(self):
        """Test the level 0 index lists every country with its children."""
        earth_map = build_earth_map()

        assert earth_map.keys(0) == {
            "US": {"New York", "Utah"},
            "CN": {"Guangdong", "Fujian"},
            "TW": {"Taipei", "Taichung"},
        }
        assert earth_map.level_count == 2
        assert len(earth_map) == 9

    def test_lookups(self):
        """Test the lookups the demo prints."""
        earth_map = build_earth_map()
        new_york = MultiName("New York", "紐約州", "纽约州")

        assert earth_map.get(["US", "New York"]) == new_york
        assert earth_map.get_advanced(["New York"], 1) == new_york
        assert earth_map.get(["TW", "New York"]) is None

    def test_main_logs_lookups(self, caplog):
        """Test the demo runs end to end."""
        with caplog.at_level(logging.INFO):
            main()

        assert "TW > New York: None" in caplog.text
        assert "New York at level 1" in caplog.text

    def test_import_leaves_logging_alone(self, monkeypatch):
        """Test logging is configured only when asked to."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        spec = importlib.util.spec_from_file_location(
            "country_city_fresh", country_city.__file__
        )
        fresh = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(fresh)
        assert calls == []

        monkeypatch.setenv("LOG_LEVEL", "debug")
        fresh.configure_logging()
        assert calls[0]["level"] == "DEBUG"
