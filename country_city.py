import logging
import os
from dataclasses import dataclass

from leveled_map import LeveledMap

logger = logging.getLogger()


def configure_logging():
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@dataclass(frozen=True)
class MultiName:
    """A place name in American English, Traditional and Simplified Chinese."""

    us: str
    tw: str
    cn: str


def build_earth_map() -> LeveledMap:
    """Countries at level 0, their states/provinces/counties at level 1."""
    earth_map = LeveledMap()

    earth_map.insert(["US"], MultiName("United States of America", "美國", "美国"))
    earth_map.insert_many(["US"], {
        "New York": MultiName("New York", "紐約州", "纽约州"),
        "Utah": MultiName("Utah", "猶他州", "犹他州"),
    })

    earth_map.insert(["CN"], MultiName("China", "中國", "中国"))
    earth_map.insert_many(["CN"], {
        "Guangdong": MultiName("Guangdong", "廣東省", "广东省"),
        "Fujian": MultiName("Fujian", "福建省", "福建省"),
    })

    earth_map.insert(["TW"], MultiName("Taiwan", "臺灣", "臺湾"))
    earth_map.insert_many(["TW"], {
        "Taipei": MultiName("Taipei", "台北", "台北"),
        "Taichung": MultiName("Taichung", "台中", "台中"),
    })

    return earth_map


def main():
    earth_map = build_earth_map()
    logger.info(f"Earth map: {earth_map!r}")

    countries = earth_map.keys(0)
    logger.info(f"Countries: {countries}")

    new_york = earth_map.get(["US", "New York"])
    logger.info(f"US > New York: {new_york}")

    new_york = earth_map.get_advanced(["New York"], 1)
    logger.info(f"New York at level 1: {new_york}")

    # New York is a US state, so the TW lineage does not resolve
    new_york_suspicion = earth_map.get(["TW", "New York"])
    logger.info(f"TW > New York: {new_york_suspicion}")


if __name__ == "__main__":
    configure_logging()
    main()
