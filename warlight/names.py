"""
Readable names for region and continent ids.

The engine only ever talks in ids. A NameTable is an optional lookup used to
make logs and bot code easier to read; nothing in the framework depends on a
particular board layout.
"""

from typing import Dict, Optional


class NameTable:
    """Maps region and continent ids to names, falling back to a generic label."""

    def __init__(self, regions: Optional[Dict[int, str]] = None,
                 continents: Optional[Dict[int, str]] = None):
        self.regions = dict(regions or {})
        self.continents = dict(continents or {})

    def region(self, region_id: int) -> str:
        return self.regions.get(region_id, f"region {region_id}")

    def continent(self, continent_id: int) -> str:
        return self.continents.get(continent_id, f"continent {continent_id}")

    def region_id(self, name: str) -> Optional[int]:
        """Reverse lookup, case-insensitive."""
        wanted = name.lower()
        for region_id, region_name in self.regions.items():
            if region_name.lower() == wanted:
                return region_id
        return None


# Ids of the classic world board. Meaningless on any other map.
CLASSIC_CONTINENTS = {
    1: "North America",
    2: "South America",
    3: "Europe",
    4: "Africa",
    5: "Asia",
    6: "Australia",
}

CLASSIC_REGIONS = {
    1: "Alaska",
    2: "Northwest Territory",
    3: "Greenland",
    4: "Alberta",
    5: "Ontario",
    6: "Quebec",
    7: "Western United States",
    8: "Eastern United States",
    9: "Central America",
    10: "Venezuela",
    11: "Peru",
    12: "Brazil",
    13: "Argentina",
    14: "Iceland",
    15: "Great Britain",
    16: "Scandinavia",
    17: "Ukraine",
    18: "Western Europe",
    19: "Northern Europe",
    20: "Southern Europe",
    21: "North Africa",
    22: "Egypt",
    23: "East Africa",
    24: "Congo",
    25: "South Africa",
    26: "Madagascar",
    27: "Ural",
    28: "Siberia",
    29: "Yakutsk",
    30: "Kamchatka",
    31: "Irkutsk",
    32: "Kazakhstan",
    33: "China",
    34: "Mongolia",
    35: "Japan",
    36: "Middle East",
    37: "India",
    38: "Siam",
    39: "Indonesia",
    40: "New Guinea",
    41: "Western Australia",
    42: "Eastern Australia",
}

CLASSIC_NAMES = NameTable(CLASSIC_REGIONS, CLASSIC_CONTINENTS)
