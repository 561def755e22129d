"""
Warlight Board - Core Data Structures

This module contains the board model: regions, the continents that group them,
and the map that owns both. Relations are stored as id sets, so a Map is an
arena of objects indexed by integer id.
"""

import logging
from typing import Dict, List, Mapping, Optional, Set
from dataclasses import dataclass, field

from warlight.config import GameDefaults, ProtocolConfig
from warlight.errors import UnknownIdError

logger = logging.getLogger(__name__)

UNKNOWN_OWNER = ProtocolConfig.UNKNOWN_OWNER


@dataclass(eq=False)
class Region:
    """
    Represents a region on the board.

    Attributes:
        id: Unique identifier for the region
        continent_id: ID of the continent the region belongs to
        neighbors: IDs of adjacent regions
        owner: Name of the player holding the region, or UNKNOWN_OWNER
        armies: Number of armies currently on the region
    """
    id: int
    continent_id: int
    neighbors: Set[int] = field(default_factory=set)
    owner: str = UNKNOWN_OWNER
    armies: int = GameDefaults.REGION_ARMIES

    def add_neighbor(self, other: "Region") -> bool:
        """
        Connect this region and another one in both directions.

        Only the two regions are touched. Boards should go through
        Map.add_neighbor, which also keeps the continents' border sets,
        invasion paths and cached priorities up to date.

        Args:
            other: Region to connect to

        Returns:
            True if a new edge was added, False for self-references and known edges
        """
        if other.id == self.id:
            logger.warning(f"Region {self.id} cannot be its own neighbor")
            return False
        if other.id in self.neighbors:
            return False

        self.neighbors.add(other.id)
        other.neighbors.add(self.id)
        return True

    @property
    def has_owner(self) -> bool:
        return self.owner != UNKNOWN_OWNER


@dataclass(eq=False)
class Continent:
    """
    Represents a group of regions that grants a reward to whoever owns all of them.

    Attributes:
        id: Unique identifier for the continent
        reward: Extra armies per turn for the owner
        region_ids: IDs of member regions, in insertion order
        border_region_ids: Members with at least one neighbor on another continent
        invasion_paths: Number of edges leading into another continent
    """
    id: int
    reward: int
    region_ids: List[int] = field(default_factory=list)
    border_region_ids: Set[int] = field(default_factory=set)
    invasion_paths: int = 0
    _priority: Optional[int] = field(default=None, repr=False, compare=False)

    def add_region(self, region_id: int) -> None:
        if region_id not in self.region_ids:
            self.region_ids.append(region_id)

    def owned_by(self, regions: Mapping[int, Region]) -> str:
        """
        Get the player owning every region of the continent.

        Args:
            regions: Region lookup to read owners from

        Returns:
            The shared owner, or UNKNOWN_OWNER when the continent is empty,
            a member is missing from the lookup, or the members disagree
        """
        if not self.region_ids:
            return UNKNOWN_OWNER

        owner = None
        for region_id in self.region_ids:
            region = regions.get(region_id)
            if region is None:
                return UNKNOWN_OWNER
            if owner is None:
                owner = region.owner
            elif region.owner != owner:
                return UNKNOWN_OWNER

        return owner

    def priority(self) -> int:
        """How contested the continent is: invasion paths times border regions."""
        if self._priority is None:
            self._priority = self.invasion_paths * len(self.border_region_ids)
        return self._priority

    def invalidate_priority(self) -> None:
        self._priority = None

    def copy_static(self) -> "Continent":
        """Copy the id, reward and membership, without any edge bookkeeping."""
        return Continent(self.id, self.reward, region_ids=list(self.region_ids))


class Map:
    """
    Manages the board: continents and regions keyed by id.
    """

    def __init__(self):
        """Initialize an empty map."""
        self.regions: Dict[int, Region] = {}
        self.continents: Dict[int, Continent] = {}

    def add_continent(self, continent: Continent) -> bool:
        """
        Add a continent to the map. Adding a known id does nothing.

        Returns:
            True if the continent was added
        """
        if continent.id in self.continents:
            logger.debug(f"Continent {continent.id} already on the map")
            return False

        self.continents[continent.id] = continent
        logger.debug(f"Continent {continent.id} added with reward {continent.reward}")
        return True

    def add_region(self, region: Region) -> bool:
        """
        Add a region to the map and record it on its continent.
        Adding a known id does nothing.

        Returns:
            True if the region was added

        Raises:
            UnknownIdError: If the region's continent is not on the map
        """
        if region.id in self.regions:
            logger.debug(f"Region {region.id} already on the map")
            return False

        continent = self.continents.get(region.continent_id)
        if continent is None:
            raise UnknownIdError("continent", region.continent_id)

        self.regions[region.id] = region
        continent.add_region(region.id)
        logger.debug(f"Region {region.id} added to continent {continent.id}")
        return True

    def add_neighbor(self, region_id: int, neighbor_id: int) -> bool:
        """
        Connect two regions. Edges crossing a continent boundary update the
        border bookkeeping of both continents.

        Returns:
            True if a new edge was added

        Raises:
            UnknownIdError: If either region is not on the map
        """
        region = self.get_region(region_id)
        neighbor = self.get_region(neighbor_id)

        if not region.add_neighbor(neighbor):
            return False

        if region.continent_id != neighbor.continent_id:
            for border in (region, neighbor):
                continent = self.continents[border.continent_id]
                continent.border_region_ids.add(border.id)
                continent.invasion_paths += 1
                continent.invalidate_priority()

        return True

    def get_region(self, region_id: int) -> Region:
        """
        Get region by ID.

        Raises:
            UnknownIdError: If the region is not on the map
        """
        region = self.regions.get(region_id)
        if region is None:
            raise UnknownIdError("region", region_id)
        return region

    def continent_for_id(self, continent_id: int) -> Optional[Continent]:
        """Get continent by ID, or None."""
        return self.continents.get(continent_id)

    def continent_list(self) -> List[Continent]:
        return list(self.continents.values())

    def continent_owner(self, continent_id: int) -> str:
        """Owner of a continent on this map, see Continent.owned_by."""
        continent = self.continents.get(continent_id)
        if continent is None:
            raise UnknownIdError("continent", continent_id)
        return continent.owned_by(self.regions)

    # Queries for bots

    def get_neighbors(self, region_id: int) -> List[Region]:
        """Get all neighboring regions present on this map."""
        return [self.regions[nid] for nid in sorted(self.get_region(region_id).neighbors)
                if nid in self.regions]

    def enemy_neighbors(self, region_id: int) -> List[Region]:
        """Get neighbors held by someone other than the region's owner."""
        owner = self.get_region(region_id).owner
        return [n for n in self.get_neighbors(region_id) if n.owner != owner]

    def number_of_enemy_neighbors(self, region_id: int) -> int:
        return len(self.enemy_neighbors(region_id))

    def has_enemy_neighbors(self, region_id: int) -> bool:
        return self.number_of_enemy_neighbors(region_id) > 0

    def is_border_region(self, region_id: int) -> bool:
        """Check if the region has a neighbor on another continent."""
        region = self.get_region(region_id)
        return any(self.regions[nid].continent_id != region.continent_id
                   for nid in region.neighbors if nid in self.regions)

    def regions_owned_by(self, player: str) -> List[Region]:
        return [region for region in self.regions.values() if region.owner == player]
