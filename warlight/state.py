"""
Game state as seen by one player.

The State keeps two maps. The complete map is built once from the setup
commands. The visible map starts empty and grows as the engine reports
regions, so a region's neighbors only show up on it once they have been
reported themselves.
"""

import logging
from typing import Dict, List, Optional

from warlight.config import GameDefaults
from warlight.core import Map, Region, UNKNOWN_OWNER
from warlight.moves import AttackTransferMove, Move, PlaceArmiesMove
from warlight.names import NameTable


class State:
    """
    Represents everything the bot knows about the game.

    Attributes:
        my_name: Name the engine gave to this bot
        opponent_name: Name the engine gave to the opponent
        complete_map: Full board topology from the setup phase
        visible_map: Regions reported so far, with their latest owner and armies
        my_armies_per_turn: Armies this bot may place per turn
        opponent_armies_per_turn: Armies the opponent may place per turn
        owned_continents: Continent ID -> owner, for continents held outright
        opponent_moves: Opponent moves of the last turn only
        round: Number of map updates received
    """

    def __init__(self, names: Optional[NameTable] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize an empty state.

        Args:
            names: Optional id -> name table, only used in log messages
            logger: Logger to report to; defaults to this module's logger
        """
        self.names = names or NameTable()
        self.logger = logger or logging.getLogger(__name__)

        self.my_name = UNKNOWN_OWNER
        self.opponent_name = UNKNOWN_OWNER
        self.complete_map = Map()
        self.visible_map = Map()
        self.owned_continents: Dict[int, str] = {}
        self.opponent_moves: List[Move] = []
        self.round = 0

        self.my_armies_per_turn = GameDefaults.ARMIES_PER_TURN
        self.opponent_armies_per_turn = GameDefaults.ARMIES_PER_TURN

    # Production bookkeeping

    def armies_per_turn(self, player: str) -> int:
        """Armies the player may place per turn, base value plus continent rewards."""
        if player == self.my_name:
            return self.my_armies_per_turn
        if player == self.opponent_name:
            return self.opponent_armies_per_turn
        return 0

    def _add_production(self, player: str, armies: int) -> None:
        # Continents held by anyone else (neutral armies) are credited to nobody
        if player == self.my_name:
            self.my_armies_per_turn += armies
        elif player == self.opponent_name:
            self.opponent_armies_per_turn += armies

    # Map updates

    def update_map(self, region_id: int, owner: str, armies: int) -> Region:
        """
        Apply an owner and army report to the visible map, revealing the region
        first if this is the first report about it.

        Args:
            region_id: ID of the reported region
            owner: Player holding the region
            armies: Armies on the region

        Returns:
            The visible region

        Raises:
            UnknownIdError: If the region is not on the complete map
        """
        region = self.visible_map.regions.get(region_id)
        if region is None:
            region = self._reveal_region(region_id)

        region.owner = owner
        region.armies = armies

        self.logger.debug(f"Updated {self.names.region(region_id)} with owner {owner} and {armies} armies")
        return region

    def _reveal_region(self, region_id: int) -> Region:
        """Copy a region from the complete map, linking it to visible neighbors only."""
        template = self.complete_map.get_region(region_id)

        if self.visible_map.continent_for_id(template.continent_id) is None:
            continent = self.complete_map.continents[template.continent_id]
            self.visible_map.add_continent(continent.copy_static())

        region = Region(template.id, template.continent_id)
        self.visible_map.add_region(region)

        for neighbor_id in sorted(template.neighbors):
            if neighbor_id in self.visible_map.regions:
                self.visible_map.add_neighbor(region.id, neighbor_id)

        self.logger.info(f"Revealed {self.names.region(region_id)}")
        return region

    def check_rewards(self) -> None:
        """
        Compare continent owners on the visible map with the ones we remember
        and move continent rewards between players' production accordingly.

        Call once after a whole batch of update_map calls; owners seen in the
        middle of a batch are not stable.
        """
        for continent in self.visible_map.continent_list():
            owner = continent.owned_by(self.visible_map.regions)
            previous = self.owned_continents.get(continent.id)

            if owner == previous:
                continue

            if previous is not None:
                del self.owned_continents[continent.id]
                self._add_production(previous, -continent.reward)
                self.logger.info(f"{previous} lost {self.names.continent(continent.id)}")

            if owner != UNKNOWN_OWNER:
                self.owned_continents[continent.id] = owner
                self._add_production(owner, continent.reward)
                self.logger.info(f"{owner} gained {self.names.continent(continent.id)}")

        self.logger.debug(f"Checked rewards: {self.my_armies_per_turn} armies per turn for us, "
                          f"{self.opponent_armies_per_turn} for the opponent")

    # Moves

    def process_place_armies_move(self, move: PlaceArmiesMove) -> None:
        """Add the placed armies to the region, if it is visible."""
        region = self.visible_map.regions.get(move.region.id)
        if region is not None:
            region.armies += move.armies

        self.logger.debug(f"Processed placement of {move.armies} armies into "
                          f"{self.names.region(move.region.id)}")

    def process_attack_transfer_move(self, move: AttackTransferMove) -> None:
        """
        Move armies from source to target on the visible map. The outcome of a
        fight is not known here; the next map update overwrites both regions.
        """
        source = self.visible_map.regions.get(move.source.id)
        if source is not None:
            source.armies -= move.armies

        target = self.visible_map.regions.get(move.target.id)
        if target is not None:
            target.armies += move.armies

        self.logger.debug(f"Processed attack/transfer from {self.names.region(move.source.id)} "
                          f"to {self.names.region(move.target.id)} with {move.armies} armies")

    def process_move(self, move: Move) -> None:
        if isinstance(move, PlaceArmiesMove):
            self.process_place_armies_move(move)
        elif isinstance(move, AttackTransferMove):
            self.process_attack_transfer_move(move)
        else:
            raise TypeError(f"Unsupported move type: {type(move).__name__}")

    # Queries

    def owns_continent(self, continent_id: int, player: Optional[str] = None) -> bool:
        """Check if a player (this bot by default) holds the whole continent."""
        return self.owned_continents.get(continent_id) == (player or self.my_name)

    def my_regions(self) -> List[Region]:
        return self.visible_map.regions_owned_by(self.my_name)

    def opponent_regions(self) -> List[Region]:
        return self.visible_map.regions_owned_by(self.opponent_name)
