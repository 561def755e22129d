#!/usr/bin/env python3
from typing import List

from warlight.botlib import GameBot, setup_logging
from warlight.core import Region
from warlight.moves import AttackTransferMove, PlaceArmiesMove


class EasyBot(GameBot):
    def choose_starting_regions(self, candidates: List[Region]) -> List[Region]:
        """
        - Prefer regions on continents that pay a lot and are easy to defend
        """
        board = self.state.complete_map

        def score(region: Region) -> float:
            continent = board.continents[region.continent_id]
            return continent.reward / (1 + continent.priority())

        return sorted(candidates, key=score, reverse=True)[:6]

    def place_armies(self, allowance: int) -> List[PlaceArmiesMove]:
        """
        - Put everything on the region facing the most enemies
        """
        my_regions = self.state.my_regions()
        if not my_regions or allowance <= 0:
            return []

        board = self.state.visible_map
        frontline = max(my_regions, key=lambda r: (board.number_of_enemy_neighbors(r.id), r.armies))
        return [self.place(frontline, allowance)]

    def attack_or_transfer(self) -> List[AttackTransferMove]:
        """
        - Attack the weakest foreign neighbour when we have twice its armies
        """
        commands = []
        board = self.state.visible_map

        for region in self.state.my_regions():
            enemy_neighbors = board.enemy_neighbors(region.id)

            if not enemy_neighbors:
                continue

            weakest = min(enemy_neighbors, key=lambda r: r.armies)

            # One army always stays behind
            if region.armies - 1 > 2 * weakest.armies:
                commands.append(self.attack(region, weakest, region.armies - 1))

        return commands


def main():
    setup_logging()
    bot = EasyBot()
    bot.run()


if __name__ == "__main__":
    main()
