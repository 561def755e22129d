"""
Bot Library for the Warlight AI Challenge

This library provides the interface for creating bots that play Warlight
against the challenge's game engine. All the line protocol handling and game
state bookkeeping is done by the framework, allowing bot developers to focus
on strategy.

Usage:
1. Inherit from GameBot
2. Implement choose_starting_regions(), place_armies() and attack_or_transfer()
3. Call bot.run() to start the bot

Example:
    class MyBot(GameBot):
        def choose_starting_regions(self, candidates):
            return candidates[:6]

        def place_armies(self, allowance):
            region = self.state.my_regions()[0]
            return [self.place(region, allowance)]

        def attack_or_transfer(self):
            return []

    bot = MyBot()
    bot.run()
"""

import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, TextIO

from warlight.config import LogConfig
from warlight.core import Region
from warlight.moves import AttackTransferMove, Move, PlaceArmiesMove
from warlight.names import NameTable
from warlight.protocol import Parser
from warlight.state import State

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Send log records to stderr; stdout is reserved for engine responses.

    Args:
        level: Level name; defaults to the WARLIGHT_LOG_LEVEL environment variable
               or LogConfig.LEVEL
    """
    level = level or os.environ.get(LogConfig.LEVEL_ENV_VAR, LogConfig.LEVEL)
    logging.basicConfig(level=level.upper(), format=LogConfig.FORMAT, stream=sys.stderr)


class GameBot(ABC):
    """
    Abstract base class for Warlight bots. Holds the game state, which the
    framework keeps up to date, and provides helpers to build moves.
    """

    def __init__(self, state: Optional[State] = None, names: Optional[NameTable] = None):
        """
        Initialize the bot.

        Args:
            state: Game state to play on; a fresh one is created if None
            names: Optional id -> name table passed to a freshly created state
        """
        self.state = state if state is not None else State(names=names)
        logger.info(f"Bot {self.__class__.__name__} initialized")

    @property
    def name(self) -> str:
        """Name the engine assigned to this bot."""
        return self.state.my_name

    @property
    def armies_per_turn(self) -> int:
        return self.state.my_armies_per_turn

    @property
    def moves_last_turn(self) -> List[Move]:
        """Opponent moves of the last turn. Replaced every turn."""
        return self.state.opponent_moves

    @abstractmethod
    def choose_starting_regions(self, candidates: List[Region]) -> List[Region]:
        """
        Pick the starting regions.

        Args:
            candidates: Regions offered by the engine

        Returns:
            Exactly 6 regions taken from candidates, most preferred first
        """
        pass

    @abstractmethod
    def place_armies(self, allowance: int) -> List[PlaceArmiesMove]:
        """
        Place this turn's new armies. Armies that are not placed are lost.

        Args:
            allowance: Number of armies available this turn

        Returns:
            List of placements
        """
        pass

    @abstractmethod
    def attack_or_transfer(self) -> List[AttackTransferMove]:
        """
        Main bot logic for the second half of a turn.

        Returns:
            List of attacks and transfers to execute
        """
        pass

    # High-level convenience methods

    def place(self, region: Region, armies: int) -> PlaceArmiesMove:
        """Place armies on a region."""
        return PlaceArmiesMove(self.name, region, armies)

    def attack(self, source: Region, target: Region, armies: int) -> AttackTransferMove:
        """Attack a region held by someone else."""
        return AttackTransferMove(self.name, source, target, armies)

    def transfer(self, source: Region, target: Region, armies: int) -> AttackTransferMove:
        """Move armies between two of my regions."""
        return AttackTransferMove(self.name, source, target, armies)

    def owns_continent(self, continent_id: int) -> bool:
        return self.state.owns_continent(continent_id)

    def run(self, input_stream: Optional[Iterable[str]] = None,
            output_stream: Optional[TextIO] = None) -> None:
        """
        Run the bot against the engine on stdin/stdout (blocking call).

        Args:
            input_stream: Line source, stdin by default
            output_stream: Response sink, stdout by default
        """
        Parser(self, self.state).run(input_stream, output_stream)
        logger.info(f"Bot {self.__class__.__name__} terminated")
