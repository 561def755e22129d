"""
Moves a player sends to the engine, and their protocol serialization.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from warlight.config import ProtocolConfig
from warlight.core import Region


@dataclass
class Move(ABC):
    """
    A single order issued by a player.

    Attributes:
        player: Name of the player issuing the move
    """
    player: str

    @abstractmethod
    def serialize(self) -> str:
        """Format the move the way the engine expects it."""


@dataclass
class PlaceArmiesMove(Move):
    """
    Puts new armies on a region at the start of a turn.

    Attributes:
        region: Region receiving the armies
        armies: Number of armies placed
    """
    region: Region
    armies: int

    def serialize(self) -> str:
        return f"{self.player} {ProtocolConfig.PLACE_ARMIES} {self.region.id} {self.armies}"


@dataclass
class AttackTransferMove(Move):
    """
    Moves armies from one region to an adjacent one. The engine attacks the
    target if someone else holds it and reinforces it otherwise.

    Attributes:
        source: Region the armies leave
        target: Region the armies move to
        armies: Number of armies moved
    """
    source: Region
    target: Region
    armies: int

    def serialize(self) -> str:
        return (f"{self.player} {ProtocolConfig.ATTACK_TRANSFER} "
                f"{self.source.id} {self.target.id} {self.armies}")


def serialize_moves(moves: Sequence[Move]) -> str:
    """Join moves into one response line, or NO_MOVES when there are none."""
    if not moves:
        return ProtocolConfig.NO_MOVES
    return ProtocolConfig.MOVE_SEPARATOR.join(move.serialize() for move in moves)
