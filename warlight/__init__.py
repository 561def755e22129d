"""Framework for Warlight AI Challenge bots speaking the engine's line protocol."""

import logging

from warlight.botlib import GameBot, setup_logging
from warlight.core import Continent, Map, Region, UNKNOWN_OWNER
from warlight.errors import ProtocolError, UnknownIdError
from warlight.moves import AttackTransferMove, Move, PlaceArmiesMove, serialize_moves
from warlight.names import CLASSIC_NAMES, NameTable
from warlight.protocol import Parser
from warlight.state import State

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AttackTransferMove",
    "CLASSIC_NAMES",
    "Continent",
    "GameBot",
    "Map",
    "Move",
    "NameTable",
    "Parser",
    "PlaceArmiesMove",
    "ProtocolError",
    "Region",
    "State",
    "UNKNOWN_OWNER",
    "UnknownIdError",
    "serialize_moves",
    "setup_logging",
]
