"""
Line protocol between the game engine and a bot.

The Parser reads one command per line, updates the State, asks the bot for
moves when the engine says "go", and answers with exactly one line for every
command that expects a response.
"""

import io
import logging
import sys
from typing import TYPE_CHECKING, Iterable, List, Optional, TextIO

from warlight.config import GameDefaults, ProtocolConfig
from warlight.core import Continent, Region
from warlight.errors import ProtocolError, UnknownIdError
from warlight.moves import AttackTransferMove, Move, PlaceArmiesMove, serialize_moves
from warlight.state import State

if TYPE_CHECKING:
    from warlight.botlib import GameBot


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ProtocolError(f"Expected an integer {what}, got '{token}'") from None


class Parser:
    """
    Drives a bot from the engine's command stream.
    """

    def __init__(self, bot: "GameBot", state: Optional[State] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the parser.

        Args:
            bot: Strategy answering the engine's requests
            state: State to keep up to date; defaults to the bot's own state
            logger: Logger to report to; defaults to this module's logger
        """
        self.bot = bot
        self.state = state if state is not None else bot.state
        self.logger = logger or logging.getLogger(__name__)

    # Read loop

    def run(self, input_stream: Optional[Iterable[str]] = None,
            output_stream: Optional[TextIO] = None) -> None:
        """
        Process commands until the input ends (blocking call).

        Args:
            input_stream: Line source, stdin by default
            output_stream: Response sink, stdout by default
        """
        input_stream = sys.stdin if input_stream is None else input_stream
        output_stream = sys.stdout if output_stream is None else output_stream

        self._configure_output(output_stream)
        self.logger.info("Starting read loop")

        for raw_line in input_stream:
            line = raw_line.strip()
            if not line:
                continue

            try:
                response = self.handle_line(line)
            except ProtocolError as e:
                self.logger.error(f"{e} (line: '{line}')")
                continue
            except Exception:
                self.logger.exception(f"Error while processing '{line}'")
                continue

            if response is not None:
                output_stream.write(response + "\n")
                output_stream.flush()

        self.logger.info("Input closed, stopping read loop")

    def _configure_output(self, output_stream: TextIO) -> None:
        """Ask for line buffering so every response reaches the engine at once."""
        reconfigure = getattr(output_stream, "reconfigure", None)
        if reconfigure is None:
            self.logger.debug("Output stream cannot be reconfigured, flushing manually")
            return

        try:
            reconfigure(line_buffering=True)
        except (ValueError, OSError, io.UnsupportedOperation) as e:
            self.logger.error(f"Failed to configure output stream, using defaults: {e}")

    def handle_line(self, line: str) -> Optional[str]:
        """
        Process a single command line.

        Args:
            line: Command line without the trailing newline

        Returns:
            The response line, or None for commands without a response

        Raises:
            ProtocolError: If the command is unknown or has the wrong argument count
        """
        parts = line.split()
        if not parts:
            return None

        command = parts[0]

        if command == ProtocolConfig.SETTINGS:
            self._settings(parts)
        elif command == ProtocolConfig.SETUP_MAP:
            self._setup_map(parts)
        elif command == ProtocolConfig.PICK_STARTING_REGIONS:
            return self._pick_starting_regions(parts)
        elif command == ProtocolConfig.UPDATE_MAP:
            self._update_map(parts)
        elif command == ProtocolConfig.OPPONENT_MOVES:
            self._opponent_moves(line)
        elif command == ProtocolConfig.GO:
            return self._go(parts)
        else:
            raise ProtocolError(f"Unknown command received from game engine: {command}")

        return None

    # Setup phase

    def _settings(self, parts: List[str]) -> None:
        if len(parts) != 3:
            raise ProtocolError(f"Wrong argument count with command settings: expected 3, was {len(parts)}")

        setting, value = parts[1], parts[2]

        if setting == ProtocolConfig.YOUR_BOT:
            self.state.my_name = value
            self.logger.info(f"Playing as {value}")
        elif setting == ProtocolConfig.OPPONENT_BOT:
            self.state.opponent_name = value
            self.logger.info(f"Playing against {value}")
        elif setting == ProtocolConfig.STARTING_ARMIES:
            self.state.my_armies_per_turn = _to_int(value, "army count")
        else:
            raise ProtocolError(f"Unknown command received from game engine: settings {setting}")

    def _setup_map(self, parts: List[str]) -> None:
        if len(parts) < 4 or len(parts) % 2 != 0:
            raise ProtocolError(
                f"Wrong argument count with command setup_map: expected pairs after the sub-command, "
                f"was {len(parts)}")

        kind = parts[1]
        pairs = list(zip(parts[2::2], parts[3::2]))

        if kind == ProtocolConfig.SUPER_REGIONS:
            for continent_id, reward in pairs:
                self._entry(self._add_continent, continent_id, reward)
        elif kind == ProtocolConfig.REGIONS:
            for region_id, continent_id in pairs:
                self._entry(self._add_region, region_id, continent_id)
        elif kind == ProtocolConfig.NEIGHBORS:
            for region_id, neighbor_ids in pairs:
                for neighbor_id in neighbor_ids.split(","):
                    if neighbor_id:
                        self._entry(self._add_neighbor, region_id, neighbor_id)
        else:
            raise ProtocolError(f"Unknown command received from game engine: setup_map {kind}")

        self.logger.debug(f"Set up {kind}")

    def _entry(self, handler, *tokens: str) -> bool:
        """Run one entry of a multi-entry command, skipping it on a lookup error."""
        try:
            handler(*tokens)
        except (UnknownIdError, ProtocolError) as e:
            self.logger.warning(f"Skipping entry {' '.join(tokens)}: {e}")
            return False
        return True

    def _add_continent(self, continent_id: str, reward: str) -> None:
        continent = Continent(_to_int(continent_id, "continent id"), _to_int(reward, "reward"))
        self.state.complete_map.add_continent(continent)

    def _add_region(self, region_id: str, continent_id: str) -> None:
        region = Region(_to_int(region_id, "region id"), _to_int(continent_id, "continent id"))
        self.state.complete_map.add_region(region)

    def _add_neighbor(self, region_id: str, neighbor_id: str) -> None:
        self.state.complete_map.add_neighbor(_to_int(region_id, "region id"),
                                             _to_int(neighbor_id, "region id"))

    def _pick_starting_regions(self, parts: List[str]) -> str:
        if len(parts) < 2:
            raise ProtocolError(
                f"Wrong argument count with command pick_starting_regions: expected at least 2, was {len(parts)}")

        candidates: List[Region] = []
        for token in parts[2:]:
            try:
                candidates.append(self.state.complete_map.get_region(_to_int(token, "region id")))
            except (UnknownIdError, ProtocolError) as e:
                self.logger.error(f"Failed to look up starting region {token}: {e}")

        picks = GameDefaults.STARTING_REGION_PICKS
        try:
            chosen = [str(region.id) for region in self.bot.choose_starting_regions(list(candidates))]
        except Exception:
            self.logger.exception("Bot failed to choose starting regions, using the first candidates")
            chosen = [str(region.id) for region in candidates[:picks]]

        if len(chosen) < picks:
            self.logger.error(f"Not enough starting regions picked: {len(chosen)} of {picks}")
        elif len(chosen) > picks:
            self.logger.error(f"Too many starting regions picked: {len(chosen)} of {picks}, sending the first {picks}")

        return " ".join(chosen[:picks])

    # Turn loop

    def _update_map(self, parts: List[str]) -> None:
        if (len(parts) - 1) % 3 != 0:
            raise ProtocolError(
                f"Wrong argument count with command update_map: expected triples, was {len(parts) - 1} arguments")

        for i in range(1, len(parts), 3):
            self._entry(self._update_region, parts[i], parts[i + 1], parts[i + 2])

        self.state.check_rewards()
        self.state.round += 1
        self.logger.debug(f"Updated the map for round {self.state.round}")

    def _update_region(self, region_id: str, owner: str, armies: str) -> None:
        self.state.update_map(_to_int(region_id, "region id"), owner, _to_int(armies, "army count"))

    def _opponent_moves(self, line: str) -> None:
        payload = line[len(ProtocolConfig.OPPONENT_MOVES):].strip()

        moves: List[Move] = []
        for entry in payload.split(","):
            entry = entry.strip()
            if not entry:
                continue

            try:
                move = self._parse_move(entry.split())
            except (UnknownIdError, ProtocolError) as e:
                self.logger.warning(f"Skipping opponent move '{entry}': {e}")
                continue

            # Applied right away so later moves in the batch see the new army counts
            self.state.process_move(move)
            moves.append(move)

        self.state.opponent_moves = moves
        self.logger.debug(f"Processed {len(moves)} opponent moves")

    def _parse_move(self, parts: List[str]) -> Move:
        """Parse a single move, resolving region ids against the complete map."""
        regions = self.state.complete_map

        if len(parts) == 4 and parts[1] == ProtocolConfig.PLACE_ARMIES:
            region = regions.get_region(_to_int(parts[2], "region id"))
            return PlaceArmiesMove(parts[0], region, _to_int(parts[3], "army count"))

        if len(parts) == 5 and parts[1] == ProtocolConfig.ATTACK_TRANSFER:
            source = regions.get_region(_to_int(parts[2], "region id"))
            target = regions.get_region(_to_int(parts[3], "region id"))
            return AttackTransferMove(parts[0], source, target, _to_int(parts[4], "army count"))

        raise ProtocolError(f"Malformed move: {' '.join(parts)}")

    def _go(self, parts: List[str]) -> str:
        if len(parts) not in (2, 3):
            raise ProtocolError(f"Wrong argument count with command go: expected 3, was {len(parts)}")

        action = parts[1]

        if action == ProtocolConfig.PLACE_ARMIES:
            allowance = self.state.my_armies_per_turn
            return self._respond(lambda: self.bot.place_armies(allowance), action)
        if action == ProtocolConfig.ATTACK_TRANSFER:
            return self._respond(self.bot.attack_or_transfer, action)

        raise ProtocolError(f"Unknown command received from game engine: go {action}")

    def _respond(self, ask_bot, action: str) -> str:
        """Ask the bot for moves, serialize them and apply them to the state."""
        try:
            moves = list(ask_bot() or [])
            # Serialized first so a bad entry leaves the state untouched
            response = serialize_moves(moves)
            for move in moves:
                self.state.process_move(move)
        except Exception:
            # The engine still waits for a line
            self.logger.exception(f"Bot failed to answer go {action}")
            return ProtocolConfig.NO_MOVES

        self.logger.info(f"Sending {len(moves)} moves for {action}")
        return response
