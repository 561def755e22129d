import io
import logging

import pytest

from warlight.bot.easy import EasyBot
from warlight.botlib import GameBot, setup_logging
from warlight.names import CLASSIC_NAMES, NameTable
from warlight.protocol import Parser
from warlight.state import State


class TestGameBot:

    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            GameBot()

    def test_move_helpers_use_engine_name(self, setup_parser, bot):
        regions = setup_parser.state.complete_map.regions
        assert bot.name == "player1"
        assert bot.place(regions[1], 4).serialize() == "player1 place_armies 1 4"
        assert bot.attack(regions[1], regions[3], 2).serialize() == "player1 attack/transfer 1 3 2"
        assert bot.transfer(regions[1], regions[2], 1).serialize() == "player1 attack/transfer 1 2 1"

    def test_state_views(self, setup_parser, bot):
        setup_parser.handle_line("update_map 1 player1 2 2 player1 2")
        setup_parser.handle_line("opponent_moves player2 place_armies 3 2")
        assert bot.armies_per_turn == 10
        assert bot.owns_continent(1)
        assert [m.serialize() for m in bot.moves_last_turn] == ["player2 place_armies 3 2"]

    def test_names_are_passed_to_new_state(self):
        bot = EasyBot(names=CLASSIC_NAMES)
        assert bot.state.names.region(15) == "Great Britain"


class TestEasyBot:

    @pytest.fixture
    def easy(self, setup_lines):
        bot = EasyBot(State())
        bot.parser = Parser(bot)
        for line in setup_lines:
            bot.parser.handle_line(line)
        return bot

    def test_prefers_rich_continents(self, easy):
        # Both continents have the same priority, continent 1 pays more
        response = easy.parser.handle_line("pick_starting_regions 10000 3 4 1 2")
        assert response.split()[:2] == ["1", "2"]

    def test_places_everything_on_the_front(self, easy):
        easy.parser.handle_line("update_map 1 player1 2 2 player1 2 3 player2 2")
        response = easy.parser.handle_line("go place_armies 2000")
        # Region 1 borders the opponent's region 3
        assert response == "player1 place_armies 1 10"
        assert easy.state.visible_map.regions[1].armies == 12

    def test_attacks_weak_neighbors(self, easy):
        easy.parser.handle_line("update_map 1 player1 8 3 player2 2")
        response = easy.parser.handle_line("go attack/transfer 2000")
        assert response == "player1 attack/transfer 1 3 7"

    def test_holds_back_against_strong_neighbors(self, easy):
        easy.parser.handle_line("update_map 1 player1 4 3 player2 6")
        assert easy.parser.handle_line("go attack/transfer 2000") == "No moves"

    def test_nothing_to_place_without_regions(self, easy):
        assert easy.parser.handle_line("go place_armies 2000") == "No moves"

    def test_run_over_streams(self, setup_lines):
        lines = setup_lines + [
            "pick_starting_regions 10000 1 2 3 4",
            "update_map 1 player1 2",
            "go place_armies 2000",
        ]
        output = io.StringIO()
        EasyBot().run(io.StringIO("\n".join(lines)), output)
        assert output.getvalue().splitlines() == ["1 2 3 4", "player1 place_armies 1 5"]


class TestNames:

    def test_fallback_labels(self):
        names = NameTable()
        assert names.region(3) == "region 3"
        assert names.continent(2) == "continent 2"

    def test_classic_table(self):
        assert CLASSIC_NAMES.continent(6) == "Australia"
        assert CLASSIC_NAMES.region_id("siam") == 38
        assert CLASSIC_NAMES.region_id("Atlantis") is None


def test_setup_logging_uses_environment(monkeypatch):
    calls = []
    monkeypatch.setenv("WARLIGHT_LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging()

    assert calls[0]["level"] == "DEBUG"
    assert calls[0]["format"] == '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
