import pytest

from warlight.botlib import GameBot
from warlight.protocol import Parser
from warlight.state import State


SETUP_LINES = [
    "settings your_bot player1",
    "settings opponent_bot player2",
    "setup_map super_regions 1 5 2 3",
    "setup_map regions 1 1 2 1 3 2 4 2",
    "setup_map neighbors 1 2,3 2 4 3 4",
]


class ScriptedBot(GameBot):
    """Bot returning whatever the test put into its queues."""

    def __init__(self, state=None):
        super().__init__(state)
        self.starting_regions = None
        self.placements = []
        self.attacks = []
        self.allowances = []
        self.candidates = None

    def choose_starting_regions(self, candidates):
        self.candidates = candidates
        if self.starting_regions is not None:
            return self.starting_regions
        return candidates[:6]

    def place_armies(self, allowance):
        self.allowances.append(allowance)
        return self.placements

    def attack_or_transfer(self):
        return self.attacks


@pytest.fixture
def bot():
    return ScriptedBot(State())


@pytest.fixture
def parser(bot):
    return Parser(bot)


@pytest.fixture
def setup_parser(parser):
    """
    Parser after setup of a four region board:

        continent 1 (reward 5): regions 1, 2
        continent 2 (reward 3): regions 3, 4
        edges: 1-2, 1-3, 2-4, 3-4
    """
    for line in SETUP_LINES:
        assert parser.handle_line(line) is None
    return parser


@pytest.fixture
def state(setup_parser):
    return setup_parser.state


@pytest.fixture
def setup_lines():
    return list(SETUP_LINES)
