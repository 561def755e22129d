from warlight.core import Region
from warlight.moves import AttackTransferMove, PlaceArmiesMove, serialize_moves


class TestSerialization:

    def test_place_armies(self):
        move = PlaceArmiesMove("p1", Region(7, 1), 3)
        assert move.serialize() == "p1 place_armies 7 3"

    def test_attack_transfer(self):
        move = AttackTransferMove("p1", Region(7, 1), Region(9, 2), 4)
        assert move.serialize() == "p1 attack/transfer 7 9 4"

    def test_no_moves(self):
        assert serialize_moves([]) == "No moves"

    def test_moves_are_comma_space_joined(self):
        source, target = Region(1, 1), Region(2, 1)
        moves = [PlaceArmiesMove("p1", source, 5),
                 AttackTransferMove("p1", source, target, 6)]
        assert serialize_moves(moves) == "p1 place_armies 1 5, p1 attack/transfer 1 2 6"


class TestPlainRecords:

    def test_zero_armies_are_kept(self):
        assert PlaceArmiesMove("p1", Region(1, 1), 0).serialize() == "p1 place_armies 1 0"

    def test_same_source_and_target_are_kept(self):
        move = AttackTransferMove("p1", Region(1, 1), Region(1, 1), 3)
        assert move.serialize() == "p1 attack/transfer 1 1 3"
