"""Tests for wall.py - the tile supply used by the hand generator"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import random

import pytest

from taiwan_mahjong.core.meld import is_sequence
from taiwan_mahjong.core.wall import TileSupply


class TestTileSupply:
    def test_full_supply(self):
        supply = TileSupply()
        assert supply.remaining == 136
        assert all(supply.available(i) == 4 for i in range(34))

    def test_excluding(self):
        supply = TileSupply.excluding([0, 0, 27])
        assert supply.remaining == 133
        assert supply.available(0) == 2
        assert supply.available(27) == 3

    def test_take_exhausted(self):
        supply = TileSupply()
        supply.take([5] * 4)
        with pytest.raises(ValueError):
            supply.take([5])

    def test_pick_pair(self):
        supply = TileSupply(random.Random(1))
        pair = supply.pick_pair()
        assert len(pair) == 2 and pair[0] == pair[1]
        assert supply.remaining == 134

    def test_pick_triplet(self):
        supply = TileSupply(random.Random(2))
        triplet = supply.pick_triplet()
        assert len(set(triplet)) == 1 and len(triplet) == 3
        assert supply.available(triplet[0]) == 1

    def test_pick_sequence(self):
        supply = TileSupply(random.Random(3))
        for _ in range(10):
            assert is_sequence(supply.pick_sequence())

    def test_pick_meld(self):
        supply = TileSupply(random.Random(4))
        for _ in range(5):
            meld = supply.pick_meld()
            assert len(meld) == 3
            assert is_sequence(meld) or len(set(meld)) == 1
        assert supply.remaining == 136 - 15

    def test_exhausted_supply(self):
        supply = TileSupply()
        supply.counts = [1] * 34
        assert supply.pick_pair() is None
        assert supply.pick_triplet() is None
        assert supply.pick_sequence() is not None

    def test_empty_supply(self):
        supply = TileSupply()
        supply.counts = [0] * 34
        assert supply.pick_meld() is None
