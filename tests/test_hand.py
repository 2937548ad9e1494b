"""Tests for hand.py and table.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from taiwan_mahjong.core.hand import Hand, WinType
from taiwan_mahjong.core.meld import KongType, Meld
from taiwan_mahjong.core.table import SeatRelation, TableContext
from taiwan_mahjong.core.tile import Wind, tiles_from_string


def make_hand(in_hand, winning, revealed=(), win_type=WinType.SELF_DRAW, flowers=()):
    return Hand.build(tiles_from_string(in_hand), revealed,
                      tiles_from_string(winning)[0], win_type, flowers)


class TestWinType:
    def test_self_draw(self):
        assert WinType.SELF_DRAW.is_self_draw
        assert WinType.KONG_DRAW.is_self_draw
        assert not WinType.FROM_NEXT.is_self_draw

    def test_discarder(self):
        assert WinType.FROM_OPP.discarder == SeatRelation.OPP
        assert WinType.FROM_PREV.discarder == SeatRelation.PREV
        assert WinType.ROBBING_KONG_NEXT.discarder is None
        assert WinType.SELF_DRAW.discarder is None

    def test_robbing_kong(self):
        assert WinType.ROBBING_KONG_OPP.is_robbing_kong
        assert not WinType.FROM_OPP.is_robbing_kong


class TestHandCounts:
    def test_concealed_hand(self):
        hand = make_hand("123m456m789m123p456p5s", "5s")
        assert sum(hand.concealed_34) == 16
        assert sum(hand.closed_with_winning_34) == 17
        assert hand.closed_with_winning_34[22] == 2
        assert hand.has_only_concealed_kongs
        hand.validate()

    def test_kong_counts(self):
        kong = Meld.kong(27, KongType.REVEALED)
        hand = make_hand("123m456m789m123p5s", "5s", revealed=[kong])
        assert sum(hand.all_tiles_34) == 18
        assert sum(hand.structural_34) == 17
        assert hand.all_tiles_34[27] == 4
        assert hand.structural_34[27] == 3
        assert hand.kong_count == 1
        assert not hand.has_only_concealed_kongs
        hand.validate()

    def test_concealed_kong_keeps_hand_closed(self):
        kong = Meld.kong(27, KongType.CONCEALED)
        hand = make_hand("123m456m789m123p5s", "5s", revealed=[kong])
        assert hand.has_only_concealed_kongs

    def test_build_sorts(self):
        hand = make_hand("321m", "1m", flowers=["6f", "2f"])
        assert hand.in_hand == (0, 1, 2)
        assert hand.flower_codes == ["2f", "6f"]

    def test_to_dict(self):
        hand = make_hand("123m456m789m123p5s", "5s",
                         revealed=[Meld.kong(27, KongType.CONCEALED)],
                         win_type=WinType.FROM_PREV, flowers=["1f"])
        data = hand.to_dict()
        assert data["winning_tile"] == "5s"
        assert data["win_type"] == "from_prev"
        assert data["flowers"] == ["1f"]
        assert data["revealed"][0]["kong_type"] == "concealed"
        assert data["revealed"][0]["tiles"] == ["1z"] * 4


class TestValidate:
    def test_wrong_size(self):
        hand = make_hand("123m456m789m123p45p", "5s")
        with pytest.raises(ValueError, match="structural"):
            hand.validate()

    def test_too_many_copies(self):
        hand = make_hand("11m456m789m123p456p", "5s", revealed=[Meld.triplet(0)])
        with pytest.raises(ValueError, match="copies"):
            hand.validate()

    def test_not_a_winning_shape(self):
        hand = make_hand("124m456m789m123p456p5s", "5s")
        with pytest.raises(ValueError, match="melds"):
            hand.validate()

    def test_out_of_range(self):
        hand = Hand.build(tiles_from_string("123m456m789m123p456p5s"), (), 40)
        with pytest.raises(ValueError, match="range"):
            hand.validate()

    def test_duplicate_flowers(self):
        hand = make_hand("123m456m789m123p456p5s", "5s", flowers=["1f", "1f"])
        with pytest.raises(ValueError, match="duplicate"):
            hand.validate()


class TestTableContext:
    def test_defaults(self):
        ctx = TableContext()
        assert ctx.is_dealer
        assert ctx.seat_number == 1
        assert ctx.seat_wind == Wind.EAST

    def test_seat_numbers(self):
        assert TableContext(seat_marker=SeatRelation.PREV).seat_number == 2
        assert TableContext(seat_marker=SeatRelation.OPP).seat_number == 3
        assert TableContext(seat_marker=SeatRelation.NEXT).seat_number == 4
        assert TableContext(seat_marker=SeatRelation.OPP).seat_wind == Wind.WEST

    def test_not_dealer(self):
        assert not TableContext(dealer=SeatRelation.OPP).is_dealer

    def test_to_dict(self):
        ctx = TableContext(SeatRelation.NEXT, 2, SeatRelation.OPP, Wind.SOUTH)
        assert ctx.to_dict() == {
            "dealer": "next",
            "dealer_streak": 2,
            "seat_marker": "opp",
            "prevailing_wind": "south",
        }
