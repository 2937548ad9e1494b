"""Tests for scoring.py - fan resolution and the dealer / non-dealer variants"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import random

from taiwan_mahjong.core.hand import Hand, WinType
from taiwan_mahjong.core.meld import KongType, Meld
from taiwan_mahjong.core.table import SeatRelation, TableContext
from taiwan_mahjong.core.tile import Wind, tiles_from_string
from taiwan_mahjong.engine.generator import synthesize_context, synthesize_hand
from taiwan_mahjong.rules.fan import (
    ALL_CHECKS, FanId, check_big_three_dragons, check_flat_win,
    check_flower_season, check_prevailing_wind, check_seat_wind,
    check_white_dragon,
)
from taiwan_mahjong.rules.scoring import (
    ScoreSheet, evaluate, needs_split_scoring, resolve_fans, score_both,
    score_hand, score_hand_non_dealer,
)


def make_hand(in_hand, winning, revealed=(), win_type=WinType.SELF_DRAW, flowers=()):
    return Hand.build(tiles_from_string(in_hand), revealed,
                      tiles_from_string(winning)[0], win_type, flowers)


def fan_ids(fans):
    return [f.fan_id for f in fans]


FLAT = "23m456m789m123p456p55s"
NON_DEALER = TableContext(dealer=SeatRelation.OPP)
DRAGONS = {FanId.WHITE_DRAGON, FanId.GREEN_DRAGON, FanId.RED_DRAGON}


class TestScenarios:
    def test_prevailing_wind_and_concealed(self):
        hand = make_hand("123m234m456m78m東東東55p", "9m", win_type=WinType.FROM_NEXT)
        ctx = TableContext(dealer=SeatRelation.OPP, dealer_streak=0,
                           seat_marker=SeatRelation.PREV, prevailing_wind=Wind.EAST)
        hand.validate()
        fans = score_hand(hand, ctx)
        assert fan_ids(fans) == [FanId.FULLY_CONCEALED, FanId.PREVAILING_WIND]
        assert sum(f.points for f in fans) == 2
        assert FanId.DEALER not in fan_ids(fans)

    def test_big_four_winds_excludes_wind_fans(self):
        hand = make_hand("西西西北北北123m5p", "5p",
                         revealed=[Meld.triplet(27), Meld.triplet(28)])
        ctx = TableContext()
        hand.validate()
        assert check_seat_wind(hand, ctx).achieved
        assert check_prevailing_wind(hand, ctx).achieved

        ids = fan_ids(score_hand(hand, ctx))
        assert FanId.BIG_FOUR_WINDS in ids
        assert FanId.SEAT_WIND not in ids
        assert FanId.PREVAILING_WIND not in ids
        big = [f for f in score_hand(hand, ctx) if f.fan_id == FanId.BIG_FOUR_WINDS][0]
        assert big.points == 16

    def test_complete_seasons_excludes_seat_season(self):
        hand = make_hand(FLAT, "1m", win_type=WinType.FROM_NEXT,
                         flowers=["1f", "2f", "3f", "4f"])
        ctx = TableContext()
        assert check_flower_season(hand, ctx).achieved

        ids = fan_ids(score_hand(hand, ctx))
        assert FanId.COMPLETE_SEASONS in ids
        assert FanId.FLOWER_SEASON not in ids
        assert FanId.FLOWER_PLANT not in ids

    def test_big_three_dragons_excludes_dragon_fans(self):
        hand = make_hand("白白白發發發中中123m456p55s", "中", win_type=WinType.FROM_NEXT)
        ctx = TableContext()
        assert check_white_dragon(hand, ctx).achieved

        ids = fan_ids(score_hand(hand, ctx))
        assert FanId.BIG_THREE_DRAGONS in ids
        assert not DRAGONS & set(ids)

    def test_small_three_dragons_excludes_dragon_fans(self):
        hand = make_hand("白白白發發發中123m456m789m", "中", win_type=WinType.FROM_NEXT)
        ids = fan_ids(score_hand(hand, NON_DEALER))
        assert FanId.SMALL_THREE_DRAGONS in ids
        assert not DRAGONS & set(ids)

    def test_three_concealed_excludes_flat_win(self):
        hand = make_hand("111222333m456p78s99p", "9s", win_type=WinType.FROM_PREV)
        assert check_flat_win(hand, NON_DEALER).achieved

        ids = fan_ids(score_hand(hand, NON_DEALER))
        assert FanId.THREE_CONCEALED in ids
        assert FanId.FLAT_WIN not in ids

    def test_eight_flowers(self):
        hand = make_hand(FLAT, "1m", win_type=WinType.FROM_NEXT,
                         flowers=[f"{n}f" for n in range(1, 9)])
        ids = fan_ids(score_hand(hand, NON_DEALER))
        assert FanId.EIGHT_FLOWERS in ids
        assert FanId.COMPLETE_SEASONS in ids
        assert FanId.COMPLETE_PLANTS in ids
        assert FanId.FLOWER_SEASON not in ids
        assert FanId.FLOWER_PLANT not in ids

    def test_flat_win_hand(self):
        hand = make_hand(FLAT, "1m", win_type=WinType.FROM_NEXT)
        fans = score_hand(hand, NON_DEALER)
        assert fan_ids(fans) == [FanId.FULLY_CONCEALED, FanId.FLAT_WIN]
        assert ScoreSheet(tuple(fans), True).total == 3


class TestResolution:
    def test_custom_check_list(self):
        hand = make_hand("白白白發發發中中123m456p55s", "中", win_type=WinType.FROM_NEXT)
        ctx = TableContext()
        assert fan_ids(resolve_fans(hand, ctx, [check_white_dragon])) == [FanId.WHITE_DRAGON]
        resolved = resolve_fans(hand, ctx, [check_white_dragon, check_big_three_dragons])
        assert fan_ids(resolved) == [FanId.BIG_THREE_DRAGONS]

    def test_exclusion_regardless_of_order(self):
        hand = make_hand("白白白發發發中中123m456p55s", "中", win_type=WinType.FROM_NEXT)
        resolved = resolve_fans(hand, TableContext(),
                                [check_big_three_dragons, check_white_dragon])
        assert fan_ids(resolved) == [FanId.BIG_THREE_DRAGONS]

    def test_catalog_order(self):
        order = {check(make_hand(FLAT, "1m"), TableContext()).fan_id: i
                 for i, check in enumerate(ALL_CHECKS)}
        for seed in range(40):
            rng = random.Random(seed)
            ctx = synthesize_context(rng)
            hand = synthesize_hand(rng=rng)
            positions = [order[f.fan_id] for f in score_hand(hand, ctx)]
            assert positions == sorted(positions)

    def test_idempotent(self):
        for seed in range(40):
            rng = random.Random(seed)
            ctx = synthesize_context(rng)
            hand = synthesize_hand(rng=rng)
            assert score_hand(hand, ctx) == score_hand(hand, ctx)
            assert evaluate(hand, ctx) == evaluate(hand, ctx)

    def test_resolved_fans_are_achieved(self):
        for seed in range(40):
            rng = random.Random(seed)
            ctx = synthesize_context(rng)
            hand = synthesize_hand(rng=rng)
            fans = score_hand(hand, ctx)
            assert all(f.achieved for f in fans)
            ids = set(fan_ids(fans))
            if FanId.BIG_THREE_DRAGONS in ids or FanId.SMALL_THREE_DRAGONS in ids:
                assert not DRAGONS & ids


class TestVariants:
    def test_non_dealer_variant_drops_dealer_fans(self):
        hand = make_hand(FLAT, "1m", win_type=WinType.FROM_NEXT)
        ctx = TableContext(dealer_streak=2)
        dealer_ids = fan_ids(score_hand(hand, ctx))
        assert dealer_ids[:3] == [FanId.DEALER, FanId.CONTINUING_DEALER, FanId.PULL_DEALER]
        assert fan_ids(score_hand_non_dealer(hand, ctx)) == dealer_ids[3:]

    def test_split_scoring(self):
        hand = make_hand(FLAT, "1m", win_type=WinType.SELF_DRAW)
        assert needs_split_scoring(hand, NON_DEALER)
        assert not needs_split_scoring(hand, TableContext())

        sheets = evaluate(hand, NON_DEALER)
        assert len(sheets) == 2
        dealer_sheet, others_sheet = sheets
        assert dealer_sheet.is_dealer_variant and not others_sheet.is_dealer_variant
        assert FanId.DEALER in dealer_sheet.fan_ids
        assert FanId.DEALER not in others_sheet.fan_ids
        # 門清 + 不求人 + 自摸, plus 莊家 for the dealer's share
        assert dealer_sheet.total == 4
        assert others_sheet.total == 3

    def test_kong_draw_splits(self):
        hand = make_hand("23m456m789m123p55s", "1m",
                         revealed=[Meld.kong(27, KongType.CONCEALED)],
                         win_type=WinType.KONG_DRAW)
        assert needs_split_scoring(hand, NON_DEALER)

    def test_single_sheet(self):
        discard = make_hand(FLAT, "1m", win_type=WinType.FROM_NEXT)
        assert not needs_split_scoring(discard, NON_DEALER)
        sheets = evaluate(discard, NON_DEALER)
        assert len(sheets) == 1
        assert sheets[0].is_dealer_variant

        dealer_draw = make_hand(FLAT, "1m", win_type=WinType.SELF_DRAW)
        assert len(evaluate(dealer_draw, TableContext())) == 1

    def test_score_both(self):
        hand = make_hand(FLAT, "1m", win_type=WinType.FROM_NEXT)
        dealer_sheet, others_sheet = score_both(hand, TableContext(dealer_streak=1))
        assert dealer_sheet.total == others_sheet.total + 3
