"""Fan (台) detection for Taiwanese 16-tile Mahjong.

Each check function takes (Hand, TableContext) and returns a FanResult,
achieved or not. Checks are independent of each other; overlapping patterns
are resolved afterwards by the scoring engine through FanId exclusions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

from taiwan_mahjong.core.hand import Hand, WinType
from taiwan_mahjong.core.meld import is_sequence, is_set
from taiwan_mahjong.core.table import TableContext
from taiwan_mahjong.core.tile import (
    DRAGON_INDICES, GREEN_DRAGON, RED_DRAGON, SUIT_NAMES, WHITE_DRAGON,
    WIND_INDICES, TileSuit, tile_suit,
)
from taiwan_mahjong.rules.agari import can_partition_all_sequences, get_waiting_tiles


class FanId(Enum):
    DEALER = "dealer"
    CONTINUING_DEALER = "continuing_dealer"
    PULL_DEALER = "pull_dealer"
    FULLY_CONCEALED = "fully_concealed"
    NO_MELDS_SELF_DRAW = "no_melds_self_draw"
    SELF_DRAW = "self_draw"
    SEAT_WIND = "seat_wind"
    PREVAILING_WIND = "prevailing_wind"
    FLOWER_SEASON = "flower_season"
    FLOWER_PLANT = "flower_plant"
    ROBBING_KONG = "robbing_kong"
    WHITE_DRAGON = "white_dragon"
    GREEN_DRAGON = "green_dragon"
    RED_DRAGON = "red_dragon"
    SINGLE_WAIT = "single_wait"
    HALF_CALL = "half_call"
    KONG_DRAW = "kong_draw"
    FLAT_WIN = "flat_win"
    FULL_CALL = "full_call"
    COMPLETE_SEASONS = "complete_seasons"
    COMPLETE_PLANTS = "complete_plants"
    THREE_CONCEALED = "three_concealed"
    ALL_TRIPLETS = "all_triplets"
    SMALL_THREE_DRAGONS = "small_three_dragons"
    HALF_FLUSH = "half_flush"
    FOUR_CONCEALED = "four_concealed"
    FIVE_CONCEALED = "five_concealed"
    BIG_THREE_DRAGONS = "big_three_dragons"
    SMALL_FOUR_WINDS = "small_four_winds"
    FULL_FLUSH = "full_flush"
    ALL_HONORS = "all_honors"
    EIGHT_FLOWERS = "eight_flowers"
    BIG_FOUR_WINDS = "big_four_winds"


@dataclass(frozen=True)
class FanResult:
    """Outcome of one fan check.

    Attributes:
        fan_id: Pattern identifier (the exclusion key)
        name: Display label (Traditional Chinese)
        points: 台 awarded when achieved
        achieved: Whether the pattern applies
        excludes: Patterns nullified by this one when achieved
        detail: Variable part of the label (wind, seat number or suit)
    """
    fan_id: FanId
    name: str
    points: int
    achieved: bool
    excludes: Tuple[FanId, ...] = ()
    detail: str = ""


FanCheck = Callable[[Hand, TableContext], FanResult]


# --- Shared helpers ---

def count_concealed_triplets(hand: Hand) -> int:
    """Triplets held entirely in the concealed tiles, plus concealed kongs.

    The winning tile is not part of the concealed tiles. A kind that also
    appears in a revealed non-kong meld is not counted.
    """
    concealed = hand.concealed_34
    in_open_melds = set()
    for meld in hand.revealed:
        if not meld.is_kong:
            in_open_melds.update(meld.tiles)

    count = sum(1 for i, c in enumerate(concealed)
                if c >= 3 and i not in in_open_melds)
    count += sum(1 for m in hand.revealed if m.is_concealed_kong)
    return count


def _suit_counts(tiles_34: List[int]) -> dict:
    counts = {TileSuit.CHARACTER: 0, TileSuit.DOT: 0, TileSuit.BAMBOO: 0, "honor": 0}
    for i, c in enumerate(tiles_34):
        if c == 0:
            continue
        suit = tile_suit(i)
        if suit in (TileSuit.WIND, TileSuit.DRAGON):
            counts["honor"] += c
        else:
            counts[suit] += c
    return counts


def _single_suit(counts: dict):
    """The only suit present, or None when zero or several suits appear."""
    present = [s for s in (TileSuit.CHARACTER, TileSuit.DOT, TileSuit.BAMBOO)
               if counts[s] > 0]
    return present[0] if len(present) == 1 else None


def _dealt_in_by_dealer(hand: Hand, ctx: TableContext) -> bool:
    discarder = hand.win_type.discarder
    return discarder is not None and discarder == ctx.dealer


def _honor_sets(tiles_34: List[int], indices) -> Tuple[int, bool]:
    """(number of triplets, whether a pair exists) among the given honor kinds."""
    sets = 0
    has_pair = False
    for i in indices:
        if tiles_34[i] >= 3:
            sets += 1
        elif tiles_34[i] == 2:
            has_pair = True
    return sets, has_pair


def _flower_numbers(hand: Hand) -> set:
    return {f.number for f in hand.flowers}


def _seat_flowers(hand: Hand, ctx: TableContext, seasons: bool) -> int:
    """Number of the seat's own seasons (or plants) among the flowers."""
    return sum(1 for f in hand.flowers
               if f.matches_seat(ctx.seat_number)
               and (f.is_season if seasons else f.is_plant))


# === Dealer fans ===

def check_dealer(hand: Hand, ctx: TableContext) -> FanResult:
    """莊家: the player deals, wins by self-draw, or the dealer dealt in."""
    achieved = (ctx.is_dealer or hand.win_type.is_self_draw or
                _dealt_in_by_dealer(hand, ctx))
    return FanResult(FanId.DEALER, "莊家", 1, achieved)


def check_continuing_dealer(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = ctx.dealer_streak > 0 and (
        ctx.is_dealer or _dealt_in_by_dealer(hand, ctx))
    return FanResult(FanId.CONTINUING_DEALER, "連莊", ctx.dealer_streak, achieved)


def check_pull_dealer(hand: Hand, ctx: TableContext) -> FanResult:
    # Same trigger and value as 連莊; both are awarded together.
    achieved = ctx.dealer_streak > 0 and (
        ctx.is_dealer or _dealt_in_by_dealer(hand, ctx))
    return FanResult(FanId.PULL_DEALER, "拉莊", ctx.dealer_streak, achieved)


# === 1台 fans ===

def check_fully_concealed(hand: Hand, ctx: TableContext) -> FanResult:
    """門清: nothing revealed except concealed kongs."""
    return FanResult(FanId.FULLY_CONCEALED, "門清", 1, hand.has_only_concealed_kongs)


def check_no_melds_self_draw(hand: Hand, ctx: TableContext) -> FanResult:
    # Plain self-draw only; a kong draw does not qualify.
    achieved = hand.has_only_concealed_kongs and hand.win_type == WinType.SELF_DRAW
    return FanResult(FanId.NO_MELDS_SELF_DRAW, "不求人", 1, achieved)


def check_self_draw(hand: Hand, ctx: TableContext) -> FanResult:
    return FanResult(FanId.SELF_DRAW, "自摸", 1, hand.win_type.is_self_draw)


def check_seat_wind(hand: Hand, ctx: TableContext) -> FanResult:
    wind = ctx.seat_wind
    achieved = hand.all_tiles_34[wind.index34] >= 3
    return FanResult(FanId.SEAT_WIND, f"門風（{wind.glyph}風）", 1, achieved,
                     detail=wind.name.lower())


def check_prevailing_wind(hand: Hand, ctx: TableContext) -> FanResult:
    wind = ctx.prevailing_wind
    achieved = hand.all_tiles_34[wind.index34] >= 3
    return FanResult(FanId.PREVAILING_WIND, f"場風（{wind.glyph}風）", 1, achieved,
                     detail=wind.name.lower())


def check_flower_season(hand: Hand, ctx: TableContext) -> FanResult:
    """Seasons matching the seat: 1 point per tile."""
    seat = ctx.seat_number
    matching = _seat_flowers(hand, ctx, seasons=True)
    return FanResult(FanId.FLOWER_SEASON, f"花牌（{seat}季）", matching, matching > 0,
                     detail=str(seat))


def check_flower_plant(hand: Hand, ctx: TableContext) -> FanResult:
    """Plants matching the seat: 1 point per tile."""
    seat = ctx.seat_number
    matching = _seat_flowers(hand, ctx, seasons=False)
    return FanResult(FanId.FLOWER_PLANT, f"花牌（{seat}花）", matching, matching > 0,
                     detail=str(seat))


def check_robbing_kong(hand: Hand, ctx: TableContext) -> FanResult:
    return FanResult(FanId.ROBBING_KONG, "搶槓", 1, hand.win_type.is_robbing_kong)


def check_white_dragon(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = hand.all_tiles_34[WHITE_DRAGON] >= 3
    return FanResult(FanId.WHITE_DRAGON, "三元牌（白板）", 1, achieved)


def check_green_dragon(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = hand.all_tiles_34[GREEN_DRAGON] >= 3
    return FanResult(FanId.GREEN_DRAGON, "三元牌（青發）", 1, achieved)


def check_red_dragon(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = hand.all_tiles_34[RED_DRAGON] >= 3
    return FanResult(FanId.RED_DRAGON, "三元牌（紅中）", 1, achieved)


def check_single_wait(hand: Hand, ctx: TableContext) -> FanResult:
    """獨聽: the concealed tiles were waiting on exactly one tile kind."""
    waits = get_waiting_tiles(hand.concealed_34)
    return FanResult(FanId.SINGLE_WAIT, "獨聽", 1, len(waits) == 1)


def check_half_call(hand: Hand, ctx: TableContext) -> FanResult:
    """半求: one concealed tile left, won by self-draw."""
    achieved = len(hand.in_hand) == 1 and hand.win_type.is_self_draw
    return FanResult(FanId.HALF_CALL, "半求", 1, achieved)


def check_kong_draw(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = hand.win_type == WinType.KONG_DRAW
    return FanResult(FanId.KONG_DRAW, "槓上開花", 1, achieved)


# === 2台 fans ===

def check_flat_win(hand: Hand, ctx: TableContext) -> FanResult:
    """平胡: all sequences, no honors, no flowers, two-sided wait, won on a discard."""
    def result(achieved):
        return FanResult(FanId.FLAT_WIN, "平胡", 2, achieved)

    if hand.win_type.is_self_draw:
        return result(False)
    if hand.flowers:
        return result(False)
    all_tiles = hand.all_tiles_34
    if any(all_tiles[i] > 0 for i in range(27, 34)):
        return result(False)
    if not all(is_sequence(m.tiles) for m in hand.revealed):
        return result(False)
    if not can_partition_all_sequences(hand.closed_with_winning_34):
        return result(False)
    if len(get_waiting_tiles(hand.concealed_34)) < 2:
        return result(False)
    return result(True)


def check_full_call(hand: Hand, ctx: TableContext) -> FanResult:
    """全求: one concealed tile left, won on another player's tile."""
    achieved = len(hand.in_hand) == 1 and not hand.win_type.is_self_draw
    return FanResult(FanId.FULL_CALL, "全求", 2, achieved)


def check_complete_seasons(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = {1, 2, 3, 4} <= _flower_numbers(hand)
    return FanResult(FanId.COMPLETE_SEASONS, "花槓（春夏秋冬）", 2, achieved)


def check_complete_plants(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = {5, 6, 7, 8} <= _flower_numbers(hand)
    return FanResult(FanId.COMPLETE_PLANTS, "花槓（梅蘭竹菊）", 2, achieved)


def check_three_concealed(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = count_concealed_triplets(hand) == 3
    return FanResult(FanId.THREE_CONCEALED, "三暗刻", 2, achieved)


# === 4台+ fans ===

def check_all_triplets(hand: Hand, ctx: TableContext) -> FanResult:
    """碰碰胡: every meld is a triplet or kong."""
    if not all(is_set(m.tiles) for m in hand.revealed):
        return FanResult(FanId.ALL_TRIPLETS, "碰碰胡", 4, False)

    # Greedy: take triplets first (re-checking the same kind), then one pair
    counts = hand.structural_34
    pair_found = False
    i = 0
    while i < len(counts):
        if counts[i] >= 3:
            counts[i] -= 3
            continue
        if counts[i] == 2 and not pair_found:
            pair_found = True
            counts[i] = 0
        i += 1

    achieved = pair_found and all(c == 0 for c in counts)
    return FanResult(FanId.ALL_TRIPLETS, "碰碰胡", 4, achieved)


def check_small_three_dragons(hand: Hand, ctx: TableContext) -> FanResult:
    sets, has_pair = _honor_sets(hand.all_tiles_34, DRAGON_INDICES)
    return FanResult(FanId.SMALL_THREE_DRAGONS, "小三元", 4, sets == 2 and has_pair)


def check_half_flush(hand: Hand, ctx: TableContext) -> FanResult:
    """混一色: one suit plus honors."""
    counts = _suit_counts(hand.all_tiles_34)
    suit = _single_suit(counts)
    suit_name = SUIT_NAMES.get(suit, "")
    achieved = counts["honor"] > 0 and suit is not None
    return FanResult(FanId.HALF_FLUSH, f"混一色（{suit_name}）", 4, achieved,
                     detail=suit.name.lower() if suit is not None else "")


def check_four_concealed(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = count_concealed_triplets(hand) == 4
    return FanResult(FanId.FOUR_CONCEALED, "四暗刻", 5, achieved)


def check_five_concealed(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = count_concealed_triplets(hand) == 5
    return FanResult(FanId.FIVE_CONCEALED, "五暗刻", 8, achieved)


def check_big_three_dragons(hand: Hand, ctx: TableContext) -> FanResult:
    sets, _ = _honor_sets(hand.all_tiles_34, DRAGON_INDICES)
    return FanResult(FanId.BIG_THREE_DRAGONS, "大三元", 8, sets == 3)


def check_small_four_winds(hand: Hand, ctx: TableContext) -> FanResult:
    sets, has_pair = _honor_sets(hand.all_tiles_34, WIND_INDICES)
    return FanResult(FanId.SMALL_FOUR_WINDS, "小四喜", 8, sets == 3 and has_pair)


def check_full_flush(hand: Hand, ctx: TableContext) -> FanResult:
    """清一色: a single suit, no honors."""
    counts = _suit_counts(hand.all_tiles_34)
    suit = _single_suit(counts)
    suit_name = SUIT_NAMES.get(suit, "")
    achieved = counts["honor"] == 0 and suit is not None
    return FanResult(FanId.FULL_FLUSH, f"清一色（{suit_name}）", 8, achieved,
                     detail=suit.name.lower() if suit is not None else "")


def check_all_honors(hand: Hand, ctx: TableContext) -> FanResult:
    counts = _suit_counts(hand.all_tiles_34)
    achieved = counts["honor"] > 0 and not any(
        counts[s] for s in (TileSuit.CHARACTER, TileSuit.DOT, TileSuit.BAMBOO))
    return FanResult(FanId.ALL_HONORS, "字一色", 8, achieved)


def check_eight_flowers(hand: Hand, ctx: TableContext) -> FanResult:
    achieved = set(range(1, 9)) <= _flower_numbers(hand)
    return FanResult(FanId.EIGHT_FLOWERS, "八仙過海", 8, achieved)


def check_big_four_winds(hand: Hand, ctx: TableContext) -> FanResult:
    sets, _ = _honor_sets(hand.all_tiles_34, WIND_INDICES)
    return FanResult(FanId.BIG_FOUR_WINDS, "大四喜", 16, sets == 4,
                     excludes=(FanId.SEAT_WIND, FanId.PREVAILING_WIND))


# Catalog order doubles as display order.
DEALER_CHECKS: List[FanCheck] = [
    check_dealer, check_continuing_dealer, check_pull_dealer,
]

HAND_CHECKS: List[FanCheck] = [
    check_fully_concealed, check_no_melds_self_draw, check_self_draw,
    check_seat_wind, check_prevailing_wind,
    check_flower_season, check_flower_plant,
    check_robbing_kong,
    check_white_dragon, check_green_dragon, check_red_dragon,
    check_single_wait, check_half_call, check_kong_draw,
    check_flat_win, check_full_call,
    check_complete_seasons, check_complete_plants,
    check_three_concealed, check_all_triplets,
    check_small_three_dragons, check_half_flush,
    check_four_concealed, check_five_concealed,
    check_big_three_dragons, check_small_four_winds,
    check_full_flush, check_all_honors,
    check_eight_flowers, check_big_four_winds,
]

ALL_CHECKS: List[FanCheck] = DEALER_CHECKS + HAND_CHECKS


def total_points(fans: List[FanResult]) -> int:
    """Sum the points of the achieved fans."""
    return sum(f.points for f in fans if f.achieved)
