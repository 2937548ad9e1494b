"""Score calculation - resolve overlapping fans and total the 台."""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Set, Tuple

from taiwan_mahjong.core.hand import Hand
from taiwan_mahjong.core.table import TableContext
from taiwan_mahjong.rules.fan import (
    ALL_CHECKS, HAND_CHECKS, FanCheck, FanId, FanResult, total_points,
)

_DRAGON_FANS = (FanId.WHITE_DRAGON, FanId.GREEN_DRAGON, FanId.RED_DRAGON)
_WIND_FANS = (FanId.SEAT_WIND, FanId.PREVAILING_WIND)

# Umbrella patterns and the patterns they subsume.
SUBSUMED_FANS: Dict[FanId, Tuple[FanId, ...]] = {
    FanId.THREE_CONCEALED: (FanId.FLAT_WIN,),
    FanId.SMALL_THREE_DRAGONS: _DRAGON_FANS,
    FanId.BIG_THREE_DRAGONS: _DRAGON_FANS,
    FanId.SMALL_FOUR_WINDS: _WIND_FANS,
    FanId.BIG_FOUR_WINDS: _WIND_FANS,
    FanId.COMPLETE_SEASONS: (FanId.FLOWER_SEASON,),
    FanId.COMPLETE_PLANTS: (FanId.FLOWER_PLANT,),
}


@dataclass(frozen=True)
class ScoreSheet:
    """Resolved fans for one scoring variant."""
    fans: Tuple[FanResult, ...]
    is_dealer_variant: bool

    @property
    def total(self) -> int:
        return total_points(list(self.fans))

    @property
    def fan_ids(self) -> List[FanId]:
        return [f.fan_id for f in self.fans]


def resolve_fans(hand: Hand, ctx: TableContext,
                 checks: Sequence[FanCheck]) -> List[FanResult]:
    """Run the checks and drop every fan subsumed by an achieved umbrella fan.

    Pass 1 collects the exclusion set from achieved results, pass 2 keeps the
    achieved, non-excluded results in catalog order.
    """
    results = [check(hand, ctx) for check in checks]

    excluded: Set[FanId] = set()
    for result in results:
        if not result.achieved:
            continue
        excluded.update(SUBSUMED_FANS.get(result.fan_id, ()))
        excluded.update(result.excludes)

    return [r for r in results if r.achieved and r.fan_id not in excluded]


def score_hand(hand: Hand, ctx: TableContext) -> List[FanResult]:
    """Score with the dealer fans (莊家, 連莊, 拉莊) included."""
    return resolve_fans(hand, ctx, ALL_CHECKS)


def score_hand_non_dealer(hand: Hand, ctx: TableContext) -> List[FanResult]:
    """Score without the dealer fans."""
    return resolve_fans(hand, ctx, HAND_CHECKS)


def needs_split_scoring(hand: Hand, ctx: TableContext) -> bool:
    """A non-dealer's self-draw is paid separately by the dealer and the others."""
    return hand.win_type.is_self_draw and not ctx.is_dealer


def score_both(hand: Hand, ctx: TableContext) -> Tuple[ScoreSheet, ScoreSheet]:
    """(dealer sheet, non-dealer sheet) for side-by-side display."""
    return (
        ScoreSheet(tuple(score_hand(hand, ctx)), is_dealer_variant=True),
        ScoreSheet(tuple(score_hand_non_dealer(hand, ctx)), is_dealer_variant=False),
    )


def evaluate(hand: Hand, ctx: TableContext) -> List[ScoreSheet]:
    """The sheets a host displays: two in the split case, otherwise one."""
    if needs_split_scoring(hand, ctx):
        return list(score_both(hand, ctx))
    return [ScoreSheet(tuple(score_hand(hand, ctx)), is_dealer_variant=True)]
