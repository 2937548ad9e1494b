"""Random winning-hand and table-situation generation for the trainer."""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from taiwan_mahjong.core.hand import HAND_MELD_COUNT, Hand, WinType, sort_melds
from taiwan_mahjong.core.meld import KongType, Meld
from taiwan_mahjong.core.table import SeatRelation, TableContext
from taiwan_mahjong.core.tile import ALL_FLOWERS, Wind
from taiwan_mahjong.core.wall import TileSupply

logger = logging.getLogger(__name__)

STREAK_RATE = 0.5  # lambda of the exponential streak distribution (mean 2)
MAX_STREAK = 6


class GeneratorConfig:
    """Probabilities used when turning a winning structure into a hand."""

    def __init__(
        self,
        prob_reveal: float = 0.7,      # each meld is revealed
        prob_kong: float = 0.3,        # a revealed triplet becomes a kong
        prob_flower: float = 0.5,      # each of the 8 flowers is present
        prob_self_draw: float = 0.25,  # self-draw when not robbing a kong
        prob_rob_kong: float = 0.5,    # robbing a kong, when the winning tile allows it
        prob_kong_draw: float = 0.1,   # a self-draw after a kong
    ):
        self.prob_reveal = prob_reveal
        self.prob_kong = prob_kong
        self.prob_flower = prob_flower
        self.prob_self_draw = prob_self_draw
        self.prob_rob_kong = prob_rob_kong
        self.prob_kong_draw = prob_kong_draw

        for name, value in vars(self).items():
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} must be within [0, 1], got {value}")


@dataclass
class WinningStructure:
    """A legal 17-tile arrangement: pairs and 3-tile melds, before organising."""
    pairs: List[List[int]] = field(default_factory=list)
    melds: List[List[int]] = field(default_factory=list)

    @property
    def indices(self) -> List[int]:
        result = []
        for pair in self.pairs:
            result.extend(pair)
        for meld in self.melds:
            result.extend(meld)
        return result


def generate_winning_structure(num_pairs: int = 1, num_melds: int = HAND_MELD_COUNT,
                               rng: Optional[random.Random] = None) -> WinningStructure:
    """Draw pairs and melds from a fresh supply, restarting whenever it runs dry."""
    rng = rng or random.Random()
    attempt = 0
    while True:
        attempt += 1
        supply = TileSupply(rng)
        structure = _try_structure(supply, num_pairs, num_melds)
        if structure is not None:
            if attempt > 1:
                logger.debug("winning structure found after %d attempts", attempt)
            return structure
        logger.debug("supply ran dry on attempt %d (%d tiles left), restarting",
                     attempt, supply.remaining)


def _try_structure(supply: TileSupply, num_pairs: int,
                   num_melds: int) -> Optional[WinningStructure]:
    structure = WinningStructure()
    for _ in range(num_pairs):
        pair = supply.pick_pair()
        if pair is None:
            return None
        structure.pairs.append(pair)
    for _ in range(num_melds):
        meld = supply.pick_meld()
        if meld is None:
            return None
        structure.melds.append(meld)
    return structure


def organize_hand(structure: WinningStructure,
                  config: Optional[GeneratorConfig] = None,
                  rng: Optional[random.Random] = None) -> Hand:
    """Reveal melds, promote kongs, pick the winning tile, win type and flowers."""
    config = config or GeneratorConfig()
    rng = rng or random.Random()
    supply = TileSupply.excluding(structure.indices, rng)

    in_hand: List[int] = []
    revealed: List[Meld] = []

    # Pairs always stay in hand
    for pair in structure.pairs:
        in_hand.extend(pair)

    for meld_tiles in structure.melds:
        if rng.random() >= config.prob_reveal:
            in_hand.extend(meld_tiles)
            continue
        meld = Meld.from_tiles(meld_tiles)
        if meld.is_set and rng.random() < config.prob_kong and supply.available(meld.tile_index34) > 0:
            kong_type = KongType.REVEALED if rng.random() < 0.5 else KongType.CONCEALED
            supply.take([meld.tile_index34])
            meld = Meld.kong(meld.tile_index34, kong_type)
        revealed.append(meld)

    winning_tile = in_hand.pop(rng.randrange(len(in_hand)))
    revealed = sort_melds(revealed)
    win_type = _choose_win_type(in_hand, winning_tile, revealed, config, rng)
    flowers = [f for f in ALL_FLOWERS if rng.random() < config.prob_flower]

    return Hand.build(in_hand, revealed, winning_tile, win_type, flowers)


def _choose_win_type(in_hand: List[int], winning_tile: int, revealed: List[Meld],
                     config: GeneratorConfig, rng: random.Random) -> WinType:
    # A kong can only be robbed for a tile the hand does not already hold
    if winning_tile not in in_hand and rng.random() < config.prob_rob_kong:
        return rng.choice([WinType.ROBBING_KONG_NEXT, WinType.ROBBING_KONG_PREV,
                           WinType.ROBBING_KONG_OPP])

    if rng.random() < config.prob_self_draw:
        has_kong = any(m.is_kong for m in revealed)
        if has_kong and rng.random() < config.prob_kong_draw:
            return WinType.KONG_DRAW
        return WinType.SELF_DRAW
    return rng.choice([WinType.FROM_NEXT, WinType.FROM_PREV, WinType.FROM_OPP])


def synthesize_hand(config: Optional[GeneratorConfig] = None,
                    rng: Optional[random.Random] = None) -> Hand:
    """Generate one random legal winning hand."""
    rng = rng or random.Random()
    structure = generate_winning_structure(rng=rng)
    return organize_hand(structure, config, rng)


def sample_dealer_streak(rng: Optional[random.Random] = None) -> int:
    """Floored exponential sample (rate 0.5), capped at 6."""
    rng = rng or random.Random()
    return min(MAX_STREAK, math.floor(-math.log(1.0 - rng.random()) / STREAK_RATE))


def synthesize_context(rng: Optional[random.Random] = None) -> TableContext:
    """Generate a random table situation."""
    rng = rng or random.Random()
    seats = list(SeatRelation)
    return TableContext(
        dealer=rng.choice(seats),
        dealer_streak=sample_dealer_streak(rng),
        seat_marker=rng.choice(seats),
        prevailing_wind=rng.choice(list(Wind)),
    )
