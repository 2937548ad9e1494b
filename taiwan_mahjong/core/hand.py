"""Winning hand: concealed tiles, revealed melds, winning tile, win type, flowers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .meld import Meld
from .table import SeatRelation
from .tile import (
    Flower, MAX_COPIES, NUM_TILE_KINDS, tile_to_string, tiles_to_34_array,
)

HAND_MELD_COUNT = 5
HAND_STRUCTURAL_SIZE = 2 + 3 * HAND_MELD_COUNT  # 17


class WinType(Enum):
    SELF_DRAW = "self_draw"                  # 自摸
    KONG_DRAW = "kong_draw"                  # 槓上開花
    FROM_NEXT = "from_next"                  # 下家放槍
    FROM_PREV = "from_prev"                  # 上家放槍
    FROM_OPP = "from_opp"                    # 對家放槍
    ROBBING_KONG_NEXT = "robbing_kong_next"  # 搶下家槓
    ROBBING_KONG_PREV = "robbing_kong_prev"  # 搶上家槓
    ROBBING_KONG_OPP = "robbing_kong_opp"    # 搶對家槓

    @property
    def is_self_draw(self) -> bool:
        """Self-draw, including the draw after a kong."""
        return self in (WinType.SELF_DRAW, WinType.KONG_DRAW)

    @property
    def is_robbing_kong(self) -> bool:
        return self in (WinType.ROBBING_KONG_NEXT, WinType.ROBBING_KONG_PREV,
                        WinType.ROBBING_KONG_OPP)

    @property
    def discarder(self) -> Optional[SeatRelation]:
        """Seat that dealt into the hand by discard (robbing a kong excluded)."""
        return {
            WinType.FROM_NEXT: SeatRelation.NEXT,
            WinType.FROM_PREV: SeatRelation.PREV,
            WinType.FROM_OPP: SeatRelation.OPP,
        }.get(self)


@dataclass(frozen=True)
class Hand:
    """A complete 17-tile winning hand.

    Attributes:
        in_hand: Concealed tile indices, sorted, without the winning tile
        revealed: Revealed melds (concealed kongs are declared, so they live here too)
        winning_tile: The tile that completed the hand
        win_type: How the hand was won
        flowers: Flower tiles, sorted
    """
    in_hand: tuple
    revealed: tuple = ()
    winning_tile: int = 0
    win_type: WinType = WinType.SELF_DRAW
    flowers: tuple = field(default_factory=tuple)

    @classmethod
    def build(cls, in_hand, revealed=(), winning_tile: int = 0,
              win_type: WinType = WinType.SELF_DRAW, flowers=()) -> "Hand":
        """Build a hand from loose lists; flowers may be Flower objects or codes."""
        flower_objs = [f if isinstance(f, Flower) else Flower.parse(f) for f in flowers]
        return cls(
            in_hand=tuple(sorted(in_hand)),
            revealed=tuple(revealed),
            winning_tile=winning_tile,
            win_type=win_type,
            flowers=tuple(sorted(flower_objs)),
        )

    @property
    def concealed_34(self) -> List[int]:
        """Count array of the concealed tiles (winning tile excluded)."""
        return tiles_to_34_array(self.in_hand)

    @property
    def closed_with_winning_34(self) -> List[int]:
        """Count array of the concealed tiles plus the winning tile."""
        arr = tiles_to_34_array(self.in_hand)
        arr[self.winning_tile] += 1
        return arr

    @property
    def all_tiles_34(self) -> List[int]:
        """Physical tile counts: a kong contributes 4 copies."""
        arr = self.closed_with_winning_34
        for meld in self.revealed:
            for t in meld.tiles:
                arr[t] += 1
        return arr

    @property
    def structural_34(self) -> List[int]:
        """Partition counts: a kong contributes its triplet only."""
        arr = self.closed_with_winning_34
        for meld in self.revealed:
            for t in meld.structural_tiles:
                arr[t] += 1
        return arr

    @property
    def has_only_concealed_kongs(self) -> bool:
        """Every revealed meld is a concealed kong (門清 condition)."""
        return all(m.is_concealed_kong for m in self.revealed)

    @property
    def kong_count(self) -> int:
        return sum(1 for m in self.revealed if m.is_kong)

    @property
    def flower_codes(self) -> List[str]:
        return [f.code for f in self.flowers]

    def validate(self):
        """Raise ValueError unless this is a structurally legal 17-tile hand.

        Scoring assumes well-formed input; call this on hands that come from
        outside the generator.
        """
        from taiwan_mahjong.rules.agari import can_partition

        tiles = list(self.in_hand) + [self.winning_tile]
        for meld in self.revealed:
            tiles.extend(meld.tiles)
        for t in tiles:
            if not (0 <= t < NUM_TILE_KINDS):
                raise ValueError(f"tile index out of range: {t}")

        physical = self.all_tiles_34
        for idx, count in enumerate(physical):
            if count > MAX_COPIES:
                raise ValueError(
                    f"{count} copies of {tile_to_string(idx)} (max {MAX_COPIES})")

        structural = self.structural_34
        if sum(structural) != HAND_STRUCTURAL_SIZE:
            raise ValueError(
                f"hand has {sum(structural)} structural tiles, "
                f"expected {HAND_STRUCTURAL_SIZE}")

        closed = self.closed_with_winning_34
        closed_melds = HAND_MELD_COUNT - len(self.revealed)
        if closed_melds < 0 or not can_partition(closed, closed_melds):
            raise ValueError("concealed tiles do not form melds plus one pair")

        if len(set(self.flowers)) != len(self.flowers):
            raise ValueError("duplicate flower tiles")

    def to_dict(self) -> dict:
        """Tile-code representation (stable, for logging)."""
        return {
            "in_hand": [tile_to_string(t) for t in self.in_hand],
            "revealed": [
                {
                    "tiles": [tile_to_string(t) for t in m.tiles],
                    "type": m.meld_type.value,
                    "kong_type": m.kong_type.value if m.kong_type else None,
                }
                for m in self.revealed
            ],
            "winning_tile": tile_to_string(self.winning_tile),
            "win_type": self.win_type.value,
            "flowers": self.flower_codes,
        }


def sort_melds(melds: List[Meld]) -> List[Meld]:
    """Order melds lexicographically by their tiles."""
    return sorted(melds, key=lambda m: m.tiles)
