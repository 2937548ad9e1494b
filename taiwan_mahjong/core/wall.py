"""Tile supply (牌山) used when synthesizing hands: 4 copies of each of the 34 kinds."""

import random
from typing import List, Optional

from .tile import MAX_COPIES, NUM_TILE_KINDS

# First tile of every possible sequence, per suit.
SEQUENCE_STARTS = [s + r for s in (0, 9, 18) for r in range(7)]


class TileSupply:
    """Remaining copies of each tile kind.

    A supply is built fresh for every generation attempt, so a failed attempt
    never leaks state into the next one.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.counts: List[int] = [MAX_COPIES] * NUM_TILE_KINDS

    @classmethod
    def excluding(cls, tiles, rng: Optional[random.Random] = None) -> "TileSupply":
        """A supply with the given tiles already taken out."""
        supply = cls(rng)
        supply.take(tiles)
        return supply

    @property
    def remaining(self) -> int:
        """Number of tiles left in the supply."""
        return sum(self.counts)

    def available(self, index34: int) -> int:
        return self.counts[index34]

    def take(self, tiles):
        """Remove tiles from the supply."""
        for t in tiles:
            if self.counts[t] <= 0:
                raise ValueError(f"tile {t} exhausted in supply")
            self.counts[t] -= 1

    def pick_pair(self) -> Optional[List[int]]:
        """Draw a random pair, or None when no kind has 2 copies left."""
        candidates = [t for t in range(NUM_TILE_KINDS) if self.counts[t] >= 2]
        if not candidates:
            return None
        tile = self.rng.choice(candidates)
        pair = [tile, tile]
        self.take(pair)
        return pair

    def pick_triplet(self) -> Optional[List[int]]:
        candidates = [t for t in range(NUM_TILE_KINDS) if self.counts[t] >= 3]
        if not candidates:
            return None
        tile = self.rng.choice(candidates)
        triplet = [tile, tile, tile]
        self.take(triplet)
        return triplet

    def pick_sequence(self) -> Optional[List[int]]:
        candidates = [
            s for s in SEQUENCE_STARTS
            if self.counts[s] > 0 and self.counts[s + 1] > 0 and self.counts[s + 2] > 0
        ]
        if not candidates:
            return None
        start = self.rng.choice(candidates)
        sequence = [start, start + 1, start + 2]
        self.take(sequence)
        return sequence

    def pick_meld(self) -> Optional[List[int]]:
        """Draw a random meld: sequence-first or triplet-first with equal odds."""
        if self.rng.random() < 0.5:
            return self.pick_sequence() or self.pick_triplet()
        return self.pick_triplet() or self.pick_sequence()
