"""Meld (面子) data structures: sequences, triplets and kongs."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .tile import is_honor, tile_suit


class MeldType(Enum):
    SEQUENCE = "sequence"  # 順子
    TRIPLET = "triplet"    # 刻子
    KONG = "kong"          # 槓


class KongType(Enum):
    CONCEALED = "concealed"  # 暗槓
    REVEALED = "revealed"    # 明槓


@dataclass(frozen=True)
class Meld:
    """A frozen meld.

    Attributes:
        meld_type: Type of meld
        tiles: All tile indices in the meld (4 for a kong)
        kong_type: Concealed or revealed, only set for kongs
    """
    meld_type: MeldType
    tiles: tuple  # tuple of tile indices
    kong_type: Optional[KongType] = None

    @classmethod
    def sequence(cls, start: int) -> "Meld":
        if is_honor(start) or start % 9 > 6:
            raise ValueError(f"no sequence can start at tile {start}")
        return cls(MeldType.SEQUENCE, (start, start + 1, start + 2))

    @classmethod
    def triplet(cls, index34: int) -> "Meld":
        return cls(MeldType.TRIPLET, (index34,) * 3)

    @classmethod
    def kong(cls, index34: int, kong_type: KongType) -> "Meld":
        return cls(MeldType.KONG, (index34,) * 4, kong_type)

    @classmethod
    def from_tiles(cls, tiles: Sequence[int],
                   kong_type: Optional[KongType] = None) -> "Meld":
        """Build a meld from raw tiles, inferring its type."""
        ordered = tuple(sorted(tiles))
        if len(ordered) == 4 and len(set(ordered)) == 1:
            return cls(MeldType.KONG, ordered, kong_type or KongType.REVEALED)
        if len(ordered) != 3:
            raise ValueError(f"not a meld: {list(tiles)}")
        if kong_type is not None:
            raise ValueError("kong_type given for a non-kong meld")
        if ordered[0] == ordered[1] == ordered[2]:
            return cls(MeldType.TRIPLET, ordered)
        if is_sequence(ordered):
            return cls(MeldType.SEQUENCE, ordered)
        raise ValueError(f"not a meld: {list(tiles)}")

    @property
    def is_sequence(self) -> bool:
        return self.meld_type == MeldType.SEQUENCE

    @property
    def is_set(self) -> bool:
        """Triplet or kong."""
        return self.meld_type in (MeldType.TRIPLET, MeldType.KONG)

    @property
    def is_kong(self) -> bool:
        return self.meld_type == MeldType.KONG

    @property
    def is_concealed_kong(self) -> bool:
        return self.is_kong and self.kong_type == KongType.CONCEALED

    @property
    def tile_index34(self) -> int:
        """The lowest tile of the meld (the tile kind for sets)."""
        return self.tiles[0]

    @property
    def structural_tiles(self) -> tuple:
        """Tiles as seen by the partition: a kong counts as its triplet."""
        return self.tiles[:3]


def is_sequence(tiles: Sequence[int]) -> bool:
    """Three consecutive ranks of one suit (honors never form sequences)."""
    if len(tiles) != 3:
        return False
    a, b, c = sorted(tiles)
    if is_honor(c):
        return False
    return (tile_suit(a) == tile_suit(b) == tile_suit(c)
            and a + 1 == b and b + 1 == c)


def is_set(tiles: Sequence[int]) -> bool:
    """Three or four identical tiles."""
    return len(tiles) >= 3 and all(t == tiles[0] for t in tiles)
