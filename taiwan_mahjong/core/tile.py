"""Tile definitions: 34 tile kinds (index encoding) and the 8 flower tiles."""

from enum import IntEnum
from typing import Iterable, List


class TileSuit(IntEnum):
    CHARACTER = 0  # 萬子
    DOT = 1        # 筒子
    BAMBOO = 2     # 索子
    WIND = 3       # 風牌
    DRAGON = 4     # 三元牌


NUM_TILE_KINDS = 34
MAX_COPIES = 4

WIND_INDICES = (27, 28, 29, 30)
DRAGON_INDICES = (31, 32, 33)
WHITE_DRAGON = 31  # 白板
GREEN_DRAGON = 32  # 青發
RED_DRAGON = 33    # 紅中

HONOR_GLYPHS = ["東", "南", "西", "北", "白", "發", "中"]

SUIT_NAMES = {
    TileSuit.CHARACTER: "萬子",
    TileSuit.DOT: "筒子",
    TileSuit.BAMBOO: "索子",
}


class Wind(IntEnum):
    EAST = 0    # 東
    SOUTH = 1   # 南
    WEST = 2    # 西
    NORTH = 3   # 北

    @property
    def glyph(self) -> str:
        return HONOR_GLYPHS[self.value]

    @property
    def index34(self) -> int:
        """34 encoding index for this wind tile."""
        return 27 + self.value


def tile_suit(index34: int) -> TileSuit:
    if index34 < 27:
        return TileSuit(index34 // 9)
    if index34 < 31:
        return TileSuit.WIND
    return TileSuit.DRAGON


def is_honor(index34: int) -> bool:
    return index34 >= 27


def tile_to_string(index34: int) -> str:
    """Short code for a tile: 1m-9m, 1p-9p, 1s-9s, 1z-7z."""
    if not (0 <= index34 < NUM_TILE_KINDS):
        raise ValueError(f"tile index must be 0..33, got {index34}")
    if index34 < 9:
        return f"{index34 + 1}m"
    if index34 < 18:
        return f"{index34 - 9 + 1}p"
    if index34 < 27:
        return f"{index34 - 18 + 1}s"
    return f"{index34 - 27 + 1}z"


def tiles_to_34_array(tiles: Iterable[int]) -> List[int]:
    """Convert a list of tile indices to a 34-length count array."""
    arr = [0] * NUM_TILE_KINDS
    for t in tiles:
        arr[t] += 1
    return arr


def tiles_from_string(s: str) -> List[int]:
    """Parse a shorthand string like '123m456p789s東東東' into tile indices.

    Honors may be written either as glyphs (東南西北白發中) or with the
    z suffix (1z-7z).
    """
    tiles = []
    numbers = []
    for ch in s:
        if ch.isdigit():
            numbers.append(int(ch))
        elif ch in ('m', 'p', 's', 'z'):
            offset = {'m': 0, 'p': 9, 's': 18, 'z': 27}[ch]
            limit = 7 if ch == 'z' else 9
            for n in numbers:
                if not (1 <= n <= limit):
                    raise ValueError(f"invalid tile '{n}{ch}' in {s!r}")
                tiles.append(offset + n - 1)
            numbers = []
        elif ch in HONOR_GLYPHS:
            tiles.append(27 + HONOR_GLYPHS.index(ch))
        elif ch.isspace():
            continue
        else:
            raise ValueError(f"unexpected character {ch!r} in {s!r}")
    if numbers:
        raise ValueError(f"digits without suit at end of {s!r}")
    return tiles


class Flower:
    """A flower tile "Nf": 1-4 are the seasons (春夏秋冬), 5-8 the plants (梅蘭竹菊).

    Flowers never take part in meld decomposition; they only score when their
    number matches the player's seat number.
    """
    __slots__ = ('_number',)

    NAMES = ["春", "夏", "秋", "冬", "梅", "蘭", "竹", "菊"]

    def __init__(self, number: int):
        if not (1 <= number <= 8):
            raise ValueError(f"flower number must be 1..8, got {number}")
        self._number = number

    @classmethod
    def parse(cls, code: str) -> "Flower":
        if len(code) != 2 or code[1] != 'f' or not code[0].isdigit():
            raise ValueError(f"invalid flower code {code!r}")
        return cls(int(code[0]))

    @property
    def number(self) -> int:
        return self._number

    @property
    def code(self) -> str:
        return f"{self._number}f"

    @property
    def glyph(self) -> str:
        return self.NAMES[self._number - 1]

    @property
    def is_season(self) -> bool:
        return self._number <= 4

    @property
    def is_plant(self) -> bool:
        return self._number > 4

    def matches_seat(self, seat_number: int) -> bool:
        """Season N or plant N+4 belongs to seat N."""
        return self._number == seat_number or self._number == seat_number + 4

    def __repr__(self):
        return f"Flower({self.code})"

    def __eq__(self, other):
        if isinstance(other, Flower):
            return self._number == other._number
        return NotImplemented

    def __hash__(self):
        return self._number

    def __lt__(self, other):
        if isinstance(other, Flower):
            return self._number < other._number
        return NotImplemented


ALL_FLOWERS = [Flower(n) for n in range(1, 9)]
