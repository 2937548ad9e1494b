"""Win (和牌) detection for the 17-tile form: k melds + 1 pair.

All functions work on 34-length count arrays. Revealed melds are fixed and
must be taken out by the caller before asking about the concealed part.
"""

from typing import List

from taiwan_mahjong.core.tile import MAX_COPIES, NUM_TILE_KINDS


def _is_well_formed(tiles_34: List[int]) -> bool:
    return (len(tiles_34) == NUM_TILE_KINDS and
            all(0 <= c <= MAX_COPIES for c in tiles_34))


def can_partition(tiles_34: List[int], meld_count: int) -> bool:
    """Check whether the tiles split exactly into meld_count melds plus one pair."""
    return _can_partition(tiles_34, meld_count, allow_triplets=True)


def can_partition_all_sequences(tiles_34: List[int]) -> bool:
    """Like can_partition, but every meld must be a sequence."""
    total = sum(tiles_34)
    if total % 3 != 2:
        return False
    return _can_partition(tiles_34, (total - 2) // 3, allow_triplets=False)


def _can_partition(tiles_34: List[int], meld_count: int, allow_triplets: bool) -> bool:
    if meld_count < 0 or not _is_well_formed(tiles_34):
        return False
    if sum(tiles_34) != 2 + 3 * meld_count:
        return False

    for head in range(NUM_TILE_KINDS):
        if tiles_34[head] < 2:
            continue
        remaining = list(tiles_34)
        remaining[head] -= 2
        if _extract_melds(remaining, 0, meld_count, allow_triplets):
            return True
    return False


def _extract_melds(tiles: List[int], start: int, needed: int,
                   allow_triplets: bool) -> bool:
    """Extract exactly 'needed' melds from tiles, lowest tile kind first."""
    if needed == 0:
        return all(t == 0 for t in tiles)

    idx = start
    while idx < NUM_TILE_KINDS and tiles[idx] == 0:
        idx += 1

    if idx >= NUM_TILE_KINDS:
        return False

    # Try triplet
    if allow_triplets and tiles[idx] >= 3:
        tiles[idx] -= 3
        found = _extract_melds(tiles, idx, needed - 1, allow_triplets)
        tiles[idx] += 3
        if found:
            return True

    # Try sequence - only suit tiles (0-26) starting at rank 1..7
    if idx < 27 and idx % 9 <= 6:
        if tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            found = _extract_melds(tiles, idx, needed - 1, allow_triplets)
            tiles[idx] += 1
            tiles[idx + 1] += 1
            tiles[idx + 2] += 1
            if found:
                return True

    return False


def get_waiting_tiles(concealed_34: List[int]) -> List[int]:
    """Find all tile kinds (34 indices) that would complete the concealed tiles.

    Only the concealed tiles are considered; the number of melds they must
    form follows from their size (16 concealed tiles -> 5 melds + pair).
    """
    total = sum(concealed_34) + 1
    if total % 3 != 2:
        return []
    meld_count = (total - 2) // 3

    waits = []
    for i in range(NUM_TILE_KINDS):
        if concealed_34[i] >= MAX_COPIES:
            continue
        test = list(concealed_34)
        test[i] += 1
        if can_partition(test, meld_count):
            waits.append(i)
    return waits
