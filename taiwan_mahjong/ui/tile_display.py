"""Tile display formatting with colors for terminal output."""

from rich.text import Text

from taiwan_mahjong.core.meld import Meld
from taiwan_mahjong.core.tile import HONOR_GLYPHS, Flower, TileSuit, tile_suit, tile_to_string


# Color schemes
SUIT_COLORS = {
    TileSuit.CHARACTER: "red",
    TileSuit.DOT: "blue",
    TileSuit.BAMBOO: "green",
    TileSuit.WIND: "yellow",
    TileSuit.DRAGON: "yellow",
}

FLOWER_COLOR = "magenta"


def tile_to_display_str(index34: int) -> str:
    """Display name of a tile: 1m-9s for suits, the glyph for honors."""
    if index34 >= 27:
        return HONOR_GLYPHS[index34 - 27]
    return tile_to_string(index34)


def tile_to_rich_text(index34: int, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    style = f"bold {SUIT_COLORS[tile_suit(index34)]}"
    if highlight:
        style += " on white"
    return Text(f"[{tile_to_display_str(index34)}]", style=style)


def tiles_to_rich_text(tiles, separator: str = " ") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def flower_to_rich_text(flower: Flower, highlight: bool = False) -> Text:
    style = f"bold {FLOWER_COLOR}"
    if highlight:
        style += " on white"
    return Text(f"[{flower.glyph}]", style=style)


def flowers_to_rich_text(flowers, seat_number: int = 0) -> Text:
    """Flower tiles, highlighting the ones that belong to the given seat."""
    result = Text()
    for i, flower in enumerate(flowers):
        if i > 0:
            result.append(" ")
        result.append_text(flower_to_rich_text(
            flower, highlight=seat_number > 0 and flower.matches_seat(seat_number)))
    return result


def meld_to_rich_text(meld: Meld, kong_labels: dict = None) -> Text:
    """A meld as adjacent tiles; kongs get a trailing (明槓)/(暗槓) label."""
    result = tiles_to_rich_text(meld.tiles, separator="")
    if meld.is_kong and kong_labels:
        result.append(f"({kong_labels[meld.kong_type]})", style="dim")
    return result
