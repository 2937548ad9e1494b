"""Rich rendering of trainer questions and answers."""

from typing import Sequence

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taiwan_mahjong.core.hand import Hand
from taiwan_mahjong.core.meld import KongType
from taiwan_mahjong.core.table import SeatRelation, TableContext
from taiwan_mahjong.rules.scoring import ScoreSheet
from taiwan_mahjong.ui.i18n import get_language, t, translate_fan
from taiwan_mahjong.ui.tile_display import (
    flowers_to_rich_text, meld_to_rich_text, tile_to_rich_text, tiles_to_rich_text,
)

# Layout of the four seats around the table, as (row, column) in a 3x3 grid.
_SEAT_POSITIONS = {
    SeatRelation.OPP: (0, 1),
    SeatRelation.PREV: (1, 0),
    SeatRelation.NEXT: (1, 2),
    SeatRelation.ME: (2, 1),
}


def _wind_label(wind) -> str:
    if get_language() == "zh":
        return wind.glyph
    return t(f"detail.{wind.name.lower()}")


def render_table_context(ctx: TableContext) -> Panel:
    """Prevailing wind, dealer (with streak) and seat marker around a small grid."""
    grid = [["" for _ in range(3)] for _ in range(3)]
    for seat, (row, col) in _SEAT_POSITIONS.items():
        tags = []
        if seat == ctx.dealer:
            tag = t("label.dealer")
            if ctx.dealer_streak > 0:
                tag += t("label.streak", n=ctx.dealer_streak)
            tags.append(f"[bold red]{tag}[/bold red]")
        if seat == ctx.seat_marker:
            tags.append(f"[bold cyan]{t('label.seat_marker')}[/bold cyan]")
        label = seat.kanji if get_language() == "zh" else seat.value
        grid[row][col] = f"{label} {' '.join(tags)}".strip()

    table = Table.grid(padding=(0, 3))
    for _ in range(3):
        table.add_column(justify="center")
    for row in grid:
        table.add_row(*row)

    title = t("label.prevailing_wind", wind=_wind_label(ctx.prevailing_wind))
    return Panel(table, title=title, border_style="cyan")


def render_hand(hand: Hand, ctx: TableContext) -> Panel:
    """Revealed melds, concealed tiles, winning tile, win type and flowers."""
    kong_labels = {
        KongType.CONCEALED: t("kong.concealed"),
        KongType.REVEALED: t("kong.revealed"),
    }
    text = Text()

    text.append(f"{t('label.revealed')}: ")
    if hand.revealed:
        for i, meld in enumerate(hand.revealed):
            if i > 0:
                text.append("  ")
            text.append_text(meld_to_rich_text(meld, kong_labels))
    else:
        text.append(t("label.none"), style="dim")

    text.append(f"\n{t('label.in_hand')}: ")
    text.append_text(tiles_to_rich_text(hand.in_hand))

    text.append(f"\n{t('label.winning_tile')}: ")
    text.append_text(tile_to_rich_text(hand.winning_tile, highlight=True))
    text.append(f"  {t('win.' + hand.win_type.value)}", style="bold")

    text.append(f"\n{t('label.flowers')}: ")
    if hand.flowers:
        text.append_text(flowers_to_rich_text(hand.flowers, ctx.seat_number))
    else:
        text.append(t("label.none"), style="dim")

    return Panel(text, title=t("label.hand"), border_style="green")


def render_score_sheet(sheet: ScoreSheet, title: str = None) -> Table:
    """Fan list with points and the total row."""
    table = Table(title=title or t("label.fans"), show_header=True,
                  border_style="cyan", show_footer=True)
    table.add_column(t("label.fan_name"), style="bold",
                     footer=t("label.total", points=sheet.total))
    table.add_column(t("label.fan_points"), justify="right",
                     footer=str(sheet.total))

    if not sheet.fans:
        table.add_row(t("label.no_fans"), "0")
    for fan in sheet.fans:
        table.add_row(translate_fan(fan), t("label.points_unit", points=fan.points))
    return table


def render_sheets(console: Console, sheets: Sequence[ScoreSheet]):
    """One fan table, or dealer / non-dealer tables for a split self-draw."""
    if len(sheets) == 1:
        console.print(render_score_sheet(sheets[0]))
        return
    tables = [
        render_score_sheet(
            sheet,
            title=t("label.dealer_pays") if sheet.is_dealer_variant else t("label.others_pay"))
        for sheet in sheets
    ]
    console.print(Columns(tables))


def render_question(console: Console, hand: Hand, ctx: TableContext):
    """Render the full question: table situation then the hand."""
    console.print()
    console.print(render_table_context(ctx))
    console.print(render_hand(hand, ctx))
