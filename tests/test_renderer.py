"""Tests for the rich rendering helpers"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import io

from rich.console import Console

from taiwan_mahjong.core.hand import Hand, WinType
from taiwan_mahjong.core.meld import KongType, Meld
from taiwan_mahjong.core.table import SeatRelation, TableContext
from taiwan_mahjong.core.tile import Flower, tiles_from_string
from taiwan_mahjong.rules.scoring import evaluate
from taiwan_mahjong.ui.i18n import set_language
from taiwan_mahjong.ui.renderer import render_question, render_sheets
from taiwan_mahjong.ui.tile_display import (
    flowers_to_rich_text, meld_to_rich_text, tile_to_display_str, tile_to_rich_text,
    tiles_to_rich_text,
)


def make_console():
    return Console(file=io.StringIO(), record=True, width=120)


def make_hand(win_type):
    return Hand.build(tiles_from_string("23m456m789m123p55s"),
                      [Meld.kong(27, KongType.CONCEALED)],
                      tiles_from_string("1m")[0], win_type, ["1f", "5f"])


class TestTileDisplay:
    def test_names(self):
        assert tile_to_display_str(0) == "1m"
        assert tile_to_display_str(27) == "東"
        assert tile_to_display_str(33) == "中"

    def test_rich_text(self):
        assert tile_to_rich_text(9).plain == "[1p]"
        assert tiles_to_rich_text([0, 1]).plain == "[1m] [2m]"

    def test_kong_label(self):
        kong = Meld.kong(27, KongType.CONCEALED)
        text = meld_to_rich_text(kong, {KongType.CONCEALED: "暗槓"})
        assert text.plain == "[東][東][東][東](暗槓)"
        assert meld_to_rich_text(Meld.sequence(0)).plain == "[1m][2m][3m]"

    def test_flowers(self):
        text = flowers_to_rich_text([Flower(1), Flower(5)], seat_number=1)
        assert text.plain == "[春] [梅]"


class TestRenderer:
    def test_question(self):
        set_language("zh")
        console = make_console()
        render_question(console, make_hand(WinType.FROM_NEXT),
                        TableContext(dealer=SeatRelation.OPP, dealer_streak=2))
        output = console.export_text()
        assert "暗槓" in output
        assert "下家放槍" in output
        assert "連2" in output

    def test_split_sheets(self):
        set_language("zh")
        console = make_console()
        hand = make_hand(WinType.SELF_DRAW)
        render_sheets(console, evaluate(hand, TableContext(dealer=SeatRelation.OPP)))
        output = console.export_text()
        assert "莊家支付" in output
        assert "閒家支付" in output
        assert "自摸" in output

    def test_english_sheet(self):
        set_language("en")
        try:
            console = make_console()
            hand = make_hand(WinType.FROM_NEXT)
            render_sheets(console, evaluate(hand, TableContext(dealer=SeatRelation.OPP)))
            assert "Fully concealed" in console.export_text()
        finally:
            set_language("zh")
