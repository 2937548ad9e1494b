"""Table situation: who deals, the dealer streak, seat marker and prevailing wind."""

from dataclasses import dataclass
from enum import Enum

from .tile import Wind


class SeatRelation(Enum):
    """A seat relative to the scoring player."""
    ME = "me"      # 自家
    NEXT = "next"  # 下家
    PREV = "prev"  # 上家
    OPP = "opp"    # 對家

    @property
    def kanji(self) -> str:
        return {"me": "自家", "next": "下家", "prev": "上家", "opp": "對家"}[self.value]


# Seat number (1=東 ... 4=北) when the seat marker sits at the given relation.
_SEAT_NUMBERS = {
    SeatRelation.ME: 1,
    SeatRelation.PREV: 2,
    SeatRelation.OPP: 3,
    SeatRelation.NEXT: 4,
}


@dataclass(frozen=True)
class TableContext:
    """Immutable table situation for one scoring call.

    Attributes:
        dealer: Seat of the current dealer relative to the scoring player
        dealer_streak: Dealer's consecutive wins (0 = no bonus)
        seat_marker: Relative seat holding the seat-wind marker
        prevailing_wind: Round wind
    """
    dealer: SeatRelation = SeatRelation.ME
    dealer_streak: int = 0
    seat_marker: SeatRelation = SeatRelation.ME
    prevailing_wind: Wind = Wind.EAST

    @property
    def is_dealer(self) -> bool:
        return self.dealer == SeatRelation.ME

    @property
    def seat_number(self) -> int:
        """This player's seat number (1-4), used for seat wind and flowers."""
        return _SEAT_NUMBERS[self.seat_marker]

    @property
    def seat_wind(self) -> Wind:
        return Wind(self.seat_number - 1)

    def to_dict(self) -> dict:
        return {
            "dealer": self.dealer.value,
            "dealer_streak": self.dealer_streak,
            "seat_marker": self.seat_marker.value,
            "prevailing_wind": self.prevailing_wind.name.lower(),
        }
