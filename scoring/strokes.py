"""Handicap stroke allocation for a single hole."""

from decimal import Decimal
from typing import Optional, Union

Number = Union[int, Decimal]


def strokes_for_hole(par: int, handicap_index: int, handicap_diff: Number) -> bool:
    """Decide whether a handicap stroke is given on this hole.

    Par 3s never get a stroke. On par 4s and 5s a stroke is given when the
    hole's handicap index falls within the handicap difference, e.g. with a
    difference of 5 the holes ranked 1-5 get a stroke. Fractions of a stroke
    are never given, and a zero difference gives nothing.
    """
    if par == 3:
        return False
    return handicap_index <= abs(handicap_diff)


def stroke_receiver(handicap_diff: Number, player1_id: str, player2_id: str) -> str:
    """The higher handicap player receives strokes (player 2 unless player 1 is higher)."""
    return player1_id if handicap_diff > 0 else player2_id


def net_score(gross: int, player_id: str, strokes_given_to: Optional[str]) -> int:
    """Gross strokes less one when this player received the hole's stroke."""
    return gross - 1 if strokes_given_to == player_id else gross
