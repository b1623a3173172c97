from decimal import Decimal

from models import Hole, HoleScore, PlayerScore

PARS = [4, 5, 3, 4, 4, 3, 5, 4, 4, 4, 3, 5, 4, 4, 3, 4, 5, 4]
HANDICAP_INDEXES = [7, 3, 15, 1, 11, 17, 5, 13, 9, 8, 16, 2, 12, 6, 18, 14, 4, 10]


def build_holes():
    return [
        Hole(id=f"h{i}", number=i, par=PARS[i - 1], handicap_index=HANDICAP_INDEXES[i - 1])
        for i in range(1, 19)
    ]


def build_player(player_id, handicap, strokes, holes=None):
    """Player with one score per hole; strokes is an int or a list of 18 ints."""
    holes = holes or build_holes()
    if isinstance(strokes, int):
        strokes = [strokes] * len(holes)
    return PlayerScore(
        player_id=player_id,
        handicap=Decimal(str(handicap)),
        hole_scores=[HoleScore(hole_id=h.id, strokes=s) for h, s in zip(holes, strokes)],
    )
