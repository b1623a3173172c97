"""Course hole checks and hole-set selection for 9 and 18 hole matches."""

from typing import Iterable, List, Sequence

from models.hole import Hole
from models.player_score import PlayerScore

from .exceptions import InvalidHoleDataError

VALID_PARS = (3, 4, 5)
HOLES_TO_PLAY = (9, 18)
NINE_SELECTIONS = ("front", "back")


def validate_holes(holes: Sequence[Hole]) -> None:
    """Check course holes against league rules before they reach the engine."""
    ids = set()
    numbers = set()
    handicap_indexes = set()
    for hole in holes:
        if hole.par not in VALID_PARS:
            raise InvalidHoleDataError(f"Hole {hole.number} has par {hole.par}, expected 3, 4 or 5")
        if not 1 <= hole.handicap_index <= 18:
            raise InvalidHoleDataError(
                f"Hole {hole.number} has handicap index {hole.handicap_index}, expected 1-18"
            )
        if hole.id in ids:
            raise InvalidHoleDataError(f"Duplicate hole id '{hole.id}'")
        if hole.number in numbers:
            raise InvalidHoleDataError(f"Duplicate hole number {hole.number}")
        if hole.handicap_index in handicap_indexes:
            raise InvalidHoleDataError(f"Duplicate handicap index {hole.handicap_index}")
        ids.add(hole.id)
        numbers.add(hole.number)
        handicap_indexes.add(hole.handicap_index)


def select_holes(
    holes: Iterable[Hole],
    holes_to_play: int = 18,
    nine_selection: str = "front",
) -> List[Hole]:
    """Holes played in a match, ordered by hole number.

    Nine hole matches play either the front (1-9) or back (10-18) nine.
    """
    if holes_to_play not in HOLES_TO_PLAY:
        raise ValueError(f"holes_to_play must be 9 or 18, got {holes_to_play}")
    ordered = sorted(holes, key=lambda h: h.number)
    if holes_to_play == 18:
        return ordered
    if nine_selection == "front":
        return [h for h in ordered if 1 <= h.number <= 9]
    if nine_selection == "back":
        return [h for h in ordered if 10 <= h.number <= 18]
    raise ValueError(f"nine_selection must be 'front' or 'back', got '{nine_selection}'")


def scorecards_complete(players: Iterable[PlayerScore], holes_to_play: int = 18) -> bool:
    """True when every player has entered a score for every hole being played."""
    return all(player.is_complete(holes_to_play) for player in players)
