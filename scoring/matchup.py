"""Singles matchup resolution: one player from each team, hole by hole."""

import logging
from typing import List, Sequence

from models.hole import Hole
from models.player_score import PlayerScore
from models.results import HoleResult, MatchupResult

from .exceptions import MissingScoreError
from .strokes import net_score, stroke_receiver, strokes_for_hole

logger = logging.getLogger(__name__)


def _gross_for_hole(player: PlayerScore, hole: Hole) -> int:
    strokes = player.get_strokes(hole.id)
    if strokes is None:
        raise MissingScoreError(player.player_id, hole.id, hole.number)
    return strokes


def calculate_matchup(
    player1: PlayerScore,
    player2: PlayerScore,
    holes: Sequence[Hole],
) -> MatchupResult:
    """Resolve a head-to-head matchup over the given holes.

    Each hole is worth one point to the player with the strictly lower net
    score; halved holes award nothing. Raises MissingScoreError if either
    player has no score for any of the holes.
    """
    handicap_diff = player1.handicap - player2.handicap
    receiver = stroke_receiver(handicap_diff, player1.player_id, player2.player_id)

    player1_points = 0
    player2_points = 0
    hole_results: List[HoleResult] = []

    for hole in holes:
        p1_gross = _gross_for_hole(player1, hole)
        p2_gross = _gross_for_hole(player2, hole)

        strokes_given_to = None
        if strokes_for_hole(hole.par, hole.handicap_index, handicap_diff):
            strokes_given_to = receiver

        p1_net = net_score(p1_gross, player1.player_id, strokes_given_to)
        p2_net = net_score(p2_gross, player2.player_id, strokes_given_to)

        winner = None
        if p1_net < p2_net:
            winner = player1.player_id
            player1_points += 1
        elif p2_net < p1_net:
            winner = player2.player_id
            player2_points += 1

        hole_results.append(
            HoleResult(
                hole_id=hole.id,
                hole_number=hole.number,
                player1_net_score=p1_net,
                player2_net_score=p2_net,
                winner=winner,
                strokes_given_to=strokes_given_to,
            )
        )

    logger.debug(
        "Matchup %s vs %s: %d-%d over %d holes",
        player1.player_id, player2.player_id, player1_points, player2_points, len(hole_results),
    )
    return MatchupResult(
        player1_id=player1.player_id,
        player2_id=player2.player_id,
        player1_points=player1_points,
        player2_points=player2_points,
        hole_results=hole_results,
    )
