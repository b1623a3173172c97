"""Team match aggregation: two singles matchups plus the team bonus point."""

import logging
from decimal import Decimal
from typing import Iterable, List, Sequence, Tuple

from models.hole import Hole
from models.hole_score import HoleScore
from models.player_score import PlayerScore
from models.results import TeamMatchResult

from .exceptions import InvalidTeamError
from .matchup import calculate_matchup

logger = logging.getLogger(__name__)

TEAM_SIZE = 2


def calculate_gross_score(hole_scores: Iterable[HoleScore]) -> int:
    """Total gross strokes for a list of hole scores."""
    return sum(score.strokes for score in hole_scores)


def sort_by_handicap(players: Sequence[PlayerScore]) -> List[PlayerScore]:
    """Lowest handicap first. Teammates with equal handicaps keep their input order."""
    return sorted(players, key=lambda p: p.handicap)


def pair_by_handicap(
    team1: Sequence[PlayerScore],
    team2: Sequence[PlayerScore],
) -> List[Tuple[PlayerScore, PlayerScore]]:
    """Pair opponents by handicap rank: lowest vs lowest, next vs next, and so on."""
    if len(team1) != len(team2):
        raise InvalidTeamError(
            f"Teams must be the same size to pair players ({len(team1)} vs {len(team2)})"
        )
    return list(zip(sort_by_handicap(team1), sort_by_handicap(team2)))


def average_handicap(players: Sequence[PlayerScore]) -> Decimal:
    return sum((p.handicap for p in players), Decimal(0)) / len(players)


def _check_team(label: str, players: Sequence[PlayerScore]) -> None:
    if len(players) != TEAM_SIZE:
        raise InvalidTeamError(f"{label} must have exactly {TEAM_SIZE} players, got {len(players)}")


def calculate_team_match(
    team1_players: Sequence[PlayerScore],
    team2_players: Sequence[PlayerScore],
    holes: Sequence[Hole],
) -> TeamMatchResult:
    """Resolve a full 2v2 team match.

    The low handicap players meet in the first matchup and the high handicap
    players in the second. Each team's gross total is adjusted by the
    difference in team average handicap (applied to the higher average team)
    and the lower net total earns one bonus point. No rounding is applied, so
    net totals can be fractional.
    """
    _check_team("Team 1", team1_players)
    _check_team("Team 2", team2_players)

    low_pair, high_pair = pair_by_handicap(team1_players, team2_players)
    matchup1 = calculate_matchup(low_pair[0], low_pair[1], holes)
    matchup2 = calculate_matchup(high_pair[0], high_pair[1], holes)

    team1_gross_total = sum(calculate_gross_score(p.hole_scores) for p in team1_players)
    team2_gross_total = sum(calculate_gross_score(p.hole_scores) for p in team2_players)

    team1_avg_handicap = average_handicap(team1_players)
    team2_avg_handicap = average_handicap(team2_players)
    handicap_diff = abs(team1_avg_handicap - team2_avg_handicap)

    team1_net_total = Decimal(team1_gross_total)
    team2_net_total = Decimal(team2_gross_total)
    if team1_avg_handicap > team2_avg_handicap:
        team1_net_total -= handicap_diff
    else:
        team2_net_total -= handicap_diff

    team_point_winner = None
    if team1_net_total < team2_net_total:
        team_point_winner = 1
    elif team2_net_total < team1_net_total:
        team_point_winner = 2

    team1_total_points = (
        matchup1.player1_points + matchup2.player1_points + (1 if team_point_winner == 1 else 0)
    )
    team2_total_points = (
        matchup1.player2_points + matchup2.player2_points + (1 if team_point_winner == 2 else 0)
    )

    logger.debug(
        "Team match: net %s vs %s, bonus to %s, points %d-%d",
        team1_net_total, team2_net_total, team_point_winner, team1_total_points, team2_total_points,
    )
    return TeamMatchResult(
        team1_total_points=team1_total_points,
        team2_total_points=team2_total_points,
        team1_gross_total=team1_gross_total,
        team2_gross_total=team2_gross_total,
        team1_net_total=team1_net_total,
        team2_net_total=team2_net_total,
        team_point_winner=team_point_winner,
        matchups=(matchup1, matchup2),
    )
