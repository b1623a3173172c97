"""Turn scored matches into scorecard rows and league standings."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from models.player_score import PlayerScore
from models.results import TeamMatchResult
from models.standing import MatchRecord, PlayerScorecard, PlayerStanding, TeamStanding


def player_scorecards(
    result: TeamMatchResult,
    players: Iterable[PlayerScore],
) -> List[PlayerScorecard]:
    """Per-player rows for a scored match: gross total, matchup points and handicap."""
    return [
        PlayerScorecard(
            player_id=player.player_id,
            total_score=player.calculate_gross_score(),
            points_earned=result.points_for_player(player.player_id),
            handicap_at_time=player.handicap,
        )
        for player in players
    ]


def team_standings(team_ids: Sequence[str], matches: Iterable[MatchRecord]) -> List[TeamStanding]:
    """Total points and win/loss/tie record per team, best first.

    A match counts as a win for the team with more team points.
    """
    tallies: Dict[str, Dict[str, int]] = {
        team_id: {"matches_played": 0, "total_points": 0, "wins": 0, "losses": 0, "ties": 0}
        for team_id in team_ids
    }

    for match in matches:
        sides = (
            (match.team1_id, match.team1_points, match.team2_points),
            (match.team2_id, match.team2_points, match.team1_points),
        )
        for team_id, points, opponent_points in sides:
            tally = tallies.get(team_id)
            if tally is None:
                continue
            tally["matches_played"] += 1
            tally["total_points"] += points
            if points > opponent_points:
                tally["wins"] += 1
            elif points < opponent_points:
                tally["losses"] += 1
            else:
                tally["ties"] += 1

    standings = [TeamStanding(team_id=team_id, **tally) for team_id, tally in tallies.items()]
    standings.sort(key=lambda s: s.total_points, reverse=True)
    return standings


def player_standings(
    player_ids: Sequence[str],
    scorecards: Iterable[PlayerScorecard],
) -> List[PlayerStanding]:
    """Points, scoring average and best round per player, best first.

    Scorecards without a positive total score are ignored.
    """
    by_player: Dict[str, List[PlayerScorecard]] = {player_id: [] for player_id in player_ids}
    for card in scorecards:
        if card.total_score is None or card.total_score <= 0:
            continue
        if card.player_id in by_player:
            by_player[card.player_id].append(card)

    standings: List[PlayerStanding] = []
    for player_id, cards in by_player.items():
        scores = [c.total_score for c in cards]
        standings.append(
            PlayerStanding(
                player_id=player_id,
                matches_played=len(cards),
                total_points=sum(c.points_earned for c in cards),
                avg_score=sum(scores) / len(scores) if scores else 0.0,
                best_score=min(scores) if scores else None,
            )
        )

    standings.sort(key=lambda s: s.total_points, reverse=True)
    return standings
