from decimal import Decimal
from pydantic import Field
from typing import List, Optional, Tuple

from .base import LeagueModel


class HoleResult(LeagueModel):
    """Outcome of one hole in a singles matchup."""

    hole_id: str
    hole_number: int
    player1_net_score: int
    player2_net_score: int
    winner: Optional[str] = None  # player_id, None when halved
    strokes_given_to: Optional[str] = None


class MatchupResult(LeagueModel):
    """Head-to-head result between one player from each team."""

    player1_id: str
    player2_id: str
    player1_points: int = Field(ge=0)
    player2_points: int = Field(ge=0)
    hole_results: List[HoleResult] = Field(default_factory=list)

    @property
    def tied_holes(self) -> int:
        """Number of holes where nobody won the point."""
        return sum(1 for hole in self.hole_results if hole.winner is None)

    def points_for(self, player_id: str) -> Optional[int]:
        """Get hole points won by a player, None if they are not in this matchup."""
        if player_id == self.player1_id:
            return self.player1_points
        if player_id == self.player2_id:
            return self.player2_points
        return None


class TeamMatchResult(LeagueModel):
    """Fully resolved 2v2 team match."""

    team1_total_points: int = Field(ge=0)
    team2_total_points: int = Field(ge=0)
    team1_gross_total: int
    team2_gross_total: int
    team1_net_total: Decimal
    team2_net_total: Decimal
    team_point_winner: Optional[int] = None  # 1, 2, or None for a tie
    matchups: Tuple[MatchupResult, MatchupResult]

    def points_for_player(self, player_id: str) -> int:
        """Hole points a player earned in their own matchup (0 if not playing)."""
        for matchup in self.matchups:
            points = matchup.points_for(player_id)
            if points is not None:
                return points
        return 0

    def hole_points_for_player(self, player_id: str, hole_id: str) -> int:
        """Points a player earned on a single hole: 1 for a win, else 0."""
        for matchup in self.matchups:
            if player_id not in (matchup.player1_id, matchup.player2_id):
                continue
            for hole in matchup.hole_results:
                if hole.hole_id == hole_id:
                    return 1 if hole.winner == player_id else 0
        return 0
