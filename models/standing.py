from decimal import Decimal
from pydantic import Field
from typing import Optional

from .base import LeagueModel


class MatchRecord(LeagueModel):
    """Team points from a completed match, as stored by the league."""
    match_id: Optional[str] = None
    team1_id: str
    team2_id: str
    team1_points: int = Field(0, ge=0)
    team2_points: int = Field(0, ge=0)


class TeamStanding(LeagueModel):
    team_id: str
    matches_played: int = 0
    total_points: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0


class PlayerScorecard(LeagueModel):
    """Per-player summary row written after a match is scored."""
    player_id: str
    total_score: Optional[int] = None
    points_earned: int = 0
    handicap_at_time: Optional[Decimal] = None


class PlayerStanding(LeagueModel):
    player_id: str
    matches_played: int = 0
    total_points: int = 0
    avg_score: float = 0.0
    best_score: Optional[int] = None
