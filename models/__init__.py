from .base import LeagueModel
from .hole import Hole
from .hole_score import HoleScore
from .player_score import PlayerScore
from .results import HoleResult, MatchupResult, TeamMatchResult
from .standing import MatchRecord, PlayerScorecard, PlayerStanding, TeamStanding

__all__ = [
    "LeagueModel",
    "Hole",
    "HoleScore",
    "PlayerScore",
    "HoleResult",
    "MatchupResult",
    "TeamMatchResult",
    "MatchRecord",
    "PlayerScorecard",
    "PlayerStanding",
    "TeamStanding",
]
