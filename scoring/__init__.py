from .exceptions import InvalidHoleDataError, InvalidTeamError, MissingScoreError, ScoringError
from .holes import scorecards_complete, select_holes, validate_holes
from .matchup import calculate_matchup
from .standings import player_scorecards, player_standings, team_standings
from .strokes import strokes_for_hole
from .team_match import calculate_gross_score, calculate_team_match, pair_by_handicap

__all__ = [
    "strokes_for_hole",
    "calculate_matchup",
    "calculate_team_match",
    "calculate_gross_score",
    "pair_by_handicap",
    "validate_holes",
    "select_holes",
    "scorecards_complete",
    "player_scorecards",
    "team_standings",
    "player_standings",
    "ScoringError",
    "MissingScoreError",
    "InvalidHoleDataError",
    "InvalidTeamError",
]
