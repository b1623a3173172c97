from typing import Optional


class ScoringError(Exception):
    """Base for all scoring errors."""


class MissingScoreError(ScoringError):
    """A hole in the match has no gross score for a player."""

    def __init__(self, player_id: str, hole_id: str, hole_number: Optional[int] = None):
        self.player_id = player_id
        self.hole_id = hole_id
        self.hole_number = hole_number
        label = hole_number if hole_number is not None else hole_id
        super().__init__(f"Missing score for hole {label} (player {player_id})")


class InvalidHoleDataError(ScoringError):
    """Course hole data breaks league rules (par, handicap index, duplicates)."""


class InvalidTeamError(ScoringError):
    """Team does not have the number of players the format requires."""
