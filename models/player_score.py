from decimal import Decimal
from pydantic import Field, model_validator
from typing import List, Optional

from .base import LeagueModel
from .hole_score import HoleScore


class PlayerScore(LeagueModel):
    """One player's round: current handicap plus gross strokes per hole."""

    player_id: str
    handicap: Decimal = Field(ge=0)
    hole_scores: List[HoleScore] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_unique_holes(self):
        seen = set()
        for score in self.hole_scores:
            if score.hole_id in seen:
                raise ValueError(f"Duplicate score for hole '{score.hole_id}'")
            seen.add(score.hole_id)
        return self

    def get_strokes(self, hole_id: str) -> Optional[int]:
        """Get gross strokes for a hole, or None when it was not entered."""
        for score in self.hole_scores:
            if score.hole_id == hole_id:
                return score.strokes
        return None

    def calculate_gross_score(self) -> int:
        """Calculate total gross strokes across every entered hole."""
        return sum(score.strokes for score in self.hole_scores)

    def is_complete(self, expected_holes: int = 18) -> bool:
        """Check if the scorecard holds an entry for every hole being played."""
        return len(self.hole_scores) >= expected_holes
