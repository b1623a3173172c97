from pydantic import Field

from .base import LeagueModel


class HoleScore(LeagueModel):
    """Represents a player's gross strokes on a single hole."""

    hole_id: str
    strokes: int = Field(ge=1)
