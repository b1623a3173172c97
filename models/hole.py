from pydantic import Field

from .base import LeagueModel


class Hole(LeagueModel):
    """Represents a single hole on a course.

    Par and handicap index are checked against league rules by
    ``scoring.holes.validate_holes`` when the course is loaded.
    """

    id: str
    number: int = Field(ge=1, le=18)
    par: int
    handicap_index: int  # 1 = hardest hole on the course
