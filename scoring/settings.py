import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .holes import HOLES_TO_PLAY, NINE_SELECTIONS


@dataclass(frozen=True)
class ScoringSettings:
    holes_to_play: int
    nine_selection: str
    log_level: str


def _parse_holes_to_play(value: str) -> int:
    try:
        holes = int(value)
    except ValueError:
        raise ValueError(f"LEAGUE_HOLES_TO_PLAY must be an integer, got '{value}'") from None
    if holes not in HOLES_TO_PLAY:
        raise ValueError(f"LEAGUE_HOLES_TO_PLAY must be 9 or 18, got {holes}")
    return holes


def load_settings() -> ScoringSettings:
    """Read league match settings from the environment (and a .env file if present)."""
    load_dotenv()
    holes_to_play = _parse_holes_to_play(os.getenv("LEAGUE_HOLES_TO_PLAY", "18").strip())
    nine_selection = os.getenv("LEAGUE_NINE_SELECTION", "front").strip().lower()
    if nine_selection not in NINE_SELECTIONS:
        raise ValueError(f"LEAGUE_NINE_SELECTION must be 'front' or 'back', got '{nine_selection}'")
    log_level = os.getenv("LOG_LEVEL", "WARNING").strip().upper()
    return ScoringSettings(
        holes_to_play=holes_to_play,
        nine_selection=nine_selection,
        log_level=log_level,
    )
