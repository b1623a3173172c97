"""Score a team match from a JSON file.

    league-score data/sample_match.json
    python -m scoring.cli data/sample_match.json --holes-to-play 9 --nine back

Match format comes from the command line first, then the file, then the
LEAGUE_HOLES_TO_PLAY / LEAGUE_NINE_SELECTION settings.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from models import Hole, PlayerScore
from models.results import TeamMatchResult
from .exceptions import ScoringError
from .holes import select_holes, validate_holes
from .settings import ScoringSettings, load_settings
from .team_match import calculate_team_match

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score a 2v2 league match from a JSON scorecard file.")
    parser.add_argument("match_file", help="JSON file with 'holes', 'team1' and 'team2'")
    parser.add_argument("--holes-to-play", type=int, choices=(9, 18), default=None)
    parser.add_argument("--nine", choices=("front", "back"), default=None)
    return parser


def score_match_file(
    path: str,
    settings: ScoringSettings,
    holes_to_play: Optional[int] = None,
    nine_selection: Optional[str] = None,
) -> TeamMatchResult:
    with open(path) as f:
        data = json.load(f)

    holes = [Hole(**h) for h in data["holes"]]
    team1 = [PlayerScore(**p) for p in data["team1"]]
    team2 = [PlayerScore(**p) for p in data["team2"]]

    holes_to_play = holes_to_play or data.get("holes_to_play") or settings.holes_to_play
    nine_selection = nine_selection or data.get("nine_selection") or settings.nine_selection

    validate_holes(holes)
    played = select_holes(holes, holes_to_play, nine_selection)
    logger.info("Scoring %s over %d holes", path, len(played))
    return calculate_team_match(team1, team2, played)


def main(argv: Optional[List[str]] = None) -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)

    try:
        result = score_match_file(args.match_file, settings, args.holes_to_play, args.nine)
    except (ScoringError, ValidationError, KeyError, ValueError) as e:
        print(f"Could not score match: {e}", file=sys.stderr)
        sys.exit(1)

    print(result.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
