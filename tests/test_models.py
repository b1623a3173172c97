import pytest
from decimal import Decimal
from pydantic import ValidationError

from models import (
    Hole,
    HoleResult,
    HoleScore,
    MatchupResult,
    PlayerScore,
    TeamMatchResult,
)


# ================================================================
# Hole / HoleScore
# ================================================================

def test_hole_validation():
    h = Hole(id="h1", number=1, par=4, handicap_index=7)
    assert h.number == 1
    assert h.par == 4

    with pytest.raises(ValidationError):
        Hole(id="h19", number=19, par=4, handicap_index=1)   # number > 18

    with pytest.raises(ValidationError):
        Hole(id="h1", number=1, par="four", handicap_index=1)


def test_hole_is_immutable():
    h = Hole(id="h1", number=1, par=4, handicap_index=7)
    with pytest.raises(ValidationError):
        h.par = 5


def test_hole_score_requires_positive_strokes():
    assert HoleScore(hole_id="h1", strokes=1).strokes == 1
    with pytest.raises(ValidationError):
        HoleScore(hole_id="h1", strokes=0)


# ================================================================
# PlayerScore
# ================================================================

def test_player_score_lookups():
    player = PlayerScore(
        player_id="p1",
        handicap=12,
        hole_scores=[HoleScore(hole_id="h1", strokes=5), HoleScore(hole_id="h2", strokes=4)],
    )
    assert player.get_strokes("h1") == 5
    assert player.get_strokes("h3") is None
    assert player.calculate_gross_score() == 9
    assert player.is_complete(2)
    assert not player.is_complete(18)


def test_player_handicap_is_exact():
    player = PlayerScore(player_id="p1", handicap="10.1")
    assert player.handicap == Decimal("10.1")

    with pytest.raises(ValidationError):
        PlayerScore(player_id="p1", handicap=-1)


def test_player_rejects_duplicate_hole_scores():
    with pytest.raises(ValidationError):
        PlayerScore(
            player_id="p1",
            handicap=5,
            hole_scores=[HoleScore(hole_id="h1", strokes=5), HoleScore(hole_id="h1", strokes=4)],
        )


# ================================================================
# Results
# ================================================================

def _matchup():
    return MatchupResult(
        player1_id="a",
        player2_id="b",
        player1_points=1,
        player2_points=0,
        hole_results=[
            HoleResult(hole_id="h1", hole_number=1, player1_net_score=4, player2_net_score=5, winner="a"),
            HoleResult(hole_id="h2", hole_number=2, player1_net_score=4, player2_net_score=4),
        ],
    )


def test_matchup_result_helpers():
    m = _matchup()
    assert m.tied_holes == 1
    assert m.points_for("a") == 1
    assert m.points_for("b") == 0
    assert m.points_for("z") is None


def test_team_match_result_player_points():
    other = MatchupResult(player1_id="c", player2_id="d", player1_points=0, player2_points=2)
    result = TeamMatchResult(
        team1_total_points=1,
        team2_total_points=3,
        team1_gross_total=80,
        team2_gross_total=78,
        team1_net_total=Decimal("80"),
        team2_net_total=Decimal("76.5"),
        team_point_winner=2,
        matchups=(_matchup(), other),
    )
    assert result.points_for_player("a") == 1
    assert result.points_for_player("d") == 2
    assert result.points_for_player("nobody") == 0

    assert result.hole_points_for_player("a", "h1") == 1
    assert result.hole_points_for_player("b", "h1") == 0
    assert result.hole_points_for_player("a", "h2") == 0   # halved hole
    assert result.hole_points_for_player("c", "h1") == 0   # no hole detail for this matchup
