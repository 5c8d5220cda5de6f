"""Tests for the rule-based play classifier."""

import pytest

from playbyplay.classify import RULES, PlayContext, Rule, classify, classify_with_diagnostics
from playbyplay.diagnostics import UNCLASSIFIED_PLAY
from playbyplay.plays import (
    BlockPlay,
    EjectionPlay,
    EndOfPeriodPlay,
    EnterPlay,
    ExitPlay,
    FoulPlay,
    JumpBallPlay,
    ReboundPlay,
    ShotPlay,
    TimeoutPlay,
    TurnoverPlay,
    UnclassifiedPlay,
)


class TestRuleOrder:
    """Tests for the ordering contract of RULES."""

    def test_rule_order(self):
        """Test the fixed evaluation order."""
        assert [rule.name for rule in RULES] == [
            "shot",
            "block",
            "turnover",
            "foul",
            "rebound",
            "enter",
            "exit",
            "timeout",
            "jumpBall",
            "endOfPeriod",
            "ejection",
        ]

    def test_sub_pattern_order_matters(self):
        """Test that the generic turnover pattern would shadow shot clock turnovers."""

        class ShadowedTurnoverPlay(TurnoverPlay):
            patterns = tuple(reversed(TurnoverPlay.patterns))

        shadowed = (Rule("turnover", ShadowedTurnoverPlay.matches, ShadowedTurnoverPlay.extract),)
        play = classify("shot clock turnover", PlayContext("Sun"), rules=shadowed)
        assert play.committed_by == "shot clock"
        assert play.turnover_type == "turnover"

        play = classify("shot clock turnover", PlayContext("Sun"))
        assert play.committed_by is None
        assert play.turnover_type == "shot clock"

    def test_first_matching_rule_wins(self):
        """Test that an earlier rule takes a description a later rule also matches."""
        # "X vs. Y" would be read as a jump ball if the shot rule didn't come first
        description = "Candace Parker makes 2-foot layup vs. zone"
        assert JumpBallPlay.matches(description)
        assert isinstance(classify(description, PlayContext("Sparks")), ShotPlay)


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize("description, team, expected", [
        ("Stefanie Dolson misses 13-foot jumper", "Mystics", ShotPlay),
        ("Alyssa Thomas makes free throw 2 of 2", "Sun", ShotPlay),
        ("Kelsey Bone blocks Stefanie Dolson 's 8-foot jumper", "Sun", BlockPlay),
        ("shot clock turnover", "Sun", TurnoverPlay),
        ("Ivory Latta bad pass (Kelsey Bone steals)", "Mystics", TurnoverPlay),
        ("Candace Parker Out-of-Bounds Bad Pass Turnover", "Sparks", TurnoverPlay),
        ("Kelsey Bone shooting foul (Stefanie Dolson draws the foul)", "Sun", FoulPlay),
        ("Kelsey Bone defensive rebound", "Sun", ReboundPlay),
        ("Emma Meesseman enters the game for Stefanie Dolson", "Mystics", EnterPlay),
        ("Kara Lawson exits the game", "Sun", ExitPlay),
        ("Mystics Full timeout", "Mystics", TimeoutPlay),
        ("Stefanie Dolson vs. Kelsey Bone (Alex Bentley gains possession)", "Sun", JumpBallPlay),
        ("End of the 1st Quarter", "Sun", EndOfPeriodPlay),
        ("Candace Parker ejected", "Sparks", EjectionPlay),
    ])
    def test_classify_variants(self, description, team, expected):
        """Test that each vocabulary sample resolves to its variant."""
        play = classify(description, PlayContext(team))
        assert type(play) is expected
        assert play.description == description

    def test_unclassified(self):
        """Test that unknown text resolves to UnclassifiedPlay carrying the raw text."""
        play = classify("Instant replay review", PlayContext("Sun"))
        assert isinstance(play, UnclassifiedPlay)
        assert play.description == "Instant replay review"
        assert play.attributes() == {}

    def test_unclassified_diagnostic(self):
        """Test that a miss is reported as a non-fatal diagnostic."""
        play, diagnostic = classify_with_diagnostics("Instant replay review", PlayContext("Sun"), event_index=12)
        assert isinstance(play, UnclassifiedPlay)
        assert diagnostic.kind == UNCLASSIFIED_PLAY
        assert diagnostic.event_index == 12
        assert diagnostic.text == "Instant replay review"

    def test_classified_has_no_diagnostic(self):
        """Test that a match produces no diagnostic."""
        _, diagnostic = classify_with_diagnostics("Kelsey Bone traveling", PlayContext("Sun"))
        assert diagnostic is None

    def test_whitespace_is_normalized(self):
        """Test that extra whitespace doesn't leak into fields."""
        play = classify("  Kelsey   Bone traveling ", PlayContext("Sun"))
        assert play.committed_by == "Kelsey Bone"
        assert play.description == "Kelsey Bone traveling"

    def test_deterministic(self):
        """Test that classifying twice gives equal plays."""
        description = "Ivory Latta makes 24-foot three point jumper (Tierra Ruffin-Pratt assists)"
        assert classify(description, PlayContext("Mystics")) == classify(description, PlayContext("Mystics"))

    def test_team_context(self):
        """Test that the context team is not taken for a player."""
        play = classify("Mystics turnover", PlayContext("Mystics"))
        assert play.committed_by is None
