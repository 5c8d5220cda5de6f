"""Tests for parse_game and the Game consumer."""

from datetime import datetime

import pytest

from playbyplay.diagnostics import (
    CLOCK_REGRESSION,
    POINT_MISMATCH,
    ROSTER_INCONSISTENCY,
    UNCLASSIFIED_PLAY,
)
from playbyplay.errors import MalformedClockError
from playbyplay.game import build_rosters, parse_game
from playbyplay.periods import NBA

from conftest import GAME_ID, SAMPLE_PLAYS, make_records


def _parse_sample(records, schedule, **kwargs):
    return parse_game(GAME_ID, records, schedule, home_team="Sun", away_team="Mystics", **kwargs)


class TestParseGame:
    """Tests for parse_game."""

    def test_parses_all_events(self, wnba, sample_records):
        """Test that every record becomes an event in source order."""
        game = _parse_sample(sample_records, wnba)
        assert len(game.events) == len(SAMPLE_PLAYS)
        assert [e.index for e in game.events] == list(range(1, len(SAMPLE_PLAYS) + 1))
        assert game.diagnostics == []

    def test_elapsed_time_is_monotonic(self, wnba, sample_records):
        """Test that seconds into game never decreases in source order."""
        game = _parse_sample(sample_records, wnba)
        elapsed = [e.seconds_into_game for e in game.events]
        assert elapsed == sorted(elapsed)

    def test_neighbour_lookup(self, wnba, sample_records):
        """Test previous/next lookups and their symmetry."""
        game = _parse_sample(sample_records, wnba)
        events = game.events
        assert game.previous(events[0]) is None
        assert game.next(events[-1]) is None
        for i in range(len(events) - 1):
            assert game.next(events[i]) is events[i + 1]
            assert game.previous(events[i + 1]) is events[i]
            assert game.previous(game.next(events[i])) is events[i]

    def test_clock_error_aborts_game(self, wnba):
        """Test that a bad clock raises with game, source and event context."""
        plays = list(SAMPLE_PLAYS)
        plays[2] = (1, "9:1", "Mystics", "Ivory Latta makes 2-foot layup", "2-0")
        with pytest.raises(MalformedClockError) as exc_info:
            _parse_sample(make_records(plays), wnba, source="pbp-400610636.html")
        error = exc_info.value
        assert error.game_id == GAME_ID
        assert error.event_index == 3
        assert error.source == "pbp-400610636.html"
        assert error.clock_text == "9:1"

    def test_unclassified_play_does_not_abort(self, wnba):
        """Test that an unknown description degrades to a diagnostic."""
        plays = list(SAMPLE_PLAYS)
        plays.insert(3, (1, "9:10", "Sun", "Instant replay review", "3-0"))
        game = _parse_sample(make_records(plays), wnba)
        assert len(game.events) == len(plays)
        assert [d.kind for d in game.diagnostics] == [UNCLASSIFIED_PLAY]
        assert game.diagnostics[0].event_index == 4
        assert game.events[3].play.kind == "unclassified"

    def test_point_mismatch(self, wnba):
        """Test that the score cross-check flags an off point value."""
        plays = list(SAMPLE_PLAYS)
        plays[2] = (1, "9:18", "Mystics", "Ivory Latta makes 24-foot jumper", "3-0")
        game = _parse_sample(make_records(plays), wnba)
        assert [d.kind for d in game.diagnostics] == [POINT_MISMATCH]
        assert game.diagnostics[0].event_index == 3

    def test_clock_regression(self, wnba):
        """Test that a play out of order is flagged but kept."""
        plays = list(SAMPLE_PLAYS)
        plays[3] = (1, "9:30", "Sun", "Alex Bentley bad pass (Ivory Latta steals)", "3-0")
        game = _parse_sample(make_records(plays), wnba)
        assert [d.kind for d in game.diagnostics] == [CLOCK_REGRESSION]
        assert len(game.events) == len(plays)

    def test_empty_game(self, wnba):
        """Test parsing a game with no records."""
        game = parse_game(GAME_ID, [], wnba, home_team="Sun", away_team="Mystics")
        assert game.events == []
        assert str(game).startswith("Empty Game: ")


class TestRosters:
    """Tests for roster construction from substitution plays."""

    def test_rosters(self, wnba, sample_records):
        """Test home and away rosters."""
        game = _parse_sample(sample_records, wnba)
        assert game.rosters() == {
            "Sun": ["Alyssa Thomas", "Kara Lawson"],
            "Mystics": ["Emma Meesseman", "Stefanie Dolson"],
        }

    def test_roster_inconsistency(self, wnba):
        """Test that a player on an unknown team is excluded and reported."""
        plays = list(SAMPLE_PLAYS)
        plays.append((2, "9:00", "Sparks", "Candace Parker enters the game", "4-2"))
        game = _parse_sample(make_records(plays), wnba)
        assert "Candace Parker" not in game.rosters()["Sun"]
        assert "Candace Parker" not in game.rosters()["Mystics"]
        assert [d.kind for d in game.diagnostics] == [ROSTER_INCONSISTENCY]
        assert game.diagnostics[0].text == "Candace Parker"

    def test_rosters_without_known_teams(self, wnba, sample_records):
        """Test that observed teams are used when home/away are unknown."""
        game = parse_game(GAME_ID, sample_records, wnba)
        rosters, diagnostics = build_rosters(game.events, None, None)
        assert sorted(rosters) == ["Mystics", "Sun"]
        assert diagnostics == []


class TestRendering:
    """Tests for the game's string and text file renderings."""

    def test_str(self, wnba, sample_records):
        """Test the one-line game description."""
        game = _parse_sample(sample_records, wnba, game_time=datetime(2015, 6, 5, 19, 0))
        assert str(game) == f"WNBA game: Mystics (4) at Sun (2) on 2015-06-05 - {len(SAMPLE_PLAYS)} events"

    def test_final_score_override(self, wnba, sample_records):
        """Test that recorded final scores take precedence."""
        game = _parse_sample(sample_records, wnba, home_score=70, away_score=69)
        assert game.final_score() == (69, 70)

    def test_text_file_contents(self, wnba, sample_records):
        """Test header lines followed by one line per event."""
        game = _parse_sample(
            sample_records, wnba,
            game_time=datetime(2015, 6, 5, 19, 0),
            location="Mohegan Sun Arena",
        )
        lines = game.text_file_contents()
        assert lines[0] == str(game)
        assert lines[1] == "Mohegan Sun Arena\t2015-06-05T19:00:00"
        assert len(lines) == len(SAMPLE_PLAYS) + 2
        assert lines[4] == game.events[2].text_line()

    def test_league(self, sample_records):
        """Test that the league comes from the schedule."""
        game = _parse_sample(sample_records, NBA)
        assert game.league == "NBA"
