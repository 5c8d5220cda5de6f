"""Shared test fixtures for raw play-by-play records."""

import pandas as pd
import pytest

from playbyplay.events import RawPlayRecord
from playbyplay.periods import WNBA

GAME_ID = "400610636"

# (period, clock, team, description, score); Mystics are the away team
SAMPLE_PLAYS = [
    (1, "10:00", "Sun", "Stefanie Dolson vs. Kelsey Bone (Alex Bentley gains possession)", "0-0"),
    (1, "9:41", "Mystics", "Emma Meesseman enters the game for Stefanie Dolson", "0-0"),
    (1, "9:18", "Mystics", "Ivory Latta makes 24-foot three point jumper (Tierra Ruffin-Pratt assists)", "3-0"),
    (1, "9:02", "Sun", "Alex Bentley bad pass (Ivory Latta steals)", "3-0"),
    (1, "8:45", "Sun", "Kelsey Bone shooting foul (Emma Meesseman draws the foul)", "3-0"),
    (1, "8:45", "Mystics", "Emma Meesseman makes free throw 1 of 2", "4-0"),
    (1, "8:45", "Mystics", "Emma Meesseman misses free throw 2 of 2", "4-0"),
    (1, "8:43", "Sun", "Kelsey Bone defensive rebound", "4-0"),
    (1, "8:30", "Sun", "Kara Lawson enters the game for Alyssa Thomas", "4-0"),
    (1, "0:00", "Sun", "End of the 1st Quarter", "4-0"),
    (2, "9:45", "Sun", "Alyssa Thomas makes 2-foot layup", "4-2"),
    (2, "9:36", "Sun", "shot clock turnover", "4-2"),
]


def make_records(plays, game_id: str = GAME_ID) -> list[RawPlayRecord]:
    return [
        RawPlayRecord(game_id, i, period, clock, team, description, score)
        for i, (period, clock, team, description, score) in enumerate(plays, start=1)
    ]


@pytest.fixture
def wnba():
    return WNBA


@pytest.fixture
def sample_records() -> list[RawPlayRecord]:
    """A short, internally consistent WNBA game."""
    return make_records(SAMPLE_PLAYS)


@pytest.fixture
def sample_playbyplay_frame() -> pd.DataFrame:
    """Sample CSV rows for two games, the second with a broken clock."""
    rows = []
    for period, clock, team, description, score in SAMPLE_PLAYS:
        rows.append({
            "game_id": GAME_ID,
            "period": period,
            "clock": clock,
            "team": team,
            "description": description,
            "score": score,
            "home_team": "Sun",
            "away_team": "Mystics",
        })
    rows.append({
        "game_id": "400610637",
        "period": 1,
        "clock": "9:50",
        "team": "Sparks",
        "description": "Candace Parker makes 8-foot jumper",
        "score": "2-0",
        "home_team": "Dream",
        "away_team": "Sparks",
    })
    rows.append({
        "game_id": "400610637",
        "period": 1,
        "clock": "11:30",
        "team": "Dream",
        "description": "Angel McCoughtry traveling",
        "score": "2-0",
        "home_team": "Dream",
        "away_team": "Sparks",
    })
    return pd.DataFrame(rows)
