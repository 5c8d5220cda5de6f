"""Transform module mapping parsed events to flat attribute sets."""

import pandas as pd

from .events import Event
from .game import Game

# Columns every attribute set carries, in output order. Variant-specific
# fields are inserted after playKind.
BASE_COLUMNS = [
    "gameId",
    "eventIndex",
    "period",
    "clockText",
    "secondsIntoGame",
    "secondsLeftInPeriod",
    "team",
    "playKind",
]
TRAILING_COLUMNS = ["awayScore", "homeScore", "label"]


def event_attributes(event: Event) -> dict:
    """
    Flatten one event into its attribute set.

    Keys come out in a fixed order, so identical input always serializes to
    identical output.

    Args:
        event: Parsed event

    Returns:
        Dict of base fields, variant fields, scores and label
    """
    attrs = {
        "gameId": event.game_id,
        "eventIndex": event.index,
        "period": event.period,
        "clockText": event.clock_text,
        "secondsIntoGame": event.seconds_into_game,
        "secondsLeftInPeriod": event.seconds_left_in_period,
        "team": event.team,
        "playKind": event.play.kind,
    }
    attrs.update(event.play.attributes())
    attrs["awayScore"] = event.away_score
    attrs["homeScore"] = event.home_score
    attrs["label"] = event.label
    return attrs


def transform_game(game: Game) -> list[dict]:
    """Return the attribute set of every event in game order."""
    return [event_attributes(event) for event in game.events]


def transform_game_summary(game: Game) -> dict:
    """
    Summarize a game for the index.

    Returns:
        Dict with game id, league, teams, final score, event and diagnostic counts
    """
    final = game.final_score()
    return {
        "gameId": game.game_id,
        "league": game.league,
        "home": game.home_team,
        "away": game.away_team,
        "homeScore": final.home,
        "awayScore": final.away,
        "events": len(game.events),
        "diagnostics": len(game.diagnostics),
    }


def events_to_frame(events: list[Event]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per event.

    Variant fields a play doesn't have are NaN. Column order is base columns,
    variant columns in first-seen order, then scores and label.
    """
    rows = [event_attributes(event) for event in events]
    variant_columns: list[str] = []
    for row in rows:
        for key in row:
            if key not in BASE_COLUMNS and key not in TRAILING_COLUMNS and key not in variant_columns:
                variant_columns.append(key)
    return pd.DataFrame(rows, columns=BASE_COLUMNS + variant_columns + TRAILING_COLUMNS)
