"""Load raw per-play rows from CSV into RawPlayRecords."""

from typing import Optional

import pandas as pd

from .diagnostics import log_error
from .errors import MalformedRecordError
from .events import RawPlayRecord

REQUIRED_COLUMNS = ["game_id", "period", "clock", "team", "description", "score"]


def _safe_int(val, default: int = 0) -> int:
    """Safely convert a value to int, handling NaN and string types."""
    if pd.isna(val):
        return default
    return int(float(val))


def _safe_str(val) -> str:
    """Convert a cell to a whitespace-normalized string; NaN becomes ''."""
    if pd.isna(val):
        return ""
    return " ".join(str(val).split())


def _coerce_id(val) -> str:
    """Coerce an ID value to string for safe comparison."""
    if pd.isna(val):
        return ""
    return str(int(val)) if isinstance(val, float) else str(val)


def load_playbyplay(path: str) -> Optional[pd.DataFrame]:
    """
    Read a play-by-play CSV.

    Args:
        path: Path to a CSV with at least the REQUIRED_COLUMNS

    Returns:
        DataFrame of play rows in file order, or None on failure
    """
    try:
        # Keep clocks like "9:05" and ids like "0022500001" as text
        df = pd.read_csv(path, dtype={"game_id": str, "clock": str, "score": str})
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        log_error(f"Error reading play-by-play from {path}: {e}")
        return None
    except Exception as e:
        log_error(f"Unexpected error reading play-by-play from {path}: {e}")
        return None

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        log_error(f"Play-by-play file {path} is missing columns: {', '.join(missing)}")
        return None
    return df


def split_games(df: pd.DataFrame) -> list[tuple[str, pd.DataFrame]]:
    """Split rows into (game_id, rows) pairs, keeping file order."""
    game_ids = df["game_id"].apply(_coerce_id)
    return [
        (game_id, df[game_ids == game_id])
        for game_id in game_ids.unique()
    ]


def records_from_frame(game_id: str, rows: pd.DataFrame) -> list[RawPlayRecord]:
    """
    Convert one game's rows into RawPlayRecords.

    event_index defaults to the 1-based row position within the game when
    the column is absent or empty.

    Raises:
        MalformedRecordError: if a period or event_index cell isn't numeric
    """
    has_index = "event_index" in rows.columns
    records = []
    for position, (_, row) in enumerate(rows.iterrows(), start=1):
        try:
            event_index = _safe_int(row["event_index"], position) if has_index else position
        except ValueError:
            raise MalformedRecordError("Event index is not a number", game_id, position, row["event_index"]) from None
        try:
            period = _safe_int(row["period"])
        except ValueError:
            raise MalformedRecordError("Period is not a number", game_id, event_index, row["period"]) from None
        records.append(RawPlayRecord(
            game_id=game_id,
            event_index=event_index,
            period=period,
            clock_text=_safe_str(row["clock"]),
            team=_safe_str(row["team"]),
            description=_safe_str(row["description"]),
            cumulative_score_text=_safe_str(row["score"]),
        ))
    return records


def game_teams(rows: pd.DataFrame) -> tuple[Optional[str], Optional[str]]:
    """Return (home_team, away_team) from optional columns, None when absent."""

    def first_value(column: str) -> Optional[str]:
        if column not in rows.columns:
            return None
        values = rows[column].dropna()
        if values.empty:
            return None
        return _safe_str(values.iloc[0]) or None

    return first_value("home_team"), first_value("away_team")
