"""Write module for outputting parsed games to JSON and text files."""

import json
import os
import tempfile
from pathlib import Path

import pandas as pd


def _index_key(summary: dict) -> tuple[str, str]:
    return summary.get("league") or "", summary["gameId"]


def write_index(games: list[dict], data_dir: str = "data") -> None:
    """
    Write/update data/index.json with one summary per game.

    Entries are keyed by (league, gameId), since ids from different leagues
    can collide. A summary for a game already in the index replaces it.
    Games are listed by league, then gameId, and each league's game count is
    kept alongside.

    Args:
        games: Game summary dicts with 'gameId' and, normally, 'league'
        data_dir: Base data directory (default "data")
    """
    index_path = Path(data_dir) / "index.json"

    by_key = {}
    if index_path.exists():
        with open(index_path) as f:
            for summary in json.load(f).get("games", []):
                by_key[_index_key(summary)] = summary
    by_key.update((_index_key(summary), summary) for summary in games)

    ordered = [by_key[key] for key in sorted(by_key)]
    league_counts: dict[str, int] = {}
    for league, _ in sorted(by_key):
        if league:
            league_counts[league] = league_counts.get(league, 0) + 1
    _write_json_atomic(index_path, {"leagues": league_counts, "games": ordered})


def write_game_data(
    game_id: str,
    events: list[dict],
    diagnostics: list[dict],
    text_lines: list[str],
    data_dir: str = "data",
) -> None:
    """
    Write data/games/{gameId}/events.json, diagnostics.json and plays.txt.

    Creates directory if needed. Writes every file atomically.

    Args:
        game_id: Game ID string
        events: Attribute set per event, in game order
        diagnostics: Non-fatal diagnostics as dicts
        text_lines: Rendered text file contents
        data_dir: Base data directory (default "data")
    """
    game_dir = Path(data_dir) / "games" / game_id
    game_dir.mkdir(parents=True, exist_ok=True)

    _write_json_atomic(game_dir / "events.json", events)
    _write_json_atomic(game_dir / "diagnostics.json", diagnostics)
    _write_text_atomic(game_dir / "plays.txt", "\n".join(text_lines) + "\n")


def write_events_csv(game_id: str, frame: pd.DataFrame, data_dir: str = "data") -> None:
    """Write data/games/{gameId}/events.csv, one row per event."""
    _write_text_atomic(Path(data_dir) / "games" / game_id / "events.csv", frame.to_csv(index=False))


def _write_json_atomic(file_path: Path, data: dict | list) -> None:
    """Write JSON to file atomically."""
    _write_text_atomic(file_path, json.dumps(data, indent=2))


def _write_text_atomic(file_path: Path, text: str) -> None:
    """
    Write text to file atomically using temp file + rename.

    Args:
        file_path: Target file path
        text: Contents to write
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Write to temp file in same directory
    temp_fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent, prefix=".tmp_", suffix=file_path.suffix
    )

    try:
        with os.fdopen(temp_fd, "w") as f:
            f.write(text)

        # Atomic rename
        os.replace(temp_path, file_path)
    except OSError:
        # Clean up temp file on error
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
