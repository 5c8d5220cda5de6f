"""Non-fatal diagnostics and timestamped stderr logging."""

import sys
from datetime import datetime
from typing import NamedTuple, Optional

UNCLASSIFIED_PLAY = "unclassified-play"
MALFORMED_SCORE = "malformed-score"
POINT_MISMATCH = "point-mismatch"
CLOCK_REGRESSION = "clock-regression"
ROSTER_INCONSISTENCY = "roster-inconsistency"


class Diagnostic(NamedTuple):
    """A recoverable problem found while parsing one game."""

    kind: str
    message: str
    event_index: Optional[int] = None
    text: Optional[str] = None


def _log(level: str, msg: str) -> None:
    timestamp = datetime.now().isoformat()
    print(f"[{timestamp}] {level}: {msg}", file=sys.stderr, flush=True)


def log_error(msg: str) -> None:
    """Log timestamped error to stderr."""
    _log("ERROR", msg)


def log_warning(msg: str) -> None:
    """Log timestamped warning to stderr."""
    _log("WARNING", msg)


def report(diagnostic: Diagnostic, game_id: Optional[str] = None) -> Diagnostic:
    """Log a diagnostic as a warning and hand it back for collection."""
    prefix = f"game {game_id}: " if game_id is not None else ""
    if diagnostic.event_index is not None:
        prefix += f"event {diagnostic.event_index}: "
    log_warning(f"{prefix}{diagnostic.message}")
    return diagnostic
