"""Exceptions raised while parsing play-by-play records.

Only these exceptions abort a game. Anything recoverable is reported as a
Diagnostic instead (see diagnostics.py).
"""

from typing import Optional


class PlayByPlayError(Exception):
    """Base class for fatal play-by-play errors."""


class ClockError(PlayByPlayError, ValueError):
    """
    A clock reading that can't anchor an event in game time.

    Carries the raw clock text plus whatever game context was known when the
    error was raised. Context is filled in as the error propagates upward via
    with_context().
    """

    def __init__(
        self,
        message: str,
        clock_text: str,
        game_id: Optional[str] = None,
        event_index: Optional[int] = None,
        source: Optional[str] = None,
    ):
        self.message = message
        self.clock_text = clock_text
        self.game_id = game_id
        self.event_index = event_index
        self.source = source
        super().__init__(str(self))

    def with_context(
        self,
        game_id: Optional[str] = None,
        event_index: Optional[int] = None,
        source: Optional[str] = None,
    ) -> "ClockError":
        """Return a copy of this error with game/event context attached."""
        return type(self)(
            self.message,
            self.clock_text,
            game_id=game_id if game_id is not None else self.game_id,
            event_index=event_index if event_index is not None else self.event_index,
            source=source if source is not None else self.source,
        )

    def __str__(self) -> str:
        where = []
        if self.game_id is not None:
            where.append(f"game {self.game_id}")
        if self.source:
            where.append(f"source {self.source}")
        if self.event_index is not None:
            where.append(f"event {self.event_index}")
        location = f" ({', '.join(where)})" if where else ""
        return f"{self.message}: {self.clock_text!r}{location}"


class MalformedClockError(ClockError):
    """Clock text is not M:SS or has 60+ seconds."""


class ClockOutOfRangeError(ClockError):
    """Clock value exceeds the period length, or the period number is invalid."""


class UnrecognizedLeagueError(PlayByPlayError, KeyError):
    """No period schedule is known for a league signal."""

    def __init__(self, league: str):
        self.league = league
        super().__init__(league)

    def __str__(self) -> str:
        return f"Unrecognized league: {self.league!r}"


class MalformedRecordError(PlayByPlayError, ValueError):
    """An input row whose period or event index isn't a number."""

    def __init__(self, message: str, game_id: str, event_index: int, value):
        self.game_id = game_id
        self.event_index = event_index
        self.value = value
        super().__init__(f"{message}: {value!r} (game {game_id}, event {event_index})")


class MalformedScoreError(ValueError):
    """Cumulative score text is not 'away-home'. Recoverable, never fatal."""
