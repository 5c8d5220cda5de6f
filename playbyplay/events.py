"""Events: a classified play anchored in game time and in the game's sequence."""

from dataclasses import dataclass, replace
from typing import NamedTuple, Optional

from .classify import PlayContext, classify_with_diagnostics
from .clock import ClockReading, clock_reading, reading_elapsed_seconds
from .diagnostics import MALFORMED_SCORE, Diagnostic
from .errors import ClockError, MalformedScoreError
from .periods import PeriodSchedule
from .plays import Play
from .score import Score, parse_score


class RawPlayRecord(NamedTuple):
    """One play-by-play line as handed over by the scraper."""

    game_id: str
    event_index: int
    period: int
    clock_text: str
    team: str
    description: str
    cumulative_score_text: str


@dataclass(frozen=True)
class Event:
    """
    A Play plus its game-relative identity.

    `position` is the event's slot in its game's event list;
    `previous_position` / `next_position` point at the neighbouring slots and
    are filled in by link_events() once the whole game is known.
    """

    game_id: str
    index: int
    period: int
    clock_text: str
    clock: ClockReading
    seconds_into_game: int
    team: str
    play: Play
    away_score: int
    home_score: int
    position: Optional[int] = None
    previous_position: Optional[int] = None
    next_position: Optional[int] = None

    @property
    def seconds_left_in_period(self) -> int:
        return self.clock.seconds_remaining_in_period

    @property
    def description(self) -> str:
        return self.play.description

    @property
    def label(self) -> str:
        return f"{self.team}: {self.play.description}"

    def text_line(self) -> str:
        """Render the event as one tab-separated line."""
        return "\t".join([
            str(self.index),
            str(self.period),
            self.clock_text,
            self.label,
            f"{self.away_score}-{self.home_score}",
        ])


def build_event(
    record: RawPlayRecord,
    schedule: PeriodSchedule,
    previous_score: Score = Score(0, 0),
) -> tuple[Event, list[Diagnostic]]:
    """
    Turn one raw record into an Event.

    Args:
        record: Raw per-play record
        schedule: Period schedule of the game's league
        previous_score: Cumulative score after the prior event, used when this
            record's score text can't be parsed

    Returns:
        Tuple of (event, non-fatal diagnostics for this record)

    Raises:
        ClockError: if the clock can't be anchored; carries game id and
            event index
    """
    diagnostics = []

    try:
        reading = clock_reading(schedule, record.period, record.clock_text)
    except ClockError as e:
        raise e.with_context(game_id=record.game_id, event_index=record.event_index) from e

    elapsed = reading_elapsed_seconds(schedule, reading)

    try:
        score = parse_score(record.cumulative_score_text)
    except MalformedScoreError as e:
        score = previous_score
        diagnostics.append(Diagnostic(
            MALFORMED_SCORE, str(e), event_index=record.event_index,
            text=record.cumulative_score_text,
        ))

    play, diagnostic = classify_with_diagnostics(
        record.description, PlayContext(team=record.team), event_index=record.event_index
    )
    if diagnostic is not None:
        diagnostics.append(diagnostic)

    event = Event(
        game_id=record.game_id,
        index=record.event_index,
        period=record.period,
        clock_text=record.clock_text,
        clock=reading,
        seconds_into_game=elapsed,
        team=record.team,
        play=play,
        away_score=score.away,
        home_score=score.home,
    )
    return event, diagnostics


def link_events(events: list[Event]) -> list[Event]:
    """
    Assign positions and neighbour links in a single pass.

    The first event has no previous, the last has no next.
    """
    last = len(events) - 1
    return [
        replace(
            event,
            position=i,
            previous_position=i - 1 if i > 0 else None,
            next_position=i + 1 if i < last else None,
        )
        for i, event in enumerate(events)
    ]
