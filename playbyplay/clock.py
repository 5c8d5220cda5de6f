"""Clock parsing and elapsed-time arithmetic."""

import re
from typing import NamedTuple

from .errors import ClockOutOfRangeError, MalformedClockError
from .periods import PeriodSchedule

_CLOCK_RE = re.compile(r"^(\d+):(\d{2})$")


class ClockReading(NamedTuple):
    """A point in a period: period number and seconds left on the clock."""

    period: int
    seconds_remaining_in_period: int


def parse_clock(clock_text: str) -> int:
    """
    Parse a countdown clock string like '9:18' into seconds.

    Raises:
        MalformedClockError: if the text isn't M:SS or seconds are 60 or more
    """
    match = _CLOCK_RE.match(str(clock_text).strip())
    if match is None:
        raise MalformedClockError("Clock is not in M:SS format", clock_text)

    minutes, seconds = int(match.group(1)), int(match.group(2))
    if seconds >= 60:
        raise MalformedClockError("Clock seconds out of range", clock_text)
    return minutes * 60 + seconds


def clock_reading(schedule: PeriodSchedule, period: int, clock_text: str) -> ClockReading:
    """
    Validate a (period, clock) pair against a league schedule.

    Raises:
        MalformedClockError: if the clock text can't be parsed
        ClockOutOfRangeError: if the period is below 1 or the clock shows more
            time than the period lasts
    """
    if period < 1:
        raise ClockOutOfRangeError(f"Invalid period {period}", clock_text)

    remaining = parse_clock(clock_text)
    duration = schedule.period_seconds(period)
    if remaining > duration:
        raise ClockOutOfRangeError(
            f"Clock exceeds {duration}s length of period {period}", clock_text
        )
    return ClockReading(period, remaining)


def seconds_remaining(schedule: PeriodSchedule, period: int, clock_text: str) -> int:
    """Return seconds left in the period."""
    return clock_reading(schedule, period, clock_text).seconds_remaining_in_period


def elapsed_seconds(schedule: PeriodSchedule, period: int, clock_text: str) -> int:
    """
    Return seconds elapsed since the start of the game.

    All earlier periods count in full; the current period counts the time
    already run off its clock.
    """
    return reading_elapsed_seconds(schedule, clock_reading(schedule, period, clock_text))


def reading_elapsed_seconds(schedule: PeriodSchedule, reading: ClockReading) -> int:
    """Return elapsed game seconds for an already validated clock reading."""
    elapsed_in_period = schedule.period_seconds(reading.period) - reading.seconds_remaining_in_period
    return schedule.period_start_seconds(reading.period) + elapsed_in_period
