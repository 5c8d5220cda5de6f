"""League period schedules: how many periods, and how long each one runs."""

from typing import NamedTuple

from .errors import UnrecognizedLeagueError


class PeriodSchedule(NamedTuple):
    """
    Period layout for one league.

    Regulation is `regulation_periods` periods of `regulation_period_seconds`
    each (four quarters, or two halves). Every period after regulation is an
    overtime period of `overtime_period_seconds`.
    """

    regulation_periods: int
    regulation_period_seconds: int
    overtime_period_seconds: int
    league_name: str

    def is_overtime(self, period: int) -> bool:
        return period > self.regulation_periods

    def period_seconds(self, period: int) -> int:
        """Return the duration of a period in seconds."""
        if self.is_overtime(period):
            return self.overtime_period_seconds
        return self.regulation_period_seconds

    def period_start_seconds(self, period: int) -> int:
        """Return elapsed game seconds at the start of a period."""
        if period <= self.regulation_periods:
            return (period - 1) * self.regulation_period_seconds
        regulation = self.regulation_periods * self.regulation_period_seconds
        return regulation + (period - 1 - self.regulation_periods) * self.overtime_period_seconds


WNBA = PeriodSchedule(4, 600, 300, "WNBA")
NBA = PeriodSchedule(4, 720, 300, "NBA")
NCAAW = PeriodSchedule(2, 1200, 300, "NCAAW")
NCAAM = PeriodSchedule(2, 1200, 300, "NCAAM")

LEAGUE_SCHEDULES: dict[str, PeriodSchedule] = {
    schedule.league_name: schedule for schedule in (WNBA, NBA, NCAAW, NCAAM)
}


def schedule_for_league(league: str) -> PeriodSchedule:
    """
    Look up the period schedule for a league signal such as "wnba" or " NBA ".

    Raises:
        UnrecognizedLeagueError: if no schedule is known for the league
    """
    key = str(league).strip().upper()
    try:
        return LEAGUE_SCHEDULES[key]
    except KeyError:
        raise UnrecognizedLeagueError(league) from None
