"""A parsed game: its ordered events plus the checks that span the whole sequence."""

from datetime import datetime
from typing import Iterable, Optional

from .diagnostics import (
    CLOCK_REGRESSION,
    ROSTER_INCONSISTENCY,
    Diagnostic,
    log_warning,
    report,
)
from .errors import ClockError
from .events import Event, RawPlayRecord, build_event, link_events
from .periods import PeriodSchedule
from .plays import EnterPlay, ExitPlay, clean_name
from .score import Score, check_points


class Game:
    """
    Ordered events of one game plus team, score and date metadata.

    The game owns its event list; events refer to their neighbours by
    position in that list, resolved through previous() and next().
    """

    def __init__(
        self,
        game_id: str,
        events: list[Event],
        schedule: PeriodSchedule,
        home_team: Optional[str] = None,
        away_team: Optional[str] = None,
        home_score: Optional[int] = None,
        away_score: Optional[int] = None,
        game_time: Optional[datetime] = None,
        location: Optional[str] = None,
        source: Optional[str] = None,
        diagnostics: Optional[list[Diagnostic]] = None,
    ):
        self.game_id = game_id
        self.events = events
        self.schedule = schedule
        self.home_team = home_team
        self.away_team = away_team
        self.home_score = home_score
        self.away_score = away_score
        self.game_time = game_time
        self.location = location
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else []

    @property
    def league(self) -> str:
        return self.schedule.league_name

    def previous(self, event: Event) -> Optional[Event]:
        if event.previous_position is None:
            return None
        return self.events[event.previous_position]

    def next(self, event: Event) -> Optional[Event]:
        if event.next_position is None:
            return None
        return self.events[event.next_position]

    def rosters(self) -> dict[str, list[str]]:
        """Return {team: sorted player names} for the home and away teams."""
        rosters, _ = build_rosters(self.events, self.home_team, self.away_team)
        return rosters

    def text_file_contents(self) -> list[str]:
        """Header lines followed by one rendered line per event."""
        game_time = self.game_time.isoformat() if self.game_time else ""
        header = [
            str(self),
            f"{self.location or 'Unknown Location'}\t{game_time}",
        ]
        return header + [event.text_line() for event in self.events]

    def final_score(self) -> Score:
        """Final score as recorded, falling back to the last event's cumulative score."""
        final = self.events[-1] if self.events else None
        away = self.away_score if self.away_score is not None else (final.away_score if final else 0)
        home = self.home_score if self.home_score is not None else (final.home_score if final else 0)
        return Score(away, home)

    def __str__(self) -> str:
        away_score, home_score = self.final_score()
        date = self.game_time.strftime("%Y-%m-%d") if self.game_time else "unknown date"
        s = f"{self.away_team} ({away_score}) at {self.home_team} ({home_score}) on {date}"
        if not self.events:
            return f"Empty Game: {s}"
        return f"{self.league} game: {s} - {len(self.events)} events"


def _player_teams(events: Iterable[Event]) -> list[tuple[str, str]]:
    """(player, team) pairs from substitution plays, in game order."""
    pairs = []
    for event in events:
        play = event.play
        if isinstance(play, EnterPlay):
            pairs.append((play.player_entering, play.team))
            if play.player_exiting:
                pairs.append((play.player_exiting, play.team))
        elif isinstance(play, ExitPlay):
            pairs.append((play.player_leaving, play.team))
    return pairs


def build_rosters(
    events: Iterable[Event],
    home_team: Optional[str],
    away_team: Optional[str],
) -> tuple[dict[str, list[str]], list[Diagnostic]]:
    """
    Build home and away rosters from substitution plays.

    A player whose team matches neither side is left off both rosters and
    reported as a roster inconsistency.

    Returns:
        Tuple of ({team: sorted player names}, diagnostics)
    """
    home = clean_name(home_team)
    away = clean_name(away_team)
    player_team: dict[str, str] = {}
    for player, team in _player_teams(events):
        player_team.setdefault(player, team)

    # Without known sides, every team seen in the substitutions gets a roster.
    if home is None and away is None:
        sides = sorted(set(player_team.values()))
    else:
        sides = [team for team in (home, away) if team is not None]
    rosters: dict[str, list[str]] = {team: [] for team in sides}

    diagnostics = []
    for player, team in sorted(player_team.items()):
        if team in rosters:
            rosters[team].append(player)
        else:
            diagnostics.append(Diagnostic(
                ROSTER_INCONSISTENCY,
                f"Player {player} has team {team} that does not match "
                f"home team {home} or away team {away}",
                text=player,
            ))
    return rosters, diagnostics


def parse_game(
    game_id: str,
    records: Iterable[RawPlayRecord],
    schedule: PeriodSchedule,
    home_team: Optional[str] = None,
    away_team: Optional[str] = None,
    home_score: Optional[int] = None,
    away_score: Optional[int] = None,
    game_time: Optional[datetime] = None,
    location: Optional[str] = None,
    source: Optional[str] = None,
) -> Game:
    """
    Parse one game's raw records into a linked, checked Game.

    Records must already be in source order. Clock problems abort the whole
    game; everything else is collected in Game.diagnostics and logged.

    Args:
        game_id: Game ID string
        records: Raw per-play records in source order
        schedule: Period schedule for the game's league
        home_team: Home team name (used for rosters and rendering)
        away_team: Away team name
        home_score: Final home score (defaults to the last event's score)
        away_score: Final away score
        game_time: Tip-off time
        location: Arena or city
        source: Source identifier (e.g. filename) for error messages

    Returns:
        Game with linked events and diagnostics

    Raises:
        ClockError: if any record's clock can't be anchored
    """
    events: list[Event] = []
    diagnostics: list[Diagnostic] = []
    score = Score(0, 0)
    last_elapsed = 0

    for record in records:
        try:
            event, event_diagnostics = build_event(record, schedule, previous_score=score)
        except ClockError as e:
            raise e.with_context(game_id=game_id, source=source) from e

        if event.seconds_into_game < last_elapsed:
            event_diagnostics.append(Diagnostic(
                CLOCK_REGRESSION,
                f"Game time went back from {last_elapsed}s to {event.seconds_into_game}s",
                event_index=event.index,
                text=record.clock_text,
            ))
        last_elapsed = event.seconds_into_game
        score = Score(event.away_score, event.home_score)

        events.append(event)
        diagnostics.extend(event_diagnostics)

    if not events:
        log_warning(f"No events read from {source or game_id}")

    events = link_events(events)
    diagnostics.extend(check_points(events))

    teams = {team for _, team in _player_teams(events)}
    if events and len(teams) != 2:
        log_warning(f"Found entry plays with invalid number of teams {len(teams)} for game {game_id}")
    _, roster_diagnostics = build_rosters(events, home_team, away_team)
    diagnostics.extend(roster_diagnostics)

    for diagnostic in diagnostics:
        report(diagnostic, game_id)

    return Game(
        game_id,
        events,
        schedule,
        home_team=home_team,
        away_team=away_team,
        home_score=home_score,
        away_score=away_score,
        game_time=game_time,
        location=location,
        source=source,
        diagnostics=diagnostics,
    )
