"""Cumulative score parsing and per-event point deltas."""

import re
from typing import NamedTuple

from .diagnostics import POINT_MISMATCH, Diagnostic
from .errors import MalformedScoreError
from .plays import ShotPlay

_SCORE_RE = re.compile(r"^(\d+)-(\d+)$")


class Score(NamedTuple):
    away: int
    home: int


class ScoreDelta(NamedTuple):
    """Points scored by each side on a single event."""

    away: int
    home: int

    @property
    def total(self) -> int:
        return self.away + self.home


def parse_score(score_text: str) -> Score:
    """
    Parse an 'away-home' score string such as '18-24' or '18 - 24'.

    Raises:
        MalformedScoreError: if the text isn't two dash-separated integers
    """
    compact = "".join(str(score_text).split())
    match = _SCORE_RE.match(compact)
    if match is None:
        raise MalformedScoreError(f"Score is not in away-home format: {score_text!r}")
    return Score(int(match.group(1)), int(match.group(2)))


def score_deltas(scores: list[Score]) -> list[ScoreDelta]:
    """Return the points added at each position, starting from 0-0."""
    deltas = []
    previous = Score(0, 0)
    for score in scores:
        deltas.append(ScoreDelta(score.away - previous.away, score.home - previous.home))
        previous = score
    return deltas


def expected_points(play) -> int:
    """Points a play should add to the combined score."""
    if isinstance(play, ShotPlay):
        return play.points
    return 0


def check_points(events) -> list[Diagnostic]:
    """
    Cross-check each event's computed points against the cumulative score.

    Flags descriptions whose shot-type phrasing produced a point value the
    score line doesn't agree with, and scoring changes on non-shot plays.
    """
    diagnostics = []
    deltas = score_deltas([Score(e.away_score, e.home_score) for e in events])
    for event, delta in zip(events, deltas):
        expected = expected_points(event.play)
        if delta.total != expected:
            diagnostics.append(Diagnostic(
                POINT_MISMATCH,
                f"Score moved by {delta.total} but play accounts for {expected}",
                event_index=event.index,
                text=event.play.description,
            ))
    return diagnostics
