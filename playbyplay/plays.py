"""
Play variants and the text patterns that recognize them.

Each variant owns an ordered tuple of (pattern, builder) sub-patterns. The
first pattern that matches the whole description wins, so more specific
phrasings must come before the broad ones they overlap with (e.g. "shot clock
turnover" before "<player> turnover").
"""

import re
from dataclasses import dataclass, fields
from typing import Callable, ClassVar, Optional

Builder = Callable[[str, "re.Match[str]", str], "Play"]


def clean_name(name: Optional[str]) -> Optional[str]:
    """Normalize a player or team name so every reference uses one spelling."""
    if name is None:
        return None
    cleaned = re.sub(r"\s+'s\b", "'s", " ".join(name.split()))
    return cleaned or None


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _player_unless_team(name: str, team: str) -> Optional[str]:
    """Return the cleaned name, or None when the actor is the team itself."""
    cleaned = clean_name(name)
    team_name = clean_name(team)
    if cleaned is not None and team_name is not None and cleaned.lower() == team_name.lower():
        return None
    return cleaned


@dataclass(frozen=True)
class Play:
    """Base class for the semantic part of one play-by-play line."""

    description: str

    kind: ClassVar[str] = "play"
    patterns: ClassVar[tuple[tuple["re.Pattern[str]", Builder], ...]] = ()

    @classmethod
    def matches(cls, description: str) -> bool:
        return any(pattern.match(description) for pattern, _ in cls.patterns)

    @classmethod
    def extract(cls, description: str, team: str = "") -> Optional["Play"]:
        """Build this variant from the first matching sub-pattern, or None."""
        for pattern, build in cls.patterns:
            match = pattern.match(description)
            if match:
                return build(description, match, team)
        return None

    def attributes(self) -> dict:
        """Variant-specific fields as camelCase keys; unset optional fields are left out."""
        attrs = {}
        for field in fields(self):
            if field.name == "description":
                continue
            value = getattr(self, field.name)
            if value is not None:
                attrs[_camel(field.name)] = value
        return attrs


# --- Shots ---

def _shot_points(made: bool, shot_type: str) -> int:
    if not made:
        return 0
    lowered = shot_type.lower()
    if "free throw" in lowered:
        return 1
    if "three point" in lowered:
        return 3
    return 2


def _build_shot(description: str, match: "re.Match[str]", team: str) -> "ShotPlay":
    made = match.group("result").lower() == "makes"
    shot_type = match.group("shot_type").strip()
    return ShotPlay(
        description=description,
        shooter=clean_name(match.group("shooter")),
        shot_type=shot_type,
        made=made,
        points=_shot_points(made, shot_type),
        assisted_by=clean_name(match.group("assisted_by")),
    )


@dataclass(frozen=True)
class ShotPlay(Play):
    """Field goal or free throw attempt: 'X makes 13-foot jumper (Y assists)'."""

    shooter: str
    shot_type: str
    made: bool
    points: int
    assisted_by: Optional[str] = None

    kind: ClassVar[str] = "shot"
    patterns: ClassVar = (
        (
            re.compile(
                r"^(?P<shooter>.+?) (?P<result>makes|misses) (?P<shot_type>.+?)"
                r"(?: \((?P<assisted_by>.+) assists\))?$",
                re.IGNORECASE,
            ),
            _build_shot,
        ),
    )


# --- Blocks ---

def _build_block(description: str, match: "re.Match[str]", team: str) -> "BlockPlay":
    return BlockPlay(
        description=description,
        blocked_by=clean_name(match.group("blocked_by")),
        shooter=clean_name(match.group("shooter")),
        shot_type=match.group("shot_type").strip(),
    )


@dataclass(frozen=True)
class BlockPlay(Play):
    """'X blocks Y 's 8-foot jumper'"""

    blocked_by: str
    shooter: str
    shot_type: str

    kind: ClassVar[str] = "block"
    patterns: ClassVar = (
        (
            re.compile(
                r"^(?P<blocked_by>.+?) blocks (?P<shooter>.+?)\s?'s? (?P<shot_type>.+)$",
                re.IGNORECASE,
            ),
            _build_block,
        ),
    )


# --- Turnovers ---

# Longer phrases first: alternation order decides between overlapping phrases.
TURNOVER_PHRASES = (
    "out-of-bounds bad pass turnover",
    "out-of-bounds lost ball turnover",
    "out-of-bounds bad pass",
    "out-of-bounds lost ball",
    "offensive foul turnover",
    "lost ball turnover",
    "bad pass turnover",
    "traveling turnover",
    "double dribble turnover",
    "backcourt turnover",
    "step out of bounds turnover",
    "bad pass",
    "lost ball",
    "traveling",
    "double dribble",
    "discontinued dribble",
    "kicked ball violation",
    "lane violation",
    "offensive goaltending",
    "palming",
    "backcourt",
    "3 second violation",
    "5 second violation",
    "8 second violation",
    "step out of bounds",
    "turnover",
)


def turnover_type(phrase: str) -> str:
    """
    Normalize a turnover phrase.

    Lower-case phrasing ("lost ball turnover") is kept as found. Capitalized
    phrasing ("Out-of-Bounds Bad Pass Turnover") is lower-cased and loses its
    trailing "turnover".
    """
    phrase = " ".join(phrase.split())
    if phrase.islower():
        return phrase
    normalized = phrase.lower()
    if normalized != "turnover" and normalized.endswith(" turnover"):
        normalized = normalized[: -len(" turnover")]
    return normalized


def _build_shot_clock_turnover(description: str, match: "re.Match[str]", team: str) -> "TurnoverPlay":
    return TurnoverPlay(description=description, turnover_type="shot clock")


def _build_turnover(description: str, match: "re.Match[str]", team: str) -> "TurnoverPlay":
    return TurnoverPlay(
        description=description,
        turnover_type=turnover_type(match.group("phrase")),
        committed_by=_player_unless_team(match.group("player"), team),
        stolen_by=clean_name(match.group("stolen_by")),
    )


@dataclass(frozen=True)
class TurnoverPlay(Play):
    """Turnover or violation, optionally with a steal: 'X bad pass (Y steals)'."""

    turnover_type: str
    committed_by: Optional[str] = None
    stolen_by: Optional[str] = None

    kind: ClassVar[str] = "turnover"
    patterns: ClassVar = (
        # Team-level; must precede the generic pattern, which would read
        # "shot clock" as a player name.
        (
            re.compile(r"^(?:.+ )?shot clock (?:turnover|violation)$", re.IGNORECASE),
            _build_shot_clock_turnover,
        ),
        (
            re.compile(
                r"^(?P<player>.+?) (?P<phrase>"
                + "|".join(re.escape(p) for p in TURNOVER_PHRASES)
                + r")(?: \((?P<stolen_by>.+?) steals\))?$",
                re.IGNORECASE,
            ),
            _build_turnover,
        ),
    )


# --- Fouls ---

FOUL_TYPES = (
    "personal take foul",
    "personal block foul",
    "transition take foul",
    "shooting block foul",
    "shooting foul",
    "personal foul",
    "offensive foul",
    "offensive charge",
    "loose ball foul",
    "away from play foul",
    "clear path foul",
    "inbound foul",
    "flagrant foul type 1",
    "flagrant foul type 2",
    "technical foul",
    "foul",
)


def _build_defensive_three_seconds(description: str, match: "re.Match[str]", team: str) -> "FoulPlay":
    return FoulPlay(
        description=description,
        foul_type="defensive 3-seconds",
        committed_by=_player_unless_team(match.group("player"), team),
        is_technical=True,
    )


def _build_foul(description: str, match: "re.Match[str]", team: str) -> "FoulPlay":
    foul_type = " ".join(match.group("foul_type").lower().split())
    return FoulPlay(
        description=description,
        foul_type=foul_type,
        committed_by=_player_unless_team(match.group("player"), team),
        drawn_by=clean_name(match.group("drawn_by")),
        is_offensive="offensive" in foul_type,
        is_technical="technical" in foul_type,
    )


@dataclass(frozen=True)
class FoulPlay(Play):
    """'X shooting foul (Y draws the foul)'"""

    foul_type: str
    committed_by: Optional[str] = None
    drawn_by: Optional[str] = None
    is_offensive: bool = False
    is_technical: bool = False

    kind: ClassVar[str] = "foul"
    patterns: ClassVar = (
        (
            re.compile(r"^(?P<player>.+?) defensive 3-seconds \(technical foul\)$", re.IGNORECASE),
            _build_defensive_three_seconds,
        ),
        (
            re.compile(
                r"^(?P<player>.+?) (?P<foul_type>"
                + "|".join(re.escape(f) for f in FOUL_TYPES)
                + r")(?: \((?P<drawn_by>.+?) draws the foul\))?$",
                re.IGNORECASE,
            ),
            _build_foul,
        ),
    )


# --- Rebounds ---

def _build_team_rebound(description: str, match: "re.Match[str]", team: str) -> "ReboundPlay":
    return ReboundPlay(
        description=description,
        is_offensive=match.group("side").lower() == "offensive",
    )


def _build_rebound(description: str, match: "re.Match[str]", team: str) -> "ReboundPlay":
    return ReboundPlay(
        description=description,
        is_offensive=match.group("side").lower() == "offensive",
        rebounded_by=_player_unless_team(match.group("player"), team),
    )


@dataclass(frozen=True)
class ReboundPlay(Play):
    """Player or team rebound. rebounded_by is None for team rebounds."""

    is_offensive: bool
    rebounded_by: Optional[str] = None

    kind: ClassVar[str] = "rebound"
    patterns: ClassVar = (
        (
            re.compile(r"^(?:.+ )?(?P<side>offensive|defensive) team rebound$", re.IGNORECASE),
            _build_team_rebound,
        ),
        (
            re.compile(r"^(?P<player>.+?) (?P<side>offensive|defensive) rebound$", re.IGNORECASE),
            _build_rebound,
        ),
    )


# --- Substitutions ---

def _build_enter(description: str, match: "re.Match[str]", team: str) -> "EnterPlay":
    return EnterPlay(
        description=description,
        team=clean_name(team) or "",
        player_entering=clean_name(match.group("entering")),
        player_exiting=clean_name(match.group("exiting")),
    )


@dataclass(frozen=True)
class EnterPlay(Play):
    """'X enters the game for Y'"""

    team: str
    player_entering: str
    player_exiting: Optional[str] = None

    kind: ClassVar[str] = "enter"
    patterns: ClassVar = (
        (
            re.compile(r"^(?P<entering>.+?) enters the game(?: for (?P<exiting>.+))?$", re.IGNORECASE),
            _build_enter,
        ),
    )


def _build_exit(description: str, match: "re.Match[str]", team: str) -> "ExitPlay":
    return ExitPlay(
        description=description,
        team=clean_name(team) or "",
        player_leaving=clean_name(match.group("leaving")),
    )


@dataclass(frozen=True)
class ExitPlay(Play):
    """'X exits the game'"""

    team: str
    player_leaving: str

    kind: ClassVar[str] = "exit"
    patterns: ClassVar = (
        (
            re.compile(r"^(?P<leaving>.+?) (?:exits|leaves) the game$", re.IGNORECASE),
            _build_exit,
        ),
    )


# --- Timeouts ---

def _build_official_timeout(description: str, match: "re.Match[str]", team: str) -> "TimeoutPlay":
    return TimeoutPlay(
        description=description,
        timeout_type=match.group("timeout_type").lower(),
        is_official=True,
    )


def _build_timeout(description: str, match: "re.Match[str]", team: str) -> "TimeoutPlay":
    timeout_type = match.group("timeout_type")
    return TimeoutPlay(
        description=description,
        timeout_type=timeout_type.lower() if timeout_type else "regular",
        called_by=clean_name(match.group("called_by")),
    )


@dataclass(frozen=True)
class TimeoutPlay(Play):
    """'Mystics Full timeout', 'Sun 20 Sec. timeout', 'Official TV timeout'"""

    timeout_type: str
    called_by: Optional[str] = None
    is_official: bool = False

    kind: ClassVar[str] = "timeout"
    patterns: ClassVar = (
        (
            re.compile(r"^(?P<timeout_type>official(?: tv)?) timeout$", re.IGNORECASE),
            _build_official_timeout,
        ),
        (
            re.compile(
                r"^(?P<called_by>.+?) (?:(?P<timeout_type>full|short|20 sec\.|30 sec\.) )?timeout$",
                re.IGNORECASE,
            ),
            _build_timeout,
        ),
    )


# --- Jump balls ---

def _build_jump_ball(description: str, match: "re.Match[str]", team: str) -> "JumpBallPlay":
    return JumpBallPlay(
        description=description,
        first_player=clean_name(match.group("first")),
        second_player=clean_name(match.group("second")),
        gains_possession=clean_name(match.group("gains")),
    )


@dataclass(frozen=True)
class JumpBallPlay(Play):
    """'X vs. Y (Z gains possession)'"""

    first_player: str
    second_player: str
    gains_possession: Optional[str] = None

    kind: ClassVar[str] = "jumpBall"
    patterns: ClassVar = (
        (
            re.compile(
                r"^(?P<first>.+?) vs\.? (?P<second>.+?)(?: \((?P<gains>.+?) gains possession\))?$",
                re.IGNORECASE,
            ),
            _build_jump_ball,
        ),
    )


# --- Period and game flow ---

def _build_end_of_period(description: str, match: "re.Match[str]", team: str) -> "EndOfPeriodPlay":
    return EndOfPeriodPlay(description=description, period_label=match.group("label").strip())


@dataclass(frozen=True)
class EndOfPeriodPlay(Play):
    """'End of the 1st Quarter', 'End of Game'"""

    period_label: str

    kind: ClassVar[str] = "endOfPeriod"
    patterns: ClassVar = (
        (re.compile(r"^end of (?:the )?(?P<label>.+)$", re.IGNORECASE), _build_end_of_period),
    )


def _build_ejection(description: str, match: "re.Match[str]", team: str) -> "EjectionPlay":
    return EjectionPlay(description=description, player=clean_name(match.group("player")))


@dataclass(frozen=True)
class EjectionPlay(Play):
    player: str

    kind: ClassVar[str] = "ejection"
    patterns: ClassVar = (
        (re.compile(r"^(?P<player>.+?) ejected$", re.IGNORECASE), _build_ejection),
    )


@dataclass(frozen=True)
class UnclassifiedPlay(Play):
    """A description no rule recognized. Carries the raw text."""

    kind: ClassVar[str] = "unclassified"
