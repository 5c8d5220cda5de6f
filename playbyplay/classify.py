"""Rule-based play classifier."""

from typing import Callable, NamedTuple, Optional

from .diagnostics import UNCLASSIFIED_PLAY, Diagnostic
from .plays import (
    BlockPlay,
    EjectionPlay,
    EndOfPeriodPlay,
    EnterPlay,
    ExitPlay,
    FoulPlay,
    JumpBallPlay,
    Play,
    ReboundPlay,
    ShotPlay,
    TimeoutPlay,
    TurnoverPlay,
    UnclassifiedPlay,
)


class PlayContext(NamedTuple):
    """What the classifier may know besides the description itself."""

    team: str = ""


class Rule(NamedTuple):
    name: str
    predicate: Callable[[str], bool]
    extractor: Callable[[str, str], Optional[Play]]


def _rule(play_type: type[Play]) -> Rule:
    return Rule(play_type.kind, play_type.matches, play_type.extract)


# Evaluated top to bottom; the first predicate that matches wins. Order is
# part of the contract, since broad rules would shadow narrower ones below them.
RULES: tuple[Rule, ...] = (
    _rule(ShotPlay),
    _rule(BlockPlay),
    _rule(TurnoverPlay),
    _rule(FoulPlay),
    _rule(ReboundPlay),
    _rule(EnterPlay),
    _rule(ExitPlay),
    _rule(TimeoutPlay),
    _rule(JumpBallPlay),
    _rule(EndOfPeriodPlay),
    _rule(EjectionPlay),
)


def classify(
    description: str,
    context: PlayContext = PlayContext(),
    rules: tuple[Rule, ...] = RULES,
) -> Play:
    """
    Classify a play description into exactly one Play variant.

    Args:
        description: Whitespace-normalized play text, case preserved
        context: Team the play is credited to
        rules: Ordered rule set (default RULES)

    Returns:
        The Play built by the first matching rule, or UnclassifiedPlay
    """
    text = " ".join(str(description).split())
    for rule in rules:
        if rule.predicate(text):
            play = rule.extractor(text, context.team)
            if play is not None:
                return play
    return UnclassifiedPlay(description=text)


def classify_with_diagnostics(
    description: str,
    context: PlayContext = PlayContext(),
    event_index: Optional[int] = None,
) -> tuple[Play, Optional[Diagnostic]]:
    """Classify, returning a Diagnostic alongside an UnclassifiedPlay."""
    play = classify(description, context)
    if isinstance(play, UnclassifiedPlay):
        diagnostic = Diagnostic(
            UNCLASSIFIED_PLAY,
            f"Could not match play description {play.description!r}",
            event_index=event_index,
            text=play.description,
        )
        return play, diagnostic
    return play, None
