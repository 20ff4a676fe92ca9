"""UNO rules: decisions and the playability check."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from unoduel.engine.card import Card, Color


@dataclass(frozen=True)
class PlayAt:
    """Decision: play the card at this hand index."""

    index: int


@dataclass(frozen=True)
class DrawCard:
    """Decision: draw a card instead of playing."""

    pass


Decision = Union[PlayAt, DrawCard]


class Disposition(str, Enum):
    """What to do with a freshly drawn card that happens to be playable."""

    PLAY_IMMEDIATELY = "play"
    KEEP_IN_HAND = "keep"


def is_playable(candidate: Card, top: Card) -> bool:
    """Check if a card can be played on the current top of the discard pile.

    Matches by color or rank; a wild candidate is always legal, and so is
    anything on a top card that is still wild.
    """
    return (
        candidate.color == top.color
        or candidate.rank == top.rank
        or candidate.color is Color.WILD
        or top.color is Color.WILD
    )
