"""Card, Color and Rank types for UNO."""

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Card colors. WILD is only a placeholder until a color is chosen."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    WILD = "wild"

    @classmethod
    def concrete(cls) -> tuple["Color", ...]:
        """The four colors a wild card can be turned into."""
        return (cls.RED, cls.YELLOW, cls.GREEN, cls.BLUE)


class Rank(str, Enum):
    """Card ranks: numbers, colored actions and wild actions."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    DRAW_FOUR = "draw_four"
    COLOR_CHANGE = "color_change"

    @property
    def is_wild(self) -> bool:
        return self in WILD_RANKS


NUMBER_RANKS = (
    Rank.ZERO, Rank.ONE, Rank.TWO, Rank.THREE, Rank.FOUR,
    Rank.FIVE, Rank.SIX, Rank.SEVEN, Rank.EIGHT, Rank.NINE,
)
ACTION_RANKS = (Rank.SKIP, Rank.REVERSE, Rank.DRAW_TWO)
COLORED_RANKS = NUMBER_RANKS + ACTION_RANKS
WILD_RANKS = frozenset({Rank.DRAW_FOUR, Rank.COLOR_CHANGE})


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Colored ranks (0-9, skip, reverse, draw_two) always carry one of the four
    concrete colors. Wild ranks (draw_four, color_change) carry Color.WILD in the
    deck; the discard pile reports them with the chosen color once resolved.
    """

    color: Color
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid card color: {self.color!r}")
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid card rank: {self.rank!r}")
        if not self.rank.is_wild and self.color is Color.WILD:
            raise ValueError(f"{self.rank.value} needs a concrete color")

    @property
    def is_wild(self) -> bool:
        return self.rank.is_wild

    def __str__(self) -> str:
        return f"{self.color.value}_{self.rank.value}"
