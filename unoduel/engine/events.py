"""
Event types for the game engine.

Events are a typed log of everything that happens during a game. They carry
no behaviour; listeners (terminal narration, tests, the player view history)
consume them after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from unoduel.engine.card import Card, Color
from unoduel.engine.turns import Seat


class EffectKind(str, Enum):
    FORCE_DRAW = "force_draw"
    SKIP = "skip"
    REVERSE = "reverse"
    COLOR_CHANGE = "color_change"


@dataclass(frozen=True, slots=True)
class GameStarted:
    """Cards dealt, starting seat decided."""

    starter: Seat
    hand_size: int

    @property
    def event_type(self) -> str:
        return "game_started"

    def describe(self) -> str:
        return f"{self.starter.value} starts, {self.hand_size} cards each"


@dataclass(frozen=True, slots=True)
class OpeningCardFlipped:
    """The first card turned over onto the discard pile."""

    card: Card

    @property
    def event_type(self) -> str:
        return "opening_card_flipped"

    def describe(self) -> str:
        return f"opening card is {self.card}"


@dataclass(frozen=True, slots=True)
class CardPlayed:
    seat: Seat
    card: Card

    @property
    def event_type(self) -> str:
        return "card_played"

    def describe(self) -> str:
        return f"{self.seat.value} played {self.card}"


@dataclass(frozen=True, slots=True)
class CardDrawn:
    """A card moved from the draw pile into a hand."""

    seat: Seat
    card: Card
    forced: bool = False
    """True for penalty draws from Draw Two / Draw Four."""

    @property
    def event_type(self) -> str:
        return "card_drawn"

    def describe(self) -> str:
        return f"{self.seat.value} drew a card" + (" (penalty)" if self.forced else "")


@dataclass(frozen=True, slots=True)
class DrawFailed:
    """Nothing left to draw; the draw is skipped."""

    seat: Seat
    forced: bool = False

    @property
    def event_type(self) -> str:
        return "draw_failed"

    def describe(self) -> str:
        return f"{self.seat.value} could not draw, the deck is empty"


@dataclass(frozen=True, slots=True)
class DeckRecycled:
    """Discards (minus the top) shuffled back into the draw pile."""

    count: int

    @property
    def event_type(self) -> str:
        return "deck_recycled"

    def describe(self) -> str:
        return f"{self.count} discards shuffled back into the deck"


@dataclass(frozen=True, slots=True)
class DecisionRejected:
    """A decision was refused and will be asked for again."""

    seat: Seat
    reason: str

    @property
    def event_type(self) -> str:
        return "decision_rejected"

    def describe(self) -> str:
        return f"{self.seat.value}: {self.reason}"


@dataclass(frozen=True, slots=True)
class EffectApplied:
    kind: EffectKind
    affected: Optional[Seat]
    """Seat the effect lands on; None for a direction change."""
    magnitude: int = 0
    """Number of cards for a forced draw."""

    @property
    def event_type(self) -> str:
        return "effect_applied"

    def describe(self) -> str:
        if self.kind is EffectKind.FORCE_DRAW:
            return f"{self.affected.value} must draw {self.magnitude}"
        if self.kind is EffectKind.REVERSE:
            return "direction reversed"
        if self.kind is EffectKind.COLOR_CHANGE:
            return f"{self.affected.value} chooses a new color"
        return f"{self.affected.value} is skipped"


@dataclass(frozen=True, slots=True)
class ColorChanged:
    seat: Seat
    color: Color

    @property
    def event_type(self) -> str:
        return "color_changed"

    def describe(self) -> str:
        return f"{self.seat.value} changed the color to {self.color.value}"


@dataclass(frozen=True, slots=True)
class TurnSkipped:
    seat: Seat

    @property
    def event_type(self) -> str:
        return "turn_skipped"

    def describe(self) -> str:
        return f"{self.seat.value}'s turn is skipped"


@dataclass(frozen=True, slots=True)
class GameWon:
    seat: Seat

    @property
    def event_type(self) -> str:
        return "game_won"

    def describe(self) -> str:
        return f"{self.seat.value} won the game"


GameEvent = Union[
    GameStarted,
    OpeningCardFlipped,
    CardPlayed,
    CardDrawn,
    DrawFailed,
    DeckRecycled,
    DecisionRejected,
    EffectApplied,
    ColorChanged,
    TurnSkipped,
    GameWon,
]

EventListener = Callable[[GameEvent], None]
