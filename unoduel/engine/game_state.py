"""Table state for a two-seat UNO game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from unoduel.engine.card import Card
from unoduel.engine.deck import Piles
from unoduel.engine.errors import EmptyDeck
from unoduel.engine.events import (
    CardDrawn,
    DeckRecycled,
    DrawFailed,
    EventListener,
    GameEvent,
)
from unoduel.engine.hand import Hand
from unoduel.engine.turns import Seat, TurnController

logger = logging.getLogger(__name__)


@dataclass
class Table:
    """Everything a game session mutates: piles, hands, turn order and the event log.

    Hands are looked up by seat. Only the session and the effect applier touch
    a Table; participants get a PlayerView instead.
    """

    piles: Piles
    hands: Dict[Seat, Hand] = field(default_factory=lambda: {seat: Hand() for seat in Seat})
    turns: TurnController = field(default_factory=TurnController)
    history: List[GameEvent] = field(default_factory=list)
    listeners: List[EventListener] = field(default_factory=list)

    def emit(self, event: GameEvent) -> None:
        self.history.append(event)
        for listener in self.listeners:
            listener(event)

    def hand(self, seat: Seat) -> Hand:
        return self.hands[seat]

    def top_card(self) -> Card:
        return self.piles.top_card()

    def card_total(self) -> int:
        """Cards on the table; constant once dealt."""
        return (
            self.piles.draw_count
            + self.piles.discard_count
            + sum(len(hand) for hand in self.hands.values())
        )

    def draw_into(self, seat: Seat, forced: bool = False) -> Optional[Card]:
        """Draw one card into a seat's hand.

        Returns None when the deck is exhausted; the draw is then a no-op.
        """
        before = self.piles.discard_count
        try:
            card = self.hands[seat].draw(self.piles)
        except EmptyDeck:
            logger.info("%s could not draw: deck exhausted", seat.value)
            self.emit(DrawFailed(seat=seat, forced=forced))
            return None
        recycled = before - self.piles.discard_count
        if recycled:
            self.emit(DeckRecycled(count=recycled))
        logger.debug("%s drew %s%s", seat.value, card, " (forced)" if forced else "")
        self.emit(CardDrawn(seat=seat, card=card, forced=forced))
        return card


@dataclass
class PlayerView:
    """What one seat is allowed to see.

    Contains only that seat's hand and public info.
    """

    seat: Seat
    my_hand: List[Card]
    top_card: Card
    opponent_card_count: int
    draw_pile_count: int
    direction: int
    history: List[str]  # Recent game events

    @classmethod
    def from_table(cls, table: Table, seat: Seat) -> "PlayerView":
        """Create a view of the table, hiding the other seat's hand."""
        return cls(
            seat=seat,
            my_hand=list(table.hand(seat)),
            top_card=table.top_card(),
            opponent_card_count=len(table.hand(seat.other)),
            draw_pile_count=table.piles.draw_count,
            direction=table.turns.direction,
            history=[event.describe() for event in table.history[-10:]],  # Last 10 events
        )
