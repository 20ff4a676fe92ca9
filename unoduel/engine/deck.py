"""Deck composition and the draw/discard piles."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Iterable, List, Optional

from unoduel.engine.card import COLORED_RANKS, Card, Color, Rank
from unoduel.engine.errors import EmptyDeck, NoTopCard, NothingToRecolor

logger = logging.getLogger(__name__)

DECK_SIZE = 108


def build_catalog() -> List[Card]:
    """Create a standard 108-card UNO deck, unshuffled.

    - 4 colors x (one 0, two each of 1-9, Skip, Reverse, Draw Two): 100 cards
    - 4 Color Change, 4 Draw Four: 8 cards
    """
    cards: List[Card] = []

    for color in Color.concrete():
        # One zero per color
        cards.append(Card(color, Rank.ZERO))
        for rank in COLORED_RANKS[1:]:
            cards.append(Card(color, rank))
            cards.append(Card(color, rank))

    for _ in range(4):
        cards.append(Card(Color.WILD, Rank.COLOR_CHANGE))
        cards.append(Card(Color.WILD, Rank.DRAW_FOUR))

    return cards


class Piles:
    """The shared draw pile and discard pile.

    The draw pile is consumed from the front. The discard pile keeps the cards
    exactly as they came out of the catalog; a color chosen for a wild top card
    is held separately so recycled wilds go back into the draw pile as wilds.
    """

    def __init__(
        self,
        draw: Optional[Iterable[Card]] = None,
        discard: Optional[Iterable[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        self._draw: List[Card] = list(draw) if draw is not None else []
        self._discard: List[Card] = list(discard) if discard is not None else []
        self._top_color: Optional[Color] = None
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_catalog(cls, rng: Optional[random.Random] = None) -> "Piles":
        """Full catalog in the draw pile, shuffled once."""
        piles = cls(draw=build_catalog(), rng=rng)
        piles.shuffle()
        return piles

    @property
    def draw_count(self) -> int:
        return len(self._draw)

    @property
    def discard_count(self) -> int:
        return len(self._discard)

    @property
    def draw_pile(self) -> tuple[Card, ...]:
        return tuple(self._draw)

    @property
    def discard_pile(self) -> tuple[Card, ...]:
        return tuple(self._discard)

    def shuffle(self) -> None:
        self._rng.shuffle(self._draw)

    def recycle(self) -> int:
        """Move every discard except the top back into the draw pile and shuffle.

        Returns the number of cards moved.
        """
        if len(self._discard) <= 1:
            return 0
        reclaimed = self._discard[:-1]
        self._discard = self._discard[-1:]
        self._draw.extend(reclaimed)
        self.shuffle()
        logger.debug("Recycled %d discards into the draw pile", len(reclaimed))
        return len(reclaimed)

    def draw(self) -> Card:
        """Take the front card of the draw pile, recycling the discards if needed."""
        if not self._draw:
            self.recycle()
        if not self._draw:
            raise EmptyDeck("Draw pile is empty and there is nothing to recycle")
        return self._draw.pop(0)

    def return_to_draw(self, card: Card) -> None:
        """Put a card back into the draw pile and reshuffle."""
        self._draw.append(card)
        self.shuffle()

    def place_on_discard(self, card: Card) -> None:
        self._discard.append(card)
        self._top_color = None

    def top_card(self) -> Card:
        """The top of the discard pile, showing any color chosen for it."""
        if not self._discard:
            raise NoTopCard("No card has been placed on the discard pile")
        top = self._discard[-1]
        if self._top_color is not None:
            return replace(top, color=self._top_color)
        return top

    def override_top_color(self, color: Color) -> None:
        """Recolor the top card. The rank is untouched."""
        if not self._discard:
            raise NothingToRecolor("Discard pile is empty")
        if color is Color.WILD:
            raise ValueError("Top card must be recolored to a concrete color")
        self._top_color = color
