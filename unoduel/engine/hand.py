"""A participant's hand."""

from typing import Iterable, Iterator, List, Optional

from unoduel.engine.card import Card
from unoduel.engine.deck import Piles
from unoduel.engine.errors import IndexOutOfRange
from unoduel.engine.rules import is_playable


class Hand:
    """Cards held by one seat. Grows by drawing, shrinks by playing."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: List[Card] = list(cards) if cards is not None else []

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        self._check_index(index)
        return self._cards[index]

    def __repr__(self) -> str:
        return f"Hand({' '.join(str(c) for c in self._cards)})"

    @property
    def count(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def draw(self, pile: Piles) -> Card:
        """Draw one card from the pile into this hand. EmptyDeck propagates."""
        card = pile.draw()
        self._cards.append(card)
        return card

    def play(self, index: int) -> Card:
        """Remove and return the card at index."""
        self._check_index(index)
        return self._cards.pop(index)

    def has_any_playable(self, top: Card) -> bool:
        return any(is_playable(card, top) for card in self._cards)

    def playable_indices(self, top: Card) -> List[int]:
        return [i for i, card in enumerate(self._cards) if is_playable(card, top)]

    def _check_index(self, index: int) -> None:
        # Negative indices are not hand slots
        if not isinstance(index, int) or not 0 <= index < len(self._cards):
            raise IndexOutOfRange(index, len(self._cards))
