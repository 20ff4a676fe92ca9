"""CPU agent - plays the first legal card, otherwise draws."""

import random
from typing import Optional

from unoduel.engine import Card, Color, Decision, Disposition, DrawCard, PlayAt, PlayerView
from unoduel.engine.rules import is_playable


class CpuAgent:
    """Simple computer opponent.

    Scans the hand left to right and plays the first card that fits. Always
    plays a drawn card when it can, and picks wild colors at random.
    """

    def __init__(self, name: str = "cpu", rng: Optional[random.Random] = None):
        self._name = name
        self._rng = rng if rng is not None else random.Random()

    @property
    def name(self) -> str:
        return self._name

    def request_turn_decision(self, view: PlayerView) -> Decision:
        for i, card in enumerate(view.my_hand):
            if is_playable(card, view.top_card):
                return PlayAt(i)
        return DrawCard()

    def request_drawn_card_disposition(self, view: PlayerView, card: Card) -> Disposition:
        return Disposition.PLAY_IMMEDIATELY

    def request_color_choice(self, view: PlayerView) -> Color:
        return self._rng.choice(Color.concrete())
