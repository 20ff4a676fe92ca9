"""Shared test doubles: scripted participants and a deterministic deck."""

import random
from typing import Iterable, List, Optional, Sequence

from unoduel.engine import Card, Color, Disposition, Piles, Rank, Seat
from unoduel.orchestration.game_runner import GameSession, SessionConfig


class NoShuffle(random.Random):
    """Random source that leaves the deck in the order it was stacked."""

    def shuffle(self, x, *args, **kwargs) -> None:
        pass


class ScriptedAgent:
    """Answers every request from a prepared script; fails on anything unexpected."""

    def __init__(
        self,
        decisions: Iterable = (),
        colors: Iterable[Color] = (),
        dispositions: Iterable[Disposition] = (),
        name: str = "scripted",
    ):
        self._name = name
        self.decisions = list(decisions)
        self.colors = list(colors)
        self.dispositions = list(dispositions)
        self.views = []
        self.offered = []

    @property
    def name(self) -> str:
        return self._name

    def request_turn_decision(self, view):
        self.views.append(view)
        assert self.decisions, f"{self._name} was not expected to act"
        return self.decisions.pop(0)

    def request_drawn_card_disposition(self, view, card):
        self.offered.append(card)
        assert self.dispositions, f"{self._name} was not expected to be offered {card}"
        return self.dispositions.pop(0)

    def request_color_choice(self, view):
        assert self.colors, f"{self._name} was not expected to choose a color"
        return self.colors.pop(0)


def c(color: str, rank: str) -> Card:
    """Card shorthand: c("red", "5"), c("wild", "draw_four")."""
    return Card(Color(color), Rank(rank))


def stacked_session(
    hand_a: Sequence[Card],
    hand_b: Sequence[Card],
    opening: Card,
    rest: Sequence[Card] = (),
    agent_a=None,
    agent_b=None,
    starter: Seat = Seat.A,
    listeners: Optional[List] = None,
    max_turns: Optional[int] = None,
) -> GameSession:
    """A session whose deal, opening card and draw pile are fixed in advance."""
    assert len(hand_a) == len(hand_b)
    draw: List[Card] = []
    for a, b in zip(hand_a, hand_b):
        draw.extend([a, b])
    draw.append(opening)
    draw.extend(rest)
    rng = NoShuffle(0)
    return GameSession(
        {
            Seat.A: agent_a if agent_a is not None else ScriptedAgent(name="A"),
            Seat.B: agent_b if agent_b is not None else ScriptedAgent(name="B"),
        },
        config=SessionConfig(hand_size=len(hand_a), max_turns=max_turns),
        rng=rng,
        piles=Piles(draw=draw, rng=rng),
        starting_side=lambda: starter,
        listeners=listeners,
    )
