"""Turn order state machine for a two-seat game."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from unoduel.engine.card import Card
from unoduel.engine.errors import InvalidTransition

logger = logging.getLogger(__name__)


class Seat(str, Enum):
    """The two sides of the table."""

    A = "A"
    B = "B"

    @property
    def other(self) -> "Seat":
        return Seat.B if self is Seat.A else Seat.A


SEAT_ORDER: tuple[Seat, ...] = (Seat.A, Seat.B)


@dataclass(frozen=True)
class Idle:
    """Cards not dealt yet."""


@dataclass(frozen=True)
class AwaitingDecision:
    """Waiting on the actor to play or draw."""

    actor: Seat


@dataclass(frozen=True)
class Resolving:
    """A card was played and its effects are being applied."""

    actor: Seat
    card: Card


@dataclass(frozen=True)
class Terminal:
    """Game over."""

    winner: Seat


TurnPhase = Union[Idle, AwaitingDecision, Resolving, Terminal]


class TurnController:
    """Owns whose turn it is and which way play moves."""

    def __init__(self) -> None:
        self._phase: TurnPhase = Idle()
        self._direction = 1  # 1 = clockwise, -1 = counter-clockwise

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def direction(self) -> int:
        return self._direction

    @property
    def current(self) -> Optional[Seat]:
        """The seat the current phase belongs to, if any."""
        if isinstance(self._phase, (AwaitingDecision, Resolving)):
            return self._phase.actor
        return None

    @property
    def is_terminal(self) -> bool:
        return isinstance(self._phase, Terminal)

    @property
    def winner(self) -> Optional[Seat]:
        return self._phase.winner if isinstance(self._phase, Terminal) else None

    def step_from(self, seat: Seat, steps: int) -> Seat:
        """Seat reached after moving `steps` places in the current direction."""
        idx = SEAT_ORDER.index(seat)
        return SEAT_ORDER[(idx + self._direction * steps) % len(SEAT_ORDER)]

    def toggle_direction(self) -> None:
        self._direction = -self._direction

    def start(self, starter: Seat, skips: int = 0) -> Seat:
        """Idle -> AwaitingDecision. The starter loses one step per skip."""
        self._expect(Idle, "start")
        return self._await(self.step_from(starter, skips))

    def begin_resolving(self, card: Card) -> None:
        """AwaitingDecision(actor) -> Resolving(actor, card)."""
        phase = self._expect(AwaitingDecision, "begin_resolving")
        self._set(Resolving(actor=phase.actor, card=card))

    def finish_resolving(self, skips: int = 0) -> Seat:
        """Resolving -> AwaitingDecision(next): advance once, plus once per skip."""
        phase = self._expect(Resolving, "finish_resolving")
        return self._await(self.step_from(phase.actor, 1 + skips))

    def pass_turn(self) -> Seat:
        """A draw used up the actor's turn."""
        phase = self._expect(AwaitingDecision, "pass_turn")
        return self._await(self.step_from(phase.actor, 1))

    def declare_winner(self, winner: Seat) -> None:
        self._expect((AwaitingDecision, Resolving), "declare_winner")
        self._set(Terminal(winner=winner))

    def _await(self, actor: Seat) -> Seat:
        self._set(AwaitingDecision(actor=actor))
        return actor

    def _set(self, phase: TurnPhase) -> None:
        logger.debug("Turn phase %s -> %s", self._phase, phase)
        self._phase = phase

    def _expect(self, allowed, action: str):
        if not isinstance(self._phase, allowed):
            raise InvalidTransition(f"Cannot {action} from {self._phase}")
        return self._phase
