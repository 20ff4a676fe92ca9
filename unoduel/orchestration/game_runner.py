"""Single game session."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Optional

from unoduel.engine import (
    Card,
    Color,
    Disposition,
    DrawCard,
    IllegalPlay,
    IndexOutOfRange,
    InvalidTransition,
    Piles,
    PlayAt,
    PlayerView,
    Rank,
    RequireColorChoice,
    Seat,
    Table,
    apply_effects,
    build_catalog,
    is_playable,
    resolve_effects,
)
from unoduel.engine.events import (
    CardPlayed,
    DecisionRejected,
    EventListener,
    GameStarted,
    GameWon,
    OpeningCardFlipped,
)
from unoduel.engine.turns import SEAT_ORDER

if TYPE_CHECKING:
    from unoduel.agent.protocol import DecisionSource

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Knobs for a single game."""

    hand_size: int = 7
    max_turns: Optional[int] = None  # None = play until someone wins
    seed: Optional[int] = None


@dataclass
class GameResult:
    """Result of a completed game. winner is None if the game was abandoned."""

    winner: Optional[Seat]
    num_turns: int
    starter: Seat


def coin_flip(rng: random.Random) -> Seat:
    """Pick the starting seat uniformly at random."""
    return rng.choice(SEAT_ORDER)


def called_coin_flip(call: str, rng: random.Random, caller: Seat = Seat.A) -> Seat:
    """Flip a coin against a heads/tails call; the caller starts on a match."""
    flip = rng.choice(("H", "T"))
    logger.debug("Coin flip: called %s, landed %s", call, flip)
    return caller if call.upper() == flip else caller.other


class GameSession:
    """Runs a two-seat UNO game to completion.

    The session owns the table. Each turn it asks the current seat's
    DecisionSource for a decision, rejects illegal ones and asks again,
    applies the play or draw and advances the turn.
    """

    def __init__(
        self,
        agents: Dict[Seat, "DecisionSource"],
        config: Optional[SessionConfig] = None,
        rng: Optional[random.Random] = None,
        piles: Optional[Piles] = None,
        starting_side: Optional[Callable[[], Seat]] = None,
        listeners: Optional[Iterable[EventListener]] = None,
    ):
        if set(agents) != set(Seat):
            raise ValueError("Exactly one agent per seat is required")
        self._agents = agents
        self._config = config or SessionConfig()
        self._rng = rng if rng is not None else random.Random(self._config.seed)
        self._starting_side = starting_side or (lambda: coin_flip(self._rng))
        if piles is None:
            piles = Piles(draw=build_catalog(), rng=self._rng)
        self.table = Table(piles=piles, listeners=list(listeners or []))
        self._starter: Optional[Seat] = None
        self._num_turns = 0

    @property
    def num_turns(self) -> int:
        return self._num_turns

    @property
    def winner(self) -> Optional[Seat]:
        return self.table.turns.winner

    def view(self, seat: Seat) -> PlayerView:
        return PlayerView.from_table(self.table, seat)

    def setup(self) -> Seat:
        """Shuffle, deal, flip the opening card. Returns the first seat to act."""
        table = self.table
        table.piles.shuffle()
        starter = self._starting_side()
        self._starter = starter

        for _ in range(self._config.hand_size):
            for seat in SEAT_ORDER:
                table.hand(seat).draw(table.piles)
        table.emit(GameStarted(starter=starter, hand_size=self._config.hand_size))

        opening = self._flip_opening_card()
        table.emit(OpeningCardFlipped(card=opening))

        # Opening card acts as if the other seat had played it on the starter
        effects = resolve_effects(opening, played_by=starter.other, against=starter)
        if opening.rank is Rank.COLOR_CHANGE:
            effects = [RequireColorChoice(starter)]
        skips = apply_effects(effects, table, self._choose_color)
        first = table.turns.start(starter, skips)
        logger.debug("Game set up: %s starts, %s acts first, opening %s", starter.value, first.value, opening)
        return first

    def step(self) -> bool:
        """Run one turn. Returns False once the game is over."""
        turns = self.table.turns
        if turns.is_terminal:
            return False
        max_turns = self._config.max_turns
        if max_turns is not None and self._num_turns >= max_turns:
            logger.info("Game abandoned after %d turns", self._num_turns)
            return False

        seat = turns.current
        if seat is None:
            raise InvalidTransition("Session has not been set up")
        agent = self._agents[seat]
        while True:
            decision = agent.request_turn_decision(self.view(seat))
            if isinstance(decision, DrawCard):
                self._draw_turn(seat)
                break
            if not isinstance(decision, PlayAt):
                raise TypeError(f"Unknown decision: {decision!r}")
            try:
                self._play_from_hand(seat, decision.index)
            except (IndexOutOfRange, IllegalPlay) as e:
                logger.info("Rejected decision from %s: %s", seat.value, e)
                self.table.emit(DecisionRejected(seat=seat, reason=str(e)))
                continue
            break

        self._num_turns += 1
        return not turns.is_terminal

    def run(self) -> GameResult:
        """Run the game and return the result."""
        if self._starter is None:
            self.setup()
        while self.step():
            pass
        result = GameResult(
            winner=self.winner,
            num_turns=self._num_turns,
            starter=self._starter,
        )
        logger.info(
            "Game over: winner=%s after %d turns",
            result.winner.value if result.winner else None,
            result.num_turns,
        )
        return result

    def _flip_opening_card(self) -> Card:
        piles = self.table.piles
        card = piles.draw()
        # Draw Four never opens; it goes back into the deck
        while card.rank is Rank.DRAW_FOUR:
            piles.return_to_draw(card)
            card = piles.draw()
        piles.place_on_discard(card)
        return card

    def _play_from_hand(self, seat: Seat, index: int) -> None:
        hand = self.table.hand(seat)
        card = hand[index]
        top = self.table.top_card()
        if not is_playable(card, top):
            raise IllegalPlay(card, top)
        hand.play(index)
        self._resolve(seat, card)

    def _draw_turn(self, seat: Seat) -> None:
        table = self.table
        card = table.draw_into(seat)
        if card is not None and is_playable(card, table.top_card()):
            disposition = self._agents[seat].request_drawn_card_disposition(self.view(seat), card)
            if disposition == Disposition.PLAY_IMMEDIATELY:
                hand = table.hand(seat)
                hand.play(len(hand) - 1)
                self._resolve(seat, card)
                return
        table.turns.pass_turn()

    def _resolve(self, seat: Seat, card: Card) -> None:
        table = self.table
        table.turns.begin_resolving(card)
        table.piles.place_on_discard(card)
        table.emit(CardPlayed(seat=seat, card=card))

        against = table.turns.step_from(seat, 1)
        skips = apply_effects(resolve_effects(card, seat, against), table, self._choose_color)

        if table.hand(seat).is_empty:
            table.turns.declare_winner(seat)
            table.emit(GameWon(seat=seat))
        else:
            table.turns.finish_resolving(skips)

    def _choose_color(self, seat: Seat) -> Color:
        agent = self._agents[seat]
        while True:
            color = agent.request_color_choice(self.view(seat))
            if color in Color.concrete():
                return Color(color)
            logger.info("Rejected color %r from %s", color, seat.value)
            self.table.emit(DecisionRejected(seat=seat, reason=f"{color} is not a color to change to"))
