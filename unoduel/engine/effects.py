"""
Special card effects.

Resolution happens in two steps. `resolve_effects` is a pure mapping from a
played card to the ordered list of effects it causes; `apply_effects` carries
those effects out against a Table and reports how many turns get skipped.

Effect table:

    0-9           -> nothing
    skip          -> SkipNextTurn
    reverse       -> ToggleDirection, SkipNextTurn (two seats: reverse == skip)
    draw_two      -> ForceDraw(2), SkipNextTurn
    draw_four     -> ForceDraw(4), RequireColorChoice, SkipNextTurn
    color_change  -> RequireColorChoice
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Union

from unoduel.engine.card import Card, Color, Rank
from unoduel.engine.events import ColorChanged, EffectApplied, EffectKind, TurnSkipped
from unoduel.engine.game_state import Table
from unoduel.engine.turns import Seat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForceDraw:
    """Target draws `count` cards. They are never checked or played."""

    target: Seat
    count: int


@dataclass(frozen=True)
class SkipNextTurn:
    target: Seat


@dataclass(frozen=True)
class ToggleDirection:
    pass


@dataclass(frozen=True)
class RequireColorChoice:
    """The seat that played the wild picks the color of the top card."""

    chooser: Seat


Effect = Union[ForceDraw, SkipNextTurn, ToggleDirection, RequireColorChoice]

ColorChooser = Callable[[Seat], Color]


def resolve_effects(card: Card, played_by: Seat, against: Seat) -> List[Effect]:
    """Map a played card to the effects it causes, in application order.

    `against` is the seat next in turn order when the card is played.
    """
    rank = card.rank
    if rank is Rank.SKIP:
        return [SkipNextTurn(against)]
    if rank is Rank.REVERSE:
        return [ToggleDirection(), SkipNextTurn(against)]
    if rank is Rank.DRAW_TWO:
        return [ForceDraw(against, 2), SkipNextTurn(against)]
    if rank is Rank.DRAW_FOUR:
        return [ForceDraw(against, 4), RequireColorChoice(played_by), SkipNextTurn(against)]
    if rank is Rank.COLOR_CHANGE:
        return [RequireColorChoice(played_by)]
    return []


def apply_effects(effects: List[Effect], table: Table, choose_color: ColorChooser) -> int:
    """Apply effects in order and return the number of turns to skip.

    `choose_color` must return a concrete color; the top card is recolored
    before this returns, so the next seat sees the chosen color.
    """
    skips = 0
    for effect in effects:
        if isinstance(effect, ForceDraw):
            table.emit(EffectApplied(EffectKind.FORCE_DRAW, effect.target, effect.count))
            for _ in range(effect.count):
                if table.draw_into(effect.target, forced=True) is None:
                    # Deck exhausted; the rest of the penalty is dropped
                    break
        elif isinstance(effect, SkipNextTurn):
            skips += 1
            table.emit(EffectApplied(EffectKind.SKIP, effect.target))
            table.emit(TurnSkipped(effect.target))
        elif isinstance(effect, ToggleDirection):
            table.turns.toggle_direction()
            table.emit(EffectApplied(EffectKind.REVERSE, None))
        elif isinstance(effect, RequireColorChoice):
            table.emit(EffectApplied(EffectKind.COLOR_CHANGE, effect.chooser))
            color = choose_color(effect.chooser)
            table.piles.override_top_color(color)
            logger.debug("%s chose %s", effect.chooser.value, color.value)
            table.emit(ColorChanged(effect.chooser, color))
        else:
            raise TypeError(f"Unknown effect: {effect!r}")
    return skips
