"""Game engine for two-seat UNO."""

from unoduel.engine.card import Card, Color, Rank
from unoduel.engine.deck import DECK_SIZE, Piles, build_catalog
from unoduel.engine.effects import (
    Effect,
    ForceDraw,
    RequireColorChoice,
    SkipNextTurn,
    ToggleDirection,
    apply_effects,
    resolve_effects,
)
from unoduel.engine.errors import (
    EmptyDeck,
    IllegalPlay,
    IndexOutOfRange,
    InvalidTransition,
    InvariantViolation,
    NoTopCard,
    NothingToRecolor,
    UnoError,
)
from unoduel.engine.game_state import PlayerView, Table
from unoduel.engine.hand import Hand
from unoduel.engine.rules import (
    Decision,
    Disposition,
    DrawCard,
    PlayAt,
    is_playable,
)
from unoduel.engine.turns import Seat, TurnController

__all__ = [
    "Card",
    "Color",
    "Rank",
    "DECK_SIZE",
    "Piles",
    "build_catalog",
    "Hand",
    "Decision",
    "Disposition",
    "DrawCard",
    "PlayAt",
    "is_playable",
    "Effect",
    "ForceDraw",
    "RequireColorChoice",
    "SkipNextTurn",
    "ToggleDirection",
    "apply_effects",
    "resolve_effects",
    "Seat",
    "TurnController",
    "PlayerView",
    "Table",
    "UnoError",
    "EmptyDeck",
    "IllegalPlay",
    "IndexOutOfRange",
    "InvalidTransition",
    "InvariantViolation",
    "NoTopCard",
    "NothingToRecolor",
]
