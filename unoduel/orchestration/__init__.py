"""Game orchestration."""

from unoduel.orchestration.game_runner import (
    GameResult,
    GameSession,
    SessionConfig,
    called_coin_flip,
    coin_flip,
)
from unoduel.orchestration.tournament import run_series

__all__ = [
    "GameResult",
    "GameSession",
    "SessionConfig",
    "called_coin_flip",
    "coin_flip",
    "run_series",
]
