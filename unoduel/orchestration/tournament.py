"""Series runner - play many games between two seats and count wins."""

import logging
import random
from collections import defaultdict
from typing import Any, Dict, Optional

from unoduel.engine import Seat
from unoduel.orchestration.game_runner import GameSession, SessionConfig

logger = logging.getLogger(__name__)


def run_series(
    agents: Dict[Seat, Any],
    num_games: int = 100,
    seed: Optional[int] = None,
    max_turns: Optional[int] = 2000,
) -> Dict[Optional[Seat], int]:
    """Play num_games games, alternating which seat starts.

    Returns:
        Dict mapping seat to number of wins. Abandoned games (max_turns
        reached) are counted under None.
    """
    wins: Dict[Optional[Seat], int] = defaultdict(int)

    rng = random.Random(seed)
    for g in range(num_games):
        starter = Seat.A if g % 2 == 0 else Seat.B
        session = GameSession(
            agents,
            config=SessionConfig(max_turns=max_turns),
            rng=random.Random(rng.randint(0, 2**31 - 1)),
            starting_side=lambda starter=starter: starter,
        )
        result = session.run()
        wins[result.winner] += 1
        logger.debug("Game %d/%d: winner=%s turns=%d", g + 1, num_games, result.winner, result.num_turns)

    return dict(wins)
