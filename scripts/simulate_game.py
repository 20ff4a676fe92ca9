"""Simulate a narrated game between two CPU agents."""

import random

from unoduel.agents.cpu_agent import CpuAgent
from unoduel.engine import Seat
from unoduel.orchestration.game_runner import GameSession, SessionConfig


def main():
    rng = random.Random(42)
    agents = {
        Seat.A: CpuAgent("Bot1", rng=random.Random(1)),
        Seat.B: CpuAgent("Bot2", rng=random.Random(2)),
    }

    session = GameSession(
        agents,
        config=SessionConfig(max_turns=2000),
        rng=rng,
        listeners=[lambda event: print(f"> {event.describe()}")],
    )
    result = session.run()

    print(f"Game finished! Winner: {result.winner.value if result.winner else 'None (abandoned)'}")
    print(f"Turns: {result.num_turns}")
    print(f"Events logged: {len(session.table.history)}")


if __name__ == "__main__":
    main()
