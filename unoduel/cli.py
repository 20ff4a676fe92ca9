"""CLI entry point."""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Two-player UNO against the computer or an LLM")

RULES = """Game Rules:
- Match the top card by color or number/symbol.
- You may choose to draw a card instead of playing one.
- If you draw a playable card, you can choose to play it immediately.
- Special cards (Wild, Draw Two, Draw Four, Reverse, Skip) have special effects.
- When a Draw Two or Draw Four is played against you, you draw cards and skip your turn.
- With two players, Reverse works like Skip.
- First player to get rid of all their cards wins!"""


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _make_agent(spec: str, name: str, llm_provider: str, llm_model: str, rng: random.Random):
    from unoduel.agents.cpu_agent import CpuAgent
    from unoduel.agents.llm_agent import LLMAgent

    spec = spec.strip().lower()
    if ":" in spec:
        kind, model = spec.split(":", 1)
    else:
        kind, model = spec, llm_model

    if kind == "cpu":
        return CpuAgent(name=name, rng=random.Random(rng.randint(0, 2**31 - 1)))
    if kind == "llm":
        return LLMAgent(provider=llm_provider, model=model)
    raise typer.BadParameter(f"Unknown agent type: {kind}. Use 'cpu' or 'llm'.")


def _narrate(event) -> None:
    typer.echo(f"* {event.describe()}")


@app.command()
def play(
    opponent: str = typer.Option(
        "cpu",
        "--opponent",
        "-o",
        help="Opponent: cpu, llm, or llm:model_name",
    ),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        "-p",
        envvar="UNODUEL_LLM_PROVIDER",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option(
        "openai/gpt-4o-mini",
        "--llm-model",
        "-m",
        envvar="UNODUEL_LLM_MODEL",
        help="Model name (e.g. openai/gpt-4o-mini)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNODUEL_SEED", help="Random seed"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="UNODUEL_LOG_LEVEL"),
) -> None:
    """Play a single game against the computer. You sit at seat A."""
    from unoduel.agents.human_agent import HumanAgent
    from unoduel.engine import Seat
    from unoduel.orchestration.game_runner import GameSession, SessionConfig, called_coin_flip

    _configure_logging(log_level)
    rng = random.Random(seed)
    human = HumanAgent(name="You")
    agents = {
        Seat.A: human,
        Seat.B: _make_agent(opponent, "CPU", llm_provider, llm_model, rng),
    }

    typer.echo("Welcome to UNO CLI!")
    typer.echo(RULES)
    typer.echo(f"You are seat A, {agents[Seat.B].name} is seat B.")
    typer.echo("Let's flip a coin to see who starts first.")

    def starting_side() -> Seat:
        starter = called_coin_flip(human.call_coin(), rng)
        typer.echo("You start first!" if starter is Seat.A else "Your opponent starts first!")
        return starter

    session = GameSession(
        agents,
        config=SessionConfig(seed=seed),
        rng=rng,
        starting_side=starting_side,
        listeners=[_narrate],
    )
    try:
        result = session.run()
    except (EOFError, KeyboardInterrupt):
        typer.echo("\nGame abandoned.")
        raise typer.Exit(code=1)

    if result.winner is Seat.A:
        typer.echo("Congratulations! You have won the game!")
    else:
        typer.echo("Your opponent has won the game. Better luck next time!")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def simulate(
    agents: str = typer.Option(
        "cpu,cpu",
        "--agents",
        "-a",
        help="Two comma-separated agents for seats A and B: cpu, llm or llm:model_name",
    ),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        "-p",
        envvar="UNODUEL_LLM_PROVIDER",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option(
        "openai/gpt-4o-mini",
        "--llm-model",
        "-m",
        envvar="UNODUEL_LLM_MODEL",
        help="Model name",
    ),
    max_turns: int = typer.Option(2000, "--max-turns", help="Abandon a game after this many turns"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNODUEL_SEED", help="Random seed"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="UNODUEL_LOG_LEVEL"),
) -> None:
    """Play a series of computer-vs-computer games."""
    from unoduel.engine import Seat
    from unoduel.orchestration.tournament import run_series

    _configure_logging(log_level)
    parts = [s for s in agents.split(",") if s.strip()]
    if len(parts) != 2:
        raise typer.BadParameter("Exactly two agents are required.")
    rng = random.Random(seed)
    agent_map = {
        seat: _make_agent(part, f"cpu_{seat.value}", llm_provider, llm_model, rng)
        for seat, part in zip((Seat.A, Seat.B), parts)
    }

    wins = run_series(agent_map, num_games=games, seed=seed, max_turns=max_turns)
    typer.echo("Series results:")
    for seat in (Seat.A, Seat.B):
        typer.echo(f"  {seat.value} ({agent_map[seat].name}): {wins.get(seat, 0)} wins")
    if wins.get(None):
        typer.echo(f"  abandoned: {wins[None]}")


if __name__ == "__main__":
    app()
