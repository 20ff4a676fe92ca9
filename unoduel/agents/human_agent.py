"""Human agent - reads decisions from the terminal."""

from typing import Callable

from unoduel.engine import Card, Color, Decision, Disposition, DrawCard, PlayAt, PlayerView

COLOR_KEYS = {
    "R": Color.RED,
    "Y": Color.YELLOW,
    "G": Color.GREEN,
    "B": Color.BLUE,
}


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(
        self,
        name: str = "human",
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._name = name
        self._input = input_fn
        self._print = output_fn

    @property
    def name(self) -> str:
        return self._name

    def call_coin(self) -> str:
        """Ask for heads or tails before the starting flip."""
        while True:
            choice = self._input("Choose Heads or Tails (H/T): ").strip().upper()
            if choice in ("H", "T"):
                return choice
            self._print("Invalid input. Please enter 'H' for Heads or 'T' for Tails.")

    def request_turn_decision(self, view: PlayerView) -> Decision:
        self._print("\n--- Your turn ---")
        self._print(f"Top card: {view.top_card}")
        self._print(f"Opponent has {view.opponent_card_count} card(s) left.")
        self._print("Your hand:")
        for i, card in enumerate(view.my_hand):
            self._print(f"  [{i}] {card}")

        while True:
            choice = self._input("Do you want to [P]lay a card or [D]raw a card? (P/D): ").strip().upper()
            if choice == "D":
                return DrawCard()
            if choice == "P":
                raw = self._input("Enter the index of the card you want to play: ").strip()
                try:
                    return PlayAt(int(raw))
                except ValueError:
                    self._print("Invalid input. Please enter a valid index.")
                    continue
            self._print("Invalid choice. Please enter 'P' to play or 'D' to draw.")

    def request_drawn_card_disposition(self, view: PlayerView, card: Card) -> Disposition:
        self._print(f"You drew: {card}")
        choice = self._input("You can play the drawn card. Do you want to play it? (Y/N): ")
        if choice.strip().upper() == "Y":
            return Disposition.PLAY_IMMEDIATELY
        return Disposition.KEEP_IN_HAND

    def request_color_choice(self, view: PlayerView) -> Color:
        while True:
            raw = self._input("Choose a color to change to: [R]ed, [Y]ellow, [G]reen, [B]lue: ")
            color = COLOR_KEYS.get(raw.strip().upper()[:1])
            if color is not None:
                return color
            self._print("Invalid input. Please choose a valid color.")
