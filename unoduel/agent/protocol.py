"""Decision protocol - interface that human, cpu and LLM participants implement."""

from typing import Protocol, runtime_checkable

from unoduel.engine import Card, Color, Decision, Disposition, PlayerView


@runtime_checkable
class DecisionSource(Protocol):
    """Interface for UNO-playing participants."""

    @property
    def name(self) -> str:
        """Display name for the participant."""
        ...

    def request_turn_decision(self, view: PlayerView) -> Decision:
        """Choose to play a card from the hand or to draw.

        Args:
            view: This seat's hand, the top card and other public info.

        Returns:
            PlayAt(index) into view.my_hand, or DrawCard(). An illegal play is
            rejected by the session and this method is called again.
        """
        ...

    def request_drawn_card_disposition(self, view: PlayerView, card: Card) -> Disposition:
        """Decide whether to play a playable card that was just drawn."""
        ...

    def request_color_choice(self, view: PlayerView) -> Color:
        """Pick the color a wild card turns into. Must not be Color.WILD."""
        ...
