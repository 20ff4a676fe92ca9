"""Engine exceptions."""


class UnoError(Exception):
    """Base class for all engine errors."""


class IndexOutOfRange(UnoError, IndexError):
    """A decision referenced a hand slot that does not exist."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Card index {index} out of range for hand of {size}")
        self.index = index
        self.size = size


class IllegalPlay(UnoError, ValueError):
    """The referenced card does not match the top of the discard pile."""

    def __init__(self, card, top):
        super().__init__(f"Cannot play {card} on {top}")
        self.card = card
        self.top = top


class EmptyDeck(UnoError):
    """Nothing left to draw, even after recycling the discard pile."""


class InvariantViolation(UnoError):
    """Raised when session sequencing is broken. Never user-facing."""


class NoTopCard(InvariantViolation):
    """Top card requested before any card reached the discard pile."""


class NothingToRecolor(InvariantViolation):
    """Color override requested on an empty discard pile."""


class InvalidTransition(InvariantViolation):
    """Turn controller asked for a transition its state does not allow."""
