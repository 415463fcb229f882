"""A standard 52-card deck."""

import random
from dataclasses import dataclass

SUITS = ("Hearts", "Diamonds", "Clubs", "Spades")
RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")


@dataclass(frozen=True)
class Card:
    """A playing card with its blackjack point value."""

    suit: str
    rank: str
    points: int


class EmptyDeckError(RuntimeError):
    """Raised when dealing from a deck with no cards left."""


def _points_for(rank):
    if rank == "A":
        return 11
    if rank in ("J", "Q", "K"):
        return 10
    return int(rank)


class Deck:
    """A deck of cards dealt from the top (the end of the list)."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._cards = [
            Card(suit, rank, _points_for(rank)) for suit in SUITS for rank in RANKS
        ]

    def shuffle(self):
        """Shuffle the remaining cards in place."""
        self._rng.shuffle(self._cards)

    def deal(self):
        """Remove and return the top card."""
        if not self._cards:
            raise EmptyDeckError(
                "La baraja está vacía. No se pueden repartir más cartas."
            )
        return self._cards.pop()

    def __len__(self):
        return len(self._cards)