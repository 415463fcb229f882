"""A blackjack player and their hand."""

import sys

from .deck import Card


class Player:
    """A named player holding a hand of cards."""

    def __init__(self, name):
        self.name = name
        self.hand: list[Card] = []

    def receive_card(self, card):
        """Add a card to the hand."""
        self.hand.append(card)

    def calculate_points(self):
        """Return the hand's value, counting aces as 1 where 11 would bust."""
        total = sum(card.points for card in self.hand)
        aces = sum(1 for card in self.hand if card.rank == "A")
        while total > 21 and aces:
            total -= 10
            aces -= 1
        return total

    def describe_hand(self):
        """Return a text line listing the cards in the hand."""
        cards = ", ".join(f"{card.rank} de {card.suit}" for card in self.hand)
        return f"{self.name} tiene: {cards}"

    def display_hand(self):
        """Write the hand to standard output and return the line written."""
        line = self.describe_hand()
        sys.stdout.write(line + "\n")
        sys.stdout.flush()
        return line