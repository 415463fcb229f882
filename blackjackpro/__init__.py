"""Terminal Blackjack against a dealer or among players, with users and a win ranking."""

__version__ = "1.0.0"