"""Coloured console output helpers."""

import sys

RESET_COLOR = "\033[0m"
RED_COLOR = "\033[31m"
GREEN_COLOR = "\033[32m"
YELLOW_COLOR = "\033[33m"
BLUE_COLOR = "\033[34m"
MAGENTA_COLOR = "\033[35m"
CYAN_COLOR = "\033[36m"

WINNER_COLOR = GREEN_COLOR
LOSER_COLOR = RED_COLOR


def display_message(message, color=RESET_COLOR):
    """Print a message wrapped in an ANSI colour code."""
    print(f"{color}{message}{RESET_COLOR}")


def beep_sound():
    """Ring the terminal bell."""
    sys.stdout.write("\a")
    sys.stdout.flush()


def display_card_text(rank, suit):
    """Print a card as ``[rank de suit]``."""
    print(f"[{rank} de {suit}]")


def display_achievement(achievement):
    """Announce an unlocked achievement and ring the bell."""
    display_message("LOGRO DESBLOQUEADO: " + achievement, MAGENTA_COLOR)
    beep_sound()