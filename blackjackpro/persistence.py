"""Registered users and the win ranking, stored as plain text files."""

import sys
from collections import Counter
from pathlib import Path

_WHITESPACE = " \t\n\v\f\r"


def normalize_name(name):
    """Strip surrounding whitespace and lower-case a name for comparison."""
    return name.strip(_WHITESPACE).lower()


def _read_lines(path):
    text = path.read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Store:
    """Users and ranking kept in ``users.txt`` and ``ranking.txt``."""

    def __init__(self, directory=None):
        self.directory = Path(directory) if directory is not None else Path(".")
        self.users_path = self.directory / "users.txt"
        self.ranking_path = self.directory / "ranking.txt"

    def users(self):
        """Return the registered user names; empty if none are stored."""
        if not self.users_path.exists():
            return []
        return _read_lines(self.users_path)

    def display_users(self):
        """Print the registered users."""
        if not self.users_path.exists():
            print("No se encontraron usuarios registrados.")
            return
        print("--- Usuarios Registrados ---")
        for user in self.users():
            print(f"- {user}")

    def save_user(self, name):
        """Register a name unless an equivalent one exists; return True if added."""
        existing = {normalize_name(user) for user in self.users()}
        if normalize_name(name) in existing:
            print(f"El usuario '{name}' ya está registrado.")
            return False
        with self.users_path.open("a", encoding="utf-8") as handle:
            handle.write(name + "\n")
        print(f"Usuario '{name}' registrado.")
        return True

    def update_ranking(self, name):
        """Record one win for the given name."""
        with self.ranking_path.open("a", encoding="utf-8") as handle:
            handle.write(name + "\n")

    def ranking(self, limit=5):
        """Return up to ``limit`` (name, wins) pairs, most wins first."""
        if not self.ranking_path.exists():
            return []
        wins = Counter(_read_lines(self.ranking_path))
        ordered = sorted(sorted(wins.items()), key=lambda item: item[1], reverse=True)
        return ordered[:limit]

    def display_ranking(self):
        """Print the top five players by wins."""
        if not self.ranking_path.exists():
            print("No hay partidas registradas en el ranking.")
            return
        print("--- TOP 5 JUGADORES ---")
        for position, (name, wins) in enumerate(self.ranking(), start=1):
            print(f"{position}. {name} - {wins} victorias")

    def reset_ranking(self):
        """Clear every ranking entry."""
        self.ranking_path.write_text("", encoding="utf-8")
        print("El ranking ha sido reiniciado.")