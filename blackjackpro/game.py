"""Game flow: player and dealer turns, match modes and the main menu."""

import argparse
import random
import re
import subprocess
import sys
from enum import Enum

from .console import (
    BLUE_COLOR,
    CYAN_COLOR,
    GREEN_COLOR,
    LOSER_COLOR,
    RED_COLOR,
    RESET_COLOR,
    WINNER_COLOR,
    YELLOW_COLOR,
    beep_sound,
    display_achievement,
    display_card_text,
    display_message,
)
from .deck import Deck
from .persistence import Store
from .player import Player

MIN_PLAYERS = 2
MAX_PLAYERS = 7
EXIT_OPTION = 6

_INT_PATTERN = re.compile(r"[+-]?\d+")


class Outcome(Enum):
    """Result of a game against the dealer."""

    PLAYER_WINS = "player"
    DEALER_WINS = "dealer"
    TIE = "tie"


def _read_token(read):
    """Return the next non-blank line from ``read``, stripped."""
    while True:
        token = read().strip()
        if token:
            return token


def _read_choice(read):
    """Read a 'y' or 'n' answer, asking again on anything else."""
    choice = _read_token(read)[0]
    while choice not in ("y", "n"):
        display_message("Entrada inválida. Por favor ingresa 'y' o 'n'.", RED_COLOR)
        choice = _read_token(read)[0]
    return choice


def _read_int(read):
    """Read a leading integer from the next non-blank line, or None if absent."""
    match = _INT_PATTERN.match(_read_token(read))
    return int(match.group()) if match else None


def player_turn(player, deck, read):
    """Play one player's turn, asking ``read`` whether to take more cards.

    Returns the player's final points.
    """
    while True:
        display_message(f"\n--- Turno de {player.name} ---", YELLOW_COLOR)
        player.display_hand()
        points = player.calculate_points()
        display_message(f"Puntos: {points}", CYAN_COLOR)

        if points == 21 and len(player.hand) == 2:
            display_achievement("BLACKJACK!")
            break
        if points > 21:
            display_message(f"{player.name} se pasó (más de 21).", RED_COLOR)
            display_achievement("¡TE PASASTE!")
            break
        if len(player.hand) == 5:
            display_achievement("¡5 CARTAS SIN PASARSE!")
            break

        display_message("¿Quieres otra carta? (y/n): ", GREEN_COLOR)
        if _read_choice(read) != "y":
            break
        card = deck.deal()
        player.receive_card(card)
        display_message("Recibiste: ", BLUE_COLOR)
        display_card_text(card.rank, card.suit)
    return player.calculate_points()


def dealer_turn(dealer, deck, player_points):
    """Let the dealer draw until reaching 17 and the player's points, or busting.

    Returns the dealer's final points.
    """
    display_message("\n--- Turno del Dealer ---", YELLOW_COLOR)
    display_message("Mano del Dealer: ", YELLOW_COLOR)
    dealer.display_hand()
    display_message(f"Puntos del Dealer: {dealer.calculate_points()}", GREEN_COLOR)

    while True:
        points = dealer.calculate_points()
        if (points >= 17 and points >= player_points) or points > 21:
            if points > 21:
                display_message("El Dealer se pasó (más de 21).", RED_COLOR)
                display_achievement("¡DEALER SE PASÓ!")
            else:
                display_message(
                    f"El Dealer se planta con {points} puntos.", CYAN_COLOR
                )
            return points
        display_message("El Dealer toma una carta...", YELLOW_COLOR)
        card = deck.deal()
        dealer.receive_card(card)
        display_card_text(card.rank, card.suit)
        dealer.display_hand()
        display_message(
            f"Puntos del Dealer: {dealer.calculate_points()}", GREEN_COLOR
        )


def decide_outcome(player_points, dealer_points):
    """Decide who wins a game against the dealer."""
    if player_points <= 21 and (
        player_points > dealer_points or dealer_points > 21
    ):
        return Outcome.PLAYER_WINS
    if dealer_points <= 21 and (
        dealer_points > player_points or player_points > 21
    ):
        return Outcome.DEALER_WINS
    return Outcome.TIE


def multiplayer_winners(players):
    """Return the names of players with the highest score not over 21."""
    best = max(
        (points for points in (p.calculate_points() for p in players) if points <= 21),
        default=0,
    )
    if best == 0:
        return []
    return [p.name for p in players if p.calculate_points() == best]


def play_against_dealer(read, store, rng=None):
    """Play one game against the dealer and return its outcome."""
    display_message("Ingresa tu nombre: ", GREEN_COLOR)
    name = read()
    store.save_user(name)

    deck = Deck(rng)
    deck.shuffle()

    player = Player(name)
    dealer = Player("Dealer")
    for _ in range(2):
        player.receive_card(deck.deal())
        dealer.receive_card(deck.deal())

    display_message("\n--- Manos Iniciales ---", YELLOW_COLOR)
    player.display_hand()
    display_message("El Dealer muestra: ", YELLOW_COLOR)
    display_card_text(dealer.hand[0].rank, dealer.hand[0].suit)
    display_message("La segunda carta del Dealer está boca abajo.", YELLOW_COLOR)

    player_turn(player, deck, read)

    if player.calculate_points() > 21:
        display_message("\n--- Resultados Finales ---", YELLOW_COLOR)
        display_message(
            f"Puntos de {player.name}: {player.calculate_points()}", RED_COLOR
        )
        display_message(
            f"Puntos del Dealer: {dealer.calculate_points()}", GREEN_COLOR
        )
        display_message(f"{player.name} se pasó. ¡Gana el Dealer!", LOSER_COLOR)
        beep_sound()
        store.update_ranking(dealer.name)
        return Outcome.DEALER_WINS

    dealer_turn(dealer, deck, player.calculate_points())

    player_points = player.calculate_points()
    dealer_points = dealer.calculate_points()

    display_message("\n--- Resultados Finales ---", YELLOW_COLOR)
    display_message(f"Puntos de {player.name}: {player_points}", GREEN_COLOR)
    display_message(f"Puntos del Dealer: {dealer_points}", RED_COLOR)

    outcome = decide_outcome(player_points, dealer_points)
    if outcome is Outcome.PLAYER_WINS:
        display_message("¡Ganaste!", WINNER_COLOR)
        beep_sound()
        store.update_ranking(player.name)
    elif outcome is Outcome.DEALER_WINS:
        display_message("¡Gana el Dealer!", LOSER_COLOR)
        beep_sound()
        store.update_ranking(dealer.name)
    else:
        display_message("¡Empate!", YELLOW_COLOR)
    return outcome


def _read_player_count(read):
    prompt = f"Ingresa el número de jugadores ({MIN_PLAYERS}-{MAX_PLAYERS}): "
    display_message(prompt, GREEN_COLOR)
    count = _read_int(read)
    while count is None or not MIN_PLAYERS <= count <= MAX_PLAYERS:
        display_message(
            "Número de jugadores inválido. Ingresa un número entre "
            f"{MIN_PLAYERS} y {MAX_PLAYERS}.",
            RED_COLOR,
        )
        print(prompt)
        count = _read_int(read)
    return count


def play_multiplayer(read, store, rng=None):
    """Play a game among several players and return the winners' names."""
    count = _read_player_count(read)

    players = []
    for number in range(1, count + 1):
        display_message(f"Ingresa el nombre del Jugador {number}: ", GREEN_COLOR)
        name = read()
        store.save_user(name)
        players.append(Player(name))

    deck = Deck(rng)
    deck.shuffle()

    for _ in range(2):
        for player in players:
            player.receive_card(deck.deal())

    display_message("\n--- Manos Iniciales ---", YELLOW_COLOR)
    for player in players:
        display_message(f"Mano de {player.name}:", CYAN_COLOR)
        player.display_hand()

    for player in players:
        player_turn(player, deck, read)

    display_message("\n--- Resultados del Juego Multijugador ---", YELLOW_COLOR)
    for player in players:
        display_message(
            f"{player.name} terminó con {player.calculate_points()} puntos.",
            CYAN_COLOR,
        )

    winners = multiplayer_winners(players)
    if not winners:
        display_message(
            "Todos los jugadores se pasaron. No hay ganador claro.", YELLOW_COLOR
        )
    elif len(winners) == 1:
        display_message(f"El ganador es: {winners[0]}!", WINNER_COLOR)
        beep_sound()
        store.update_ranking(winners[0])
    else:
        display_message("Empate entre los siguientes jugadores:", YELLOW_COLOR)
        for name in winners:
            display_message(f"- {name}", YELLOW_COLOR)
            store.update_ranking(name)
        beep_sound()
    return winners


def display_main_menu():
    """Print the main menu."""
    print()
    print(f"{YELLOW_COLOR}========================={RESET_COLOR}")
    print(f"{YELLOW_COLOR}       BLACKJACK PRO       {RESET_COLOR}")
    print(f"{YELLOW_COLOR}========================={RESET_COLOR}")
    print("1. Jugar contra el Dealer")
    print("2. Jugar Multijugador")
    print("3. Ver Usuarios")
    print("4. Ver Ranking")
    print("5. Reiniciar Ranking")
    print("6. Salir")
    print("\nIngresa tu opción: ")


def _clear_screen():
    try:
        if sys.platform.startswith("win"):
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _read_option(read):
    option = _read_int(read)
    while option is None or not 1 <= option <= EXIT_OPTION:
        display_message(
            f"Opción inválida. Ingresa un número entre 1 y {EXIT_OPTION}.", RED_COLOR
        )
        display_main_menu()
        option = _read_int(read)
    return option


def main(argv=None):
    """Run the interactive menu loop."""
    parser = argparse.ArgumentParser(prog="blackjackpro", description="Blackjack game.")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding users.txt and ranking.txt"
    )
    parser.add_argument(
        "--no-clear", action="store_true", help="do not clear the screen at start"
    )
    args = parser.parse_args(argv)

    if not args.no_clear:
        _clear_screen()

    store = Store(args.data_dir)
    rng = random.Random()
    read = input

    try:
        while True:
            display_main_menu()
            option = _read_option(read)
            if option == 1:
                play_against_dealer(read, store, rng)
            elif option == 2:
                play_multiplayer(read, store, rng)
            elif option == 3:
                store.display_users()
            elif option == 4:
                store.display_ranking()
            elif option == 5:
                store.reset_ranking()
            else:
                display_message("Gracias por jugar. ¡Hasta luego!", CYAN_COLOR)
                return 0
            display_message("\nPresiona Enter para continuar...", YELLOW_COLOR)
            read()
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())