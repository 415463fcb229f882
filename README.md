# blackjackpro

Blackjack in the terminal. You can play a hand against the dealer or run a table
of two to seven players who take turns on one keyboard. The game keeps a list of
registered players and a ranking of wins in plain text files. The game's text is
in Spanish.

## Installing

```
pip install .
```

## Playing

```
blackjackpro
```

Options:

- `--data-dir DIR`: directory holding `users.txt` and `ranking.txt`
  (default: the current directory).
- `--no-clear`: do not clear the screen at start.

The main menu offers:

1. Play against the dealer
2. Multiplayer game (2–7 players)
3. Show registered users
4. Show the top-5 ranking
5. Reset the ranking
6. Quit

On your turn, answer `y` to take another card or `n` to stand. Your turn also
ends on its own when you get a two-card 21 (blackjack), go over 21, or hold five
cards without going over. Aces count as 11 or 1, whichever keeps the hand at 21
or under. The dealer keeps drawing until it has at least 17 and at least as many
points as you, or until it goes over 21. If you go over 21 the dealer wins
without playing.

In a multiplayer game there is no dealer: the highest score not over 21 wins,
and every player tied on that score is credited with a win. If everyone goes
over 21 nobody wins.

Ending input (Ctrl-D) or pressing Ctrl-C at a prompt leaves the game.

## Files

- `users.txt`: one registered name per line. A name is added only once, and
  names that differ only in case or surrounding whitespace count as the same
  name.
- `ranking.txt`: one line per win, naming the winner ("Dealer" when the dealer
  wins). The ranking shows the five names with the most wins, ties in
  alphabetical order.

## Using it from Python

```python
import random

from blackjackpro.deck import Deck
from blackjackpro.player import Player
from blackjackpro.game import decide_outcome, Outcome

deck = Deck(random.Random(7))
deck.shuffle()
player = Player("Ana")
player.receive_card(deck.deal())
player.receive_card(deck.deal())
print(player.describe_hand(), player.calculate_points())

assert decide_outcome(20, 18) is Outcome.PLAYER_WINS
```

- `blackjackpro.deck`: `Card` (suit, rank, points), `Deck` (52 cards, `shuffle()`,
  `deal()` from the top, `len()`), and `EmptyDeckError`, raised when dealing
  from an empty deck.
- `blackjackpro.player`: `Player` with `receive_card()`, `calculate_points()`,
  `describe_hand()` and `display_hand()`.
- `blackjackpro.persistence`: `Store(directory)` reads and writes the user and
  ranking files (`users()`, `save_user()`, `update_ranking()`,
  `ranking(limit=5)`, `reset_ranking()` and their `display_*` printers);
  `normalize_name()` gives the form used to compare names.
- `blackjackpro.game`: `player_turn()`, `dealer_turn()`, `decide_outcome()`,
  `multiplayer_winners()`, `play_against_dealer()`, `play_multiplayer()` and
  `main()`. The play functions take a `read` callable that returns one line of
  input, so they can be driven without a terminal.
- `blackjackpro.console`: ANSI colour constants and the message helpers.

## Running the tests

```
pip install ".[test]"
pytest
```