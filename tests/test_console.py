from blackjackpro import console
from blackjackpro.console import (
    GREEN_COLOR,
    MAGENTA_COLOR,
    RESET_COLOR,
    beep_sound,
    display_achievement,
    display_card_text,
    display_message,
)


def test_display_message_wraps_in_color(capsys):
    display_message("hola", GREEN_COLOR)
    assert capsys.readouterr().out == f"{GREEN_COLOR}hola{RESET_COLOR}\n"


def test_display_message_default_color(capsys):
    display_message("hola")
    assert capsys.readouterr().out == f"{RESET_COLOR}hola{RESET_COLOR}\n"


def test_beep_sound_writes_bell(capsys):
    beep_sound()
    assert capsys.readouterr().out == "\a"


def test_display_card_text(capsys):
    display_card_text("A", "Hearts")
    assert capsys.readouterr().out == "[A de Hearts]\n"


def test_display_achievement(capsys):
    display_achievement("BLACKJACK!")
    out = capsys.readouterr().out
    assert out == f"{MAGENTA_COLOR}LOGRO DESBLOQUEADO: BLACKJACK!{RESET_COLOR}\n\a"


def test_winner_color_prints_green(capsys):
    display_message("¡Ganaste!", console.WINNER_COLOR)
    assert capsys.readouterr().out == "\033[32m¡Ganaste!\033[0m\n"


def test_loser_color_prints_red(capsys):
    display_message("¡Gana el Dealer!", console.LOSER_COLOR)
    assert capsys.readouterr().out == "\033[31m¡Gana el Dealer!\033[0m\n"