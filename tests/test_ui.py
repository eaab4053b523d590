import pytest

from retrocards.cards import CardType
from retrocards.screen import WIDTH, Color, Screen
from retrocards.ui import (
    CARD_SHORT_NAMES,
    PETSCII_CORNER_BL,
    PETSCII_CORNER_BR,
    PETSCII_CORNER_TL,
    PETSCII_CORNER_TR,
    PETSCII_HLINE,
    PETSCII_VLINE,
    Console,
    format_number,
)


def make_console(keys=()):
    return Console(Screen(), keys, None, 0)


@pytest.mark.parametrize("num,text", [(0, "0"), (7, "7"), (50, "50"), (255, "255")])
def test_format_number(num, text):
    assert format_number(num) == text


def test_init_sets_black_background_and_border():
    console = make_console()
    assert console.screen.background == Color.BLACK
    assert console.screen.border == Color.BLACK
    assert console.text_color == Color.WHITE


def test_print_at_uses_text_color():
    console = make_console()
    console.print_at(10, 12, "Thanks for playing!")
    assert console.screen.row_text(12)[10:29] == "Thanks for playing!"
    assert console.screen.color_at(10, 12) == Color.WHITE


def test_print_at_wraps_to_next_row():
    console = make_console()
    console.print_at(WIDTH - 2, 0, "ABCD")
    assert console.screen.row_text(0).endswith("AB")
    assert console.screen.row_text(1).startswith("CD")


def test_print_at_color_clips():
    console = make_console()
    console.print_at_color(WIDTH - 2, 0, "ABCD", Color.RED)
    assert console.screen.row_text(0).endswith("AB")
    assert console.screen.row_text(1).strip() == ""
    assert console.screen.color_at(WIDTH - 1, 0) == Color.RED


def test_print_numbers():
    console = make_console()
    console.print_number(5, 0, 50)
    console.print_number_at_color(19, 0, 3, Color.CYAN)
    row = console.screen.row_text(0)
    assert row[5:7] == "50"
    assert row[19] == "3"
    assert console.screen.color_at(19, 0) == Color.CYAN


def test_get_key_sequence_and_exhaustion():
    console = make_console(["1", None, "e"])
    assert console.get_key() == "1"
    assert console.get_key() is None
    assert console.get_key() == "e"
    with pytest.raises(EOFError):
        console.get_key()


def test_wait_key_calls_idle_while_waiting():
    calls = []
    console = Console(Screen(), [None, None, "x"], lambda: calls.append(1), 0)
    assert console.wait_key() == "x"
    assert len(calls) == 2


def test_wait_key_raises_when_input_ends():
    console = make_console([None])
    with pytest.raises(EOFError):
        console.wait_key()


def test_draw_box_uses_line_characters():
    console = make_console()
    console.screen.set_char(0, 0, " ", Color.GREEN)
    console.draw_box(0, 0, 5, 4)
    screen = console.screen
    assert screen.char_at(0, 0) == PETSCII_CORNER_TL
    assert screen.char_at(4, 0) == PETSCII_CORNER_TR
    assert screen.char_at(0, 3) == PETSCII_CORNER_BL
    assert screen.char_at(4, 3) == PETSCII_CORNER_BR
    assert screen.char_at(2, 0) == PETSCII_HLINE
    assert screen.char_at(2, 3) == PETSCII_HLINE
    assert screen.char_at(0, 1) == PETSCII_VLINE
    assert screen.char_at(4, 2) == PETSCII_VLINE
    assert screen.color_at(0, 0) == Color.GREEN


def test_color_region_keeps_characters():
    console = make_console()
    console.print_at(0, 0, "HELLO")
    console.color_region(0, 0, 3, 2, Color.ORANGE)
    assert console.screen.row_text(0).startswith("HELLO")
    assert console.screen.color_at(2, 1) == Color.ORANGE
    assert console.screen.color_at(3, 0) == Color.WHITE


def test_clear_resets_text_color():
    console = make_console()
    console.text_color = Color.RED
    console.print_at(0, 0, "X")
    console.clear()
    assert console.text_color == Color.WHITE
    assert console.screen.row_text(0) == " " * WIDTH


def card_rows(console, x, y):
    return [console.screen.row_text(y + i)[x:x + 7] for i in range(4)]


def test_draw_attack_card():
    console = make_console()
    console.draw_card_frame(2, 13, 0, CardType.ATTACK, 6, 0, 1, True, False)
    assert card_rows(console, 2, 13) == [".-----.", "|STRKE|", "|6   1|", "`-----'"]
    screen = console.screen
    assert screen.color_at(2, 13) == Color.RED
    assert screen.color_at(3, 14) == Color.WHITE
    assert screen.color_at(3, 15) == Color.RED
    assert screen.color_at(7, 15) == Color.CYAN


def test_draw_block_card():
    console = make_console()
    console.draw_card_frame(0, 0, 1, CardType.SKILL, 0, 5, 1, True, False)
    assert card_rows(console, 0, 0)[1:3] == ["|DFEND|", "|5   1|"]
    assert console.screen.color_at(0, 0) == Color.CYAN
    assert console.screen.color_at(1, 2) == Color.LIGHTBLUE


def test_draw_two_digit_attack():
    console = make_console()
    console.draw_card_frame(0, 0, 3, CardType.ATTACK, 14, 0, 2, True, False)
    assert card_rows(console, 0, 0)[2] == "|14  2|"


def test_draw_card_without_values():
    console = make_console()
    console.draw_card_frame(0, 0, 5, CardType.SKILL, 0, 0, 1, True, False)
    assert card_rows(console, 0, 0)[1:3] == ["|DRAW |", "|    1|"]


def test_unaffordable_card_is_gray():
    console = make_console()
    console.draw_card_frame(0, 0, 2, CardType.ATTACK, 8, 0, 2, False, True)
    assert console.screen.color_at(0, 0) == Color.GRAY1
    assert console.screen.color_at(1, 1) == Color.GRAY2


def test_selected_card_is_yellow():
    console = make_console()
    console.draw_card_frame(0, 0, 2, CardType.ATTACK, 8, 0, 2, True, True)
    assert console.screen.color_at(0, 0) == Color.YELLOW
    assert console.screen.color_at(1, 1) == Color.WHITE


def test_power_card_is_purple():
    console = make_console()
    console.draw_card_frame(0, 0, 10, CardType.POWER, 16, 0, 3, True, False)
    assert console.screen.color_at(0, 0) == Color.PURPLE


@pytest.mark.parametrize("card_id", range(len(CARD_SHORT_NAMES)))
def test_short_names_fit_frame(card_id):
    console = make_console()
    console.draw_card_frame(0, 0, card_id, CardType.ATTACK, 1, 0, 1, True, False)
    assert card_rows(console, 0, 0)[1] == "|" + CARD_SHORT_NAMES[card_id] + "|"


def test_unknown_card_id_leaves_name_blank():
    console = make_console()
    console.draw_card_frame(0, 0, 20, CardType.ATTACK, 1, 0, 1, True, False)
    assert card_rows(console, 0, 0)[1] == "|     |"