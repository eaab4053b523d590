"""Text console for the card game: printing, keys, frames and card frames."""

from __future__ import annotations

import sys
import time
from typing import Callable, Iterable, Iterator, Optional

from retrocards.cards import CardType
from retrocards.screen import SIZE, WIDTH, Color, Screen

PETSCII_HEART = 83
PETSCII_SPADE = 65
PETSCII_HLINE = 64
PETSCII_VLINE = 93
PETSCII_CORNER_TL = 85
PETSCII_CORNER_TR = 73
PETSCII_CORNER_BL = 74
PETSCII_CORNER_BR = 75
PETSCII_SOLID = 160
PETSCII_BANG = 33
PETSCII_STAR = 42

CARD_WIDTH = 7
CARD_HEIGHT = 4
FRAME_DELAY = 1 / 60

CARD_SHORT_NAMES: tuple[str, ...] = (
    "STRKE", "DFEND", "BASH ", "HEAVY", "IWALL",
    "DRAW ", "ENRGY", "EXECU", "CLEAV", "SHBSH",
    "POWER", "ARMOR", "QSLSH", "FRTFY", "BSERK",
)

_TYPE_FRAME_COLORS = {
    CardType.ATTACK: Color.RED,
    CardType.SKILL: Color.CYAN,
    CardType.POWER: Color.PURPLE,
}


def format_number(num: int) -> str:
    """Decimal text of a byte value (0..255)."""
    return str(num & 0xFF)


def _digit(value: int) -> str:
    return chr(ord("0") + value)


class Console:
    """Screen drawing and keyboard input.

    ``keys`` yields one key per poll, or None when no key is pressed; when
    it runs out, reading a key raises EOFError. Without ``keys`` the screen
    is printed to standard output and each input line is one key press.
    """

    def __init__(
        self,
        screen: Optional[Screen] = None,
        keys: Optional[Iterable[Optional[str]]] = None,
        on_idle: Optional[Callable[[], None]] = None,
        frame_delay: float = FRAME_DELAY,
    ) -> None:
        self.screen = screen if screen is not None else Screen()
        self._keys: Iterator[Optional[str]] = (
            iter(keys) if keys is not None else self._terminal_keys()
        )
        self.on_idle = on_idle if on_idle is not None else (lambda: None)
        self.frame_delay = frame_delay
        self.text_color: int = Color.WHITE
        self.screen.background = Color.BLACK
        self.screen.border = Color.BLACK
        self.clear()

    def _terminal_keys(self) -> Iterator[Optional[str]]:
        while True:
            sys.stdout.write(self.screen.render() + "\n> ")
            sys.stdout.flush()
            line = sys.stdin.readline()
            if not line:
                return
            yield line.strip()[:1] or "\r"

    def clear(self) -> None:
        """Clear the screen and reset the text colour to white."""
        self.screen.clear()
        self.text_color = Color.WHITE

    def print_at(self, x: int, y: int, text: str) -> None:
        """Write text in the current text colour, wrapping onto following rows."""
        position = y * WIDTH + x
        for ch in text:
            if not 0 <= position < SIZE:
                break
            row, col = divmod(position, WIDTH)
            self.screen.set_char(col, row, ch, self.text_color)
            position += 1

    def print_at_color(self, x: int, y: int, text: str, color: int) -> None:
        """Write text in a colour, clipped at the right edge."""
        self.screen.print_string(x, y, text, color)

    def print_number(self, x: int, y: int, num: int) -> None:
        self.print_at(x, y, format_number(num))

    def print_number_at_color(self, x: int, y: int, num: int, color: int) -> None:
        self.print_at_color(x, y, format_number(num), color)

    def draw_box(self, x: int, y: int, width: int, height: int) -> None:
        """Draw a box with line-drawing characters, keeping cell colours."""
        right = x + width - 1
        bottom = y + height - 1
        set_char = self.screen.set_char
        set_char(x, y, PETSCII_CORNER_TL)
        set_char(right, y, PETSCII_CORNER_TR)
        set_char(x, bottom, PETSCII_CORNER_BL)
        set_char(right, bottom, PETSCII_CORNER_BR)
        for col in range(x + 1, right):
            set_char(col, y, PETSCII_HLINE)
            set_char(col, bottom, PETSCII_HLINE)
        for row in range(y + 1, bottom):
            set_char(x, row, PETSCII_VLINE)
            set_char(right, row, PETSCII_VLINE)

    def color_region(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Recolour a rectangle without touching its characters."""
        for row in range(y, y + height):
            for col in range(x, x + width):
                if 0 <= col < self.screen.width and 0 <= row < self.screen.height:
                    self.screen.set_char(col, row, self.screen.char_at(col, row), color)

    def get_key(self) -> Optional[str]:
        """Poll the keyboard: a key, or None if none is pressed."""
        try:
            return next(self._keys)
        except StopIteration:
            raise EOFError("no more key input") from None

    def wait_key(self) -> str:
        """Block until a key is pressed, calling ``on_idle`` while waiting."""
        while True:
            key = self.get_key()
            if key is not None:
                return key
            self.on_idle()

    def wait_frame(self) -> None:
        """Wait for the next display frame."""
        if self.frame_delay > 0:
            time.sleep(self.frame_delay)

    def draw_card_frame(
        self,
        x: int,
        y: int,
        card_id: int,
        card_type: int,
        attack: int,
        block: int,
        cost: int,
        can_afford: bool,
        selected: bool,
    ) -> None:
        """Draw a 7x4 card showing its short name, attack or block, and cost."""
        if not can_afford:
            frame_color, text_color = Color.GRAY1, Color.GRAY2
        elif selected:
            frame_color, text_color = Color.YELLOW, Color.WHITE
        else:
            frame_color = _TYPE_FRAME_COLORS.get(card_type, Color.WHITE)
            text_color = Color.WHITE

        put = self.screen.set_char
        inner = CARD_WIDTH - 2

        self.screen.print_string(x, y, "." + "-" * inner + ".", frame_color)

        put(x, y + 1, "|", frame_color)
        if 0 <= card_id < len(CARD_SHORT_NAMES):
            self.screen.print_string(x + 1, y + 1, CARD_SHORT_NAMES[card_id], text_color)
        put(x + 6, y + 1, "|", frame_color)

        row = y + 2
        put(x, row, "|", frame_color)
        if attack > 0:
            value, value_color = attack, Color.RED
        elif block > 0:
            value, value_color = block, Color.LIGHTBLUE
        else:
            value, value_color = None, text_color
        if value is None:
            digits = "  "
        elif value >= 10:
            digits = _digit(value // 10) + _digit(value % 10)
        else:
            digits = _digit(value) + " "
        self.screen.print_string(x + 1, row, digits, value_color)
        self.screen.print_string(x + 3, row, "  ", text_color)
        put(x + 5, row, _digit(cost), Color.CYAN)
        put(x + 6, row, "|", frame_color)

        self.screen.print_string(x, y + 3, "`" + "-" * inner + "'", frame_color)