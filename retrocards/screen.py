"""A 40x25 text screen with a character and a colour per cell."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union

WIDTH = 40
HEIGHT = 25
SIZE = WIDTH * HEIGHT


class Color(IntEnum):
    """The sixteen-colour palette."""

    BLACK = 0
    WHITE = 1
    RED = 2
    CYAN = 3
    PURPLE = 4
    GREEN = 5
    BLUE = 6
    YELLOW = 7
    ORANGE = 8
    BROWN = 9
    LIGHTRED = 10
    GRAY1 = 11
    GRAY2 = 12
    LIGHTGREEN = 13
    LIGHTBLUE = 14
    GRAY3 = 15


CharLike = Union[str, int]


def _code(ch: CharLike) -> int:
    return (ord(ch) if isinstance(ch, str) else int(ch)) & 0xFF


class Screen:
    """Screen and colour memory plus border and background colours.

    Cells outside the 40x25 grid are silently ignored on writes.
    """

    width = WIDTH
    height = HEIGHT

    def __init__(self) -> None:
        self.chars = bytearray(b" " * SIZE)
        self.colors = bytearray([Color.WHITE] * SIZE)
        self.background: int = Color.BLACK
        self.border: int = Color.BLUE

    def clear(self) -> None:
        """Fill the screen with white spaces."""
        self.chars[:] = b" " * SIZE
        self.colors[:] = bytes([Color.WHITE]) * SIZE

    @staticmethod
    def _inside(x: int, y: int) -> bool:
        return 0 <= x < WIDTH and 0 <= y < HEIGHT

    def set_char(self, x: int, y: int, ch: CharLike, color: Optional[int] = None) -> None:
        """Put a character at a cell; a colour of None keeps the cell's colour."""
        if not self._inside(x, y):
            return
        offset = y * WIDTH + x
        self.chars[offset] = _code(ch)
        if color is not None:
            self.colors[offset] = int(color) & 0xFF

    def print_string(self, x: int, y: int, text: str, color: int) -> None:
        """Write text on one row, clipped at the right edge."""
        for i, ch in enumerate(text):
            if x + i >= WIDTH:
                break
            self.set_char(x + i, y, ch, color)

    def print_centered(self, y: int, text: str, color: int) -> None:
        length = min(len(text), WIDTH)
        self.print_string((WIDTH - length) // 2, y, text, color)

    def hline(self, x: int, y: int, width: int, ch: CharLike, color: int) -> None:
        for i in range(width):
            if x + i >= WIDTH:
                break
            self.set_char(x + i, y, ch, color)

    def vline(self, x: int, y: int, height: int, ch: CharLike, color: int) -> None:
        for i in range(height):
            if y + i >= HEIGHT:
                break
            self.set_char(x, y + i, ch, color)

    def box(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Draw an ASCII box with ``-`` and ``|`` edges and ``+`` corners."""
        right = x + width - 1
        bottom = y + height - 1
        self.hline(x, y, width, "-", color)
        self.hline(x, bottom, width, "-", color)
        self.vline(x, y, height, "|", color)
        self.vline(right, y, height, "|", color)
        for cx, cy in ((x, y), (right, y), (x, bottom), (right, bottom)):
            self.set_char(cx, cy, "+", color)

    def fill_rect(self, x: int, y: int, width: int, height: int, ch: CharLike, color: int) -> None:
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.set_char(col, row, ch, color)

    def char_at(self, x: int, y: int) -> int:
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")
        return self.chars[y * WIDTH + x]

    def color_at(self, x: int, y: int) -> int:
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")
        return self.colors[y * WIDTH + x]

    def row_text(self, y: int) -> str:
        """The characters of one row as a string."""
        if not 0 <= y < HEIGHT:
            raise IndexError(f"row {y} is outside the screen")
        return "".join(map(chr, self.chars[y * WIDTH:(y + 1) * WIDTH]))

    def render(self) -> str:
        """The whole screen as text, one line per row."""
        return "\n".join(self.row_text(y) for y in range(HEIGHT))