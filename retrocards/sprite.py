"""Hardware sprite registers and memory of the video chip."""

from __future__ import annotations

from typing import Sequence

SPRITE_COUNT = 8
SPRITE_BYTES = 63
SPRITE_DATA_BASE = 0x3000
SPRITE_DATA_SIZE = 64
MEMORY_SIZE = 0x10000

SPRITE_CURSOR = 0
SPRITE_LEWIS = 1
SPRITE_FTP = 2


def _valid(sprite_num: int) -> bool:
    return 0 <= sprite_num < SPRITE_COUNT


def _with_bit(mask: int, bit: int, enabled: bool) -> int:
    if enabled:
        return mask | (1 << bit)
    return mask & ~(1 << bit) & 0xFF


class Vic:
    """Sprite state: eight sprites with positions, colours, flags and data pointers.

    Calls naming a sprite outside 0..7 are ignored, as the chip has no such sprite.
    """

    def __init__(self) -> None:
        self.memory = bytearray(MEMORY_SIZE)
        self.pointers = bytearray(SPRITE_COUNT)
        self.x_low = bytearray(SPRITE_COUNT)
        self.y = bytearray(SPRITE_COUNT)
        self.colors = bytearray(SPRITE_COUNT)
        self.mc1 = 0
        self.mc2 = 0
        self.reset()

    def reset(self) -> None:
        """Disable all sprites and clear multicolour, expansion, priority and X MSB."""
        self.enable_mask = 0
        self.multicolor_mask = 0
        self.expand_x_mask = 0
        self.expand_y_mask = 0
        self.priority_mask = 0
        self.msb_x_mask = 0

    def load(self, sprite_num: int, data: Sequence[int], location: int) -> None:
        """Copy 63 bytes of sprite data to ``location`` and point the sprite at it."""
        if len(data) < SPRITE_BYTES:
            raise ValueError(f"sprite data needs {SPRITE_BYTES} bytes, got {len(data)}")
        if not 0 <= location <= MEMORY_SIZE - SPRITE_BYTES:
            raise ValueError(f"location {location:#x} is outside memory")
        self.memory[location:location + SPRITE_BYTES] = bytes(data[:SPRITE_BYTES])
        if _valid(sprite_num):
            self.pointers[sprite_num] = (location // SPRITE_DATA_SIZE) & 0xFF

    def enable(self, sprite_num: int, enabled: bool) -> None:
        if _valid(sprite_num):
            self.enable_mask = _with_bit(self.enable_mask, sprite_num, enabled)

    def set_position(self, sprite_num: int, x: int, y: int) -> None:
        """Place a sprite; X above 255 sets the sprite's ninth X bit."""
        if not _valid(sprite_num):
            return
        self.x_low[sprite_num] = x & 0xFF
        self.msb_x_mask = _with_bit(self.msb_x_mask, sprite_num, x > 255)
        self.y[sprite_num] = y & 0xFF

    def position(self, sprite_num: int) -> tuple[int, int]:
        """The sprite's (x, y) including the ninth X bit."""
        if not _valid(sprite_num):
            raise ValueError(f"sprite {sprite_num} is outside 0..{SPRITE_COUNT - 1}")
        msb = 256 if self.msb_x_mask & (1 << sprite_num) else 0
        return self.x_low[sprite_num] | msb, self.y[sprite_num]

    def set_color(self, sprite_num: int, color: int) -> None:
        if _valid(sprite_num):
            self.colors[sprite_num] = color & 0xFF

    def set_expand_y(self, sprite_num: int, enabled: bool) -> None:
        if _valid(sprite_num):
            self.expand_y_mask = _with_bit(self.expand_y_mask, sprite_num, enabled)

    def set_multicolor(self, sprite_num: int, enabled: bool) -> None:
        if _valid(sprite_num):
            self.multicolor_mask = _with_bit(self.multicolor_mask, sprite_num, enabled)

    def set_multicolor_shared(self, mc1: int, mc2: int) -> None:
        """Set the two colours shared by all multicolour sprites."""
        self.mc1 = mc1 & 0xFF
        self.mc2 = mc2 & 0xFF