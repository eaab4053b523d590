"""Sprite bitmaps for the intro and helpers to turn them into pixel rows."""

from __future__ import annotations

from typing import Sequence

SPRITE_BYTES = 63
SPRITE_ROWS = 21
ROW_BYTES = 3
HIRES_WIDTH = 24
MULTICOLOR_WIDTH = 12


def _sprite(*rows: str) -> bytes:
    """Build a sprite from hex rows of three bytes, zero-padded to full size."""
    data = bytes.fromhex("".join(rows))
    if len(data) > SPRITE_BYTES:
        raise ValueError("too many sprite rows")
    return data.ljust(SPRITE_BYTES, b"\x00")


# Lewis: face with sunglasses (multicolour).
SPRITE_LEWIS = _sprite(
    "005400", "015500",
    *["055540"] * 4,
    *["AF00FA"] * 4,
    *["055540"] * 3,
    *["050540"] * 2,
    *["014100"] * 2,
    *["005400"] * 2,
)

# Axe: hooded face (multicolour).
SPRITE_AXE = _sprite(
    "00A800", "02AA00", "0AAA80",
    *["2AAAA0"] * 2,
    *["AA55A8"] * 2,
    *["AA11A8"] * 2,
    *["AA55A8"] * 2,
    "AA45A8", "2A55A0", "2AAAA0", "0AAA80", "02AA00", "00A800",
)

# Cursor: solid block in the top eight rows.
SPRITE_CURSOR = _sprite(*["FFFFFF"] * 8)

SPINNER_FRAME1 = _sprite(
    *["001800"] * 3, "003C00", *["007E00"] * 2, "003C00", *["001800"] * 3,
)

SPINNER_FRAME2 = _sprite(
    "600000", "300000", "180000", "0C0000", "060000",
    "030000", "018000", "00C000", "006000", "003000",
)

SPINNER_FRAME3 = _sprite(*["000000"] * 5, *["FFFFFF"] * 2)

SPINNER_FRAME4 = _sprite(
    "000060", "000030", "000018", "00000C", "000006",
    "000003", "000180", "000C00", "006000", "003000",
)

SPINNER_FRAMES: tuple[bytes, ...] = (
    SPINNER_FRAME1,
    SPINNER_FRAME2,
    SPINNER_FRAME3,
    SPINNER_FRAME4,
)


def _row_bits(data: Sequence[int]) -> list[str]:
    raw = bytes(data)
    if len(raw) != SPRITE_BYTES:
        raise ValueError(f"sprite data must be {SPRITE_BYTES} bytes, got {len(raw)}")
    return [
        format(int.from_bytes(raw[start:start + ROW_BYTES], "big"), "024b")
        for start in range(0, SPRITE_ROWS * ROW_BYTES, ROW_BYTES)
    ]


def decode_hires(data: Sequence[int]) -> tuple[str, ...]:
    """Rows of 24 pixels, ``#`` for set and ``.`` for clear."""
    table = str.maketrans("01", ".#")
    return tuple(bits.translate(table) for bits in _row_bits(data))


def decode_multicolor(data: Sequence[int]) -> tuple[tuple[int, ...], ...]:
    """Rows of 12 double-width pixels, each a colour source 0..3."""
    return tuple(
        tuple(int(bits[i:i + 2], 2) for i in range(0, HIRES_WIDTH, 2))
        for bits in _row_bits(data)
    )