"""Short-lived visual effects: colour flashes, row shakes and damage numbers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from retrocards.screen import SIZE, WIDTH, Color, Screen
from retrocards.ui import format_number

MAX_ACTIVE_EFFECTS = 4
EFFECT_FRAMES = 20
HIGHLIGHT_FRAMES = 4
MAX_FLASH_ROWS = 3
MAX_BACKUP_WIDTH = 40


class EffectKind(IntEnum):
    NONE = 0
    FLASH = 1
    SHAKE = 2
    DAMAGE_NUM = 3
    HIGHLIGHT = 4
    SCREEN_FLASH = 5


@dataclass
class Effect:
    """One running effect; ``timer`` counts the frames it has left."""

    kind: EffectKind
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    timer: int = EFFECT_FRAMES
    param1: int = 0
    param2: int = 0


class EffectQueue:
    """A fixed number of effect slots drawn onto a screen.

    When every slot is busy, new effects are dropped.
    """

    def __init__(self, screen: Screen) -> None:
        self.screen = screen
        self.slots: list[Optional[Effect]] = [None] * MAX_ACTIVE_EFFECTS
        self._shake_backup: Optional[bytes] = None
        self._flash_backup: Optional[list[int]] = None
        self._saved_border: int = 0
        self._saved_background: int = 0

    def clear(self) -> None:
        """Drop every effect and forget saved screen contents."""
        self.slots = [None] * MAX_ACTIVE_EFFECTS
        self._shake_backup = None
        self._flash_backup = None

    def active_count(self) -> int:
        return sum(1 for effect in self.slots if effect is not None)

    def _add(self, effect: Effect) -> Optional[Effect]:
        for index, slot in enumerate(self.slots):
            if slot is None:
                self.slots[index] = effect
                return effect
        return None

    @staticmethod
    def _flash_cells(effect: Effect):
        """Linear offsets of the cells a region flash covers, in backup order."""
        for row in range(min(effect.height, MAX_FLASH_ROWS)):
            base = (effect.y + row) * WIDTH + effect.x
            for col in range(min(effect.width, MAX_BACKUP_WIDTH)):
                yield base + col

    def _restore(self, effect: Effect) -> None:
        if effect.kind == EffectKind.SHAKE and self._shake_backup is not None:
            base = effect.y * WIDTH + effect.x
            for j, value in enumerate(self._shake_backup[: effect.width]):
                if 0 <= base + j < SIZE:
                    self.screen.chars[base + j] = value
            self._shake_backup = None
        if effect.kind == EffectKind.FLASH and self._flash_backup is not None:
            for offset, value in zip(self._flash_cells(effect), self._flash_backup):
                if 0 <= offset < SIZE:
                    self.screen.colors[offset] = value
            self._flash_backup = None
        if effect.kind == EffectKind.SCREEN_FLASH:
            self.screen.border = self._saved_border
            self.screen.background = self._saved_background

    def update(self) -> None:
        """Advance every timer and remove expired effects, restoring the screen."""
        for index, effect in enumerate(self.slots):
            if effect is None:
                continue
            if effect.timer > 0:
                effect.timer -= 1
            if effect.timer == 0:
                self._restore(effect)
                self.slots[index] = None

    def render(self) -> None:
        """Draw the current frame of every active effect."""
        for effect in self.slots:
            if effect is None:
                continue
            if effect.kind == EffectKind.FLASH:
                self._render_flash(effect)
            elif effect.kind == EffectKind.SHAKE:
                self._render_shake(effect)
            elif effect.kind == EffectKind.DAMAGE_NUM:
                if effect.timer > 0:
                    self.screen.print_string(
                        effect.x, effect.y, format_number(effect.param2), effect.param1
                    )
            elif effect.kind == EffectKind.SCREEN_FLASH:
                self._render_screen_flash(effect)

    def _render_flash(self, effect: Effect) -> None:
        colors = self.screen.colors
        cells = [offset for offset in self._flash_cells(effect)]
        if self._flash_backup is None:
            self._flash_backup = [colors[o] if 0 <= o < SIZE else 0 for o in cells]
        flash_on = effect.timer % 2 == 0
        for offset, original in zip(cells, self._flash_backup):
            if 0 <= offset < SIZE:
                colors[offset] = (effect.param1 if flash_on else original) & 0xFF

    def _render_shake(self, effect: Effect) -> None:
        chars = self.screen.chars
        base = effect.y * WIDTH + effect.x
        if effect.timer == effect.param1 - 1:
            width = min(effect.width, MAX_BACKUP_WIDTH)
            self._shake_backup = bytes(
                chars[base + j] if 0 <= base + j < SIZE else 0 for j in range(width)
            )
        if effect.width <= 1:
            return
        if effect.timer % 2 == 0:
            indexes = range(effect.width - 1, 0, -1)
            step = -1
        else:
            indexes = range(0, effect.width - 1)
            step = 1
        for j in indexes:
            target, source = base + j, base + j + step
            if 0 <= target < SIZE and 0 <= source < SIZE:
                chars[target] = chars[source]

    def _render_screen_flash(self, effect: Effect) -> None:
        if effect.timer == effect.param2:
            self._saved_border = self.screen.border
            self._saved_background = self.screen.background
        if effect.timer % 2 == 0:
            self.screen.border = effect.param1
            self.screen.background = effect.param1
        else:
            self.screen.border = self._saved_border
            self.screen.background = self._saved_background

    def add_flash(self, x: int, y: int, width: int, height: int, color: int) -> Optional[Effect]:
        """Flash the colours of a region (at most three rows)."""
        return self._add(Effect(EffectKind.FLASH, x, y, width, height, EFFECT_FRAMES, color, 0))

    def add_shake(self, x: int, y: int, width: int, height: int) -> Optional[Effect]:
        """Jiggle the characters of one row back and forth."""
        return self._add(
            Effect(EffectKind.SHAKE, x, y, width, height, EFFECT_FRAMES, EFFECT_FRAMES, 0)
        )

    def add_damage(self, x: int, y: int, value: int, to_enemy: bool) -> Optional[Effect]:
        """Show a number: red for the enemy, light red for the player."""
        color = Color.RED if to_enemy else Color.LIGHTRED
        return self._add(
            Effect(EffectKind.DAMAGE_NUM, x, y, 0, 0, EFFECT_FRAMES, color, value)
        )

    def add_card_highlight(self, card_index: int) -> Optional[Effect]:
        return self._add(
            Effect(EffectKind.HIGHLIGHT, 0, 0, 0, 0, HIGHLIGHT_FRAMES, card_index, 0)
        )

    def highlighted_card(self) -> Optional[int]:
        """Hand index of the highlighted card, or None."""
        for effect in self.slots:
            if effect is not None and effect.kind == EffectKind.HIGHLIGHT:
                return effect.param1
        return None

    def add_screen_flash(self, color: int) -> Optional[Effect]:
        """Flash the border and background in ``color``."""
        return self._add(
            Effect(EffectKind.SCREEN_FLASH, 0, 0, 0, 0, EFFECT_FRAMES, color, EFFECT_FRAMES)
        )