"""Enemies: stats per kind, intent selection and taking damage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from retrocards.player import Player
from retrocards.rng import Lcg


class EnemyKind(IntEnum):
    SLIME = 0
    GOBLIN = 1
    CULTIST = 2
    ELITE_ORC = 3
    BOSS_DRAGON = 4


class Intent(IntEnum):
    """What the enemy will do on its next turn."""

    ATTACK = 0
    DEFEND = 1
    BUFF = 2
    DEBUFF = 3


@dataclass(frozen=True)
class _Stats:
    max_hp: int
    attack_min: int
    attack_max: int
    is_elite: bool


_NAMES = {
    EnemyKind.SLIME: "SLIME",
    EnemyKind.GOBLIN: "GOBLIN",
    EnemyKind.CULTIST: "CULTIST",
    EnemyKind.ELITE_ORC: "ELITE ORC",
    EnemyKind.BOSS_DRAGON: "DRAGON BOSS",
}

_SPRITES = {
    EnemyKind.SLIME: 81,
    EnemyKind.GOBLIN: 87,
    EnemyKind.CULTIST: 69,
    EnemyKind.ELITE_ORC: 79,
    EnemyKind.BOSS_DRAGON: 68,
}

_STATS = {
    EnemyKind.SLIME: _Stats(20, 3, 6, False),
    EnemyKind.GOBLIN: _Stats(25, 5, 8, False),
    EnemyKind.CULTIST: _Stats(30, 6, 10, False),
    EnemyKind.ELITE_ORC: _Stats(45, 8, 12, True),
    EnemyKind.BOSS_DRAGON: _Stats(80, 10, 15, True),
}
_DEFAULT_STATS = _Stats(20, 3, 6, False)

ATTACK_CHANCE = 75
DEFEND_MIN = 5
DEFEND_MAX = 10
ELITE_PATTERN_LENGTH = 3
ELITE_BIG_ATTACK_STEP = 2
ELITE_BIG_ATTACK_BONUS = 3
MAX_BLOCK = 255

_INTENT_CHARS = {Intent.ATTACK: 33, Intent.DEFEND: 83}
_UNKNOWN_INTENT_CHAR = 63


def enemy_name(enemy_id: int) -> str:
    """Display name of an enemy kind, or ``UNKNOWN``."""
    return _NAMES.get(enemy_id, "UNKNOWN")


@dataclass
class Enemy:
    """An enemy in combat together with its next planned action."""

    id: int
    hp: int
    max_hp: int
    attack_min: int
    attack_max: int
    is_elite: bool
    rng: Lcg = field(repr=False, compare=False)
    block: int = 0
    intent: Intent = Intent.ATTACK
    intent_value: int = 0
    ai_state: int = 0
    sprite_char: int = 0
    pattern_index: int = 0

    @classmethod
    def spawn(cls, enemy_id: int, rng: Lcg) -> "Enemy":
        """Create an enemy of the given kind at full health with its first intent."""
        stats = _STATS.get(enemy_id, _DEFAULT_STATS)
        enemy = cls(
            id=enemy_id,
            hp=stats.max_hp,
            max_hp=stats.max_hp,
            attack_min=stats.attack_min,
            attack_max=stats.attack_max,
            is_elite=stats.is_elite,
            rng=rng,
            sprite_char=_SPRITES.get(enemy_id, 0),
        )
        enemy.calculate_intent()
        return enemy

    def calculate_intent(self) -> None:
        """Choose the next action: mostly attacks, sometimes blocks.

        Elite enemies follow a three-step pattern whose last step is
        always a heavy attack.
        """
        if self.rng.range(0, 100) < ATTACK_CHANCE:
            self.intent = Intent.ATTACK
            self.intent_value = self.rng.range(self.attack_min, self.attack_max + 1)
        else:
            self.intent = Intent.DEFEND
            self.intent_value = self.rng.range(DEFEND_MIN, DEFEND_MAX)

        if self.is_elite:
            self.pattern_index = (self.pattern_index + 1) % ELITE_PATTERN_LENGTH
            if self.pattern_index == ELITE_BIG_ATTACK_STEP:
                self.intent = Intent.ATTACK
                self.intent_value = (self.attack_max + ELITE_BIG_ATTACK_BONUS) & 0xFF

    def execute_action(self, player: Player) -> tuple[Intent, int]:
        """Carry out the current intent and plan the next one.

        Returns the intent and value that were carried out.
        """
        action = (self.intent, self.intent_value)
        if self.intent == Intent.ATTACK:
            player.take_damage(self.intent_value)
        elif self.intent == Intent.DEFEND:
            self.gain_block(self.intent_value)
        self.block = 0
        self.calculate_intent()
        return action

    def take_damage(self, damage: int) -> None:
        """Apply damage, letting block absorb it first."""
        if damage <= self.block:
            self.block -= damage
            return
        damage -= self.block
        self.block = 0
        self.hp = max(0, self.hp - damage)

    def gain_block(self, amount: int) -> None:
        self.block = min(MAX_BLOCK, self.block + amount)

    def is_dead(self) -> bool:
        return self.hp == 0

    def intent_char(self) -> int:
        """Character code shown for the current intent."""
        return _INTENT_CHARS.get(self.intent, _UNKNOWN_INTENT_CHAR)