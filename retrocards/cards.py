"""Card definitions, the card database and unlock bit flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class CardType(IntEnum):
    ATTACK = 0
    SKILL = 1
    POWER = 2


class Target(IntEnum):
    ENEMY = 0
    SELF = 1
    ALL = 2


class CardEffect(IntFlag):
    NONE = 0x00
    DRAW = 0x01
    ENERGY = 0x02
    EXECUTE = 0x04
    EXHAUST = 0x08


STRIKE = 0
DEFEND = 1
BASH = 2
HEAVY_STRIKE = 3
IRON_WALL = 4
DRAW = 5
ENERGY = 6
EXECUTE = 7
CLEAVE = 8
SHIELD_BASH = 9
POWER_STRIKE = 10
ARMORED = 11
QUICK_SLASH = 12
FORTIFY = 13
BERSERK = 14

MAX_CARDS = 15


@dataclass(frozen=True)
class Card:
    """A single card's static properties."""

    id: int
    cost: int
    attack: int
    block: int
    type: CardType
    effects: CardEffect
    target: Target
    name: str


CARD_DATABASE: tuple[Card, ...] = (
    Card(STRIKE, 1, 6, 0, CardType.ATTACK, CardEffect.NONE, Target.ENEMY, "STRIKE"),
    Card(DEFEND, 1, 0, 5, CardType.SKILL, CardEffect.NONE, Target.SELF, "DEFEND"),
    Card(BASH, 2, 8, 0, CardType.ATTACK, CardEffect.NONE, Target.ENEMY, "BASH"),
    Card(HEAVY_STRIKE, 2, 14, 0, CardType.ATTACK, CardEffect.NONE, Target.ENEMY, "HEAVY STRIKE"),
    Card(IRON_WALL, 2, 0, 12, CardType.SKILL, CardEffect.NONE, Target.SELF, "IRON WALL"),
    Card(DRAW, 1, 0, 0, CardType.SKILL, CardEffect.DRAW, Target.SELF, "DRAW"),
    Card(ENERGY, 0, 0, 0, CardType.SKILL, CardEffect.ENERGY, Target.SELF, "ENERGY"),
    Card(EXECUTE, 2, 10, 0, CardType.ATTACK, CardEffect.EXECUTE, Target.ENEMY, "EXECUTE"),
    Card(CLEAVE, 1, 4, 0, CardType.ATTACK, CardEffect.NONE, Target.ALL, "CLEAVE"),
    Card(SHIELD_BASH, 2, 6, 6, CardType.ATTACK, CardEffect.NONE, Target.ENEMY, "SHIELD BASH"),
    Card(POWER_STRIKE, 3, 16, 0, CardType.ATTACK, CardEffect.EXHAUST, Target.ENEMY, "POWER STRIKE"),
    Card(ARMORED, 2, 0, 8, CardType.SKILL, CardEffect.NONE, Target.SELF, "ARMORED"),
    Card(QUICK_SLASH, 0, 3, 0, CardType.ATTACK, CardEffect.NONE, Target.ENEMY, "QUICK SLASH"),
    Card(FORTIFY, 1, 0, 7, CardType.SKILL, CardEffect.NONE, Target.SELF, "FORTIFY"),
    Card(BERSERK, 1, 10, 0, CardType.ATTACK, CardEffect.NONE, Target.ENEMY, "BERSERK"),
)

_BY_ID = {card.id: card for card in CARD_DATABASE}


def card_by_id(card_id: int) -> Card:
    """Return the card with ``card_id``; unknown ids give STRIKE."""
    return _BY_ID.get(card_id, CARD_DATABASE[0])


def card_name(card_id: int) -> str:
    """Return the display name of a card."""
    return card_by_id(card_id).name


def is_unlocked(card_id: int, unlock_flags: int) -> bool:
    """Starter cards are always unlocked; others are checked against the bitmask."""
    if card_id <= BASH:
        return True
    return bool(unlock_flags & (1 << card_id))


def unlock(card_id: int, unlock_flags: int) -> int:
    """Return ``unlock_flags`` with the bit for ``card_id`` set (ids 0..15 only)."""
    if 0 <= card_id < 16:
        unlock_flags |= 1 << card_id
    return unlock_flags & 0xFFFF