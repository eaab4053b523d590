"""Run progression: which enemy appears on each floor and run completion."""

from __future__ import annotations

from retrocards.player import Player
from retrocards.rng import Lcg

MAX_ENCOUNTERS = 5
BOSS_DRAGON = 4
VICTORY_HEAL = 10


def enemy_for_floor(floor: int, rng: Lcg) -> int:
    """Pick an enemy id for ``floor``: easy, medium, then the boss."""
    if floor <= 1:
        return rng.range(0, 2)
    if floor <= 3:
        return rng.range(1, 3)
    return BOSS_DRAGON


def start(player: Player) -> None:
    player.run_progress = 0


def advance(player: Player) -> None:
    player.run_progress = (player.run_progress + 1) & 0xFF


def is_run_complete(player: Player) -> bool:
    return player.run_progress >= MAX_ENCOUNTERS


def victory_rewards(player: Player) -> None:
    """Heal the player after a won encounter."""
    player.heal(VICTORY_HEAL)