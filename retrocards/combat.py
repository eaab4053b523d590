"""A single fight between the player and one enemy."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from retrocards import cards
from retrocards.cards import CardEffect, CardType
from retrocards.deck import Deck
from retrocards.effects import EffectQueue
from retrocards.enemy import Enemy, Intent, enemy_name
from retrocards.player import Player
from retrocards.rng import Lcg
from retrocards.screen import WIDTH, Color
from retrocards.ui import Console

HAND_SIZE = 5
EXECUTE_BONUS = 10
DRAW_EFFECT_CARDS = 2
ENERGY_EFFECT_GAIN = 2


class CombatState(Enum):
    PLAYER_TURN = 0
    ENEMY_TURN = 1
    VICTORY = 2
    DEFEAT = 3


def _count_text(value: int) -> str:
    """One or two digits, as the combat log shows them."""
    if value >= 10:
        return chr(ord("0") + value // 10) + chr(ord("0") + value % 10)
    return chr(ord("0") + value)


class Combat:
    """Turn loop, card resolution and the combat screen."""

    def __init__(
        self,
        player: Player,
        enemy_id: int,
        rng: Lcg,
        console: Console,
        effects: Optional[EffectQueue] = None,
    ) -> None:
        self.player = player
        self.rng = rng
        self.console = console
        self.effects = effects if effects is not None else EffectQueue(console.screen)
        self.enemy = Enemy.spawn(enemy_id, rng)
        self.deck = Deck(player.deck, rng)
        player.energy = player.max_energy
        player.block = 0
        self.deck.draw_to(HAND_SIZE)
        self.effects.clear()
        self.state = CombatState.PLAYER_TURN
        self.log = "Combat begins!"

    def _animate_effects(self) -> None:
        while self.effects.active_count() > 0:
            self.console.wait_frame()
            self.effects.update()
            self.effects.render()

    def start_turn(self) -> None:
        """Refill energy, clear block and deal a fresh hand."""
        self.player.energy = self.player.max_energy
        self.player.block = 0
        self.deck.discard_hand()
        self.deck.draw_to(HAND_SIZE)
        self.log = "Your turn!"
        self.state = CombatState.PLAYER_TURN

    def play_card(self, hand_index: int) -> None:
        """Play the card at ``hand_index``; invalid indexes are ignored."""
        if not 0 <= hand_index < len(self.deck.hand):
            return
        card_id = self.deck.hand[hand_index]
        card = cards.card_by_id(card_id)
        if not self.player.can_play(card_id):
            self.log = "Not enough energy!"
            return

        self.player.spend_energy(card.cost)
        self.effects.add_card_highlight(hand_index)

        if card.type == CardType.ATTACK:
            damage = card.attack
            if card.effects & CardEffect.EXECUTE and self.enemy.hp <= self.enemy.max_hp // 2:
                damage += EXECUTE_BONUS
                self.effects.add_screen_flash(Color.ORANGE)
            self.enemy.take_damage(damage)
            self.effects.add_screen_flash(Color.RED)
            self.effects.add_damage(17, 4, damage, True)
            self.log = "You attack for "
        elif card.type == CardType.SKILL:
            if card.block > 0:
                self.player.gain_block(card.block)
                self.effects.add_screen_flash(Color.CYAN)
                self.effects.add_damage(32, 0, card.block, False)
                self.log = "You gain block!"
            if card.effects & CardEffect.DRAW:
                for _ in range(DRAW_EFFECT_CARDS):
                    self.deck.draw()
                self.effects.add_screen_flash(Color.YELLOW)
                self.log = "You draw 2 cards!"
            if card.effects & CardEffect.ENERGY:
                self.player.energy = (self.player.energy + ENERGY_EFFECT_GAIN) & 0xFF
                self.effects.add_screen_flash(Color.GREEN)
                self.log = "You gain energy!"

        self.deck.play(hand_index)
        if self.enemy.is_dead():
            self.state = CombatState.VICTORY

    def end_turn(self) -> None:
        """Let the enemy act, show the result, then start the next turn."""
        self.state = CombatState.ENEMY_TURN
        hp_before = self.player.hp

        action, value = self.enemy.execute_action(self.player)
        if action == Intent.ATTACK:
            self.effects.add_screen_flash(Color.RED)
            self.effects.add_damage(18, 1, value, False)
            self.effects.add_shake(1, 0, 35, 1)
        elif action == Intent.DEFEND:
            self.effects.add_screen_flash(Color.BLUE)
            self.effects.add_damage(17, 4, value, True)

        # The log reports on the enemy's freshly planned intent.
        if self.enemy.intent == Intent.ATTACK:
            dealt = hp_before - self.player.hp
            self.log = "Enemy attacks for " + _count_text(dealt) + "!"
        elif self.enemy.intent == Intent.DEFEND:
            self.log = "Enemy gains " + _count_text(self.enemy.intent_value) + " block!"

        self.render()
        self._animate_effects()

        if self.player.hp == 0:
            self.state = CombatState.DEFEAT
            self.log = "You have been defeated!"
            self.render()
            self.console.wait_key()
            return

        self.console.print_at_color(1, 22, "Press any key to continue...", Color.YELLOW)
        self.console.wait_key()
        self.start_turn()

    def render(self) -> None:
        """Draw status bar, enemy, log and hand."""
        console = self.console
        player = self.player
        enemy = self.enemy
        console.clear()
        console.screen.fill_rect(0, 0, WIDTH, 1, " ", Color.BLACK)

        console.print_at_color(1, 0, "HP:", Color.RED)
        console.print_number_at_color(5, 0, player.hp, Color.RED)
        console.print_at_color(7, 0, "/", Color.RED)
        console.print_number_at_color(8, 0, player.max_hp, Color.RED)

        console.print_at_color(15, 0, "EN:", Color.CYAN)
        console.print_number_at_color(19, 0, player.energy, Color.CYAN)
        console.print_at_color(21, 0, "/", Color.CYAN)
        console.print_number_at_color(22, 0, player.max_energy, Color.CYAN)

        console.print_at_color(27, 0, "BLK:", Color.LIGHTBLUE)
        console.print_number_at_color(32, 0, player.block, Color.LIGHTBLUE)

        console.print_at_color(15, 3, enemy_name(enemy.id), Color.YELLOW)
        console.print_at_color(13, 4, "HP:", Color.RED)
        console.print_number_at_color(17, 4, enemy.hp, Color.RED)
        console.print_at_color(19, 4, "/", Color.RED)
        console.print_number_at_color(20, 4, enemy.max_hp, Color.RED)

        console.print_at_color(12, 5, "INTENT: ", Color.WHITE)
        if enemy.intent == Intent.ATTACK:
            console.print_at_color(20, 5, "ATTACK ", Color.RED)
            console.print_number_at_color(27, 5, enemy.intent_value, Color.RED)
        elif enemy.intent == Intent.DEFEND:
            console.print_at_color(20, 5, "DEFEND ", Color.LIGHTBLUE)
            console.print_number_at_color(27, 5, enemy.intent_value, Color.LIGHTBLUE)

        console.print_at_color(1, 8, self.log, Color.GRAY3)
        console.print_at_color(1, 11, "HAND:", Color.YELLOW)

        highlighted = self.effects.highlighted_card()
        for i, card_id in enumerate(self.deck.hand[:HAND_SIZE]):
            card_x = 2 + i * 8
            card = cards.card_by_id(card_id)
            console.draw_card_frame(
                card_x, 13, card.id, card.type, card.attack, card.block, card.cost,
                player.can_play(card_id), highlighted == i,
            )
            console.print_at_color(card_x + 3, 17, "[", Color.WHITE)
            console.print_number(card_x + 4, 17, i + 1)
            console.print_at_color(card_x + 5, 17, "]", Color.WHITE)

        console.print_at(1, 23, "[1-5]Play [E]nd Turn")

    def run(self) -> None:
        """Handle key presses during the player's turn until it ends."""
        self.render()
        while self.state == CombatState.PLAYER_TURN:
            self.effects.update()
            if self.effects.active_count() > 0:
                self.effects.render()
            key = self.console.get_key()
            if key is None or len(key) != 1:
                continue
            if "1" <= key <= "5":
                self.play_card(ord(key) - ord("1"))
                self._animate_effects()
                self.render()
            elif key in ("e", "E"):
                self.end_turn()
                break