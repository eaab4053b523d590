"""The player's persistent and per-run state."""

from __future__ import annotations

from dataclasses import dataclass, field

from retrocards import cards

MAX_DECK_SIZE = 60
MAX_HAND_SIZE = 10
STARTING_HP = 50
STARTING_ENERGY = 3
STARTER_UNLOCKS = 0x0007

STARTER_DECK: tuple[int, ...] = (cards.STRIKE,) * 5 + (cards.DEFEND,) * 4 + (cards.BASH,)


@dataclass
class Player:
    """Player stats, deck and lifetime statistics."""

    hp: int = STARTING_HP
    max_hp: int = STARTING_HP
    energy: int = STARTING_ENERGY
    max_energy: int = STARTING_ENERGY
    block: int = 0
    run_progress: int = 0
    unlocks: int = STARTER_UNLOCKS
    total_runs: int = 0
    total_wins: int = 0
    deck: list[int] = field(default_factory=list)

    def start_run(self) -> None:
        """Restore stats, build the starter deck and count the run."""
        self.hp = self.max_hp
        self.energy = self.max_energy
        self.block = 0
        self.run_progress = 0
        self.deck = list(STARTER_DECK)
        self.total_runs = (self.total_runs + 1) & 0xFF

    def start_combat(self) -> None:
        """Reset per-combat stats."""
        self.block = 0
        self.energy = self.max_energy

    def start_turn(self) -> None:
        """Refill energy; block does not carry over between turns."""
        self.energy = self.max_energy
        self.block = 0

    def take_damage(self, damage: int) -> None:
        """Apply damage, letting block absorb it first."""
        if damage <= self.block:
            self.block -= damage
            return
        damage -= self.block
        self.block = 0
        self.hp = max(0, self.hp - damage)

    def gain_block(self, amount: int) -> None:
        self.block = min(255, self.block + amount)

    def heal(self, amount: int) -> None:
        self.hp = min(self.max_hp, self.hp + amount)

    def can_play(self, card_id: int) -> bool:
        """True if the player has enough energy for the card."""
        return self.energy >= cards.card_by_id(card_id).cost

    def spend_energy(self, amount: int) -> None:
        self.energy = max(0, self.energy - amount)

    def add_card(self, card_id: int) -> None:
        """Add a card to the deck unless it is already full."""
        if len(self.deck) < MAX_DECK_SIZE:
            self.deck.append(card_id)

    def remove_card(self, card_id: int) -> None:
        """Remove the first copy of ``card_id`` from the deck, if any."""
        if card_id in self.deck:
            self.deck.remove(card_id)