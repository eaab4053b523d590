"""Draw pile, hand and discard pile for a single combat."""

from __future__ import annotations

from typing import Iterable, Optional

from retrocards.player import MAX_HAND_SIZE
from retrocards.rng import Lcg


class Deck:
    """The three card piles used during combat."""

    def __init__(self, cards: Iterable[int], rng: Lcg) -> None:
        self.rng = rng
        self.draw_pile: list[int] = list(cards)
        self.hand: list[int] = []
        self.discard_pile: list[int] = []
        self.rng.shuffle(self.draw_pile)

    def reshuffle_discard(self) -> None:
        """Move the discard pile onto the draw pile and shuffle it."""
        self.draw_pile.extend(self.discard_pile)
        self.discard_pile.clear()
        self.rng.shuffle(self.draw_pile)

    def draw(self) -> bool:
        """Draw the top card into the hand; False if none can be drawn."""
        if not self.draw_pile:
            if not self.discard_pile:
                return False
            self.reshuffle_discard()
        if len(self.hand) >= MAX_HAND_SIZE:
            return False
        self.hand.append(self.draw_pile.pop())
        return True

    def discard_hand(self) -> None:
        self.discard_pile.extend(self.hand)
        self.hand.clear()

    def discard(self, index: int) -> Optional[int]:
        """Discard the card at ``index``; out-of-range indexes do nothing."""
        if not 0 <= index < len(self.hand):
            return None
        card_id = self.hand.pop(index)
        self.discard_pile.append(card_id)
        return card_id

    def play(self, index: int) -> Optional[int]:
        """Play a card from the hand, which sends it to the discard pile."""
        return self.discard(index)

    def draw_to(self, size: int) -> None:
        """Draw until the hand holds ``size`` cards or nothing can be drawn."""
        while len(self.hand) < size and self.draw():
            pass