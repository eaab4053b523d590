from collections import Counter

from retrocards.deck import Deck
from retrocards.player import MAX_HAND_SIZE, STARTER_DECK
from retrocards.rng import Lcg


def _all_cards(deck):
    return Counter(deck.draw_pile + deck.hand + deck.discard_pile)


def test_new_deck_holds_every_card_in_draw_pile():
    deck = Deck(STARTER_DECK, Lcg(7))
    assert sorted(deck.draw_pile) == sorted(STARTER_DECK)
    assert deck.hand == []
    assert deck.discard_pile == []


def test_draw_to_fills_hand():
    deck = Deck(STARTER_DECK, Lcg(7))
    deck.draw_to(5)
    assert len(deck.hand) == 5
    assert len(deck.draw_pile) == 5
    assert _all_cards(deck) == Counter(STARTER_DECK)


def test_draw_takes_top_card():
    deck = Deck([1, 2, 3], Lcg(9))
    top = deck.draw_pile[-1]
    assert deck.draw() is True
    assert deck.hand == [top]


def test_draw_reshuffles_discard_when_empty():
    deck = Deck([0, 1], Lcg(3))
    deck.draw_to(2)
    deck.discard_hand()
    assert deck.draw_pile == []
    assert deck.draw() is True
    assert len(deck.hand) == 1
    assert deck.discard_pile == []
    assert len(deck.draw_pile) == 1


def test_draw_fails_when_no_cards_anywhere():
    deck = Deck([], Lcg(3))
    assert deck.draw() is False
    deck.draw_to(5)
    assert deck.hand == []


def test_hand_limit():
    deck = Deck([0] * 20, Lcg(11))
    deck.draw_to(15)
    assert len(deck.hand) == MAX_HAND_SIZE
    assert deck.draw() is False


def test_discard_hand():
    deck = Deck(STARTER_DECK, Lcg(5))
    deck.draw_to(5)
    hand = list(deck.hand)
    deck.discard_hand()
    assert deck.hand == []
    assert deck.discard_pile == hand


def test_discard_shifts_remaining_cards():
    deck = Deck([4, 5, 6], Lcg(1))
    deck.draw_to(3)
    expected_rest = [deck.hand[0], deck.hand[2]]
    removed = deck.hand[1]
    assert deck.discard(1) == removed
    assert deck.hand == expected_rest
    assert deck.discard_pile == [removed]


def test_play_discards():
    deck = Deck([4, 5], Lcg(1))
    deck.draw_to(2)
    first = deck.hand[0]
    assert deck.play(0) == first
    assert deck.discard_pile == [first]
    assert _all_cards(deck) == Counter([4, 5])


def test_out_of_range_discard_is_ignored():
    deck = Deck([4, 5], Lcg(1))
    deck.draw_to(2)
    hand = list(deck.hand)
    assert deck.discard(2) is None
    assert deck.discard(-1) is None
    assert deck.hand == hand
    assert deck.discard_pile == []


def test_cards_conserved_through_many_turns():
    deck = Deck(STARTER_DECK, Lcg(1234))
    for _ in range(30):
        deck.draw_to(5)
        deck.play(0)
        deck.discard_hand()
        assert _all_cards(deck) == Counter(STARTER_DECK)