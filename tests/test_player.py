from retrocards import cards
from retrocards.player import (
    MAX_DECK_SIZE,
    STARTING_ENERGY,
    STARTING_HP,
    Player,
)


def test_defaults():
    player = Player()
    assert player.hp == STARTING_HP == 50
    assert player.energy == STARTING_ENERGY == 3
    assert player.unlocks == 0x0007
    assert player.deck == []


def test_start_run_builds_starter_deck():
    player = Player()
    player.hp = 5
    player.run_progress = 3
    player.start_run()
    assert player.hp == player.max_hp
    assert player.run_progress == 0
    assert len(player.deck) == 10
    assert player.deck.count(cards.STRIKE) == 5
    assert player.deck.count(cards.DEFEND) == 4
    assert player.deck.count(cards.BASH) == 1
    assert player.total_runs == 1


def test_total_runs_wraps_like_a_byte():
    player = Player(total_runs=255)
    player.start_run()
    assert player.total_runs == 0


def test_start_turn_resets_energy_and_block():
    player = Player(energy=0, block=9)
    player.start_turn()
    assert (player.energy, player.block) == (player.max_energy, 0)


def test_start_combat_resets_energy_and_block():
    player = Player(energy=1, block=4)
    player.start_combat()
    assert (player.energy, player.block) == (player.max_energy, 0)


def test_block_absorbs_damage():
    player = Player(block=10)
    player.take_damage(6)
    assert (player.hp, player.block) == (50, 4)


def test_damage_through_block():
    player = Player(block=4)
    player.take_damage(10)
    assert (player.hp, player.block) == (44, 0)


def test_hp_floors_at_zero():
    player = Player(hp=5)
    player.take_damage(200)
    assert player.hp == 0


def test_block_caps_at_255():
    player = Player(block=250)
    player.gain_block(10)
    assert player.block == 255


def test_heal_caps_at_max():
    player = Player(hp=45)
    player.heal(10)
    assert player.hp == player.max_hp


def test_can_play_depends_on_cost():
    player = Player(energy=1)
    assert player.can_play(cards.STRIKE) is True
    assert player.can_play(cards.BASH) is False
    player.energy = 0
    assert player.can_play(cards.ENERGY) is True


def test_spend_energy_floors_at_zero():
    player = Player(energy=2)
    player.spend_energy(5)
    assert player.energy == 0


def test_add_card_respects_limit():
    player = Player()
    for _ in range(MAX_DECK_SIZE + 5):
        player.add_card(cards.CLEAVE)
    assert len(player.deck) == MAX_DECK_SIZE


def test_remove_card_removes_first_copy_only():
    player = Player(deck=[0, 1, 2, 1])
    player.remove_card(1)
    assert player.deck == [0, 2, 1]
    player.remove_card(9)
    assert player.deck == [0, 2, 1]