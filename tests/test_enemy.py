import pytest

from retrocards.enemy import Enemy, EnemyKind, Intent, enemy_name
from retrocards.player import STARTING_HP, Player
from retrocards.rng import Lcg


@pytest.mark.parametrize(
    "kind,name",
    [
        (EnemyKind.SLIME, "SLIME"),
        (EnemyKind.GOBLIN, "GOBLIN"),
        (EnemyKind.CULTIST, "CULTIST"),
        (EnemyKind.ELITE_ORC, "ELITE ORC"),
        (EnemyKind.BOSS_DRAGON, "DRAGON BOSS"),
    ],
)
def test_enemy_name(kind, name):
    assert enemy_name(kind) == name
    assert enemy_name(int(kind)) == name


@pytest.mark.parametrize("enemy_id", [5, 99, 255])
def test_unknown_enemy_name(enemy_id):
    assert enemy_name(enemy_id) == "UNKNOWN"


@pytest.mark.parametrize(
    "kind,hp,low,high,elite",
    [
        (EnemyKind.SLIME, 20, 3, 6, False),
        (EnemyKind.GOBLIN, 25, 5, 8, False),
        (EnemyKind.CULTIST, 30, 6, 10, False),
        (EnemyKind.ELITE_ORC, 45, 8, 12, True),
        (EnemyKind.BOSS_DRAGON, 80, 10, 15, True),
    ],
)
def test_spawn_stats(kind, hp, low, high, elite):
    enemy = Enemy.spawn(kind, Lcg(1))
    assert enemy.id == kind
    assert enemy.max_hp == hp
    assert enemy.hp == hp
    assert enemy.attack_min == low
    assert enemy.attack_max == high
    assert enemy.is_elite is elite
    assert enemy.block == 0


@pytest.mark.parametrize(
    "kind,sprite",
    [
        (EnemyKind.SLIME, 81),
        (EnemyKind.GOBLIN, 87),
        (EnemyKind.CULTIST, 69),
        (EnemyKind.ELITE_ORC, 79),
        (EnemyKind.BOSS_DRAGON, 68),
    ],
)
def test_spawn_sprite_char(kind, sprite):
    assert Enemy.spawn(kind, Lcg(2)).sprite_char == sprite


def test_unknown_kind_gets_default_stats():
    enemy = Enemy.spawn(9, Lcg(3))
    assert (enemy.max_hp, enemy.attack_min, enemy.attack_max) == (20, 3, 6)
    assert enemy.is_elite is False
    assert enemy.hp == enemy.max_hp


@pytest.mark.parametrize("seed", range(1, 40))
def test_intent_values_within_bounds(seed):
    enemy = Enemy.spawn(EnemyKind.GOBLIN, Lcg(seed))
    for _ in range(20):
        if enemy.intent == Intent.ATTACK:
            assert enemy.attack_min <= enemy.intent_value <= enemy.attack_max
        else:
            assert enemy.intent == Intent.DEFEND
            assert 5 <= enemy.intent_value < 10
        enemy.calculate_intent()


def test_both_intents_occur():
    seen = set()
    for seed in range(1, 60):
        enemy = Enemy.spawn(EnemyKind.SLIME, Lcg(seed))
        for _ in range(10):
            seen.add(enemy.intent)
            enemy.calculate_intent()
    assert seen == {Intent.ATTACK, Intent.DEFEND}


def test_non_elite_pattern_index_stays_zero():
    enemy = Enemy.spawn(EnemyKind.CULTIST, Lcg(11))
    for _ in range(10):
        enemy.calculate_intent()
        assert enemy.pattern_index == 0


@pytest.mark.parametrize("kind", [EnemyKind.ELITE_ORC, EnemyKind.BOSS_DRAGON])
def test_elite_big_attack_every_third_step(kind):
    enemy = Enemy.spawn(kind, Lcg(7))
    assert enemy.pattern_index == 1
    seen = set()
    for _ in range(9):
        enemy.calculate_intent()
        seen.add(enemy.pattern_index)
        if enemy.pattern_index == 2:
            assert enemy.intent == Intent.ATTACK
            assert enemy.intent_value == enemy.attack_max + 3
    assert seen == {0, 1, 2}


def test_take_damage_absorbed_by_block():
    enemy = Enemy.spawn(EnemyKind.SLIME, Lcg(5))
    enemy.block = 5
    enemy.take_damage(3)
    assert enemy.block == 2
    assert enemy.hp == enemy.max_hp


def test_take_damage_overflows_block():
    enemy = Enemy.spawn(EnemyKind.GOBLIN, Lcg(5))
    enemy.block = 2
    enemy.take_damage(10)
    assert enemy.block == 0
    assert enemy.hp == enemy.max_hp - (10 - 2)


def test_take_lethal_damage_floors_at_zero():
    enemy = Enemy.spawn(EnemyKind.SLIME, Lcg(5))
    assert not enemy.is_dead()
    enemy.take_damage(200)
    assert enemy.hp == 0
    assert enemy.is_dead()


def test_gain_block_caps():
    enemy = Enemy.spawn(EnemyKind.SLIME, Lcg(5))
    enemy.gain_block(200)
    enemy.gain_block(200)
    assert enemy.block == 255


def test_execute_attack_hits_player():
    enemy = Enemy.spawn(EnemyKind.SLIME, Lcg(8))
    enemy.intent = Intent.ATTACK
    enemy.intent_value = 7
    player = Player()
    assert enemy.execute_action(player) == (Intent.ATTACK, 7)
    assert player.hp == STARTING_HP - 7


def test_execute_attack_respects_player_block():
    enemy = Enemy.spawn(EnemyKind.SLIME, Lcg(8))
    enemy.intent = Intent.ATTACK
    enemy.intent_value = 7
    player = Player()
    player.block = 4
    enemy.execute_action(player)
    assert player.block == 0
    assert player.hp == STARTING_HP - (7 - 4)


def test_execute_defend_block_resets_at_end_of_turn():
    enemy = Enemy.spawn(EnemyKind.SLIME, Lcg(8))
    enemy.intent = Intent.DEFEND
    enemy.intent_value = 6
    player = Player()
    assert enemy.execute_action(player) == (Intent.DEFEND, 6)
    assert enemy.block == 0
    assert player.hp == STARTING_HP


@pytest.mark.parametrize(
    "intent,char",
    [(Intent.ATTACK, 33), (Intent.DEFEND, 83), (Intent.BUFF, 63), (Intent.DEBUFF, 63)],
)
def test_intent_char(intent, char):
    enemy = Enemy.spawn(EnemyKind.SLIME, Lcg(4))
    enemy.intent = intent
    assert enemy.intent_char() == char