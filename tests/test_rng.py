import pytest

from retrocards.rng import Lcg


def _sequence(rng, n=20):
    return [rng.next_byte() for _ in range(n)]


def test_zero_seed_uses_fallback():
    assert _sequence(Lcg(0)) == _sequence(Lcg(12345))


def test_seed_is_truncated_to_16_bits():
    assert _sequence(Lcg(0x10000 + 42)) == _sequence(Lcg(42))
    assert _sequence(Lcg(0x10000)) == _sequence(Lcg(12345))


def test_state_determines_the_rest_of_the_sequence():
    rng = Lcg(777)
    _sequence(rng, 37)
    resumed = Lcg(rng.state)
    rest = _sequence(rng, 100)
    assert rest == _sequence(resumed, 100)
    assert len(set(rest)) > 1


def test_state_stays_16_bit_and_bytes_in_range():
    rng = Lcg(999)
    for _ in range(1000):
        value = rng.next_byte()
        assert 0 <= value <= 255
        assert 0 <= rng.state <= 0xFFFF
        assert value == rng.state >> 8


@pytest.mark.parametrize("low,high", [(0, 2), (1, 3), (5, 10), (0, 100), (3, 7)])
def test_range_within_bounds(low, high):
    rng = Lcg(31337)
    for _ in range(500):
        assert low <= rng.range(low, high) < high


@pytest.mark.parametrize("low,high", [(7, 7), (9, 3)])
def test_empty_range_returns_low(low, high):
    rng = Lcg(5)
    before = rng.state
    assert rng.range(low, high) == low
    assert rng.state == before


def test_shuffle_is_permutation():
    rng = Lcg(2024)
    items = list(range(60))
    rng.shuffle(items)
    assert sorted(items) == list(range(60))


def test_shuffle_is_deterministic():
    a = list(range(10))
    b = list(range(10))
    Lcg(4321).shuffle(a)
    Lcg(4321).shuffle(b)
    assert a == b


def test_shuffle_trivial_lists():
    rng = Lcg(1)
    empty = []
    single = [3]
    rng.shuffle(empty)
    rng.shuffle(single)
    assert empty == []
    assert single == [3]