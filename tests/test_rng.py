import pytest
from hypothesis import given
from hypothesis import strategies as st

from leveldbpy.rng import Random

seeds = st.integers(min_value=0, max_value=2**32 - 1)


def _draw(rng, count):
    return [rng.next() for _ in range(count)]


def test_first_value_from_seed_one():
    assert Random(1).next() == 65535


def test_zero_seed_behaves_like_one():
    assert _draw(Random(0), 20) == _draw(Random(1), 20)


@given(seeds)
def test_same_seed_same_sequence(seed):
    rng = Random(seed)
    via_uniform = [rng.uniform(0xFFFFFFFF) for _ in range(20)]
    assert via_uniform == _draw(Random(seed), 20)


@given(st.integers(min_value=1, max_value=2**31 - 1))
def test_high_bit_of_seed_ignored(seed):
    assert _draw(Random(seed | 0x80000000), 10) == _draw(Random(seed), 10)


@given(seeds)
def test_next_below_u32_max(seed):
    rng = Random(seed)
    assert all(0 <= v < 0xFFFFFFFF for v in _draw(rng, 50))


@given(seeds, st.integers(min_value=1, max_value=1000))
def test_uniform_in_range(seed, n):
    rng = Random(seed)
    assert all(0 <= rng.uniform(n) < n for _ in range(50))


@given(seeds)
def test_one_in_one_always_true(seed):
    rng = Random(seed)
    assert all(rng.one_in(1) for _ in range(20))


@given(seeds)
def test_skew_below_two_pow_sixteen(seed):
    rng = Random(seed)
    assert all(0 <= rng.skew() < 2**16 for _ in range(50))


def test_uniform_matches_next_modulo():
    values = _draw(Random(301), 10)
    rng = Random(301)
    assert [rng.uniform(7) for _ in range(10)] == [v % 7 for v in values]


@pytest.mark.parametrize("n", [0, -3])
def test_uniform_rejects_non_positive(n):
    with pytest.raises(ValueError):
        Random(1).uniform(n)


@pytest.mark.parametrize("n", [0, -3])
def test_one_in_rejects_non_positive(n):
    with pytest.raises(ValueError):
        Random(1).one_in(n)