import pytest

from dungeonrl import rng


def test_values_stay_within_inclusive_bounds():
    rng.seed(11)
    values = [rng.get(-3, 4) for _ in range(500)]
    assert min(values) >= -3
    assert max(values) <= 4


def test_both_ends_are_reachable():
    rng.seed(5)
    assert {rng.get(1, 3) for _ in range(300)} == {1, 2, 3}


def test_single_value_range_returns_that_value():
    assert rng.get(7, 7) == 7


def test_seed_makes_draws_reproducible():
    rng.seed(42)
    first = [rng.get(0, 1000) for _ in range(20)]
    rng.seed(42)
    second = [rng.get(0, 1000) for _ in range(20)]
    assert first == second


def test_reversed_range_raises():
    with pytest.raises(ValueError):
        rng.get(5, 1)