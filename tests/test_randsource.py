import pytest

from misclib.errwarn import InvalidParameterError
from randsource import RandomSource


def test_same_seed_same_sequence():
    s1 = RandomSource(12345)
    s2 = RandomSource(12345)
    assert [s1.runif01() for k in range(50)] == [s2.runif01() for k in range(50)]
    assert [s1.rbits(32) for k in range(50)] == [s2.rbits(32) for k in range(50)]


def test_reseed_restarts_the_sequence():
    source = RandomSource(7)
    first = [source.runif01() for k in range(10)]
    source.setseed(7)
    assert [source.runif01() for k in range(10)] == first

    source.setseed(8)
    assert [source.runif01() for k in range(10)] != first


def test_ranges():
    source = RandomSource(1)
    for k in range(1000):
        assert 0.0 <= source.runif01() < 1.0
        assert 0 <= source.rbits(5) < 32


def test_state_snapshot():
    source = RandomSource(99)
    source.runif01()
    state = source.getstate()
    ahead = [source.runif01() for k in range(5)]
    source.setstate(state)
    assert [source.runif01() for k in range(5)] == ahead


def test_unseeded_sources_work():
    assert 0.0 <= RandomSource().runif01() < 1.0


def test_invalid_arguments():
    with pytest.raises(InvalidParameterError):
        RandomSource(1.5)
    with pytest.raises(InvalidParameterError):
        RandomSource(1).setseed("seed")
    with pytest.raises(InvalidParameterError):
        RandomSource(1).rbits(0)
