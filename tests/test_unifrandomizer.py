from array import array

import pytest

from misclib.errwarn import InvalidParameterError
from misclib.numbers import float32
from randsource import RandomSource
from unifrandomizer import UniformRandomizer


@pytest.fixture
def randomizer():
    return UniformRandomizer(RandomSource(2024))


def test_integer_ranges(randomizer):
    for k in range(2000):
        assert -(2**31) <= randomizer.next_int() < 2**31
        assert -(2**63) <= randomizer.next_long() < 2**63
        assert 0 <= randomizer.next_int(6) < 6
        assert -3 <= randomizer.next_int(-3, 4) < 4
        assert 10**12 <= randomizer.next_long(10**12, 10**12 + 5) < 10**12 + 5


def test_all_values_of_a_small_range_come_up(randomizer):
    assert set(randomizer.next_ints(500, 1, 7)) == {1, 2, 3, 4, 5, 6}
    assert set(randomizer.next_ints(100, 5, 6)) == {5}


def test_floating_point_ranges(randomizer):
    for k in range(2000):
        x = randomizer.next_float()
        assert 0.0 <= x < 1.0
        assert float32(x) == x
        y = randomizer.next_float(-2.0, 3.0)
        assert -2.0 <= y < 3.0
        assert 0.0 <= randomizer.next_double() < 1.0
        assert 5.0 <= randomizer.next_double(5.0, 5.5) < 5.5


def test_uniform_mean(randomizer):
    xs = randomizer.next_doubles(100000, -1.0, 3.0)
    assert sum(xs) / len(xs) == pytest.approx(1.0, abs=0.02)


def test_booleans(randomizer):
    bools = randomizer.next_bools(10000)
    assert isinstance(bools, list)
    assert 0.45 < sum(bools) / 10000.0 < 0.55

    assert not any(randomizer.next_bools(100, 0.0))
    assert all(randomizer.next_bools(100, 1.0))
    share = sum(randomizer.next_bools(10000, 0.2)) / 10000.0
    assert share == pytest.approx(0.2, abs=0.02)


def test_bulk_types(randomizer):
    assert randomizer.next_ints(3).typecode == "i"
    assert randomizer.next_longs(3).typecode == "q"
    assert randomizer.next_floats(3).typecode == "f"
    assert randomizer.next_doubles(3).typecode == "d"
    assert len(randomizer.next_doubles(17)) == 17


def test_fill_in_place(randomizer):
    seq = array("d", [-1.0] * 50)
    randomizer.fill_doubles(seq, 2.0, 4.0)
    assert all(2.0 <= x < 4.0 for x in seq)

    lst = [None] * 20
    randomizer.fill_ints(lst, 3)
    assert all(0 <= n < 3 for n in lst)
    randomizer.fill_bools(lst)
    assert all(isinstance(b, bool) for b in lst)

    longs = array("q", [0] * 10)
    randomizer.fill_longs(longs)
    floats = array("f", [0.0] * 10)
    randomizer.fill_floats(floats, 1.0)
    assert all(0.0 <= x < 1.0 for x in floats)


def test_reproducible_with_seed():
    r1 = UniformRandomizer(RandomSource(5))
    r2 = UniformRandomizer(RandomSource(6))
    r2.setseed(5)
    assert list(r1.next_longs(20)) == list(r2.next_longs(20))


def test_invalid_arguments(randomizer):
    with pytest.raises(InvalidParameterError):
        randomizer.next_int(5, 5)
    with pytest.raises(InvalidParameterError):
        randomizer.next_int(0)
    with pytest.raises(InvalidParameterError):
        randomizer.next_int(0, 2**31)
    with pytest.raises(InvalidParameterError):
        randomizer.next_long(1.5, 3)
    with pytest.raises(InvalidParameterError):
        randomizer.next_double(2.0, 1.0)
    with pytest.raises(InvalidParameterError):
        randomizer.next_float(0.0, float("inf"))
    with pytest.raises(InvalidParameterError):
        randomizer.next_bool(1.5)
    with pytest.raises(InvalidParameterError):
        randomizer.next_doubles(0)
    with pytest.raises(InvalidParameterError):
        randomizer.next_ints(-4)
    with pytest.raises(InvalidParameterError):
        UniformRandomizer(source=42)
