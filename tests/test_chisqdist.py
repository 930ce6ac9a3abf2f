from math import exp

import pytest

from misclib.errwarn import ConvergenceError, InvalidParameterError
from statlib.cdf import cchisquare
from statlib.chisqdist import ChiSquaredDist
from statlib.invcdf import ichisquare
from statlib.pdf import dchisquare


def test_known_quantiles():
    assert ichisquare(0.95, 1) == pytest.approx(3.841458820694124, rel=1e-10)
    assert ichisquare(0.95, 10) == pytest.approx(18.307038053275146, rel=1e-10)
    assert ChiSquaredDist(1.0).invcdf(0.5) == pytest.approx(
        0.454936423119572, rel=1e-10
    )


def test_two_degrees_of_freedom_is_exponential():
    chisq = ChiSquaredDist(2.0)
    for x in (0.1, 1.0, 2.0, 7.5):
        assert chisq.cdf(x) == pytest.approx(1.0 - exp(-0.5 * x), rel=1e-13)
        assert chisq.pdf(x) == pytest.approx(0.5 * exp(-0.5 * x), rel=1e-13)


@pytest.mark.parametrize("nu", [0.5, 1.0, 3.0, 17.0, 250.0])
def test_round_trip(nu):
    chisq = ChiSquaredDist(nu)
    for p in (0.001, 0.1, 0.5, 0.9, 0.999):
        assert chisq.cdf(chisq.invcdf(p)) == pytest.approx(p, abs=1e-6)


@pytest.mark.parametrize(
    "nu, p", [(6.0, 1e-20), (3.0, 1e-100), (200.0, 1e-200), (200.0, 1e-300), (400.0, 1e-250)]
)
def test_round_trip_deep_lower_tail(nu, p):
    chisq = ChiSquaredDist(nu)
    x = chisq.invcdf(p)
    assert x > 0.0
    assert chisq.cdf(x) == pytest.approx(p, rel=1e-9)


def test_cdf_monotonic_and_bounded():
    chisq = ChiSquaredDist(4.0)
    xs = [0.5 * k for k in range(0, 80)]
    ps = [chisq.cdf(x) for x in xs]
    assert ps[0] == 0.0
    assert all(p1 <= p2 for p1, p2 in zip(ps, ps[1:]))
    assert all(0.0 <= p <= 1.0 for p in ps)


def test_values_at_and_below_zero():
    assert cchisquare(3.0, -1.0) == 0.0
    assert dchisquare(3.0, -1.0) == 0.0
    assert dchisquare(1.0, 0.0) == float("inf")
    assert dchisquare(2.0, 0.0) == 0.5
    assert dchisquare(5.0, 0.0) == 0.0
    assert ChiSquaredDist(3.0).invcdf(0.0) == 0.0


def test_moments_and_set_nu():
    chisq = ChiSquaredDist(3.0)
    assert chisq.mean() == 3.0
    assert chisq.variance() == 6.0

    chisq.set_nu(2.0)
    assert chisq.nu == 2.0
    assert chisq.pdf(2.0) == pytest.approx(0.5 * exp(-1.0), rel=1e-13)
    assert repr(chisq) == "ChiSquaredDist(nu=2.0)"


def test_invalid_parameters():
    with pytest.raises(InvalidParameterError):
        ChiSquaredDist(0.0)
    with pytest.raises(InvalidParameterError):
        ChiSquaredDist(3.0).set_nu(-1.0)
    with pytest.raises(InvalidParameterError):
        ChiSquaredDist(3.0).invcdf(1.0)
    with pytest.raises(InvalidParameterError):
        ChiSquaredDist(3.0, itmax=0)
    with pytest.raises(ValueError):
        ichisquare(-0.1, 3.0)


def test_iteration_control():
    # One Halley step is not enough to get there from the initial guess
    with pytest.raises(ConvergenceError):
        ChiSquaredDist(6.0, invitmax=1).invcdf(0.5)
    with pytest.raises(ConvergenceError):
        ChiSquaredDist(20.0, itmax=2).cdf(15.0)


def test_small_tolerance_is_raised_with_a_warning(capsys):
    chisq = ChiSquaredDist(3.0, tolf=0.0)
    assert "UserWarning" in capsys.readouterr().out
    assert chisq.cdf(3.0) == pytest.approx(ChiSquaredDist(3.0).cdf(3.0))
