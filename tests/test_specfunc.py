from math import exp, log, pi

import pytest

from misclib.errwarn import ConvergenceError, InvalidParameterError
from numlib.specfunc import (
    beta,
    bincoeff,
    dincgamma,
    erf,
    erfc,
    ffactorial,
    incgammap,
    incgammaq,
    inverf,
    inverfc,
    invincgammap,
    lnbeta,
    lnfactorial,
    lngamma,
)


def test_lngamma_known_values():
    assert lngamma(5.0) == pytest.approx(log(24.0), rel=1e-14)
    assert lngamma(0.5) == pytest.approx(0.5 * log(pi), rel=1e-14)
    assert lngamma(1.0) == pytest.approx(0.0, abs=1e-14)
    assert lngamma(100.0) == pytest.approx(359.13420536957540, rel=1e-14)


def test_lngamma_rejects_nonpositive():
    with pytest.raises(InvalidParameterError):
        lngamma(0.0)
    with pytest.raises(InvalidParameterError):
        lngamma(-1.5)


def test_factorials():
    assert ffactorial(0) == 1.0
    assert ffactorial(10) == 3628800.0
    assert lnfactorial(10) == pytest.approx(log(3628800.0), rel=1e-14)
    assert lnfactorial(2500) == lngamma(2501.0)

    with pytest.raises(InvalidParameterError):
        ffactorial(171)
    with pytest.raises(InvalidParameterError):
        lnfactorial(-1)


def test_bincoeff():
    assert bincoeff(5, 2) == 10
    assert bincoeff(10, 0) == 1
    assert bincoeff(52, 5) == 2598960
    assert bincoeff(200, 100) == pytest.approx(9.054851465610328e58, rel=1e-11)

    with pytest.raises(InvalidParameterError):
        bincoeff(3, 4)


def test_beta():
    assert beta(2.0, 3.0) == pytest.approx(1.0 / 12.0, rel=1e-14)
    assert lnbeta(0.5, 0.5) == pytest.approx(log(pi), rel=1e-14)


def test_incgamma_exponential_case():
    # P(1, x) = 1 - exp(-x)
    for x in (0.1, 1.0, 2.0, 10.0):
        assert incgammap(1.0, x) == pytest.approx(1.0 - exp(-x), rel=1e-13)
        assert incgammaq(1.0, x) == pytest.approx(exp(-x), rel=1e-13)


@pytest.mark.parametrize("a", [0.3, 1.5, 7.0, 40.0, 150.0, 1000.0])
def test_incgamma_complements(a):
    for x in (0.5 * a, a, 2.0 * a):
        assert incgammap(a, x) + incgammaq(a, x) == pytest.approx(1.0, abs=1e-13)


def test_incgamma_limits():
    assert incgammap(2.0, 0.0) == 0.0
    assert incgammaq(2.0, 0.0) == 1.0
    assert incgammap(2.0, float("inf")) == 1.0
    assert incgammaq(2.0, float("inf")) == 0.0


def test_incgamma_quadrature_matches_series():
    # a >= 100 goes by quadrature, x < a + 1 is where the series is valid
    from numlib.specfunc import _gser

    a, x = 150.0, 140.0
    assert incgammap(a, x) == pytest.approx(_gser(a, x, 1e-16, 1000), rel=1e-8)


def test_incgamma_is_monotonic():
    xs = [0.25 * k for k in range(1, 60)]
    ps = [incgammap(3.0, x) for x in xs]
    assert all(p1 < p2 for p1, p2 in zip(ps, ps[1:]))


def test_incgamma_invalid():
    with pytest.raises(InvalidParameterError):
        incgammap(0.0, 1.0)
    with pytest.raises(InvalidParameterError):
        incgammaq(1.0, -1.0)
    with pytest.raises(InvalidParameterError):
        incgammap(1.0, 1.0, itmax=0)


def test_incgamma_iteration_cap():
    with pytest.raises(ConvergenceError) as excinfo:
        incgammap(10.0, 9.0, itmax=2)
    assert excinfo.value.itmax == 2
    assert excinfo.value.estimate is not None

    with pytest.raises(ConvergenceError):
        incgammaq(2.0, 30.0, itmax=1)


def test_dincgamma():
    assert dincgamma(1.0, 2.0) == pytest.approx(exp(-2.0), rel=1e-14)
    assert dincgamma(0.5, 0.0) == float("inf")
    assert dincgamma(2.0, 0.0) == 0.0


@pytest.mark.parametrize("a", [0.2, 0.5, 1.0, 2.5, 10.0, 120.0])
@pytest.mark.parametrize("p", [1e-6, 0.01, 0.3, 0.5, 0.9, 0.999])
def test_invincgammap_inverts(a, p):
    x = invincgammap(a, p)
    assert x >= 0.0
    assert incgammap(a, x) == pytest.approx(p, rel=1e-9)


@pytest.mark.parametrize(
    "a, p",
    [
        (3.0, 1e-20),
        (1.01, 1e-30),
        (50.0, 1e-60),
        (99.9, 1e-300),
        (100.0, 1e-200),
        (101.0, 1e-300),
        (200.0, 1e-250),
    ],
)
def test_invincgammap_deep_lower_tail(a, p):
    x = invincgammap(a, p)
    assert x > 0.0
    assert incgammap(a, x) == pytest.approx(p, rel=1e-9)


def test_incgamma_far_below_the_peak():
    # P(a, x) - P(a+1, x) = x**a * exp(-x) / gamma(a+1)
    a, x = 150.0, 30.0
    step = exp(a * log(x) - x - lngamma(a + 1.0))
    assert incgammap(a, x) - incgammap(a + 1.0, x) == pytest.approx(step, rel=1e-10)
    assert incgammaq(a, x) == 1.0


def test_invincgammap_edges():
    assert invincgammap(3.0, 0.0) == 0.0
    with pytest.raises(InvalidParameterError):
        invincgammap(3.0, 1.0)
    with pytest.raises(InvalidParameterError):
        invincgammap(-3.0, 0.5)
    with pytest.raises(ConvergenceError):
        invincgammap(3.0, 0.5, itmax=1)


def test_erf_known_values():
    assert erf(0.0) == 0.0
    assert erf(1.0) == pytest.approx(0.8427007929497149, rel=1e-14)
    assert erf(0.5) == pytest.approx(0.5204998778130465, rel=1e-14)
    assert erfc(2.0) == pytest.approx(0.004677734981047266, rel=1e-13)
    assert erfc(10.0) == pytest.approx(2.088487583762545e-45, rel=1e-12)


def test_erf_symmetry_and_complement():
    for x in (0.01, 0.3, 1.0, 2.7, 6.0):
        assert erf(-x) == -erf(x)
        assert erf(x) + erfc(x) == pytest.approx(1.0, abs=1e-15)
        assert erfc(-x) == pytest.approx(2.0 - erfc(x), abs=1e-15)


def test_inverse_error_functions():
    assert inverf(0.5) == pytest.approx(0.4769362762044699, rel=1e-12)
    assert inverfc(0.1) == pytest.approx(1.1630871536766743, rel=1e-12)
    assert inverf(0.0) == 0.0
    assert inverfc(1.0) == pytest.approx(0.0, abs=1e-15)

    for p in (1e-300, 1e-10, 0.2, 0.99, 1.5, 1.9999):
        assert erfc(inverfc(p)) == pytest.approx(p, rel=1e-8)
    for p in (-0.9, -1e-8, 1e-12, 0.3, 0.75):
        assert erf(inverf(p)) == pytest.approx(p, rel=1e-10)


def test_inverfc_subnormal_arguments():
    from machdep.machnum import MINEPSFLOAT

    x = inverfc(1e-323)
    assert x == pytest.approx(27.2006, abs=1e-3)
    assert inverfc(2.0 - 1e-16) < 0.0
    assert inverfc(5e-324) > x > inverfc(1e-320) > inverfc(1e-300)

    # the two sides of the switch to the asymptotic form agree
    below = inverfc(0.999 * MINEPSFLOAT)
    above = inverfc(1.001 * MINEPSFLOAT)
    assert below > above
    assert below - above < 1e-4


def test_inverse_error_functions_invalid():
    with pytest.raises(InvalidParameterError):
        inverf(1.0)
    with pytest.raises(InvalidParameterError):
        inverfc(0.0)
    with pytest.raises(InvalidParameterError):
        inverfc(2.0)


def test_error_hierarchy():
    assert issubclass(InvalidParameterError, ValueError)
    assert issubclass(ConvergenceError, ArithmeticError)
