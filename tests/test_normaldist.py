from math import pi, sqrt

import pytest

from misclib.errwarn import InvalidParameterError
from statlib.cdf import cnormal
from statlib.invcdf import inormal
from statlib.normaldist import (
    NormalDist,
    PolynomialFunc,
    SinusoidFunc,
    propagate_normal,
)
from statlib.pdf import dnormal


def test_standard_normal_values():
    dist = NormalDist()
    assert dist.pdf(0.0) == pytest.approx(1.0 / sqrt(2.0 * pi), rel=1e-15)
    assert dist.cdf(0.0) == pytest.approx(0.5, abs=1e-15)
    assert dist.cdf(1.96) == pytest.approx(0.9750021048517795, rel=1e-12)
    assert dist.invcdf(0.975) == pytest.approx(1.959963984540054, rel=1e-10)
    assert dist.invcdf(0.5) == pytest.approx(0.0, abs=1e-12)


def test_lower_tail_keeps_its_accuracy():
    assert cnormal(0.0, 1.0, -10.0) == pytest.approx(7.619853024160527e-24, rel=1e-10)
    assert inormal(1e-20) == pytest.approx(-9.262340089798408, rel=1e-9)


def test_subnormal_lower_tail():
    dist = NormalDist()
    x = dist.invcdf(5e-324)
    assert x == pytest.approx(-38.4674, abs=0.01)
    assert x < dist.invcdf(1e-300) < dist.invcdf(1e-20)


def test_round_trip():
    dist = NormalDist(3.0, 2.5)
    for p in (1e-9, 0.01, 0.3, 0.5, 0.8, 0.999999):
        assert dist.cdf(dist.invcdf(p)) == pytest.approx(p, rel=1e-6)


def test_cdf_monotonic_and_bounded():
    dist = NormalDist(-1.0, 0.5)
    xs = [-6.0 + 0.1 * k for k in range(120)]
    ps = [dist.cdf(x) for x in xs]
    assert all(p1 <= p2 for p1, p2 in zip(ps, ps[1:]))
    assert all(0.0 <= p <= 1.0 for p in ps)


def test_setters():
    dist = NormalDist(1.0, 2.0)
    assert dist.variance() == 4.0

    dist.set_variance(9.0)
    assert dist.sigma == 3.0
    dist.set_mean(-2.0)
    assert dist.mahalanobis(4.0) == 2.0
    assert repr(dist) == "NormalDist(mean=-2.0, sigma=3.0)"

    with pytest.raises(InvalidParameterError):
        dist.set_sigma(0.0)
    with pytest.raises(InvalidParameterError):
        dist.set_variance(-1.0)
    with pytest.raises(InvalidParameterError):
        NormalDist(0.0, -1.0)


def test_invalid_probabilities():
    dist = NormalDist()
    for p in (0.0, 1.0, -0.5, 1.5):
        with pytest.raises(InvalidParameterError):
            dist.invcdf(p)
    with pytest.raises(InvalidParameterError):
        dnormal(0.0, 0.0, 1.0)


def test_propagation_through_polynomial():
    # f(x) = 1 + 2x + 3x**2, f'(x) = 2 + 6x
    poly = PolynomialFunc((1.0, 2.0, 3.0))
    dist = NormalDist(1.0, 0.1).propagate(poly.evaluate, poly.derivative)
    assert dist.mean == pytest.approx(6.0)
    assert dist.sigma == pytest.approx(0.8)


def test_propagation_through_sinusoid():
    sinus = SinusoidFunc(amplitude=2.0, frequency=0.5, phase=0.0)
    dist = propagate_normal(sinus.evaluate, sinus.derivative, 0.0, 0.2)
    assert dist.mean == pytest.approx(0.0, abs=1e-15)
    assert dist.sigma == pytest.approx(0.2)


def test_propagation_with_zero_slope_is_rejected():
    # 1 + 2x**2 is flat at x = 0
    poly = PolynomialFunc((1.0, 0.0, 2.0))
    with pytest.raises(InvalidParameterError):
        NormalDist(0.0, 0.3).propagate(poly.evaluate, poly.derivative)


def test_propagated_slope_sign_is_dropped():
    dist = propagate_normal(lambda x: -4.0 * x, lambda x: -4.0, 1.0, 0.5)
    assert dist.mean == -4.0
    assert dist.sigma == 2.0
