# statlib/normaldist.py
# ==============================================================================
#
# This file is part of StatElements.
# ----------------------------------
#
#  StatElements is a software package for special functions, probability 
#  distributions and random variate generation. It requires Python 3.0 or 
#  later versions.
# 
#  Copyright (C) 2010  Nils A. Kjellbert 
#  E-mail: <info(at)ambinova(dot)se>
# 
#  StatElements is free software: you can redistribute it and/or modify 
#  it under the terms of the GNU General Public License as published by 
#  the Free Software Foundation, either version 3 of the License, or 
#  (at your option) any later version. 
# 
#  StatElements is distributed in the hope that it will be useful, 
#  but WITHOUT ANY WARRANTY; without even the implied warranty of 
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the 
#  GNU General Public License for more details. 
# 
#  You should have received a copy of the GNU General Public License 
#  along with this program.  If not, see <http://www.gnu.org/licenses/>. 
#
# ------------------------------------------------------------------------------
"""
The normal (Gaussian) distribution as an object holding its mean and 
standard deviation, together with first-order propagation of a normally 
distributed uncertainty through a scalar function. 

Propagation uses the linearization f(X) ~ f(mu) + f'(mu)*(X - mu), giving 
a normal distribution with mean f(mu) and standard deviation 
abs(f'(mu))*sigma (the "delta method"). It is an approximation that is only 
accurate when sigma is small compared to the scale on which f curves. 
Two shapes of f are provided: PolynomialFunc and SinusoidFunc. Any pair of 
callables evaluating a function and its derivative will do, however.
"""
# ------------------------------------------------------------------------------

from math import sin, cos, sqrt

from statlib.pdf     import dnormal
from statlib.cdf     import cnormal
from statlib.invcdf  import inormal
from numlib.miscnum  import polyeval, polyderiv
from misclib.errwarn import checkpar

# ------------------------------------------------------------------------------

class NormalDist:
    """
    The normal distribution with mean 'mean' and standard deviation 
    'sigma' > 0. NormalDist() is the standard normal distribution. 
        dist = NormalDist(mean, sigma)
        p    = dist.cdf(x)
        x    = dist.invcdf(p)
        dist2 = dist.propagate(func, deriv)

    mean and sigma may only be changed through set_mean, set_sigma and 
    set_variance. pdf, cdf, invcdf, mahalanobis and propagate do not 
    change the instance.
    """
# ------------------------------------------------------------------------------

    def __init__(self, mean=0.0, sigma=1.0):

        self.set_sigma(sigma)
        self.set_mean(mean)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_mean(self, mean):

        self.mean = mean

    # end of set_mean

# ------------------------------------------------------------------------------

    def set_sigma(self, sigma):
        """
        Sets the standard deviation (must be > 0.0). 
        """

        checkpar(sigma > 0.0, \
             "standard deviation must be a positive float in NormalDist!")
        self.sigma = sigma

    # end of set_sigma

# ------------------------------------------------------------------------------

    def set_variance(self, variance):
        """
        Sets the standard deviation as the square root of the variance 
        (must be > 0.0). 
        """

        checkpar(variance > 0.0, \
                     "variance must be a positive float in NormalDist!")
        self.sigma = sqrt(variance)

    # end of set_variance

# ------------------------------------------------------------------------------

    def variance(self):

        return self.sigma * self.sigma

    # end of variance

# ------------------------------------------------------------------------------

    def pdf(self, x):

        return dnormal(self.mean, self.sigma, x)

    # end of pdf

# ------------------------------------------------------------------------------

    def cdf(self, x):

        return cnormal(self.mean, self.sigma, x)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):
        """
        The x for which cdf(x) = prob, 0.0 < prob < 1.0. 
        """

        return inormal(prob, self.mean, self.sigma)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mahalanobis(self, x):
        """
        The distance from the mean measured in standard deviations: 
        abs(x - mean) / sigma. 
        """

        return abs(x - self.mean) / self.sigma

    # end of mahalanobis

# ------------------------------------------------------------------------------

    def propagate(self, func, deriv):
        """
        Returns a new NormalDist approximating the distribution of func(X) 
        where X is distributed as this instance. 'func' evaluates the function 
        and 'deriv' its derivative (cf. propagate_normal). 
        """

        return propagate_normal(func, deriv, self.mean, self.sigma)

    # end of propagate

# ------------------------------------------------------------------------------

    def __repr__(self):

        return "NormalDist(mean=" + repr(self.mean) + \
                      ", sigma=" + repr(self.sigma) + ")"

    # end of __repr__

# ------------------------------------------------------------------------------

# end of NormalDist

# ------------------------------------------------------------------------------

def propagate_normal(func, deriv, mean, sigma):
    """
    First-order propagation of a normal distribution with mean 'mean' and 
    standard deviation 'sigma' through the function 'func' having the 
    derivative 'deriv'. Returns NormalDist(func(mean), abs(deriv(mean))*sigma).

    An InvalidParameterError is raised if the derivative vanishes at the 
    mean, since the linearized distribution is then degenerate (a standard 
    deviation of zero is not a normal distribution). 
    """

    checkpar(sigma > 0.0, \
             "standard deviation must be a positive float in propagate_normal!")

    slope = deriv(mean)
    checkpar(slope != 0.0, \
        "derivative is zero at the mean - propagated distribution degenerate")

    return NormalDist(func(mean), abs(slope)*sigma)

# end of propagate_normal

# ------------------------------------------------------------------------------

class PolynomialFunc:
    """
    The polynomial a0 + a1*x + a2*x**2 + ... given by its coefficients in 
    the order a0, a1, a2 etc: 
        poly  = PolynomialFunc((1.0, 0.0, 2.0))    # 1 + 2*x**2
        dist2 = dist.propagate(poly.evaluate, poly.derivative)
    """

    def __init__(self, coeffs):

        checkpar(len(coeffs) > 0, "at least one coefficient is required!")
        self.coeffs = tuple(coeffs)

    def evaluate(self, x):
        return polyeval(self.coeffs, x)

    def derivative(self, x):
        return polyderiv(self.coeffs, x)

# end of PolynomialFunc

# ------------------------------------------------------------------------------

class SinusoidFunc:
    """
    The sinusoid amplitude * sin(frequency*x + phase), where frequency is 
    an angular frequency (radians per unit of x) and phase is in radians. 
    """

    def __init__(self, amplitude=1.0, frequency=1.0, phase=0.0):

        self.amplitude = amplitude
        self.frequency = frequency
        self.phase     = phase

    def evaluate(self, x):
        return self.amplitude * sin(self.frequency*x + self.phase)

    def derivative(self, x):
        return self.amplitude * self.frequency * \
                                cos(self.frequency*x + self.phase)

# end of SinusoidFunc

# ------------------------------------------------------------------------------
