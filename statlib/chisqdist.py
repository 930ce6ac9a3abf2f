# statlib/chisqdist.py
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
The chi-squared distribution as an object holding its number of degrees of 
freedom (cf. the functions dchisquare, cchisquare and ichisquare for the 
same thing without an object). 
"""
# ------------------------------------------------------------------------------

from statlib.pdf     import dchisquare, chisqfac
from statlib.cdf     import cchisquare
from statlib.invcdf  import ichisquare
from numlib.numctrl  import TOLF, ITMAX, INVTOLF, INVITMAX, checkctrl
from misclib.errwarn import checkpar

# ------------------------------------------------------------------------------

class ChiSquaredDist:
    """
    The chi-squared distribution with nu > 0 degrees of freedom: 
        chisq = ChiSquaredDist(nu)
        d     = chisq.pdf(x)
        p     = chisq.cdf(x)
        x     = chisq.invcdf(p)

    nu may only be changed through set_nu, which checks it. tolf and itmax 
    are the numerical control parameters of the incomplete gamma function 
    (cf. numlib.numctrl), invtolf and invitmax those of its inverse. 

    Instances are not changed by pdf, cdf and invcdf, so these may be called 
    from several threads at once.
    """
# ------------------------------------------------------------------------------

    def __init__(self, nu, tolf=TOLF, itmax=ITMAX, \
                           invtolf=INVTOLF, invitmax=INVITMAX):

        self.tolf,    self.itmax    = checkctrl(tolf, itmax, 'ChiSquaredDist')
        self.invtolf, self.invitmax = checkctrl(invtolf, invitmax, \
                                                           'ChiSquaredDist')
        self.set_nu(nu)

    # end of __init__

# ------------------------------------------------------------------------------

    def set_nu(self, nu):
        """
        Sets the number of degrees of freedom (nu must be > 0.0). 
        """

        checkpar(nu > 0.0, \
            "degrees of freedom must be a positive float in ChiSquaredDist!")

        self.nu     = nu
        self._lnfac = chisqfac(nu)   # Normalization of the pdf

    # end of set_nu

# ------------------------------------------------------------------------------

    def pdf(self, x):

        return dchisquare(self.nu, x, self._lnfac)

    # end of pdf

# ------------------------------------------------------------------------------

    def cdf(self, x):
        """
        P(X <= x), which is 0.0 for x <= 0.0. 
        """

        return cchisquare(self.nu, x, self.tolf, self.itmax)

    # end of cdf

# ------------------------------------------------------------------------------

    def invcdf(self, prob):
        """
        The x for which cdf(x) = prob, 0.0 <= prob < 1.0. 
        """

        return ichisquare(prob, self.nu, self.tolf, self.itmax, \
                                         self.invtolf, self.invitmax)

    # end of invcdf

# ------------------------------------------------------------------------------

    def mean(self):

        return float(self.nu)

    # end of mean

# ------------------------------------------------------------------------------

    def variance(self):

        return 2.0 * self.nu

    # end of variance

# ------------------------------------------------------------------------------

    def __repr__(self):

        return "ChiSquaredDist(nu=" + repr(self.nu) + ")"

    # end of __repr__

# ------------------------------------------------------------------------------

# end of ChiSquaredDist
