# statlib/cdf.py
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
Module with functions for the cdf of the chi-squared and normal distributions. 
"""
# ------------------------------------------------------------------------------

from numlib.specfunc   import incgammap, erfc
from numlib.numctrl    import TOLF, ITMAX
from misclib.numbers   import kept_within
from misclib.errwarn   import checkpar
from misclib.mathconst import SQRT05

# ------------------------------------------------------------------------------

def cchisquare(nu, x, tolf=TOLF, itmax=ITMAX):
    """
    The cdf of the chi-squared distribution with nu degrees of freedom, 
    which is the regularized incomplete gamma function P(nu/2, x/2). 
    0.0 is returned for x < 0.0.

    tolf and itmax are the numerical control parameters of incgammap.
    """

    checkpar(nu > 0.0, "nu must be a positive float in cchisquare!")

    if x <= 0.0: return 0.0

    return incgammap(0.5*nu, 0.5*x, tolf, itmax)

# end of cchisquare

# ------------------------------------------------------------------------------

def cnormal(mu, sigma, x):
    """
    cdf for the normal (Gaussian) distribution: 
    F = 0.5 * (1 + erf((x-mu)/(sigma*sqrt(2)))) 
    which is computed as 0.5 * erfc(-(x-mu)/(sigma*sqrt(2))) - the same 
    thing without the cancellation in the lower tail.
    
    sigma > 0.0
    """

    checkpar(sigma > 0.0, "sigma must be a positive float in cnormal!")

    x   =  (x-mu) / float(sigma)
    cdf =  0.5 * erfc(-SQRT05*x)

    cdf = kept_within(0.0, cdf, 1.0)

    return cdf

# end of cnormal

# ------------------------------------------------------------------------------
