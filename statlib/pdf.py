# statlib/pdf.py
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
Module with functions for the pdf of the chi-squared and normal distributions. 
"""
# ------------------------------------------------------------------------------

from math import exp, log

from numlib.specfunc   import lngamma
from misclib.errwarn   import checkpar
from misclib.mathconst import SQRTTWOPI, LN2

# ------------------------------------------------------------------------------

def dchisquare(nu, x, lnfac=None):
    """
    The pdf of the chi-squared distribution with nu degrees of freedom: 
    f = x**(nu/2-1) * exp(-x/2) / (2**(nu/2) * gamma(nu/2)), x >= 0, nu > 0

    The density is computed as exp(-(x - (nu-2)*ln(x))/2 - lnfac) where 
    lnfac = ln(2)*nu/2 + lngamma(nu/2), so that nothing overflows for large 
    x or nu. lnfac may be provided as a pre-computed input (cf. chisqfac) 
    instead of the default None. 

    0.0 is returned for x < 0.0. At x = 0.0 the pdf is float('inf') for 
    nu < 2, 0.5 for nu = 2 and 0.0 for nu > 2.
    """

    checkpar(nu > 0.0, "nu must be a positive float in dchisquare!")

    if x < 0.0: return 0.0

    if x == 0.0:
        if   nu < 2.0: return float('inf')
        elif nu > 2.0: return 0.0
        else:          return 0.5

    if lnfac is None: lnfac = chisqfac(nu)

    return exp(-0.5*(x - (nu-2.0)*log(x)) - lnfac)

# end of dchisquare

# ------------------------------------------------------------------------------

def chisqfac(nu):
    """
    The logarithm of the normalizing constant of the chi-squared pdf: 
    ln(2**(nu/2) * gamma(nu/2)). 
    """

    return LN2*0.5*nu + lngamma(0.5*nu)

# end of chisqfac

# ------------------------------------------------------------------------------

def dnormal(mu, sigma, x):
    """
    The pdf of the normal (Gaussian) distribution. 
    sigma must be > 0.0
    """

    # Input check -----------------
    checkpar(sigma > 0.0, "sigma must be positive in dnormal!")
    # -----------------------------

    fsigma = float(sigma)
    x      = (x-mu) / fsigma
    d      = SQRTTWOPI * fsigma
    n      = exp(-0.5*x*x)

    pdf =  n / d

    return pdf

# end of dnormal

# ------------------------------------------------------------------------------
