# statlib/invcdf.py
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
MODULE WITH FUNCTIONS FOR INVERTING THE CHI-SQUARED AND NORMAL DISTRIBUTIONS. 
"""
# ------------------------------------------------------------------------------

from numlib.specfunc   import invincgammap, inverfc
from numlib.numctrl    import TOLF, ITMAX, INVTOLF, INVITMAX
from misclib.errwarn   import checkpar
from misclib.mathconst import SQRT2

# ------------------------------------------------------------------------------

def ichisquare(prob, nu, tolf=TOLF, itmax=ITMAX, \
                         invtolf=INVTOLF, invitmax=INVITMAX):
    """
    The inverse of the chi-squared distribution with nu degrees of freedom 
    for 0 <= prob < 1. Since the cdf is P(nu/2, x/2) the inverse is 
    2 * invincgammap(nu/2, prob).

    tolf and itmax are the numerical control parameters of incgammap, 
    invtolf and invitmax those of the Newton-Raphson procedure of 
    invincgammap.
    """

    checkpar(nu > 0.0, "nu must be a positive float in ichisquare!")
    _checkprob(0.0 <= prob < 1.0, "[0.0, 1.0)", 'ichisquare')

    return 2.0 * invincgammap(0.5*nu, prob, invtolf, invitmax, tolf, itmax)

# end of ichisquare

# ------------------------------------------------------------------------------

def inormal(prob, mu=0.0, sigma=1.0):
    """
    Returns the inverse of the cumulative normal distribution function 
    for 0 < prob < 1: x = mu + sigma*sqrt(2)*inverf(2*prob - 1) 
    which is computed as mu - sigma*sqrt(2)*inverfc(2*prob), the same 
    thing but without losing the small probabilities of the lower tail 
    to the subtraction.
    """

    _checkprob(0.0 < prob < 1.0, "(0.0, 1.0)", 'inormal')
    checkpar(sigma > 0.0, "sigma must be a positive float in inormal!")

    return mu - sigma*SQRT2*inverfc(2.0*prob)

# end of inormal

# ------------------------------------------------------------------------------
# Auxiliary function:
# ------------------------------------------------------------------------------

def _checkprob(condition, interval, caller='caller'):
    checkpar(condition, "input probability must be within " + interval + \
                                                   " in " + caller + "!")

# end of _checkprob

# ------------------------------------------------------------------------------
