# numlib/numctrl.py
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
Numerical control parameters for the iterative procedures of the package. 
Every iterative function takes two keyword arguments: 

    tolf   the allowed fractional (relative) error - the "tolerance"
    itmax  the maximum number of iterations - the "maxIterations"

and the defaults below are what is used unless something else is given. 
Exceeding itmax without meeting tolf raises a ConvergenceError; there are 
no silent approximations.
"""
# ------------------------------------------------------------------------------

from misclib.numbers import is_posinteger
from machdep.machnum import MACHEPS, SQRTMACHEPS
from misclib.errwarn import warn, checkpar

TOLF     = MACHEPS      # Series and continued fraction of the incomplete gamma
ITMAX    = 100

INVTOLF  = SQRTMACHEPS  # Halley steps of invincgammap (cubic convergence)
INVITMAX = 12

ERFTOLF  = SQRTMACHEPS  # Newton steps of inverfc (quadratic convergence makes
ERFITMAX = 32           # the final root good to machine precision anyway)

# ------------------------------------------------------------------------------

def checkctrl(tolf, itmax, caller='caller'):
    """
    Checks the numerical control parameters and returns them, possibly 
    adjusted: a tolerance below machine epsilon is of no use and is replaced 
    by machine epsilon (a warning is printed). itmax must be a positive 
    integer and tolf must not be negative - an InvalidParameterError is 
    raised otherwise.
    """

    checkpar(is_posinteger(itmax), \
      "maximum number of iterations must be a positive integer in " + \
                                                                caller + "!")
    checkpar(tolf >= 0.0, "tolerance must not be negative in " + caller + "!")

    if tolf < MACHEPS:
        tolf = MACHEPS
        warn("No use using tolerance < machine epsilon in " + caller + \
                                         ". Machine epsilon is used instead")

    return tolf, itmax

# end of checkctrl

# ------------------------------------------------------------------------------
