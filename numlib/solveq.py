# numlib/solveq.py
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
Module contains a function for solving equations of one variable. 
"""
# ------------------------------------------------------------------------------

from numlib.numctrl  import checkctrl
from machdep.machnum import SQRTMACHEPS, SQRTTINY
from misclib.errwarn import ConvergenceError, checkpar

# ------------------------------------------------------------------------------

def znewton(fifi2fid, x0, caller='caller', tolf=SQRTMACHEPS, \
                          tola=SQRTTINY, itmax=64):
    """
    Solves the equation fi(x) = 0 using the Newton-Raphson algorithm. 
    
    NB. A ConvergenceError is raised if the iteration procedure has not 
    converged after itmax iterations - an unconverged estimate is NEVER 
    returned!
    
    Convergence is fast for the Newton algorithm - at the price of having to 
    compute the derivative of the function. Convergence cannot be guaranteed 
    for all functions and/or initial guesses, either...

    Arguments:
    ----------
    fifi2fid    Function having the desired root as its argument and 
                1: the value of fi, AND
                2: the value of the ratio of its value to the 
                value of its derivative given that root as its 
                outputs, in that order

    x0          Initial guess as to the value of the root

    caller      Name of the calling function (used in the error message)
   
    tolf        Desired fractional accuracy of root (a combination of absolute 
                and fractional will actually be used: tolf*abs(root) + tola)

    tola        Desired max absolute difference of fi(root) from zero 
                AND
                desired absolute accuracy of root (a combination of absolute 
                and fractional will actually be used: tolf*abs(root) + tola)
                
    itmax       Maximum number of iterations

    Returns:
    ---------
    Final value of root
    """

    tolf, itmax = checkctrl(tolf, itmax, 'znewton')
    checkpar(tola >= 0.0, "absolute tolerance must not be negative in znewton!")

    x  = x0
    for niter in range(0, itmax):
        fi, fi2fid = fifi2fid(x)
        if abs(fi) <= tola: return x
        x -= fi2fid
        if abs(fi2fid) <= tolf*abs(x) + tola: return x

    raise ConvergenceError('znewton called by ' + caller, itmax, x)

# end of znewton

# ------------------------------------------------------------------------------
