# numlib/miscnum.py
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
Module contains a set of simple functions for numerically related tasks. 
"""
# ------------------------------------------------------------------------------

def fsign(x):
    """
    Returns the sign of the input (real) number as a float: 1.0 or -1.0 
    """

    if x >= 0.0: return  1.0
    else:        return -1.0

# end of fsign

# ------------------------------------------------------------------------------

def polyeval(a, x):
    """
    Computes the value of a polynomial an*x^n + an-1*x^n-1 + ... +  a0  
    where a is a real-valued vector (a list/tuple of floats), and x is 
    a float (this is, of course, "Horner's rule"!). The input list/tuple
    'a' must be ordered a0, a1, a2 etc.
    """

    b    = reversed(a)
    summ = 0.0
    for coeff in b: summ = summ*x + coeff

    return summ

# end of polyeval

# ------------------------------------------------------------------------------

def polyderiv(a, x):
    """
    Computes the value of the derivative of a polynomial 
    an*x^n + an-1*x^n-1 + ... +  a0  where a is a real-valued 
    vector (a list/tuple of floats), and x is a float. "Horner's 
    rule" is used to crank out the final numerical result. 
    The input list/tuple 'a' must be ordered a0, a1, a2 etc.
    """

    b = [k*a[k] for k in range(1, len(a))]

    return polyeval(b, x)

# end of polyderiv

# ------------------------------------------------------------------------------

