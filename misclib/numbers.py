# misclib/numbers.py
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
Module contains functions for assigning, checking and manipulating numbers. 
"""
# ------------------------------------------------------------------------------

from struct import pack, unpack

from machdep.machnum import INT32MIN, INT64MIN

# ------------------------------------------------------------------------------

def is_integer(x):
    """
    Logical function. Returns 'True' if argument is an integer number, 
    'False' otherwise. bool is not regarded as an integer here.
    """

    return isinstance(x, int) and not isinstance(x, bool)

# end of is_integer

# ------------------------------------------------------------------------------

def is_posinteger(x):
    """
    Logical function. Returns 'True' if argument is a positive integer, 
    'False' otherwise.  
    """

    return is_integer(x) and x > 0

# end of is_posinteger

# ------------------------------------------------------------------------------

def is_nonneginteger(x):
    """
    Logical function. Returns 'True' if argument is a non-negative integer, 
    'False' otherwise. 
    """

    return is_integer(x) and x >= 0

# end of is_nonneginteger

# ------------------------------------------------------------------------------

def kept_within(minimum, x, maximum=float('inf')):
    """
    Makes certain that the input stays in the interval [minimum, maximum]. 
    """

    if   x < minimum: return minimum
    elif x > maximum: return maximum
    else:             return x

# end of kept_within

# ------------------------------------------------------------------------------

def float32(x):
    """
    Rounds a Python float to the nearest IEEE 754 single precision number 
    (returned as a Python float, of course). Overflow gives +/-inf. 
    """

    try:
        return unpack('f', pack('f', x))[0]
    except OverflowError:
        if x > 0.0: return float('inf')
        else:       return float('-inf')

# end of float32

# ------------------------------------------------------------------------------

def wrap_int32(n):
    """
    Wraps an integer of arbitrary size into the signed 32-bit range 
    (two's complement, as a C int would). 
    """

    return (n - INT32MIN) % 2**32 + INT32MIN

# end of wrap_int32

# ------------------------------------------------------------------------------

def wrap_int64(n):
    """
    Wraps an integer of arbitrary size into the signed 64-bit range. 
    """

    return (n - INT64MIN) % 2**64 + INT64MIN

# end of wrap_int64

# ------------------------------------------------------------------------------
