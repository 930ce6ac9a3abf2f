# unifrandomizer.py
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
Module contains the UniformRandomizer class. 
"""
# ------------------------------------------------------------------------------

from abcrand         import ABCRandomizer
from randsource      import RandomSource
from machdep.machnum import INT32MIN, INT32MAX, INT64MIN, INT64MAX
from misclib.numbers import is_integer, float32, wrap_int32, wrap_int64
from misclib.errwarn import checkpar

# ------------------------------------------------------------------------------

class UniformRandomizer(ABCRandomizer):
    """
    Generates uniformly distributed booleans, ints, longs, floats and doubles 
    from a RandomSource. The ranges are passed per call and are half-open, 
    i. e. [low, high) with the lower limit included and the upper excluded: 

        randomizer = UniformRandomizer(RandomSource(1234))
        randomizer.next_int()            # any signed 32-bit integer
        randomizer.next_int(6)           # 0, 1, 2, 3, 4 or 5
        randomizer.next_int(1, 7)        # 1, 2, 3, 4, 5 or 6
        randomizer.next_double(-1, 1)    # float in [-1.0, 1.0)
        randomizer.next_doubles(8, 0, 5) # array('d') of 8 floats in [0.0, 5.0)

    A fresh (non-reproducible) RandomSource is created when none is given. 
    low >= high, non-integer limits for the integer methods, limits outside 
    the signed 32/64-bit range and thresholds outside [0.0, 1.0] all raise 
    an InvalidParameterError. 
    """
# ------------------------------------------------------------------------------

    def __init__(self, source=None):

        if source is None: source = RandomSource()
        checkpar(isinstance(source, RandomSource), \
                "source must be a RandomSource or None in UniformRandomizer!")
        self.source = source

    # end of __init__

# ------------------------------------------------------------------------------

    def setseed(self, nseed):
        """
        Reseeds the underlying RandomSource. 
        """

        self.source.setseed(nseed)

    # end of setseed

# ------------------------------------------------------------------------------

    def next_bool(self, threshold=None):
        """
        Returns a fair random boolean, or - when a threshold in [0.0, 1.0] is 
        given - True with probability equal to the threshold. 
        """

        if threshold is None:
            return self.source.rbits(1) == 1

        checkpar(0.0 <= threshold <= 1.0, \
                  "threshold must be in [0.0, 1.0] in UniformRandomizer!")
        return self.source.runif01() < threshold

    # end of next_bool

# ------------------------------------------------------------------------------

    def next_int(self, low=None, high=None):
        """
        Returns a signed 32-bit integer: unconstrained when no limits are 
        given, in [0, low) when one limit is given and in [low, high) when 
        both are given. 
        """

        limits = self._intlimits(low, high, INT32MIN, INT32MAX, 'next_int')
        if limits is None:
            return wrap_int32(self.source.rbits(32))
        return self._randrange(*limits)

    # end of next_int

# ------------------------------------------------------------------------------

    def next_long(self, low=None, high=None):
        """
        Like next_int but in the signed 64-bit range. 
        """

        limits = self._intlimits(low, high, INT64MIN, INT64MAX, 'next_long')
        if limits is None:
            return wrap_int64(self.source.rbits(64))
        return self._randrange(*limits)

    # end of next_long

# ------------------------------------------------------------------------------

    def next_float(self, low=None, high=None):
        """
        Returns a float with 24 random bits - the precision of an IEEE 754 
        single precision number - in [0.0, 1.0), or in [low, high) when 
        limits are given (the output is rounded to single precision). 
        """

        limits = self._floatlimits(low, high, 'next_float')
        if limits is None:
            return self.source.rbits(24) / 16777216.0

        low, high = limits
        x = low + (high-low)*self.source.rbits(24)/16777216.0
        y = float32(x)
        if low <= y < high: return y
        else:               return x   # No single in range near x

    # end of next_float

# ------------------------------------------------------------------------------

    def next_double(self, low=None, high=None):
        """
        Returns a float with 53 random bits in [0.0, 1.0), or in [low, high) 
        when limits are given. 
        """

        limits = self._floatlimits(low, high, 'next_double')
        if limits is None:
            return self.source.runif01()

        low, high = limits
        while True:
            x = low + (high-low)*self.source.runif01()
            if x < high: return x

    # end of next_double

# ------------------------------------------------------------------------------
# Auxiliary methods
# ------------------------------------------------------------------------------

    def _randrange(self, low, high):
        # Rejection sampling on the smallest number of bits covering the range

        n      = high - low
        nbits  = n.bit_length()
        r      = self.source.rbits(nbits)
        while r >= n:
            r  = self.source.rbits(nbits)

        return low + r

    # end of _randrange

# ------------------------------------------------------------------------------

    def _intlimits(self, low, high, minint, maxint, caller):
        """
        Returns None when no limits are given, otherwise the checked limits 
        as a tuple (low, high). A single limit is the upper one. 
        """

        if low is None and high is None: return None
        if high is None: low, high = 0, low
        elif low is None: low = 0

        checkpar(is_integer(low) and is_integer(high), \
                          "limits must be integers in " + caller + "!")
        checkpar(low < high, \
                          "low must be smaller than high in " + caller + "!")
        checkpar(minint <= low and high <= maxint, \
                          "limits out of range in " + caller + "!")

        return low, high

    # end of _intlimits

# ------------------------------------------------------------------------------

    def _floatlimits(self, low, high, caller):

        if low is None and high is None: return None
        if high is None: low, high = 0.0, low
        elif low is None: low = 0.0

        checkpar(abs(low) < float('inf') and abs(high) < float('inf'), \
                          "limits must be finite in " + caller + "!")
        checkpar(low < high, \
                          "low must be smaller than high in " + caller + "!")

        return float(low), float(high)

    # end of _floatlimits

# ------------------------------------------------------------------------------

# end of UniformRandomizer
