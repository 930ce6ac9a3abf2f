# randsource.py
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
The source of uniformly distributed random numbers on which the randomizers 
of the package are built. 
"""
# ------------------------------------------------------------------------------

from random import Random

from misclib.numbers import is_integer, is_posinteger
from misclib.errwarn import checkpar

# ------------------------------------------------------------------------------

class RandomSource:
    """
    A seedable stream of uniformly distributed random numbers based on 
    Python's built-in Random class, i. e. on the "Mersenne Twister", a very 
    reputable random number generator having a period of 2**19937-1. 
        source = RandomSource(nseed)
        x      = source.runif01()     # in [0.0, 1.0)
        bits   = source.rbits(32)     # 32 random bits as an integer

    Two instances given the same seed produce the same sequence, and calling 
    setseed(nseed) starts an instance over on the sequence belonging to 
    nseed. If nseed is None the stream is seeded from the operating system's 
    entropy source (or the time) and is not reproducible.

    The internal state of an instance changes on every call, so an instance 
    must not be shared between threads without external locking. 
    """
# ------------------------------------------------------------------------------

    def __init__(self, nseed=None):

        self._rstream = Random()
        self.setseed(nseed)

    # end of __init__

# ------------------------------------------------------------------------------

    def setseed(self, nseed):
        """
        Reseeds the stream. 'nseed' must be an integer (negative integers are 
        allowed) or None. The same seed always gives the same sequence. 
        """

        checkpar(nseed is None or is_integer(nseed), \
                     "the seed must be an integer or None in RandomSource!")

        self._rstream.seed(nseed)

    # end of setseed

# ------------------------------------------------------------------------------

    def runif01(self):
        """
        Returns a uniformly distributed float in [0.0, 1.0) with 53 random 
        bits. 
        """

        return self._rstream.random()

    # end of runif01

# ------------------------------------------------------------------------------

    def rbits(self, nbits=64):
        """
        Returns a non-negative integer made up of 'nbits' random bits. 
        """

        checkpar(is_posinteger(nbits), \
                        "number of bits must be a positive integer in rbits!")

        return self._rstream.getrandbits(nbits)

    # end of rbits

# ------------------------------------------------------------------------------

    def getstate(self):
        """
        Returns an object capturing the current state of the stream. 
        """

        return self._rstream.getstate()

    # end of getstate

# ------------------------------------------------------------------------------

    def setstate(self, state):
        """
        Restores a state obtained from getstate. The stream continues 
        exactly as it would have after the getstate call. 
        """

        self._rstream.setstate(state)

    # end of setstate

# ------------------------------------------------------------------------------

# end of RandomSource
