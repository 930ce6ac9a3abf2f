# gaussrandomizer.py
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
Module contains the GaussianRandomizer class. 
"""
# ------------------------------------------------------------------------------

from math import sqrt, log

from abcrand         import ABCRandomizer
from randsource      import RandomSource
from unifrandomizer  import UniformRandomizer
from statlib.cdf     import cnormal
from machdep.machnum import INT32MIN, INT32MAX, INT64MIN, INT64MAX
from misclib.numbers import float32, kept_within
from misclib.errwarn import InvalidParameterError, checkpar

# ------------------------------------------------------------------------------

class GaussianRandomizer(ABCRandomizer):
    """
    Generates normally distributed variates with mean 'mean' and standard 
    deviation 'sigma' > 0 using the polar method of Marsaglia: 

        randomizer = GaussianRandomizer(RandomSource(1234), 10.0, 2.0)
        x          = randomizer.next_double()
        xs         = randomizer.next_doubles(1000)

    'source' may be a UniformRandomizer, a RandomSource or None (in which 
    case a fresh non-reproducible source is created). The randomizer keeps 
    a UniformRandomizer of its own for the uniform variates. 

    The polar method produces the normal variates in pairs; the second 
    variate of a pair is kept as a spare in the attribute 'spare' (None 
    when there is no spare) and is handed out on the next call. Reseeding 
    throws the spare away so that a reseeded randomizer repeats itself 
    exactly. 

    next_float rounds to single precision, next_int and next_long truncate 
    towards zero and saturate at the limits of the signed 32/64-bit range 
    (infinite variates included). 
    """
# ------------------------------------------------------------------------------

    def __init__(self, source=None, mean=0.0, sigma=1.0):

        if isinstance(source, UniformRandomizer):
            self.uniform = source
        elif source is None or isinstance(source, RandomSource):
            self.uniform = UniformRandomizer(source)
        else:
            raise InvalidParameterError("source must be a UniformRandomizer, " \
                          + "a RandomSource or None in GaussianRandomizer!")

        self.set_mean(mean)
        self.set_sigma(sigma)
        self.spare = None

    # end of __init__

# ------------------------------------------------------------------------------

    def set_mean(self, mean):

        checkpar(abs(mean) < float('inf'), \
                         "mean must be a finite number in GaussianRandomizer!")
        self.mean = mean

    # end of set_mean

# ------------------------------------------------------------------------------

    def set_sigma(self, sigma):

        checkpar(0.0 < sigma < float('inf'), \
                 "standard deviation must be a positive finite number " \
                                                   + "in GaussianRandomizer!")
        self.sigma = sigma

    # end of set_sigma

# ------------------------------------------------------------------------------

    def setseed(self, nseed):
        """
        Reseeds the underlying source and discards any spare variate. 
        """

        self.uniform.setseed(nseed)
        self.spare = None

    # end of setseed

# ------------------------------------------------------------------------------

    def rstdnormal(self):
        """
        Returns a standard normal variate (mean 0, standard deviation 1). 
        """

        if self.spare is not None:
            z, self.spare = self.spare, None
            return z

        while True:
            u = 2.0*self.uniform.next_double() - 1.0
            v = 2.0*self.uniform.next_double() - 1.0
            s = u*u + v*v
            if 0.0 < s < 1.0: break

        f = sqrt(-2.0*log(s)/s)
        self.spare = v*f

        return u*f

    # end of rstdnormal

# ------------------------------------------------------------------------------

    def next_double(self):

        return self.mean + self.sigma*self.rstdnormal()

    # end of next_double


    def next_float(self):

        return float32(self.next_double())

    # end of next_float


    def next_int(self):

        return int(kept_within(INT32MIN, self.next_double(), INT32MAX))

    # end of next_int


    def next_long(self):

        return int(kept_within(INT64MIN, self.next_double(), INT64MAX))

    # end of next_long

# ------------------------------------------------------------------------------

    def next_bool(self, threshold=0.5):
        """
        Returns True with probability 'threshold' (0.0 <= threshold <= 1.0). 
        The normal variate is carried over to [0.0, 1.0] by the normal cdf 
        having the randomizer's mean and sigma - which makes it uniformly 
        distributed - and compared with the threshold. The default 0.5 thus 
        amounts to testing whether the variate lies below the mean. 
        """

        checkpar(0.0 <= threshold <= 1.0, \
                  "threshold must be in [0.0, 1.0] in GaussianRandomizer!")

        x = self.next_double()
        return cnormal(self.mean, self.sigma, x) < threshold

    # end of next_bool

# ------------------------------------------------------------------------------

# end of GaussianRandomizer
