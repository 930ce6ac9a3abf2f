# randfactory.py
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
Module contains a factory for the randomizers of the package. 
"""
# ------------------------------------------------------------------------------

from randsource      import RandomSource
from unifrandomizer  import UniformRandomizer
from gaussrandomizer import GaussianRandomizer
from misclib.numbers import is_integer
from misclib.errwarn import InvalidParameterError, checkpar

# ------------------------------------------------------------------------------

class RandomizerType:
    """
    The kinds of randomizers that create_randomizer knows of. 
    """

    UNIFORM  = 'uniform'
    GAUSSIAN = 'gaussian'

    ALL      = (UNIFORM, GAUSSIAN)

# end of RandomizerType

# ------------------------------------------------------------------------------

def create_randomizer(kind=RandomizerType.UNIFORM, source=None, seed=None):
    """
    Returns a new randomizer of the kind 'kind' (one of RandomizerType.UNIFORM 
    and RandomizerType.GAUSSIAN, case is ignored). The randomizer draws from 
    'source' when a RandomSource is given, otherwise from a new RandomSource 
    seeded with 'seed' (None gives a non-reproducible source). Giving both 
    a source and a seed is an error - reseed the source instead. 

    A Gaussian randomizer is created with mean 0.0 and sigma 1.0; use its 
    set_mean and set_sigma methods for other parameter values. 
    """

    checkpar(isinstance(kind, str) and kind.lower() in RandomizerType.ALL, \
          "unknown randomizer type " + repr(kind) + " in create_randomizer!")
    checkpar(seed is None or is_integer(seed), \
                        "the seed must be an integer or None in create_randomizer!")
    if source is None:
        source = RandomSource(seed)
    elif seed is not None:
        raise InvalidParameterError("source and seed must not both be given " \
                                              + "in create_randomizer!")

    if kind.lower() == RandomizerType.GAUSSIAN:
        return GaussianRandomizer(source)
    else:
        return UniformRandomizer(source)

# end of create_randomizer

# ------------------------------------------------------------------------------
