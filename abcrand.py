# abcrand.py
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
The contract shared by the randomizers of the package. 
"""
# ------------------------------------------------------------------------------

from abc   import ABCMeta, abstractmethod
from array import array

from misclib.numbers import is_posinteger
from misclib.errwarn import checkpar

# ------------------------------------------------------------------------------

class ABCRandomizer(metaclass=ABCMeta):
    """
    This class contains everything that is common to the UniformRandomizer 
    and GaussianRandomizer classes: the capability of producing booleans, 
    32-bit integers ("ints"), 64-bit integers ("longs"), single precision 
    floats ("floats") and double precision floats ("doubles") from a uniform 
    source that the randomizer owns. Since this is an abstract base class, it 
    cannot be used in a standalone fashion.

    The single draws next_bool, next_int, next_long, next_float and 
    next_double must be provided by the heirs, and so must setseed. All the 
    bulk methods are defined here in terms of the single draws, and any 
    extra arguments (ranges, thresholds) are passed on to them:

        next_doubles(length, *args)   returns a new array of 'length' values
        fill_doubles(seq, *args)      fills the mutable sequence 'seq' 

    and so on for bools, ints, longs and floats. New sequences are arrays 
    from the built-in array module with the typecodes 'i', 'q', 'f' and 'd' 
    (booleans are returned in a list). A length that is not a positive 
    integer raises an InvalidParameterError.

    UniformRandomizer and GaussianRandomizer are independent heirs of this 
    class: a GaussianRandomizer HAS a UniformRandomizer, it is not one. 
    Instances change state on every draw and must be confined to one thread.
    """
# ------------------------------------------------------------------------------

    @abstractmethod
    def setseed(self, nseed):
        pass

    @abstractmethod
    def next_bool(self, *args):
        pass

    @abstractmethod
    def next_int(self, *args):
        pass

    @abstractmethod
    def next_long(self, *args):
        pass

    @abstractmethod
    def next_float(self, *args):
        pass

    @abstractmethod
    def next_double(self, *args):
        pass

# ------------------------------------------------------------------------------

    def next_bools(self, length, *args):

        self._checklength(length, 'next_bools')
        return [self.next_bool(*args) for k in range(length)]

    def fill_bools(self, seq, *args):

        self._fill(seq, self.next_bool, args)

# ------------------------------------------------------------------------------

    def next_ints(self, length, *args):

        self._checklength(length, 'next_ints')
        return array('i', (self.next_int(*args) for k in range(length)))

    def fill_ints(self, seq, *args):

        self._fill(seq, self.next_int, args)

# ------------------------------------------------------------------------------

    def next_longs(self, length, *args):

        self._checklength(length, 'next_longs')
        return array('q', (self.next_long(*args) for k in range(length)))

    def fill_longs(self, seq, *args):

        self._fill(seq, self.next_long, args)

# ------------------------------------------------------------------------------

    def next_floats(self, length, *args):

        self._checklength(length, 'next_floats')
        return array('f', (self.next_float(*args) for k in range(length)))

    def fill_floats(self, seq, *args):

        self._fill(seq, self.next_float, args)

# ------------------------------------------------------------------------------

    def next_doubles(self, length, *args):

        self._checklength(length, 'next_doubles')
        return array('d', (self.next_double(*args) for k in range(length)))

    def fill_doubles(self, seq, *args):

        self._fill(seq, self.next_double, args)

# ------------------------------------------------------------------------------
# Auxiliary methods
# ------------------------------------------------------------------------------

    def _fill(self, seq, draw, args):
        # Every slot of seq is overwritten, the length of seq is kept

        for k in range(len(seq)):
            seq[k] = draw(*args)

    # end of _fill

# ------------------------------------------------------------------------------

    def _checklength(self, length, caller='caller'):

        checkpar(is_posinteger(length), \
                 "length must be a positive integer in " + caller + "!")

    # end of _checklength

# ------------------------------------------------------------------------------

# end of ABCRandomizer
