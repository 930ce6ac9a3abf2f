# __init__.py
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
The StatElements package contains modules for special functions (the gamma 
and error function families), the chi-squared and normal distributions and 
uniform and Gaussian random number generation. 
"""
# -----------------------------------------------------------------------------

__version__ = "1.0"

__author__  = "Nils A. Kjellbert"

__all__     = [ 'abcrand',        'gaussrandomizer', 'randfactory', \
                'randsource',     'unifrandomizer' ]

# -----------------------------------------------------------------------------
