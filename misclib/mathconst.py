# misclib/mathconst.py
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
File contains a number of often used math constants, most of which were taken 
from Abramowitz & Stegun and from L. Rade & B. Westergren, "Beta - Mathematics 
Handbook", 2nd Ed., Chartwell-Bratt, 1990. 
"""
# ------------------------------------------------------------------------------

SQRT05    = 0.7071067811865475244008444  # sqrt(0.5)
SQRT2     = 1.4142135623730950488016887  # sqrt(2.0)
PI        = 3.1415926535897932384626434  # There is also a built-in 'pi'
TWOPI     = 6.2831853071795864769252868  # 2.0*PI
SQRTPI    = 1.7724538509055160272981675  # sqrt(PI)
SQRTTWOPI = 2.506628274631000502415765   # sqrt(2.0*PI)
SQRTPIINV = 0.5641895835477562869480795  # sqrt(1.0/PI)
TWOSQRTPIINV = 1.1283791670955125738961589  # 2.0/sqrt(PI), slope of erf at 0
LN2       = 0.6931471805599453094172321  # natural logarithm of 2.0
LNSQRTPI  = 0.5723649429247000870717137  # ln(sqrt(PI)) = lngamma(0.5)

# ------------------------------------------------------------------------------
