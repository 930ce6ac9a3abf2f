# numlib/quadrature.py
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
Fixed-order quadrature. The abscissas and weights below are those of the 
18-point Gauss-Legendre scheme used by Press, Teukolsky, Vetterling & Flannery 
("Numerical Recipes", 3rd ed.) for the incomplete gamma function at large 
shape parameter, where the integrand is a smooth, narrow hump. 
"""
# ------------------------------------------------------------------------------

_Y = (0.0021695375159141994, 0.011413521097787704, 0.027972308950302116, \
      0.051727015600492421,  0.082502225484340941, 0.12007019910960293,  \
      0.16415283300752470,   0.21442376986779355,  0.27051082840644336,  \
      0.33199876341447887,   0.39843234186401943,  0.46931971407375483,  \
      0.54413605556657973,   0.62232745288031077,  0.70331500465597174,  \
      0.78649910768313447,   0.87126389619061517,  0.95698180152629142)

_W = (0.0055657196642445571, 0.012915947284065419, 0.020181515297735382, \
      0.027298621498568734,  0.034213810770299537, 0.040875750923643261, \
      0.047235083490265582,  0.053244713977759692, 0.058860144245324798, \
      0.064039797355015485,  0.068745323835736408, 0.072941885005653087, \
      0.076598410645870640,  0.079687828912071670, 0.082187266704339706, \
      0.084078218979661945,  0.085346685739338721, 0.085983275670394821)

NGAUSSLEG = len(_Y)

# ------------------------------------------------------------------------------

def qgaussleg(func, a, b):
    """
    Integral of func from a to b using the 18-point scheme above. 'b' may be 
    smaller than 'a' (the sign of the integral follows, as it should).

    NB The abscissas crowd towards a and none lies close to b: the result 
    is only accurate for an integrand that has died away well before b, 
    like the tail integrals of the incomplete gamma function!
    """

    span = b - a
    summ = 0.0
    for y, w in zip(_Y, _W):
        summ += w * func(a + span*y)

    return summ * span

# end of qgaussleg

# ------------------------------------------------------------------------------
