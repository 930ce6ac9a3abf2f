# numlib/specfunc.py
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
Module used to compute the value of "special functions": the gamma function
family (ln gamma, factorials, binomial coefficients, the regularized
incomplete gamma functions P and Q and the inverse of P) and the error
function family (erf, erfc and their inverses).

Everything here is a pure function of its arguments and of the numerical
control parameters (cf. numlib.numctrl), so all of it may be called from
several threads at once.
"""
# ------------------------------------------------------------------------------

from math import exp, log, sqrt, floor, isinf

from numlib.miscnum    import fsign
from numlib.quadrature import qgaussleg
from numlib.solveq     import znewton
from numlib.numctrl    import TOLF, ITMAX, INVTOLF, INVITMAX, ERFTOLF, ERFITMAX
from numlib.numctrl    import checkctrl
from misclib.numbers   import is_integer, is_nonneginteger, kept_within
from misclib.errwarn   import ConvergenceError, checkpar
from machdep.machnum   import FPMIN, MACHEPS, MINEPSFLOAT
from misclib.mathconst import PI, SQRTPI, SQRTTWOPI, TWOSQRTPIINV

_MAXFACT = 170     # 171! overflows a double
_NLNFACT = 2000    # Number of cached log factorials
_ASWITCH = 100.0   # Quadrature is used for P and Q for shape parameters above

# Lanczos coefficients for g = 671/128 and n = 14 (cf. Press et al.,
# "Numerical Recipes", 3rd ed.), relative error < 1.e-15 for all x > 0
_LANCZOS = ( 57.1562356658629235,     -59.5979603554754912,     \
             14.1360979747417471,      -0.491913816097620199,   \
              0.339946499848118887e-4,  0.465236289270485756e-4, \
             -0.983744753048795646e-4,  0.158088703224912494e-3, \
             -0.210264441724104883e-3,  0.217439618115212643e-3, \
             -0.164318106536763890e-3,  0.844182239838527433e-4, \
             -0.261908384015814087e-4,  0.368991826595316234e-5 )

# The tables are built on first use and then only read. A table is bound
# to its module name in one go, so a concurrent reader never sees half of it
_facttable   = None
_lnfacttable = None

# ------------------------------------------------------------------------------

def lngamma(x):
    """
    The natural logarithm of the gamma function for real, positive argument.
    A Lanczos approximation with fourteen coefficients is used, which keeps
    the fractional error below 1.e-15 and does not overflow for large x
    (ln(gamma(x)) is of course far smaller than gamma(x) itself...).
    """

    checkpar(x > 0.0, "argument must be real and positive in lngamma!")

    y    = x
    tmp  = x + 5.24218750000000000   # 671/128
    tmp  = (x+0.5)*log(tmp) - tmp
    summ = 0.999999999999997092
    for coeff in _LANCZOS:
        y    += 1.0
        summ += coeff/y

    return tmp + log(SQRTTWOPI*summ/x)

# end of lngamma

# ------------------------------------------------------------------------------

def ffactorial(n):
    """
    Computation of a factorial, returning a float. Only defined for
    0 <= n <= 170 since 171! overflows - use lnfactorial for larger n.
    The values are taken from a table that is built on the first call.
    """

    global _facttable

    checkpar(is_nonneginteger(n) and n <= _MAXFACT, \
          "argument to ffactorial must be an integer in [0, " + \
                                                   str(_MAXFACT) + "]!")

    table = _facttable
    if table is None:
        facts = [1.0]
        for k in range(1, _MAXFACT+1):
            facts.append(k*facts[-1])
        table = _facttable = tuple(facts)

    return table[n]

# end of ffactorial

# ------------------------------------------------------------------------------

def lnfactorial(n):
    """
    The natural logarithm of n! computed as lngamma(n+1). The values for
    n < 2000 are cached in a table that is built on the first call.
    """

    global _lnfacttable

    checkpar(is_nonneginteger(n), \
               "the argument to lnfactorial must be a non-negative integer!")

    if n >= _NLNFACT: return lngamma(n+1.0)

    table = _lnfacttable
    if table is None:
        table = _lnfacttable = tuple(lngamma(k+1.0) for k in range(_NLNFACT))

    return table[n]

# end of lnfactorial

# ------------------------------------------------------------------------------

def bincoeff(n, k):
    """
    The binomial coefficient n over k returned as a float:
    round(n! / (k! * (n-k)!)). The factorial table is used for n <= 170,
    where it is exact as long as the result is below 2**53; above that
    exp(lnfactorial(n) - lnfactorial(k) - lnfactorial(n-k)) is rounded
    (the floor of 0.5 + ... cleans up the roundoff error).
    """

    checkpar(is_integer(n) and is_integer(k), \
                         "both arguments to bincoeff must be integers!")
    checkpar(0 <= k <= n, "0 <= k <= n is required in bincoeff!")

    if n <= _MAXFACT:
        return floor(0.5 + ffactorial(n) / (ffactorial(k)*ffactorial(n-k)))

    return floor(0.5 + exp(lnfactorial(n) - lnfactorial(k) - \
                                             lnfactorial(n-k)))

# end of bincoeff

# ------------------------------------------------------------------------------

def beta(z, w):
    """
    The beta function (uses exp(lngamma(z) + lngamma(w) - lngamma(z+w))).
    ---------
    NB If you need the logarithm of beta: use lnbeta instead!!!
    """

    return exp(lnbeta(z, w))

# end of beta

# ------------------------------------------------------------------------------

def lnbeta(z, w):
    """
    The natural logarithm of the beta function
    (uses lngamma(z) + lngamma(w) - lngamma(z+w)).
    """

    checkpar(z > 0.0 and w > 0.0, \
                       "both arguments to lnbeta must be positive floats!")

    return lngamma(z) + lngamma(w) - lngamma(z+w)

# end of lnbeta

# ------------------------------------------------------------------------------

def incgammap(a, x, tolf=TOLF, itmax=ITMAX):
    """
    The regularized lower incomplete gamma function
    P(a, x) = (1/gamma(a)) * integral from 0 to x of exp(-t)*t**(a-1) dt
    for a > 0 and x >= 0.

    A series expansion is used for x < a + 1 and a continued fraction for
    the complement Q = 1 - P otherwise (where the series would converge
    too slowly). For a >= 100 and x > a/2 the integral is computed by 
    Gauss-Legendre quadrature around the peak of the integrand instead; 
    further down the lower tail the series converges fast (every new term 
    is less than half the previous one).

    tolf  =  allowed fractional error of the series/continued fraction
    itmax =  maximum number of iterations (a ConvergenceError is raised
             when it is exceeded)
    """

    _checkincgamma(a, x, 'incgammap')
    tolf, itmax = checkctrl(tolf, itmax, 'incgammap')

    if x == 0.0:        return 0.0
    if isinf(x):        return 1.0
    if a >= _ASWITCH and x > 0.5*a: return _gammpapprox(a, x, True)
    if x < a + 1.0:     return _gser(a, x, tolf, itmax)
    return 1.0 - _gcf(a, x, tolf, itmax)

# end of incgammap

# ------------------------------------------------------------------------------

def incgammaq(a, x, tolf=TOLF, itmax=ITMAX):
    """
    The regularized upper incomplete gamma function Q(a, x) = 1 - P(a, x).
    Same method and parameters as incgammap. In the upper tail Q is computed
    directly by the continued fraction and not as a difference, so that its
    small values keep their fractional accuracy.
    """

    _checkincgamma(a, x, 'incgammaq')
    tolf, itmax = checkctrl(tolf, itmax, 'incgammaq')

    if x == 0.0:        return 1.0
    if isinf(x):        return 0.0
    if a >= _ASWITCH and x > 0.5*a: return _gammpapprox(a, x, False)
    if x < a + 1.0:     return 1.0 - _gser(a, x, tolf, itmax)
    return _gcf(a, x, tolf, itmax)

# end of incgammaq

# ------------------------------------------------------------------------------

def dincgamma(a, x):
    """
    The derivative of P(a, x) with respect to x, i. e. the density of the
    standard gamma distribution exp(-x) * x**(a-1) / gamma(a).

    NB dincgamma returns float('inf') for x = 0 and a < 1!
    """

    _checkincgamma(a, x, 'dincgamma')

    if x == 0.0:
        if   a < 1.0: return float('inf')
        elif a > 1.0: return 0.0
        else:         return 1.0

    return exp(-x + (a-1.0)*log(x) - lngamma(a))

# end of dincgamma

# ------------------------------------------------------------------------------

def invincgammap(a, p, tolf=INVTOLF, itmax=INVITMAX, gtolf=TOLF, gitmax=ITMAX):
    """
    Returns x such that P(a, x) = p for a > 0 and 0 <= p < 1.

    The initial guess is the Wilson-Hilferty approximation for a > 1, and
    for a <= 1 the small-x power expansion (for small p) or an exponential
    tail (for large p). For a > 1 the guess is never allowed below 
    (p*gamma(a+1))**(1/a), which is a lower bound of the root since 
    P(a, x) < x**a/gamma(a+1).

    For p < 0.5 the root is found by Newton-Raphson on ln(P) as a function 
    of ln(x) - cf. _invgammplower - which takes deep lower tails (p = 1.e-300, 
    say) in its stride. For p >= 0.5 Newton-Raphson steps with Halley's 
    correction are taken on P itself, where the derivative is the gamma 
    density. No iterate is allowed to go negative: a step that would take 
    x below zero is halved back toward the previous value.

    tolf and itmax control the Newton-Raphson procedure (the fractional size
    of the final step and the maximum number of steps); gtolf and gitmax are
    passed on to incgammap. A ConvergenceError is raised if the procedure has
    not converged after itmax steps.
    """

    checkpar(a > 0.0, "a must be positive in invincgammap!")
    checkpar(0.0 <= p < 1.0, "p must be in [0.0, 1.0) in invincgammap!")
    tolf, itmax = checkctrl(tolf, itmax, 'invincgammap')

    if p == 0.0: return 0.0

    a1  = a - 1.0
    gln = lngamma(a)

    if a > 1.0:
        lna1 = log(a1)
        afac = exp(a1*(lna1-1.0) - gln)
        if p < 0.5: pp = p
        else:       pp = 1.0 - p
        t = sqrt(-2.0*log(pp))
        x = (2.30753 + t*0.27061) / (1.0 + t*(0.99229 + t*0.04481)) - t
        if p < 0.5: x = -x
        x = a*(1.0 - 1.0/(9.0*a) - x/(3.0*sqrt(a)))**3
        x = max(x, exp((log(p) + log(a) + gln)/a))

    else:
        t = 1.0 - a*(0.253 + a*0.12)
        if p < t: x = (p/t)**(1.0/a)
        else:     x = 1.0 - log(1.0 - (p-t)/(1.0-t))

    if p < 0.5:
        return _invgammplower(a, p, x, gln, tolf, itmax, gtolf, gitmax)

    for k in range(0, itmax):
        if x <= 0.0: return 0.0   # The root has underflowed
        err = incgammap(a, x, gtolf, gitmax) - p
        if a > 1.0: t = afac * exp(-(x-a1) + a1*(log(x)-lna1))
        else:       t = exp(-x + a1*log(x) - gln)
        if t == 0.0: break        # The density has underflowed
        u  = err / t
        t  = u / (1.0 - 0.5*min(1.0, u*(a1/x - 1.0)))   # Halley
        x -= t
        if x <= 0.0: x = 0.5 * (x+t)
        if abs(t) < tolf*x: return x

    raise ConvergenceError('invincgammap', itmax, x)

# end of invincgammap

# ------------------------------------------------------------------------------

def erf(x, tolf=TOLF, itmax=ITMAX):
    """
    The error function erf(x) = sign(x) * P(0.5, x**2) for all real x. Odd
    symmetry erf(-x) = -erf(x) holds exactly since x**2 is the same for both.
    tolf and itmax are passed on to incgammap.
    """

    return fsign(x) * incgammap(0.5, x*x, tolf, itmax)

# end of erf

# ------------------------------------------------------------------------------

def erfc(x, tolf=TOLF, itmax=ITMAX):
    """
    The complementary error function erfc(x) = 1 - erf(x). For x >= 0 it is
    Q(0.5, x**2), taken directly from the incomplete gamma function so that
    the fractional accuracy is kept for large x where erfc is tiny. For x < 0
    it is 1 + P(0.5, x**2) which carries no cancellation either.
    """

    xx = x*x
    if x >= 0.0: return incgammaq(0.5, xx, tolf, itmax)
    else:        return 1.0 + incgammap(0.5, xx, tolf, itmax)

# end of erfc

# ------------------------------------------------------------------------------

def inverfc(p, tolf=ERFTOLF, itmax=ERFITMAX):
    """
    The inverse of the complementary error function for 0 < p < 2.

    The initial guess is a rational approximation of the normal quantile,
    refined by Newton-Raphson steps on erfc with the derivative
    -(2/sqrt(pi)) * exp(-x**2). The root is computed for p <= 1 (where it is
    non-negative) and reflected for p > 1 since erfc(-x) = 2 - erfc(x).
    A ConvergenceError is raised if Newton-Raphson has not converged after
    itmax steps.

    For subnormal p (below MINEPSFLOAT) erfc carries too few significant 
    bits to steer Newton-Raphson, and ln(erfc(x)) is solved for instead, 
    using the asymptotic expansion of erfc for large x.
    """

    checkpar(0.0 < p < 2.0, "p must be in (0.0, 2.0) in inverfc!")

    if p < 1.0: pp = p
    else:       pp = 2.0 - p

    t  = sqrt(-2.0*log(0.5*pp))
    x0 = -0.70711 * ((2.30753 + t*0.27061) / \
                               (1.0 + t*(0.99229 + t*0.04481)) - t)

    if pp < MINEPSFLOAT:
        lnpp = log(pp)
       # ----------------------------------------
        def _fifi2fid(x):
            fi  = _lnerfcasympt(x) - lnpp
            fid = -(2.0*x + 1.0/x)
            return fi, fi/fid
       # ----------------------------------------
        x = znewton(_fifi2fid, x0, 'inverfc', tolf, 0.0, itmax)

    else:
       # ----------------------------------------
        def _fifi2fid(x):
            fi  = erfc(x) - pp
            fid = -TWOSQRTPIINV * exp(-x*x)
            return fi, fi/fid
       # ----------------------------------------
        # erfc(x) within roundoff of pp stops the iteration
        x = znewton(_fifi2fid, x0, 'inverfc', tolf, MACHEPS*pp, itmax)

    if p < 1.0: return  x
    else:       return -x

# end of inverfc

# ------------------------------------------------------------------------------

def _lnerfcasympt(x):
    # ln(erfc(x)) from the asymptotic expansion
    # erfc(x) = exp(-x**2)/(x*sqrt(pi)) * (1 - z + 3z**2 - 15z**3 + ...),
    # z = 1/(2x**2), good to 1.e-10 or better for x > 25

    z = 0.5 / (x*x)
    return -x*x - log(x*SQRTPI) + log(1.0 - z*(1.0 - z*(3.0 - 15.0*z)))

# end of _lnerfcasympt

# ------------------------------------------------------------------------------

def inverf(p, tolf=ERFTOLF, itmax=ERFITMAX):
    """
    The inverse of the error function for -1 < p < 1.

    For abs(p) >= 0.5 inverfc(1 - p) is used (1 - p is exact there). Closer
    to zero Newton-Raphson is run on erf itself with the derivative
    (2/sqrt(pi)) * exp(-x**2), starting from the first two terms of the
    Maclaurin series of the inverse, so that tiny arguments keep their
    fractional accuracy.
    """

    checkpar(-1.0 < p < 1.0, "p must be in (-1.0, 1.0) in inverf!")

    if p == 0.0:       return 0.0
    if abs(p) >= 0.5:  return inverfc(1.0-p, tolf, itmax)

    x0 = 0.5*SQRTPI * (p + (PI/12.0)*p*p*p)

   # --------------------------------------------
    def _fifi2fid(x):
        fi  = erf(x) - p
        fid = TWOSQRTPIINV * exp(-x*x)
        return fi, fi/fid
   # --------------------------------------------

    return znewton(_fifi2fid, x0, 'inverf', tolf, 0.0, itmax)

# end of inverf

# ------------------------------------------------------------------------------
# Auxiliary functions
# ------------------------------------------------------------------------------

def _checkincgamma(a, x, caller='caller'):

    checkpar(a > 0.0,  "a must be positive in " + caller + "!")
    checkpar(x >= 0.0, "x must not be negative in " + caller + "!")

# end of _checkincgamma

# ------------------------------------------------------------------------------

def _gser(a, x, tolf, itmax):
    # P by its series expansion (cf. Abramowitz & Stegun), for x < a + 1.0

    gln  = lngamma(a)
    apn  = a
    dela = summ = 1.0 / a
    for k in range(0, itmax):
        apn  += 1.0
        dela *= x / apn
        summ += dela
        if abs(dela) < abs(summ)*tolf:
            return summ * exp(-x + a*log(x) - gln)

    raise ConvergenceError('incomplete gamma series', itmax, \
                                       summ * exp(-x + a*log(x) - gln))

# end of _gser

# ------------------------------------------------------------------------------

def _gcf(a, x, tolf, itmax):
    # Q by its continued fraction, evaluated with the modified Lentz
    # method, for x >= a + 1.0. FPMIN keeps the partial numerators and
    # denominators away from zero

    gln = lngamma(a)
    b   = x + 1.0 - a
    c   = 1.0 / FPMIN
    d   = 1.0 / b
    h   = d
    for k in range(1, itmax+1):
        an = -k * (k-a)
        b += 2.0
        d  = an*d + b
        if abs(d) < FPMIN: d = FPMIN
        c  = b + an/c
        if abs(c) < FPMIN: c = FPMIN
        d    = 1.0 / d
        dela = d * c
        h   *= dela
        if abs(dela-1.0) <= tolf:
            return exp(-x + a*log(x) - gln) * h

    raise ConvergenceError('incomplete gamma continued fraction', itmax, \
                                       exp(-x + a*log(x) - gln) * h)

# end of _gcf

# ------------------------------------------------------------------------------

def _gammpapprox(a, x, lower):
    # P (lower=True) or Q (lower=False) by quadrature for large a. The
    # integrand is negligible outside some ten standard deviations from
    # its peak at a - 1, which sets the far integration limit xu

    a1     = a - 1.0
    lna1   = log(a1)
    sqrta1 = sqrt(a1)
    gln    = lngamma(a)
    if x > a1: xu = max(a1 + 11.5*sqrta1, x + 6.0*sqrta1)
    else:      xu = max(0.0, min(a1 - 7.5*sqrta1, x - 5.0*sqrta1))

    integrand = lambda t: exp(-(t-a1) + a1*(log(t)-lna1))
    ans = qgaussleg(integrand, x, xu) * exp(a1*(lna1-1.0) - gln)

    if lower:
        if ans > 0.0: return 1.0 - ans
        else:         return -ans
    else:
        if ans >= 0.0: return ans
        else:          return 1.0 + ans

# end of _gammpapprox

# ------------------------------------------------------------------------------

def _invgammplower(a, p, x, gln, tolf, itmax, gtolf, gitmax):
    # Newton-Raphson on ln(P(a, x)) = ln(p) in the variable y = ln(x). ln(P)
    # is concave in y, so after the first step every iterate stays below the
    # root and the iterates increase towards it. Steps are capped at ten
    # units of ln(x), which keeps exp from overflowing on poor guesses

    lnp = log(p)
    for k in range(0, itmax):
        if x <= 0.0: return 0.0   # The root has underflowed
        pcur = incgammap(a, x, gtolf, gitmax)
        if pcur <= 0.0:
            x *= 2.0               # P has underflowed: far below the root
            continue
        lnx  = log(x)
        lnpc = log(pcur)
        dlnp = exp(a*lnx - x - gln - lnpc)   # d ln(P) / d ln(x) = x*density/P
        if dlnp == 0.0:
            x *= 0.5               # P is flat: far above the root
            continue
        dy = kept_within(-10.0, (lnpc-lnp)/dlnp, 10.0)
        x *= exp(-dy)
        if abs(dy) < tolf: return x

    raise ConvergenceError('invincgammap', itmax, x)

# end of _invgammplower

# ------------------------------------------------------------------------------
