# misclib/errwarn.py
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
Warnings and errors. There are two kinds of error: an invalid input parameter 
(the caller supplied bad input - raised before anything is computed) and a 
convergence failure (an iterative procedure ran out of iterations before it 
met its tolerance). Neither is ever downgraded to a default return value. 
"""
# ------------------------------------------------------------------------------

def warn(string):     # Does not belong to the Error class!
    """
    Prints out a warning to stdout consisting of the user-provided input
    string preceded by the text "UserWarning: " and closed with a "!".
    DOES NOT FORMALLY BELONG TO THE Error CLASS! 
    
    'warn' is used for adjustments that let a computation proceed (a silly 
    tolerance that is replaced by a sensible one, for instance) - never for 
    errors.
    """

    warning  =  "\nUserWarning: " + string + "!"
    print(warning)

# end of warn

# ------------------------------------------------------------------------------

class Error(Exception):
    """
    The class inherits from the built-in Exception class and makes it possible
    to raise an Error without alluding to a built-in exception type by: 
    raise Error(string)
    """
# ------------------------------------------------------------------------------

    def __init__(self, string):
        """
        'string' is some user-provided description of the possible error. 
        """

        Exception.__init__(self, string)
        self.string = string

    # end of __init__

# ------------------------------------------------------------------------------

    def __str__(self):

        return self.string

    # end of __str__

# ------------------------------------------------------------------------------

# end of Error

# ------------------------------------------------------------------------------

class InvalidParameterError(Error, ValueError):
    """
    Raised when a precondition is violated: non-positive nu or standard 
    deviation, an empty or reversed range, a probability or threshold out 
    of its interval, a non-positive requested length etc.
    """

# end of InvalidParameterError

# ------------------------------------------------------------------------------

class ConvergenceError(Error, ArithmeticError):
    """
    Raised when an iterative procedure has used up its maximum number of 
    iterations without meeting its tolerance. 'caller' is the name of the 
    procedure, 'itmax' the iteration cap and 'estimate' the last estimate 
    obtained (for diagnostics only - it is NOT to be taken as a result).
    """
# ------------------------------------------------------------------------------

    def __init__(self, caller, itmax, estimate=None):

        string  = caller + " has not converged in " + str(itmax) + \
                                                        " iterations"
        if estimate is not None:
            string += " (last estimate " + repr(estimate) + ")"
        Error.__init__(self, string)

        self.caller   = caller
        self.itmax    = itmax
        self.estimate = estimate

    # end of __init__

# ------------------------------------------------------------------------------

# end of ConvergenceError

# ------------------------------------------------------------------------------

def checkpar(condition, string):
    """
    Raises an InvalidParameterError with the text 'string' unless 'condition' 
    holds. Used in place of assert for checking input parameters (asserts 
    go away when Python is run with -O, input checks must not).
    """

    if not condition:
        raise InvalidParameterError(string)

# end of checkpar

# ------------------------------------------------------------------------------
