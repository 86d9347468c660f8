import numpy as np
from bernoulli.constants import THERMO


def C2K(T):
    return T + THERMO.T0

def K2C(T):
    return T - THERMO.T0

def Pa2kPa(p):
    return p / 1000.0


def as_array(value, name: str):
    """
    Converts a scalar or array-like input into a float numpy array.
    The reason for this function is to have the formulas work elementwise on sweeps (e.g. several heights at once)
    while still accepting plain floats
    """
    if value is None:
        raise InvalidArgument(f'The parameter {name} must be provided')
    try:
        return np.asarray(value, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidArgument(f'The parameter {name} must be numeric. {value!r} was provided') from err

def to_output(value):
    # 0-d arrays are given back as plain floats
    if np.ndim(value) == 0:
        return float(value)
    return value

def checked_sqrt(radicand, what: str):
    if np.any(radicand < 0):
        raise ImpossibleSolution(f'Imaginary solution for {what}: the term under the square root is negative ({np.min(radicand):.6g}). Check the input parameters')
    return np.sqrt(radicand)

def require_positive(value, name: str):
    # NaN and infinities are rejected as well
    values = as_array(value, name)
    if not np.all(np.isfinite(values)) or np.any(values <= 0):
        raise InvalidArgument(f'The parameter {name} must be positive and finite. {value!r} was provided')


class BernoulliError(Exception):
    pass

class InvalidArgument(BernoulliError, ValueError):
    pass

class ImpossibleSolution(BernoulliError, ValueError):
    pass

class UnsupportedFluid(BernoulliError, ValueError):
    pass

class RangeWarning(UserWarning):
    pass

class IncompressibilityWarning(UserWarning):
    pass
