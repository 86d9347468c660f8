from __future__ import annotations
from dataclasses import dataclass, asdict
from enum import Enum
import logging
import numpy as np
import pandas as pd
from bernoulli.constants import THERMO
from bernoulli.helpers import InvalidArgument, as_array, to_output, checked_sqrt, require_positive, Pa2kPa

logger = logging.getLogger(__name__)


class SolveFor(str, Enum):
    P1 = "P1"
    v1 = "v1"
    h1 = "h1"
    P2 = "P2"
    v2 = "v2"
    h2 = "h2"


@dataclass(frozen=True)
class BernoulliTerms:
    """Terms of the Bernoulli equation at one point, all per unit volume [Pa]"""
    pressure_term: float
    velocity_term: float
    elevation_term: float
    total_energy: float

    def as_dict(self):
        return asdict(self)

    def percentages(self):
        # Share of each component over the total energy [%]
        if np.any(np.asarray(self.total_energy) == 0):
            raise InvalidArgument('The total energy is zero, the share of each term is not defined')
        return {
            'pressure_term': self.pressure_term / self.total_energy * 100,
            'velocity_term': self.velocity_term / self.total_energy * 100,
            'elevation_term': self.elevation_term / self.total_energy * 100,
        }

    def to_dataframe(self):
        values = [self.pressure_term, self.velocity_term, self.elevation_term, self.total_energy]
        return pd.DataFrame({
            'term': ['Pressure', 'Velocity', 'Elevation', 'Total'],
            'value_Pa': values,
            'value_kPa': [Pa2kPa(value) for value in values],
            'type': ['Component', 'Component', 'Component', 'Total'],
        })


def bernoulli_standard(P1=None, v1=None, h1=None,
                       P2=None, v2=None, h2=None,
                       rho=None, g: float = THERMO.g, solve_for: str = "P2"):
    """
    Solves the Bernoulli equation for a perfect incompressible fluid between two points of a streamline:

        P1 + 0.5 rho v1^2 + rho g h1 = P2 + 0.5 rho v2^2 + rho g h2

    Exactly one of the six position variables must be left as None, and it must be the one named by solve_for.
    Head losses are not taken into account.

    Parameters
    ----------
    P1, P2 : float, optional
        Pressure [Pa] at points 1 and 2
    v1, v2 : float, optional
        Velocity [m/s] at points 1 and 2
    h1, h2 : float, optional
        Height [m] at points 1 and 2
    rho : float
        Fluid density [kg/m3]. Must be positive
    g : float, optional
        Gravitational acceleration [m/s2]. Defaults to 9.81
    solve_for : str, optional
        Variable to solve for, one of "P1", "v1", "h1", "P2", "v2", "h2". Defaults to "P2"

    Returns
    -------
    float or numpy.ndarray
        Value of the unknown variable [Pa, m/s or m]

    Raises
    ------
    InvalidArgument
        If the number of unknowns is not exactly one, if solve_for does not name the unknown, or if rho or g are not positive
    ImpossibleSolution
        If a velocity is requested and the term under the square root is negative
    """
    params = {'P1': P1, 'v1': v1, 'h1': h1, 'P2': P2, 'v2': v2, 'h2': h2}
    unknowns = [name for name, value in params.items() if value is None]
    if len(unknowns) != 1:
        raise InvalidArgument(f'Exactly one parameter among P1, v1, h1, P2, v2, h2 must be None (the variable to solve for), while {len(unknowns)} were provided as None')
    try:
        target = SolveFor(solve_for)
    except ValueError:
        raise InvalidArgument(f'Variable to solve for not recognized: {solve_for!r}. It should be one of {", ".join(s.value for s in SolveFor)}') from None
    if unknowns[0] != target.value:
        raise InvalidArgument(f'The variable to solve for is {target.value}, but the parameter left as None is {unknowns[0]}')
    require_positive(rho, 'rho')
    require_positive(g, 'g')
    known = {name: as_array(value, name) for name, value in params.items() if value is not None}
    rho, g = as_array(rho, 'rho'), as_array(g, 'g')
    logger.debug('Solving the Bernoulli equation for %s with rho=%s, g=%s', target.value, rho, g)

    match target:
        case SolveFor.P1:
            result = known['P2'] + 0.5 * rho * (known['v2']**2 - known['v1']**2) + rho * g * (known['h2'] - known['h1'])
        case SolveFor.P2:
            result = known['P1'] + 0.5 * rho * (known['v1']**2 - known['v2']**2) + rho * g * (known['h1'] - known['h2'])
        case SolveFor.v1:
            term = (known['P2'] - known['P1'] + 0.5 * rho * known['v2']**2 + rho * g * (known['h2'] - known['h1'])) / (0.5 * rho)
            result = checked_sqrt(term, 'v1')
        case SolveFor.v2:
            term = (known['P1'] - known['P2'] + 0.5 * rho * known['v1']**2 + rho * g * (known['h1'] - known['h2'])) / (0.5 * rho)
            result = checked_sqrt(term, 'v2')
        case SolveFor.h1:
            result = known['h2'] + (known['P2'] - known['P1'] + 0.5 * rho * (known['v2']**2 - known['v1']**2)) / (rho * g)
        case SolveFor.h2:
            result = known['h1'] + (known['P1'] - known['P2'] + 0.5 * rho * (known['v1']**2 - known['v2']**2)) / (rho * g)
    return to_output(result)


def bernoulli_terms(P, v, h, rho, g: float = THERMO.g) -> BernoulliTerms:
    """
    Calculates separately each term of the Bernoulli equation and the total energy per unit volume

    Parameters
    ----------
    P : float
        Static pressure [Pa]
    v : float
        Flow velocity [m/s]
    h : float
        Elevation relative to a reference [m]
    rho : float
        Fluid density [kg/m3]
    g : float, optional
        Gravitational acceleration [m/s2]. Defaults to 9.81
    """
    pressure_term = to_output(as_array(P, 'P'))
    velocity_term = to_output(0.5 * rho * as_array(v, 'v')**2)
    elevation_term = to_output(rho * g * as_array(h, 'h'))
    return BernoulliTerms(pressure_term=pressure_term,
                          velocity_term=velocity_term,
                          elevation_term=elevation_term,
                          total_energy=pressure_term + velocity_term + elevation_term)


def energy_balance(P1, v1, h1, P2, v2, h2, rho, g: float = THERMO.g):
    # Difference E1 - E2 of the total energy per unit volume [Pa]. Zero if energy is conserved
    return bernoulli_terms(P1, v1, h1, rho, g).total_energy - bernoulli_terms(P2, v2, h2, rho, g).total_energy
