from __future__ import annotations
from dataclasses import dataclass
import math, warnings
import numpy as np
from bernoulli.constants import AIR, WATER, OIL
from bernoulli.helpers import InvalidArgument, IncompressibilityWarning, as_array, require_positive, C2K
from bernoulli.properties.fluids import FluidType, _fluid_type

MACH_LIMIT = 0.3


@dataclass(frozen=True)
class BernoulliCheck:
    mach: float             # largest Mach number of the flow [-]
    speed_of_sound: float   # [m/s]
    incompressible: bool

    def __bool__(self):
        return self.incompressible


def speed_of_sound(fluid: str = "air", T: float = 20) -> float:
    # Ideal gas for air, tabulated value at 20°C for the liquids
    match _fluid_type(fluid):
        case FluidType.AIR:
            T_K = C2K(T)
            if T_K <= 0:
                raise InvalidArgument(f'The temperature must be above absolute zero. {T}°C was provided')
            return math.sqrt(AIR.kappa * AIR.R * T_K)
        case FluidType.WATER:
            return WATER.c
        case FluidType.OIL:
            return OIL.c


def validate_bernoulli(v, rho, fluid: str = "water", T: float = 20, c: float | None = None, mach_limit: float = MACH_LIMIT) -> BernoulliCheck:
    """
    Checks the assumptions behind the Bernoulli equation for a given flow: a positive density and an
    incompressible flow (Mach number below mach_limit). A violated incompressibility assumption is not fatal:
    an IncompressibilityWarning is emitted and the result reports it

    Parameters
    ----------
    v : float or array-like
        Flow velocity [m/s]. The largest absolute value is used
    rho : float
        Fluid density [kg/m3]. Must be positive
    fluid : str, optional
        Fluid used to estimate the speed of sound if c is not given. Defaults to "water"
    T : float, optional
        Temperature [°C] used for the speed of sound in air. Defaults to 20
    c : float, optional
        Speed of sound [m/s]. Overrides the estimate from fluid and T
    mach_limit : float, optional
        Largest Mach number for which the flow is considered incompressible. Defaults to 0.3
    """
    require_positive(rho, 'rho')
    v = as_array(v, 'v')
    if not np.all(np.isfinite(v)):
        raise InvalidArgument(f'The velocity must be finite. {v} was provided')
    if c is None:
        c = speed_of_sound(fluid, T)
    require_positive(c, 'c')
    mach = float(np.max(np.abs(v))) / float(c) if v.size else 0.0
    incompressible = mach < mach_limit
    if not incompressible:
        warnings.warn(f'Mach number {mach:.3f} is not below {mach_limit}: the flow cannot be considered incompressible and the Bernoulli equation is not accurate', IncompressibilityWarning, stacklevel=2)
    return BernoulliCheck(mach=mach, speed_of_sound=float(c), incompressible=incompressible)
