from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from enum import Enum
from numbers import Real
from typing import Iterable
import logging, math, warnings
import numpy as np
import pandas as pd
from bernoulli.constants import THERMO, WATER, AIR, OIL
from bernoulli.constants.fluids import Water, Air, Oil
from bernoulli.helpers import InvalidArgument, UnsupportedFluid, RangeWarning, C2K, require_positive

logger = logging.getLogger(__name__)


class FluidType(str, Enum):
    WATER = "water"
    AIR = "air"
    OIL = "oil"


@dataclass(frozen=True)
class FluidProperties:
    name: str
    rho: float          # density [kg/m3]
    mu: float           # dynamic viscosity [Pa s]
    nu: float           # kinematic viscosity [m2/s]
    gamma: float        # specific weight [N/m3]
    T: float            # temperature [°C]
    fluid_type: str
    g: float = THERMO.g

    def as_dict(self):
        return asdict(self)

    def __str__(self):
        line = "=" * (len(self.name) + 21)
        return "\n".join([
            f"Fluid properties: {self.name}",
            line,
            f"Temperature            : {self.T:6.1f} °C",
            f"Density (rho)          : {self.rho:6.2f} kg/m³",
            f"Dynamic viscosity (mu) : {self.mu:6.2e} Pa·s",
            f"Kinematic visc. (nu)   : {self.nu:6.2e} m²/s",
            f"Specific weight (gamma): {self.gamma:6.1f} N/m³",
            line,
        ])


def _signif(x: float, digits: int) -> float:
    if x == 0 or not math.isfinite(x):
        return x
    return round(x, digits - 1 - int(math.floor(math.log10(abs(x)))))


def _check_range(T: float, constants, stacklevel: int) -> None:
    if not constants.in_range(T):
        warnings.warn(f'Temperature {T}°C is outside the recommended range for {constants.name.lower()} ({constants.T_min:g} to {constants.T_max:g}°C)', RangeWarning, stacklevel=stacklevel)


def water_density_and_viscosity(T: float, constants: Water = WATER, stacklevel: int = 2):
    """
    Density [kg/m3] and dynamic viscosity [Pa s] of pure water.
    The density follows a piecewise quadratic fit with its maximum at 4°C, and is bounded below by its value at 100°C.
    stacklevel is the frame, counted from this function, a RangeWarning is attributed to
    """
    _check_range(T, constants, stacklevel + 1)
    c = constants
    if T <= c.T_rho_max:
        rho = c.rho_0 + c.rho_0_a * T - c.rho_0_b * T**2
    elif T <= c.T_break:
        rho = c.rho_max - c.rho_a * (T - c.T_rho_max) - c.rho_b * (T - c.T_rho_max)**2
    else:
        rho = c.rho_break - c.rho_a * (T - c.T_break) - c.rho_b * (T - c.T_break)**2
    mu = c.mu_0 / (1 + c.mu_a * T + c.mu_b * T**2)
    return max(rho, c.rho_min), mu


def air_density_and_viscosity(T: float, constants: Air = AIR, stacklevel: int = 2):
    """Dry air at constant pressure: ideal gas density and linear viscosity"""
    if C2K(T) <= 0:
        raise InvalidArgument(f'The temperature must be above absolute zero ({-THERMO.T0}°C). {T}°C was provided')
    _check_range(T, constants, stacklevel + 1)
    rho = constants.P / (constants.R * C2K(T))
    mu = constants.mu_0 * (1 + constants.mu_slope * T)
    return rho, mu


def oil_density_and_viscosity(T: float, constants: Oil = OIL, stacklevel: int = 2):
    """SAE 30 oil: linear thermal expansion and exponential viscosity decay around the 20°C reference"""
    _check_range(T, constants, stacklevel + 1)
    rho = constants.rho_ref * (1 - constants.alpha * (T - constants.T_ref))
    mu = constants.mu_ref * math.exp(-constants.mu_decay * (T - constants.T_ref))
    return max(rho, constants.rho_min), max(mu, constants.mu_min)


def _fluid_type(fluid) -> FluidType:
    try:
        return FluidType(fluid)
    except ValueError:
        supported = ", ".join(f.value for f in FluidType)
        raise UnsupportedFluid(f'Fluid {fluid!r} is not supported. Choose among: {supported}') from None


def fluid_properties(fluid: str = "water", T: float = 20, g: float = THERMO.g) -> FluidProperties:
    """
    Main physical properties of water, air or oil, corrected for the temperature

    Parameters
    ----------
    fluid : str, optional
        One of "water" (pure water), "air" (dry air) or "oil" (SAE 30). Defaults to "water"
    T : float, optional
        Fluid temperature [°C]. Recommended ranges are 0-100°C for water and oil, -20-100°C for air. 
        Outside these a RangeWarning is emitted, but the properties are still calculated. Defaults to 20
    g : float, optional
        Gravitational acceleration [m/s2], used for the specific weight. Defaults to 9.81

    Returns
    -------
    FluidProperties
        rho is rounded to 2 decimals, mu to 3 significant digits, nu to 4 significant digits and gamma to 1 decimal
    """
    if isinstance(T, bool) or not isinstance(T, Real) or not math.isfinite(T):
        raise InvalidArgument(f'The temperature must be a single finite numeric value. {T!r} was provided')
    if isinstance(g, bool) or not isinstance(g, Real):
        raise InvalidArgument(f'The gravitational acceleration must be a single numeric value. {g!r} was provided')
    require_positive(g, 'g')
    T = float(T)
    fluid_type = _fluid_type(fluid)
    match fluid_type:
        case FluidType.WATER:
            constants = WATER
            rho, mu = water_density_and_viscosity(T, stacklevel=3)
        case FluidType.AIR:
            constants = AIR
            rho, mu = air_density_and_viscosity(T, stacklevel=3)
        case FluidType.OIL:
            constants = OIL
            rho, mu = oil_density_and_viscosity(T, stacklevel=3)
    logger.debug('Properties of %s at %s°C: rho=%s, mu=%s', fluid_type.value, T, rho, mu)
    return FluidProperties(name=constants.name,
                           rho=round(rho, 2),
                           mu=_signif(mu, 3),
                           nu=_signif(mu / rho, 4),
                           gamma=round(rho * g, 1),
                           T=T,
                           fluid_type=fluid_type.value,
                           g=float(g))


def fluid_properties_table(fluid: str, temperatures: Iterable[float], g: float = THERMO.g) -> pd.DataFrame:
    # One row per temperature, indexed by T. Each temperature is validated as in fluid_properties
    if np.ndim(temperatures) == 0:
        temperatures = [temperatures]
    rows = [fluid_properties(fluid, T, g).as_dict() for T in temperatures]
    columns = [f.name for f in fields(FluidProperties)]
    return pd.DataFrame(rows, columns=columns).set_index('T')
