from __future__ import annotations
import numpy as np
from bernoulli.constants import THERMO
from bernoulli.helpers import InvalidArgument, as_array, to_output, checked_sqrt, require_positive


def velocity_torricelli(h, g: float = THERMO.g, P_atm: float = THERMO.P_atm):
    """
    Outflow velocity through a small orifice according to Torricelli's theorem, v = sqrt(2 g h)
    The tank is assumed open to the atmosphere, so P_atm is accepted for compatibility but does not affect the result

    Parameters
    ----------
    h : float or array-like
        Height [m] of the fluid column above the orifice
    g : float, optional
        Gravitational acceleration [m/s2]. Defaults to 9.81
    P_atm : float, optional
        Atmospheric pressure [Pa]. Defaults to 101325
    """
    h = as_array(h, 'h')
    if np.any(h < 0):
        raise InvalidArgument(f'The height cannot be negative. {to_output(h)} was provided')
    require_positive(g, 'g')
    return to_output(np.sqrt(2 * g * h))


def pressure_venturi(rho, v1, v2):
    """
    Pressure difference P1 - P2 [Pa] between the wide and the narrow section of a Venturi tube.
    A positive value means the pressure drops in the throat
    """
    return to_output(0.5 * as_array(rho, 'rho') * (as_array(v2, 'v2')**2 - as_array(v1, 'v1')**2))


def velocity_pitot(P_total, P_static, rho):
    """
    Flow velocity [m/s] from the stagnation and static pressures measured by a Pitot tube.
    Valid for incompressible flow (Mach < 0.3)
    """
    require_positive(rho, 'rho')
    dP = as_array(P_total, 'P_total') - as_array(P_static, 'P_static')
    return to_output(checked_sqrt(2 * dP / as_array(rho, 'rho'), 'the Pitot velocity'))


def flow_rate_bernoulli(A, P1, P2, rho, h1=0.0, h2=0.0, g: float = THERMO.g):
    """
    Volume flow rate [m3/s] between two sections of a pipe, from the velocity given by the Bernoulli equation:

        Q = A sqrt(2 ((P1 - P2) / rho + g (h1 - h2)))

    Head losses are neglected and the velocity is assumed uniform on the section

    Parameters
    ----------
    A : float
        Cross-section area [m2]
    P1, P2 : float
        Pressure [Pa] at sections 1 and 2
    rho : float
        Fluid density [kg/m3]
    h1, h2 : float, optional
        Elevation [m] of sections 1 and 2. Default to 0
    g : float, optional
        Gravitational acceleration [m/s2]. Defaults to 9.81
    """
    A = as_array(A, 'A')
    if np.any(A < 0):
        raise InvalidArgument(f'The cross-section area cannot be negative. {to_output(A)} was provided')
    require_positive(rho, 'rho')
    require_positive(g, 'g')
    delta_P = as_array(P1, 'P1') - as_array(P2, 'P2')
    delta_h = as_array(h1, 'h1') - as_array(h2, 'h2')
    v = checked_sqrt(2 * (delta_P / as_array(rho, 'rho') + g * delta_h), 'the flow velocity')
    return to_output(A * v)
