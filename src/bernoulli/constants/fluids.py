# src/bernoulli/constants/fluids.py
from __future__ import annotations
from dataclasses import dataclass
from .base import FrozenNamespace
from .thermo import THERMO

@dataclass(frozen=True)
class FluidConstants(FrozenNamespace):
    name: str = ""
    T_min: float = 0.0      # recommended temperature range [°C]
    T_max: float = 100.0
    c: float = 0.0          # speed of sound at 20°C [m·s⁻¹]

    def in_range(self, T: float) -> bool:
        return self.T_min <= T <= self.T_max

@dataclass(frozen=True)
class Water(FluidConstants):
    # Pure water, piecewise quadratic fit of the density with a maximum at 4°C
    name: str = "Pure water"
    T_min: float = 0.0
    T_max: float = 100.0
    c: float = 1481.0
    # Below T_rho_max: rho = rho_0 + rho_0_a T - rho_0_b T²
    rho_0: float = 999.87
    rho_0_a: float = 0.032
    rho_0_b: float = 0.0045
    # Above each breakpoint T_i: rho = rho_i - rho_a (T - T_i) - rho_b (T - T_i)²
    T_rho_max: float = 4.0
    rho_max: float = 1000.0
    T_break: float = 20.0
    rho_break: float = 998.2
    rho_a: float = 0.2
    rho_b: float = 0.006
    rho_min: float = 958.4   # density at 100°C [kg·m⁻³], used as floor
    mu_0: float = 0.00179    # dynamic viscosity at 0°C [Pa·s]
    mu_a: float = 0.0337     # [K⁻¹]
    mu_b: float = 0.000221   # [K⁻²]

@dataclass(frozen=True)
class Air(FluidConstants):
    # Dry air at atmospheric pressure, ideal gas
    name: str = "Dry air"
    T_min: float = -20.0
    T_max: float = 100.0
    P: float = THERMO.P_atm          # [Pa]
    R: float = THERMO.R_air          # [J·kg⁻¹·K⁻¹]
    kappa: float = 1.4               # heat capacity ratio [-]
    mu_0: float = 1.72e-5            # dynamic viscosity at 0°C [Pa·s]
    mu_slope: float = 0.0025         # linear correction [K⁻¹]

@dataclass(frozen=True)
class Oil(FluidConstants):
    # SAE 30 oil, reference state at 20°C
    name: str = "SAE 30 oil"
    T_min: float = 0.0
    T_max: float = 100.0
    c: float = 1450.0
    T_ref: float = 20.0
    rho_ref: float = 875.0   # [kg·m⁻³]
    alpha: float = 0.0007    # thermal expansion coefficient [K⁻¹]
    rho_min: float = 800.0
    mu_ref: float = 0.29     # [Pa·s]
    mu_decay: float = 0.035  # exponential decay rate [K⁻¹]
    mu_min: float = 0.01

WATER = Water()
AIR = Air()
OIL = Oil()
