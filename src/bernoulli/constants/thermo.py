# src/bernoulli/constants/thermo.py
from __future__ import annotations
from dataclasses import dataclass
from .base import FrozenNamespace

@dataclass(frozen=True)
class Thermo(FrozenNamespace):
    g: float = 9.81                  # Gravitational acceleration used throughout [m·s⁻²]
    P_atm: float = 101325.0          # Standard atmospheric pressure [Pa]
    R_air: float = 287.05            # Specific gas constant of dry air [J·kg⁻¹·K⁻¹]
    T0: float = 273.15               # 0 °C in kelvin [K]

THERMO = Thermo()
