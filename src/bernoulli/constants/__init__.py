# src/bernoulli/constants/__init__.py
from .thermo import THERMO
from .fluids import WATER, AIR, OIL
from .base import override

__all__ = ["THERMO", "WATER", "AIR", "OIL", "override"]
