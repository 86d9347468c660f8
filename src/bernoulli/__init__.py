# Re-export a stable public API
from .helpers import BernoulliError, InvalidArgument, ImpossibleSolution, UnsupportedFluid, RangeWarning, IncompressibilityWarning
from .constants import THERMO, WATER, AIR, OIL, override
from .core.bernoulli import SolveFor, BernoulliTerms, bernoulli_standard, bernoulli_terms, energy_balance
from .core.applications import velocity_torricelli, pressure_venturi, velocity_pitot, flow_rate_bernoulli
from .properties.fluids import FluidType, FluidProperties, fluid_properties, fluid_properties_table
from .core.validation import BernoulliCheck, speed_of_sound, validate_bernoulli
from .viz.plots import plot_bernoulli_terms, plot_bernoulli_comparison, plot_pressure_velocity

__all__ = [
    "BernoulliError", "InvalidArgument", "ImpossibleSolution", "UnsupportedFluid", "RangeWarning", "IncompressibilityWarning",
    "THERMO", "WATER", "AIR", "OIL", "override",
    "SolveFor", "BernoulliTerms", "bernoulli_standard", "bernoulli_terms", "energy_balance",
    "velocity_torricelli", "pressure_venturi", "velocity_pitot", "flow_rate_bernoulli",
    "FluidType", "FluidProperties", "fluid_properties", "fluid_properties_table",
    "BernoulliCheck", "speed_of_sound", "validate_bernoulli",
    "plot_bernoulli_terms", "plot_bernoulli_comparison", "plot_pressure_velocity",
]
