import pytest, math, warnings
import numpy as np
import bernoulli as bn
from bernoulli.properties.fluids import water_density_and_viscosity, oil_density_and_viscosity


def test_water_maximum_density_at_4_degrees():
    water = bn.fluid_properties("water", T = 4)
    assert math.isclose(water.rho, 1000, abs_tol = 0.1)
    assert water.rho > bn.fluid_properties("water", T = 0).rho
    assert water.rho > bn.fluid_properties("water", T = 10).rho

def test_water_density_decreases_with_temperature():
    rhos = [bn.fluid_properties("water", T = T).rho for T in (4, 10, 20, 40, 60, 80, 100)]
    assert all(a > b for a, b in zip(rhos, rhos[1:]))

def test_water_density_floor():
    assert bn.fluid_properties("water", T = 100).rho == 958.4
    with pytest.warns(bn.RangeWarning):
        assert bn.fluid_properties("water", T = 150).rho == 958.4

def test_water_at_20_degrees():
    water = bn.fluid_properties("water", T = 20)
    assert water.name == "Pure water"
    assert water.fluid_type == "water"
    assert math.isclose(water.rho, 995.26, abs_tol = 1e-9)
    assert math.isclose(water.mu, 0.00102, abs_tol = 1e-9)
    assert math.isclose(water.nu, 0.00179 / (1 + 0.674 + 0.0884) / 995.264, rel_tol = 1e-3)
    assert math.isclose(water.gamma, 9763.5, abs_tol = 0.1)

def test_air_ideal_gas():
    air = bn.fluid_properties("air", T = 20)
    assert math.isclose(air.rho, 1.2, abs_tol = 0.005)
    assert math.isclose(air.mu, 1.81e-5, rel_tol = 1e-9)
    assert air.nu == pytest.approx(1.806e-5 / (101325 / (287.05 * 293.15)), rel = 1e-3)
    assert bn.fluid_properties("air", T = 0).rho > air.rho

def test_oil_reference_point():
    oil = bn.fluid_properties("oil", T = 20)
    assert oil.mu == 0.29
    assert oil.rho == 875.0

def test_oil_temperature_correction():
    oil = bn.fluid_properties("oil", T = 40)
    assert math.isclose(oil.rho, 862.75, abs_tol = 1e-9)
    assert math.isclose(oil.mu, 0.144, abs_tol = 1e-9)
    # Floors are reached for very hot oil
    with pytest.warns(bn.RangeWarning):
        hot = bn.fluid_properties("oil", T = 400)
    assert hot.rho == 800.0
    assert hot.mu == 0.01

def test_specific_weight_uses_gravity():
    assert math.isclose(bn.fluid_properties("water", T = 4).gamma, 9809.3, abs_tol = 0.1)
    moon = bn.fluid_properties("water", T = 4, g = 1.62)
    assert moon.g == 1.62
    assert math.isclose(moon.gamma, round(999.926 * 1.62, 1), abs_tol = 0.1)

def test_out_of_range_temperature_warns_but_computes():
    with pytest.warns(bn.RangeWarning, match = "air"):
        air = bn.fluid_properties("air", T = -30)
    assert air.rho > 0
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        bn.fluid_properties("air", T = -20)
        bn.fluid_properties("oil", T = 100)

def test_unsupported_fluid():
    with pytest.raises(bn.UnsupportedFluid, match = "water, air, oil"):
        bn.fluid_properties("mercury")

@pytest.mark.parametrize("T", ["20", [20, 30], None, True])
def test_temperature_must_be_a_single_number(T):
    with pytest.raises(bn.InvalidArgument):
        bn.fluid_properties("water", T = T)

@pytest.mark.parametrize("g", [0, -9.81])
def test_gravity_must_be_positive(g):
    with pytest.raises(bn.InvalidArgument):
        bn.fluid_properties("water", T = 20, g = g)

def test_numpy_scalars_are_accepted():
    assert bn.fluid_properties(bn.FluidType.OIL, T = np.float64(20.0)).mu == 0.29

def test_print_format():
    text = str(bn.fluid_properties("water", T = 80))
    assert text.startswith("Fluid properties: Pure water")
    assert "964.60 kg/m³" in text

def test_correlations_with_overridden_constants():
    with bn.override(bn.OIL, mu_ref = 0.3, rho_ref = 880.0) as oil:
        rho, mu = oil_density_and_viscosity(20, oil)
    assert rho == 880.0 and mu == 0.3
    assert bn.OIL.mu_ref == 0.29
    with bn.override(bn.WATER, rho_min = 970.0) as water:
        rho, _ = water_density_and_viscosity(90, water)
    assert rho == 970.0

def test_properties_table():
    table = bn.fluid_properties_table("water", [4, 20, 60])
    assert list(table.index) == [4.0, 20.0, 60.0]
    assert {"rho", "mu", "nu", "gamma", "fluid_type"} <= set(table.columns)
    assert table.loc[60.0, "rho"] == bn.fluid_properties("water", T = 60).rho

def test_water_fit_boundaries():
    # The fit restarts from 998.2 kg/m3 just above 20°C and reaches the 958.4 floor near 86.5°C
    rho = lambda T: bn.fluid_properties("water", T = T).rho
    assert rho(20.5) > rho(20)
    assert rho(87) == rho(95) == rho(100) == 958.4
    for segment in (np.arange(4.5, 20.01, 0.5), np.arange(20.5, 86.01, 0.5)):
        rhos = [rho(T) for T in segment]
        assert all(a > b for a, b in zip(rhos, rhos[1:]))

def test_water_density_from_overridden_fit():
    with bn.override(bn.WATER, rho_break = 1000.0) as water:
        rho, _ = water_density_and_viscosity(30, water)
    assert math.isclose(rho, 1000.0 - 2.0 - 0.6)
    with bn.override(bn.WATER, T_rho_max = 10.0) as water:
        rho, _ = water_density_and_viscosity(8, water)
    assert math.isclose(rho, 999.87 + 0.032 * 8 - 0.0045 * 64)

@pytest.mark.parametrize("T", [-273.15, -300])
def test_air_below_absolute_zero(T):
    with pytest.raises(bn.InvalidArgument, match = "absolute zero"):
        bn.fluid_properties("air", T = T)

@pytest.mark.parametrize("T", [float("nan"), float("inf")])
def test_temperature_must_be_finite(T):
    with pytest.raises(bn.InvalidArgument):
        bn.fluid_properties("water", T = T)

def test_gravity_must_be_finite():
    with pytest.raises(bn.InvalidArgument):
        bn.fluid_properties("water", T = 20, g = float("nan"))

def test_empty_properties_table():
    table = bn.fluid_properties_table("oil", [])
    assert table.empty
    assert table.index.name == "T"
    assert {"rho", "mu", "nu", "gamma", "fluid_type"} <= set(table.columns)

def test_properties_table_validates_temperatures():
    with pytest.raises(bn.InvalidArgument):
        bn.fluid_properties_table("water", [20, True])
    assert len(bn.fluid_properties_table("water", 20)) == 1

def test_range_warning_points_at_the_caller():
    with pytest.warns(bn.RangeWarning) as record:
        bn.fluid_properties("water", T = 120)
    assert record[0].filename == __file__
    with pytest.warns(bn.RangeWarning) as record:
        oil_density_and_viscosity(150)
    assert record[0].filename == __file__
