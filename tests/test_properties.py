"""
Unit tests for the CoolProp-backed property provider.
"""

import dataclasses

import pytest

from membrane_distillation.agmd.properties import (
    BrineProperties,
    MoistAirProperties,
    brine_properties,
    brine_vapor_pressure,
    make_brine_provider,
    moist_air_properties,
    nacl_diffusivity,
    saltwater_density,
    saturation_pressure,
)


class TestBrineProperties:
    """Test brine property snapshots."""

    def test_pure_water_at_25C(self):
        props = brine_properties(25.0, 0.0)
        assert props.dyn_viscosity == pytest.approx(0.890e-3, rel=0.02)
        assert props.thermal_conductivity == pytest.approx(0.607, rel=0.02)
        assert props.density == pytest.approx(997.0, rel=0.005)
        assert 5.5 < props.prandtl < 6.8

    def test_salinity_raises_density_and_viscosity(self):
        fresh = brine_properties(60.0, 0.0)
        salty = brine_properties(60.0, 0.07)
        assert salty.density > fresh.density
        assert salty.dyn_viscosity > fresh.dyn_viscosity

    def test_schmidt_consistent(self):
        props = brine_properties(60.0, 0.035)
        assert props.schmidt == pytest.approx(props.dyn_viscosity/(props.density*props.mass_diffusivity))
        assert 100.0 < props.schmidt < 1500.0

    def test_snapshot_is_immutable(self):
        props = brine_properties(40.0, 0.035)
        with pytest.raises(dataclasses.FrozenInstanceError):
            props.prandtl = 1.0

    def test_provider_factory(self):
        props = make_brine_provider()
        assert props(50.0, 0.035) == brine_properties(50.0, 0.035)
        assert isinstance(props(50.0, 0.035), BrineProperties)


class TestDensityAndDiffusivity:
    """Test seawater density and NaCl diffusivity."""

    def test_seawater_density(self):
        assert 1020.0 < saltwater_density(25.0, 0.035) < 1027.0

    def test_zero_salinity_is_pure_water(self):
        assert saltwater_density(60.0, 0.0) == pytest.approx(983.2, rel=0.002)

    def test_diffusivity_reference_point(self):
        assert nacl_diffusivity(25.0, 0.890e-3) == pytest.approx(1.61e-9)

    def test_diffusivity_increases_with_temperature(self):
        hot = brine_properties(70.0, 0.035)
        cold = brine_properties(20.0, 0.035)
        assert hot.mass_diffusivity > cold.mass_diffusivity


class TestVapourPressure:
    """Test saturation and brine vapour pressures."""

    def test_saturation_pressure_60C(self):
        assert saturation_pressure(60.0) == pytest.approx(19946.0, rel=0.01)

    def test_brine_lowers_vapour_pressure(self):
        p_w = saturation_pressure(60.0)
        p_b = brine_vapor_pressure(60.0, 0.035)
        assert 0.97*p_w < p_b < p_w

    def test_fresh_water_vapour_pressure(self):
        assert brine_vapor_pressure(60.0, 0.0) == pytest.approx(saturation_pressure(60.0))


class TestMoistAir:
    """Test pore air properties."""

    def test_conductivity_range(self):
        air = moist_air_properties(40.0)
        assert isinstance(air, MoistAirProperties)
        assert 0.02 < air.thermal_conductivity < 0.04
