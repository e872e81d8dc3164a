"""
Tests for the optional domain-precondition layer.
"""

import pytest

from membrane_distillation.agmd.config import MembraneModule
from membrane_distillation.agmd.exceptions import AGMDError, DomainError
from membrane_distillation.agmd.membrane import mass_flux, membrane_conductivity
from membrane_distillation.agmd.channel import channel_heat_transf_coef, channel_mass_transf_coef
from membrane_distillation.agmd.properties import BrineProperties, MoistAirProperties
from membrane_distillation.agmd.validation import (
    check_fraction,
    check_module,
    check_positive,
    checked_channel_heat_transf_coef,
    checked_channel_mass_transf_coef,
    checked_mass_flux,
    checked_membrane_conductivity,
    checked_saltwater_concentration,
)

GEOMETRY = dict(channel_height=2e-3, channel_width=0.5, number_channels=6, spacer_porosity=0.85)
TEMPERATURES = dict(temperature_membrane=60.0, temperature_gap=25.0,
                    feed_membrane_pressure=19946.0, film_boundary_pressure=3169.9)


class TestChecks:
    """Test elementary checks."""

    def test_domain_error_hierarchy(self):
        assert issubclass(DomainError, AGMDError)
        assert issubclass(DomainError, ValueError)

    @pytest.mark.parametrize("value", [0.0, -1.0, float("nan"), float("inf")])
    def test_check_positive_rejects(self, value):
        with pytest.raises(DomainError):
            check_positive("x", value)

    @pytest.mark.parametrize("value", [0.0, 1.0, 1.2, -0.1, float("nan")])
    def test_check_fraction_rejects(self, value):
        with pytest.raises(DomainError):
            check_fraction("porosity", value)

    def test_check_fraction_accepts(self):
        check_fraction("porosity", 0.8)

    def test_default_module_is_valid(self):
        check_module(MembraneModule())

    @pytest.mark.parametrize("override", [
        {"membrane_porosity": 1.0},
        {"spacer_porosity": 0.0},
        {"number_channels": 0},
        {"membrane_thickness": -1e-4},
        {"vacuum_pressure": -200000.0},
    ])
    def test_invalid_module(self, override):
        with pytest.raises(DomainError):
            check_module(MembraneModule(**override))


class TestCheckedWrappers:
    """Test that wrappers validate and then delegate."""

    def test_mass_flux_delegates(self, reference_membrane):
        assert checked_mass_flux(**reference_membrane, **TEMPERATURES) == \
            mass_flux(**reference_membrane, **TEMPERATURES)

    @pytest.mark.parametrize("override", [
        {"membrane_porosity": 1.2},
        {"membrane_porosity": 0.0},
        {"membrane_tortuosity": 0.0},
        {"pore_diameter": -0.2e-6},
        {"air_gap_thickness": 0.0},
    ])
    def test_mass_flux_rejects_geometry(self, reference_membrane, override):
        with pytest.raises(DomainError):
            checked_mass_flux(**{**reference_membrane, **override}, **TEMPERATURES)

    def test_mass_flux_rejects_temperature(self, reference_membrane):
        with pytest.raises(DomainError):
            checked_mass_flux(**reference_membrane, **{**TEMPERATURES, "temperature_gap": -300.0})

    def test_mass_flux_rejects_vacuum(self, reference_membrane):
        with pytest.raises(DomainError):
            checked_mass_flux(**reference_membrane, **TEMPERATURES, vacuum_pressure=-110000.0)

    def test_membrane_conductivity(self):
        air = MoistAirProperties(0.027)
        assert checked_membrane_conductivity(air, 0.25, 0.8) == membrane_conductivity(air, 0.25, 0.8)
        with pytest.raises(DomainError):
            checked_membrane_conductivity(0.027, 0.25, 1.0)
        with pytest.raises(DomainError):
            checked_membrane_conductivity(0.0, 0.25, 0.8)

    def test_channel_coefficients(self, bulk_brine, wall_brine):
        assert checked_channel_heat_transf_coef(bulk_brine, wall_brine, 0.08, **GEOMETRY) == \
            channel_heat_transf_coef(bulk_brine, wall_brine, 0.08, **GEOMETRY)
        assert checked_channel_mass_transf_coef(bulk_brine, wall_brine, 0.08, **GEOMETRY) == \
            channel_mass_transf_coef(bulk_brine, wall_brine, 0.08, **GEOMETRY)

    def test_channel_rejects_bad_properties(self, wall_brine):
        bad = BrineProperties(dyn_viscosity=0.0, thermal_conductivity=0.65, prandtl=3.0,
                              mass_diffusivity=2.9e-9, schmidt=170.0)
        with pytest.raises(DomainError, match="dyn_viscosity"):
            checked_channel_heat_transf_coef(bad, wall_brine, 0.08, **GEOMETRY)

    def test_channel_rejects_flow(self, bulk_brine, wall_brine):
        with pytest.raises(DomainError):
            checked_channel_mass_transf_coef(bulk_brine, wall_brine, 0.0, **GEOMETRY)

    def test_saltwater_concentration(self):
        density = lambda T, S: 983.2
        S = checked_saltwater_concentration(2e-5, 60.0, 0.035, 0.0, density_func=density)
        assert S == pytest.approx(0.035)
        with pytest.raises(DomainError):
            checked_saltwater_concentration(2e-5, 60.0, 1.5, 0.0, density_func=density)
        with pytest.raises(DomainError):
            checked_saltwater_concentration(0.0, 60.0, 0.035, 1e-3, density_func=density)
