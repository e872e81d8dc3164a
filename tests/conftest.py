"""
Pytest configuration and fixtures for the AGMD physics tests.
"""

import pytest

from membrane_distillation.agmd.config import MembraneModule
from membrane_distillation.agmd.properties import BrineProperties


@pytest.fixture
def bulk_brine():
    """Seawater-like brine snapshot near 60 °C."""
    return BrineProperties(
        dyn_viscosity=4.9e-4,
        thermal_conductivity=0.65,
        prandtl=3.1,
        mass_diffusivity=2.9e-9,
        schmidt=170.0,
        density=1010.0,
        specific_heat=4000.0,
    )


@pytest.fixture
def wall_brine():
    """Brine snapshot at a slightly cooler membrane wall."""
    return BrineProperties(
        dyn_viscosity=5.2e-4,
        thermal_conductivity=0.64,
        prandtl=3.4,
        mass_diffusivity=2.7e-9,
        schmidt=190.0,
    )


@pytest.fixture
def reference_membrane():
    """Membrane and gap geometry of the reference flux scenario."""
    return dict(
        membrane_porosity=0.8,
        membrane_tortuosity=1.5,
        membrane_thickness=100e-6,
        pore_diameter=0.2e-6,
        air_gap_thickness=2e-3,
    )


@pytest.fixture
def module():
    """Default module at atmospheric gap pressure."""
    return MembraneModule(vacuum_pressure=0.0)
