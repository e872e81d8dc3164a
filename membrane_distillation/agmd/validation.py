"""Domain-precondition checks for the AGMD correlations.

The correlation functions never validate their inputs; invalid values
propagate as NaN or inf. This module is the optional outer layer: each
``checked_*`` wrapper verifies the physical preconditions, raises
``DomainError`` on violation and then delegates to the unconditioned function.
"""

import logging
import math
from typing import Union

from .channel import channel_heat_transf_coef, channel_mass_transf_coef
from .config import MembraneModule
from .constants import ATM_PRESSURE
from .exceptions import DomainError
from .membrane import mass_flux, membrane_conductivity
from .polarization import saltwater_concentration
from .properties import BrineProperties, MoistAirProperties

logger = logging.getLogger(__name__)

# Lowest temperature accepted at the Celsius interface
ABSOLUTE_ZERO_C = -273.15


def check_positive(name: str, value: float) -> None:
    """Raise DomainError unless ``value`` is finite and > 0."""
    if not math.isfinite(value) or value <= 0.0:
        raise DomainError(f"{name} must be positive and finite, got {value}")


def check_fraction(name: str, value: float) -> None:
    """Raise DomainError unless 0 < ``value`` < 1."""
    if not math.isfinite(value) or not 0.0 < value < 1.0:
        raise DomainError(f"{name} must lie in (0, 1), got {value}")


def check_salinity(value: float) -> None:
    """Salinity is a mass fraction in [0, 1)."""
    if not math.isfinite(value) or not 0.0 <= value < 1.0:
        raise DomainError(f"salinity must lie in [0, 1), got {value}")


def check_temperature(name: str, value: float) -> None:
    """Raise DomainError unless a Celsius temperature lies above absolute zero."""
    if not math.isfinite(value) or value <= ABSOLUTE_ZERO_C:
        raise DomainError(f"{name} must be above absolute zero (°C), got {value}")


def check_vacuum_pressure(value: float) -> None:
    """The absolute gap pressure P_atm + P_vac must stay positive."""
    if not math.isfinite(value) or ATM_PRESSURE + value <= 0.0:
        raise DomainError(f"vacuum_pressure must exceed -{ATM_PRESSURE} Pa, got {value}")


def check_brine_properties(name: str, props: BrineProperties) -> None:
    """Every transport property of a brine snapshot must be positive."""
    for field in ("dyn_viscosity", "thermal_conductivity", "prandtl", "mass_diffusivity", "schmidt"):
        check_positive(f"{name}.{field}", getattr(props, field))


def check_module(module: MembraneModule) -> None:
    """Validate the geometry and material constants of a membrane module."""
    for field in ("channel_height", "channel_width", "membrane_tortuosity", "membrane_thickness",
                  "pore_diameter", "polymer_conductivity", "membrane_area", "air_gap_thickness"):
        check_positive(field, getattr(module, field))
    if module.number_channels < 1:
        raise DomainError(f"number_channels must be >= 1, got {module.number_channels}")
    check_fraction("spacer_porosity", module.spacer_porosity)
    check_fraction("membrane_porosity", module.membrane_porosity)
    check_vacuum_pressure(module.vacuum_pressure)
    logger.debug("Membrane module parameters validated")


def checked_membrane_conductivity(air_conductivity: Union[float, MoistAirProperties],
                                  polymer_conductivity: float,
                                  membrane_porosity: float) -> float:
    """Validate the inputs of ``membrane.membrane_conductivity`` and evaluate it.

    Raises:
        DomainError: If a conductivity is not positive or the porosity is outside (0, 1).
    """
    k_air = air_conductivity.thermal_conductivity if isinstance(air_conductivity, MoistAirProperties) \
        else air_conductivity
    check_positive("air_conductivity", k_air)
    check_positive("polymer_conductivity", polymer_conductivity)
    check_fraction("membrane_porosity", membrane_porosity)
    return membrane_conductivity(k_air, polymer_conductivity, membrane_porosity)


def _check_channel(bulk_water_prop, wall_water_prop, mass_flow_rate, channel_height,
                   channel_width, number_channels, spacer_porosity) -> None:
    """Shared preconditions of the channel transfer coefficients."""
    check_brine_properties("bulk_water_prop", bulk_water_prop)
    check_brine_properties("wall_water_prop", wall_water_prop)
    check_positive("mass_flow_rate", mass_flow_rate)
    check_positive("channel_height", channel_height)
    check_positive("channel_width", channel_width)
    if number_channels < 1:
        raise DomainError(f"number_channels must be >= 1, got {number_channels}")
    check_fraction("spacer_porosity", spacer_porosity)


def checked_channel_heat_transf_coef(bulk_water_prop: BrineProperties,
                                     wall_water_prop: BrineProperties,
                                     mass_flow_rate: float,
                                     channel_height: float,
                                     channel_width: float,
                                     number_channels: int,
                                     spacer_porosity: float) -> float:
    """Validate the inputs of ``channel.channel_heat_transf_coef`` and evaluate it.

    Raises:
        DomainError: If any physical precondition is violated.
    """
    _check_channel(bulk_water_prop, wall_water_prop, mass_flow_rate, channel_height,
                   channel_width, number_channels, spacer_porosity)
    return channel_heat_transf_coef(bulk_water_prop, wall_water_prop, mass_flow_rate,
                                    channel_height, channel_width, number_channels, spacer_porosity)


def checked_channel_mass_transf_coef(bulk_water_prop: BrineProperties,
                                     wall_water_prop: BrineProperties,
                                     mass_flow_rate: float,
                                     channel_height: float,
                                     channel_width: float,
                                     number_channels: int,
                                     spacer_porosity: float) -> float:
    """Validate the inputs of ``channel.channel_mass_transf_coef`` and evaluate it.

    Raises:
        DomainError: If any physical precondition is violated.
    """
    _check_channel(bulk_water_prop, wall_water_prop, mass_flow_rate, channel_height,
                   channel_width, number_channels, spacer_porosity)
    return channel_mass_transf_coef(bulk_water_prop, wall_water_prop, mass_flow_rate,
                                    channel_height, channel_width, number_channels, spacer_porosity)


def checked_mass_flux(membrane_porosity: float,
                      membrane_tortuosity: float,
                      membrane_thickness: float,
                      pore_diameter: float,
                      air_gap_thickness: float,
                      temperature_membrane: float,
                      temperature_gap: float,
                      feed_membrane_pressure: float,
                      film_boundary_pressure: float,
                      vacuum_pressure: float = 0.0) -> float:
    """Validate the inputs of ``membrane.mass_flux`` and evaluate it.

    Raises:
        DomainError: If any physical precondition is violated.
    """
    check_fraction("membrane_porosity", membrane_porosity)
    check_positive("membrane_tortuosity", membrane_tortuosity)
    check_positive("membrane_thickness", membrane_thickness)
    check_positive("pore_diameter", pore_diameter)
    check_positive("air_gap_thickness", air_gap_thickness)
    check_temperature("temperature_membrane", temperature_membrane)
    check_temperature("temperature_gap", temperature_gap)
    check_positive("feed_membrane_pressure", feed_membrane_pressure)
    check_positive("film_boundary_pressure", film_boundary_pressure)
    check_vacuum_pressure(vacuum_pressure)
    return mass_flux(membrane_porosity, membrane_tortuosity, membrane_thickness, pore_diameter,
                     air_gap_thickness, temperature_membrane, temperature_gap,
                     feed_membrane_pressure, film_boundary_pressure, vacuum_pressure)


def checked_saltwater_concentration(mass_transfer_coef: float,
                                    temperature: float,
                                    salinity: float,
                                    mass_flux: float,
                                    **kwargs) -> float:
    """Validate the inputs of ``polarization.saltwater_concentration`` and evaluate it.

    Raises:
        DomainError: If any physical precondition is violated.
    """
    check_positive("mass_transfer_coef", mass_transfer_coef)
    check_temperature("temperature", temperature)
    check_salinity(salinity)
    if not math.isfinite(mass_flux):
        raise DomainError(f"mass_flux must be finite, got {mass_flux}")
    return saltwater_concentration(mass_transfer_coef, temperature, salinity, mass_flux, **kwargs)
