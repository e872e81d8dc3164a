"""Thermophysical property snapshots for brine and moist air.

This module is the property provider consumed by the AGMD correlations. It
wraps CoolProp for pure water and humid air and applies seawater salinity
corrections where CoolProp has none. Every function returns a fresh value;
snapshots are frozen dataclasses so the correlations cannot mutate them.

Module Summary:
- Classes:
    - ``BrineProperties``: Immutable brine property snapshot at (T, S).
    - ``MoistAirProperties``: Immutable pore-air property snapshot.
- Functions:
    - ``saltwater_density(temperature, salinity, pressure)``: Brine density (kg/m³).
    - ``nacl_diffusivity(temperature, dyn_viscosity)``: NaCl diffusivity in water (m²/s).
    - ``brine_properties(temperature, salinity, pressure)``: Full ``BrineProperties``.
    - ``make_brine_provider(pressure)``: Returns a ``(temperature, salinity)`` property callable.
    - ``moist_air_properties(temperature, pressure, relative_humidity)``: ``MoistAirProperties``.
    - ``saturation_pressure(temperature)``: Pure water saturation pressure (Pa).
    - ``brine_vapor_pressure(temperature, salinity)``: Vapour pressure over brine (Pa).

All temperatures at this interface are in Celsius.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from CoolProp.CoolProp import PropsSI
from CoolProp.HumidAirProp import HAPropsSI

from ..units import C2K
from .constants import ATM_PRESSURE, NACL_MOLAR_MASS, WATER_MOLAR_MASS

# NaCl diffusivity in water at 25 °C and the viscosity of water at that state
NACL_DIFFUSIVITY_REF = 1.61e-9  # m²/s
WATER_VISCOSITY_REF = 0.890e-3  # Pa·s
T_REF = 298.15                  # K


@dataclass(frozen=True)
class BrineProperties:
    """Brine properties at one temperature and salinity.

    Attributes:
        dyn_viscosity: Dynamic viscosity (Pa·s)
        thermal_conductivity: Thermal conductivity (W/m/K)
        prandtl: Prandtl number (dimensionless)
        mass_diffusivity: Salt diffusivity in water (m²/s)
        schmidt: Schmidt number (dimensionless)
        density: Density (kg/m³), optional
        specific_heat: Specific heat at constant pressure (J/kg/K), optional
    """
    dyn_viscosity: float
    thermal_conductivity: float
    prandtl: float
    mass_diffusivity: float
    schmidt: float
    density: Optional[float] = None
    specific_heat: Optional[float] = None


@dataclass(frozen=True)
class MoistAirProperties:
    """Properties of the moist air occupying the membrane pores."""
    thermal_conductivity: float


def saltwater_density(temperature: float, salinity: float,
                      pressure: float = ATM_PRESSURE) -> float:
    """Compute seawater/brine density.

    Pure water density comes from CoolProp; the salinity contribution is
    eq. 8 of Sharqawy et al. (2010).

    Args:
        temperature: Temperature (°C)
        salinity: Salt mass fraction (kg/kg)
        pressure: Pressure (Pa), default atmospheric

    Returns:
        Density (kg/m³)

    Note:
        Correlation range: 0-180 °C, 0-0.16 kg/kg.

    Reference:
        M.H. Sharqawy, J.H. Lienhard V, S.M. Zubair, Thermophysical properties of
        seawater: a review of existing correlations and data. Desalination and
        Water Treatment 16 (2010) 354-380.
    """
    t = temperature
    S = salinity

    rho_w = PropsSI("D", "T", C2K(t), "P", pressure, "Water")

    # Salinity term of Sharqawy eq. 8
    drho = 8.020e2 - 2.001*t + 1.677e-2*t**2 - 3.060e-5*t**3 - 1.613e-5*S*t**2

    return rho_w + S*drho


def nacl_diffusivity(temperature: float, dyn_viscosity: float) -> float:
    """Scale the NaCl diffusivity in water with the Stokes-Einstein relation.

    D(T) = D_ref * (T / T_ref) * (mu_ref / mu)

    Args:
        temperature: Temperature (°C)
        dyn_viscosity: Solution dynamic viscosity at that temperature (Pa·s)

    Returns:
        Mass diffusivity (m²/s)
    """
    return NACL_DIFFUSIVITY_REF * (C2K(temperature)/T_REF) * (WATER_VISCOSITY_REF/dyn_viscosity)


def brine_properties(temperature: float, salinity: float,
                     pressure: float = ATM_PRESSURE) -> BrineProperties:
    """Evaluate a brine property snapshot.

    Pure water cp, k and viscosity are queried from CoolProp. The viscosity is
    corrected for salinity with eq. 22 of Sharqawy et al. (2010); cp and k are
    taken as those of pure water (the salinity effect on both is a few percent
    at seawater concentrations).

    Args:
        temperature: Temperature (°C)
        salinity: Salt mass fraction (kg/kg)
        pressure: Pressure (Pa), default atmospheric

    Returns:
        BrineProperties snapshot
    """
    t = temperature
    S = salinity
    T = C2K(t)

    # ==================== Pure Water Properties ====================
    cp = PropsSI("C", "T", T, "P", pressure, "Water")   # Specific heat
    k = PropsSI("L", "T", T, "P", pressure, "Water")    # Thermal conductivity
    mu_w = PropsSI("V", "T", T, "P", pressure, "Water") # Dynamic viscosity

    # ==================== Salinity Corrections ====================
    A = 1.541 + 1.998e-2*t - 9.52e-5*t**2
    B = 7.974 - 7.561e-2*t + 4.724e-4*t**2
    mu = mu_w*(1.0 + A*S + B*S**2)

    rho = saltwater_density(t, S, pressure)
    D = nacl_diffusivity(t, mu)

    return BrineProperties(
        dyn_viscosity=mu,
        thermal_conductivity=k,
        prandtl=cp*mu/k,
        mass_diffusivity=D,
        schmidt=mu/(rho*D),
        density=rho,
        specific_heat=cp,
    )


def make_brine_provider(pressure: float = ATM_PRESSURE) -> Callable[[float, float], BrineProperties]:
    """Create a brine property function bound to a fixed pressure.

    Args:
        pressure: Liquid pressure (Pa), default atmospheric

    Returns:
        A callable taking temperature (°C) and salinity (kg/kg) and returning
        a ``BrineProperties`` snapshot.

    Example:
        >>> props = make_brine_provider()
        >>> feed = props(60.0, 0.035)
    """
    def props(temperature: float, salinity: float) -> BrineProperties:
        return brine_properties(temperature, salinity, pressure)
    return props


def moist_air_properties(temperature: float, pressure: float = ATM_PRESSURE,
                         relative_humidity: float = 1.0) -> MoistAirProperties:
    """Evaluate humid air in the membrane pores with CoolProp's HAPropsSI.

    Args:
        temperature: Temperature (°C)
        pressure: Total pressure (Pa), default atmospheric
        relative_humidity: Relative humidity (0-1), default saturated

    Returns:
        MoistAirProperties snapshot
    """
    k = HAPropsSI("K", "T", C2K(temperature), "P", pressure, "R", relative_humidity)
    return MoistAirProperties(thermal_conductivity=k)


def saturation_pressure(temperature: float) -> float:
    """Saturation pressure of pure water (Pa) at ``temperature`` (°C)."""
    return PropsSI("P", "T", C2K(temperature), "Q", 0, "Water")


def brine_vapor_pressure(temperature: float, salinity: float) -> float:
    """Vapour pressure over brine using Raoult's law.

    The water activity is taken as the water mole fraction with NaCl fully
    dissociated into two ions.

    Args:
        temperature: Temperature (°C)
        salinity: Salt mass fraction (kg/kg)

    Returns:
        Partial pressure of water vapour at the liquid surface (Pa)
    """
    n_w = (1.0 - salinity)/WATER_MOLAR_MASS
    n_ions = 2.0*salinity/NACL_MOLAR_MASS
    water_activity = n_w/(n_w + n_ions)
    return water_activity*saturation_pressure(temperature)
