"""Membrane and air-gap transport correlations for AGMD.

Provides the effective thermal conductivity of the porous membrane and the
water vapour transport through the membrane pores and the air gap. The
membrane and the gap are treated as two permeabilities in series, driven by
the water vapour pressure difference between the feed-side membrane surface
and the condensate film boundary.

Module Summary:
- Functions:
    - ``membrane_conductivity(air_conductivity, polymer_conductivity, membrane_porosity)``:
        Maxwell-type effective conductivity of the membrane (W/m/K).
    - ``molecular_diffusion(porosity, tortuosity, temperature)``: Vapour-air molecular
        diffusivity times pressure (Pa·m²/s).
    - ``knudsen_diffusion(porosity, tortuosity, pore_diameter, temperature)``: Knudsen
        diffusivity (m²/s).
    - ``effective_diffusion(molecular, knudsen, vacuum_pressure)``: Combined diffusivity.
    - ``membrane_permeability(...)``: Membrane permeability (kg/m²/s/Pa).
    - ``gap_permeability(air_gap_thickness, temperature, vacuum_pressure)``: Air gap permeability.
    - ``overall_permeability(membrane_perm, gap_perm)``: Series combination.
    - ``mass_flux(...)``: Trans-membrane water mass flux (kg/m²/s).

Temperatures are in Kelvin everywhere except ``mass_flux``, which takes
Celsius and converts locally.

References:
    I. Hitsov, K. De Sitter, C. Dotremont, P. Cauwenberg, I. Nopens, Full-scale
    validated Air Gap Membrane Distillation (AGMD) model without calibration
    parameters. J. Membrane Sci. 533 (2017) 309-320.

    K.M. Lisboa, D.B. Moraes, C.P. Naveira-Cotta, R.M. Cotta, Analysis of the
    membrane effects on the energy efficiency of water desalination in a direct
    contact membrane distillation (DCMD) system with heat recovery. Appl. Thermal
    Eng. 182 (2021) 116063.
"""

import math
from typing import Union

from ..units import C2K
from .constants import ATM_PRESSURE, GAS_CONSTANT, WATER_MOLAR_MASS
from .properties import MoistAirProperties


def membrane_conductivity(air_conductivity: Union[float, MoistAirProperties],
                          polymer_conductivity: float,
                          membrane_porosity: float) -> float:
    """Compute the effective thermal conductivity of the porous membrane.

    Maxwell's model with the polymer as the continuous phase and pore air as
    dispersed spheres, scaled by the empirical factor 0.93 for pore tortuosity:

        beta  = (k_p - k_a) / (k_p + 2 k_a)
        k_eff = 0.93 k_a (1 + 2 beta (1 - eps)) / (1 - beta (1 - eps))

    Args:
        air_conductivity: Pore air thermal conductivity (W/m/K), or a
            ``MoistAirProperties`` snapshot
        polymer_conductivity: Thermal conductivity of the membrane polymer (W/m/K)
        membrane_porosity: Membrane porosity (dimensionless, 0 < eps < 1)

    Returns:
        Effective membrane thermal conductivity (W/m/K)

    Note:
        - For eps = 1 the result is 0.93 k_a exactly
        - The 0.93 factor is applied for any porosity, including eps = 0
    """
    if isinstance(air_conductivity, MoistAirProperties):
        air_conductivity = air_conductivity.thermal_conductivity

    beta = (polymer_conductivity - air_conductivity)/(polymer_conductivity + 2.0*air_conductivity)
    solid = 1.0 - membrane_porosity

    return 0.93*air_conductivity*(1.0 + 2.0*beta*solid)/(1.0 - beta*solid)


def molecular_diffusion(porosity: float, tortuosity: float, temperature: float) -> float:
    """Molecular diffusivity of water vapour in air.

    Empirical power law D = 4.46e-6 (eps/tau) T^2.334. The result already
    includes the total pressure (units Pa·m²/s); divide by the absolute
    pressure to obtain m²/s. Use eps = tau = 1 for free diffusion across the
    air gap.

    Args:
        porosity: Porosity (dimensionless)
        tortuosity: Tortuosity (dimensionless)
        temperature: Temperature (K)

    Returns:
        Pressure-diffusivity product (Pa·m²/s)
    """
    return 4.46e-6*porosity/tortuosity*temperature**2.334


def knudsen_diffusion(porosity: float, tortuosity: float,
                      pore_diameter: float, temperature: float) -> float:
    """Knudsen diffusivity of water vapour in the membrane pores.

    D_kn = (d_p / 3) (eps / tau) sqrt(8 R T / (pi M_w))

    Args:
        porosity: Membrane porosity (dimensionless)
        tortuosity: Membrane tortuosity (dimensionless)
        pore_diameter: Mean pore diameter (m)
        temperature: Temperature (K)

    Returns:
        Knudsen diffusivity (m²/s)
    """
    # Mean molecular speed from kinetic theory
    mean_speed = math.sqrt(8.0*GAS_CONSTANT*temperature/(math.pi*WATER_MOLAR_MASS))
    return pore_diameter/3.0*porosity/tortuosity*mean_speed


def effective_diffusion(molecular_diffusivity: float, knudsen_diffusivity: float,
                        vacuum_pressure: float = 0.0) -> float:
    """Combine molecular and Knudsen diffusion in parallel resistance (Bosanquet).

    D_eff = D_mol D_kn / (D_mol + (P_atm + P_vac) D_kn)

    Args:
        molecular_diffusivity: Output of ``molecular_diffusion`` (Pa·m²/s)
        knudsen_diffusivity: Output of ``knudsen_diffusion`` (m²/s)
        vacuum_pressure: Gauge pressure applied to the gap (Pa), <= 0 for vacuum

    Returns:
        Effective diffusivity (m²/s)
    """
    total_pressure = ATM_PRESSURE + vacuum_pressure
    return molecular_diffusivity*knudsen_diffusivity/(molecular_diffusivity + total_pressure*knudsen_diffusivity)


def membrane_permeability(membrane_porosity: float,
                          membrane_tortuosity: float,
                          membrane_thickness: float,
                          pore_diameter: float,
                          temperature: float,
                          vacuum_pressure: float = 0.0) -> float:
    """Water vapour permeability of the membrane.

    k_m = M_w D_eff / (R T delta_m)

    Args:
        membrane_porosity: Membrane porosity (dimensionless)
        membrane_tortuosity: Membrane tortuosity (dimensionless)
        membrane_thickness: Membrane thickness (m)
        pore_diameter: Mean pore diameter (m)
        temperature: Membrane temperature (K)
        vacuum_pressure: Gauge pressure applied to the gap (Pa)

    Returns:
        Membrane permeability (kg/m²/s/Pa)
    """
    D_mol = molecular_diffusion(membrane_porosity, membrane_tortuosity, temperature)
    D_kn = knudsen_diffusion(membrane_porosity, membrane_tortuosity, pore_diameter, temperature)
    D_eff = effective_diffusion(D_mol, D_kn, vacuum_pressure)

    return WATER_MOLAR_MASS*D_eff/(GAS_CONSTANT*temperature*membrane_thickness)


def gap_permeability(air_gap_thickness: float, temperature: float,
                     vacuum_pressure: float = 0.0) -> float:
    """Water vapour permeability of the air gap (free molecular diffusion).

    k_gap = M_w D_mol(1, 1, T) / (R T (P_atm + P_vac) delta_gap)

    Args:
        air_gap_thickness: Air gap thickness (m)
        temperature: Gap temperature (K)
        vacuum_pressure: Gauge pressure applied to the gap (Pa)

    Returns:
        Air gap permeability (kg/m²/s/Pa)
    """
    D_mol = molecular_diffusion(1.0, 1.0, temperature)
    total_pressure = ATM_PRESSURE + vacuum_pressure
    return WATER_MOLAR_MASS*D_mol/(GAS_CONSTANT*temperature*total_pressure*air_gap_thickness)


def overall_permeability(membrane_perm: float, gap_perm: float) -> float:
    """Series combination of membrane and gap permeabilities."""
    return membrane_perm*gap_perm/(membrane_perm + gap_perm)


def mass_flux(membrane_porosity: float,
              membrane_tortuosity: float,
              membrane_thickness: float,
              pore_diameter: float,
              air_gap_thickness: float,
              temperature_membrane: float,
              temperature_gap: float,
              feed_membrane_pressure: float,
              film_boundary_pressure: float,
              vacuum_pressure: float = 0.0) -> float:
    """Trans-membrane water mass flux across membrane and air gap.

    The membrane and the air gap act as two permeabilities in series:

        k = k_m k_gap / (k_m + k_gap)
        J = k (P_feed_membrane - P_film_boundary)

    Args:
        membrane_porosity: Membrane porosity (dimensionless)
        membrane_tortuosity: Membrane tortuosity (dimensionless)
        membrane_thickness: Membrane thickness (m)
        pore_diameter: Mean pore diameter (m)
        air_gap_thickness: Air gap thickness (m)
        temperature_membrane: Membrane temperature (°C)
        temperature_gap: Air gap temperature (°C)
        feed_membrane_pressure: Vapour pressure at the feed-side membrane surface (Pa)
        film_boundary_pressure: Vapour pressure at the condensate film boundary (Pa)
        vacuum_pressure: Gauge pressure applied to the gap (Pa), <= 0 for vacuum

    Returns:
        Water mass flux (kg/m²/s), positive from feed to permeate

    Note:
        Linear in the pressure difference; zero when both pressures are equal.
    """
    T_m = C2K(temperature_membrane)
    T_gap = C2K(temperature_gap)

    k_m = membrane_permeability(membrane_porosity, membrane_tortuosity, membrane_thickness,
                                pore_diameter, T_m, vacuum_pressure)
    k_gap = gap_permeability(air_gap_thickness, T_gap, vacuum_pressure)

    return overall_permeability(k_m, k_gap)*(feed_membrane_pressure - film_boundary_pressure)
