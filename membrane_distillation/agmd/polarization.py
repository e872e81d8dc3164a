"""Concentration polarization at the feed-side membrane wall (film theory).

Module Summary:
- Functions:
    - ``salinity_to_molarity(salinity, water_density)``: Mass fraction to mol/L.
    - ``molarity_to_salinity(molarity, water_density)``: mol/L to mass fraction.
    - ``saltwater_concentration(mass_transfer_coef, temperature, salinity, mass_flux)``:
        Wall salinity after polarization.
"""

import math
from typing import Callable

from .constants import NACL_DENSITY, NACL_MOLAR_MASS
from .properties import saltwater_density


def salinity_to_molarity(salinity: float, water_density: float) -> float:
    """Convert NaCl mass fraction to molarity with ideal volume mixing.

    The solution volume is the sum of the water and salt volumes, the salt
    taken at its solid density.

    Args:
        salinity: NaCl mass fraction (kg/kg)
        water_density: Water density (kg/m³)

    Returns:
        Molarity (mol/L)
    """
    volume = (1.0 - salinity)/water_density + salinity/NACL_DENSITY  # m³ per kg of solution
    return salinity/(NACL_MOLAR_MASS*volume)/1000.0


def molarity_to_salinity(molarity: float, water_density: float) -> float:
    """Exact inverse of ``salinity_to_molarity``."""
    return (1000.0*NACL_MOLAR_MASS*NACL_DENSITY*molarity
            / (water_density*NACL_DENSITY + 1000.0*NACL_MOLAR_MASS*molarity*(NACL_DENSITY - water_density)))


def saltwater_concentration(mass_transfer_coef: float,
                            temperature: float,
                            salinity: float,
                            mass_flux: float,
                            density_func: Callable[[float, float], float] = saltwater_density) -> float:
    """Compute the salinity at the membrane wall.

    Film theory: c_wall = c_bulk exp(J / (rho k)). The molarity baseline uses
    the water density at the feed temperature with zero salinity, as in the
    source correlation.

    Args:
        mass_transfer_coef: Feed channel mass transfer coefficient (m/s)
        temperature: Feed temperature (°C)
        salinity: Bulk NaCl mass fraction (kg/kg)
        mass_flux: Water mass flux through the membrane (kg/m²/s)
        density_func: Callable (temperature °C, salinity) -> density (kg/m³),
            default ``properties.saltwater_density``

    Returns:
        Wall NaCl mass fraction (kg/kg)

    Note:
        For mass_flux = 0 the exponential is 1 and the bulk salinity is returned.
    """
    density = density_func(temperature, 0.0)

    molarity = salinity_to_molarity(salinity, density)
    wall_molarity = molarity*math.exp(mass_flux/(density*mass_transfer_coef))

    return molarity_to_salinity(wall_molarity, density)
