"""Parameter sweeps of the AGMD water flux.

Note: Requires CoolProp for the default saturation pressure function.

Module Summary:
- Functions:
    - ``sweep_mass_flux(module, T_membrane_array, T_gap_array, ...)``:
        2D flux map over membrane and gap temperatures.
    - ``sweep_vacuum_pressure(module, vacuum_array, T_membrane, T_gap, ...)``:
        Flux as a function of the gap vacuum.
"""

import logging
from typing import Callable, Dict

import numpy as np

from ..units import kg_m2s_to_lmh
from .config import MembraneModule
from .membrane import mass_flux
from .properties import saturation_pressure

logger = logging.getLogger(__name__)


def _module_flux(module: MembraneModule, T_membrane: float, T_gap: float,
                 p_feed: float, p_film: float, vacuum_pressure: float) -> float:
    return mass_flux(
        membrane_porosity=module.membrane_porosity,
        membrane_tortuosity=module.membrane_tortuosity,
        membrane_thickness=module.membrane_thickness,
        pore_diameter=module.pore_diameter,
        air_gap_thickness=module.air_gap_thickness,
        temperature_membrane=T_membrane,
        temperature_gap=T_gap,
        feed_membrane_pressure=p_feed,
        film_boundary_pressure=p_film,
        vacuum_pressure=vacuum_pressure,
    )


def sweep_mass_flux(
        module: MembraneModule,
        T_membrane_array: np.ndarray,
        T_gap_array: np.ndarray,
        vapor_pressure: Callable[[float], float] = saturation_pressure,
) -> Dict[str, np.ndarray]:
    """Map the water flux over membrane and gap temperatures.

    The vapour pressure at each side is the pure water saturation pressure
    at that temperature (no salinity or polarization effects).

    Args:
        module: Membrane module geometry and material constants
        T_membrane_array: Membrane temperatures to sweep (°C)
        T_gap_array: Gap temperatures to sweep (°C)
        vapor_pressure: Callable T (°C) -> vapour pressure (Pa)

    Returns:
        Dictionary of 2D arrays, shape (len(T_membrane_array), len(T_gap_array)):
            - T_membrane_grid: Membrane temperature (°C)
            - T_gap_grid: Gap temperature (°C)
            - mass_flux: Water flux (kg/m²/s), NaN where evaluation failed
            - flux_lmh: Water flux (kg/m²/h)

    Example:
        >>> results = sweep_mass_flux(MembraneModule(), np.linspace(50, 80, 7),
        ...                           np.linspace(20, 40, 5))
    """
    T_membrane_array = np.array(T_membrane_array, dtype=float)
    T_gap_array = np.array(T_gap_array, dtype=float)

    # indexing="ij" gives shape (len(T_membrane), len(T_gap))
    TM, TG = np.meshgrid(T_membrane_array, T_gap_array, indexing="ij")
    flux = np.full_like(TM, np.nan)

    for i, T_m in enumerate(T_membrane_array):
        for j, T_g in enumerate(T_gap_array):
            try:
                p_feed = vapor_pressure(T_m)
                p_film = vapor_pressure(T_g)
            except ValueError as e:
                # CoolProp raises ValueError outside its validity range
                logger.warning(f"Vapour pressure failed at T_m={T_m:.2f} °C, T_gap={T_g:.2f} °C: {e}")
                continue
            flux[i, j] = _module_flux(module, T_m, T_g, p_feed, p_film, module.vacuum_pressure)

    return dict(
        T_membrane_grid=TM,
        T_gap_grid=TG,
        mass_flux=flux,
        flux_lmh=kg_m2s_to_lmh(flux),
    )


def sweep_vacuum_pressure(
        module: MembraneModule,
        vacuum_array: np.ndarray,
        T_membrane: float,
        T_gap: float,
        vapor_pressure: Callable[[float], float] = saturation_pressure,
) -> Dict[str, np.ndarray]:
    """Water flux as a function of the gauge vacuum applied to the gap.

    Args:
        module: Membrane module (its own ``vacuum_pressure`` is ignored)
        vacuum_array: Gauge pressures to sweep (Pa), > -P_atm
        T_membrane: Membrane temperature (°C)
        T_gap: Gap temperature (°C)
        vapor_pressure: Callable T (°C) -> vapour pressure (Pa)

    Returns:
        Dictionary of 1D arrays:
            - vacuum_pressure: Gauge pressures (Pa)
            - mass_flux: Water flux (kg/m²/s)
            - flux_lmh: Water flux (kg/m²/h)
    """
    vacuum_array = np.array(vacuum_array, dtype=float)

    p_feed = vapor_pressure(T_membrane)
    p_film = vapor_pressure(T_gap)

    flux = np.array([_module_flux(module, T_membrane, T_gap, p_feed, p_film, p_vac)
                     for p_vac in vacuum_array])

    return dict(
        vacuum_pressure=vacuum_array,
        mass_flux=flux,
        flux_lmh=kg_m2s_to_lmh(flux),
    )
