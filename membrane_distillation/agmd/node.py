"""Single-node evaluation of the AGMD constitutive physics.

Chains the correlations of this package for one spatial node / timestep in
the order an energy and mass balance driver consumes them:

    properties -> transfer coefficients, membrane conductivity
               -> permeabilities -> mass flux -> wall salinity

The driver (mesh, time marching, energy balances) is not part of this
package; ``evaluate_node`` only returns the local closure values.

Module Summary:
- Classes:
    - ``NodeState``: Immutable per-node operating state.
- Functions:
    - ``evaluate_node(module, state, ...)``: Local coefficients, flux and wall salinity.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .channel import channel_heat_transf_coef, channel_mass_transf_coef, reynolds_number
from .config import MembraneModule
from .membrane import mass_flux, membrane_conductivity
from .polarization import saltwater_concentration
from .properties import (
    BrineProperties,
    MoistAirProperties,
    brine_properties,
    brine_vapor_pressure,
    moist_air_properties,
    saltwater_density,
    saturation_pressure,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeState:
    """Local operating state at one node. Temperatures in °C.

    Attributes:
        feed_mass_flow_rate: Feed (brine) mass flow rate (kg/s)
        coolant_mass_flow_rate: Coolant mass flow rate (kg/s)
        feed_temperature: Feed bulk temperature (°C)
        feed_wall_temperature: Feed-side membrane surface temperature (°C)
        gap_temperature: Condensate film boundary temperature in the gap (°C)
        coolant_temperature: Coolant bulk temperature (°C)
        coolant_wall_temperature: Coolant-side plate temperature (°C)
        salinity: Feed bulk NaCl mass fraction (kg/kg)
        wall_salinity: Wall salinity from the previous iteration; the bulk
            salinity is used when None
    """
    feed_mass_flow_rate: float
    coolant_mass_flow_rate: float
    feed_temperature: float
    feed_wall_temperature: float
    gap_temperature: float
    coolant_temperature: float
    coolant_wall_temperature: float
    salinity: float
    wall_salinity: Optional[float] = None


def evaluate_node(
        module: MembraneModule,
        state: NodeState,
        brine_props: Callable[[float, float], BrineProperties] = brine_properties,
        air_props: Callable[[float], MoistAirProperties] = moist_air_properties,
        feed_vapor_pressure: Callable[[float, float], float] = brine_vapor_pressure,
        film_vapor_pressure: Callable[[float], float] = saturation_pressure,
        density_func: Callable[[float, float], float] = saltwater_density,
) -> Dict[str, float]:
    """Evaluate every closure relation at one node.

    The coolant channels share the feed channel geometry and carry fresh
    water (salinity 0). Pore air is evaluated at the mean of the feed wall
    and gap temperatures and at atmospheric pressure, also for a vacuum
    module: saturated humid air at 20 kPa absolute does not exist above
    60 °C, where the water vapour pressure exceeds the total pressure.

    Args:
        module: Membrane module geometry and material constants
        state: Local operating state
        brine_props: Callable (T °C, salinity) -> BrineProperties
        air_props: Callable (T °C) -> MoistAirProperties
        feed_vapor_pressure: Callable (T °C, salinity) -> vapour pressure (Pa) at the membrane
        film_vapor_pressure: Callable (T °C) -> vapour pressure (Pa) at the condensate film
        density_func: Callable (T °C, salinity) -> density (kg/m³) for polarization

    Returns:
        Dictionary of scalars:
            - membrane_conductivity: Effective membrane conductivity (W/m/K)
            - feed_reynolds: Feed channel Reynolds number
            - coolant_reynolds: Coolant channel Reynolds number
            - feed_heat_transfer_coef: Feed-side h (W/m²/K)
            - coolant_heat_transfer_coef: Coolant-side h (W/m²/K)
            - mass_transfer_coef: Feed-side salt mass transfer coefficient (m/s)
            - feed_membrane_pressure: Vapour pressure at the membrane (Pa)
            - film_boundary_pressure: Vapour pressure at the film boundary (Pa)
            - mass_flux: Water flux (kg/m²/s)
            - distillate_rate: mass_flux times membrane area (kg/s)
            - wall_salinity: Updated wall NaCl mass fraction (kg/kg)
    """
    wall_salinity = state.salinity if state.wall_salinity is None else state.wall_salinity

    geometry = dict(
        channel_height=module.channel_height,
        channel_width=module.channel_width,
        number_channels=module.number_channels,
        spacer_porosity=module.spacer_porosity,
    )

    # ==================== Property Snapshots ====================
    feed_bulk = brine_props(state.feed_temperature, state.salinity)
    feed_wall = brine_props(state.feed_wall_temperature, wall_salinity)
    coolant_bulk = brine_props(state.coolant_temperature, 0.0)
    coolant_wall = brine_props(state.coolant_wall_temperature, 0.0)
    pore_air = air_props(0.5*(state.feed_wall_temperature + state.gap_temperature))

    # ==================== Transport Coefficients ====================
    k_membrane = membrane_conductivity(pore_air, module.polymer_conductivity, module.membrane_porosity)

    h_feed = channel_heat_transf_coef(feed_bulk, feed_wall, state.feed_mass_flow_rate, **geometry)
    h_coolant = channel_heat_transf_coef(coolant_bulk, coolant_wall, state.coolant_mass_flow_rate, **geometry)
    k_mass = channel_mass_transf_coef(feed_bulk, feed_wall, state.feed_mass_flow_rate, **geometry)

    # ==================== Water Flux ====================
    p_feed = feed_vapor_pressure(state.feed_wall_temperature, wall_salinity)
    p_film = film_vapor_pressure(state.gap_temperature)

    J = mass_flux(
        membrane_porosity=module.membrane_porosity,
        membrane_tortuosity=module.membrane_tortuosity,
        membrane_thickness=module.membrane_thickness,
        pore_diameter=module.pore_diameter,
        air_gap_thickness=module.air_gap_thickness,
        temperature_membrane=state.feed_wall_temperature,
        temperature_gap=state.gap_temperature,
        feed_membrane_pressure=p_feed,
        film_boundary_pressure=p_film,
        vacuum_pressure=module.vacuum_pressure,
    )

    # ==================== Concentration Polarization ====================
    new_wall_salinity = saltwater_concentration(k_mass, state.feed_temperature, state.salinity, J,
                                                density_func=density_func)

    logger.debug(f"Node: J={J:.3e} kg/m2/s, h_feed={h_feed:.1f} W/m2/K, "
                 f"S_wall={new_wall_salinity:.4f}")

    return dict(
        membrane_conductivity=k_membrane,
        feed_reynolds=reynolds_number(feed_bulk.dyn_viscosity, state.feed_mass_flow_rate, **geometry),
        coolant_reynolds=reynolds_number(coolant_bulk.dyn_viscosity, state.coolant_mass_flow_rate, **geometry),
        feed_heat_transfer_coef=h_feed,
        coolant_heat_transfer_coef=h_coolant,
        mass_transfer_coef=k_mass,
        feed_membrane_pressure=p_feed,
        film_boundary_pressure=p_film,
        mass_flux=J,
        distillate_rate=J*module.membrane_area,
        wall_salinity=new_wall_salinity,
    )
