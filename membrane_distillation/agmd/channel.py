"""Convective transfer coefficients in spacer-filled flow channels.

Module Summary:
- Functions:
    - ``mass_velocity(mass_flow_rate, channel_height, channel_width, number_channels, spacer_porosity)``:
        Superficial mass velocity in one channel (kg/m²/s).
    - ``reynolds_number(...)``: Channel Reynolds number based on the channel height.
    - ``spacer_correlation(reynolds, number, number_ratio)``: Nusselt/Sherwood number.
    - ``channel_heat_transf_coef(...)``: Heat transfer coefficient (W/m²/K).
    - ``channel_mass_transf_coef(...)``: Mass transfer coefficient (m/s).

Reference:
    I. Hitsov, K. De Sitter, C. Dotremont, P. Cauwenberg, I. Nopens, Full-scale
    validated Air Gap Membrane Distillation (AGMD) model without calibration
    parameters. J. Membrane Sci. 533 (2017) 309-320.
"""

from .properties import BrineProperties


def mass_velocity(mass_flow_rate: float, channel_height: float, channel_width: float,
                  number_channels: int, spacer_porosity: float) -> float:
    """Mass flow per unit open cross-section of one channel (kg/m²/s)."""
    return mass_flow_rate/(number_channels*channel_height*channel_width*spacer_porosity)


def reynolds_number(dyn_viscosity: float, mass_flow_rate: float, channel_height: float,
                    channel_width: float, number_channels: int, spacer_porosity: float) -> float:
    """Reynolds number of spacer-filled channel flow, Re = G h / mu."""
    G = mass_velocity(mass_flow_rate, channel_height, channel_width, number_channels, spacer_porosity)
    return G*channel_height/dyn_viscosity


def spacer_correlation(reynolds: float, number: float, number_ratio: float) -> float:
    """Empirical Nusselt/Sherwood number for spacer-filled channels.

    Nu = 0.22 Re^0.69 Pr^0.13 (Pr_bulk / Pr_wall)^0.25, and the same form with
    Sc for the Sherwood number.

    Args:
        reynolds: Channel Reynolds number (dimensionless)
        number: Bulk Prandtl (or Schmidt) number (dimensionless)
        number_ratio: Bulk-to-wall Prandtl (or Schmidt) ratio (dimensionless)

    Returns:
        Nusselt (or Sherwood) number (dimensionless)

    Note:
        The correlation is used as-is outside the Reynolds range it was fitted
        on; no clamping is applied.
    """
    return 0.22*reynolds**0.69*number**0.13*number_ratio**0.25


def channel_heat_transf_coef(bulk_water_prop: BrineProperties,
                             wall_water_prop: BrineProperties,
                             mass_flow_rate: float,
                             channel_height: float,
                             channel_width: float,
                             number_channels: int,
                             spacer_porosity: float) -> float:
    """Compute the convective heat transfer coefficient of a spacer-filled channel.

    Args:
        bulk_water_prop: Brine properties at bulk conditions
        wall_water_prop: Brine properties at wall conditions (only Prandtl is used)
        mass_flow_rate: Total mass flow rate through the channels (kg/s)
        channel_height: Channel height (m), also the characteristic length
        channel_width: Channel width (m)
        number_channels: Number of parallel channels
        spacer_porosity: Spacer porosity (dimensionless)

    Returns:
        Heat transfer coefficient h = k Nu / H (W/m²/K)
    """
    Re = reynolds_number(bulk_water_prop.dyn_viscosity, mass_flow_rate, channel_height,
                         channel_width, number_channels, spacer_porosity)

    Pr = bulk_water_prop.prandtl
    Nu = spacer_correlation(Re, Pr, Pr/wall_water_prop.prandtl)

    return bulk_water_prop.thermal_conductivity*Nu/channel_height


def channel_mass_transf_coef(bulk_water_prop: BrineProperties,
                             wall_water_prop: BrineProperties,
                             mass_flow_rate: float,
                             channel_height: float,
                             channel_width: float,
                             number_channels: int,
                             spacer_porosity: float) -> float:
    """Compute the salt mass transfer coefficient of a spacer-filled channel.

    Same correlation as ``channel_heat_transf_coef`` with the Schmidt number in
    place of the Prandtl number (heat and mass transfer analogy).

    Args:
        bulk_water_prop: Brine properties at bulk conditions
        wall_water_prop: Brine properties at wall conditions (only Schmidt is used)
        mass_flow_rate: Total mass flow rate through the channels (kg/s)
        channel_height: Channel height (m)
        channel_width: Channel width (m)
        number_channels: Number of parallel channels
        spacer_porosity: Spacer porosity (dimensionless)

    Returns:
        Mass transfer coefficient k = D Sh / H (m/s)
    """
    Re = reynolds_number(bulk_water_prop.dyn_viscosity, mass_flow_rate, channel_height,
                         channel_width, number_channels, spacer_porosity)

    Sc = bulk_water_prop.schmidt
    Sh = spacer_correlation(Re, Sc, Sc/wall_water_prop.schmidt)

    return bulk_water_prop.mass_diffusivity*Sh/channel_height
