"""Physical constants shared by the AGMD correlations.

Values are process-wide and immutable; none of them is configuration.
"""

from scipy.constants import R, atm

GAS_CONSTANT: float = R              # Universal gas constant (J/mol/K)
ATM_PRESSURE: float = atm            # Standard atmospheric pressure (Pa)
WATER_MOLAR_MASS: float = 18.015e-3  # Molar mass of water (kg/mol)

NACL_DENSITY: float = 2160.0         # Density of solid NaCl (kg/m³)
NACL_MOLAR_MASS: float = 58.44e-3    # Molar mass of NaCl (kg/mol)
