"""
Membrane module configuration.
Geometry and material constants of one AGMD module, loadable from YAML.
"""

import logging
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MembraneModule:
    """Geometry and material constants of an AGMD membrane module.

    Defaults describe the reference V-AGMD module (12.96 m² of membrane,
    6 channels, 20 kPa absolute in the gap).
    """
    # Flow channels
    channel_height: float = 2.0e-3      # m
    channel_width: float = 0.5          # m
    number_channels: int = 6
    spacer_porosity: float = 0.85

    # Membrane
    membrane_porosity: float = 0.8
    membrane_tortuosity: float = 1.5
    membrane_thickness: float = 100e-6  # m
    pore_diameter: float = 0.2e-6       # m
    polymer_conductivity: float = 0.25  # W/m/K
    membrane_area: float = 12.96        # m²

    # Air gap
    air_gap_thickness: float = 2.0e-3   # m
    vacuum_pressure: float = -81325.0   # Pa, gauge

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_FIELD_TYPES = {f.name: (int if f.name == "number_channels" else float) for f in fields(MembraneModule)}


def module_from_dict(data: Dict[str, Any]) -> MembraneModule:
    """
    Build a MembraneModule from a mapping, filling missing keys with defaults.

    Args:
        data: Mapping of field name to value.

    Returns:
        MembraneModule record.

    Raises:
        ConfigurationError: On unknown keys, non-numeric values or a
            fractional channel count.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Module configuration must be a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - set(_FIELD_TYPES))
    if unknown:
        raise ConfigurationError(f"Unknown membrane module parameters: {', '.join(unknown)}")

    values = {}
    for key, value in data.items():
        if isinstance(value, str):
            # YAML 1.1 reads 1e-4 as a string, 1.0e-4 as a float
            raise ConfigurationError(
                f"Parameter '{key}' must be numeric, got {value!r} "
                f"(write exponents with a decimal point, e.g. 1.0e-4)")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"Parameter '{key}' must be numeric, got {value!r}")
        if _FIELD_TYPES[key] is int and not float(value).is_integer():
            raise ConfigurationError(f"Parameter '{key}' must be a whole number, got {value!r}")
        values[key] = _FIELD_TYPES[key](value)

    return MembraneModule(**values)


def load_module_config(config_path: Union[str, Path]) -> MembraneModule:
    """
    Load membrane module parameters from a YAML file.

    The file holds either a flat mapping of parameters or a
    ``membrane_module:`` section.

    Args:
        config_path: Path to YAML file.

    Returns:
        MembraneModule record.
    """
    path = Path(config_path)
    if not path.exists():
        logger.error(f"Config file not found: {path}")
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"Error parsing {path}: {e}")
        raise ConfigurationError(f"Invalid YAML in {path}") from e

    if isinstance(data, dict) and "membrane_module" in data:
        data = data["membrane_module"] or {}

    module = module_from_dict(data)
    logger.info(f"Loaded membrane module parameters from {path}")
    return module
