"""
Tests for membrane module configuration loading.
"""

import logging
from pathlib import Path

import pytest

from membrane_distillation.agmd.config import MembraneModule, load_module_config, module_from_dict
from membrane_distillation.agmd.exceptions import ConfigurationError

EXAMPLE_CONFIG = Path(__file__).parent.parent / "configs" / "agmd_module.yaml"


class TestModuleFromDict:
    """Test building records from mappings."""

    def test_defaults(self):
        module = module_from_dict({})
        assert module == MembraneModule()
        assert module.number_channels == 6
        assert module.vacuum_pressure == -81325.0

    def test_overrides_and_types(self):
        module = module_from_dict({"number_channels": 4.0, "membrane_porosity": 0.75})
        assert module.number_channels == 4
        assert isinstance(module.number_channels, int)
        assert module.membrane_porosity == 0.75

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="membrane_porosty"):
            module_from_dict({"membrane_porosty": 0.8})

    @pytest.mark.parametrize("value", ["0.8", None, True, [0.8]])
    def test_non_numeric_value(self, value):
        with pytest.raises(ConfigurationError):
            module_from_dict({"membrane_porosity": value})

    @pytest.mark.parametrize("value", [6.7, 0.5, float("inf"), float("nan")])
    def test_non_integer_channels(self, value):
        with pytest.raises(ConfigurationError, match="whole number"):
            module_from_dict({"number_channels": value})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            module_from_dict([1, 2, 3])

    def test_record_is_frozen(self):
        with pytest.raises(AttributeError):
            MembraneModule().membrane_porosity = 0.5


class TestLoadModuleConfig:
    """Test YAML loading."""

    def test_example_config_matches_defaults(self):
        assert load_module_config(EXAMPLE_CONFIG) == MembraneModule()

    def test_flat_mapping(self, tmp_path):
        path = tmp_path / "module.yaml"
        path.write_text("membrane_thickness: 1.5e-4\nair_gap_thickness: 0.001\n")
        module = load_module_config(path)
        assert module.membrane_thickness == pytest.approx(1.5e-4)
        assert module.air_gap_thickness == pytest.approx(1e-3)

    def test_section_mapping(self, tmp_path):
        path = tmp_path / "module.yaml"
        path.write_text("membrane_module:\n  vacuum_pressure: 0.0\n")
        assert load_module_config(str(path)).vacuum_pressure == 0.0

    def test_round_trip(self, tmp_path):
        import yaml

        original = MembraneModule(membrane_porosity=0.7, number_channels=3)
        path = tmp_path / "module.yaml"
        path.write_text(yaml.safe_dump({"membrane_module": original.to_dict()}))
        assert load_module_config(path) == original

    def test_exponent_without_decimal_point(self, tmp_path):
        path = tmp_path / "module.yaml"
        path.write_text("membrane_thickness: 1e-4\n")
        with pytest.raises(ConfigurationError, match="decimal point"):
            load_module_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_module_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("membrane_module: [1, 2\n")
        with pytest.raises(ConfigurationError):
            load_module_config(path)

    def test_logs_loaded_path(self, tmp_path, caplog):
        path = tmp_path / "module.yaml"
        path.write_text("membrane_porosity: 0.8\n")
        with caplog.at_level(logging.INFO, logger="membrane_distillation.agmd.config"):
            load_module_config(path)
        assert "Loaded membrane module parameters" in caplog.text
