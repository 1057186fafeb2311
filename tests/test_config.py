"""Tests for print option configuration."""

import pytest
from omegaconf import OmegaConf
from omegaconf.errors import ConfigKeyError, ValidationError

from immersed import BoundaryVector, PrintOptions, load_print_options


class TestPrintOptions:
    """Tests for loading and applying print options."""

    def test_defaults(self):
        assert load_print_options() == PrintOptions()

    def test_overrides_from_dict(self):
        options = load_print_options({"precision": 3, "separator": ", "})
        assert isinstance(options, PrintOptions)
        assert options.precision == 3
        assert options.separator == ", "
        assert options.threshold == PrintOptions.threshold

    def test_overrides_from_dictconfig(self):
        cfg = OmegaConf.create({"linewidth": 120})
        assert load_print_options(cfg).linewidth == 120

    def test_string_value_converted(self):
        assert load_print_options({"precision": "4"}).precision == 4

    def test_unknown_key(self):
        with pytest.raises(ConfigKeyError):
            load_print_options({"colour": "red"})

    def test_bad_type(self):
        with pytest.raises(ValidationError):
            load_print_options({"precision": "many"})

    def test_print_uses_options(self, capsys):
        f = BoundaryVector.from_buffer(1, [1.0 / 3.0, 2.0])
        f.print(options=load_print_options({"precision": 2, "separator": ", "}))
        assert capsys.readouterr().out.strip() == "[0.33, 2.  ]"
