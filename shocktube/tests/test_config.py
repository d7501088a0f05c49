"""
Pytest tests for the run configuration surface.
"""

import json

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from shocktube.src import RunConfig, load_run_config, ConfigurationError


class TestRunConfig:

    def test_defaults(self):
        config = RunConfig().validate()

        assert config.nx == 256
        assert config.ng == 1
        assert config.t_max == 0.3
        assert config.dnout == 10
        assert config.cfl == 0.45
        assert config.v_ref == 1.0

    @pytest.mark.parametrize("field, value", [
        ('nx', 1),
        ('ng', 0),
        ('t_max', 0.0),
        ('t_max', -1.0),
        ('dnout', 0),
        ('cfl', 0.0),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ConfigurationError, match=field):
            RunConfig(**{field: value}).validate()

    @pytest.mark.parametrize("field, value", [
        ('nx', "256"),
        ('nx', 256.0),
        ('dnout', None),
        ('t_max', "0.3"),
        ('gamma', [1.4]),
        ('cfl', True),
    ])
    def test_wrong_types(self, field, value):
        with pytest.raises(ConfigurationError, match=field):
            RunConfig.from_dict({field: value})

    def test_from_dict(self):
        config = RunConfig.from_dict({'nx': 128, 't_max': 0.2, 'dnout': 5})

        assert config.nx == 128
        assert config.t_max == 0.2
        assert config.dnout == 5
        assert config.ng == 1

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="nz"):
            RunConfig.from_dict({'nz': 10})

    def test_solver_config(self):
        solver_config = RunConfig(dnout=7, cfl=0.3).solver_config()

        assert solver_config.output_interval == 7
        assert solver_config.cfl == 0.3
        assert solver_config.print_interval == 0

    def test_to_json(self):
        dct = json.loads(RunConfig(nx=64).to_json())
        assert dct['nx'] == 64
        assert RunConfig.from_dict(dct).nx == 64


class TestLoadRunConfig:

    def test_load(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({'nx': 100, 'ng': 2, 't_max': 0.25, 'dnout': 4}))

        config = load_run_config(path)

        assert (config.nx, config.ng, config.t_max, config.dnout) == (100, 2, 0.25, 4)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text("{nx: 100")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_run_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(ConfigurationError):
            load_run_config(path)

    def test_wrongly_typed_value_in_file(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({'nx': "256"}))

        with pytest.raises(ConfigurationError, match="nx must be an integer"):
            load_run_config(path)

    def test_invalid_value_in_file(self, tmp_path):
        path = tmp_path / "run.json"
        path.write_text(json.dumps({'dnout': -1}))

        with pytest.raises(ConfigurationError, match="dnout"):
            load_run_config(path)
