"""
Run configuration: the parameters a caller hands to the solver.
"""

import dataclasses
import json
import numbers
from pathlib import Path
from typing import Union

import numpy as np

from .errors import ConfigurationError
from .solver import SolverConfig


class AdvancedJSONEncoder(json.JSONEncoder):
    """JSON encoder that understands dataclasses and numpy values."""

    def default(self, o):
        if dataclasses.is_dataclass(o):
            return dataclasses.asdict(o)
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, np.generic):
            return o.item()
        return super().default(o)


def dataclass_from_dict(cls, dct):
    """Build a (possibly nested) dataclass from a plain dictionary."""
    if dataclasses.is_dataclass(cls):
        fieldtypes = {field.name: field.type for field in dataclasses.fields(cls)}
        unknown = set(dct) - set(fieldtypes)
        if unknown:
            raise ConfigurationError(
                f"Unknown {cls.__name__} parameter(s): {', '.join(sorted(unknown))}")
        return cls(**{field: dataclass_from_dict(fieldtypes[field], dct[field]) for field in dct})
    else:
        return dct


@dataclasses.dataclass
class RunConfig:
    """Parameters of a shock tube run."""
    nx: int = 256               # Interior cells
    ng: int = 1                 # Ghost cells per side
    t_max: float = 0.3          # End time
    dnout: int = 10             # Emit a snapshot every dnout steps
    cfl: float = 0.45
    v_ref: float = 1.0
    xmin: float = 0.0
    xmax: float = 1.0
    gamma: float = 1.4

    def validate(self) -> 'RunConfig':
        """Raise ConfigurationError if any parameter is out of range."""
        for name in ('nx', 'ng', 'dnout'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        for name in ('t_max', 'cfl', 'v_ref', 'xmin', 'xmax', 'gamma'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")

        if self.nx < 2:
            raise ConfigurationError(f"nx must be >= 2, got {self.nx}")
        if self.ng < 1:
            raise ConfigurationError(f"ng must be >= 1, got {self.ng}")
        if not self.t_max > 0:
            raise ConfigurationError(f"t_max must be positive, got {self.t_max}")
        if self.dnout <= 0:
            raise ConfigurationError(f"dnout must be positive, got {self.dnout}")
        if not self.cfl > 0:
            raise ConfigurationError(f"cfl must be positive, got {self.cfl}")
        if not self.v_ref > 0:
            raise ConfigurationError(f"v_ref must be positive, got {self.v_ref}")
        return self

    @classmethod
    def from_dict(cls, dct: dict) -> 'RunConfig':
        return dataclass_from_dict(cls, dct).validate()

    def to_json(self, **kwargs) -> str:
        return json.dumps(self, cls=AdvancedJSONEncoder, **kwargs)

    def solver_config(self, print_interval: int = 0) -> SolverConfig:
        """SolverConfig matching this run."""
        return SolverConfig(cfl=self.cfl, v_ref=self.v_ref,
                            output_interval=self.dnout,
                            print_interval=print_interval)


def load_run_config(path: Union[str, Path]) -> RunConfig:
    """Read a RunConfig from a JSON file."""
    path = Path(path)
    try:
        with open(path) as f:
            dct = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(dct, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")
    return RunConfig.from_dict(dct)
