"""
Ideal-gas closure for the Euler equations.
"""

from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True)
class GasProperties:
    """Calorically perfect gas, characterised by its adiabatic index."""
    gamma: float = 1.4          # Ratio of specific heats

    def __post_init__(self):
        if not self.gamma > 1.0:
            raise ConfigurationError(f"gamma must be > 1, got {self.gamma}")

    @property
    def gm1(self) -> float:
        """gamma - 1, the factor relating internal energy to pressure."""
        return self.gamma - 1.0
