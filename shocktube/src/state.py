"""
Primitive variables derived from the conserved table.

Conserved (stored on the Grid, columns of U):
    rho   - mass density
    rhoU  - momentum density
    rhoE  - total energy density

Primitive (computed on demand, never stored):
    v, e (specific total energy), eps (specific internal energy), p, a
"""

import numpy as np
from dataclasses import dataclass

from .gas import GasProperties
from .grid import RHO, MOM, ENE, N_VARS


@dataclass
class FlowState:
    """
    Flow state over a set of cells, held as conservative variables.

    Primitive variables are exposed as properties.
    """
    rho: np.ndarray     # Density
    rhoU: np.ndarray    # Momentum density
    rhoE: np.ndarray    # Total energy density
    gas: GasProperties

    # --- Primitive variables as properties ---

    @property
    def v(self) -> np.ndarray:
        """Velocity."""
        return self.rhoU / self.rho

    @property
    def e(self) -> np.ndarray:
        """Specific total energy."""
        return self.rhoE / self.rho

    @property
    def eps(self) -> np.ndarray:
        """Specific internal energy, e - v²/2."""
        return self.e - 0.5 * self.v**2

    @property
    def p(self) -> np.ndarray:
        """Pressure from the ideal-gas closure."""
        return self.gas.gm1 * self.rho * self.eps

    @property
    def a(self) -> np.ndarray:
        """Speed of sound."""
        return np.sqrt(self.gas.gamma * self.p / self.rho)

    # --- Array conversion methods ---

    def to_array(self) -> np.ndarray:
        """
        Convert to a conserved-variable table.

        Returns:
            U: Array of shape (n_cells, 3), columns [rho, rhoU, rhoE]
        """
        U = np.zeros((len(self.rho), N_VARS))
        U[:, RHO] = self.rho
        U[:, MOM] = self.rhoU
        U[:, ENE] = self.rhoE
        return U

    @classmethod
    def from_array(cls, U: np.ndarray, gas: GasProperties) -> 'FlowState':
        """
        Wrap a conserved-variable table (rows are cells).

        The returned state holds views into U, not copies.
        """
        return cls(rho=U[:, RHO], rhoU=U[:, MOM], rhoE=U[:, ENE], gas=gas)

    @classmethod
    def from_primitives(cls, rho: np.ndarray, v: np.ndarray, p: np.ndarray,
                        gas: GasProperties) -> 'FlowState':
        """
        Create a FlowState from density, velocity and pressure.

        E = p / (gamma - 1) + rho * v² / 2
        """
        rho = np.asarray(rho, dtype=float)
        v = np.asarray(v, dtype=float)
        p = np.asarray(p, dtype=float)
        rhoU = rho * v
        rhoE = p / gas.gm1 + 0.5 * rho * v**2
        return cls(rho=rho, rhoU=rhoU, rhoE=rhoE, gas=gas)
