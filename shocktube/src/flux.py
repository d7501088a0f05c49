"""
Physical flux of the 1D Euler equations.
"""

import numpy as np

from .errors import NumericalInstabilityError
from .grid import RHO, MOM, ENE


def euler_flux(U: np.ndarray, gamma: float) -> np.ndarray:
    """
    Evaluate the physical flux in every cell.

    F = [rho*v, rho*v² + p, (E + p)*v],  p = (gamma-1)(E - (rho*v)²/(2 rho))

    Ghost cells must already hold valid values. U is not modified.

    Args:
        U: Conserved variables, shape (n_cells, 3)
        gamma: Adiabatic index

    Returns:
        F: New array with the same shape as U

    Raises:
        NumericalInstabilityError: if any density is non-positive
    """
    rho = U[:, RHO]
    mom = U[:, MOM]
    ene = U[:, ENE]

    if np.any(rho <= 0.0):
        bad = int(np.argmax(rho <= 0.0))
        raise NumericalInstabilityError(
            f"Non-positive density {rho[bad]:.6e} in cell {bad} during flux evaluation")

    v = mom / rho
    p = (gamma - 1) * (ene - 0.5 * mom * v)

    F = np.empty_like(U)
    F[:, RHO] = mom
    F[:, MOM] = mom * v + p
    F[:, ENE] = (ene + p) * v
    return F
