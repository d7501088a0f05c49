"""
Lax (Lax-Friedrichs) time step and time-step selection.
"""

import numpy as np

from .errors import ConfigurationError
from .grid import Grid
from .flux import euler_flux
from .boundary import BoundaryCondition, apply_boundary_conditions


def compute_timestep(grid: Grid, cfl: float = 0.45, v_ref: float = 1.0) -> float:
    """
    Fixed time step dt = cfl * dx / v_ref.

    The step is computed once per run from a reference speed, not from the
    local |v| + a of the evolving state, so it is not a true CFL bound for
    arbitrary initial data.

    Args:
        grid: Computational grid
        cfl: Courant number
        v_ref: Reference characteristic speed

    Returns:
        dt: Time step
    """
    if cfl <= 0:
        raise ConfigurationError(f"cfl must be positive, got {cfl}")
    if v_ref <= 0:
        raise ConfigurationError(f"v_ref must be positive, got {v_ref}")
    return cfl * grid.dx / v_ref


def lax_step(grid: Grid, dt: float, out: np.ndarray,
             bc_left: BoundaryCondition, bc_right: BoundaryCondition) -> np.ndarray:
    """
    Perform one Lax step from grid.U into out.

        U_j^{n+1} = (U_{j-1} + U_{j+1}) / 2 - dt / (2 dx) * (F_{j+1} - F_{j-1})

    Boundary conditions are applied to grid.U first. Only the interior rows
    of out are written; its ghost rows are left stale until the next call
    refreshes them. grid.t is not advanced.

    Args:
        grid: Grid holding the current state
        dt: Time step
        out: Destination array with the shape of grid.U (must not alias it)
        bc_left, bc_right: Boundary conditions

    Returns:
        out
    """
    apply_boundary_conditions(grid, bc_left, bc_right)

    U = grid.U
    fu = euler_flux(U, grid.gamma)

    jlo, jhi = grid.jlo, grid.jhi
    lam = 0.5 * dt / grid.dx

    out[jlo:jhi + 1] = (0.5 * (U[jlo - 1:jhi] + U[jlo + 1:jhi + 2])
                        - lam * (fu[jlo + 1:jhi + 2] - fu[jlo - 1:jhi]))
    return out
