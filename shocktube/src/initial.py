"""
Initial conditions for two-state Riemann problems on a Grid.

The table is split at mid = n_total // 2, counting ghost cells: rows
[0, mid) take the left state and rows [mid, n_total) the right state.
"""

import numpy as np
from dataclasses import dataclass

from .grid import Grid
from .state import FlowState


@dataclass(frozen=True)
class RiemannProblem:
    """Left and right constant states (density, velocity, pressure)."""
    rho_L: float
    v_L: float
    p_L: float
    rho_R: float
    v_R: float
    p_R: float


# Sod (1978)
SOD = RiemannProblem(rho_L=1.0, v_L=0.0, p_L=1.0,
                     rho_R=0.125, v_R=0.0, p_R=0.1)


def set_riemann_initial_condition(grid: Grid, problem: RiemannProblem) -> None:
    """Populate every cell of grid.U (ghosts included) and reset grid.t."""
    mid = grid.n_total // 2
    left = np.arange(grid.n_total) < mid

    rho = np.where(left, problem.rho_L, problem.rho_R)
    v = np.where(left, problem.v_L, problem.v_R)
    p = np.where(left, problem.p_L, problem.p_R)

    grid.U[:] = FlowState.from_primitives(rho, v, p, grid.gas).to_array()
    grid.t = 0.0


def set_sod_initial_condition(grid: Grid) -> None:
    """Sod shock tube: (1, 0, 1) on the left, (0.125, 0, 0.1) on the right."""
    set_riemann_initial_condition(grid, SOD)
