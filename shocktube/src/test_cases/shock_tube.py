"""
Sod's shock tube test case - classic validation for compressible flow solvers.

The shock tube problem (Sod, 1978) is a Riemann problem with:
- Left state: rho = 1, p = 1, gas at rest
- Right state: rho = 0.125, p = 0.1, gas at rest
- Initial discontinuity at mid-tube

The Lax scheme is first order and diffusive, so the shock and contact are
smeared over many cells; compare against the exact solution to see how much.
"""

import numpy as np
from typing import Callable, Optional

from ..config import RunConfig
from ..exact import sod_exact
from ..grid import Grid
from ..initial import set_sod_initial_condition
from ..sampler import Snapshot
from ..solver import Solver1D


def create_shock_tube_solver(config: RunConfig, print_interval: int = 0) -> Solver1D:
    """Grid with Sod initial conditions and an outflow-bounded solver."""
    config.validate()
    grid = Grid.create(config.nx, config.ng, config.xmin, config.xmax, config.gamma)
    set_sod_initial_condition(grid)
    return Solver1D(grid, config.solver_config(print_interval))


def run_shock_tube_test(config: RunConfig = None,
                        callback: Optional[Callable[[Snapshot], None]] = None,
                        verbose: bool = True):
    """
    Run Sod's shock tube test case.

    Args:
        config: Run parameters (defaults: nx=256, ng=1, t_max=0.3)
        callback: Receives each Snapshot as it is emitted
        verbose: Print progress and an error summary

    Returns:
        solver: Solver object with final solution
        exact: Exact solution at final time on the interior cells
    """
    if config is None:
        config = RunConfig()

    if verbose:
        print("\n" + "=" * 80)
        print("SOD'S SHOCK TUBE TEST CASE (LAX SCHEME)")
        print("=" * 80)
        print(f"\nConfiguration:")
        print(f"  Cells: {config.nx}, ghost cells: {config.ng}")
        print(f"  Final time: {config.t_max}")
        print(f"  CFL: {config.cfl}, output every {config.dnout} steps")
        print()

    solver = create_shock_tube_solver(config, print_interval=100 if verbose else 0)
    solver.solve(config.t_max, callback=callback)

    grid = solver.grid
    x0 = grid.x[grid.n_total // 2] - 0.5 * grid.dx
    exact = sod_exact(grid.x_interior, solver.time, gamma=grid.gamma, x0=x0)

    if verbose:
        state = solver.get_state()
        rho_error = np.abs(state.rho - exact['rho'])
        u_error = np.abs(state.v - exact['u'])
        p_error = np.abs(state.p - exact['p'])

        print(f"\nError Analysis (t = {solver.time:.4f}, {solver.iteration} steps):")
        print(f"  Density L1 error:  {np.mean(rho_error):.6f}")
        print(f"  Density L∞ error:  {np.max(rho_error):.6f}")
        print(f"  Velocity L1 error: {np.mean(u_error):.6f}")
        print(f"  Pressure L1 error: {np.mean(p_error):.6f}")

    return solver, exact
