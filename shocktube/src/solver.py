"""
Driver for the Lax-scheme shock tube solver.
"""

import numpy as np
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .errors import ConfigurationError, NumericalInstabilityError
from .grid import Grid, RHO, ENE
from .state import FlowState
from .boundary import BoundaryCondition, OutflowBC
from .timestepping import compute_timestep, lax_step
from .sampler import Snapshot, sample


@dataclass
class SolverConfig:
    """Configuration for the 1D Lax solver."""
    cfl: float = 0.45
    v_ref: float = 1.0              # Reference speed for the fixed time step
    output_interval: int = 10       # Emit a snapshot every N steps
    time_tol: float = 1e-10         # Guard against round-off when reaching t_max
    print_interval: int = 0         # Progress line every N steps, 0 for silent
    sample_initial: bool = False    # Emit snapshot 0 before the first step


class Solver1D:
    """
    Lax-Friedrichs solver for the 1D Euler equations on a Grid.

    The conserved table is double-buffered: each step writes into a scratch
    array which then swaps places with grid.U. The time step is fixed for
    the whole run (see compute_timestep).
    """

    def __init__(self, grid: Grid, config: SolverConfig = None):
        """
        Initialize the solver.

        Args:
            grid: Grid, usually with initial conditions already set
            config: Solver configuration
        """
        self.grid = grid
        self.config = config if config is not None else SolverConfig()

        if self.config.output_interval <= 0:
            raise ConfigurationError(
                f"output_interval must be positive, got {self.config.output_interval}")

        self.dt = compute_timestep(grid, self.config.cfl, self.config.v_ref)

        # Outflow on both sides unless told otherwise
        self.bc_left: BoundaryCondition = OutflowBC()
        self.bc_right: BoundaryCondition = OutflowBC()

        self._scratch = grid.U.copy()
        self.iteration = 0
        self.snapshots: List[Snapshot] = []

    def set_boundary_conditions(self, bc_left: BoundaryCondition,
                                bc_right: BoundaryCondition):
        """Set boundary conditions."""
        self.bc_left = bc_left
        self.bc_right = bc_right

    @property
    def time(self) -> float:
        return self.grid.t

    def get_state(self) -> FlowState:
        """Current interior flow state (views into grid.U)."""
        return FlowState.from_array(self.grid.U_interior, self.grid.gas)

    def step(self, dt: float = None) -> float:
        """
        Advance the grid by one Lax step.

        Args:
            dt: Step size, defaults to the fixed run time step

        Returns:
            dt: Time step taken

        Raises:
            NumericalInstabilityError: if the new state is non-physical
        """
        if dt is None:
            dt = self.dt

        lax_step(self.grid, dt, self._scratch, self.bc_left, self.bc_right)
        self.grid.U, self._scratch = self._scratch, self.grid.U

        self.grid.t += dt
        self.iteration += 1
        self.check_state()

        return dt

    def check_state(self):
        """Raise NumericalInstabilityError on non-finite, rho <= 0 or E <= 0."""
        U = self.grid.U_interior

        if not np.all(np.isfinite(U)):
            raise NumericalInstabilityError(
                f"Non-finite state at step {self.iteration}, t = {self.grid.t:.6e}",
                step=self.iteration, time=self.grid.t)

        for k, name in ((RHO, 'density'), (ENE, 'energy density')):
            if np.any(U[:, k] <= 0.0):
                j = int(np.argmin(U[:, k])) + self.grid.jlo
                raise NumericalInstabilityError(
                    f"Non-positive {name} {self.grid.U[j, k]:.6e} in cell {j} "
                    f"at step {self.iteration}, t = {self.grid.t:.6e}",
                    step=self.iteration, time=self.grid.t)

    def emit_snapshot(self, callback: Callable[[Snapshot], None] = None) -> Snapshot:
        """Sample the interior, store the snapshot and hand it to callback."""
        snapshot = sample(self.grid, index=len(self.snapshots), step=self.iteration)
        self.snapshots.append(snapshot)
        if callback is not None:
            callback(snapshot)
        return snapshot

    def solve(self, t_max: float,
              callback: Optional[Callable[[Snapshot], None]] = None,
              should_stop: Optional[Callable[[], bool]] = None) -> Dict:
        """
        Run the solver until grid.t reaches t_max.

        The last step is shortened so that the run ends on t_max exactly.

        Args:
            t_max: End time
            callback: Called with each Snapshot as it is emitted
            should_stop: Checked once per step; returning True ends the run

        Returns:
            Dictionary with run info
        """
        if not t_max > 0:
            raise ConfigurationError(f"t_max must be positive, got {t_max}")

        cfg = self.config
        verbose = cfg.print_interval > 0

        if verbose:
            print("Starting 1D Lax Shock Tube Solver")
            print("=" * 50)
            print(f"Cells: {self.grid.nx} (+{self.grid.ng} ghost per side), dx = {self.grid.dx:.4e}")
            print(f"CFL: {cfg.cfl}, dt = {self.dt:.4e}, t_max = {t_max}")
            print("=" * 50)

        if cfg.sample_initial and not self.snapshots:
            self.emit_snapshot(callback)

        cancelled = False
        while self.grid.t < t_max - cfg.time_tol:
            if should_stop is not None and should_stop():
                cancelled = True
                break

            dt = self.dt
            last = self.grid.t + dt > t_max
            if last:
                dt = t_max - self.grid.t

            self.step(dt)
            if last:
                self.grid.t = t_max

            if self.iteration % cfg.output_interval == 0:
                self.emit_snapshot(callback)

            if verbose and self.iteration % cfg.print_interval == 0:
                rho = self.grid.U_interior[:, RHO]
                print(f"Step {self.iteration:6d}, t = {self.grid.t:.4e}, "
                      f"dt = {dt:.4e}, rho = [{np.min(rho):.4f}, {np.max(rho):.4f}], "
                      f"outputs = {len(self.snapshots)}")

        if verbose:
            if cancelled:
                print(f"\nStopped on request at t = {self.grid.t:.4e}")
            else:
                print(f"\nReached t_max = {t_max:.4e} in {self.iteration} steps")

        return {
            'steps': self.iteration,
            'time': self.grid.t,
            'dt': self.dt,
            'n_outputs': len(self.snapshots),
            'cancelled': cancelled,
        }
