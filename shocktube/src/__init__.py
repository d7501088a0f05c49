"""
1D Lax-Scheme Shock Tube Solver
===============================

Finite-difference solver for the 1D Euler equations, advanced with the
Lax (Lax-Friedrichs) scheme on a uniform grid with ghost cells.

State representation (conservative variables, columns of Grid.U):
    rho   - density
    rhoU  - momentum density
    rhoE  - total energy density

Example:
    grid = Grid.create(nx=256, ng=1)
    set_sod_initial_condition(grid)

    solver = Solver1D(grid, SolverConfig(output_interval=10))
    solver.solve(t_max=0.3)

    for snap in solver.snapshots:
        print(snap.frame_name(), snap.t, snap.rho.max())
"""

from .errors import ShockTubeError, ConfigurationError, NumericalInstabilityError
from .gas import GasProperties
from .grid import Grid
from .state import FlowState
from .flux import euler_flux
from .boundary import BoundaryCondition, OutflowBC, WallBC, apply_boundary_conditions
from .initial import RiemannProblem, SOD, set_riemann_initial_condition, set_sod_initial_condition
from .timestepping import compute_timestep, lax_step
from .sampler import Snapshot, sample
from .solver import Solver1D, SolverConfig
from .config import RunConfig, load_run_config
from .exact import sod_exact

__all__ = [
    # Errors
    'ShockTubeError',
    'ConfigurationError',
    'NumericalInstabilityError',

    # Gas and grid
    'GasProperties',
    'Grid',

    # Flow state
    'FlowState',

    # Flux
    'euler_flux',

    # Boundary conditions
    'BoundaryCondition',
    'OutflowBC',
    'WallBC',
    'apply_boundary_conditions',

    # Initial conditions
    'RiemannProblem',
    'SOD',
    'set_riemann_initial_condition',
    'set_sod_initial_condition',

    # Time stepping
    'compute_timestep',
    'lax_step',

    # Sampling
    'Snapshot',
    'sample',

    # Solver and configuration
    'Solver1D',
    'SolverConfig',
    'RunConfig',
    'load_run_config',

    # Validation
    'sod_exact',
]

__version__ = '1.0.0'
