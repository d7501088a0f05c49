"""
shocktube - 1D Lax-Scheme Shock Tube Solver
===========================================

Re-exports all public components from shocktube.src
"""

from shocktube.src import (
    # Errors
    ShockTubeError,
    ConfigurationError,
    NumericalInstabilityError,
    # Gas and grid
    GasProperties,
    Grid,
    # Flow state
    FlowState,
    # Flux
    euler_flux,
    # Boundary conditions
    BoundaryCondition,
    OutflowBC,
    WallBC,
    apply_boundary_conditions,
    # Initial conditions
    RiemannProblem,
    SOD,
    set_riemann_initial_condition,
    set_sod_initial_condition,
    # Time stepping
    compute_timestep,
    lax_step,
    # Sampling
    Snapshot,
    sample,
    # Solver and configuration
    Solver1D,
    SolverConfig,
    RunConfig,
    load_run_config,
    # Validation
    sod_exact,
    __version__,
)

__all__ = [
    'ShockTubeError',
    'ConfigurationError',
    'NumericalInstabilityError',
    'GasProperties',
    'Grid',
    'FlowState',
    'euler_flux',
    'BoundaryCondition',
    'OutflowBC',
    'WallBC',
    'apply_boundary_conditions',
    'RiemannProblem',
    'SOD',
    'set_riemann_initial_condition',
    'set_sod_initial_condition',
    'compute_timestep',
    'lax_step',
    'Snapshot',
    'sample',
    'Solver1D',
    'SolverConfig',
    'RunConfig',
    'load_run_config',
    'sod_exact',
]
