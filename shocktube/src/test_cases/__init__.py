"""
Canned runs of the shock tube solver.
"""

from .shock_tube import run_shock_tube_test, create_shock_tube_solver

__all__ = [
    'run_shock_tube_test',
    'create_shock_tube_solver',
]
