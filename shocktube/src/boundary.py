"""
Ghost-cell boundary conditions for the shock tube solver.

Boundary conditions write into the ng ghost cells on one side of the grid
from interior values. They must be applied before every flux evaluation,
since the Lax stencil reads one neighbour beyond the interior.
"""

from abc import ABC, abstractmethod

from .errors import ConfigurationError
from .grid import Grid, MOM


class BoundaryCondition(ABC):
    """Abstract base class for boundary conditions."""

    @abstractmethod
    def apply(self, grid: Grid, side: str) -> None:
        """
        Fill the ghost cells of grid.U in place.

        Args:
            grid: Grid whose interior is current
            side: 'left' or 'right'
        """
        pass


class OutflowBC(BoundaryCondition):
    """
    Zero-gradient outflow: every ghost cell copies the nearest interior cell.
    """

    def apply(self, grid: Grid, side: str) -> None:
        U = grid.U
        if side == 'left':
            U[:grid.jlo] = U[grid.jlo]
        elif side == 'right':
            U[grid.jhi + 1:] = U[grid.jhi]
        else:
            raise ValueError(f"side must be 'left' or 'right', got {side!r}")


class WallBC(BoundaryCondition):
    """
    Reflective wall: ghost cells mirror the interior with momentum reversed.
    """

    def apply(self, grid: Grid, side: str) -> None:
        if grid.ng > grid.nx:
            raise ConfigurationError(
                f"WallBC needs ng <= nx to mirror the interior (ng={grid.ng}, nx={grid.nx})")

        U = grid.U
        ng = grid.ng
        if side == 'left':
            # Ghost jlo-1-i mirrors jlo+i
            U[:grid.jlo] = U[grid.jlo:grid.jlo + ng][::-1]
            U[:grid.jlo, MOM] *= -1.0
        elif side == 'right':
            # Ghost jhi+1+i mirrors jhi-i
            U[grid.jhi + 1:] = U[grid.jhi - ng + 1:grid.jhi + 1][::-1]
            U[grid.jhi + 1:, MOM] *= -1.0
        else:
            raise ValueError(f"side must be 'left' or 'right', got {side!r}")


def apply_boundary_conditions(grid: Grid, bc_left: BoundaryCondition,
                              bc_right: BoundaryCondition) -> None:
    """Apply both boundary conditions to grid in place."""
    bc_left.apply(grid, 'left')
    bc_right.apply(grid, 'right')
