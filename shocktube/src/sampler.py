"""
Snapshots of the interior solution in primitive variables, for renderers.
"""

import numpy as np
from dataclasses import dataclass

from .grid import Grid
from .state import FlowState


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Primitive variables on the interior cells at one output time."""
    index: int          # Output counter, 0, 1, 2, ...
    step: int           # Solver step at which the snapshot was taken
    t: float
    x: np.ndarray       # Interior cell centres
    rho: np.ndarray     # Density
    p: np.ndarray       # Pressure
    v: np.ndarray       # Velocity
    eps: np.ndarray     # Specific internal energy

    def frame_name(self, width: int = 4) -> str:
        """Zero-padded output index, e.g. '0007'."""
        return f"{self.index:0{width}d}"


def sample(grid: Grid, index: int, step: int = 0) -> Snapshot:
    """
    Convert the interior of grid.U to primitive variables.

    Arrays are copied, so later steps do not alter the snapshot.
    """
    state = FlowState.from_array(grid.U_interior, grid.gas)
    return Snapshot(
        index=index,
        step=step,
        t=grid.t,
        x=grid.x_interior.copy(),
        rho=np.array(state.rho),
        p=np.array(state.p),
        v=np.array(state.v),
        eps=np.array(state.eps),
    )
