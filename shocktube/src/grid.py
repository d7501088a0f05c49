"""
Uniform 1D grid with ghost cells and the conserved-variable table.

Layout (0-based, inclusive):
    [0, ng)              left ghost cells
    [jlo, jhi]           interior cells, jlo = ng, jhi = ng + nx - 1
    (jhi, n_total)       right ghost cells

Cell centres are spaced dx = (xmax - xmin) / (nx - 1) apart so that the
first interior cell sits on xmin and the last on xmax.
"""

import numbers

import numpy as np
from dataclasses import dataclass, field

from .errors import ConfigurationError
from .gas import GasProperties

# Column indices into the conserved table
RHO, MOM, ENE = 0, 1, 2
N_VARS = 3


@dataclass(eq=False)
class Grid:
    """
    Discretised domain and conserved state [rho, rho*v, E] per cell.

    Geometry is fixed at construction; only U and t change during a run.
    Use Grid.create() rather than the constructor.
    """
    nx: int
    ng: int
    xmin: float
    xmax: float
    gamma: float
    dx: float
    x: np.ndarray       # Cell centres, shape (n_total,)
    U: np.ndarray       # Conserved variables, shape (n_total, 3)
    t: float = 0.0
    gas: GasProperties = field(init=False, repr=False)

    def __post_init__(self):
        self.n_total = self.nx + 2 * self.ng
        self.jlo = self.ng
        self.jhi = self.ng + self.nx - 1
        self.interior = slice(self.jlo, self.jhi + 1)
        self.gas = GasProperties(self.gamma)

    @classmethod
    def create(cls, nx: int, ng: int, xmin: float = 0.0, xmax: float = 1.0,
               gamma: float = 1.4) -> 'Grid':
        """
        Build a grid with zeroed conserved variables.

        Args:
            nx: Number of interior cells (>= 2)
            ng: Ghost cells on each side (>= 1)
            xmin, xmax: Domain bounds
            gamma: Adiabatic index

        Raises:
            ConfigurationError: on invalid parameters
        """
        for name, value in (('nx', nx), ('ng', ng)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if nx < 2:
            raise ConfigurationError(f"nx must be >= 2, got {nx}")
        if ng < 1:
            raise ConfigurationError(f"ng must be >= 1, got {ng}")
        if not xmax > xmin:
            raise ConfigurationError(f"xmax ({xmax}) must exceed xmin ({xmin})")
        if not gamma > 1.0:
            raise ConfigurationError(f"gamma must be > 1, got {gamma}")

        nx, ng = int(nx), int(ng)
        dx = (xmax - xmin) / (nx - 1)
        n_total = nx + 2 * ng
        x = xmin + (np.arange(n_total) - ng) * dx
        U = np.zeros((n_total, N_VARS))

        return cls(nx=nx, ng=ng, xmin=float(xmin), xmax=float(xmax),
                   gamma=float(gamma), dx=dx, x=x, U=U)

    @property
    def x_interior(self) -> np.ndarray:
        """Interior cell centres."""
        return self.x[self.interior]

    @property
    def U_interior(self) -> np.ndarray:
        """View of the interior rows of U."""
        return self.U[self.interior]

    def totals(self) -> np.ndarray:
        """Integrated mass, momentum and energy over the interior cells."""
        return self.U_interior.sum(axis=0) * self.dx
