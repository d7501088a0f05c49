"""
Exceptions raised by the shock tube solver.
"""


class ShockTubeError(Exception):
    """Base class for solver errors."""


class ConfigurationError(ShockTubeError, ValueError):
    """Invalid construction or run parameters, reported before any stepping."""


class NumericalInstabilityError(ShockTubeError, ArithmeticError):
    """
    Non-physical or non-finite state produced by the scheme.

    The Lax scheme has no recovery strategy, so the run is aborted. The only
    remedy is to restart with a smaller time step.
    """

    def __init__(self, message: str, step: int = None, time: float = None):
        super().__init__(message)
        self.step = step
        self.time = time
