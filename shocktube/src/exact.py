"""
Exact solution of the shock tube Riemann problem.

The solution consists of:
1. Left state (undisturbed)
2. Rarefaction fan
3. Contact discontinuity
4. Shock wave
5. Right state (undisturbed)

Only this wave pattern (left rarefaction, right shock) is handled, which
covers Sod's problem and any other tube with a high-pressure driver on the
left. It is used to measure how much the Lax scheme smears each wave.
"""

import numpy as np

from .errors import ConfigurationError
from .initial import RiemannProblem, SOD


def _pressure_function(p, rho_k, p_k, a_k, gamma):
    """Toro's f_k(p) and its derivative for one side of the star region."""
    gm1 = gamma - 1
    gp1 = gamma + 1

    if p > p_k:
        # Shock
        A = 2 / (gp1 * rho_k)
        B = gm1 / gp1 * p_k
        f = (p - p_k) * np.sqrt(A / (p + B))
        df = np.sqrt(A / (p + B)) * (1 - 0.5 * (p - p_k) / (p + B))
    else:
        # Rarefaction
        p_rat = p / p_k
        f = 2 * a_k / gm1 * (p_rat**(gm1 / (2 * gamma)) - 1)
        df = p_rat**(-(gp1) / (2 * gamma)) / (rho_k * a_k)
    return f, df


def star_state(problem: RiemannProblem, gamma: float = 1.4,
               tol: float = 1e-10, max_iter: int = 50):
    """
    Pressure and velocity in the star region, by Newton iteration.

    Returns:
        (p_star, u_star)
    """
    rho_L, u_L, p_L = problem.rho_L, problem.v_L, problem.p_L
    rho_R, u_R, p_R = problem.rho_R, problem.v_R, problem.p_R
    a_L = np.sqrt(gamma * p_L / rho_L)
    a_R = np.sqrt(gamma * p_R / rho_R)

    p = 0.5 * (p_L + p_R)
    for _ in range(max_iter):
        f_L, df_L = _pressure_function(p, rho_L, p_L, a_L, gamma)
        f_R, df_R = _pressure_function(p, rho_R, p_R, a_R, gamma)

        p_new = p - (f_L + f_R + (u_R - u_L)) / (df_L + df_R)
        p_new = max(1e-3 * min(p_L, p_R), p_new)  # Keep positive

        converged = abs(p_new - p) / p < tol
        p = p_new
        if converged:
            break

    f_L, _ = _pressure_function(p, rho_L, p_L, a_L, gamma)
    f_R, _ = _pressure_function(p, rho_R, p_R, a_R, gamma)
    u = 0.5 * (u_L + u_R) + 0.5 * (f_R - f_L)
    return p, u


def sod_exact(x: np.ndarray, t: float, problem: RiemannProblem = SOD,
              gamma: float = 1.4, x0: float = 0.5) -> dict:
    """
    Exact solution at time t.

    Args:
        x: Positions
        t: Time (t <= 0 returns the initial discontinuity)
        problem: Left/right states
        gamma: Adiabatic index
        x0: Position of the initial discontinuity

    Returns:
        Dictionary with arrays rho, u, p, e (specific internal energy)
    """
    x = np.asarray(x, dtype=float)
    gm1 = gamma - 1
    gp1 = gamma + 1

    rho_L, u_L, p_L = problem.rho_L, problem.v_L, problem.p_L
    rho_R, u_R, p_R = problem.rho_R, problem.v_R, problem.p_R

    if t <= 0:
        left = x < x0
        rho = np.where(left, rho_L, rho_R)
        u = np.where(left, u_L, u_R)
        p = np.where(left, p_L, p_R)
        return {'rho': rho, 'u': u, 'p': p, 'e': p / (gm1 * rho)}

    p_star, u_star = star_state(problem, gamma)
    if not (p_R < p_star <= p_L):
        raise ConfigurationError(
            "Exact solution only supports a left rarefaction with a right shock "
            f"(p_R < p* <= p_L), got p* = {p_star:.6g}")

    a_L = np.sqrt(gamma * p_L / rho_L)
    a_R = np.sqrt(gamma * p_R / rho_R)

    # Post-shock density (right side)
    p_ratio = p_star / p_R
    rho_star_R = rho_R * (p_ratio + gm1 / gp1) / (gm1 / gp1 * p_ratio + 1)

    # Post-rarefaction density (left side)
    rho_star_L = rho_L * (p_star / p_L)**(1 / gamma)

    # Wave speeds
    S = u_R + a_R * np.sqrt(gp1 / (2 * gamma) * p_ratio + gm1 / (2 * gamma))
    C = u_star
    H = u_L - a_L
    T = u_star - a_L * (p_star / p_L)**(gm1 / (2 * gamma))

    s = (x - x0) / t

    # Rarefaction fan (evaluated everywhere, used only inside the fan)
    u_fan = 2 / gp1 * (a_L + 0.5 * gm1 * u_L + s)
    a_fan = 2 / gp1 * (a_L + 0.5 * gm1 * (u_L - s))
    a_fan = np.maximum(a_fan, 0.0)
    rho_fan = rho_L * (a_fan / a_L)**(2 / gm1)
    p_fan = p_L * (a_fan / a_L)**(2 * gamma / gm1)

    regions = [s < H, s < T, s < C, s < S]
    rho = np.select(regions, [rho_L, rho_fan, rho_star_L, rho_star_R], default=rho_R)
    u = np.select(regions, [u_L, u_fan, u_star, u_star], default=u_R)
    p = np.select(regions, [p_L, p_fan, p_star, p_star], default=p_R)

    return {'rho': rho, 'u': u, 'p': p, 'e': p / (gm1 * rho)}
