"""
Pytest tests for the Lax step and the solver loop.

Tests verify:
1. Fixed time step and step-count determinism
2. Landing exactly on t_max
3. Snapshot cadence
4. Locality and sign of the first steps
5. Conservation and positivity
6. Failure modes (configuration, instability, cancellation)
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from shocktube.src import (
    Grid, Solver1D, SolverConfig, OutflowBC, WallBC, compute_timestep, lax_step,
    set_sod_initial_condition, ConfigurationError, NumericalInstabilityError
)


@pytest.fixture
def sod_grid():
    """Sod shock tube, nx=256, ng=1."""
    grid = Grid.create(nx=256, ng=1)
    set_sod_initial_condition(grid)
    return grid


@pytest.fixture
def solver_config():
    """Default Lax settings, silent."""
    return SolverConfig(cfl=0.45, v_ref=1.0, output_interval=10, print_interval=0)


class TestTimestep:

    def test_fixed_timestep(self, sod_grid):
        assert compute_timestep(sod_grid) == pytest.approx(0.45 / 255)
        assert compute_timestep(sod_grid, cfl=0.9, v_ref=2.0) == pytest.approx(0.45 / 255)

    def test_rejects_non_positive(self, sod_grid):
        with pytest.raises(ConfigurationError):
            compute_timestep(sod_grid, cfl=0.0)
        with pytest.raises(ConfigurationError):
            compute_timestep(sod_grid, v_ref=-1.0)

    def test_solver_timestep_is_not_adaptive(self, sod_grid, solver_config):
        solver = Solver1D(sod_grid, solver_config)
        dt0 = solver.dt
        solver.solve(0.05)
        assert solver.dt == dt0


class TestLaxStep:

    def test_writes_interior_only(self, sod_grid):
        out = np.full_like(sod_grid.U, -7.0)
        dt = compute_timestep(sod_grid)
        lax_step(sod_grid, dt, out, OutflowBC(), OutflowBC())

        assert out[0, 0] == -7.0
        assert out[-1, 0] == -7.0
        assert np.all(out[sod_grid.interior, 0] > 0)

    def test_does_not_advance_time(self, sod_grid):
        out = np.empty_like(sod_grid.U)
        lax_step(sod_grid, 1e-3, out, OutflowBC(), OutflowBC())
        assert sod_grid.t == 0.0

    def test_uniform_state_is_steady(self):
        grid = Grid.create(nx=32, ng=1)
        grid.U[:] = [1.0, 0.5, 3.0]
        out = np.empty_like(grid.U)
        lax_step(grid, 0.01, out, OutflowBC(), OutflowBC())

        assert np.allclose(out[grid.interior], [1.0, 0.5, 3.0], rtol=0, atol=1e-15)

    def test_first_step_at_discontinuity(self, sod_grid):
        """
        One step averages density across the jump and pushes gas to the right.

        Both cells next to the diaphragm get rho = (1 + 0.125)/2 and
        momentum (dt/2dx)(p_L - p_R) > 0.
        """
        mid = sod_grid.n_total // 2
        dt = compute_timestep(sod_grid)
        out = sod_grid.U.copy()
        lax_step(sod_grid, dt, out, OutflowBC(), OutflowBC())

        lam = 0.5 * dt / sod_grid.dx
        for j in (mid - 1, mid):
            assert out[j, 0] == pytest.approx(0.5625)
            assert out[j, 1] == pytest.approx(0.9 * lam)
            assert out[j, 1] > 0
        assert out[mid - 1, 0] == out[mid, 0]
        assert out[mid - 1, 1] == pytest.approx(out[mid, 1])


class TestEarlyTimeLocality:
    """The Lax stencil widens the disturbance by one cell per step."""

    @pytest.mark.parametrize("n_steps", [1, 3, 8])
    def test_undisturbed_beyond_stencil(self, sod_grid, solver_config, n_steps):
        solver = Solver1D(sod_grid, solver_config)
        initial = sod_grid.U.copy()
        for _ in range(n_steps):
            solver.step()

        mid = sod_grid.n_total // 2
        jlo, jhi = sod_grid.jlo, sod_grid.jhi
        left = slice(jlo, mid - n_steps)
        right = slice(mid + n_steps, jhi + 1)

        assert np.array_equal(sod_grid.U[left], initial[left])
        assert np.array_equal(sod_grid.U[right], initial[right])
        assert not np.array_equal(sod_grid.U[mid - n_steps], initial[mid - n_steps])
        assert not np.array_equal(sod_grid.U[mid + n_steps - 1], initial[mid + n_steps - 1])


class TestSolveLoop:

    def test_step_count_determinism(self, sod_grid, solver_config):
        """t_max = 0.3 with dt = 0.45/255 takes exactly 170 steps."""
        solver = Solver1D(sod_grid, solver_config)
        expected_steps = int(round(0.3 / solver.dt))
        assert expected_steps == 170

        result = solver.solve(0.3)

        assert result['steps'] == expected_steps
        assert solver.iteration == expected_steps
        assert abs(solver.time - 0.3) < 1e-9
        assert not result['cancelled']

    def test_last_step_shortened(self, sod_grid, solver_config):
        """A t_max that is not a multiple of dt is still hit exactly."""
        solver = Solver1D(sod_grid, solver_config)
        t_max = 0.1
        expected_steps = int(np.ceil(t_max / solver.dt))

        result = solver.solve(t_max)

        assert result['steps'] == expected_steps
        assert solver.time == t_max

    def test_continues_from_current_time(self, sod_grid, solver_config):
        solver = Solver1D(sod_grid, solver_config)
        solver.solve(0.1)
        solver.solve(0.2)
        assert abs(solver.time - 0.2) < 1e-9

    def test_snapshot_cadence(self, sod_grid, solver_config):
        solver = Solver1D(sod_grid, solver_config)
        received = []

        result = solver.solve(0.3, callback=received.append)

        # 170 steps, one snapshot every 10
        assert result['n_outputs'] == 17
        assert [s.index for s in solver.snapshots] == list(range(17))
        assert [s.step for s in solver.snapshots] == list(range(10, 171, 10))
        assert received == solver.snapshots
        times = [s.t for s in solver.snapshots]
        assert all(t1 > t0 for t0, t1 in zip(times, times[1:]))

    def test_initial_snapshot(self, sod_grid):
        config = SolverConfig(output_interval=50, sample_initial=True)
        solver = Solver1D(sod_grid, config)
        solver.solve(0.3)

        first = solver.snapshots[0]
        assert first.index == 0
        assert first.step == 0
        assert first.t == 0.0
        assert [s.step for s in solver.snapshots] == [0, 50, 100, 150]

    def test_progress_output(self, sod_grid, capsys):
        config = SolverConfig(print_interval=50)
        Solver1D(sod_grid, config).solve(0.3)

        out = capsys.readouterr().out
        assert "Starting 1D Lax Shock Tube Solver" in out
        assert "Step    150" in out
        assert "Reached t_max" in out

    def test_silent_by_default(self, sod_grid, capsys):
        Solver1D(sod_grid).solve(0.05)
        assert capsys.readouterr().out == ""


class TestPhysicalBounds:

    def test_positivity(self, sod_grid):
        """Density and energy stay positive in every emitted snapshot."""
        solver = Solver1D(sod_grid, SolverConfig(output_interval=1))
        solver.solve(0.3)

        for snap in solver.snapshots:
            assert np.all(snap.rho > 0), f"Non-positive density at step {snap.step}"
            assert np.all(snap.p > 0), f"Non-positive pressure at step {snap.step}"
        assert np.all(sod_grid.U_interior[:, 2] > 0)


class TestConservation:

    def test_mass_and_energy_before_waves_reach_boundary(self, sod_grid, solver_config):
        """With outflow BCs and quiescent ends, interior totals are exact."""
        mass0, _, energy0 = sod_grid.totals()
        Solver1D(sod_grid, solver_config).solve(0.2)
        mass, _, energy = sod_grid.totals()

        assert abs(mass - mass0) / mass0 < 1e-12
        assert abs(energy - energy0) / energy0 < 1e-12

    def test_momentum_follows_pressure_difference(self, sod_grid, solver_config):
        """d/dt (total momentum) = p_L - p_R while the ends are undisturbed."""
        solver = Solver1D(sod_grid, solver_config)
        solver.solve(0.2)
        _, momentum, _ = sod_grid.totals()

        assert momentum == pytest.approx(0.9 * solver.time, rel=1e-9)

    def test_mass_drift_after_shock_exits(self, sod_grid, solver_config):
        """Once the shock leaves through the outflow boundary, mass drifts slightly."""
        mass0 = sod_grid.totals()[0]
        Solver1D(sod_grid, solver_config).solve(0.3)
        mass = sod_grid.totals()[0]

        assert abs(mass - mass0) / mass0 < 0.02

    def test_wall_conserves_mass(self, sod_grid, solver_config):
        """Reflective walls close the tube, so mass is conserved exactly."""
        mass0 = sod_grid.totals()[0]
        solver = Solver1D(sod_grid, SolverConfig(cfl=0.3))
        solver.set_boundary_conditions(WallBC(), WallBC())
        solver.solve(0.5)
        mass = sod_grid.totals()[0]

        assert abs(mass - mass0) / mass0 < 1e-12


class TestFailureModes:

    def test_rejects_non_positive_t_max(self, sod_grid, solver_config):
        solver = Solver1D(sod_grid, solver_config)
        with pytest.raises(ConfigurationError):
            solver.solve(0.0)
        assert solver.iteration == 0

    def test_rejects_non_positive_output_interval(self, sod_grid):
        with pytest.raises(ConfigurationError):
            Solver1D(sod_grid, SolverConfig(output_interval=0))

    def test_negative_density_detected(self, sod_grid, solver_config):
        solver = Solver1D(sod_grid, solver_config)
        sod_grid.U[10, 0] = -1.0
        with pytest.raises(NumericalInstabilityError):
            solver.check_state()

    def test_nan_detected(self, sod_grid, solver_config):
        solver = Solver1D(sod_grid, solver_config)
        sod_grid.U[10, 2] = np.nan
        with pytest.raises(NumericalInstabilityError, match="Non-finite"):
            solver.check_state()

    def test_unstable_timestep_aborts_run(self):
        """A Courant number far above one blows up and stops the run."""
        grid = Grid.create(nx=64, ng=1)
        set_sod_initial_condition(grid)
        solver = Solver1D(grid, SolverConfig(cfl=5.0, output_interval=1))

        with pytest.raises(NumericalInstabilityError) as excinfo:
            solver.solve(2.0)

        assert excinfo.value.step is not None
        assert excinfo.value.step > 0
        # Snapshots from before the failure remain available
        assert len(solver.snapshots) == excinfo.value.step - 1

    def test_cancellation(self, sod_grid, solver_config):
        solver = Solver1D(sod_grid, solver_config)
        result = solver.solve(0.3, should_stop=lambda: solver.iteration >= 25)

        assert result['cancelled']
        assert result['steps'] == 25
        assert solver.time < 0.3
