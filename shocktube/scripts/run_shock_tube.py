"""
Run Sod's shock tube with the Lax scheme and render each snapshot to a frame.

Frames are written as <output_dir>/frame_0000.png, frame_0001.png, ...
with the exact solution overlaid. Assembling them into an animation is left
to external tools (e.g. ffmpeg -i frame_%04d.png).

Run from the repository root:
    python shocktube/scripts/run_shock_tube.py --nx 256 --t-max 0.3 --dnout 10
    python shocktube/scripts/run_shock_tube.py --config run.json
"""

import sys
from pathlib import Path

# Add repository root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import argparse

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from shocktube import RunConfig, load_run_config, sod_exact
from shocktube.src.test_cases import run_shock_tube_test


def plot_snapshot(snapshot, gamma, x0, filename):
    """Plot density, pressure, velocity and internal energy for one snapshot."""
    exact = sod_exact(snapshot.x, snapshot.t, gamma=gamma, x0=x0)

    fig, axes = plt.subplots(2, 2, figsize=(12, 9))
    fig.suptitle(f'Sod Shock Tube (Lax): t = {snapshot.t:.4f}', fontsize=14, fontweight='bold')

    panels = [
        (axes[0, 0], snapshot.rho, exact['rho'], 'Density'),
        (axes[0, 1], snapshot.p, exact['p'], 'Pressure'),
        (axes[1, 0], snapshot.v, exact['u'], 'Velocity'),
        (axes[1, 1], snapshot.eps, exact['e'], 'Specific Internal Energy'),
    ]
    for ax, numerical, reference, title in panels:
        ax.plot(snapshot.x, numerical, 'b-', linewidth=2, label='Lax')
        ax.plot(snapshot.x, reference, 'r--', linewidth=1.5, label='Exact')
        ax.set_xlabel('x')
        ax.set_title(title)
        ax.legend()
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(filename, dpi=100, bbox_inches='tight')
    plt.close(fig)


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="1D Sod shock tube with the Lax scheme, rendered to PNG frames.")
    parser.add_argument('--config', type=str, default=None,
                        help="JSON file with run parameters (nx, ng, t_max, dnout, ...).")
    parser.add_argument('--nx', type=int, default=None, help="Interior cells. Default: 256.")
    parser.add_argument('--ng', type=int, default=None, help="Ghost cells per side. Default: 1.")
    parser.add_argument('--t-max', type=float, default=None, help="End time. Default: 0.3.")
    parser.add_argument('--dnout', type=int, default=None,
                        help="Write a frame every dnout steps. Default: 10.")
    parser.add_argument('-o', '--output-dir', type=str, default='frames',
                        help="Directory for frames. Default: frames.")
    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)

    config = load_run_config(args.config) if args.config else RunConfig()
    overrides = {'nx': args.nx, 'ng': args.ng, 't_max': args.t_max, 'dnout': args.dnout}
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    config.validate()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    # Discontinuity sits half a cell before the middle row of the grid
    n_total = config.nx + 2 * config.ng
    dx = (config.xmax - config.xmin) / (config.nx - 1)
    x0 = config.xmin + (n_total // 2 - config.ng - 0.5) * dx

    def render(snapshot):
        filename = output_dir / f"frame_{snapshot.frame_name()}.png"
        plot_snapshot(snapshot, config.gamma, x0, filename)

    solver, _ = run_shock_tube_test(config, callback=render)

    print(f"\nWrote {len(solver.snapshots)} frames to: {output_dir}/")


if __name__ == "__main__":
    main()
