"""
Longitudinal Static Stability & Trim Analyzer

Command-line driver: loads the tail data table, trims the aircraft with
the Newton-Raphson solver, checks static stability, and prints a report.
Optionally runs an incidence sweep and saves plots.

Usage:
    python -m vtail_trim datat.txt
    python -m vtail_trim datat.txt --config xb.yaml --incidence 1.5
    python -m vtail_trim datat.txt --sweep -4 4 0.5 --sweep-csv sweep.csv
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .analysis.stability import StabilityEvaluator
from .analysis.sweep import incidence_range, sweep_incidence
from .control.trim import TrimSolver
from .core.moment import VTailMomentModel
from .errors import TrimAnalysisError
from .io.config import EXAMPLE_AIRCRAFT, SolverSettings, load_aircraft_config
from .io.table_reader import load_aero_table
from .reporting import format_banner, print_trim_report


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_CONVERGED = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="V-tail trim and static stability analyzer")
    p.add_argument("data_file", nargs="?", default="datat.txt",
                   help="Tail data file: whitespace-separated alpha (deg) and Cm_ac pairs")
    p.add_argument("--config", type=str, default=None,
                   help="Aircraft/solver YAML file (default: XB aircraft)")
    p.add_argument("--incidence", type=float, default=None, help="Aircraft incidence (deg)")
    p.add_argument("--initial-guess", type=float, default=None, help="Initial tail angle (deg)")
    p.add_argument("--tolerance", type=float, default=None, help="Convergence tolerance on |Cm|")
    p.add_argument("--max-iter", type=int, default=None, help="Newton-Raphson iteration limit")
    p.add_argument("--perturbation", type=float, default=None,
                   help="Incidence perturbation for Cm_alpha (deg)")
    p.add_argument("--sweep", nargs=3, type=float, default=None, metavar=("START", "STOP", "STEP"),
                   help="Also sweep incidence from START to STOP (deg)")
    p.add_argument("--sweep-csv", type=str, default=None, help="Write sweep results to CSV")
    p.add_argument("--plot", type=str, default=None,
                   help="Save the Cm vs tail alpha plot (PNG); with --sweep also saves *_sweep.png")
    p.add_argument("--verbose", action="store_true", help="Print iterations and moment breakdown")
    return p.parse_args(argv)


def run_analysis(args: argparse.Namespace) -> int:
    """
    Run trim + stability (and optional sweep) for parsed arguments.

    Returns
    -------
    int
        Exit status
    """
    if args.config:
        config, settings = load_aircraft_config(args.config)
    else:
        config, settings = EXAMPLE_AIRCRAFT, SolverSettings()

    settings = settings.with_overrides(
        incidence_deg=args.incidence,
        initial_guess_deg=args.initial_guess,
        tolerance=args.tolerance,
        max_iterations=args.max_iter,
        perturbation_deg=args.perturbation
    )
    incidences = incidence_range(*args.sweep) if args.sweep is not None else None

    print(format_banner())
    table = load_aero_table(args.data_file)
    model = VTailMomentModel(config, table)

    solver = TrimSolver.from_settings(model, settings)
    trim = solver.solve(initial_guess=settings.initial_guess_deg,
                        tolerance=settings.tolerance,
                        max_iterations=settings.max_iterations,
                        incidence_deg=settings.incidence_deg,
                        verbose=args.verbose)

    stability = StabilityEvaluator(model).evaluate(trim,
                                                   settings.incidence_deg,
                                                   settings.perturbation_deg)

    breakdown = model.breakdown(trim.tail_angle_deg, settings.incidence_deg) if args.verbose else None
    print()
    print_trim_report(trim, stability, config=config, breakdown=breakdown,
                      include_banner=False)

    if args.plot:
        import matplotlib.pyplot as plt
        from .visualization.plotting import plot_moment_curve
        lo, hi = table.angle_range
        fig = plot_moment_curve(model, settings.incidence_deg,
                                alpha_range=(lo - settings.incidence_deg, hi - settings.incidence_deg),
                                trim=trim, save_path=args.plot)
        plt.close(fig)

    if incidences is not None:
        sweep = sweep_incidence(model, incidences, settings)

        print()
        print("[3] INCIDENCE SWEEP...")
        print(sweep.to_string(index=False, float_format=lambda v: f"{v:.5f}"))

        if args.sweep_csv:
            sweep.to_csv(args.sweep_csv, index=False)
            print(f"Sweep saved to: {args.sweep_csv}")

        if args.plot:
            import matplotlib.pyplot as plt
            from .visualization.plotting import plot_incidence_sweep
            plot_path = Path(args.plot)
            sweep_path = plot_path.with_name(plot_path.stem + '_sweep.png')
            fig = plot_incidence_sweep(sweep, save_path=str(sweep_path))
            plt.close(fig)

    return EXIT_OK if trim.converged else EXIT_NOT_CONVERGED


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run_analysis(args)
    except TrimAnalysisError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
