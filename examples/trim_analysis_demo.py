"""
V-Tail Trim Demonstration

Demonstrates:
- Loading the tail Cm_ac table and aircraft configuration
- Newton-Raphson trim of the pitching moment
- Static stability check about the trim point
- Moment breakdown and Cm vs alpha plot
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import sys
import os

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vtail_trim.core.moment import VTailMomentModel
from vtail_trim.control.trim import TrimSolver
from vtail_trim.analysis.stability import StabilityEvaluator
from vtail_trim.io.config import load_aircraft_config
from vtail_trim.io.table_reader import load_aero_table
from vtail_trim.reporting import print_trim_report
from vtail_trim.visualization.plotting import plot_moment_curve


def main():
    print("=" * 70)
    print("V-Tail Trim Demonstration - XB Aircraft")
    print("=" * 70)
    print()

    data_dir = os.path.join(os.path.dirname(__file__), '..', 'data')

    # ========================================
    # Aircraft Setup
    # ========================================
    config, settings = load_aircraft_config(os.path.join(data_dir, 'xb.yaml'))
    table = load_aero_table(os.path.join(data_dir, 'datat.txt'))
    model = VTailMomentModel(config, table)

    print(f"Aircraft: {config.name}")
    print(f"  Dihedral: {config.dihedral_deg:.2f} deg")
    print(f"  Tail table: {table}")
    print()

    # ========================================
    # Trim
    # ========================================
    print("Trimming (Newton-Raphson)...")
    solver = TrimSolver.from_settings(model, settings)
    trim = solver.solve(initial_guess=settings.initial_guess_deg,
                        tolerance=settings.tolerance,
                        max_iterations=settings.max_iterations,
                        incidence_deg=settings.incidence_deg,
                        verbose=True)
    print()

    # ========================================
    # Static Stability
    # ========================================
    stability = StabilityEvaluator(model).evaluate(trim,
                                                   settings.incidence_deg,
                                                   settings.perturbation_deg)

    breakdown = model.breakdown(trim.tail_angle_deg, settings.incidence_deg)
    print_trim_report(trim, stability, config=config, breakdown=breakdown)
    print()

    # ========================================
    # Plot
    # ========================================
    output_dir = os.path.join(os.path.dirname(__file__), '..', 'output')
    os.makedirs(output_dir, exist_ok=True)

    fig = plot_moment_curve(model, settings.incidence_deg, alpha_range=(-12.0, 12.0),
                            trim=trim, save_path=os.path.join(output_dir, 'cm_vs_alpha.png'))
    plt.close(fig)


if __name__ == "__main__":
    main()
