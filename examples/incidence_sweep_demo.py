"""
Incidence Sweep Demonstration

Trims the XB aircraft over a range of incidence angles, then plots the
trim tail angle and Cm_alpha against incidence and saves the table.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import sys
import os

# Add package root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vtail_trim.core.moment import VTailMomentModel
from vtail_trim.analysis.sweep import sweep_incidence, incidence_range
from vtail_trim.io.config import EXAMPLE_AIRCRAFT, SolverSettings
from vtail_trim.io.table_reader import load_aero_table
from vtail_trim.visualization.plotting import plot_incidence_sweep, setup_plotting_style


def main():
    print("=" * 70)
    print("Incidence Sweep - XB Aircraft")
    print("=" * 70)
    print()

    setup_plotting_style()

    data_file = os.path.join(os.path.dirname(__file__), '..', 'data', 'datat.txt')
    table = load_aero_table(data_file)
    model = VTailMomentModel(EXAMPLE_AIRCRAFT, table)

    sweep = sweep_incidence(model, incidence_range(-4.0, 6.0, 0.5), SolverSettings())

    print()
    print(sweep.to_string(index=False, float_format=lambda v: f"{v:.5f}"))
    print()

    n_stable = int(sweep['is_stable'].sum())
    print(f"Stable at {n_stable} of {len(sweep)} incidence angles")
    if not sweep['converged'].all():
        print("WARNING: some trim solutions did not converge")

    output_dir = os.path.join(os.path.dirname(__file__), '..', 'output')
    os.makedirs(output_dir, exist_ok=True)

    csv_path = os.path.join(output_dir, 'incidence_sweep.csv')
    sweep.to_csv(csv_path, index=False)
    print(f"Sweep saved to: {csv_path}")

    fig = plot_incidence_sweep(sweep, save_path=os.path.join(output_dir, 'incidence_sweep.png'))
    plt.close(fig)


if __name__ == "__main__":
    main()
