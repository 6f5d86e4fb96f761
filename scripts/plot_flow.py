#!/usr/bin/env python
"""Plot the block-spin coupling k'(k) and constant A(k) for the 6 -> 2 map."""

import argparse
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from renorm_ising.aggregate import count_by_energy, renormalized_coupling
from renorm_ising.records import enumerate_records


def main():
    parser = argparse.ArgumentParser(description="Plot block-spin coupling flow")
    parser.add_argument("-o", "--output", default="flow_plot.png", help="Output image file")
    parser.add_argument("--k-max", type=float, default=2.0, help="Largest |k| plotted")
    parser.add_argument("--points", type=int, default=201, help="Number of k samples")
    parser.add_argument("--table-step", type=float, default=0.25, help="k spacing of printed table")
    args = parser.parse_args()

    equal, unequal = count_by_energy(enumerate_records())

    k = np.linspace(-args.k_max, args.k_max, args.points)
    k_prime, A = renormalized_coupling(k, equal, unequal)

    print(f"{'k':>8} {'k_prime':>12} {'A(k)':>12}")
    print("-" * 34)
    for kt in np.arange(0.0, args.k_max + 1e-9, args.table_step):
        kp, a = renormalized_coupling(kt, equal, unequal)
        print(f"{kt:>8.3f} {float(kp):>12.6f} {float(a):>12.6f}")

    fig, axes = plt.subplots(2, 1, figsize=(7, 8), sharex=True)

    axes[0].plot(k, k_prime, 'b', lw=2, label="k' (majority rule)")
    axes[0].plot(k, k, 'k--', lw=1, label="k' = k")
    axes[0].set_ylabel("k'")
    axes[0].set_title('Block-Spin Coupling, 6 sites → 2 sites')

    axes[1].plot(k, A, 'r', lw=2, label='A(k)')
    axes[1].axhline(np.log(32.0), color='k', ls='--', lw=1, label='ln 32')
    axes[1].set_ylabel('A(k)')
    axes[1].set_xlabel('k')

    for ax in axes:
        ax.legend()
        ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(args.output, dpi=150)
    print(f"Saved plot to {args.output}")


if __name__ == "__main__":
    main()
