#! /usr/bin/env python
from fecore.elements import Element
from fecore.hermite import HermiteElement
from fecore.reference_elements import ElemType
from argparse import ArgumentParser
import logging
import matplotlib.pyplot as plt
import numpy as np

LABELS = [r"$u(x_1)$", r"$u'(x_1)$", r"$u(x_2)$", r"$u'(x_2)$"]


def plot_hermite_basis():
    parser = ArgumentParser()
    parser.add_help = """Plot the cubic Hermite basis on a single element."""
    parser.add_argument("x1", type=float, help="Left end of the element.")
    parser.add_argument("x2", type=float, help="Right end of the element.")
    parser.add_argument(
        "--deriv", type=int, choices=[0, 1, 2], default=0, help="Derivative to plot."
    )
    parser.add_argument(
        "--points", type=int, default=101, help="Number of sample points."
    )
    parser.add_argument("--output", type=str, help="Save the figure to this path.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    elem = Element(ElemType.EDGE2, [args.x1, args.x2])
    fe = HermiteElement()

    xi = np.linspace(-1.0, 1.0, args.points)
    phi = fe.tabulate(elem, xi[:, np.newaxis], deriv=args.deriv)

    # Map the sample points onto the physical element
    x = args.x1 + (xi + 1.0) * (args.x2 - args.x1) / 2.0

    fig, ax = plt.subplots(figsize=(8, 5))
    for i in range(phi.shape[1]):
        ax.plot(x, phi[:, i], label=LABELS[i] if i < len(LABELS) else f"$\\phi_{i}$")
    ax.axhline(0.0, color="k", lw=0.5)
    ax.set_xlabel(r"$x$")
    ax.set_ylabel(r"$\phi$" if args.deriv == 0 else rf"$d^{args.deriv}\phi/d\xi^{args.deriv}$")
    ax.set_title("Cubic Hermite basis")
    ax.legend()

    if args.output:
        fig.savefig(args.output, dpi=300)
    else:
        plt.show()


if __name__ == "__main__":
    plot_hermite_basis()
