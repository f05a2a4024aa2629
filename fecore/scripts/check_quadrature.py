#! /usr/bin/env python
from fecore.quadrature import generate
from fecore.reference_elements import ElemType, reference_cell
from fecore.utils import monomials, quadrature_error
from alive_progress import alive_bar
from argparse import ArgumentParser
import logging
import pandas as pd
import sys

DEFAULT_ELEM_TYPES = ["EDGE2", "TRI3", "QUAD4", "TET4", "HEX8", "PRISM6", "PYRAMID5"]


def check_exactness(elem_type: ElemType, max_order: int) -> pd.DataFrame:
    """Compute the worst monomial error of each rule up to ``max_order``."""
    cell = reference_cell(elem_type)

    rows = []
    with alive_bar(max_order + 1, title=elem_type.name) as bar:
        for order in range(max_order + 1):
            rule = generate(elem_type.dim, elem_type, order)
            error = max(
                quadrature_error(rule, cell, powers)
                for powers in monomials(elem_type.dim, order)
            )
            rows.append(
                {
                    "order": order,
                    "n_points": rule.n_points(),
                    "weight_sum": rule.get_weights().sum(),
                    "max_error": error,
                }
            )
            bar()

    return pd.DataFrame(rows)


def check_quadrature():
    parser = ArgumentParser()
    parser.add_help = """Check that the Gauss rules integrate monomials exactly."""
    parser.add_argument(
        "elem_types",
        nargs="*",
        default=None,
        help="The element types to check.",
    )
    parser.add_argument("--max-order", type=int, default=10, help="Highest order.")
    parser.add_argument("--tol", type=float, default=1e-12, help="Error tolerance.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output.")
    args = parser.parse_args()
    elem_types = args.elem_types or DEFAULT_ELEM_TYPES
    for name in elem_types:
        if name not in ElemType.__members__ or ElemType[name].dim < 0:
            parser.error(f"invalid element type: {name}")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    failed = False
    for name in elem_types:
        table = check_exactness(ElemType[name], args.max_order)
        print(table.to_string(index=False))
        failed |= bool((table["max_error"] > args.tol).any())

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    check_quadrature()
