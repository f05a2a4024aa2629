#! /usr/bin/env python
from fecore.quadrature import generate
from fecore.reference_elements import ElemType
from argparse import ArgumentParser
import logging
import pandas as pd
from pathlib import Path

AXES = ["x", "y", "z"]


def quadrature_table(rule) -> pd.DataFrame:
    """Collect the points and weights of a rule into a data frame."""
    points = rule.get_points()
    table = pd.DataFrame({AXES[d]: points[:, d] for d in range(rule.dim)})
    table["weight"] = rule.get_weights()
    return table


def tabulate_quadrature():
    parser = ArgumentParser()
    parser.add_help = """Write a Gauss quadrature rule to a CSV file."""
    parser.add_argument(
        "elem_type", choices=[t.name for t in ElemType if t.dim >= 0], help="The element type."
    )
    parser.add_argument("order", type=int, help="The order of the rule.")
    parser.add_argument("--p-level", type=int, default=0, help="The p-refinement level.")
    parser.add_argument(
        "--output", type=str, default=None, help="Path of the CSV file to write."
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    elem_type = ElemType[args.elem_type]
    rule = generate(elem_type.dim, elem_type, args.order, p_level=args.p_level)
    table = quadrature_table(rule)

    if args.output is None:
        print(table.to_string(index=False))
    else:
        path = Path(args.output)
        path.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(path, index=False)


if __name__ == "__main__":
    tabulate_quadrature()
