"""Utilities for checking quadrature rules against exact integrals."""

from itertools import product
from math import factorial

import numpy as np

from .quadrature import QuadratureRule
from .reference_elements import (
    ReferenceCell,
    ReferenceHexahedron,
    ReferenceInterval,
    ReferencePoint,
    ReferencePrism,
    ReferencePyramid,
    ReferenceQuadrilateral,
    ReferenceTetrahedron,
    ReferenceTriangle,
)


def _interval(a: int) -> float:
    """Integral of x^a over [-1, 1]."""
    return 0.0 if a % 2 else 2.0 / (a + 1)


def monomial_integral(cell: ReferenceCell, powers: tuple) -> float:
    """Exact integral of a monomial over a reference cell.

    :param cell: The :class:.`~reference_elements.ReferenceCell`.
    :param powers: The exponents of x, y and z, one per dimension of the cell.

    :returns: The integral of ``x^a y^b z^c`` over the cell.
    """
    if len(powers) != cell.dim:
        raise ValueError(f"Expected {cell.dim} exponents, got {len(powers)}")

    if cell is ReferencePoint:
        return 1.0
    if cell is ReferenceInterval:
        return _interval(*powers)
    if cell is ReferenceQuadrilateral or cell is ReferenceHexahedron:
        return float(np.prod([_interval(a) for a in powers]))
    if cell is ReferenceTriangle:
        a, b = powers
        return factorial(a) * factorial(b) / factorial(a + b + 2)
    if cell is ReferenceTetrahedron:
        a, b, c = powers
        return factorial(a) * factorial(b) * factorial(c) / factorial(a + b + c + 3)
    if cell is ReferencePrism:
        a, b, c = powers
        return monomial_integral(ReferenceTriangle, (a, b)) * _interval(c)
    if cell is ReferencePyramid:
        # The square cross-section at height z has half-width (1 - z)
        a, b, c = powers
        return (
            _interval(a)
            * _interval(b)
            * factorial(c)
            * factorial(a + b + 2)
            / factorial(a + b + c + 3)
        )

    raise ValueError("Unknown reference cell")


def monomials(dim: int, degree: int):
    """Yield the exponents of every monomial of total degree at most ``degree``."""
    for powers in product(range(degree + 1), repeat=dim):
        if sum(powers) <= degree:
            yield powers


def quadrature_error(rule: QuadratureRule, cell: ReferenceCell, powers: tuple) -> float:
    """Absolute error of a rule applied to a single monomial.

    :param rule: The :class:`~quadrature.QuadratureRule` to check.
    :param cell: The reference cell the rule integrates over.
    :param powers: The exponents of the monomial.

    :returns: The absolute difference from the exact integral.
    """
    values = np.prod(rule.get_points() ** np.array(powers), axis=1)
    approx = np.dot(values, rule.get_weights())
    return abs(approx - monomial_integral(cell, powers))
