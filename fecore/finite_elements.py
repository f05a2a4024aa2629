"""Lagrange finite elements on the reference interval.

These provide the geometric mapping of 1D elements: the physical coordinate
is interpolated from the element nodes with the Lagrange basis of the
element's mapping order.
"""

from functools import lru_cache
from logging import getLogger
from typing import Callable

import numpy as np

from .errors import ContractViolation
from .point import Point
from .reference_elements import ElemType, Order, ReferenceCell, ReferenceInterval

logger = getLogger(__name__)

# Number of mapping shape functions per (element type, mapping order)
_N_SHAPE_FUNCTIONS = {
    (ElemType.EDGE2, Order.FIRST): 2,
    (ElemType.EDGE3, Order.FIRST): 2,
    (ElemType.EDGE4, Order.FIRST): 2,
    (ElemType.EDGE3, Order.SECOND): 3,
    (ElemType.EDGE4, Order.THIRD): 4,
}


def lagrange_points(cell: ReferenceCell, degree: int) -> np.ndarray:
    """Construct the locations of the Lagrange points on the reference interval.

    The vertices come first, followed by the equispaced interior points in
    increasing order, matching the node numbering of EDGE2, EDGE3 and EDGE4.

    :param cell: The :class:.`~reference_elements.ReferenceCell` to use.
    :param degree: The degree of the polynomials.

    :returns: An array of shape (degree + 1, 1) containing the coordinates of
        the Lagrange points.
    """
    if cell is not ReferenceInterval:
        raise ValueError("Unknown reference cell")

    interior = np.linspace(-1.0, 1.0, degree + 1)[1:-1]
    return np.concatenate([cell.vertices[:, 0], interior]).reshape(-1, 1)


def vandermonde_matrix(
    cell: ReferenceCell, degree: int, points: list, grad: int = 0
) -> np.ndarray:
    """Construct the Vandermonde matrix (or its derivatives) of the monomials.

    Adapted from an implementation of `fe_utils
        <https://github.com/Imperial-MATH60022/finite-element-2022-NiallOswald>`.

    :param cell: The :class:.`~reference_elements.ReferenceCell` to use.
    :param degree: The degree of the polynomials.
    :param points: An array of shape (m, 1) containing the coordinates of the points
        at which to evaluate the Vandermonde matrix.
    :param grad: The order of the derivative to take, 0 for the matrix itself.

    :returns: An array of shape (m, degree + 1).
    """
    if cell is not ReferenceInterval:
        raise ValueError("Unknown reference cell")

    # Cast points to a np.ndarray
    points = np.array(points, dtype=np.float64).reshape(-1, 1)

    i_p = np.arange(degree + 1).reshape(1, degree + 1)

    # Falling factorial i (i - 1) ... (i - grad + 1) from differentiating x^i
    coefs = np.ones_like(i_p, dtype=np.float64)
    for k in range(grad):
        coefs = coefs * (i_p - k)

    powers = np.maximum(i_p - grad, 0)
    return coefs * points**powers


class FiniteElement:
    """A finite element on a reference cell."""

    def __init__(self, cell: ReferenceCell, degree: int, nodes: np.ndarray):
        """Initialise the finite element.

        :param cell: The :class:.`~reference_elements.ReferenceCell` of the finite
            element.
        :param degree: The degree of the finite element.
        :param nodes: An array of shape (n, 1) containing the coordinates of the nodes
            of the finite element.
        """
        self.cell = cell
        self.degree = degree
        self.nodes = nodes

        # Compute the coefficients of the basis functions
        self.basis_coefs = np.linalg.inv(vandermonde_matrix(cell, degree, nodes))
        self.basis_coefs.setflags(write=False)

    def tabulate(self, points: np.ndarray, grad: int = 0) -> np.ndarray:
        """Tabulate the basis functions at the specified points.

        Adapted from an implementation of `fe_utils
            <https://github.com/Imperial-MATH60022/finite-element-2022-NiallOswald>`.

        :param points: An array of shape (m, 1) containing the coordinates of the
            points at which to evaluate the basis functions.
        :param grad: The order of the derivative to tabulate.

        :returns: An array of shape (m, n) containing the basis functions (or
            their derivatives) at each point.
        """
        return np.einsum(
            "ib,bj->ij",
            vandermonde_matrix(self.cell, self.degree, points, grad),
            self.basis_coefs,
            optimize=True,
        )

    def interpolate(self, fn: Callable) -> np.ndarray:
        """Interpolate the specified function onto the nodes of a finite element.

        :param fn: A function that takes a point and returns a scalar value.

        :returns: An array of shape (n,) containing the basis function coefficients.
        """
        return np.array([fn(node) for node in self.nodes])


class LagrangeElement(FiniteElement):
    """A Lagrange finite element on a reference cell."""

    def __init__(self, cell: ReferenceCell, degree: int):
        """Initialise the finite element.

        :param cell: The :class:.`~reference_elements.ReferenceCell` of the finite
            element.
        :param degree: The degree of the finite element.
        """
        nodes = lagrange_points(cell, degree)

        super(LagrangeElement, self).__init__(cell, degree, nodes)


@lru_cache(maxsize=None)
def _lagrange_element(degree: int) -> LagrangeElement:
    return LagrangeElement(ReferenceInterval, degree)


def n_shape_functions(elem_type: ElemType, order: int) -> int:
    """The number of Lagrange mapping shape functions of an element.

    :param elem_type: The :class:`~reference_elements.ElemType` of the element.
    :param order: The mapping order.

    :returns: The number of shape functions, 0 if the pair is not supported.
    """
    return _N_SHAPE_FUNCTIONS.get((elem_type, order), 0)


def _check_supported(elem_type: ElemType, order: int, i: int) -> int:
    n = n_shape_functions(elem_type, order)
    if n == 0:
        logger.error(
            "No Lagrange mapping of order %s on %s", int(order), elem_type.name
        )
        raise ContractViolation(
            f"Unsupported mapping order {int(order)} for {elem_type.name}"
        )
    if not 0 <= i < n:
        raise ValueError(f"Shape function index {i} out of range for {n} functions")
    return n


def lagrange_shape(elem_type: ElemType, order: int, i: int, p: Point) -> float:
    """Evaluate a Lagrange mapping shape function on the reference interval.

    :param elem_type: The :class:`~reference_elements.ElemType` of the element.
    :param order: The mapping order.
    :param i: The local index of the shape function.
    :param p: The reference :class:`~point.Point`.

    :returns: The value of shape function ``i`` at ``p``.
    """
    _check_supported(elem_type, order, i)
    return float(_lagrange_element(int(order)).tabulate([[p[0]]])[0, i])


def lagrange_shape_deriv(
    elem_type: ElemType, order: int, i: int, j: int, p: Point
) -> float:
    """Evaluate the derivative of a Lagrange mapping shape function.

    :param elem_type: The :class:`~reference_elements.ElemType` of the element.
    :param order: The mapping order.
    :param i: The local index of the shape function.
    :param j: The reference direction of the derivative, only 0 in 1D.
    :param p: The reference :class:`~point.Point`.

    :returns: The derivative of shape function ``i`` with respect to the
        reference coordinate at ``p``.
    """
    if j != 0:
        raise ValueError(f"1D elements have no derivative in direction {j}")
    _check_supported(elem_type, order, i)
    return float(_lagrange_element(int(order)).tabulate([[p[0]]], grad=1)[0, i])
