"""C1-continuous Hermite shape functions on 1D elements.

The raw family lives on the reference interval [-1, 1]. Functions 0 and 1 are
the value degrees of freedom at the left and right ends, 2 and 3 the slope
degrees of freedom, and every function from 4 onwards is a bubble of the form
``xi^(i-4) (xi^2 - 1)^2 / i!`` that vanishes with its slope at both ends.

The global shape functions rescale the slope functions by ``dx/dxi`` at their
end, so that their degree of freedom is the derivative in the physical
coordinate and adjacent elements join with C1 continuity.
"""

from logging import getLogger

import numpy as np

from .constants import HERMITE_DOF_POINTS
from .errors import (
    ContractViolation,
    RequiresPhysicalElement,
    UnsupportedConfiguration,
)
from .finite_elements import lagrange_shape_deriv, n_shape_functions
from .point import Point
from .reference_elements import ElemType, Order

logger = getLogger(__name__)


def _check_index(i: int):
    if i < 0:
        raise ValueError(f"Invalid Hermite shape function index {i}")


def _high_order_terms(i: int, xi):
    # Accumulate xi^(i-6) and i! from 6! without calling a factorial
    denominator, xipower = 720.0, 1.0
    for n in range(6, i):
        xipower = xipower * xi
        denominator *= n + 1
    return denominator, xipower


def hermite_raw_shape(i: int, xi):
    """Value of raw Hermite function ``i`` at reference coordinate ``xi``.

    :param i: The index of the raw function, any non-negative integer.
    :param xi: The reference coordinate, a float or an array of floats.
    """
    _check_index(i)
    if i == 0:
        return 0.25 * (2.0 - 3.0 * xi + xi * xi * xi)
    if i == 1:
        return 0.25 * (2.0 + 3.0 * xi - xi * xi * xi)
    if i == 2:
        return 0.25 * (1.0 - xi - xi * xi + xi * xi * xi)
    if i == 3:
        return 0.25 * (-1.0 - xi + xi * xi + xi * xi * xi)
    if i == 4:
        return (xi * xi - 1.0) * (xi * xi - 1.0) / 24.0
    if i == 5:
        return xi * (xi * xi - 1.0) * (xi * xi - 1.0) / 120.0

    denominator, xipower = _high_order_terms(i, xi)
    return (xi * xi * xipower * (xi * xi - 1.0) * (xi * xi - 1.0)) / denominator


def hermite_raw_shape_deriv(i: int, xi):
    """First derivative of raw Hermite function ``i`` with respect to ``xi``."""
    _check_index(i)
    if i == 0:
        return 0.75 * (-1.0 + xi * xi)
    if i == 1:
        return 0.75 * (1.0 - xi * xi)
    if i == 2:
        return 0.25 * (-1.0 - 2.0 * xi + 3.0 * xi * xi)
    if i == 3:
        return 0.25 * (-1.0 + 2.0 * xi + 3.0 * xi * xi)
    if i == 4:
        return 4.0 * xi * (xi * xi - 1.0) / 24.0
    if i == 5:
        return (4 * xi * xi * (xi * xi - 1.0) + (xi * xi - 1.0) * (xi * xi - 1.0)) / 120.0

    denominator, xipower = _high_order_terms(i, xi)
    return (
        4 * xi * xi * xi * xipower * (xi * xi - 1.0)
        + (i - 4) * xi * xipower * (xi * xi - 1.0) * (xi * xi - 1.0)
    ) / denominator


def hermite_raw_shape_second_deriv(i: int, xi):
    """Second derivative of raw Hermite function ``i`` with respect to ``xi``."""
    _check_index(i)
    if i == 0:
        return 1.5 * xi
    if i == 1:
        return -1.5 * xi
    if i == 2:
        return 0.5 * (-1.0 + 3.0 * xi)
    if i == 3:
        return 0.5 * (1.0 + 3.0 * xi)
    if i == 4:
        return (8.0 * xi * xi + 4.0 * (xi * xi - 1.0)) / 24.0
    if i == 5:
        return (8.0 * xi * xi * xi + 12.0 * xi * (xi * xi - 1.0)) / 120.0

    denominator, xipower = _high_order_terms(i, xi)
    return (
        8.0 * (xi * xi) * (xi * xi) * xipower
        + (8.0 * (i - 4) + 4.0) * xi * xi * xipower * (xi * xi - 1.0)
        + (i - 4) * (i - 5) * xipower * (xi * xi - 1.0) * (xi * xi - 1.0)
    ) / denominator


_RAW = {
    0: hermite_raw_shape,
    1: hermite_raw_shape_deriv,
    2: hermite_raw_shape_second_deriv,
}


def hermite_compute_coefs(elem) -> tuple[float, float]:
    """Compute the slope scaling coefficients of an element.

    These are ``dx/dxi`` of the element's Lagrange mapping at xi = -1 and
    xi = +1, with no inversion applied.

    :param elem: The physical :class:`~elements.Element`.

    :returns: The pair ``(d1xd1x, d2xd2x)``.

    :raises ContractViolation: If the element's topology and mapping order
        have no Lagrange mapping, or it has too few nodes for one.
    """
    mapping_order = elem.mapping_order()
    mapping_elem_type = elem.topology()
    n_mapping_shape_functions = n_shape_functions(mapping_elem_type, mapping_order)

    if n_mapping_shape_functions == 0:
        logger.error(
            "Element %s has no mapping shape functions of order %s",
            mapping_elem_type.name,
            int(mapping_order),
        )
        raise ContractViolation(
            f"No mapping shape functions for {mapping_elem_type.name}"
        )
    if elem.n_nodes() < n_mapping_shape_functions:
        logger.error(
            "Element %s has %d nodes, expected %d",
            mapping_elem_type.name,
            elem.n_nodes(),
            n_mapping_shape_functions,
        )
        raise ContractViolation(
            f"{mapping_elem_type.name} element has {elem.n_nodes()} nodes, "
            f"expected {n_mapping_shape_functions}"
        )

    dxdxi = []
    for dofpt in HERMITE_DOF_POINTS:
        dxdxi.append(
            sum(
                elem.vertex(i)[0]
                * lagrange_shape_deriv(
                    mapping_elem_type, mapping_order, i, 0, Point(dofpt)
                )
                for i in range(n_mapping_shape_functions)
            )
        )

    return dxdxi[0], dxdxi[1]


# Global dof -> (raw function, index of the scaling coefficient or None)
_CUBIC_EDGE_DOFS = {0: (0, None), 1: (2, 0), 2: (1, None), 3: (3, 1)}

_DOF_TABLES = {
    (Order.THIRD, ElemType.EDGE2): _CUBIC_EDGE_DOFS,
    (Order.THIRD, ElemType.EDGE3): _CUBIC_EDGE_DOFS,
}


def _dof_table(total_order: int, elem_type: ElemType) -> dict:
    total_order = int(total_order)
    try:
        return _DOF_TABLES[(total_order, elem_type)]
    except KeyError:
        pass

    if all(order != total_order for order, _ in _DOF_TABLES):
        logger.error("Unsupported polynomial order %d", total_order)
        raise UnsupportedConfiguration(
            f"Unsupported polynomial order {total_order} for Hermite elements"
        )
    logger.error("Unsupported element type %s", elem_type.name)
    raise UnsupportedConfiguration(
        f"Unsupported element type {elem_type.name} for Hermite elements "
        f"of order {total_order}"
    )


_DOF_TOPOLOGIES = (ElemType.EDGE2, ElemType.EDGE3)


def _check_dof_counts(total_order: int, elem_type: ElemType):
    total_order = int(total_order)
    if total_order < Order.THIRD:
        logger.error("Unsupported polynomial order %d", total_order)
        raise UnsupportedConfiguration(
            f"Unsupported polynomial order {total_order} for Hermite elements"
        )
    if elem_type not in _DOF_TOPOLOGIES:
        logger.error("Unsupported element type %s", elem_type.name)
        raise UnsupportedConfiguration(
            f"Unsupported element type {elem_type.name} for Hermite elements "
            f"of order {total_order}"
        )


def _requires_physical_element():
    logger.error(
        "Hermite elements require the real element "
        "to construct gradient-based degrees of freedom."
    )
    raise RequiresPhysicalElement(
        "Hermite elements require the real element "
        "to construct gradient-based degrees of freedom."
    )


class HermiteElement:
    """The C1 Hermite element on 1D topologies."""

    def __init__(self, order: int = Order.THIRD):
        """Initialise the element.

        :param order: The polynomial order of the element, before p-refinement.
        """
        self.order = order

    def n_dofs(self, elem_type: ElemType, order: int = None) -> int:
        """The number of degrees of freedom on an element."""
        order = self.order if order is None else order
        _check_dof_counts(order, elem_type)
        return order + 1

    def n_dofs_at_node(self, elem_type: ElemType, node: int, order: int = None) -> int:
        """The number of degrees of freedom attached to a node.

        Each vertex carries a value and a slope; the EDGE3 midpoint carries none.
        """
        order = self.order if order is None else order
        _check_dof_counts(order, elem_type)
        if not 0 <= node < elem_type.n_nodes:
            raise ValueError(f"{elem_type.name} has no node {node}")
        return 2 if node < 2 else 0

    def n_dofs_per_elem(self, elem_type: ElemType, order: int = None) -> int:
        """The number of interior (bubble) degrees of freedom."""
        order = self.order if order is None else order
        _check_dof_counts(order, elem_type)
        return order - 3

    def evaluate_reference(self, elem_type: ElemType, i: int, p: Point, deriv: int = 0):
        """Evaluate on the reference element alone, which is impossible.

        :raises RequiresPhysicalElement: Always.
        """
        _requires_physical_element()

    def evaluate_physical(self, elem, i: int, p: Point, deriv: int = 0) -> float:
        """Evaluate global shape function ``i`` of a physical element.

        :param elem: The physical :class:`~elements.Element`.
        :param i: The local index of the shape function.
        :param p: The reference :class:`~point.Point` at which to evaluate.
        :param deriv: 0 for the value, 1 or 2 for the first or second
            derivative with respect to the reference coordinate.

        :returns: The value of the shape function or its derivative.
        """
        if deriv not in _RAW:
            raise ValueError(f"Invalid derivative order {deriv}")
        _check_index(i)

        coefs = hermite_compute_coefs(elem)
        total_order = self.order + elem.p_level()
        dofs = _dof_table(total_order, elem.topology())

        raw = _RAW[deriv]
        if i not in dofs:
            return float(raw(i, p[0]))

        raw_index, coef = dofs[i]
        value = raw(raw_index, p[0])
        if coef is not None:
            value = coefs[coef] * value
        return float(value)

    def tabulate(self, elem, points: np.ndarray, deriv: int = 0) -> np.ndarray:
        """Tabulate the global shape functions at the specified points.

        :param elem: The physical :class:`~elements.Element`.
        :param points: An array of shape (m, 1) containing the reference
            coordinates of the points.
        :param deriv: The order of the derivative to tabulate.

        :returns: An array of shape (m, n_dofs).
        """
        if deriv not in _RAW:
            raise ValueError(f"Invalid derivative order {deriv}")

        xi = np.asarray(points, dtype=np.float64).reshape(-1)
        coefs = hermite_compute_coefs(elem)
        total_order = self.order + elem.p_level()
        dofs = _dof_table(total_order, elem.topology())

        raw = _RAW[deriv]
        table = np.empty((xi.size, total_order + 1))
        for i in range(total_order + 1):
            raw_index, coef = dofs.get(i, (i, None))
            column = raw(raw_index, xi) * np.ones_like(xi)
            table[:, i] = column if coef is None else coefs[coef] * column
        return table


_CUBIC = HermiteElement(Order.THIRD)


def _element(order: int) -> HermiteElement:
    return _CUBIC if order == Order.THIRD else HermiteElement(order)


def shape(elem, order: int, i: int, p: Point) -> float:
    """Value of global Hermite shape function ``i`` at reference point ``p``."""
    return _element(order).evaluate_physical(elem, i, p)


def shape_deriv(elem, order: int, i: int, j: int, p: Point) -> float:
    """Reference derivative of global Hermite shape function ``i``.

    :param j: The reference direction of the derivative, only 0 in 1D.
    """
    if j != 0:
        raise ValueError(f"1D elements have no derivative in direction {j}")
    return _element(order).evaluate_physical(elem, i, p, deriv=1)


def shape_second_deriv(elem, order: int, i: int, j: int, p: Point) -> float:
    """Second reference derivative of global Hermite shape function ``i``.

    :param j: The index of the second derivative, only 0 in 1D.
    """
    if j != 0:
        raise ValueError(f"1D elements have no second derivative {j}")
    return _element(order).evaluate_physical(elem, i, p, deriv=2)


def reference_shape(elem_type: ElemType, order: int, i: int, p: Point) -> float:
    """Hermite shape functions cannot be evaluated without the physical element.

    :raises RequiresPhysicalElement: Always.
    """
    return _element(order).evaluate_reference(elem_type, i, p)


def reference_shape_deriv(
    elem_type: ElemType, order: int, i: int, j: int, p: Point
) -> float:
    """See :func:`reference_shape`.

    :raises RequiresPhysicalElement: Always.
    """
    return _element(order).evaluate_reference(elem_type, i, p, deriv=1)


def reference_shape_second_deriv(
    elem_type: ElemType, order: int, i: int, j: int, p: Point
) -> float:
    """See :func:`reference_shape`.

    :raises RequiresPhysicalElement: Always.
    """
    return _element(order).evaluate_reference(elem_type, i, p, deriv=2)
