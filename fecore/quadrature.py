"""Gauss quadrature rules for reference elements."""

from logging import getLogger
from typing import Callable

from numpy.polynomial.legendre import leggauss
from scipy.special import roots_jacobi
import numpy as np

from .constants import DEFAULT_DIM_TOPOLOGY, DEFAULT_QUADRATURE_ORDER
from .errors import UnsupportedTopology
from .point import Point
from .reference_elements import (
    ElemType,
    Order,
    ReferenceCell,
    ReferenceHexahedron,
    ReferenceInterval,
    ReferencePoint,
    ReferencePrism,
    ReferencePyramid,
    ReferenceQuadrilateral,
    ReferenceTetrahedron,
    ReferenceTriangle,
    reference_cell,
)

logger = getLogger(__name__)

EDGE_TYPES = (ElemType.EDGE2, ElemType.EDGE3, ElemType.EDGE4)
TRI_TYPES = (ElemType.TRI3, ElemType.TRI6)
QUAD_TYPES = (ElemType.QUAD4, ElemType.QUAD8, ElemType.QUAD9)
TET_TYPES = (ElemType.TET4, ElemType.TET10)
HEX_TYPES = (ElemType.HEX8, ElemType.HEX20, ElemType.HEX27)
PRISM_TYPES = (ElemType.PRISM6, ElemType.PRISM15, ElemType.PRISM18)
PYRAMID_TYPES = (ElemType.PYRAMID5,)


def n_gauss_points(degree: int) -> int:
    """The number of Gauss points needed to integrate a polynomial exactly.

    An n-point Gauss rule is exact up to degree 2n - 1.
    """
    return degree // 2 + 1


def _gauss_jacobi_01(degree: int, alpha: int) -> tuple[np.ndarray, np.ndarray]:
    """Gauss-Jacobi rule on [0, 1] for the weight function (1 - x)^alpha."""
    points, weights = roots_jacobi(n_gauss_points(degree), alpha, 0.0)

    # Map the quadrature points from [-1, 1] to [0, 1]
    points = (points + 1.0) / 2.0
    weights = weights / 2.0 ** (alpha + 1)

    return points, weights


def gauss_quadrature(cell: ReferenceCell, degree: int) -> tuple[np.ndarray, np.ndarray]:
    """Compute the Gauss quadrature points and weights.

    Simplices and the pyramid use conical product rules: the cell is collapsed
    onto a cube by a Duffy transform and the collapsed directions are
    integrated with Gauss-Jacobi rules that absorb its Jacobian.

    :param cell: The :class:.`~reference_elements.ReferenceCell` on which to compute
        the quadrature points.
    :param degree: The degree of the quadrature rule.

    :returns: A tuple containing the quadrature points, an array of shape
        (n, cell.dim), and the weights, an array of shape (n,).
    """

    if cell is ReferencePoint:
        points = np.zeros((1, 0))
        weights = np.ones(1)

    elif cell is ReferenceInterval:
        points, weights = leggauss(n_gauss_points(degree))

        points.shape = [points.shape[0], 1]

    elif cell is ReferenceQuadrilateral:
        p1, w1 = gauss_quadrature(ReferenceInterval, degree)

        points = np.array([(x[0], y[0]) for y in p1 for x in p1])
        weights = np.array([wx * wy for wy in w1 for wx in w1])

    elif cell is ReferenceHexahedron:
        p1, w1 = gauss_quadrature(ReferenceInterval, degree)

        points = np.array([(x[0], y[0], z[0]) for z in p1 for y in p1 for x in p1])
        weights = np.array([wx * wy * wz for wz in w1 for wy in w1 for wx in w1])

    elif cell is ReferenceTriangle:
        # Compute the quadrature points using the Duffy transform
        pu, wu = _gauss_jacobi_01(degree, 1)
        pv, wv = gauss_quadrature(ReferenceInterval, degree)
        pv, wv = (pv[:, 0] + 1.0) / 2.0, wv / 2.0

        points = np.array([(u, v * (1.0 - u)) for u in pu for v in pv])
        weights = np.array([a * b for a in wu for b in wv])

    elif cell is ReferenceTetrahedron:
        pu, wu = _gauss_jacobi_01(degree, 2)
        pv, wv = _gauss_jacobi_01(degree, 1)
        pw, ww = gauss_quadrature(ReferenceInterval, degree)
        pw, ww = (pw[:, 0] + 1.0) / 2.0, ww / 2.0

        points = np.array(
            [
                (u, v * (1.0 - u), w * (1.0 - u) * (1.0 - v))
                for u in pu
                for v in pv
                for w in pw
            ]
        )
        weights = np.array([a * b * c for a in wu for b in wv for c in ww])

    elif cell is ReferencePrism:
        pt, wt = gauss_quadrature(ReferenceTriangle, degree)
        pz, wz = gauss_quadrature(ReferenceInterval, degree)

        points = np.array([(x, y, z[0]) for z in pz for x, y in pt])
        weights = np.array([a * b for b in wz for a in wt])

    elif cell is ReferencePyramid:
        # Collapse the square [-1, 1]^2 linearly onto the apex as z -> 1
        p1, w1 = gauss_quadrature(ReferenceInterval, degree)
        pz, wz = _gauss_jacobi_01(degree, 2)

        points = np.array(
            [
                (x[0] * (1.0 - z), y[0] * (1.0 - z), z)
                for z in pz
                for y in p1
                for x in p1
            ]
        )
        weights = np.array([wx * wy * c for c in wz for wy in w1 for wx in w1])

    else:
        raise ValueError("Unknown reference cell")

    return points, weights


class QuadratureRule:
    """An immutable, ordered sequence of (point, weight) pairs.

    The weights sum to the measure of the reference cell, and the rule
    integrates every polynomial of total degree up to ``order + 2 * p_level``
    exactly.
    """

    def __init__(
        self,
        dim: int,
        elem_type: ElemType,
        order: int,
        points: np.ndarray,
        weights: np.ndarray,
        p_level: int = 0,
    ):
        self._dim = dim
        self._elem_type = elem_type
        self._order = order
        self._p_level = p_level

        self._points = np.array(points, dtype=np.float64).reshape(len(weights), dim)
        self._weights = np.array(weights, dtype=np.float64)
        self._points.setflags(write=False)
        self._weights.setflags(write=False)

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def elem_type(self) -> ElemType:
        return self._elem_type

    @property
    def order(self) -> int:
        return self._order

    @property
    def p_level(self) -> int:
        return self._p_level

    def n_points(self) -> int:
        return len(self._weights)

    def get_points(self) -> np.ndarray:
        """The quadrature points as a read-only array of shape (n, dim)."""
        return self._points

    def get_weights(self) -> np.ndarray:
        """The quadrature weights as a read-only array of shape (n,)."""
        return self._weights

    def qp(self, i: int) -> Point:
        return Point.from_array(self._points[i])

    def w(self, i: int) -> float:
        return float(self._weights[i])

    def __len__(self):
        return self.n_points()

    def __getitem__(self, i: int) -> tuple[Point, float]:
        return self.qp(i), self.w(i)

    def __iter__(self):
        return (self[i] for i in range(self.n_points()))

    def __repr__(self):
        return (
            f"QuadratureRule(dim={self._dim}, elem_type={self._elem_type.name}, "
            f"order={self._order}, n_points={self.n_points()})"
        )

    def integrate(self, fn: Callable) -> float:
        """Apply the rule to a function of the reference coordinates.

        :param fn: A function that takes an array of shape (dim,) and returns a
            scalar value.

        :returns: The weighted sum of ``fn`` over the quadrature points.
        """
        values = np.array([fn(x) for x in self._points], dtype=np.float64)
        return float(np.dot(values, self._weights))

    def scale(
        self, old_range: tuple[float, float], new_range: tuple[float, float]
    ) -> "QuadratureRule":
        """Map a 1D rule affinely from one interval onto another.

        :param old_range: The interval the rule currently integrates over.
        :param new_range: The interval to map the rule onto.

        :returns: A new :class:`QuadratureRule` on ``new_range``.
        """
        if self._dim != 1:
            raise ValueError("Only 1D quadrature rules can be scaled")

        a, b = old_range
        c, d = new_range
        if a == b:
            raise ValueError("Cannot scale from a degenerate interval")
        ratio = (d - c) / (b - a)

        return QuadratureRule(
            self._dim,
            self._elem_type,
            self._order,
            (self._points - a) * ratio + c,
            self._weights * ratio,
            self._p_level,
        )


def _init_0d(elem_type: ElemType, degree: int) -> tuple[np.ndarray, np.ndarray]:
    if elem_type is not ElemType.NODEELEM:
        raise UnsupportedTopology(f"Element type {elem_type.name} is not 0D")
    return gauss_quadrature(ReferencePoint, degree)


def _init_1d(elem_type: ElemType, degree: int) -> tuple[np.ndarray, np.ndarray]:
    # Every 1D topology shares the EDGE2 rule, so build it before checking
    points, weights = gauss_quadrature(ReferenceInterval, degree)
    if elem_type not in EDGE_TYPES:
        raise UnsupportedTopology(f"Element type {elem_type.name} is not 1D")
    return points, weights


def _init_2d(elem_type: ElemType, degree: int) -> tuple[np.ndarray, np.ndarray]:
    if elem_type not in QUAD_TYPES + TRI_TYPES:
        raise UnsupportedTopology(f"Element type {elem_type.name} is not 2D")
    return gauss_quadrature(reference_cell(elem_type), degree)


def _init_3d(elem_type: ElemType, degree: int) -> tuple[np.ndarray, np.ndarray]:
    if elem_type not in HEX_TYPES + TET_TYPES + PRISM_TYPES + PYRAMID_TYPES:
        raise UnsupportedTopology(f"Element type {elem_type.name} is not 3D")
    return gauss_quadrature(reference_cell(elem_type), degree)


_INITIALISERS = {0: _init_0d, 1: _init_1d, 2: _init_2d, 3: _init_3d}


def generate(
    dim: int,
    elem_type: ElemType = ElemType.INVALID_ELEM,
    order: int = Order.INVALID_ORDER,
    p_level: int = 0,
    default_order: int = None,
) -> QuadratureRule:
    """Generate the Gauss quadrature rule for a reference element.

    :param dim: The dimension of the reference element.
    :param elem_type: The :class:`~reference_elements.ElemType` of the element.
        ``ElemType.INVALID_ELEM`` selects the default topology of ``dim``.
    :param order: The polynomial degree the rule must integrate exactly.
        ``Order.INVALID_ORDER`` (or None) selects ``default_order``.
    :param p_level: The p-refinement level; each level raises the degree by 2.
    :param default_order: The order to use when none is given. Falls back to
        :data:`~constants.DEFAULT_QUADRATURE_ORDER`.

    :returns: The :class:`QuadratureRule`.

    :raises UnsupportedTopology: If there is no rule for ``(dim, elem_type)``.
    """
    if order is None or order == Order.INVALID_ORDER:
        order = DEFAULT_QUADRATURE_ORDER if default_order is None else default_order
    if order < 0 or p_level < 0:
        raise ValueError(f"Invalid quadrature order {order} at p-level {p_level}")

    if dim not in _INITIALISERS:
        logger.error("No quadrature rules in %d dimensions", dim)
        raise UnsupportedTopology(f"Unsupported dimension {dim}")

    if elem_type is ElemType.INVALID_ELEM:
        elem_type = DEFAULT_DIM_TOPOLOGY[dim]

    degree = int(order) + 2 * p_level
    try:
        points, weights = _INITIALISERS[dim](elem_type, degree)
    except UnsupportedTopology:
        logger.error("No %dD quadrature rule for %s", dim, elem_type.name)
        raise

    logger.debug(
        "Generated %dD rule for %s of degree %d with %d points",
        dim,
        elem_type.name,
        degree,
        len(weights),
    )

    return QuadratureRule(dim, elem_type, int(order), points, weights, p_level)
