"""Physical elements: the geometry consumed by the shape function evaluators."""

import numpy as np

from .point import Point
from .reference_elements import ElemType, Order


class Element:
    """A physical element.

    Any object providing ``topology``, ``mapping_order``, ``p_level``,
    ``n_nodes``, ``vertex`` and ``centroid`` can be passed wherever an
    :class:`Element` is expected.
    """

    def __init__(self, elem_type: ElemType, nodes, p_level: int = 0):
        """Initialise the element.

        :param elem_type: The :class:`~reference_elements.ElemType` of the element.
        :param nodes: The physical coordinates of the nodes, in the node order of
            ``elem_type``. Each entry is a :class:`~point.Point`, a scalar or a
            sequence of up to three coordinates.
        :param p_level: The p-refinement level of the element.
        """
        if p_level < 0:
            raise ValueError(f"Invalid p-level {p_level}")

        self._elem_type = elem_type
        self._nodes = tuple(self._to_point(x) for x in nodes)
        self._p_level = p_level

    @staticmethod
    def _to_point(x) -> Point:
        if isinstance(x, Point):
            return x
        return Point.from_array(x)

    def topology(self) -> ElemType:
        return self._elem_type

    def mapping_order(self) -> Order:
        """The order of the geometric mapping, the default order of the topology."""
        return self._elem_type.default_order

    def p_level(self) -> int:
        return self._p_level

    def n_nodes(self) -> int:
        return len(self._nodes)

    def vertex(self, i: int) -> Point:
        return self._nodes[i]

    def centroid(self) -> Point:
        """The arithmetic mean of the element's nodes."""
        return Point.from_array(np.mean([np.asarray(x) for x in self._nodes], axis=0))

    def __repr__(self):
        return f"Element({self._elem_type.name}, {list(self._nodes)})"


def uniform_edge_mesh(
    n_elems: int,
    a: float = 0.0,
    b: float = 1.0,
    elem_type: ElemType = ElemType.EDGE2,
) -> list[Element]:
    """Split the interval [a, b] into equal 1D elements.

    :param n_elems: The number of elements.
    :param a: The left end of the interval.
    :param b: The right end of the interval.
    :param elem_type: EDGE2, EDGE3 or EDGE4.

    :returns: A list of :class:`Element`, ordered from left to right.
    """
    if elem_type.dim != 1:
        raise ValueError(f"Element type {elem_type.name} is not 1D")

    vertices = np.linspace(a, b, n_elems + 1)
    n_interior = elem_type.n_nodes - 2

    elements = []
    for left, right in zip(vertices[:-1], vertices[1:]):
        interior = np.linspace(left, right, n_interior + 2)[1:-1]
        elements.append(Element(elem_type, [left, right, *interior]))

    return elements
