"""Reference elements for finite elements."""

from enum import Enum, IntEnum
import numpy as np


class Order(IntEnum):
    """Polynomial order of a quadrature rule or a finite element."""

    INVALID_ORDER = -1
    CONSTANT = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    SIXTH = 6
    SEVENTH = 7
    EIGHTH = 8
    NINTH = 9
    TENTH = 10
    ELEVENTH = 11
    TWELFTH = 12
    THIRTEENTH = 13
    FOURTEENTH = 14
    FIFTEENTH = 15
    SIXTEENTH = 16
    SEVENTEENTH = 17
    EIGHTEENTH = 18
    NINETEENTH = 19
    TWENTIETH = 20
    TWENTYFIRST = 21
    TWENTYSECOND = 22
    TWENTYTHIRD = 23
    TWENTYFOURTH = 24
    TWENTYFIFTH = 25
    TWENTYSIXTH = 26
    TWENTYSEVENTH = 27
    TWENTYEIGHTH = 28
    TWENTYNINTH = 29
    THIRTIETH = 30
    THIRTYFIRST = 31
    THIRTYSECOND = 32
    THIRTYTHIRD = 33
    THIRTYFOURTH = 34
    THIRTYFIFTH = 35
    THIRTYSIXTH = 36
    THIRTYSEVENTH = 37
    THIRTYEIGHTH = 38
    THIRTYNINTH = 39
    FORTIETH = 40
    FORTYFIRST = 41
    FORTYSECOND = 42
    FORTYTHIRD = 43


class ElemType(Enum):
    """Topology of an element, as (dimension, number of nodes, default order)."""

    NODEELEM = (0, 1, Order.CONSTANT)
    EDGE2 = (1, 2, Order.FIRST)
    EDGE3 = (1, 3, Order.SECOND)
    EDGE4 = (1, 4, Order.THIRD)
    TRI3 = (2, 3, Order.FIRST)
    TRI6 = (2, 6, Order.SECOND)
    QUAD4 = (2, 4, Order.FIRST)
    QUAD8 = (2, 8, Order.SECOND)
    QUAD9 = (2, 9, Order.SECOND)
    TET4 = (3, 4, Order.FIRST)
    TET10 = (3, 10, Order.SECOND)
    HEX8 = (3, 8, Order.FIRST)
    HEX20 = (3, 20, Order.SECOND)
    HEX27 = (3, 27, Order.SECOND)
    PRISM6 = (3, 6, Order.FIRST)
    PRISM15 = (3, 15, Order.SECOND)
    PRISM18 = (3, 18, Order.SECOND)
    PYRAMID5 = (3, 5, Order.FIRST)
    INVALID_ELEM = (-1, 0, Order.INVALID_ORDER)

    @property
    def dim(self) -> int:
        return self.value[0]

    @property
    def n_nodes(self) -> int:
        return self.value[1]

    @property
    def default_order(self) -> Order:
        return self.value[2]


class ReferenceCell:
    """A reference cell."""

    def __init__(self, name: str, vertices: np.ndarray, measure: float):
        """Initialise the reference cell.

        :param name: A short name for the cell.
        :param vertices: An array of shape (n, d) containing the vertices of the cell.
        :param measure: The length, area or volume of the cell.
        """
        self.name = name
        self.vertices = vertices
        self.measure = measure
        self.dim = self.vertices.shape[1]

    def __repr__(self):
        return f"ReferenceCell({self.name!r})"


ReferencePoint = ReferenceCell("point", np.zeros((1, 0)), 1.0)
ReferenceInterval = ReferenceCell("interval", np.array([[-1.0], [1.0]]), 2.0)
ReferenceTriangle = ReferenceCell(
    "triangle", np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]]), 0.5
)
ReferenceQuadrilateral = ReferenceCell(
    "quadrilateral",
    np.array([[-1.0, -1.0], [1.0, -1.0], [1.0, 1.0], [-1.0, 1.0]]),
    4.0,
)
ReferenceTetrahedron = ReferenceCell(
    "tetrahedron",
    np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]),
    1.0 / 6.0,
)
ReferenceHexahedron = ReferenceCell(
    "hexahedron",
    np.array(
        [
            [-1.0, -1.0, -1.0],
            [1.0, -1.0, -1.0],
            [1.0, 1.0, -1.0],
            [-1.0, 1.0, -1.0],
            [-1.0, -1.0, 1.0],
            [1.0, -1.0, 1.0],
            [1.0, 1.0, 1.0],
            [-1.0, 1.0, 1.0],
        ]
    ),
    8.0,
)
ReferencePrism = ReferenceCell(
    "prism",
    np.array(
        [
            [0.0, 0.0, -1.0],
            [1.0, 0.0, -1.0],
            [0.0, 1.0, -1.0],
            [0.0, 0.0, 1.0],
            [1.0, 0.0, 1.0],
            [0.0, 1.0, 1.0],
        ]
    ),
    1.0,
)
ReferencePyramid = ReferenceCell(
    "pyramid",
    np.array(
        [
            [-1.0, -1.0, 0.0],
            [1.0, -1.0, 0.0],
            [1.0, 1.0, 0.0],
            [-1.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]
    ),
    4.0 / 3.0,
)

_CELLS = {
    "NODEELEM": ReferencePoint,
    "EDGE": ReferenceInterval,
    "TRI": ReferenceTriangle,
    "QUAD": ReferenceQuadrilateral,
    "TET": ReferenceTetrahedron,
    "HEX": ReferenceHexahedron,
    "PRISM": ReferencePrism,
    "PYRAMID": ReferencePyramid,
}


def reference_cell(elem_type: ElemType) -> ReferenceCell:
    """Return the :class:`ReferenceCell` underlying an element type.

    :param elem_type: The :class:`ElemType` to look up.

    :returns: The reference cell shared by every element of that shape.
    """
    for prefix, cell in _CELLS.items():
        if elem_type.name.startswith(prefix):
            return cell
    raise ValueError(f"No reference cell for {elem_type.name}")
