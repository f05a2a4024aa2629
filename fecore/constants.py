"""Constants for the finite element core."""

from fecore.reference_elements import ElemType, Order

DEFAULT_QUADRATURE_ORDER = Order.FOURTH  # Used when a rule is requested without one

HERMITE_DOF_POINTS = (-1.0, 1.0)  # Reference nodes of the cubic Hermite dofs

# Topology assumed when a rule is requested with ElemType.INVALID_ELEM
DEFAULT_DIM_TOPOLOGY = {
    0: ElemType.NODEELEM,
    1: ElemType.EDGE2,
    2: ElemType.QUAD4,
    3: ElemType.HEX8,
}
