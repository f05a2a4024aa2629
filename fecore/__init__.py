from .elements import Element, uniform_edge_mesh  # noqa: F401
from .errors import (  # noqa: F401
    ContractViolation,
    FiniteElementError,
    RequiresPhysicalElement,
    UnsupportedConfiguration,
    UnsupportedTopology,
)
from .finite_elements import LagrangeElement, lagrange_shape_deriv  # noqa: F401
from .hermite import (  # noqa: F401
    HermiteElement,
    hermite_compute_coefs,
    hermite_raw_shape,
    hermite_raw_shape_deriv,
    hermite_raw_shape_second_deriv,
    shape,
    shape_deriv,
    shape_second_deriv,
)
from .point import Point  # noqa: F401
from .quadrature import QuadratureRule, gauss_quadrature, generate  # noqa: F401
from .reference_elements import ElemType, Order, reference_cell  # noqa: F401
