"""Tests for the Gauss quadrature rules."""

from fecore.constants import DEFAULT_QUADRATURE_ORDER
from fecore.errors import UnsupportedTopology
from fecore.point import Point
from fecore.quadrature import gauss_quadrature, generate
from fecore.reference_elements import ElemType, Order, ReferenceCell, reference_cell
from fecore.utils import monomial_integral, monomials, quadrature_error
import numpy as np
import pytest

SUPPORTED = [
    ElemType.EDGE2,
    ElemType.EDGE3,
    ElemType.EDGE4,
    ElemType.TRI3,
    ElemType.TRI6,
    ElemType.QUAD4,
    ElemType.QUAD9,
    ElemType.TET4,
    ElemType.TET10,
    ElemType.HEX8,
    ElemType.HEX27,
    ElemType.PRISM6,
    ElemType.PRISM18,
    ElemType.PYRAMID5,
]


@pytest.mark.parametrize("elem_type", SUPPORTED)
@pytest.mark.parametrize("order", range(9))
def test_monomial_exactness(elem_type, order):
    """Test that every monomial up to the order is integrated exactly."""
    rule = generate(elem_type.dim, elem_type, order)
    cell = reference_cell(elem_type)

    for powers in monomials(elem_type.dim, order):
        assert quadrature_error(rule, cell, powers) < 1e-12


@pytest.mark.parametrize("elem_type", SUPPORTED)
def test_weights_sum_to_measure(elem_type):
    rule = generate(elem_type.dim, elem_type, Order.FIFTH)

    assert np.isclose(rule.get_weights().sum(), reference_cell(elem_type).measure)
    assert np.all(rule.get_weights() > 0.0)


@pytest.mark.parametrize("order", range(21))
def test_1d_weights_sum_to_two(order):
    rule = generate(1, ElemType.EDGE2, order)

    assert np.isclose(rule.get_weights().sum(), 2.0, rtol=1e-13)


def test_third_order_1d():
    """Test the 1D third order rule on x^2 and x^3."""
    rule = generate(1, ElemType.EDGE2, Order.THIRD)

    assert rule.n_points() == 2
    assert np.isclose(rule.integrate(lambda x: x[0] ** 3), 0.0, atol=1e-15)
    assert np.isclose(rule.integrate(lambda x: x[0] ** 2), 2.0 / 3.0, rtol=1e-15)


@pytest.mark.parametrize(
    "order, n_points", list(zip(range(8), [1, 1, 2, 2, 3, 3, 4, 4]))
)
def test_1d_point_count(order, n_points):
    assert generate(1, ElemType.EDGE2, order).n_points() == n_points


def test_not_exact_beyond_order():
    """A two point rule cannot integrate x^4."""
    rule = generate(1, ElemType.EDGE2, Order.THIRD)

    assert quadrature_error(rule, reference_cell(ElemType.EDGE2), (4,)) > 1e-3


@pytest.mark.parametrize("elem_type", SUPPORTED)
def test_deterministic(elem_type):
    """Test that generating twice gives bit-identical rules."""
    first = generate(elem_type.dim, elem_type, Order.SEVENTH)
    second = generate(elem_type.dim, elem_type, Order.SEVENTH)

    assert first.get_points().tobytes() == second.get_points().tobytes()
    assert first.get_weights().tobytes() == second.get_weights().tobytes()


@pytest.mark.parametrize("elem_type", [ElemType.EDGE3, ElemType.EDGE4])
def test_edges_share_rule(elem_type):
    edge2 = generate(1, ElemType.EDGE2, Order.FIFTH)
    other = generate(1, elem_type, Order.FIFTH)

    assert other.elem_type is elem_type
    assert np.array_equal(edge2.get_points(), other.get_points())
    assert np.array_equal(edge2.get_weights(), other.get_weights())


@pytest.mark.parametrize(
    "dim, elem_type",
    [
        (0, ElemType.NODEELEM),
        (1, ElemType.EDGE2),
        (2, ElemType.QUAD4),
        (3, ElemType.HEX8),
    ],
)
def test_invalid_elem_falls_back(dim, elem_type):
    rule = generate(dim, ElemType.INVALID_ELEM, Order.THIRD)

    assert rule.elem_type is elem_type
    assert rule.dim == dim


def test_default_order():
    assert generate(1, ElemType.EDGE2).order == DEFAULT_QUADRATURE_ORDER
    assert generate(1, ElemType.EDGE2, None).order == DEFAULT_QUADRATURE_ORDER
    assert generate(1, ElemType.EDGE2, default_order=Order.NINTH).order == 9
    assert generate(1, ElemType.EDGE2, Order.FIRST, default_order=9).order == 1


def test_p_level():
    """Each p-refinement level raises the exact degree by two."""
    rule = generate(1, ElemType.EDGE2, Order.FIRST, p_level=1)

    assert rule.p_level == 1
    assert rule.n_points() == 2
    assert quadrature_error(rule, reference_cell(ElemType.EDGE2), (3,)) < 1e-15


@pytest.mark.parametrize(
    "dim, elem_type",
    [
        (1, ElemType.TRI3),
        (2, ElemType.EDGE2),
        (2, ElemType.HEX8),
        (3, ElemType.QUAD4),
        (0, ElemType.EDGE2),
        (4, ElemType.HEX8),
        (-1, ElemType.INVALID_ELEM),
    ],
)
def test_unsupported_topology(dim, elem_type):
    with pytest.raises(UnsupportedTopology):
        generate(dim, elem_type, Order.SECOND)


def test_negative_order():
    with pytest.raises(ValueError):
        generate(1, ElemType.EDGE2, -2)


def test_zero_dimensional():
    rule = generate(0, ElemType.NODEELEM, Order.THIRD)

    assert rule.n_points() == 1
    assert rule.w(0) == 1.0
    assert rule.qp(0) == Point(0.0)


def test_triangle_points_inside():
    points = generate(2, ElemType.TRI3, Order.EIGHTH).get_points()

    assert np.all(points >= 0.0)
    assert np.all(points.sum(axis=1) <= 1.0)


def test_pyramid_points_inside():
    points = generate(3, ElemType.PYRAMID5, Order.SIXTH).get_points()

    assert np.all((points[:, 2] >= 0.0) & (points[:, 2] <= 1.0))
    assert np.all(np.abs(points[:, :2]) <= (1.0 - points[:, 2:]))


def test_rule_is_immutable():
    rule = generate(2, ElemType.QUAD4, Order.THIRD)

    with pytest.raises(ValueError):
        rule.get_weights()[0] = 1.0
    with pytest.raises(ValueError):
        rule.get_points()[0, 0] = 1.0


def test_iteration():
    rule = generate(2, ElemType.TRI3, Order.FOURTH)
    pairs = list(rule)

    assert len(pairs) == len(rule) == rule.n_points()
    for i, (point, weight) in enumerate(pairs):
        assert isinstance(point, Point)
        assert point == rule.qp(i)
        assert weight == rule.w(i)
        assert point[2] == 0.0


def test_scale():
    """Test mapping a rule from [-1, 1] onto [0, 1]."""
    rule = generate(1, ElemType.EDGE2, Order.FOURTH).scale((-1.0, 1.0), (0.0, 1.0))

    assert np.isclose(rule.get_weights().sum(), 1.0)
    assert np.isclose(rule.integrate(lambda x: x[0] ** 4), 0.2)
    assert np.all((rule.get_points() > 0.0) & (rule.get_points() < 1.0))


def test_scale_2d():
    with pytest.raises(ValueError):
        generate(2, ElemType.QUAD4, Order.FOURTH).scale((-1.0, 1.0), (0.0, 1.0))


def test_gauss_quadrature_unknown_cell():
    with pytest.raises(ValueError):
        gauss_quadrature(ReferenceCell("disc", np.zeros((1, 2)), np.pi), 2)


@pytest.mark.parametrize(
    "elem_type, powers, exact",
    [
        (ElemType.TRI3, (1, 0), 1 / 6),
        (ElemType.TET4, (0, 0, 1), 1 / 24),
        (ElemType.PYRAMID5, (0, 0, 1), 1 / 3),
        (ElemType.PRISM6, (0, 1, 2), 1 / 9),
        (ElemType.HEX8, (2, 2, 0), 8 / 9),
    ],
)
def test_monomial_integral(elem_type, powers, exact):
    assert np.isclose(monomial_integral(reference_cell(elem_type), powers), exact)
