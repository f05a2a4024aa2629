"""Tests for physical elements."""

from fecore.elements import Element, uniform_edge_mesh
from fecore.point import Point
from fecore.reference_elements import ElemType, Order
import numpy as np
import pytest


def test_element():
    elem = Element(ElemType.EDGE3, [0.0, 2.0, Point(1.0)], p_level=1)

    assert elem.topology() is ElemType.EDGE3
    assert elem.mapping_order() == Order.SECOND
    assert elem.p_level() == 1
    assert elem.n_nodes() == 3
    assert elem.vertex(1) == Point(2.0)
    assert elem.centroid() == Point(1.0)


def test_centroid_2d():
    elem = Element(ElemType.TRI3, [[0.0, 0.0], [3.0, 0.0], [0.0, 3.0]])

    assert np.allclose(np.asarray(elem.centroid()), [1.0, 1.0, 0.0])


def test_negative_p_level():
    with pytest.raises(ValueError):
        Element(ElemType.EDGE2, [0.0, 1.0], p_level=-1)


@pytest.mark.parametrize("elem_type", [ElemType.EDGE2, ElemType.EDGE3, ElemType.EDGE4])
def test_uniform_edge_mesh(elem_type):
    elements = uniform_edge_mesh(4, 0.0, 2.0, elem_type)

    assert len(elements) == 4
    for k, elem in enumerate(elements):
        assert elem.topology() is elem_type
        assert elem.n_nodes() == elem_type.n_nodes
        assert np.isclose(elem.vertex(0)[0], 0.5 * k)
        assert np.isclose(elem.vertex(1)[0], 0.5 * (k + 1))
        assert np.isclose(elem.centroid()[0], 0.5 * k + 0.25)


def test_uniform_edge_mesh_midpoint():
    elem = uniform_edge_mesh(1, 0.0, 1.0, ElemType.EDGE3)[0]

    assert elem.vertex(2) == Point(0.5)


def test_uniform_edge_mesh_not_1d():
    with pytest.raises(ValueError):
        uniform_edge_mesh(2, elem_type=ElemType.QUAD4)
