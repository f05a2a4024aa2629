"""Points in reference and physical space."""

import numpy as np


class Point:
    """An immutable point with up to three real coordinates.

    Missing coordinates are zero, so ``Point(0.5)`` is the 1D reference
    coordinate 0.5.
    """

    __slots__ = ("_coords",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        coords = np.array([x, y, z], dtype=np.float64)
        coords.setflags(write=False)
        self._coords = coords

    @classmethod
    def from_array(cls, coords) -> "Point":
        """Build a point from a sequence of at most three coordinates."""
        coords = np.asarray(coords, dtype=np.float64).ravel()
        if coords.size > 3:
            raise ValueError(f"A point has at most 3 coordinates, got {coords.size}")
        return cls(*coords)

    def __getitem__(self, i):
        return float(self._coords[i])

    def __len__(self):
        return 3

    def __iter__(self):
        return (float(c) for c in self._coords)

    def __array__(self, dtype=None, copy=None):
        return np.array(self._coords, dtype=dtype)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._coords, other._coords))

    def __hash__(self):
        return hash(tuple(self._coords))

    def __add__(self, other):
        return Point(*(self._coords + np.asarray(other, dtype=np.float64)))

    def __sub__(self, other):
        return Point(*(self._coords - np.asarray(other, dtype=np.float64)))

    def __mul__(self, factor: float):
        return Point(*(self._coords * factor))

    __rmul__ = __mul__

    def __truediv__(self, factor: float):
        return Point(*(self._coords / factor))

    def __neg__(self):
        return Point(*(-self._coords))

    def __repr__(self):
        return "Point({}, {}, {})".format(*self)

    def norm(self) -> float:
        """The Euclidean length of the point's position vector."""
        return float(np.linalg.norm(self._coords))

    def norm_sq(self) -> float:
        return float(np.dot(self._coords, self._coords))
