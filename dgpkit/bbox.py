"""Axis-aligned bounding boxes of point sets in any dimension."""

from __future__ import annotations

import math
from typing import Optional, Sequence


class BBox:
    """Axis-aligned bounding box.

    Without ``values`` the box is the unit box ``[0, 1]^d``. With
    ``values``, a flat sequence of ``d``-dimensional point coordinates,
    it is the smallest box holding the points, optionally grown to a cube
    about the same center. Sides of zero length are widened a little so
    that the box always has a nonzero volume. A non-positive dimension
    gives an empty box of dimension zero.
    """

    def __init__(
        self,
        dimension: int = 3,
        values: Optional[Sequence[float]] = None,
        cube: bool = False,
    ) -> None:
        self._min: list[float] = []
        self._max: list[float] = []
        self.step = 0.0
        if dimension <= 0:
            return
        if values is None:
            self._min = [0.0] * dimension
            self._max = [1.0] * dimension
        else:
            self._init_from_points(dimension, values, cube)
        self._ensure_volume()
        self.step = self.side()

    def _init_from_points(
        self, d: int, values: Sequence[float], cube: bool
    ) -> None:
        count = len(values) // d
        points = [values[j * d:(j + 1) * d] for j in range(count)]
        if points:
            self._min = [float(min(column)) for column in zip(*points)]
            self._max = [float(max(column)) for column in zip(*points)]
        else:
            self._min = [0.0] * d
            self._max = [0.0] * d
        if cube:
            centers = [(lo + hi) / 2 for lo, hi in zip(self._min, self._max)]
            half_side = max(
                [0.0] + [(hi - lo) / 2.0 for lo, hi in zip(self._min, self._max)]
            )
            self._min = [c - half_side for c in centers]
            self._max = [c + half_side for c in centers]

    def _ensure_volume(self) -> None:
        half_sides = [(hi - lo) / 2 for lo, hi in zip(self._min, self._max)]
        positive = [h for h in half_sides if h > 0.0]
        min_side = min(positive) if positive else 1.0
        grow = min_side * 0.05
        for i, (lo, hi) in enumerate(zip(self._min, self._max)):
            if lo == hi:
                self._min[i] = lo - grow
                self._max[i] = hi + grow

    @property
    def dimension(self) -> int:
        """Number of coordinates of the box."""
        return len(self._min)

    @property
    def minimum(self) -> tuple[float, ...]:
        """Lower corner of the box."""
        return tuple(self._min)

    @property
    def maximum(self) -> tuple[float, ...]:
        """Upper corner of the box."""
        return tuple(self._max)

    def _clamp(self, i: int) -> int:
        if self.dimension == 0:
            raise IndexError("empty bounding box has no coordinates")
        return min(max(i, 0), self.dimension - 1)

    def center(self, i: int) -> float:
        """Center along coordinate *i*, clamped to the valid range."""
        j = self._clamp(i)
        return (self._max[j] + self._min[j]) / 2.0

    def side(self, i: Optional[int] = None) -> float:
        """Side length along coordinate *i*, or the longest side if *i* is None."""
        if i is None:
            return max(
                [0.0] + [hi - lo for lo, hi in zip(self._min, self._max)]
            )
        j = self._clamp(i)
        return self._max[j] - self._min[j]

    def max_side(self) -> float:
        """Length of the longest side, or 0 for an empty box."""
        if self.dimension == 0:
            return 0.0
        return max(self.side(i) for i in range(self.dimension))

    def diameter(self) -> float:
        """Length of the box diagonal."""
        diam2 = sum(self.side(i) ** 2 for i in range(self.dimension))
        return math.sqrt(diam2) if diam2 > 0.0 else 0.0

    def set_min(self, values: Sequence[float]) -> None:
        """Replace the first three coordinates of the lower corner."""
        for i, value in zip(range(min(3, self.dimension)), values):
            self._min[i] = float(value)

    def set_max(self, values: Sequence[float]) -> None:
        """Replace the first three coordinates of the upper corner."""
        for i, value in zip(range(min(3, self.dimension)), values):
            self._max[i] = float(value)