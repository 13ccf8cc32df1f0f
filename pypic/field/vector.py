#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# This file is part of pyPIC.
# Copyright (C) 2025 The pyPIC Project and contributors.
#
# pyPIC is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# pyPIC is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with pyPIC. If not, see <https://www.gnu.org/licenses/>.


"""
3D vector grid made of three `ScalarGrid` components of identical shape.

Keeping one flat buffer per component lets the field kernels write each axis
with the same linear indexing as the scalar grids.
"""

from pypic.field.scalar import ScalarGrid, as_cells_triplet
from pypic.foundation.coordinate_triplet import CoordinateTriplet


class VectorGrid:
    """
    Vector quantity per cell, stored as the scalar grids `x`, `y` and `z`.

    The in-place operators ``+= -= *= /=`` accept:
        - a VectorGrid: applied component by component,
        - a ScalarGrid: its value at each cell applied to all three components,
        - a scalar: applied to every element of every component.
    """

    def __init__(self, cells, dtype=None):
        self._cells = as_cells_triplet(cells)
        self.x = ScalarGrid(self._cells, dtype=dtype)
        self.y = ScalarGrid(self._cells, dtype=dtype)
        self.z = ScalarGrid(self._cells, dtype=dtype)

    @property
    def cells(self) -> CoordinateTriplet:
        return self._cells.copy()

    @property
    def dtype(self):
        return self.x.dtype

    def components(self):
        return self.x, self.y, self.z

    def get(self, i: int, j: int, k: int) -> CoordinateTriplet:
        return CoordinateTriplet(self.x.get(i, j, k), self.y.get(i, j, k), self.z.get(i, j, k))

    def set(self, i: int, j: int, k: int, value) -> None:
        vx, vy, vz = value
        self.x.set(i, j, k, vx)
        self.y.set(i, j, k, vy)
        self.z.set(i, j, k, vz)

    def __getitem__(self, ijk):
        return self.get(*ijk)

    def __setitem__(self, ijk, value):
        self.set(*ijk, value)

    def fill(self, value) -> None:
        for component in self.components():
            component.fill(value)

    def _broadcast(self, other):
        if isinstance(other, VectorGrid):
            return other.components()
        return other, other, other

    def __iadd__(self, other):
        for component, rhs in zip(self.components(), self._broadcast(other)):
            component += rhs
        return self

    def __isub__(self, other):
        for component, rhs in zip(self.components(), self._broadcast(other)):
            component -= rhs
        return self

    def __imul__(self, other):
        for component, rhs in zip(self.components(), self._broadcast(other)):
            component *= rhs
        return self

    def __itruediv__(self, other):
        for component, rhs in zip(self.components(), self._broadcast(other)):
            component /= rhs
        return self

    def __eq__(self, other):
        if not isinstance(other, VectorGrid):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def __repr__(self):
        return f"VectorGrid(cells={self._cells}, dtype={self.dtype})"

    def __str__(self):
        lines = []
        for i in range(self._cells.x):
            for j in range(self._cells.y):
                for k in range(self._cells.z):
                    lines.append(
                        f"VectorGrid({i}, {j}, {k}) = "
                        f"[{self.x.get(i, j, k)}, {self.y.get(i, j, k)}, {self.z.get(i, j, k)}]\n"
                    )
        return "".join(lines)
