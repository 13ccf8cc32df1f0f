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
Dense 3D scalar grid stored as one contiguous 1D buffer.

Cell (i, j, k) of a grid with cells (nx, ny, nz) lives at

    ijk1d = i + row_offset * j + plane_offset * k,   row_offset = nx,
                                                     plane_offset = nx * ny

i.e. the first axis varies fastest in memory (column-major). The flat buffer
is what the Numba kernels in `pypic.solver` operate on; the Python-level
accessors here are for collaborators that deposit charge or read results.

Indices are not bounds checked: an (i, j, k) outside the grid either aliases
another cell or runs past the end of the buffer, where NumPy raises
IndexError.
"""

import numbers

import numpy as np

import pypic.config.global_runtime as global_runtime
from pypic.config.global_runtime import vprint
from pypic.config.logging_config import TRACE, get_effective_verbosity
from pypic.constants import XYZ_COMPONENTS
from pypic.foundation.coordinate_triplet import CoordinateTriplet
from pypic.foundation.exceptions import GridConstructionError

_MODULE_NAME = __name__
_VERBOSITY = get_effective_verbosity(_MODULE_NAME)


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def as_cells_triplet(cells, min_cells: int = 0) -> CoordinateTriplet:
    """
    Converts `cells` (a CoordinateTriplet or a sequence of three integers)
    into a fresh CoordinateTriplet of Python ints.

    Args:
        cells: Number of cells along x, y and z.
        min_cells (int): Smallest count accepted on any axis.

    Raises:
        GridConstructionError: If `cells` does not hold three integers
            that are all >= `min_cells`.
    """
    try:
        counts = tuple(cells)
    except TypeError:
        raise GridConstructionError(
            f"cells must be a triplet of integers, got {cells!r}"
        ) from None
    if len(counts) != XYZ_COMPONENTS:
        raise GridConstructionError(
            f"cells must have exactly {XYZ_COMPONENTS} components, got {len(counts)}"
        )
    for axis, count in zip("xyz", counts):
        if not _is_integer(count):
            raise GridConstructionError(
                f"cells.{axis} must be an integer, got {count!r}"
            )
        if count < min_cells:
            raise GridConstructionError(
                f"cells.{axis} must be >= {min_cells}, got {count}"
            )
    return CoordinateTriplet(*(int(count) for count in counts))


class ScalarGrid:
    """
    A 3D grid of numbers held in a flat, zero-initialized NumPy buffer.

    Supports (i, j, k) access through `get`/`set` or `grid[i, j, k]`, and the
    in-place operators ``+= -= *= /=`` against another grid of the same shape
    (position-wise) or a scalar (broadcast). Shapes are not compared for
    grid-grid operators; buffers of different length make NumPy raise.

    On an integer grid every operator casts the result back to the grid's
    integer type, truncating toward zero (e.g. 3 + 2.5 gives 5, 7 / 2 gives 3).
    """

    def __init__(self, cells, dtype=None):
        """
        Args:
            cells: Number of cells (nx, ny, nz); CoordinateTriplet or sequence.
                Zero-length axes are accepted and give an empty grid.
            dtype: NumPy element type. Defaults to the runtime real type
                (`pypic.config.global_runtime.get_real_dtype()`).

        Raises:
            GridConstructionError: If `cells` is not three non-negative integers.
        """
        self._cells = as_cells_triplet(cells)
        self._row_offset = self._cells.x
        self._plane_offset = self._cells.x * self._cells.y
        if dtype is None:
            dtype = global_runtime.get_real_dtype()
        self._data = np.zeros(
            self._plane_offset * self._cells.z, dtype=np.dtype(dtype)
        )
        vprint(
            TRACE,
            _VERBOSITY,
            f"    GRID> ScalarGrid {self._cells} of {self._data.dtype} allocated",
        )

    @property
    def cells(self) -> CoordinateTriplet:
        return self._cells.copy()

    @property
    def row_offset(self) -> int:
        return self._row_offset

    @property
    def plane_offset(self) -> int:
        return self._plane_offset

    @property
    def dtype(self):
        return self._data.dtype

    @property
    def data(self) -> np.ndarray:
        """The flat buffer itself (not a copy), in linear-index order."""
        return self._data

    def linear_index(self, i: int, j: int, k: int) -> int:
        return i + self._row_offset * j + self._plane_offset * k

    def get(self, i: int, j: int, k: int):
        return self._data[i + self._row_offset * j + self._plane_offset * k]

    def set(self, i: int, j: int, k: int, value) -> None:
        self._data[i + self._row_offset * j + self._plane_offset * k] = value

    def __getitem__(self, ijk):
        i, j, k = ijk
        return self._data[i + self._row_offset * j + self._plane_offset * k]

    def __setitem__(self, ijk, value):
        i, j, k = ijk
        self._data[i + self._row_offset * j + self._plane_offset * k] = value

    def fill(self, value) -> None:
        self._data.fill(value)

    def copy(self) -> "ScalarGrid":
        duplicate = ScalarGrid(self._cells, dtype=self._data.dtype)
        duplicate._data[:] = self._data
        return duplicate

    def to_array(self) -> np.ndarray:
        """Returns a (nx, ny, nz) view of the buffer, so that view[i, j, k] == grid[i, j, k]."""
        return self._data.reshape(
            (self._cells.x, self._cells.y, self._cells.z), order="F"
        )

    def __len__(self):
        return self._data.size

    def __iter__(self):
        """Yields every element in linear-buffer order."""
        return iter(self._data)

    def _operand(self, other):
        if isinstance(other, ScalarGrid):
            return other._data
        return other

    # unsafe casting lets integer grids take float operands; results truncate
    def __iadd__(self, other):
        np.add(self._data, self._operand(other), out=self._data, casting="unsafe")
        return self

    def __isub__(self, other):
        np.subtract(
            self._data, self._operand(other), out=self._data, casting="unsafe"
        )
        return self

    def __imul__(self, other):
        np.multiply(
            self._data, self._operand(other), out=self._data, casting="unsafe"
        )
        return self

    def __itruediv__(self, other):
        np.true_divide(
            self._data, self._operand(other), out=self._data, casting="unsafe"
        )
        return self

    def __eq__(self, other):
        if not isinstance(other, ScalarGrid):
            return NotImplemented
        return self._cells == other._cells and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"ScalarGrid(cells={self._cells}, dtype={self._data.dtype})"

    def __str__(self):
        """One 'ScalarGrid(i, j, k) = value' line per cell; i outermost, k innermost."""
        lines = []
        for i in range(self._cells.x):
            for j in range(self._cells.y):
                for k in range(self._cells.z):
                    lines.append(f"ScalarGrid({i}, {j}, {k}) = {self.get(i, j, k)}\n")
        return "".join(lines)
