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
Electric field as the negative gradient of the potential.

Each axis is differentiated on its own with second-order stencils, holding the
other two indices fixed:

    interior index n:  E(n)   = -(P(n+1) - P(n-1)) / (2h)
    first index:       E(0)   = -(-3P(0) + 4P(1) - P(2)) / (2h)
    last index:        E(N-1) = -(P(N-3) - 4P(N-2) + 3P(N-1)) / (2h)

All three stencils are exact for polynomials of degree <= 2. They need at
least 3 points along every axis.
"""

import numpy as np

from numba import njit

from pypic.constants import (
    MIN_CELLS_PER_AXIS,
    STENCIL_BACKWARD,
    STENCIL_CENTRAL,
    STENCIL_FORWARD,
)
from pypic.foundation.enums import DifferenceStencil
from pypic.field.scalar import ScalarGrid
from pypic.field.vector import VectorGrid


@njit(nogil=True, boundscheck=False, cache=True)
def _stencil_kind(index: int, num_cells: int) -> int:
    if index != 0 and index != num_cells - 1:
        return STENCIL_CENTRAL
    elif index == 0:
        return STENCIL_FORWARD
    return STENCIL_BACKWARD


@njit(nogil=True, boundscheck=False, cache=True)
def _axis_derivative(
    potential_1d: np.ndarray,
    ijk1d: int,
    stride: int,
    index: int,
    num_cells: int,
    neg_inv_two_delta: float,
) -> float:
    """-dP/daxis at `ijk1d`, where `stride` is the linear distance between neighbors along the axis."""
    kind = _stencil_kind(index, num_cells)
    if kind == STENCIL_CENTRAL:
        return neg_inv_two_delta * (
            potential_1d[ijk1d + stride] - potential_1d[ijk1d - stride]
        )
    elif kind == STENCIL_FORWARD:
        return neg_inv_two_delta * (
            -3.0 * potential_1d[ijk1d]
            + 4.0 * potential_1d[ijk1d + stride]
            - potential_1d[ijk1d + 2 * stride]
        )
    return neg_inv_two_delta * (
        potential_1d[ijk1d - 2 * stride]
        - 4.0 * potential_1d[ijk1d - stride]
        + 3.0 * potential_1d[ijk1d]
    )


@njit(nogil=True, boundscheck=False, cache=True)
def _cpu_calc_electric_field(
    grid_shape: np.ndarray,
    delta: np.ndarray,
    potential_1d: np.ndarray,
    electric_field_x_1d: np.ndarray,
    electric_field_y_1d: np.ndarray,
    electric_field_z_1d: np.ndarray,
) -> None:
    """
    Overwrites the three field component buffers with -grad(potential) at every grid point.

    Args:
        grid_shape (np.ndarray): Cells along (x, y, z), each >= 3.
        delta (np.ndarray): Grid spacing along (x, y, z).
        potential_1d (np.ndarray): Flat potential buffer.
        electric_field_x_1d, electric_field_y_1d, electric_field_z_1d (np.ndarray):
            Flat output buffers, one per component.
    """
    nx = grid_shape[0]
    ny = grid_shape[1]
    nz = grid_shape[2]
    row_offset = nx
    plane_offset = nx * ny

    neg_inv_two_dx = -1.0 / (2.0 * delta[0])
    neg_inv_two_dy = -1.0 / (2.0 * delta[1])
    neg_inv_two_dz = -1.0 / (2.0 * delta[2])

    for i in range(nx):
        for j in range(ny):
            for k in range(nz):
                ijk1d = i + row_offset * j + plane_offset * k
                electric_field_x_1d[ijk1d] = _axis_derivative(
                    potential_1d, ijk1d, 1, i, nx, neg_inv_two_dx
                )
                electric_field_y_1d[ijk1d] = _axis_derivative(
                    potential_1d, ijk1d, row_offset, j, ny, neg_inv_two_dy
                )
                electric_field_z_1d[ijk1d] = _axis_derivative(
                    potential_1d, ijk1d, plane_offset, k, nz, neg_inv_two_dz
                )


def stencil_for(index: int, num_cells: int) -> DifferenceStencil:
    """Returns the stencil used at `index` along an axis of `num_cells` points."""
    return DifferenceStencil(int(_stencil_kind(index, num_cells)))


def calc_electric_field(
    potential: ScalarGrid, delta, electric_field: VectorGrid
) -> VectorGrid:
    """
    Fills `electric_field` with the negative gradient of `potential`.

    Args:
        potential (ScalarGrid): Potential to differentiate.
        delta: Grid spacing (CoordinateTriplet or sequence of three floats).
        electric_field (VectorGrid): Output grid with the same cells as `potential`;
            every element is overwritten.

    Returns:
        VectorGrid: `electric_field`, for chaining.

    Raises:
        ValueError: If any axis has fewer than 3 cells, or the two grids differ in cells.
    """
    cells = potential.cells
    if electric_field.cells != cells:
        raise ValueError(
            f"electric field cells {electric_field.cells} differ from potential cells {cells}"
        )
    if min(cells) < MIN_CELLS_PER_AXIS:
        raise ValueError(
            f"finite-difference stencils need >= {MIN_CELLS_PER_AXIS} cells per axis, got {cells}"
        )
    _cpu_calc_electric_field(
        cells.as_array(np.int64),
        np.array(tuple(delta), dtype=np.float64),
        potential.data,
        electric_field.x.data,
        electric_field.y.data,
        electric_field.z.data,
    )
    return electric_field
