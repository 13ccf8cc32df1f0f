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
Numba kernels of the Poisson solve on 1D representations of 3D grids.

Both kernels use the column-major linear index of `pypic.field.scalar`:
neighbors along x, y and z are 1, nx and nx*ny elements away.

Functions:
- `_cpu_iterate_block_gauss_seidel_sor`: performs a block of lexicographic,
  in-place Gauss-Seidel sweeps with successive over-relaxation over the
  interior grid points.
- `_cpu_calc_residual_l2_norm`: RMS of the discretized-equation residual,
  summed over interior points and normalized by the total point count.

Neither kernel uses `parallel=True`. A sweep reads the already-updated
i-1, j-1 and k-1 neighbors of the same sweep, so it is a sequential data
dependency. Running it in parallel would give a different solver.
"""

import math
import numpy as np

from numba import njit


@njit(nogil=True, boundscheck=False, cache=True)
def _cpu_iterate_block_gauss_seidel_sor(
    num_sweeps: int,
    omega: float,
    inv_vacuum_permittivity: float,
    grid_shape: np.ndarray,
    delta_inv_sq: np.ndarray,
    charge_density_1d: np.ndarray,
    potential_1d: np.ndarray,
) -> None:
    """
    Performs `num_sweeps` Gauss-Seidel SOR sweeps, updating `potential_1d` in place.

    For every interior point, i ascending outermost, then j, then k innermost:

        phi_gs = (rho * inv_eps0
                  + idx2 * (phi[i+1] + phi[i-1])
                  + idy2 * (phi[j+1] - phi[j-1])
                  + idz2 * (phi[k+1] - phi[k-1])) / (2 * (idx2 + idy2 + idz2))
        phi   += omega * (phi_gs - phi)

    The y and z neighbor pairs enter with a minus sign.

    Args:
        num_sweeps (int): Number of full sweeps to perform.
        omega (float): Over-relaxation factor.
        inv_vacuum_permittivity (float): 1 / epsilon_0 applied to the charge density.
        grid_shape (np.ndarray): Cells along (x, y, z).
        delta_inv_sq (np.ndarray): 1 / delta**2 along (x, y, z).
        charge_density_1d (np.ndarray): Flat charge density buffer.
        potential_1d (np.ndarray): Flat potential buffer, updated in place.
    """
    nx = grid_shape[0]
    ny = grid_shape[1]
    nz = grid_shape[2]
    row_offset = nx
    plane_offset = nx * ny

    inv_dx_sq = delta_inv_sq[0]
    inv_dy_sq = delta_inv_sq[1]
    inv_dz_sq = delta_inv_sq[2]
    denominator = 2.0 * (inv_dx_sq + inv_dy_sq + inv_dz_sq)

    for _ in range(num_sweeps):
        for i in range(1, nx - 1):
            for j in range(1, ny - 1):
                for k in range(1, nz - 1):
                    ijk1d = i + row_offset * j + plane_offset * k
                    phi_gs = (
                        charge_density_1d[ijk1d] * inv_vacuum_permittivity
                        + inv_dx_sq
                        * (potential_1d[ijk1d + 1] + potential_1d[ijk1d - 1])
                        + inv_dy_sq
                        * (
                            potential_1d[ijk1d + row_offset]
                            - potential_1d[ijk1d - row_offset]
                        )
                        + inv_dz_sq
                        * (
                            potential_1d[ijk1d + plane_offset]
                            - potential_1d[ijk1d - plane_offset]
                        )
                    ) / denominator
                    potential_1d[ijk1d] += omega * (phi_gs - potential_1d[ijk1d])


@njit(nogil=True, boundscheck=False, cache=True)
def _cpu_calc_residual_l2_norm(
    inv_vacuum_permittivity: float,
    grid_shape: np.ndarray,
    delta_inv_sq: np.ndarray,
    charge_density_1d: np.ndarray,
    potential_1d: np.ndarray,
) -> float:
    """
    Computes sqrt(sum(r**2) / (nx * ny * nz)) over interior points, where

        r = -2 * (idx2 + idy2 + idz2) * phi + rho * inv_eps0 + <neighbor terms>

    with the same neighbor terms as the sweep. The sum runs over interior
    points only but is divided by the total number of points.

    Returns:
        float: The L2 residual norm, accumulated in float64.
    """
    nx = grid_shape[0]
    ny = grid_shape[1]
    nz = grid_shape[2]
    row_offset = nx
    plane_offset = nx * ny

    inv_dx_sq = delta_inv_sq[0]
    inv_dy_sq = delta_inv_sq[1]
    inv_dz_sq = delta_inv_sq[2]
    diagonal = 2.0 * (inv_dx_sq + inv_dy_sq + inv_dz_sq)

    residual_sum = 0.0
    for i in range(1, nx - 1):
        for j in range(1, ny - 1):
            for k in range(1, nz - 1):
                ijk1d = i + row_offset * j + plane_offset * k
                residual = (
                    -potential_1d[ijk1d] * diagonal
                    + charge_density_1d[ijk1d] * inv_vacuum_permittivity
                    + inv_dx_sq * (potential_1d[ijk1d + 1] + potential_1d[ijk1d - 1])
                    + inv_dy_sq
                    * (
                        potential_1d[ijk1d + row_offset]
                        - potential_1d[ijk1d - row_offset]
                    )
                    + inv_dz_sq
                    * (
                        potential_1d[ijk1d + plane_offset]
                        - potential_1d[ijk1d - plane_offset]
                    )
                )
                residual_sum += residual * residual

    return math.sqrt(residual_sum / (nx * ny * nz))
