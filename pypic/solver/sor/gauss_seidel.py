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
Gauss-Seidel Successive Over-Relaxation (SOR) solver for the Poisson equation.

The solver relaxes the potential on the interior grid points, in place, until
the L2 norm of the residual drops to the tolerance or the sweep budget is
spent. The boundary points are never written, which fixes them at whatever
value they hold (zero for a fresh grid): a homogeneous Dirichlet condition.

Sweeps are run in blocks between convergence checks. The first check follows
the first sweep; after that one check runs every `check_interval` sweeps.
The potential is not reset between solves, so a solve starts from the result
of the previous one.

Classes:
    SolveReport: Outcome of one successful solve.
    GaussSeidelSORSolver: Solver parameters and the iteration loop.
"""

import time
from dataclasses import dataclass

import numpy as np

from pypic.config.global_runtime import vprint
from pypic.config.logging_config import (
    ERROR,
    INFO,
    DEBUG,
    TRACE,
    get_effective_verbosity,
)
from pypic.constants import (
    ConstPhysical,
    SOR_RELAXATION,
    CONVERGENCE_CHECK_INTERVAL,
    MAX_ITERATIONS,
    TOLERANCE,
)
from pypic.field.scalar import ScalarGrid
from pypic.foundation.exceptions import NonConvergenceError
from pypic.solver.core import (
    _cpu_iterate_block_gauss_seidel_sor,
    _cpu_calc_residual_l2_norm,
)

_MODULE_NAME = __name__
_VERBOSITY = get_effective_verbosity(_MODULE_NAME)


@dataclass(frozen=True)
class SolveReport:
    """
    Outcome of a converged solve.

    Attributes:
        iterations (int): Sweeps performed.
        residual (float): L2 residual norm at the final convergence check.
        elapsed (float): Wall-clock seconds spent in the solve.
    """

    iterations: int
    residual: float
    elapsed: float


class GaussSeidelSORSolver:
    """
    Lexicographic Gauss-Seidel SOR solver for a uniform 3D grid.

    The parameters are fixed at construction; `solve` may be called any number
    of times. `timings` holds the formatted wall-clock time of the last solve.
    """

    def __init__(
        self,
        omega: float = SOR_RELAXATION,
        check_interval: int = CONVERGENCE_CHECK_INTERVAL,
        max_iterations: int = MAX_ITERATIONS,
        tolerance: float = TOLERANCE,
    ):
        """
        Initializes the solver.

        Args:
            omega (float): Over-relaxation factor, 0 < omega < 2.
            check_interval (int): Sweeps between residual checks, >= 1.
            max_iterations (int): Sweep budget of one solve, >= 1.
            tolerance (float): L2 residual norm at which a solve has
                converged, >= 0. A tolerance of 0 is accepted and is in
                practice never reached.

        Raises:
            ValueError: If a parameter is outside its range.
        """
        if not 0.0 < omega < 2.0:
            raise ValueError(f"omega must lie in (0, 2), got {omega}")
        if int(check_interval) != check_interval or check_interval < 1:
            raise ValueError(
                f"check_interval must be a positive integer, got {check_interval}"
            )
        if int(max_iterations) != max_iterations or max_iterations < 1:
            raise ValueError(
                f"max_iterations must be a positive integer, got {max_iterations}"
            )
        if not tolerance >= 0.0:
            raise ValueError(f"tolerance must be >= 0, got {tolerance}")

        self.omega = float(omega)
        self.check_interval = int(check_interval)
        self.max_iterations = int(max_iterations)
        self.tolerance = float(tolerance)
        self.timings = {}

    def __repr__(self):
        return (
            f"GaussSeidelSORSolver(omega={self.omega}, check_interval={self.check_interval}, "
            f"max_iterations={self.max_iterations}, tolerance={self.tolerance})"
        )

    def residual_norm(
        self,
        potential: ScalarGrid,
        charge_density: ScalarGrid,
        delta_inv_sq,
        inv_vacuum_permittivity: float = ConstPhysical.InvVacuumPermittivity.value,
    ) -> float:
        """Returns the current L2 residual norm without modifying the potential."""
        return float(
            _cpu_calc_residual_l2_norm(
                inv_vacuum_permittivity,
                potential.cells.as_array(np.int64),
                np.array(tuple(delta_inv_sq), dtype=np.float64),
                charge_density.data,
                potential.data,
            )
        )

    def solve(
        self,
        potential: ScalarGrid,
        charge_density: ScalarGrid,
        delta_inv_sq,
        inv_vacuum_permittivity: float = ConstPhysical.InvVacuumPermittivity.value,
    ) -> SolveReport:
        """
        Relaxes `potential` in place until the residual norm is within tolerance.

        Args:
            potential (ScalarGrid): Initial guess; holds the solution on return.
            charge_density (ScalarGrid): Source term, same cells as `potential`.
            delta_inv_sq: 1 / delta**2 along (x, y, z).
            inv_vacuum_permittivity (float): Factor applied to the charge density.

        Returns:
            SolveReport: Sweeps performed and final residual norm.

        Raises:
            NonConvergenceError: If `max_iterations` sweeps run without the
                tolerance being met. `potential` keeps the state of the last sweep.
        """
        grid_shape = potential.cells.as_array(np.int64)
        delta_inv_sq_arr = np.array(tuple(delta_inv_sq), dtype=np.float64)
        potential_1d = potential.data
        charge_density_1d = charge_density.data

        tic_solve = time.perf_counter()
        vprint(
            DEBUG,
            _VERBOSITY,
            f"    SOR> grid {potential.cells}, omega {self.omega}, tolerance {self.tolerance:0.3e}, "
            f"max. iterations {self.max_iterations}",
        )

        itr_num, residual = 0, None
        while True:
            tic_itr = time.perf_counter()
            if itr_num == 0:
                vprint(
                    INFO,
                    _VERBOSITY,
                    "    SOR> | #Iteration | L2 residual | Time (seconds) |",
                )
                itr_block_size = 1
            else:
                itr_block_size = min(self.check_interval, self.max_iterations - itr_num)

            _cpu_iterate_block_gauss_seidel_sor(
                itr_block_size,
                self.omega,
                inv_vacuum_permittivity,
                grid_shape,
                delta_inv_sq_arr,
                charge_density_1d,
                potential_1d,
            )
            itr_num += itr_block_size

            # the counter of the last sweep performed is itr_num - 1
            if (itr_num - 1) % self.check_interval == 0:
                residual = float(
                    _cpu_calc_residual_l2_norm(
                        inv_vacuum_permittivity,
                        grid_shape,
                        delta_inv_sq_arr,
                        charge_density_1d,
                        potential_1d,
                    )
                )
                toc_itr = time.perf_counter()
                vprint(
                    INFO,
                    _VERBOSITY,
                    f"    SOR> | {itr_num:>10d} | {residual:>11.04e} | {toc_itr - tic_itr:14.06f} |",
                )
                if residual <= self.tolerance:
                    break

            if itr_num >= self.max_iterations:
                self.timings["sor| total time"] = "{:0.3f}".format(
                    time.perf_counter() - tic_solve
                )
                vprint(
                    ERROR,
                    _VERBOSITY,
                    f"    SOR> Potential did not converge in {itr_num} iterations "
                    f"(last L2 residual: {residual}).",
                )
                raise NonConvergenceError(self.tolerance, self.max_iterations, residual)

        elapsed = time.perf_counter() - tic_solve
        self.timings["sor| total time"] = "{:0.3f}".format(elapsed)
        vprint(TRACE, _VERBOSITY, f"    SOR> Converged after {itr_num} iterations.")

        return SolveReport(iterations=itr_num, residual=residual, elapsed=elapsed)
