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
Numerical constants of the pyPIC field solver.

It includes:
- `ConstSolverDefaults`: default parameters of the Gauss-Seidel SOR solve.
- Module-level aliases of those defaults for kernels and signatures.
- Grid constants (`XYZ_COMPONENTS`, `MIN_CELLS_PER_AXIS`).
- `STENCIL_*`: integer labels of the finite-difference stencils, usable in
  Numba kernels where `DifferenceStencil` members cannot be.
"""

from enum import Enum

from pypic.foundation.enums import DifferenceStencil


class ConstSolverDefaults(Enum):
    """
    Default parameters of the potential solve.

    Constants:
        SORRelaxation (float): Over-relaxation factor omega applied after each
            Gauss-Seidel update.
        ConvergenceCheckInterval (int): Sweeps between two L2 residual checks;
            the first check follows the very first sweep.
        MaxIterations (int): Sweep budget of one solve.
        Tolerance (float): L2 residual norm at or below which a solve has
            converged.
    """

    SORRelaxation = 1.4
    ConvergenceCheckInterval = 25
    MaxIterations = 10000
    Tolerance = 1.0e-5


SOR_RELAXATION: float = ConstSolverDefaults.SORRelaxation.value
CONVERGENCE_CHECK_INTERVAL: int = ConstSolverDefaults.ConvergenceCheckInterval.value
MAX_ITERATIONS: int = ConstSolverDefaults.MaxIterations.value
TOLERANCE: float = ConstSolverDefaults.Tolerance.value

XYZ_COMPONENTS = 3  # x, y, z components in 3D

# Smallest axis length for which both one-sided stencils fit
MIN_CELLS_PER_AXIS = 3

STENCIL_CENTRAL: int = DifferenceStencil.CENTRAL.int_value
STENCIL_FORWARD: int = DifferenceStencil.FORWARD.int_value
STENCIL_BACKWARD: int = DifferenceStencil.BACKWARD.int_value
