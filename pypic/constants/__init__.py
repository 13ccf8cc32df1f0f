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
Constants used in pyPIC.

It re-exports:
    - ConstPhysical:        Physical constants (SI, double precision).
    - ConstSolverDefaults:  Default parameters of the SOR potential solve,
                            with the aliases SOR_RELAXATION,
                            CONVERGENCE_CHECK_INTERVAL, MAX_ITERATIONS and
                            TOLERANCE.
    - XYZ_COMPONENTS, MIN_CELLS_PER_AXIS: grid constants.
    - STENCIL_CENTRAL, STENCIL_FORWARD, STENCIL_BACKWARD: stencil labels.
"""

from .physical import ConstPhysical

from .application import (
    ConstSolverDefaults,
    SOR_RELAXATION,
    CONVERGENCE_CHECK_INTERVAL,
    MAX_ITERATIONS,
    TOLERANCE,
    XYZ_COMPONENTS,
    MIN_CELLS_PER_AXIS,
    STENCIL_CENTRAL,
    STENCIL_FORWARD,
    STENCIL_BACKWARD,
)
