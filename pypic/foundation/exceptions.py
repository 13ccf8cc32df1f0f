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
Exceptions raised by pyPIC.

`GridConstructionError` derives from ValueError and `NonConvergenceError`
from RuntimeError, so callers written against the builtin types keep working.
"""


class PICError(Exception):
    """Base class of all pyPIC errors."""


class GridConstructionError(PICError, ValueError):
    """Raised when a grid or engine is given an unusable shape or extent."""


class NonConvergenceError(PICError, RuntimeError):
    """
    Raised when the potential solve exhausts its iteration budget.

    Attributes:
        tolerance (float): L2 residual tolerance that was not reached.
        max_iterations (int): Number of sweeps performed before giving up.
        residual (float): Last L2 residual norm computed, or None if no
            convergence check ran.
    """

    def __init__(self, tolerance, max_iterations, residual=None):
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.residual = residual
        super().__init__(
            f"solution to potential did not converge to tolerance of {tolerance} "
            f"in {max_iterations} iterations"
        )
