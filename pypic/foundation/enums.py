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
Enumerations used to configure pyPIC:

    - Precision of grid buffers (Precision)
    - Verbosity levels (VerbosityLevel)
    - Finite-difference stencils of the field differentiator (DifferenceStencil)

This module has no dependencies beyond `enumbase` so that the configuration
modules can import it first.
"""

from pypic.foundation.enumbase import BaseInfoEnum


class Precision(BaseInfoEnum):
    """Floating point precision of grid buffers."""

    SINGLE = 1, "Use single precision (4-byte) for real numbers."
    DOUBLE = 2, "Use double precision (8-byte) for real numbers."


class VerbosityLevel(BaseInfoEnum):
    """Verbosity levels for console output in pyPIC."""

    CRITICAL = (
        50,
        "Log only critical failures or mandatory final results.",
    )
    ERROR = (
        40,
        "Log errors preventing an operation from completing (e.g., a solve that did not converge).",
    )
    NOTICE = (
        35,
        "Log final results, excluding warnings, timings, and progress details.",
    )
    WARNING = (
        30,
        "Log warnings for potential issues or unexpected conditions.",
    )
    INFO = (
        20,
        "Log solver progress (residual tables) and per-update timings.",
    )
    DEBUG = (
        10,
        "Log internal states such as grid geometry and derived constants.",
    )
    TRACE = (
        5,
        "Log every convergence check and stage boundary.",
    )


class DifferenceStencil(BaseInfoEnum):
    """Second-order finite-difference stencils used to differentiate the potential."""

    CENTRAL = 1, "Central difference, (P[n+1] - P[n-1]) / 2h, for interior indices."
    FORWARD = 2, "One-sided forward difference, (-3P[0] + 4P[1] - P[2]) / 2h, at the first index."
    BACKWARD = 4, "One-sided backward difference, (P[n-3] - 4P[n-2] + 3P[n-1]) / 2h, at the last index."
