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
This module defines an enumeration `ConstPhysical` of the physical constants
used by pyPIC, in SI units and double precision (CODATA 2022 values).
"""

from enum import Enum

_VACUUM_PERMITTIVITY = 8.8541878188e-12


class ConstPhysical(Enum):
    """
    Physical constants used in pyPIC (SI, double precision).

    Constants:
        VacuumPermittivity (float): Vacuum permittivity epsilon_0 (F/m).
        InvVacuumPermittivity (float): 1 / epsilon_0 (m/F), the factor applied
            to the charge density in the Poisson source term.
    """

    VacuumPermittivity = _VACUUM_PERMITTIVITY
    InvVacuumPermittivity = 1.0 / _VACUUM_PERMITTIVITY
