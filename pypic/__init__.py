#!/usr/bin/env python
# coding: utf-8

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
pyPIC: a Python/Numba implementation of the electrostatic field-solve core
of a particle-in-cell (PIC) plasma model.
"""

__author__ = "The pyPIC Project"
__copyright__ = "Copyright 2025, The pyPIC Project"
__license__ = "AGPL-3.0-or-later"
__version__ = "0.1.0"

__maintainers__ = ["pyPIC Development Team"]

__status__ = "Alpha"
