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

from numpy import array as np_array


class CoordinateTriplet:
    """Represents any quantity with (x, y, z) components.

    Used for the physical extent of the domain, the number of cells along each
    axis, the grid spacing and per-cell vectors. The components are stored as
    given; no validation is performed here.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x, y, z):
        self.x = x
        self.y = y
        self.z = z

    def copy(self):
        return CoordinateTriplet(self.x, self.y, self.z)

    def as_array(self, dtype=None):
        """Returns the components as a NumPy array of shape (3,)."""
        return np_array([self.x, self.y, self.z], dtype=dtype)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __getitem__(self, axis):
        return (self.x, self.y, self.z)[axis]

    def __eq__(self, other):
        """Component-wise equality with another triplet or a 3-tuple."""
        if isinstance(other, CoordinateTriplet):
            return self.x == other.x and self.y == other.y and self.z == other.z
        if isinstance(other, tuple) and len(other) == 3:
            return self.x == other[0] and self.y == other[1] and self.z == other[2]
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"CoordinateTriplet({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self):
        """Returns string representation as '(x, y, z)'."""
        return f"({self.x}, {self.y}, {self.z})"
