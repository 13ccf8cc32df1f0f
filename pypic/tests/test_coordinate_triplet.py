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

"""Tests for pypic.foundation.coordinate_triplet."""

import numpy as np

from pypic.foundation.coordinate_triplet import CoordinateTriplet


def test_copy_is_independent():
    original = CoordinateTriplet(1, 2, 3)
    duplicate = original.copy()
    duplicate.x = 10
    assert original == CoordinateTriplet(1, 2, 3)
    assert duplicate == CoordinateTriplet(10, 2, 3)


def test_equality_against_triplets_and_tuples():
    assert CoordinateTriplet(0.5, 0.2, 0.1) == CoordinateTriplet(0.5, 0.2, 0.1)
    assert CoordinateTriplet(1, 2, 3) != CoordinateTriplet(1, 2, 4)
    assert CoordinateTriplet(1, 2, 3) == (1, 2, 3)
    assert CoordinateTriplet(1, 2, 3) != "(1, 2, 3)"


def test_str_and_repr():
    assert str(CoordinateTriplet(3, 11, 31)) == "(3, 11, 31)"
    assert repr(CoordinateTriplet(1, 2, 3)) == "CoordinateTriplet(1, 2, 3)"


def test_sequence_protocol():
    triplet = CoordinateTriplet(4, 5, 6)
    assert list(triplet) == [4, 5, 6]
    assert len(triplet) == 3
    assert (triplet[0], triplet[1], triplet[2]) == (4, 5, 6)
    x, y, z = triplet
    assert (x, y, z) == (4, 5, 6)


def test_as_array():
    arr = CoordinateTriplet(3, 11, 31).as_array(np.int64)
    assert arr.dtype == np.int64
    np.testing.assert_array_equal(arr, [3, 11, 31])
