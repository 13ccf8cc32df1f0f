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


from enum import Enum


class BaseInfoEnum(Enum):
    """
    Enum whose members carry an integer value and a one-line description.

    Members are declared as ``NAME = int_value, "description"``. The integer is
    what kernels and configuration tables see (`int_value`); the description
    (`info`) is what a user sees in help output.
    """

    def __new__(cls, int_value, info):
        obj = object.__new__(cls)
        obj._value_ = int_value
        obj._info = info
        return obj

    @property
    def info(self):
        """Human-readable description of the member."""
        return self._info

    @property
    def int_value(self):
        """The member's integer value, for use where an Enum cannot go (Numba kernels)."""
        return self.value

    @classmethod
    def list(cls):
        """Names of all public members."""
        return [c.name for c in cls if not c.name.startswith("_")]

    @classmethod
    def help(cls):
        """'<NAME>: <description>' for every public member."""
        return [f"{c.name}: {c.info}" for c in cls if not c.name.startswith("_")]
