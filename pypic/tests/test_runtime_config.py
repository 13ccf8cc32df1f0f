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

"""Tests for the precision and verbosity configuration in pypic.config."""

import numpy as np
import pytest

import pypic.config.global_runtime as global_runtime
import pypic.config.logging_config as logging_config
from pypic.config.global_runtime import vprint
from pypic.constants import ConstSolverDefaults, SOR_RELAXATION, TOLERANCE
from pypic.foundation.enums import DifferenceStencil, Precision, VerbosityLevel


@pytest.fixture
def restore_verbosity():
    saved_global = logging_config.get_global_verbosity_level()
    saved_modules = dict(logging_config._MODULE_VERBOSITY_SETTINGS)
    yield
    logging_config.set_global_verbosity_level(saved_global)
    logging_config._MODULE_VERBOSITY_SETTINGS.clear()
    logging_config._MODULE_VERBOSITY_SETTINGS.update(saved_modules)


def test_precision_switches_data_types():
    try:
        global_runtime.set_precision(Precision.SINGLE)
        assert global_runtime.get_precision() is Precision.SINGLE
        assert global_runtime.pic_real is np.float32
        assert global_runtime.pic_int is np.int32
    finally:
        global_runtime.set_precision(Precision.DOUBLE)
    assert global_runtime.get_real_dtype() is np.float64
    assert global_runtime.pic_uint is np.uint64
    assert global_runtime.pic_bool is np.uint8


def test_invalid_precision_raises():
    with pytest.raises(ValueError):
        global_runtime.set_precision(2)


def test_effective_verbosity_is_the_stricter_level(restore_verbosity):
    logging_config.set_global_verbosity_level(logging_config.DEBUG)
    logging_config.set_module_verbosity("pypic.some.module", logging_config.ERROR)
    assert logging_config.get_effective_verbosity("pypic.some.module") == logging_config.ERROR

    logging_config.set_global_verbosity_level(logging_config.CRITICAL)
    assert logging_config.get_effective_verbosity("pypic.some.module") == logging_config.CRITICAL
    assert logging_config.get_effective_verbosity("pypic.unlisted") == logging_config.CRITICAL


def test_set_verbosity_level_from_enum(restore_verbosity):
    global_runtime.set_verbosity_level(VerbosityLevel.TRACE)
    assert logging_config.get_global_verbosity_level() == VerbosityLevel.TRACE.int_value


@pytest.mark.parametrize("level", [0, 15, True, "INFO", 20.0])
def test_invalid_verbosity_values_raise(level, restore_verbosity):
    with pytest.raises(ValueError):
        logging_config.set_global_verbosity_level(level)
    with pytest.raises(ValueError):
        logging_config.set_module_verbosity("pypic.some.module", level)


def test_vprint_filters_by_level(capsys):
    vprint(logging_config.DEBUG, logging_config.INFO, "hidden")
    vprint(logging_config.INFO, logging_config.INFO, "shown", 1)
    vprint(logging_config.ERROR, logging_config.INFO, "also shown")
    assert capsys.readouterr().out == "shown 1\nalso shown\n"


def test_solver_defaults_and_enums():
    assert SOR_RELAXATION == ConstSolverDefaults.SORRelaxation.value == 1.4
    assert TOLERANCE == 1e-5
    assert DifferenceStencil.list() == ["CENTRAL", "FORWARD", "BACKWARD"]
    assert Precision.DOUBLE.int_value == 2
    assert all(": " in line for line in VerbosityLevel.help())
