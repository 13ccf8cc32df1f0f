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
Runtime configuration shared by all pyPIC modules.

It defines:
- `PRECISION`: the floating point precision of grid buffers (single or double).
- `pic_int`, `pic_uint`, `pic_real`, `pic_bool`: NumPy types derived from
  `PRECISION`.
- `set_precision`, `get_precision`, `get_real_dtype` to change and query it.
- `print_if_verbose` (`vprint`) for level-filtered console output.

Grids resolve their default dtype through `get_real_dtype()` at construction
time, so a call to `set_precision` affects grids created after it.
"""

import numpy as np

from pypic.foundation.enums import Precision, VerbosityLevel
import pypic.config.logging_config as logging_config
from pypic.config.logging_config import (
    VerbosityLevelValue,
)

PRECISION = Precision.DOUBLE

pic_int: type = None
pic_real: type = None
pic_uint: type = None

pic_bool = np.uint8  # independent of precision


def _initialize_data_types():
    """Sets `pic_int`, `pic_uint` and `pic_real` from the current `PRECISION`."""
    global pic_int, pic_real, pic_uint

    if PRECISION == Precision.SINGLE:
        pic_int = np.int32
        pic_uint = np.uint32
        pic_real = np.float32
    elif PRECISION == Precision.DOUBLE:
        pic_int = np.int64
        pic_uint = np.uint64
        pic_real = np.float64
    else:
        raise ValueError(f"Invalid precision: {PRECISION}")


def set_precision(prec: Precision):
    """Sets the precision level and re-initializes data types.

    Args:
        prec: The desired precision level (Precision enum member).
    """
    global PRECISION
    if not isinstance(prec, Precision):
        raise ValueError(f"Invalid precision: {prec!r}")
    PRECISION = prec
    _initialize_data_types()


def get_precision() -> Precision:
    return PRECISION


def get_real_dtype() -> type:
    """Returns the NumPy real type matching the current precision."""
    return pic_real


def set_verbosity_level(level: VerbosityLevel):
    """
    Sets the global verbosity level. Delegates to logging_config.

    Args:
        level: The desired verbosity level (VerbosityLevel enum member).
    """
    logging_config.set_global_verbosity_level(level.int_value)
    print_if_verbose(
        logging_config.DEBUG,
        logging_config.get_effective_verbosity(__name__),
        f"Configured global verbosity level to: {level.name} (value: {level.int_value})",
    )


# Messages print when message_level >= configured_verbosity_level, the same
# filtering rule as the standard logging module.


def print_if_verbose(
    message_level: VerbosityLevelValue,
    configured_verbosity_level: VerbosityLevelValue,
    *args,
    sep=" ",
    end="\n",
    file=None,
    flush=False,
):
    """
    Prints a message if its level is GREATER THAN or EQUAL TO the configured
    verbosity level.

    Args:
        message_level: Level of this message (e.g., logging_config.DEBUG).
        configured_verbosity_level: Effective verbosity of the calling module.
        *args: The message arguments (like the standard print function).
        sep, end, file, flush: Same as the standard print function.
    """
    if message_level >= configured_verbosity_level:
        print(*args, sep=sep, end=end, file=file, flush=flush)


vprint = print_if_verbose

_initialize_data_types()
