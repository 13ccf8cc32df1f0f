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
Verbosity settings for pyPIC.

Every module that reports progress looks up its effective verbosity here,
once, at import time:

    _VERBOSITY = get_effective_verbosity(__name__)

and passes it to `vprint` together with the level of each message. The
effective verbosity is the more restrictive of the global level and the
module-specific override, so raising either one silences a module.
"""

from pypic.foundation.enums import VerbosityLevel as _VL
from typing import TypeAlias

# Integer value of a VerbosityLevel member (e.g., logging_config.INFO).
VerbosityLevelValue: TypeAlias = int


CRITICAL = _VL.CRITICAL.int_value  # 50
ERROR = _VL.ERROR.int_value  # 40
NOTICE = _VL.NOTICE.int_value  # 35
WARNING = _VL.WARNING.int_value  # 30
INFO = _VL.INFO.int_value  # 20
DEBUG = _VL.DEBUG.int_value  # 10
TRACE = _VL.TRACE.int_value  # 5

_VALID_VERBOSITY_VALUES = frozenset(level.int_value for level in _VL)


# Keys are fully qualified module names, i.e. what `__name__` evaluates to.
_MODULE_VERBOSITY_SETTINGS = {
    # config
    "pypic.config.global_runtime": NOTICE,
    # field
    "pypic.field.scalar": NOTICE,
    # solver
    "pypic.solver.sor.gauss_seidel": INFO,
    # engine
    "pypic.engine.electrostatic": INFO,
}


_GLOBAL_VERBOSITY_LEVEL = WARNING


def _validate_level_value(level_value, target: str):
    if isinstance(level_value, bool) or not isinstance(level_value, int):
        raise ValueError(
            f"Invalid verbosity level_value for {target}: {level_value!r}. "
            f"Must be one of {sorted(_VALID_VERBOSITY_VALUES)}."
        )
    if level_value not in _VALID_VERBOSITY_VALUES:
        raise ValueError(
            f"Invalid verbosity level_value for {target}: {level_value}. "
            f"Must be one of {sorted(_VALID_VERBOSITY_VALUES)}."
        )


def set_global_verbosity_level(level_value: VerbosityLevelValue):
    """
    Sets the global verbosity level.
    Higher `level_value` means less verbose output (more severe messages).
    Raises ValueError if `level_value` is not a valid VerbosityLevel integer.
    """
    global _GLOBAL_VERBOSITY_LEVEL
    _validate_level_value(level_value, "global")
    _GLOBAL_VERBOSITY_LEVEL = level_value


def get_global_verbosity_level() -> VerbosityLevelValue:
    """Returns the current global verbosity level (integer value)."""
    return _GLOBAL_VERBOSITY_LEVEL


def set_module_verbosity(module_name: str, level_value: VerbosityLevelValue):
    """
    Sets the verbosity level for one module.

    Modules read their effective verbosity at import time, so an override only
    takes effect for modules imported after this call.
    """
    _validate_level_value(level_value, module_name)
    _MODULE_VERBOSITY_SETTINGS[module_name] = level_value


def get_module_verbosity(module_name: str) -> VerbosityLevelValue:
    """
    Returns the configured verbosity for `module_name`, falling back to the
    global level for modules without an entry.
    """
    return _MODULE_VERBOSITY_SETTINGS.get(module_name, _GLOBAL_VERBOSITY_LEVEL)


def get_effective_verbosity(module_name: str) -> VerbosityLevelValue:
    """
    Effective verbosity of a module: the higher (more restrictive) of the
    global level and the module level. Only messages at or above it print.
    """
    return max(get_global_verbosity_level(), get_module_verbosity(module_name))
