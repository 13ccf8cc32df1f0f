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

"""Tests for pypic.engine.electrostatic."""

import numpy as np
import pytest

from pypic.config.logging_config import INFO
from pypic.constants import ConstPhysical
from pypic.engine.electrostatic import ElectrostaticEngine
from pypic.field.scalar import ScalarGrid
from pypic.field.vector import VectorGrid
from pypic.foundation.exceptions import GridConstructionError, NonConvergenceError
from pypic.solver.sor.gauss_seidel import GaussSeidelSORSolver


def test_construction_geometry():
    engine = ElectrostaticEngine(size=[1.0, 2.0, 3.0], cells=[3, 11, 31])

    assert engine.size == (1.0, 2.0, 3.0)
    assert engine.cells == (3, 11, 31)
    assert tuple(engine.delta) == pytest.approx((0.5, 0.2, 0.1))
    assert tuple(engine.delta_inv_sq) == pytest.approx((4.0, 25.0, 100.0))

    for grid in (engine.potential, engine.charge_density, engine.cell_vol):
        assert isinstance(grid, ScalarGrid)
        assert grid.cells == (3, 11, 31)
        assert len(grid) == 3 * 11 * 31
        np.testing.assert_array_equal(grid.data, 0.0)
    assert isinstance(engine.electric_field, VectorGrid)
    assert engine.electric_field.cells == (3, 11, 31)
    assert isinstance(engine.solver, GaussSeidelSORSolver)
    assert engine.last_solve is None


def test_geometry_accessors_return_copies():
    engine = ElectrostaticEngine((1.0, 1.0, 1.0), (3, 3, 3))
    engine.cells.x = 100
    engine.delta.x = 100.0
    assert engine.cells == (3, 3, 3)
    assert engine.delta == (0.5, 0.5, 0.5)


@pytest.mark.parametrize(
    "size, cells",
    [
        ((1.0, 1.0, 1.0), (2, 3, 3)),
        ((1.0, 1.0, 1.0), (3, 3, 0)),
        ((1.0, 1.0, 1.0), (3.0, 3, 3)),
        ((1.0, 1.0, 1.0), (3, 3)),
        ((0.0, 1.0, 1.0), (3, 3, 3)),
        ((1.0, -1.0, 1.0), (3, 3, 3)),
        ((1.0, 1.0, float("inf")), (3, 3, 3)),
        ((float("nan"), 1.0, 1.0), (3, 3, 3)),
        (("1", 1.0, 1.0), (3, 3, 3)),
        ((1.0, 1.0), (3, 3, 3)),
        (1.0, (3, 3, 3)),
    ],
)
def test_invalid_construction_raises(size, cells):
    with pytest.raises(GridConstructionError):
        ElectrostaticEngine(size, cells)


def test_zero_charge_update():
    engine = ElectrostaticEngine([1.0, 2.0, 3.0], [3, 11, 31])
    engine.update()

    assert engine.last_solve.iterations == 1
    np.testing.assert_array_equal(engine.potential.data, 0.0)
    for component in engine.electric_field.components():
        np.testing.assert_array_equal(component.data, 0.0)
    assert set(engine.timings) == {"Solving potential", "Calculating electric field"}


def test_point_charge_update_and_warm_start():
    # unit spacing and one interior point: phi = rho / (6 * eps0)
    engine = ElectrostaticEngine((2.0, 2.0, 2.0), (3, 3, 3))
    engine.charge_density[1, 1, 1] = 6.0 * ConstPhysical.VacuumPermittivity.value

    engine.update()
    first = engine.last_solve
    assert first.iterations == 26
    assert engine.potential[1, 1, 1] == pytest.approx(1.0, rel=1e-5)

    field = engine.electric_field
    assert field.x[0, 1, 1] == pytest.approx(-2.0, rel=1e-4)
    assert field.x[2, 1, 1] == pytest.approx(2.0, rel=1e-4)
    assert field.y[1, 0, 1] == pytest.approx(-2.0, rel=1e-4)
    assert field.z[1, 1, 2] == pytest.approx(2.0, rel=1e-4)
    assert field.x[1, 1, 1] == pytest.approx(0.0, abs=1e-12)

    engine.update()
    assert engine.last_solve.iterations == 1
    assert engine.potential[1, 1, 1] == pytest.approx(1.0, rel=1e-5)


def test_non_convergence_aborts_field_update():
    solver = GaussSeidelSORSolver(tolerance=0.0, max_iterations=5)
    engine = ElectrostaticEngine((2.0, 2.0, 2.0), (3, 3, 3), solver=solver)
    engine.charge_density[1, 1, 1] = 6.0 * ConstPhysical.VacuumPermittivity.value

    with pytest.raises(NonConvergenceError) as excinfo:
        engine.update()

    assert excinfo.value.max_iterations == 5
    assert engine.last_solve is None
    # the potential keeps its partially relaxed state
    assert engine.potential[1, 1, 1] != 0.0
    for component in engine.electric_field.components():
        np.testing.assert_array_equal(component.data, 0.0)
    assert "Solving potential" in engine.timings
    assert "Calculating electric field" not in engine.timings


def test_cell_vol_is_untouched_by_update():
    engine = ElectrostaticEngine((2.0, 2.0, 2.0), (3, 3, 3))
    engine.charge_density.fill(1.0e-12)
    engine.update()
    np.testing.assert_array_equal(engine.cell_vol.data, 0.0)


def test_timings_are_printed_at_info_verbosity(capsys):
    engine = ElectrostaticEngine((2.0, 2.0, 2.0), (3, 3, 3))
    engine._VERBOSITY = INFO
    engine.update()

    lines = capsys.readouterr().out.splitlines()
    assert any(line.startswith("    Time> Solving potential") for line in lines)
    assert any(line.startswith("    Time> Calculating electric field") for line in lines)


def test_failed_update_clears_previous_solve_state():
    solver = GaussSeidelSORSolver(max_iterations=2)
    engine = ElectrostaticEngine((2.0, 2.0, 2.0), (3, 3, 3), solver=solver)
    engine.update()
    assert engine.last_solve.iterations == 1
    assert "Calculating electric field" in engine.timings

    engine.charge_density[1, 1, 1] = 1.0e-9
    with pytest.raises(NonConvergenceError):
        engine.update()

    assert engine.last_solve is None
    assert list(engine.timings) == ["Solving potential"]
