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
Electrostatic field-solve engine.

Owns the grids of one simulation domain and turns a charge density into a
potential and an electric field:

    engine = ElectrostaticEngine(size=(1.0, 2.0, 3.0), cells=(3, 11, 31))
    engine.charge_density[1, 5, 15] = 1.0e-12
    engine.update()
    ex, ey, ez = engine.electric_field.get(1, 5, 15)

Collaborators write `charge_density` before each `update()` and read
`potential` and `electric_field` after it. The potential is kept between
updates, so each solve starts from the previous solution.
"""

import math
import numbers
import time

from pypic.config.global_runtime import vprint
from pypic.config.logging_config import DEBUG, INFO, get_effective_verbosity
from pypic.constants import ConstPhysical, MIN_CELLS_PER_AXIS, XYZ_COMPONENTS
from pypic.field.scalar import ScalarGrid, as_cells_triplet
from pypic.field.vector import VectorGrid
from pypic.foundation.coordinate_triplet import CoordinateTriplet
from pypic.foundation.exceptions import GridConstructionError
from pypic.solver.gradient import calc_electric_field
from pypic.solver.sor.gauss_seidel import GaussSeidelSORSolver

MODULE_NAME = __name__


def _as_size_triplet(size) -> CoordinateTriplet:
    try:
        extents = tuple(size)
    except TypeError:
        raise GridConstructionError(
            f"size must be a triplet of numbers, got {size!r}"
        ) from None
    if len(extents) != XYZ_COMPONENTS:
        raise GridConstructionError(
            f"size must have exactly {XYZ_COMPONENTS} components, got {len(extents)}"
        )
    for axis, extent in zip("xyz", extents):
        if not isinstance(extent, numbers.Real) or isinstance(extent, bool):
            raise GridConstructionError(f"size.{axis} must be a number, got {extent!r}")
        if not math.isfinite(extent) or extent <= 0.0:
            raise GridConstructionError(
                f"size.{axis} must be finite and > 0, got {extent}"
            )
    return CoordinateTriplet(*(float(extent) for extent in extents))


class ElectrostaticEngine:
    """
    Potential and electric field of a charge density on a uniform 3D grid.

    The grid has `cells` points per axis spanning `size`, so the spacing is
    size / (cells - 1). The outermost points of every axis are boundary
    points: the solver keeps their potential fixed at zero.
    """

    def __init__(self, size, cells, solver: GaussSeidelSORSolver = None):
        """
        Initializes the engine and allocates its zero-filled grids.

        Args:
            size: Physical extent along (x, y, z); three finite numbers > 0.
            cells: Grid points along (x, y, z); three integers >= 3.
            solver (GaussSeidelSORSolver, optional): Potential solver. Defaults
                to a solver with the standard parameters.

        Raises:
            GridConstructionError: If `size` or `cells` is invalid. Nothing is
                allocated in that case.
        """
        self._VERBOSITY = get_effective_verbosity(MODULE_NAME)
        self._size = _as_size_triplet(size)
        self._cells = as_cells_triplet(cells, min_cells=MIN_CELLS_PER_AXIS)

        self._delta = CoordinateTriplet(
            *(s / (n - 1) for s, n in zip(self._size, self._cells))
        )
        self._delta_inv_sq = CoordinateTriplet(*(1.0 / (d * d) for d in self._delta))

        self._potential = ScalarGrid(self._cells)
        self._charge_density = ScalarGrid(self._cells)
        self._electric_field = VectorGrid(self._cells)
        # reserved for cell-volume weighting; not read by the solve
        self._cell_vol = ScalarGrid(self._cells)

        self._solver = solver if solver is not None else GaussSeidelSORSolver()
        self.last_solve = None
        self.timings = {}

        vprint(
            DEBUG,
            self._VERBOSITY,
            f"    ENGINE> size {self._size}, cells {self._cells}, "
            f"delta {self._delta}, 1/delta^2 {self._delta_inv_sq}",
        )

    @property
    def size(self) -> CoordinateTriplet:
        return self._size.copy()

    @property
    def cells(self) -> CoordinateTriplet:
        return self._cells.copy()

    @property
    def delta(self) -> CoordinateTriplet:
        return self._delta.copy()

    @property
    def delta_inv_sq(self) -> CoordinateTriplet:
        return self._delta_inv_sq.copy()

    @property
    def potential(self) -> ScalarGrid:
        return self._potential

    @property
    def charge_density(self) -> ScalarGrid:
        return self._charge_density

    @property
    def electric_field(self) -> VectorGrid:
        return self._electric_field

    @property
    def cell_vol(self) -> ScalarGrid:
        return self._cell_vol

    @property
    def solver(self) -> GaussSeidelSORSolver:
        return self._solver

    def update(self) -> None:
        """
        Solves the potential for the current charge density, then derives the
        electric field from it.

        Raises:
            NonConvergenceError: If the potential solve does not converge. The
                electric field is left untouched in that case, and `timings`
                holds only the failed potential stage.
        """
        self.timings.clear()
        self.solve_potential()
        self.solve_electric_field()
        self.print_timings()

    def solve_potential(self):
        """
        Relaxes `potential` in place against `charge_density`.

        Returns:
            SolveReport: Also stored as `last_solve`. `last_solve` is reset to
            None first, so it stays None when the solve raises.

        Raises:
            NonConvergenceError: If the solver's sweep budget is exhausted.
        """
        self.last_solve = None
        tic = time.perf_counter()
        try:
            self.last_solve = self._solver.solve(
                self._potential,
                self._charge_density,
                self._delta_inv_sq,
                ConstPhysical.InvVacuumPermittivity.value,
            )
        finally:
            self.timings["Solving potential"] = "{:0.3f}".format(
                time.perf_counter() - tic
            )
        return self.last_solve

    def solve_electric_field(self) -> VectorGrid:
        """Overwrites `electric_field` with the negative gradient of `potential`."""
        tic = time.perf_counter()
        calc_electric_field(self._potential, self._delta, self._electric_field)
        self.timings["Calculating electric field"] = "{:0.3f}".format(
            time.perf_counter() - tic
        )
        return self._electric_field

    def print_timings(self) -> None:
        """Prints the stage timings of the last update at INFO verbosity."""
        if self._VERBOSITY <= INFO:
            vprint(INFO, self._VERBOSITY, "")
            for kt, vt in self.timings.items():
                vprint(INFO, self._VERBOSITY, f"    Time> {kt:<44s} : {vt:>13s} s")
