"""SimulationEngine — builds the habitat and grows food tick by tick.

The engine wires together the collaborators a HabitatCell expects:

1. A context holding every cell
2. The food value layer registered in that context
3. A grid with one cell per location

Each tick every cell grows food once, in row-major order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.random import Generator

from stupidmodel.agents.habitat_cell import HabitatCell, sort_by_food_availability
from stupidmodel.common.cell_data import CellData
from stupidmodel.common.constants import FOOD_VALUE_LAYER_ID
from stupidmodel.simulation.config import SimulationConfig
from stupidmodel.world.cell_data_file import load_cell_data
from stupidmodel.world.context import SimulationContext
from stupidmodel.world.grid import Grid, GridCell
from stupidmodel.world.value_layer import GridValueLayer

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Owns the habitat and advances it.

    Attributes:
        config: Loaded model configuration.
        context: Container for cells and the food value layer.
        food_layer: Shared array mirroring each cell's food.
        grid: Spatial index of cells.
        cells: Cells indexed as ``cells[y][x]``.
        rng: Master seeded random generator.
        tick: Current tick count.
    """

    config: SimulationConfig
    context: SimulationContext = field(init=False)
    food_layer: GridValueLayer = field(init=False)
    grid: Grid = field(init=False)
    cells: list[list[HabitatCell]] = field(init=False, repr=False)
    rng: Generator = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build context, food layer, grid, and cells from config."""
        self.rng = np.random.default_rng(self.config.seed)
        width, height = self.config.grid_width, self.config.grid_height

        self.context = SimulationContext()
        self.food_layer = GridValueLayer(
            name=FOOD_VALUE_LAYER_ID,
            width=width,
            height=height,
        )
        self.context.add_value_layer(self.food_layer)
        self.grid = Grid(width=width, height=height)

        rates = self._production_rates()
        self.cells = []
        for y in range(height):
            row: list[HabitatCell] = []
            for x in range(width):
                cell = HabitatCell(CellData(x=x, y=y, production_rate=float(rates[y, x])))
                cell.food_availability = self.config.initial_food_availability
                self.food_layer.set(cell.food_availability, x, y)
                self.context.add(cell)
                self.grid.place(cell, x, y)
                row.append(cell)
            self.cells.append(row)

        logger.info(
            "Built %dx%d habitat, mean production rate %.5f",
            width,
            height,
            float(rates.mean()) if rates.size else 0.0,
        )

    def cell_at(self, x: int, y: int) -> HabitatCell:
        """Return the habitat cell at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not self.grid.contains(x, y):
            msg = f"({x}, {y}) out of bounds for {self.grid.width}x{self.grid.height}"
            raise IndexError(msg)
        return self.cells[y][x]

    def step(self) -> None:
        """Grow food on every cell once."""
        for row in self.cells:
            for cell in row:
                cell.grow_food()
        self.tick += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tick %d: total food %.4f", self.tick, self.total_food())

    def run(self, ticks: int) -> None:
        """Run the model for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def total_food(self) -> float:
        """Return the food available across all cells."""
        return sum(cell.food_availability for row in self.cells for cell in row)

    def richest_cells(self, x: int, y: int, extent: int = 1) -> list[GridCell[Any]]:
        """Return the neighbourhood of ``(x, y)``, richest location first.

        Args:
            x: Centre column.
            y: Centre row.
            extent: Neighbourhood radius.
        """
        return sort_by_food_availability(self.grid.neighbourhood(x, y, extent))

    def _production_rates(self) -> np.ndarray:
        """Return per-location production rates as a ``(height, width)`` array."""
        shape = (self.config.grid_height, self.config.grid_width)
        if self.config.cell_data_file is None:
            return self.rng.uniform(0.0, self.config.max_food_production_rate, size=shape)

        # Locations absent from the file produce nothing
        rates = np.zeros(shape, dtype=np.float64)
        records = load_cell_data(self.config.cell_data_file)
        for record in records:
            if not self.grid.contains(record.x, record.y):
                msg = (
                    f"cell data ({record.x}, {record.y}) outside "
                    f"{self.grid.width}x{self.grid.height} grid"
                )
                raise IndexError(msg)
            rates[record.y, record.x] = record.production_rate
        logger.info(
            "Loaded %d cell records from %s",
            len(records),
            self.config.cell_data_file,
        )
        return rates
