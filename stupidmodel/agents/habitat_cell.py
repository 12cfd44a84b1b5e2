"""HabitatCell — a grid cell that produces food.

Each cell grows food at its own production rate and loses food when it
is eaten.  Growth is mirrored into the context's food value layer so the
whole grid can be read as one array.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stupidmodel.common.constants import DEFAULT_FOOD_AVAILABILITY, FOOD_VALUE_LAYER_ID
from stupidmodel.world.context import ValueLayerNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stupidmodel.common.cell_data import CellData
    from stupidmodel.world.context import SimulationContext
    from stupidmodel.world.grid import GridCell


class HabitatCell:
    """A single food-producing cell.

    Attributes:
        context: The context the cell was added to, if any.
    """

    def __init__(self, cell_data: CellData | None) -> None:
        """Create a cell from its construction parameters.

        Args:
            cell_data: Coordinates and initial production rate.

        Raises:
            ValueError: If ``cell_data`` is None, a coordinate is negative,
                or the production rate is negative or NaN.
        """
        if cell_data is None:
            msg = "cell_data must not be None"
            raise ValueError(msg)
        if cell_data.x < 0:
            msg = f"x must be >= 0, got {cell_data.x}"
            raise ValueError(msg)
        if cell_data.y < 0:
            msg = f"y must be >= 0, got {cell_data.y}"
            raise ValueError(msg)

        self._x = cell_data.x
        self._y = cell_data.y
        self._food_availability = DEFAULT_FOOD_AVAILABILITY
        self._food_production_rate = 0.0
        self.food_production_rate = cell_data.production_rate
        self.context: SimulationContext | None = None

    @property
    def x(self) -> int:
        """Column position."""
        return self._x

    @property
    def y(self) -> int:
        """Row position."""
        return self._y

    @property
    def food_availability(self) -> float:
        """Food currently available on this cell."""
        return self._food_availability

    @food_availability.setter
    def food_availability(self, value: float) -> None:
        if not value >= 0:
            msg = f"food availability must be >= 0, got {value}"
            raise ValueError(msg)
        self._food_availability = value

    @property
    def food_production_rate(self) -> float:
        """Food added on each call to :meth:`grow_food`."""
        return self._food_production_rate

    @food_production_rate.setter
    def food_production_rate(self, value: float) -> None:
        if not value >= 0:
            msg = f"food production rate must be >= 0, got {value}"
            raise ValueError(msg)
        self._food_production_rate = value

    def grow_food(self) -> None:
        """Add one step of production and publish it to the food layer.

        Raises:
            ValueLayerNotFoundError: If the cell is not in a context or
                the context has no food value layer.
            IndexError: If the cell lies outside the food value layer; the
                cell is left unchanged.
        """
        if self.context is None:
            msg = f"{self!r} is not part of a context"
            raise ValueLayerNotFoundError(msg)
        layer = self.context.require_value_layer(FOOD_VALUE_LAYER_ID)

        grown = self._food_availability + self._food_production_rate
        # Write the layer first so a failed write leaves the cell unchanged
        layer.set(grown, self._x, self._y)
        self._food_availability = grown

    def food_consumed(self, amount: float) -> None:
        """Remove ``amount`` of food eaten from this cell.

        Raises:
            ValueError: If ``amount`` is negative, NaN, or exceeds availability.
        """
        if not amount >= 0:
            msg = f"consumed amount must be >= 0, got {amount}"
            raise ValueError(msg)
        if amount > self._food_availability:
            msg = (
                f"cannot consume {amount}, only {self._food_availability} "
                f"available at ({self._x}, {self._y})"
            )
            raise ValueError(msg)
        self._food_availability -= amount

    def __repr__(self) -> str:
        return (
            f"HabitatCell(x={self._x}, y={self._y}, "
            f"food_availability={self._food_availability}, "
            f"food_production_rate={self._food_production_rate})"
        )


def food_availability_key(grid_cell: GridCell[Any]) -> float:
    """Sort key placing richer grid cells first.

    Use as ``sorted(cells, key=food_availability_key)``.

    Raises:
        ValueError: If the grid cell holds no HabitatCell.
    """
    habitats = grid_cell.items_of_type(HabitatCell)
    if not habitats:
        msg = f"no HabitatCell at {tuple(grid_cell.point)}"
        raise ValueError(msg)
    return -habitats[0].food_availability


def sort_by_food_availability(
    grid_cells: Iterable[GridCell[Any]],
) -> list[GridCell[Any]]:
    """Return ``grid_cells`` ordered by descending food availability."""
    return sorted(grid_cells, key=food_availability_key)
