"""Grid — the spatial container habitat cells are placed on.

The grid stores arbitrary objects per location and answers the two
queries the model needs: "what is at (x, y)" and "what is around it".
Results are returned as ``GridCell`` snapshots so callers can sort them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, NamedTuple, TypeVar

T = TypeVar("T")


class GridPoint(NamedTuple):
    """Integer grid coordinates."""

    x: int
    y: int


@dataclass
class GridCell(Generic[T]):
    """The objects found at one grid location.

    Attributes:
        point: Where the objects are.
        items: Objects at that location, in placement order.
    """

    point: GridPoint
    items: list[T] = field(default_factory=list)

    def items_of_type(self, cls: type[T]) -> list[T]:
        """Return the items that are instances of ``cls``."""
        return [item for item in self.items if isinstance(item, cls)]


@dataclass
class Grid:
    """A bounded 2D grid without wrap-around.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        occupants: Objects per location indexed as ``occupants[y][x]``.
    """

    width: int
    height: int
    occupants: list[list[list[Any]]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Create an empty grid."""
        self.occupants = [
            [[] for _ in range(self.width)] for _ in range(self.height)
        ]

    def contains(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def place(self, obj: Any, x: int, y: int) -> None:
        """Put ``obj`` at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        self._check_bounds(x, y)
        self.occupants[y][x].append(obj)

    def grid_cell_at(self, x: int, y: int) -> GridCell[Any]:
        """Return a snapshot of the objects at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        self._check_bounds(x, y)
        return GridCell(point=GridPoint(x, y), items=list(self.occupants[y][x]))

    def neighbourhood(
        self,
        x: int,
        y: int,
        extent: int = 1,
        *,
        include_centre: bool = True,
    ) -> list[GridCell[Any]]:
        """Return the Moore neighbourhood around ``(x, y)``.

        Args:
            x: Centre column.
            y: Centre row.
            extent: How many cells outward to look in each direction.
            include_centre: Whether the centre location is part of the result.

        Returns:
            In-bounds grid cells, row by row.

        Raises:
            IndexError: If the centre is out of bounds.
            ValueError: If ``extent`` is negative.
        """
        self._check_bounds(x, y)
        if extent < 0:
            msg = f"extent must be >= 0, got {extent}"
            raise ValueError(msg)

        result: list[GridCell[Any]] = []
        for dy in range(-extent, extent + 1):
            for dx in range(-extent, extent + 1):
                if dx == 0 and dy == 0 and not include_centre:
                    continue
                nx, ny = x + dx, y + dy
                if self.contains(nx, ny):
                    result.append(
                        GridCell(point=GridPoint(nx, ny), items=list(self.occupants[ny][nx])),
                    )
        return result

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
