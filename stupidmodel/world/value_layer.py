"""GridValueLayer — a named numeric field laid over the grid.

Value layers are owned by a ``SimulationContext`` and looked up by name,
so several agents can write into the same shared array.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass
class GridValueLayer:
    """A single named layer stored as a 2D NumPy array.

    Attributes:
        name: Identifier used to register and look up the layer.
        width: Grid columns.
        height: Grid rows.
        default_value: Initial value of every location.
        grid: Values indexed as ``grid[y, x]``.
    """

    name: str
    width: int
    height: int
    default_value: float = 0.0
    grid: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate the backing array filled with ``default_value``."""
        self.grid = np.full(
            (self.height, self.width),
            self.default_value,
            dtype=np.float64,
        )

    def get(self, x: int, y: int) -> float:
        """Return the value stored at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        self._check_bounds(x, y)
        return float(self.grid[y, x])

    def set(self, value: float, x: int, y: int) -> None:
        """Store ``value`` at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        self._check_bounds(x, y)
        self.grid[y, x] = value

    def total(self) -> float:
        """Return the sum over the whole layer."""
        return float(self.grid.sum())

    def _check_bounds(self, x: int, y: int) -> None:
        # Negative indices would silently wrap in NumPy
        if not (0 <= x < self.width and 0 <= y < self.height):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
