"""CellData — construction parameters for a single habitat cell."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CellData:
    """Immutable description of one habitat cell.

    Values are not validated here; ``HabitatCell`` rejects bad ones.

    Attributes:
        x: Column position.
        y: Row position.
        production_rate: Food added to the cell on each growth step.
    """

    x: int
    y: int
    production_rate: float
