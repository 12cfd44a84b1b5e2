"""Config — load model parameters from YAML files.

Grid size, seeding, and food production settings live in YAML and are
parsed into a typed dataclass here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from stupidmodel.common.constants import (
    DEFAULT_FOOD_AVAILABILITY,
    DEFAULT_MAX_FOOD_PRODUCTION_RATE,
)


@dataclass
class SimulationConfig:
    """Top-level model configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        grid_width: Number of grid columns.
        grid_height: Number of grid rows.
        max_food_production_rate: Upper bound for randomly drawn
            per-cell production rates.
        initial_food_availability: Food every cell starts with.
        cell_data_file: Optional path to a cell data file.  When set,
            production rates are read from it instead of drawn randomly.
    """

    seed: int = 42
    grid_width: int = 100
    grid_height: int = 100
    max_food_production_rate: float = DEFAULT_MAX_FOOD_PRODUCTION_RATE
    initial_food_availability: float = DEFAULT_FOOD_AVAILABILITY
    cell_data_file: str | None = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        A relative ``cell_data_file`` is resolved against the directory
        holding the YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        cell_data_file = data.get("cell_data_file", cls.cell_data_file)
        if cell_data_file is not None:
            cell_data_file = str(path.parent / cell_data_file)

        return cls(
            seed=data.get("seed", cls.seed),
            grid_width=data.get("grid_width", cls.grid_width),
            grid_height=data.get("grid_height", cls.grid_height),
            max_food_production_rate=data.get(
                "max_food_production_rate",
                cls.max_food_production_rate,
            ),
            initial_food_availability=data.get(
                "initial_food_availability",
                cls.initial_food_availability,
            ),
            cell_data_file=cell_data_file,
        )
