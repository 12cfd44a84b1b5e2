"""Shared fixtures for the StupidModel test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from stupidmodel.common.constants import FOOD_VALUE_LAYER_ID
from stupidmodel.simulation.config import SimulationConfig
from stupidmodel.world.context import SimulationContext
from stupidmodel.world.grid import Grid
from stupidmodel.world.value_layer import GridValueLayer

MAX_COORD = 2**31 - 1


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def coords(rng: Generator) -> tuple[int, int]:
    """A random valid ``(x, y)`` pair."""
    return int(rng.integers(0, MAX_COORD)), int(rng.integers(0, MAX_COORD))


@pytest.fixture
def empty_context() -> SimulationContext:
    """A context without any value layers."""
    return SimulationContext()


@pytest.fixture
def food_context() -> SimulationContext:
    """A 4x4 context with the food value layer registered."""
    context = SimulationContext()
    context.add_value_layer(
        GridValueLayer(name=FOOD_VALUE_LAYER_ID, width=4, height=4),
    )
    return context


@pytest.fixture
def small_grid() -> Grid:
    """A small 8x8 grid for fast tests."""
    return Grid(width=8, height=8)


@pytest.fixture
def small_config() -> SimulationConfig:
    """An 8x8 config (no YAML file needed)."""
    return SimulationConfig(seed=7, grid_width=8, grid_height=8)
