"""Constants shared across the model and its tests."""

from __future__ import annotations

# Name under which the food value layer is registered in a context.
FOOD_VALUE_LAYER_ID = "Food Value Layer"

# Tolerance for floating-point comparisons of food amounts.
DELTA = 1e-6

DEFAULT_FOOD_AVAILABILITY = 0.0
DEFAULT_MAX_FOOD_PRODUCTION_RATE = 0.01
