"""SimulationContext — the container agents and value layers live in.

A cell learns about shared state (such as the food value layer) through
the context it was added to, never through globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, TypeVar

from stupidmodel.world.value_layer import GridValueLayer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValueLayerNotFoundError(RuntimeError):
    """Raised when an operation needs a value layer the context lacks."""


@dataclass
class SimulationContext:
    """Holds the agents of a run and its named value layers.

    Attributes:
        agents: Registered agents in insertion order.
        value_layers: Mapping from layer name to layer.
    """

    agents: list[Any] = field(default_factory=list)
    value_layers: dict[str, GridValueLayer] = field(default_factory=dict)

    def add(self, agent: Any) -> None:
        """Register ``agent`` and bind it to this context.

        Args:
            agent: Any object with a writable ``context`` attribute.
        """
        self.agents.append(agent)
        agent.context = self

    def remove(self, agent: Any) -> None:
        """Unregister ``agent`` and clear its context binding.

        Raises:
            ValueError: If the agent is not part of this context.
        """
        self.agents.remove(agent)
        agent.context = None

    def agents_of_type(self, cls: type[T]) -> list[T]:
        """Return all registered agents that are instances of ``cls``."""
        return [agent for agent in self.agents if isinstance(agent, cls)]

    def add_value_layer(self, layer: GridValueLayer) -> None:
        """Register a value layer under its own name.

        Raises:
            ValueError: If a layer with the same name already exists.
        """
        if layer.name in self.value_layers:
            msg = f"value layer {layer.name!r} already registered"
            raise ValueError(msg)
        self.value_layers[layer.name] = layer
        logger.debug("Registered value layer %r", layer.name)

    def get_value_layer(self, name: str) -> GridValueLayer | None:
        """Return the layer called ``name``, or None if absent."""
        return self.value_layers.get(name)

    def require_value_layer(self, name: str) -> GridValueLayer:
        """Return the layer called ``name``.

        Raises:
            ValueLayerNotFoundError: If no such layer is registered.
        """
        layer = self.get_value_layer(name)
        if layer is None:
            msg = f"no value layer named {name!r} in context"
            raise ValueLayerNotFoundError(msg)
        return layer
