"""Entity registry, systems and per-frame timing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TypeVar

from ecsengine.components import Component

Entity = int

C = TypeVar("C", bound=Component)


@dataclass
class Clock:
    """Frame timing in seconds."""

    elapsed_time: float = 0.0
    previous_time: float = 0.0
    delta_time: float = 0.0

    def tick(self, now: float) -> float:
        """Advance to time ``now`` and return the time since the last tick."""
        self.elapsed_time = now
        self.delta_time = now - self.previous_time
        self.previous_time = now
        return self.delta_time


@dataclass
class State:
    """Shared game state."""

    active_camera: Entity = 0


class System(ABC):
    """Logic run once per frame over the registry."""

    @abstractmethod
    def run(self, registry: Registry, state: State, clock: Clock) -> None:
        """Update the registry for one frame."""


class Registry:
    """Holds components by type and entity, and the active systems."""

    def __init__(self) -> None:
        self._systems: dict[type[System], System] = {}
        self._components: dict[type[Component], dict[Entity, Component]] = {}

    def activate(self, system_type: type[System], *args: Any) -> None:
        """Create and enable a system; a system already active is kept."""
        if not (isinstance(system_type, type) and issubclass(system_type, System)):
            raise TypeError(f"{system_type!r} is not a System type")
        if system_type not in self._systems:
            self._systems[system_type] = system_type(*args)

    def deactivate(self, system_type: type[System]) -> None:
        self._systems.pop(system_type, None)

    def add(self, entity: Entity, component: Component) -> None:
        """Attach a component; an existing one of the same type is kept."""
        if not isinstance(component, Component):
            raise TypeError(f"{component!r} is not a Component")
        self._components.setdefault(type(component), {}).setdefault(entity, component)

    def remove(self, entity: Entity, component_type: type[Component]) -> None:
        self._components.get(component_type, {}).pop(entity, None)

    def has(self, entity: Entity, component_type: type[Component]) -> bool:
        return entity in self._components.get(component_type, {})

    def get(self, entity: Entity, component_type: type[C]) -> C:
        """The entity's component of the given type; raises KeyError if absent."""
        try:
            return self._components.get(component_type, {})[entity]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {component_type.__name__} component"
            ) from None

    def view(self, *args: type[Component]) -> set[Entity]:
        """Entities that have every one of the given component types."""
        if not args:
            raise TypeError("view needs at least one component type")
        first, *rest = (self._components.get(kind, {}) for kind in args)
        return {entity for entity in first if all(entity in other for other in rest)}

    def run(self, state: State, clock: Clock) -> None:
        """Run every active system once, in activation order."""
        for system in list(self._systems.values()):
            system.run(self, state, clock)