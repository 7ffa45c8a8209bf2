"""Ordered component store and name resolution."""

from typing import Iterator, List, Optional

from .models import Component, ComponentNotFoundError, RegistryFullError


class Registry:
    """Append-only list of components in declaration order.

    Names are not required to be unique; lookups return the first match.
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity
        self._components: List[Component] = []

    def add(self, component: Component) -> Component:
        if self.capacity is not None and len(self._components) >= self.capacity:
            raise RegistryFullError(self.capacity)
        self._components.append(component)
        return component

    def find(self, name: str) -> Optional[Component]:
        """Return the first component called ``name``, or None."""
        for component in self._components:
            if component.name == name:
                return component
        return None

    def require(self, name: str, role: str = "Component") -> Component:
        """Resolve ``name`` or raise ComponentNotFoundError.

        Args:
            name: Component name to look up
            role: How the reference is described in the error ("Component", "Part")

        Returns:
            The first component with that name
        """
        component = self.find(name)
        if component is None:
            raise ComponentNotFoundError(name, role)
        return component

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None


__all__ = ["Registry"]
