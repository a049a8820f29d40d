"""Value accessors backed by the descriptor table or plain attributes."""

from __future__ import annotations

from typing import Any

from fieldkit.core.describable import DescriptorRegistry, get_registry
from fieldkit.core.types import ABSENT, Lookup


class RegistryAccessor:
    """Accessor that dispatches through each field's registered get/set pair.

    Lookups follow the instance's described chain, so a subclass that only
    inherits described fields is still served.
    """

    def __init__(self, registry: DescriptorRegistry | None = None) -> None:
        self._registry = registry or get_registry()

    def get_value(self, instance: Any, name: str) -> Lookup[Any]:
        spec = self._registry.field_spec(type(instance), name)
        if spec is None:
            return ABSENT
        return spec.accessor.get(instance)

    def set_value(self, instance: Any, name: str, value: Any) -> None:
        """Write `value` through the registered setter.

        Raises:
            AttributeError: If no class in the instance's chain describes `name`.
        """
        spec = self._registry.field_spec(type(instance), name)
        if spec is None:
            raise AttributeError(f"{type(instance).__name__} has no described field {name!r}")
        spec.accessor.set(instance, value)


class AttributeAccessor:
    """Accessor using plain getattr/setattr, for objects outside the registry."""

    def get_value(self, instance: Any, name: str) -> Lookup[Any]:
        return getattr(instance, name, ABSENT)

    def set_value(self, instance: Any, name: str, value: Any) -> None:
        setattr(instance, name, value)
