"""Fluent in-place update and shallow clone.

Usage:
    @describable
    @dataclass
    class Person(Clonable):
        first_name: str = ""
        last_name: str = ""
        age: int = 0

    person = Person().update(first_name="Paul", last_name="Napier", age=21)
    older = person.clone().update(age=100)

    # Free functions work on any described object
    twin = clone(person)
    update(twin, lambda p: p.friends.append("Ringo"))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from fieldkit.config import FieldkitSettings
from fieldkit.core.describable import DescriptorRegistry, get_registry, mutable_fields
from fieldkit.core.types import ABSENT, Shallow
from fieldkit.introspection.local import AttributeAccessor, RegistryAccessor
from fieldkit.introspection.protocol import FieldMetadataProvider, ValueAccessor


def update[T](instance: T, mutate: Callable[[T], Any] | None = None, /, **changes: Any) -> T:
    """Mutate `instance` in place and return it for chaining.

    Args:
        instance: Object to modify. It is not copied.
        mutate: Called with the instance itself. Its return value is ignored.
        **changes: Attribute assignments applied after `mutate`.

    Returns:
        The same instance.
    """
    if mutate is not None:
        mutate(instance)
    for name, value in changes.items():
        setattr(instance, name, value)
    return instance


def clone[T](
    instance: T,
    *,
    provider: FieldMetadataProvider | None = None,
    accessor: ValueAccessor | None = None,
    settings: FieldkitSettings | None = None,
) -> Shallow[T]:
    """Create a shallow copy of `instance` through its mutable fields.

    A default instance of the exact runtime type is constructed, then every
    mutable field along the type's ancestry is read from the source and
    written to the copy. Read-only fields and fields of non-object-like type
    keep their default values.

    Args:
        instance: Object to copy. Its type must be default-constructible.
        provider: Field metadata source. Defaults to the global registry.
        accessor: Value accessor. Defaults to the registry's field accessors,
            or to plain attribute access for a custom provider.
        settings: Decoder warnings and null policy. Loaded from the
            environment if omitted.

    Returns:
        A new instance sharing the source's field values by reference.

    Raises:
        TypeError: If nothing in the type's ancestry is described.
    """
    cls = type(instance)
    if provider is None:
        provider = get_registry()
    if isinstance(provider, DescriptorRegistry) and not provider.describes(cls):
        raise TypeError(
            f"{cls.__name__} is not describable. Did you forget @describable decorator?"
        )
    if accessor is None:
        if isinstance(provider, DescriptorRegistry):
            accessor = RegistryAccessor(provider)
        else:
            accessor = AttributeAccessor()
    settings = settings or FieldkitSettings()

    duplicate = cls()
    for descriptor in mutable_fields(cls, provider, warn=settings.warn_undecodable):
        value = accessor.get_value(instance, descriptor.name)
        if value is ABSENT:
            continue
        if value is None and not settings.copy_none:
            continue
        accessor.set_value(duplicate, descriptor.name, value)
    return duplicate


class Updatable:
    """Mixin adding a fluent `update` method."""

    __slots__ = ()

    def update(self, mutate: Callable[[Self], Any] | None = None, /, **changes: Any) -> Self:
        """Mutate in place and return self. See `fieldkit.cloning.update`."""
        return update(self, mutate, **changes)


class Clonable(Updatable):
    """Mixin adding `clone` on top of `update`."""

    __slots__ = ()

    def clone(self) -> Shallow[Self]:
        """Shallow copy through mutable fields. See `fieldkit.cloning.clone`."""
        return clone(self)
