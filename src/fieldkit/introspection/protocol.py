"""Protocols for the collaborators the clone engine relies on.

The metadata provider supplies each type's directly declared fields and its
parent link; the value accessor reads and writes a named field on a live
instance. Swapping either lets the engine work over objects that are not
described in the global registry.

Usage:
    accessor = RegistryAccessor()
    clone(person, accessor=accessor)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from fieldkit.core.types import Lookup


@runtime_checkable
class FieldMetadataProvider(Protocol):
    """Source of raw per-field metadata for a type."""

    def local_fields(self, cls: type) -> list[tuple[str, str]]:
        """Fields declared directly on `cls` as (name, raw metadata) pairs.

        Must not include inherited fields; ancestry is composed by the
        enumerator.
        """
        ...

    def parent(self, cls: type) -> type | None:
        """Parent type of `cls`, or None at the root of the chain."""
        ...


@runtime_checkable
class ValueAccessor(Protocol):
    """Name-based access to field values on instances."""

    def get_value(self, instance: Any, name: str) -> Lookup[Any]:
        """Read a field.

        Returns:
            The value, an explicit None, or ABSENT if the instance has no
            value for `name`.
        """
        ...

    def set_value(self, instance: Any, name: str, value: Any) -> None:
        """Write a field. May raise for names the instance does not know."""
        ...
