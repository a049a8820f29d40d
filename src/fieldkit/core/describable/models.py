"""Describable models: per-type descriptor table records."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fieldkit.core.types import ABSENT, Lookup

METADATA_KEY = "attributes"
"""Dataclass field metadata key overriding a field's derived metadata string."""


def attribute_getter(name: str) -> Callable[[Any], Lookup[Any]]:
    """Build a getter reading `name`, reporting ABSENT when it is unset."""

    def get(instance: Any) -> Lookup[Any]:
        return getattr(instance, name, ABSENT)

    return get


def attribute_setter(name: str) -> Callable[[Any, Any], None]:
    """Build a setter writing `name` with setattr."""

    def set_(instance: Any, value: Any) -> None:
        setattr(instance, name, value)

    return set_


@dataclass(frozen=True, slots=True)
class FieldAccessor:
    """Typed get/set pair for one named field."""

    get: Callable[[Any], Lookup[Any]]
    set: Callable[[Any, Any], None]

    @classmethod
    def for_attribute(cls, name: str) -> FieldAccessor:
        return cls(get=attribute_getter(name), set=attribute_setter(name))


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """A locally declared field: its name, raw metadata, and accessors.

    The raw string is kept undecoded; decoding happens on every enumeration.
    """

    name: str
    raw_attributes: str
    accessor: FieldAccessor


@dataclass(frozen=True, slots=True)
class TypeMeta:
    """Metadata for a described type.

    Attributes:
        type_name: Fully qualified class name.
        fields: Directly declared fields, in declaration order.
        parent: Explicit parent override; None means use the nearest
            described class in the MRO.
    """

    type_name: str
    fields: tuple[FieldSpec, ...]
    parent: type | None = None

    def field(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

