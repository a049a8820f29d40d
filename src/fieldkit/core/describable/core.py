"""Descriptor registry, decorator, and metadata derivation.

Usage:
    @describable
    @dataclass
    class Person:
        first_name: str = ""
        last_name: str = ""
        age: int = 0

    # Explicit registration for classes that are not dataclasses:
    get_registry().register(Legacy, {"name": 'T@"str",C,N', "id": "Tq,R,N"})

Each described class records only its directly declared fields. Ancestry is
walked at enumeration time, see `fieldkit.core.describable.operations`.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import inspect
import sys
import typing
from collections.abc import Callable, Mapping, Sequence
from typing import Any, overload

from fieldkit.core.describable.models import METADATA_KEY, FieldAccessor, FieldSpec, TypeMeta
from fieldkit.core.metadata import Attribute, AttributeKind, Classification, encode_metadata

_PRIMITIVE_CODES: dict[Any, str] = {
    bool: Classification.CHAR.value,
    int: Classification.INT.value,
    float: Classification.DOUBLE.value,
    None: Classification.VOID.value,
    type(None): Classification.VOID.value,
}

# Unresolvable string annotations are matched by name
_NAMED_CODES: dict[str, str] = {
    "bool": Classification.CHAR.value,
    "int": Classification.INT.value,
    "float": Classification.DOUBLE.value,
    "None": Classification.VOID.value,
}

_VALUE_TYPES = (str, bytes, tuple, frozenset)
_NAMED_VALUE_TYPES = frozenset({"str", "bytes"})
_NAMED_CALLABLES = ("Callable", "typing.Callable", "abc.Callable", "collections.abc.Callable")


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _primitive_code(hint: Any) -> str | None:
    if hint is None or isinstance(hint, type):
        return _PRIMITIVE_CODES.get(hint)
    return None


def _is_callable_hint(hint: Any) -> bool:
    return hint is collections.abc.Callable or typing.get_origin(hint) is collections.abc.Callable


def _is_named_tuple(hint: Any) -> bool:
    return isinstance(hint, type) and issubclass(hint, tuple) and hasattr(hint, "_fields")


def _encode_named_hint(hint: str) -> str:
    name = hint.strip()
    if name in _NAMED_VALUE_TYPES:
        return f'{Classification.OBJECT.value}"{name}"'
    if name.partition("[")[0].strip() in _NAMED_CALLABLES:
        return Classification.OBJECT.value + Classification.FUNCTION.value
    return _NAMED_CODES.get(name, Classification.OBJECT.value)


def encode_type_hint(hint: Any) -> str:
    """Encode a Python type hint in the declared-type grammar.

    Args:
        hint: Resolved annotation, or the raw string if it could not be resolved.

    Returns:
        Type encoding without the leading `T`, e.g. ``q``, ``@"str"``, ``@?``.
    """
    if isinstance(hint, str):
        return _encode_named_hint(hint)
    code = _primitive_code(hint)
    if code is not None:
        return code
    if _is_callable_hint(hint):
        # Blocks: an object whose defining classification is a function
        return Classification.OBJECT.value + Classification.FUNCTION.value
    if _is_named_tuple(hint):
        # Member codes stay single characters so no quote can end the encoding early
        members = "".join(
            _NAMED_CODES.get(member, Classification.OBJECT.value)
            if isinstance(member, str)
            else _primitive_code(member) or Classification.OBJECT.value
            for member in inspect.get_annotations(hint).values()
        )
        return "{" + f"{hint.__name__}={members}" + Classification.STRUCT.value
    if isinstance(hint, type):
        return f'{Classification.OBJECT.value}"{hint.__name__}"'
    return Classification.OBJECT.value


def derive_metadata(hint: Any, *, readonly: bool = False) -> str:
    """Build the metadata string for a field declared with `hint`."""
    tokens = [AttributeKind.DECLARED_TYPE.value + encode_type_hint(hint)]
    if readonly:
        tokens.append(AttributeKind.READONLY.value)
    if isinstance(hint, str):
        if hint.strip() in _NAMED_VALUE_TYPES:
            tokens.append(AttributeKind.COPY.value)
    elif _primitive_code(hint) is None and isinstance(hint, type) and not _is_named_tuple(hint):
        if issubclass(hint, _VALUE_TYPES):
            tokens.append(AttributeKind.COPY.value)
        else:
            tokens.append(AttributeKind.RETAIN.value)
    tokens.append(AttributeKind.NONATOMIC.value)
    return ",".join(tokens)


def _with_readonly(raw: str) -> str:
    return f"{raw},{AttributeKind.READONLY.value}" if raw else AttributeKind.READONLY.value


def _own_hints(cls: type) -> dict[str, Any]:
    """Resolve the annotations declared directly on `cls`, one at a time.

    An annotation that cannot be resolved, e.g. a forward reference to a class
    defined inside a function, stays a raw string without affecting the
    others. `Annotated` extras are stripped.
    """
    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {**vars(cls), cls.__name__: cls}
    hints: dict[str, Any] = {}
    for name, hint in inspect.get_annotations(cls).items():
        if isinstance(hint, str):
            try:
                hint = eval(hint, globalns, localns)  # noqa: S307
            except (NameError, AttributeError, SyntaxError, TypeError):
                # Keep the raw string, matched by name when encoding
                pass
        if typing.get_origin(hint) is typing.Annotated:
            hint = hint.__origin__
        hints[name] = hint
    return hints


def _dataclass_fields(cls: type, readonly: bool) -> list[FieldSpec]:
    hints = _own_hints(cls)
    frozen = readonly or cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    declared = {f.name: f for f in dataclasses.fields(cls)}
    specs = []
    for name, hint in hints.items():
        if name not in declared:
            continue
        raw = declared[name].metadata.get(METADATA_KEY)
        if raw is None:
            raw = derive_metadata(hint, readonly=frozen)
        elif frozen:
            raw = _with_readonly(raw)
        specs.append(FieldSpec(name, raw, FieldAccessor.for_attribute(name)))
    return specs


def _pydantic_fields(cls: type, readonly: bool) -> list[FieldSpec]:
    hints = _own_hints(cls)
    model_fields = cls.model_fields  # type: ignore[attr-defined]
    frozen = readonly or bool(cls.model_config.get("frozen"))  # type: ignore[attr-defined]
    specs = []
    for name, hint in hints.items():
        info = model_fields.get(name)
        if info is None:
            continue
        raw = derive_metadata(hint, readonly=frozen or bool(info.frozen))
        specs.append(FieldSpec(name, raw, FieldAccessor.for_attribute(name)))
    return specs


def _property_fields(cls: type) -> list[FieldSpec]:
    specs = []
    for name, member in vars(cls).items():
        if not isinstance(member, property):
            continue
        tokens = [AttributeKind.DECLARED_TYPE.value + Classification.OBJECT.value]
        if member.fset is None:
            tokens.append(AttributeKind.READONLY.value)
        tokens.append(AttributeKind.DYNAMIC.value)
        specs.append(FieldSpec(name, ",".join(tokens), FieldAccessor.for_attribute(name)))
    return specs


def _explicit_fields(
    fields: Mapping[str, str | Sequence[Attribute]], readonly: bool
) -> list[FieldSpec]:
    specs = []
    for name, attributes in fields.items():
        raw = attributes if isinstance(attributes, str) else encode_metadata(attributes)
        if readonly:
            raw = _with_readonly(raw)
        specs.append(FieldSpec(name, raw, FieldAccessor.for_attribute(name)))
    return specs


class DescriptorRegistry:
    """Process-local table mapping classes to their directly declared fields.

    Implements the FieldMetadataProvider protocol. Records are replaced on
    re-registration, so a redefined class is picked up on the next enumeration.
    """

    def __init__(self) -> None:
        """Initialize empty descriptor registry."""
        self._by_type: dict[type, TypeMeta] = {}

    def register(
        self,
        cls: type,
        fields: Mapping[str, str | Sequence[Attribute]] | None = None,
        *,
        parent: type | None = None,
        readonly: bool = False,
        properties: bool = False,
    ) -> TypeMeta:
        """Register a class and return its metadata.

        Args:
            cls: Class to describe.
            fields: Explicit field name to metadata mapping. Values are raw
                metadata strings or decoded attributes. If None, fields are
                derived from the dataclass or Pydantic declaration.
            parent: Parent type override. Defaults to the nearest described
                class in the MRO.
            readonly: Mark every local field read-only.
            properties: Also describe `property` members declared on the class.

        Returns:
            The recorded type metadata.

        Raises:
            TypeError: If fields must be derived and the class is neither a
                dataclass nor a Pydantic model.
        """
        if fields is not None:
            specs = _explicit_fields(fields, readonly)
        elif dataclasses.is_dataclass(cls):
            specs = _dataclass_fields(cls, readonly)
        elif _is_pydantic(cls):
            specs = _pydantic_fields(cls, readonly)
        else:
            raise TypeError(
                f"Cannot derive fields for {cls.__name__}: it must be a dataclass or "
                f"Pydantic model, or be registered with explicit fields."
            )
        if properties:
            specs.extend(_property_fields(cls))

        meta = TypeMeta(
            type_name=f"{cls.__module__}.{cls.__qualname__}",
            fields=tuple(specs),
            parent=parent,
        )
        self._by_type[cls] = meta
        return meta

    def unregister(self, cls: type) -> bool:
        """Forget a class. Returns True if it was registered."""
        return self._by_type.pop(cls, None) is not None

    def get_meta(self, cls: type) -> TypeMeta | None:
        """Get metadata recorded for exactly this class."""
        return self._by_type.get(cls)

    def is_registered(self, cls: type) -> bool:
        return cls in self._by_type

    def local_fields(self, cls: type) -> list[tuple[str, str]]:
        """Directly declared fields of `cls` as (name, raw metadata) pairs."""
        meta = self._by_type.get(cls)
        if meta is None:
            return []
        return [(spec.name, spec.raw_attributes) for spec in meta.fields]

    def parent(self, cls: type) -> type | None:
        """Parent type in the described chain, or None at the root."""
        meta = self._by_type.get(cls)
        if meta is not None and meta.parent is not None:
            return meta.parent
        for base in cls.__mro__[1:]:
            if base in self._by_type:
                return base
        return None

    def field_spec(self, cls: type, name: str) -> FieldSpec | None:
        """Find the nearest spec for `name` walking up from `cls`.

        Args:
            cls: Class to start from.
            name: Field name.

        Returns:
            The spec declared closest to `cls`, or None if no class in the
            chain describes `name`.
        """
        seen: set[type] = set()
        current: type | None = cls
        while current is not None and current not in seen:
            seen.add(current)
            meta = self._by_type.get(current)
            if meta is not None:
                spec = meta.field(name)
                if spec is not None:
                    return spec
            current = self.parent(current)
        return None

    def describes(self, cls: type) -> bool:
        """Check if `cls` or any class in its chain is described."""
        return cls in self._by_type or self.parent(cls) is not None


# Module-level registry instance
_registry = DescriptorRegistry()


def get_registry() -> DescriptorRegistry:
    """Access the global descriptor registry.

    Returns:
        The process-local DescriptorRegistry instance.
    """
    return _registry


@overload
def describable(cls: type) -> type: ...


@overload
def describable(
    cls: None = None,
    *,
    parent: type | None = None,
    readonly: bool = False,
    properties: bool = False,
) -> Callable[[type], type]: ...


def describable(
    cls: type | None = None,
    *,
    parent: type | None = None,
    readonly: bool = False,
    properties: bool = False,
) -> type | Callable[[type], type]:
    """Describe a dataclass or Pydantic model in the global registry.

    Supports three forms:
        @describable                      # bare decorator
        @describable()                    # parenthesized, no args
        @describable(readonly=True)       # factory with args

    Args:
        cls: The class to register, or None if called with arguments.
        parent: Parent type override for ancestry enumeration.
        readonly: Mark every directly declared field read-only.
        properties: Also describe `property` members declared on the class.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is neither a dataclass nor Pydantic model.

    Note:
        Apply @describable AFTER @dataclass:

        >>> @describable
        ... @dataclass(slots=True)
        ... class Point:
        ...     x: float = 0.0
    """

    def decorator(c: type) -> type:
        if not (dataclasses.is_dataclass(c) or _is_pydantic(c)):
            raise TypeError(
                f"Describable {c.__name__} must be a dataclass or Pydantic model. "
                f"Did you forget @dataclass decorator?"
            )
        meta = _registry.register(c, parent=parent, readonly=readonly, properties=properties)
        c.__describable_meta__ = meta  # type: ignore
        return c

    if cls is None:
        # Called with args: @describable() or @describable(readonly=True)
        return decorator
    else:
        # Called bare: @describable
        return decorator(cls)
