"""Metadata models: classifications, type references, attributes, descriptors.

These are immutable value objects produced by the decoders in
`fieldkit.core.metadata.core`. Enum values are the code characters of the
attribute grammar, so `Classification("q")` and `AttributeKind("R")` read the
same way the raw metadata does.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

POINTER_MARKER = "^"
"""Qualifier preceding a classification code in pointer type encodings."""

QUOTE = '"'
"""Delimiter of the auxiliary class/protocol name after a type encoding."""

TOKEN_SEPARATOR = ","


class UndecodableTokenWarning(UserWarning):
    """Emitted for attribute tokens dropped by the decoder (opt-in)."""


class Classification(Enum):
    """Semantic kind of a field's declared type."""

    CHAR = "c"
    DOUBLE = "d"
    FLOAT = "f"
    INT = "q"
    UNSIGNED_INT = "Q"
    LONG = "l"
    SHORT = "s"
    OBJECT = "@"
    FUNCTION = "?"
    STRUCT = "}"
    VOID = "v"
    SELECTOR = ":"


# Kinds whose values cannot be replaced generically on an instance
_NON_OBJECT_LIKE = frozenset({Classification.FUNCTION, Classification.VOID, Classification.SELECTOR})


class RefKind(Enum):
    """Whether a type reference is held by value or through a pointer."""

    VALUE = auto()
    POINTER = auto()


@dataclass(frozen=True, slots=True)
class TypeReference:
    """A classification together with its value/pointer indicator."""

    kind: RefKind
    classification: Classification

    @classmethod
    def value(cls, classification: Classification) -> TypeReference:
        return cls(RefKind.VALUE, classification)

    @classmethod
    def pointer(cls, classification: Classification) -> TypeReference:
        return cls(RefKind.POINTER, classification)

    @property
    def is_pointer(self) -> bool:
        return self.kind is RefKind.POINTER

    @property
    def is_object_like(self) -> bool:
        """True for kinds that support instance-level value replacement."""
        return self.classification not in _NON_OBJECT_LIKE

    def encode(self) -> str:
        """Render back to a type encoding, e.g. ``^}`` or ``q``."""
        prefix = POINTER_MARKER if self.is_pointer else ""
        return prefix + self.classification.value


class AttributeKind(Enum):
    """Attribute tags, keyed by their code character."""

    READONLY = "R"
    COPY = "C"
    RETAIN = "&"
    NONATOMIC = "N"
    DYNAMIC = "D"
    WEAK = "W"
    GARBAGE_COLLECTED = "P"
    LEGACY_IVAR = "t"
    CUSTOM_GETTER = "G"
    CUSTOM_SETTER = "S"
    DECLARED_TYPE = "T"


@dataclass(frozen=True, slots=True)
class Attribute:
    """One decoded attribute token.

    Only `AttributeKind.DECLARED_TYPE` carries a reference; every other kind is
    a simple flag.

    Attributes:
        kind: Which attribute this is.
        reference: Decoded declared type, for DECLARED_TYPE only.
    """

    kind: AttributeKind
    reference: TypeReference | None = None

    def __post_init__(self) -> None:
        if (self.kind is AttributeKind.DECLARED_TYPE) != (self.reference is not None):
            raise ValueError("Only DECLARED_TYPE attributes carry a type reference")

    @classmethod
    def declared_type(cls, reference: TypeReference) -> Attribute:
        return cls(AttributeKind.DECLARED_TYPE, reference)

    @property
    def code(self) -> str:
        return self.kind.value

    def encode(self) -> str:
        """Render as a metadata token."""
        if self.reference is not None:
            return self.code + self.reference.encode()
        return self.code

    @property
    def is_mutable(self) -> bool:
        """Whether this attribute allows the field to be overwritten."""
        # Late import to avoid circular dependency
        from fieldkit.core.metadata.operations import is_mutable

        return is_mutable(self)


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A field name with its decoded attributes, in token order."""

    name: str
    attributes: tuple[Attribute, ...] = ()

    @property
    def is_mutable(self) -> bool:
        """True if every attribute permits external mutation."""
        # Late import to avoid circular dependency
        from fieldkit.core.metadata.operations import all_mutable

        return all_mutable(self.attributes)

    def has(self, kind: AttributeKind) -> bool:
        return any(attribute.kind is kind for attribute in self.attributes)

    @property
    def declared_type(self) -> TypeReference | None:
        """First declared type reference, if the metadata carried one."""
        for attribute in self.attributes:
            if attribute.reference is not None:
                return attribute.reference
        return None
