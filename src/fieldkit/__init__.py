"""fieldkit: attribute metadata decoding with generic clone and update.

Usage:
    from dataclasses import dataclass

    from fieldkit import Clonable, describable, mutable_fields

    @describable
    @dataclass
    class Person(Clonable):
        first_name: str = ""
        last_name: str = ""
        age: int = 0

    person = Person().update(first_name="Paul", last_name="Napier", age=21)
    older = person.clone().update(age=100)

    [f.name for f in mutable_fields(Person)]  # ['first_name', 'last_name', 'age']
"""

__version__ = "0.1.0"

# Clone/update engine
from fieldkit.cloning import (
    Clonable,
    Updatable,
    clone,
    update,
)

# Configuration
from fieldkit.config import FieldkitSettings

# Core primitives
from fieldkit.core import (
    ABSENT,
    Attribute,
    AttributeKind,
    Classification,
    DescriptorRegistry,
    FieldDescriptor,
    RefKind,
    TypeReference,
    UndecodableTokenWarning,
    all_mutable,
    decode_attribute,
    decode_classification,
    decode_field,
    decode_metadata,
    decode_type_reference,
    describable,
    enumerate_fields,
    get_registry,
    is_mutable,
    mutable_fields,
)

# Introspection collaborators
from fieldkit.introspection import (
    AttributeAccessor,
    FieldMetadataProvider,
    RegistryAccessor,
    ValueAccessor,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "ABSENT",
    "Classification",
    "RefKind",
    "TypeReference",
    "AttributeKind",
    "Attribute",
    "FieldDescriptor",
    "UndecodableTokenWarning",
    "decode_classification",
    "decode_type_reference",
    "decode_attribute",
    "decode_metadata",
    "decode_field",
    "is_mutable",
    "all_mutable",
    "describable",
    "get_registry",
    "DescriptorRegistry",
    "enumerate_fields",
    "mutable_fields",
    # Cloning
    "update",
    "clone",
    "Updatable",
    "Clonable",
    # Introspection
    "FieldMetadataProvider",
    "ValueAccessor",
    "RegistryAccessor",
    "AttributeAccessor",
    # Config
    "FieldkitSettings",
]
