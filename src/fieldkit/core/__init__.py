"""Core functionalities: stateless decoders, settability, and the descriptor table.

Architecture Note:
    core/metadata contains pure decoding of the attribute grammar with no
    knowledge of Python classes. core/describable maps Python classes onto
    that grammar and walks their ancestry. The clone engine in cloning/ is
    the only place instances are read and written.
"""

from fieldkit.core.describable import (
    METADATA_KEY,
    DescriptorRegistry,
    FieldAccessor,
    FieldSpec,
    TypeMeta,
    derive_metadata,
    describable,
    encode_type_hint,
    enumerate_fields,
    get_registry,
    mutable_fields,
)
from fieldkit.core.metadata import (
    Attribute,
    AttributeKind,
    Classification,
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
    encode_metadata,
    is_mutable,
)
from fieldkit.core.types import ABSENT, Absent, Lookup, Shallow

__all__ = [
    # Types
    "ABSENT",
    "Absent",
    "Lookup",
    "Shallow",
    # Metadata
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
    "encode_metadata",
    "is_mutable",
    "all_mutable",
    # Describable
    "describable",
    "get_registry",
    "DescriptorRegistry",
    "TypeMeta",
    "FieldSpec",
    "FieldAccessor",
    "METADATA_KEY",
    "derive_metadata",
    "encode_type_hint",
    "enumerate_fields",
    "mutable_fields",
]
