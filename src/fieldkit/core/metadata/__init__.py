"""Metadata functionality: models, decoders, and settability."""

from fieldkit.core.metadata.core import (
    decode_attribute,
    decode_classification,
    decode_field,
    decode_metadata,
    decode_type_reference,
    encode_metadata,
)
from fieldkit.core.metadata.models import (
    Attribute,
    AttributeKind,
    Classification,
    FieldDescriptor,
    RefKind,
    TypeReference,
    UndecodableTokenWarning,
)
from fieldkit.core.metadata.operations import all_mutable, is_mutable

__all__ = [
    # Models
    "Classification",
    "RefKind",
    "TypeReference",
    "AttributeKind",
    "Attribute",
    "FieldDescriptor",
    "UndecodableTokenWarning",
    # Decoding
    "decode_classification",
    "decode_type_reference",
    "decode_attribute",
    "decode_metadata",
    "decode_field",
    "encode_metadata",
    # Settability
    "is_mutable",
    "all_mutable",
]
