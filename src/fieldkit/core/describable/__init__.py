"""Describable functionality: descriptor table, decorator, and enumeration."""

from fieldkit.core.describable.core import (
    DescriptorRegistry,
    derive_metadata,
    describable,
    encode_type_hint,
    get_registry,
)
from fieldkit.core.describable.models import (
    METADATA_KEY,
    FieldAccessor,
    FieldSpec,
    TypeMeta,
)
from fieldkit.core.describable.operations import enumerate_fields, mutable_fields

__all__ = [
    # Models
    "METADATA_KEY",
    "FieldAccessor",
    "FieldSpec",
    "TypeMeta",
    # Core
    "describable",
    "get_registry",
    "DescriptorRegistry",
    "derive_metadata",
    "encode_type_hint",
    # Enumeration
    "enumerate_fields",
    "mutable_fields",
]
