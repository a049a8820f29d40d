"""Introspection collaborators: metadata provider and value accessor protocols.

Usage:
    from fieldkit.introspection import RegistryAccessor

    accessor = RegistryAccessor()
    accessor.get_value(person, "age")
"""

from fieldkit.introspection.local import AttributeAccessor, RegistryAccessor
from fieldkit.introspection.protocol import FieldMetadataProvider, ValueAccessor

__all__ = [
    "FieldMetadataProvider",
    "ValueAccessor",
    "RegistryAccessor",
    "AttributeAccessor",
]
