"""Pure functions deciding whether decoded attributes allow mutation.

Attributes such as copy, retain, weak or a custom setter describe how a value
is stored, not whether it may be stored, so they never block mutation.
"""

from __future__ import annotations

from collections.abc import Iterable

from fieldkit.core.metadata.models import Attribute, AttributeKind


def is_mutable(attribute: Attribute) -> bool:
    """Check whether a single attribute permits external mutation.

    Args:
        attribute: Decoded attribute.

    Returns:
        False for read-only, the reference's object-likeness for a declared
        type, True for everything else.
    """
    if attribute.kind is AttributeKind.READONLY:
        return False
    if attribute.reference is not None:
        return attribute.reference.is_object_like
    return True


def all_mutable(attributes: Iterable[Attribute]) -> bool:
    """Check a whole attribute set. An empty set is mutable."""
    return all(is_mutable(attribute) for attribute in attributes)
