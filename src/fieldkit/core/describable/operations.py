"""Ancestry-aware field enumeration.

Fields are listed for the class itself first, then for each ancestor,
nearest first. Duplicates across the chain are kept: a field redeclared by a
subclass appears twice, and copying the same name twice is harmless.
Nothing is cached; every call decodes the provider's current metadata.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldkit.core.describable.core import get_registry
from fieldkit.core.metadata import FieldDescriptor, decode_field

if TYPE_CHECKING:
    from fieldkit.introspection.protocol import FieldMetadataProvider


def _resolve_warn(warn: bool | None) -> bool:
    if warn is not None:
        return warn
    # Late import to keep core free of settings at import time
    from fieldkit.config import FieldkitSettings

    return FieldkitSettings().warn_undecodable


def enumerate_fields(
    cls: type,
    provider: FieldMetadataProvider | None = None,
    *,
    warn: bool | None = None,
) -> list[FieldDescriptor]:
    """Collect field descriptors for `cls` and all of its ancestors.

    Args:
        cls: Class to enumerate.
        provider: Source of local fields and parent links. Defaults to the
            global descriptor registry.
        warn: Emit UndecodableTokenWarning for dropped tokens. Defaults to
            the `warn_undecodable` setting.

    Returns:
        Descriptors for own fields in declaration order, followed by each
        ancestor's, nearest first.

    Raises:
        ValueError: If the parent chain loops back on itself.
    """
    if provider is None:
        provider = get_registry()
    warn = _resolve_warn(warn)

    descriptors: list[FieldDescriptor] = []
    seen: list[type] = []
    current: type | None = cls
    while current is not None:
        if current in seen:
            chain = " -> ".join(t.__name__ for t in [*seen, current])
            raise ValueError(f"Cyclic parent chain: {chain}")
        seen.append(current)
        descriptors.extend(
            decode_field(name, raw, warn=warn) for name, raw in provider.local_fields(current)
        )
        current = provider.parent(current)
    return descriptors


def mutable_fields(
    cls: type,
    provider: FieldMetadataProvider | None = None,
    *,
    warn: bool | None = None,
) -> list[FieldDescriptor]:
    """Enumerate only the fields whose every attribute permits mutation."""
    return [d for d in enumerate_fields(cls, provider, warn=warn) if d.is_mutable]
