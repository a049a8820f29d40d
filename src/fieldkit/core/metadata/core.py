"""Decoders for the per-field attribute metadata grammar.

Grammar:
    metadata      := token (',' token)*
    token         := code-char rest
    code-char     := one of R C & N D W P t G S T
    rest          := (for T) type-encoding ['"' ident '"']
    type-encoding := ['^'] class-code
    class-code    := one of c d f q Q l s @ ? } v :

Usage:
    decode_attribute("Tq")                # Attribute(DECLARED_TYPE, value(INT))
    decode_metadata('T@"NSString",C,N')   # (declared-type, copy, nonatomic)

Decoding is lenient: an unrecognized token decodes to None and is dropped
from the attribute set, so one malformed token never hides the others.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable

from fieldkit.core.metadata.models import (
    POINTER_MARKER,
    QUOTE,
    TOKEN_SEPARATOR,
    Attribute,
    AttributeKind,
    Classification,
    FieldDescriptor,
    TypeReference,
    UndecodableTokenWarning,
)

_CLASSIFICATIONS: dict[str, Classification] = {c.value: c for c in Classification}
_SIMPLE_KINDS: dict[str, AttributeKind] = {
    k.value: k for k in AttributeKind if k is not AttributeKind.DECLARED_TYPE
}


def decode_classification(code: str) -> Classification | None:
    """Map a single code character to its classification.

    Args:
        code: Exactly one character.

    Returns:
        Matching classification, or None for any other input.
    """
    if len(code) != 1:
        return None
    return _CLASSIFICATIONS.get(code)


def decode_type_reference(encoded: str) -> TypeReference | None:
    """Decode a declared-type substring into a type reference.

    The last character is the defining classification because qualifiers such
    as the pointer marker precede it. The pointer marker may appear anywhere.

    Args:
        encoded: Token text starting at the declared-type marker, cut before
            the first quote if the token carries a quoted class name.

    Returns:
        POINTER reference if `^` occurs in `encoded`, VALUE otherwise, or None
        if the last character is not a known classification.
    """
    if not encoded:
        return None
    classification = decode_classification(encoded[-1])
    if classification is None:
        return None
    if POINTER_MARKER in encoded:
        return TypeReference.pointer(classification)
    return TypeReference.value(classification)


def decode_attribute(token: str) -> Attribute | None:
    """Decode one comma-separated metadata token.

    The tail of a simple token (a custom getter's selector name, an ivar name)
    is not decoded.

    Args:
        token: One segment of a metadata string, comma excluded.

    Returns:
        Decoded attribute, or None if the token is not recognized.
    """
    if not token:
        return None
    first = token[0]
    kind = _SIMPLE_KINDS.get(first)
    if kind is not None:
        return Attribute(kind)
    if first == AttributeKind.DECLARED_TYPE.value:
        encoded = token.split(QUOTE, 1)[0]
        reference = decode_type_reference(encoded)
        if reference is None:
            return None
        return Attribute.declared_type(reference)
    return None


def decode_metadata(raw: str, *, warn: bool = False) -> tuple[Attribute, ...]:
    """Decode a full metadata string, dropping undecodable tokens.

    Args:
        raw: Comma-delimited metadata string. Empty means no attributes.
        warn: Emit UndecodableTokenWarning for every dropped token.

    Returns:
        Decoded attributes in original token order.
    """
    if not raw:
        return ()
    attributes: list[Attribute] = []
    for token in raw.split(TOKEN_SEPARATOR):
        attribute = decode_attribute(token)
        if attribute is None:
            if warn:
                warnings.warn(
                    f"Dropped undecodable attribute token {token!r} in {raw!r}",
                    UndecodableTokenWarning,
                    stacklevel=2,
                )
            continue
        attributes.append(attribute)
    return tuple(attributes)


def decode_field(name: str, raw: str, *, warn: bool = False) -> FieldDescriptor:
    """Build a field descriptor from a name and its raw metadata string."""
    return FieldDescriptor(name=name, attributes=decode_metadata(raw, warn=warn))


def encode_metadata(attributes: Iterable[Attribute]) -> str:
    """Render attributes as a metadata string.

    Tails dropped on decode (custom accessor names, ivar names, quoted class
    names) are not restored.
    """
    return TOKEN_SEPARATOR.join(attribute.encode() for attribute in attributes)
