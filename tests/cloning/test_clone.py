"""Tests for the clone/update engine."""

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, Field

from fieldkit import (
    Clonable,
    FieldkitSettings,
    UndecodableTokenWarning,
    clone,
    describable,
    update,
)
from fieldkit.core.describable import METADATA_KEY


@describable
@dataclass
class Contact(Clonable):
    name: str = ""
    nickname: str | None = "friend"
    tags: list[str] = field(default_factory=list)
    id: int = field(default=0, metadata={METADATA_KEY: "Tq,R,N"})
    on_change: Callable[[str], int] = len


@describable
class Profile(BaseModel, Clonable):
    handle: str = ""
    created: int = Field(default=0, frozen=True)


class Slotted:
    __slots__ = ("name", "note")

    def __init__(self) -> None:
        self.name = "default"


def test_update_returns_same_instance():
    contact = Contact()
    calls = []

    result = update(contact, lambda c: calls.append(c))

    assert result is contact
    assert calls == [contact]


def test_update_applies_keyword_changes_after_mutate():
    contact = Contact()

    update(contact, lambda c: setattr(c, "name", "first"), name="second", nickname=None)

    assert contact.name == "second"
    assert contact.nickname is None


def test_update_without_arguments_is_a_no_op():
    contact = Contact(name="x")

    assert update(contact) is contact
    assert contact.name == "x"


def test_clone_is_distinct_with_equal_values(quiet_settings):
    source = Contact(name="Paul", nickname="Macca", tags=["bass"])

    copy = clone(source, settings=quiet_settings)

    assert copy is not source
    assert type(copy) is Contact
    assert (copy.name, copy.nickname, copy.tags) == ("Paul", "Macca", ["bass"])


def test_clone_is_shallow(quiet_settings):
    source = Contact(tags=["bass"])

    copy = clone(source, settings=quiet_settings)
    copy.tags.append("vocals")

    assert copy.tags is source.tags
    assert source.tags == ["bass", "vocals"]


def test_readonly_field_keeps_default(quiet_settings):
    source = Contact(id=42)

    copy = clone(source, settings=quiet_settings)

    assert copy.id == 0


def test_function_typed_field_keeps_default(quiet_settings):
    source = Contact(on_change=hash)

    copy = clone(source, settings=quiet_settings)

    assert copy.on_change is len


def test_explicit_none_is_copied_by_default(quiet_settings):
    source = Contact(nickname=None)

    copy = clone(source, settings=quiet_settings)

    assert copy.nickname is None


def test_explicit_none_skipped_when_configured():
    source = Contact(nickname=None)

    copy = clone(source, settings=FieldkitSettings(copy_none=False))

    assert copy.nickname == "friend"


def test_absent_values_are_skipped(registry, quiet_settings):
    registry.register(Slotted, {"name": 'T@"str",C,N', "note": 'T@"str",C,N'})
    source = Slotted()
    source.name = "Paul"

    copy = clone(source, provider=registry, settings=quiet_settings)

    assert copy.name == "Paul"
    assert not hasattr(copy, "note")


def test_undescribed_type_raises(quiet_settings):
    @dataclass
    class Stranger:
        value: int = 0

    with pytest.raises(TypeError, match="not describable"):
        clone(Stranger(), settings=quiet_settings)


def test_undescribed_subclass_clones_inherited_fields(quiet_settings):
    @dataclass
    class Colleague(Contact):
        team: str = ""

    source = Colleague(name="George", team="guitar")

    copy = clone(source, settings=quiet_settings)

    assert type(copy) is Colleague
    assert copy.name == "George"
    # team is not described anywhere in the chain
    assert copy.team == ""


def test_custom_provider_uses_attribute_access(quiet_settings):
    class Provider:
        def local_fields(self, cls):
            return [("name", 'T@"str",C,N'), ("id", "Tq,R,N")]

        def parent(self, cls):
            return None

    source = Contact(name="Ringo", id=7)

    copy = clone(source, provider=Provider(), settings=quiet_settings)

    assert copy.name == "Ringo"
    assert copy.id == 0


def test_clone_warns_when_configured(registry):
    class Noisy:
        def __init__(self) -> None:
            self.value = 0

    registry.register(Noisy, {"value": "Tq,N,V_value"})
    source = Noisy()
    source.value = 3

    with pytest.warns(UndecodableTokenWarning):
        copy = clone(source, provider=registry, settings=FieldkitSettings(warn_undecodable=True))

    assert copy.value == 3


def test_non_default_constructible_type_propagates(registry, quiet_settings):
    @dataclass
    class NeedsArgs:
        value: int

    registry.register(NeedsArgs)

    with pytest.raises(TypeError):
        clone(NeedsArgs(1), provider=registry, settings=quiet_settings)


def test_mixin_chaining():
    source = Contact().update(name="John", tags=["guitar"])

    copy = source.clone().update(name="Julian")

    assert source.name == "John"
    assert copy.name == "Julian"
    assert copy.tags == ["guitar"]


def test_pydantic_clone():
    source = Profile(handle="paul", created=1962)

    copy = source.clone()

    assert copy is not source
    assert copy.handle == "paul"
    assert copy.created == 0


def test_frozen_dataclass_with_field_override_clones_to_defaults(registry, quiet_settings):
    @dataclass(frozen=True)
    class Stamp:
        code: str = field(default="", metadata={METADATA_KEY: 'T@"str",C,N'})

    registry.register(Stamp)

    copy = clone(Stamp(code="x"), provider=registry, settings=quiet_settings)

    assert copy.code == ""
