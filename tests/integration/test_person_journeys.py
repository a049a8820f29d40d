"""End-to-end journeys: describe, enumerate, clone, update."""

import sys
from dataclasses import dataclass, field

sys.path.insert(0, "src")

from fieldkit import Clonable, clone, describable, mutable_fields, update
from fieldkit.core.describable import METADATA_KEY


@describable
@dataclass
class JourneyPerson(Clonable):
    first_name: str = ""
    last_name: str = ""
    age: int = 0


@describable
@dataclass
class JourneyEmployee(JourneyPerson):
    salary: int = 0


@describable
@dataclass
class JourneyBadge(Clonable):
    holder: str = ""
    serial: int = field(default=0, metadata={METADATA_KEY: "Tq,R,N,V_serial"})


def test_clone_then_update_leaves_source_untouched():
    """Clone independence: updating the copy never touches the source."""
    p = update(JourneyPerson(), lambda x: (
        setattr(x, "first_name", "Paul"),
        setattr(x, "last_name", "Napier"),
        setattr(x, "age", 21),
    ))

    q = clone(p)

    assert q is not p
    assert (q.first_name, q.last_name, q.age) == ("Paul", "Napier", 21)

    update(q, age=100)

    assert q.age == 100
    assert p.age == 21


def test_employee_clone_copies_inherited_fields():
    source = JourneyEmployee(first_name="Paul", last_name="Napier", age=21, salary=5000)

    assert [d.name for d in mutable_fields(JourneyEmployee)] == [
        "salary",
        "first_name",
        "last_name",
        "age",
    ]

    copy = source.clone().update(salary=6000)

    assert type(copy) is JourneyEmployee
    assert (copy.first_name, copy.last_name, copy.age) == ("Paul", "Napier", 21)
    assert copy.salary == 6000
    assert source.salary == 5000


def test_readonly_value_never_reaches_clone():
    source = JourneyBadge(holder="Paul", serial=1234)

    copy = source.clone()

    assert copy.holder == "Paul"
    assert copy.serial == 0
