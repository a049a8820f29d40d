"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from fieldkit import DescriptorRegistry, FieldkitSettings, describable


@pytest.fixture
def registry():
    """Fresh DescriptorRegistry, independent of the global one."""
    return DescriptorRegistry()


@pytest.fixture
def quiet_settings():
    """Settings that ignore the environment's FIELDKIT_* overrides."""
    return FieldkitSettings(warn_undecodable=False, copy_none=True)


@describable
@dataclass
class FixturePerson:
    first_name: str = ""
    last_name: str = ""
    age: int = 0


@describable
@dataclass
class FixtureEmployee(FixturePerson):
    salary: int = 0


@pytest.fixture
def person_cls():
    return FixturePerson


@pytest.fixture
def employee_cls():
    return FixtureEmployee
