"""
Shared fixtures for sqlbuilder tests.

Key fixtures:
- builder_factory: returns CreateTableBuilder instances for a given flavor.
- users_builder: the public.users builder used by several scenario tests.
"""

import pytest

from sqlbuilder.create_table import CreateTableBuilder
from sqlbuilder.flavor import Flavor


@pytest.fixture
def builder_factory():
    """Factory that creates a CreateTableBuilder, MySQL flavor by default."""
    def factory(flavor=Flavor.MYSQL):
        return CreateTableBuilder(flavor=flavor)

    return factory


@pytest.fixture
def users_builder(builder_factory):
    """Builder for public.users with two columns and one option."""
    ctb = builder_factory()
    ctb.create_table("public.users")
    ctb.define("id", "bigserial", "PRIMARY KEY", "NOT NULL")
    ctb.define("name", "varchar", "NOT NULL")
    ctb.option("ENGINE=InnoDB")
    return ctb


class FakeConfig:
    """Mock config object exposing a default flavor."""
    def __init__(self, default_flavor):
        self.default_flavor = default_flavor


@pytest.fixture
def patch_default_flavor(monkeypatch):
    """
    Patch the config read by sqlbuilder.flavor.
    Returns a setter so tests can choose the configured default flavor name.
    """
    def setter(name):
        monkeypatch.setattr("sqlbuilder.flavor.config", FakeConfig(name))

    return setter
