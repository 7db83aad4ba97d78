import pytest
import sqlalchemy as sa
from faker import Faker

from metamodel.db import SQLMetaStore
from metamodel.expose import FieldExposer
from metamodel.registry import ModelRegistry
from metamodel.rest import RestRegistrar
from metamodel.store import MemoryStore
from metamodel.tests.model import TeamMemberModel, TeamModel


@pytest.fixture(scope='session')
def fake():
    Faker.seed(0)
    return Faker()


#
# registry
#

@pytest.fixture()
def registry():
    registry = ModelRegistry()
    registry.register_model(TeamModel)
    registry.register_model(TeamMemberModel)
    return registry


#
# stores
#

@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def sql_store():
    store = SQLMetaStore(sa.create_engine('sqlite://'))
    store.create_tables()
    yield store
    store.drop_tables()
    store.engine.dispose()


#
# rest
#

@pytest.fixture()
def rest():
    return RestRegistrar()


@pytest.fixture()
def exposer(rest, store, registry):
    return FieldExposer(rest, store, registry)
