import pytest

from sqlplayground.core.config import DatabaseConfig
from sqlplayground.core.connection import PlaygroundConnection
from sqlplayground.demos import schema

from .fakes import FakeDriver


@pytest.fixture
def config():
    return DatabaseConfig(host="db.test", port=3307, database="emp", user="tester")


@pytest.fixture
def driver():
    return FakeDriver()


@pytest.fixture
def conn(config, driver):
    connection = PlaygroundConnection(config, driver)
    yield connection
    if not driver.connections[0].closed:
        connection.close()


@pytest.fixture
def raw(conn, driver):
    """The fake driver connection underneath `conn`"""
    return driver.connections[0]


@pytest.fixture
def seeded(conn):
    schema.setup_schema(conn)
    schema.insert_seed_data(conn)
    return conn


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: opt-in tests that need a MySQL server")
