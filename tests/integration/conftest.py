import os

import mysql.connector
import pytest

from sqlplayground.core.config import DatabaseConfig
from sqlplayground.core.connection import PlaygroundConnection


def _env_enabled() -> bool:
    return os.environ.get("PLAYGROUND_INTEGRATION") == "1"


@pytest.fixture(scope="package", autouse=True)
def _guard_integration_session():
    if not _env_enabled():
        pytest.skip("Set PLAYGROUND_INTEGRATION=1 to run integration tests")


@pytest.fixture(scope="package")
def mysql_config():
    config = DatabaseConfig.from_env()
    try:
        probe = mysql.connector.connect(**config.to_connect_args())
    except mysql.connector.Error as e:
        pytest.skip(f"MySQL server not reachable at {config.url}: {e}")
    probe.close()
    return config


@pytest.fixture
def live_conn(mysql_config):
    with PlaygroundConnection(mysql_config) as conn:
        yield conn
