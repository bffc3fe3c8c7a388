"""
Connection configuration for the playground
"""

import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv


ENV_PREFIX = "PLAYGROUND_DB_"


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Connection parameters for the MySQL-compatible server

    Defaults match a local development server with an `emp` database,
    the `root` user and an empty password.
    """

    host: str = "localhost"
    port: int = 3306
    database: str = "emp"
    user: str = "root"
    password: str = ""
    ssl_disabled: bool = True
    autocommit: bool = True

    @classmethod
    def from_env(cls, env_file=None):
        """
        Build a config from PLAYGROUND_DB_* environment variables

        Args:
            env_file: Optional .env file loaded before reading the environment

        Returns:
            DatabaseConfig: Config with environment values over the defaults
        """
        load_dotenv(env_file)
        defaults = cls()
        return cls(
            host=os.getenv(f"{ENV_PREFIX}HOST", defaults.host),
            port=int(os.getenv(f"{ENV_PREFIX}PORT", str(defaults.port))),
            database=os.getenv(f"{ENV_PREFIX}NAME", defaults.database),
            user=os.getenv(f"{ENV_PREFIX}USER", defaults.user),
            password=os.getenv(f"{ENV_PREFIX}PASSWORD", defaults.password),
        )

    def override(self, **values):
        """Return a copy with every non-None value applied"""
        changes = {k: v for k, v in values.items() if v is not None}
        return replace(self, **changes)

    def to_connect_args(self) -> dict:
        """Keyword arguments for mysql.connector.connect()"""
        return {
            'host': self.host,
            'port': self.port,
            'user': self.user,
            'password': self.password,
            'database': self.database,
            'ssl_disabled': self.ssl_disabled,
            'autocommit': self.autocommit,
        }

    @property
    def url(self) -> str:
        return f"mysql://{self.host}:{self.port}/{self.database}"
