"""
Core module: configuration, connection wrapper and error types
"""

from .config import DatabaseConfig
from .connection import PlaygroundConnection, load_driver, open_connection
from .errors import BatchUpdateError, DriverNotFoundError, SimulatedFailure, error_chain

__all__ = [
    'DatabaseConfig', 'PlaygroundConnection', 'load_driver', 'open_connection',
    'BatchUpdateError', 'DriverNotFoundError', 'SimulatedFailure', 'error_chain',
]
