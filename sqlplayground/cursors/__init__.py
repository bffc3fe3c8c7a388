"""
Client-side cursors: scrollable and updatable result sets, statement batches
"""

from .batch import BatchStatement
from .scrollable import ScrollableResultSet
from .updatable import UpdatableResultSet

__all__ = ['BatchStatement', 'ScrollableResultSet', 'UpdatableResultSet']
