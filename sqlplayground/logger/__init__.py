"""
Statement journal flushed on commit
"""

from .statement_log import StatementLog

__all__ = ['StatementLog']
