"""
Console reporting
"""

from .display import ConsoleDisplay, display

__all__ = ['ConsoleDisplay', 'display']
