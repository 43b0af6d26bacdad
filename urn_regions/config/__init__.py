"""
Configuration for region map parsing.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
