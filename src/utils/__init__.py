"""
Utility functions for the matrix torus renderer
"""

from .enum_helper import EnumHelper

__all__ = [
    'EnumHelper',
]
