"""
Routes Module

Contains API route definitions.
"""

from . import missions

__all__ = ['missions']
