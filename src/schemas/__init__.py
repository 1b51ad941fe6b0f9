"""
Pydantic schemas for validating raw configuration data
"""

from .layout import LayoutSchema, SweepSchema

__all__ = ['LayoutSchema', 'SweepSchema']
