"""Kernel value types.

Modules:
  option.py — Some, Nothing, Option
"""

from mp_query.kernel.types.option import Nothing, Option, Some

__all__ = ["Nothing", "Option", "Some"]
