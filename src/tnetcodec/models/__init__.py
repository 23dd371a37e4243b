"""Value model for tnetcodec.

This module provides the immutable tagged-union value types and the helpers
that convert them to and from plain Python objects.
"""

from __future__ import annotations

from .convert import from_python, to_python
from .values import VALUE_TYPES, Boolean, Float, Integer, List, Mapping, Null, String, Value

__all__ = [
    "Value",
    "VALUE_TYPES",
    "Null",
    "Boolean",
    "Integer",
    "Float",
    "String",
    "List",
    "Mapping",
    "from_python",
    "to_python",
]
