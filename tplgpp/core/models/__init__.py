"""Data models for tplgpp.

This package contains the Pydantic models produced by the class builders:
- schema.py: Classes, attributes, constraints, valid-value references
"""

from .schema import (
    # Limits
    NAME_MAX_LENGTH,
    INT_MIN,
    INT_MAX,
    UNRESOLVED,
    bounded_name,
    # Enums
    ClassType,
    ParamType,
    AttributeMask,
    # Schema
    ValueRef,
    Constraint,
    Attribute,
    Class,
)

__all__ = [
    # Limits
    "NAME_MAX_LENGTH",
    "INT_MIN",
    "INT_MAX",
    "UNRESOLVED",
    "bounded_name",
    # Enums
    "ClassType",
    "ParamType",
    "AttributeMask",
    # Schema
    "ValueRef",
    "Constraint",
    "Attribute",
    "Class",
]
