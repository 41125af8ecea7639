"""Class builders for the topology pre-processor.

The class layer compiles `Class` definition trees into a Registry of
classes, attributes and constraints.

Pipeline (per class, driven by define_classes):
    Step 1: define_class() - Skip known names, register new ones
    Step 2: define_attributes() - DefineArgument / DefineAttribute blocks
    Step 3: build_attribute() - Name, token_ref and constraints of one entry
    Step 4: parse_constraints() - Bounds, valid values, tuple values
    Step 5: apply_categories() - Mandatory/immutable/deprecated/automatic/unique
"""

from .constraint import build_constraint, parse_constraints, parse_leading_decimal
from .attribute import build_attribute, define_attributes
from .category import apply_categories
from .registry import Registry, define_class, define_classes

__all__ = [
    "build_constraint",
    "parse_constraints",
    "parse_leading_decimal",
    "build_attribute",
    "define_attributes",
    "apply_categories",
    "Registry",
    "define_class",
    "define_classes",
]
