"""Attribute categories for classes.

After its attribute definitions a class may list attributes by category:

    attributes {
        mandatory [ "name" "index" ]
        immutable [ "type" ]
        unique "instance"
    }

Each category sets the matching bit in the named attributes' constraint
masks. Names that match no attribute of the class are skipped.
"""

import logging

from ..core.errors import InvalidNodeId, InvalidScalarType, SchemaError
from ..core.models import AttributeMask, Class
from ..core.node import ConfigNode


logger = logging.getLogger(__name__)


def apply_category(node: ConfigNode, cls: Class, category: AttributeMask) -> None:
    """OR a category bit into every attribute named in a list node."""
    if not node.is_compound:
        raise InvalidScalarType(
            f"Attribute category '{node.id}' must be a list of names",
            class_name=cls.name,
        )

    for child in node.children():
        try:
            name = child.get_string()
        except SchemaError as e:
            raise InvalidScalarType(
                f"Invalid attribute name in category '{node.id}'",
                class_name=cls.name,
            ) from e

        attr = cls.get_attribute(name)
        if attr is None:
            logger.debug(f"[Classes] {cls.name}: no attribute '{name}' for {node.id}")
            continue

        attr.constraint.mask |= category


def apply_unique(node: ConfigNode, cls: Class) -> None:
    """Mark the single attribute named by a `unique` node."""
    try:
        name = node.get_string()
    except SchemaError as e:
        raise InvalidScalarType(
            "Unique attribute must be a single name", class_name=cls.name
        ) from e

    attr = cls.get_attribute(name)
    if attr is None:
        logger.debug(f"[Classes] {cls.name}: no attribute '{name}' to mark unique")
        return

    attr.constraint.mask |= AttributeMask.UNIQUE


def apply_categories(node: ConfigNode, cls: Class) -> None:
    """Apply an `attributes` block to a class's already defined attributes.

    Args:
        node: The `attributes` config node
        cls: Class whose attributes receive the category bits

    Raises:
        InvalidNodeId: If a category entry has no name
        InvalidScalarType: If a category value has the wrong shape
    """
    for child in node.children():
        key = child.id
        if key is None:
            raise InvalidNodeId("Invalid attribute category", class_name=cls.name)

        if key == "mandatory":
            apply_category(child, cls, AttributeMask.MANDATORY)
        elif key == "immutable":
            apply_category(child, cls, AttributeMask.IMMUTABLE)
        elif key == "deprecated":
            apply_category(child, cls, AttributeMask.DEPRECATED)
        elif key == "automatic":
            apply_category(child, cls, AttributeMask.AUTOMATIC)
        elif key == "unique":
            apply_unique(child, cls)
        else:
            continue
