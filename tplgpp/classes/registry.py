"""Class registry and the define pass that fills it.

define_classes walks the top-level nodes of a Class tree. Each node names
a class; the first definition of a name wins and later ones are skipped
without being parsed.
"""

import logging
from typing import Iterator

from ..core.errors import InvalidNodeId, SchemaError
from ..core.models import Class, ClassType, ParamType, bounded_name
from ..core.node import ConfigNode
from .attribute import define_attributes
from .category import apply_categories


logger = logging.getLogger(__name__)


class Registry:
    """Compiled classes keyed by name, in definition order.

    The registry is owned by whoever drives the compilation and is passed
    to every define call; there is no process-wide instance.
    """

    def __init__(self) -> None:
        self._classes: dict[str, Class] = {}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[Class]:
        return iter(list(self._classes.values()))

    def __len__(self) -> int:
        return len(self._classes)

    def names(self) -> list[str]:
        return list(self._classes)

    def lookup(self, name: str) -> Class | None:
        """Return the class with this exact (case-sensitive) name.

        The returned class is the registered instance, not a copy. Once
        define_classes has returned it is read-only: consumers must not
        change its attributes, constraints or value refs, and no later
        define call changes it either.
        """
        return self._classes.get(bounded_name(name))

    def register(self, cls: Class) -> None:
        """Add a class. Raises ValueError if the name is already taken."""
        if cls.name in self._classes:
            raise ValueError(f"Class '{cls.name}' is already registered")
        self._classes[cls.name] = cls


def define_class(
    registry: Registry,
    node: ConfigNode,
    class_type: ClassType = ClassType.BASE,
) -> Class:
    """Define one class from its definition node.

    If a class with the node's name already exists it is returned untouched
    and the node is not parsed. Otherwise the new class is registered before
    its body is parsed, so it stays registered even if parsing fails.

    Args:
        registry: Registry to define the class in
        node: The class definition node; its id is the class name
        class_type: Kind of class being defined

    Returns:
        The registered class

    Raises:
        InvalidNodeId: If the node has no name
        SchemaError: If an attribute or category fails to parse
    """
    if node.id is None:
        raise InvalidNodeId("Invalid name for class")

    existing = registry.lookup(node.id)
    if existing is not None:
        logger.debug(f"[Classes] Class '{existing.name}' already defined, skipping")
        return existing

    cls = Class(name=bounded_name(node.id), class_type=class_type)
    registry.register(cls)

    for child in node.children():
        key = child.id
        if key is None:
            continue

        if key == "DefineArgument":
            define_attributes(child, cls, ParamType.ARGUMENT)
        elif key == "DefineAttribute":
            define_attributes(child, cls, ParamType.ATTRIBUTE)
        elif key == "attributes":
            apply_categories(child, cls)
        else:
            continue

    logger.debug(f"[Classes] Created class '{cls.name}'")
    return cls


def define_classes(
    registry: Registry,
    tree: ConfigNode,
    class_type: ClassType = ClassType.BASE,
) -> None:
    """Define every class under a tree node.

    Stops at the first error. Classes defined before the error stay in the
    registry, but the compilation should be treated as failed.

    Args:
        registry: Registry to define the classes in
        tree: Node whose children are class definitions
        class_type: Kind of class being defined

    Raises:
        SchemaError: The first error met, with the class name attached
    """
    for node in tree.children():
        if node.id is None:
            continue

        try:
            define_class(registry, node, class_type)
        except SchemaError as e:
            if e.class_name is None:
                e.class_name = bounded_name(node.id)
            logger.error(f"[Classes] Failed to create class {node.id}: {e}")
            raise
