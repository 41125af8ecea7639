"""Attribute and argument definitions for classes."""

import logging

from ..core.errors import InvalidConstraint, InvalidNodeId, SchemaError
from ..core.models import Attribute, Class, Constraint, ParamType, bounded_name
from ..core.node import ConfigNode
from .constraint import parse_constraints


logger = logging.getLogger(__name__)


def build_attribute(node: ConfigNode, param_type: ParamType) -> Attribute:
    """Build one attribute from its definition node.

    The attribute is named after the node. Its body may hold a
    `constraints` block and a `token_ref` string such as "sof_tkn_dai.word",
    naming the vendor token group and tuple type used to serialize the
    value. The token group is not looked up here. Other keys are ignored.

    Args:
        node: The attribute's definition node
        param_type: Whether the attribute is an argument or an attribute

    Returns:
        The built Attribute

    Raises:
        InvalidNodeId: If the node has no name
        InvalidConstraint: If the constraints block or token_ref is malformed
    """
    if node.id is None:
        raise InvalidNodeId("Attribute definition without a name")

    attr = Attribute(
        name=bounded_name(node.id),
        param_type=param_type,
        constraint=Constraint(),
    )

    for child in node.children():
        key = child.id
        if key is None:
            continue

        if key == "constraints":
            parse_constraints(child, attr.constraint, attr.name)
        elif key == "token_ref":
            try:
                token_ref = child.get_string()
            except SchemaError as e:
                raise InvalidConstraint("Invalid token_ref", attribute_name=attr.name) from e
            attr.token_ref = bounded_name(token_ref)
        else:
            continue

    return attr


def define_attributes(node: ConfigNode, cls: Class, param_type: ParamType) -> None:
    """Build every attribute under a DefineArgument/DefineAttribute block.

    Attributes are appended to the class in declaration order. Each
    argument also bumps the class's argument count.
    """
    for child in node.children():
        if child.id is None:
            continue

        attr = build_attribute(child, param_type)
        if param_type == ParamType.ARGUMENT:
            cls.num_args += 1
        cls.attributes.append(attr)

        logger.debug(f"[Classes] {cls.name}: defined {param_type.value} '{attr.name}'")
