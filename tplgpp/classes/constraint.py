"""Constraint parsing for class attributes.

An attribute's `constraints` block may set min/max bounds, declare the
human-readable values the attribute accepts (`valid_values`) and map those
values to the integers written into tuples (`tuple_values`). For example,
the values "playback" and "capture" of a direction attribute translate to
0 and 1 for a DAI widget.
"""

import logging
import re

from ..core.errors import InvalidConstraint, SchemaError
from ..core.models import UNRESOLVED, Constraint, ValueRef
from ..core.node import ConfigNode


logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"[0-9]+")


def parse_leading_decimal(s: str) -> int | None:
    """Convert a string that starts with a decimal digit to an integer.

    Only the leading run of digits is used, so "12abc" gives 12. Strings
    that do not start with 0-9 give None; this includes negative numbers,
    a leading '+' and surrounding whitespace.

    Args:
        s: String value read from a config node

    Returns:
        The parsed integer, or None if s does not start with a digit

    Raises:
        ValueError: If the digit run is longer than int() will convert
    """
    match = _LEADING_DIGITS.match(s)
    if match is None:
        return None
    return int(match.group(0))


def _decimal_value(s: str, node_id: str, attr_name: str) -> int | None:
    """Run parse_leading_decimal, reporting oversized numbers as constraint errors."""
    try:
        return parse_leading_decimal(s)
    except ValueError as e:
        raise InvalidConstraint(
            f"Value for '{node_id}' is too large", attribute_name=attr_name
        ) from e


def _read_reference_value(node: ConfigNode, attr_name: str) -> int:
    """Read a tuple value that may be an integer or a digit-led string."""
    try:
        s = node.get_string()
    except SchemaError:
        try:
            return node.get_integer()
        except SchemaError as e:
            raise InvalidConstraint(
                f"Invalid reference value '{node.id}', must be integer",
                attribute_name=attr_name,
            ) from e

    value = _decimal_value(s, node.id, attr_name)
    if value is None:
        raise InvalidConstraint(
            f"Reference value '{s}' for '{node.id}' is not an integer",
            attribute_name=attr_name,
        )
    return value


def parse_valid_values(node: ConfigNode, constraint: Constraint, attr_name: str) -> None:
    """Add every child of a valid_values block to the constraint.

    New entries go to the front of constraint.valid_values, so the table
    ends up in reverse declaration order.
    """
    for child in node.children():
        if child.id is None:
            raise InvalidConstraint("Invalid valid value reference id", attribute_name=attr_name)

        try:
            s = child.get_string()
        except SchemaError:
            try:
                value = child.get_integer()
            except SchemaError as e:
                raise InvalidConstraint(
                    f"Invalid valid value '{child.id}'", attribute_name=attr_name
                ) from e
            ref = ValueRef(id=child.id, value=value)
        else:
            value = _decimal_value(s, child.id, attr_name)
            ref = ValueRef(id=child.id, string=s, value=UNRESOLVED if value is None else value)

        constraint.valid_values.insert(0, ref)


def parse_tuple_values(node: ConfigNode, constraint: Constraint, attr_name: str) -> None:
    """Resolve valid values to their tuple integers.

    Each child's id is matched against the valid values already declared;
    the first match gets the child's value. Ids with no match are ignored,
    so valid_values must come before tuple_values.
    """
    for child in node.children():
        if child.id is None:
            raise InvalidConstraint("Invalid tuple value reference id", attribute_name=attr_name)

        value = _read_reference_value(child, attr_name)

        ref = constraint.find_value(child.id)
        if ref is None:
            logger.debug(f"[Constraint] {attr_name}: no valid value '{child.id}' to translate")
            continue
        ref.value = value


def parse_constraints(node: ConfigNode, constraint: Constraint, attr_name: str) -> None:
    """Apply a constraints block to an existing constraint.

    Args:
        node: The `constraints` config node
        constraint: Constraint to update in place
        attr_name: Owning attribute, used in error messages

    Raises:
        InvalidConstraint: If a bound or value entry is malformed
    """
    for child in node.children():
        key = child.id
        if key is None:
            continue

        if key in ("min", "max"):
            try:
                value = child.get_integer()
            except SchemaError as e:
                raise InvalidConstraint(
                    f"Invalid {key} constraint", attribute_name=attr_name
                ) from e
            if key == "min":
                constraint.min = value
            else:
                constraint.max = value
        elif key == "valid_values":
            parse_valid_values(child, constraint, attr_name)
        elif key == "tuple_values":
            parse_tuple_values(child, constraint, attr_name)
        else:
            # unknown keys are left for newer schema versions
            continue


def build_constraint(node: ConfigNode, attr_name: str) -> Constraint:
    """Build a constraint from a constraints block, starting from defaults."""
    constraint = Constraint()
    parse_constraints(node, constraint, attr_name)
    return constraint
