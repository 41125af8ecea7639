"""Errors raised while compiling class definitions.

All errors derive from SchemaError so callers can catch a single type.
Builders raise them where the problem is detected; the class registry
attaches the class name on the way out and logs the failure.
"""


class SchemaError(Exception):
    """Base error for class schema compilation.

    Args:
        message: Human-readable description of the problem
        class_name: Class being defined when the error occurred
        attribute_name: Attribute being built when the error occurred
    """

    def __init__(
        self,
        message: str,
        class_name: str | None = None,
        attribute_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.class_name = class_name
        self.attribute_name = attribute_name

    def __str__(self) -> str:
        parts = []
        if self.class_name:
            parts.append(f"class '{self.class_name}'")
        if self.attribute_name:
            parts.append(f"attribute '{self.attribute_name}'")
        if not parts:
            return self.message
        return f"{self.message} ({', '.join(parts)})"


class InvalidNodeId(SchemaError):
    """A config node has no usable id where one is required."""


class InvalidScalarType(SchemaError):
    """A config node does not hold the expected string or integer."""


class InvalidConstraint(SchemaError):
    """A constraint block holds a malformed bound or valid-value entry."""
