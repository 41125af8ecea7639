"""Compiled class schema: classes, attributes, constraints and value refs.

These models are the output of the class builders. A Class owns an ordered
list of Attribute, each Attribute owns exactly one Constraint, and each
Constraint owns its table of ValueRef entries. Nothing points back up the
tree.
"""

from enum import Enum, IntFlag

from pydantic import BaseModel, Field


# =============================================================================
# Limits
# =============================================================================

# Names and token references are bounded the way control element ids are:
# one slot is reserved for the terminator, so 43 characters survive.
NAME_MAX_LENGTH = 44

# Default bounds are the full signed 32-bit range used by topology tuples.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Value of a ValueRef that no translation table has resolved yet.
UNRESOLVED = None


def bounded_name(name: str) -> str:
    """Truncate a name to the storable length."""
    return name[: NAME_MAX_LENGTH - 1]


# =============================================================================
# Enums
# =============================================================================


class ClassType(str, Enum):
    """Kind of class a define pass compiles."""

    BASE = "base"


class ParamType(str, Enum):
    """Whether a class parameter is a positional argument or an attribute."""

    ARGUMENT = "argument"
    ATTRIBUTE = "attribute"


class AttributeMask(IntFlag):
    """Category flags carried by an attribute's constraint."""

    MANDATORY = 1 << 1
    IMMUTABLE = 1 << 2
    DEPRECATED = 1 << 3
    AUTOMATIC = 1 << 4
    UNIQUE = 1 << 5


# =============================================================================
# Schema models
# =============================================================================


class ValueRef(BaseModel):
    """One entry of an attribute's valid-value table.

    `string` is the human-readable value when one was declared. `value` is
    the integer it translates to, or UNRESOLVED until a tuple_values table
    fills it in.
    """

    id: str
    string: str | None = None
    value: int | None = UNRESOLVED

    @property
    def resolved(self) -> bool:
        return self.value is not None


class Constraint(BaseModel):
    """Validation rules attached to one attribute.

    valid_values is kept in reverse declaration order: every new entry is
    placed at the front. min <= max is not checked.
    """

    min: int = INT_MIN
    max: int = INT_MAX
    valid_values: list[ValueRef] = Field(default_factory=list)
    mask: AttributeMask = AttributeMask(0)

    def find_value(self, id: str) -> ValueRef | None:
        """Return the first valid value with the given id."""
        for ref in self.valid_values:
            if ref.id == id:
                return ref
        return None


class Attribute(BaseModel):
    """A named, constrained parameter of a class."""

    name: str
    param_type: ParamType
    token_ref: str = ""
    constraint: Constraint = Field(default_factory=Constraint)

    @property
    def has_token(self) -> bool:
        return bool(self.token_ref)


class Class(BaseModel):
    """A compiled class: a template for later configuration objects.

    attributes is in declaration order. num_args counts the attributes that
    were declared as arguments.
    """

    name: str
    class_type: ClassType = ClassType.BASE
    num_args: int = 0
    attributes: list[Attribute] = Field(default_factory=list)

    @property
    def arguments(self) -> list[Attribute]:
        return [a for a in self.attributes if a.param_type == ParamType.ARGUMENT]

    def get_attribute(self, name: str) -> Attribute | None:
        """Return the first attribute with exactly this name."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None
