"""Config node reader contract and an in-memory implementation.

The class builders only need a small view of a configuration tree:
ordered iteration over named children and typed scalar reads that fail
distinguishably. ConfigNode describes that view; TreeNode provides it over
plain Python data (dicts, lists, strings, integers), which is what a YAML
document loads into.
"""

import logging
from collections.abc import Hashable
from pathlib import Path
from typing import Any, Iterator, Protocol

import yaml

from .errors import InvalidNodeId, InvalidScalarType


logger = logging.getLogger(__name__)


class ConfigNode(Protocol):
    """Read-only view of one node in a configuration tree."""

    @property
    def id(self) -> str | None:
        """The node's own name, or None when it has none."""
        ...

    @property
    def is_compound(self) -> bool:
        """True when the node holds children rather than a scalar."""
        ...

    def children(self) -> Iterator["ConfigNode"]:
        """Iterate child nodes in declaration order."""
        ...

    def get_string(self) -> str:
        """Return the node's string value or raise InvalidScalarType."""
        ...

    def get_integer(self) -> int:
        """Return the node's integer value or raise InvalidScalarType."""
        ...


class TreeNode:
    """ConfigNode backed by plain Python data.

    Mappings and sequences are compound nodes. Sequence items get the ids
    "0", "1", ... the same way array elements are named in the textual
    configuration format. str and int values are scalars; anything else
    (bool, float, None) is a scalar that is neither a string nor an integer.
    """

    def __init__(self, id: str | None, value: Any) -> None:
        self._id = id
        self._value = value

    def __repr__(self) -> str:
        return f"TreeNode(id={self._id!r}, value={self._value!r})"

    @classmethod
    def from_data(cls, data: Any, id: str | None = None) -> "TreeNode":
        """Wrap plain data as a tree rooted at a node with the given id."""
        return cls(id, data)

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def is_compound(self) -> bool:
        return isinstance(self._value, (dict, list, tuple))

    def children(self) -> Iterator["TreeNode"]:
        if isinstance(self._value, dict):
            for key, value in self._value.items():
                yield TreeNode(None if key is None else str(key), value)
        elif isinstance(self._value, (list, tuple)):
            for index, value in enumerate(self._value):
                yield TreeNode(str(index), value)

    def get_string(self) -> str:
        if not isinstance(self._value, str):
            raise InvalidScalarType(f"Node '{self._id}' is not a string")
        return self._value

    def get_integer(self) -> int:
        # bool is an int subclass but never an integer node
        if isinstance(self._value, bool) or not isinstance(self._value, int):
            raise InvalidScalarType(f"Node '{self._id}' is not an integer")
        return self._value


class _FirstKeyLoader(yaml.SafeLoader):
    """SafeLoader that keeps the first value of a repeated mapping key.

    A name declared twice in the same block must resolve to its first
    definition, the same as a class defined twice across define calls.
    """


def _construct_first_key_mapping(loader: _FirstKeyLoader, node: yaml.MappingNode) -> dict:
    loader.flatten_mapping(node)
    mapping: dict = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=True)
        if not isinstance(key, Hashable):
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                "found unhashable key",
                key_node.start_mark,
            )
        if key in mapping:
            logger.debug(f"[Tree] Duplicate key '{key}' ignored at {key_node.start_mark}")
            continue
        mapping[key] = loader.construct_object(value_node, deep=True)
    return mapping


_FirstKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_first_key_mapping
)


def load_tree(path: Path | str) -> TreeNode:
    """Load a YAML document and wrap its top-level mapping as a tree.

    When a mapping repeats a key, the first value is kept and later ones
    are dropped.

    Args:
        path: Path to the YAML file

    Returns:
        Root TreeNode whose children are the document's top-level keys

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidNodeId: If the document's top level is not a mapping
        yaml.YAMLError: If the document is not valid YAML
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.load(f, Loader=_FirstKeyLoader)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidNodeId(f"Top level of {path} must be a mapping of named nodes")

    return TreeNode.from_data(data)
