"""Tests for attribute definitions."""

import pytest

from tplgpp.classes.attribute import build_attribute, define_attributes
from tplgpp.core.errors import InvalidConstraint, InvalidNodeId
from tplgpp.core.models import INT_MAX, INT_MIN, NAME_MAX_LENGTH, Class, ParamType
from tplgpp.core.node import TreeNode


class TestBuildAttribute:
    """Tests for build_attribute."""

    def test_empty_body(self):
        attr = build_attribute(TreeNode("rate", {}), ParamType.ATTRIBUTE)
        assert attr.name == "rate"
        assert attr.param_type == ParamType.ATTRIBUTE
        assert attr.token_ref == ""
        assert not attr.has_token
        assert attr.constraint.min == INT_MIN
        assert attr.constraint.max == INT_MAX

    def test_token_ref_and_constraints(self):
        node = TreeNode(
            "direction",
            {
                "constraints": {"min": 0, "max": 1},
                "token_ref": "sof_tkn_dai.word",
                "description": "ignored",
            },
        )
        attr = build_attribute(node, ParamType.ARGUMENT)
        assert attr.token_ref == "sof_tkn_dai.word"
        assert attr.has_token
        assert (attr.constraint.min, attr.constraint.max) == (0, 1)

    def test_token_ref_must_be_string(self):
        with pytest.raises(InvalidConstraint) as exc_info:
            build_attribute(TreeNode("index", {"token_ref": 3}), ParamType.ATTRIBUTE)
        assert exc_info.value.attribute_name == "index"

    def test_constraint_error_names_attribute(self):
        node = TreeNode("index", {"constraints": {"min": "zero"}})
        with pytest.raises(InvalidConstraint) as exc_info:
            build_attribute(node, ParamType.ATTRIBUTE)
        assert exc_info.value.attribute_name == "index"

    def test_missing_name(self):
        with pytest.raises(InvalidNodeId):
            build_attribute(TreeNode(None, {}), ParamType.ATTRIBUTE)

    def test_long_name_is_bounded(self):
        name = "x" * 60
        attr = build_attribute(TreeNode(name, {}), ParamType.ATTRIBUTE)
        assert attr.name == "x" * (NAME_MAX_LENGTH - 1)


class TestDefineAttributes:
    """Tests for define_attributes."""

    def test_arguments_counted_in_order(self):
        cls = Class(name="pga")
        node = TreeNode("DefineArgument", {"a": {}, "b": {}, "c": {}})

        define_attributes(node, cls, ParamType.ARGUMENT)

        assert [a.name for a in cls.attributes] == ["a", "b", "c"]
        assert cls.num_args == 3
        assert all(a.param_type == ParamType.ARGUMENT for a in cls.attributes)

    def test_attributes_not_counted(self):
        cls = Class(name="pga")
        define_attributes(TreeNode("DefineArgument", {"index": {}}), cls, ParamType.ARGUMENT)
        define_attributes(TreeNode("DefineAttribute", {"gain": {}}), cls, ParamType.ATTRIBUTE)

        assert cls.num_args == 1
        assert [a.name for a in cls.attributes] == ["index", "gain"]
        assert [a.name for a in cls.arguments] == ["index"]

    def test_duplicate_names_first_wins_on_lookup(self):
        cls = Class(name="pga")
        node = TreeNode(
            "DefineAttribute",
            {"gain": {"constraints": {"max": 10}}},
        )
        define_attributes(node, cls, ParamType.ATTRIBUTE)
        define_attributes(
            TreeNode("DefineAttribute", {"gain": {"constraints": {"max": 20}}}),
            cls,
            ParamType.ATTRIBUTE,
        )

        assert len(cls.attributes) == 2
        assert cls.get_attribute("gain").constraint.max == 10
