"""Global fixtures for tplgpp tests."""

import pytest

from tplgpp.classes import Registry
from tplgpp.core.node import TreeNode


@pytest.fixture
def registry():
    """An empty class registry."""
    return Registry()


@pytest.fixture
def dai_class_data():
    """Plain-data definition of a DAI-like class."""
    return {
        "dai": {
            "DefineArgument": {
                "dai_type": {
                    "token_ref": "sof_tkn_dai.string",
                },
                "direction": {
                    "constraints": {
                        "valid_values": {
                            "playback": "playback",
                            "capture": "capture",
                        },
                        "tuple_values": {
                            "playback": 0,
                            "capture": 1,
                        },
                    },
                    "token_ref": "sof_tkn_dai.word",
                },
            },
            "DefineAttribute": {
                "index": {
                    "constraints": {"min": 0, "max": 255},
                },
                "period_sink_count": {},
                "period_source_count": {},
                "format": {
                    "constraints": {
                        "valid_values": {
                            "s16": "s16le",
                            "s24": "s24le",
                            "s32": "s32le",
                        },
                    },
                },
            },
            "attributes": {
                "mandatory": ["dai_type", "direction", "index"],
                "immutable": ["dai_type"],
                "deprecated": ["period_source_count"],
                "unique": "index",
            },
        },
    }


@pytest.fixture
def dai_tree(dai_class_data):
    """The DAI class definition wrapped as a config tree."""
    return TreeNode.from_data(dai_class_data)
