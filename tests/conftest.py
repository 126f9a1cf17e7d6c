"""
Pytest configuration and shared fixtures for netsplit tests.

This module provides common networks, configurations and helpers
used across the test suite.
"""

import pytest

from netsplit.graph.graph_nodes import LayerNode, NetGraph
from netsplit.graph.graph_analyzer import GraphAnalyzer
from netsplit.utils.config import NetsplitConfig, set_config


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Isolate every test from environment overrides and the global config."""
    monkeypatch.delenv("NETSPLIT_CHECK_COLLISIONS", raising=False)
    monkeypatch.delenv("NETSPLIT_LOG_LEVEL", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def default_config(tmp_path):
    """A configuration that uses only defaults."""
    return NetsplitConfig(str(tmp_path / "missing_config.json"))


@pytest.fixture
def collision_checking_config(default_config):
    """A configuration with the pre-flight collision scan enabled."""
    default_config.rewrite.check_name_collisions = True
    return default_config


@pytest.fixture
def graph_analyzer():
    """Create a GraphAnalyzer instance."""
    return GraphAnalyzer()


# Network fixtures
@pytest.fixture
def chain_net():
    """data -> conv -> relu, every blob used once."""
    return NetGraph(
        name="chain",
        layers=[
            LayerNode("data", "Input", tops=["data"]),
            LayerNode("conv", "Convolution", bottoms=["data"], tops=["conv"],
                      params={"num_output": 16}),
            LayerNode("relu", "ReLU", bottoms=["conv"], tops=["relu"]),
        ],
        attributes={"force_backward": True},
    )


@pytest.fixture
def fanout_net():
    """A produces x, consumed by both B and C."""
    return NetGraph(
        name="fanout",
        layers=[
            LayerNode("A", "Input", tops=["x"]),
            LayerNode("B", "ReLU", bottoms=["x"], tops=["b"]),
            LayerNode("C", "Sigmoid", bottoms=["x"], tops=["c"]),
        ],
    )


@pytest.fixture
def inplace_net():
    """conv redefines x in place; a and b read the redefined blob."""
    return NetGraph(
        name="inplace",
        layers=[
            LayerNode("data", "Input", tops=["x"]),
            LayerNode("conv", "Convolution", bottoms=["x"], tops=["x"]),
            LayerNode("a", "ReLU", bottoms=["x"], tops=["a"]),
            LayerNode("b", "ReLU", bottoms=["x"], tops=["b"]),
        ],
    )


@pytest.fixture
def weighted_net():
    """A produces x with an objective weight and one consumer B."""
    return NetGraph(
        name="weighted",
        layers=[
            LayerNode("A", "InnerProduct", tops=["x"], loss_weights=[1.5]),
            LayerNode("B", "ReLU", bottoms=["x"], tops=["b"]),
        ],
    )


@pytest.fixture
def net_dict():
    """A network description as a deserializer would produce it."""
    return {
        "name": "lenet",
        "force_backward": True,
        "layer": [
            {"name": "data", "type": "Input", "top": ["data", "label"]},
            {"name": "ip", "type": "InnerProduct", "bottom": ["data"], "top": ["ip"],
             "params": {"num_output": 10}},
            {"name": "loss", "type": "SoftmaxWithLoss", "bottom": ["ip", "label"],
             "top": ["loss"], "loss_weight": [1]},
            {"name": "accuracy", "type": "Accuracy", "bottom": ["ip", "label"],
             "top": ["accuracy"]},
        ],
    }

