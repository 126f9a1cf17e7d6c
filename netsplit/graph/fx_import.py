"""
torch.fx front end.

Converts a traced ``torch.fx.GraphModule`` into a NetGraph so models
written in PyTorch can go through split insertion. Every FX node
becomes one layer whose single top is named after the node.
"""

from __future__ import annotations

from typing import Any, Optional

import torch
import torch.fx

from .graph_nodes import LayerNode, NetGraph
from ..utils.logging import get_logger

logger = get_logger(__name__)

INPUT_LAYER_TYPE = "Input"
PARAMETER_LAYER_TYPE = "Parameter"
OUTPUT_LAYER_TYPE = "Output"


class FxGraphImporter:
    """
    Builds NetGraph layers from FX nodes.

    Placeholders become ``Input`` layers, ``get_attr`` nodes become
    ``Parameter`` layers, call nodes become layers typed by the called
    operation and the output node becomes an ``Output`` layer.
    """

    def __init__(self, include_output_layer: bool = True):
        self.include_output_layer = include_output_layer

    def import_graph(
        self,
        graph_module: torch.fx.GraphModule,
        loss_weights: Optional[dict[str, float]] = None,
        name: Optional[str] = None,
    ) -> NetGraph:
        """
        Convert an FX graph module to a network.

        Args:
            graph_module: Traced module to convert
            loss_weights: Optional objective weight per FX node name; the
                weight is attached to that node's top
            name: Network name, defaults to the module's class name

        Returns:
            NetGraph with one layer per FX node
        """
        if graph_module is None:
            raise ValueError("graph_module cannot be None")

        net = NetGraph(name=name or type(graph_module).__name__)
        loss_weights = loss_weights or {}

        for fx_node in graph_module.graph.nodes:
            layer = self._convert_node(graph_module, fx_node)
            if layer is None:
                continue
            weight = loss_weights.get(fx_node.name)
            if weight is not None and layer.tops:
                layer.loss_weights = [float(weight)]
            net.add_layer(layer)

        unknown = [n for n in loss_weights if net.layer_by_name(n) is None]
        if unknown:
            logger.warning(f"Ignoring loss weights for unknown FX nodes: {sorted(unknown)}")

        logger.debug(f"Imported FX graph as net '{net.name}' ({len(net.layers)} layers)")
        return net

    def _convert_node(self, graph_module: torch.fx.GraphModule, fx_node: torch.fx.Node) -> Optional[LayerNode]:
        if fx_node.op == "placeholder":
            return LayerNode(name=fx_node.name, type=INPUT_LAYER_TYPE, tops=[fx_node.name])

        if fx_node.op == "get_attr":
            return LayerNode(
                name=fx_node.name,
                type=PARAMETER_LAYER_TYPE,
                tops=[fx_node.name],
                params={"target": str(fx_node.target)},
            )

        if fx_node.op == "output":
            if not self.include_output_layer:
                return None
            return LayerNode(
                name=fx_node.name,
                type=OUTPUT_LAYER_TYPE,
                bottoms=_input_names(fx_node.args),
            )

        if fx_node.op in ("call_function", "call_method", "call_module"):
            return LayerNode(
                name=fx_node.name,
                type=self._layer_type(graph_module, fx_node),
                bottoms=_input_names((fx_node.args, fx_node.kwargs)),
                tops=[fx_node.name],
                params=_constant_params(fx_node),
            )

        return None

    def _layer_type(self, graph_module: torch.fx.GraphModule, fx_node: torch.fx.Node) -> str:
        if fx_node.op == "call_module":
            return type(graph_module.get_submodule(fx_node.target)).__name__
        if fx_node.op == "call_method":
            return fx_node.target
        if hasattr(fx_node.target, "__name__"):
            return fx_node.target.__name__
        return str(fx_node.target).split(".")[-1]


def _input_names(args: Any) -> list[str]:
    """Names of every FX node referenced in ``args``, in argument order, with repeats."""
    names: list[str] = []

    def collect(node: torch.fx.Node) -> torch.fx.Node:
        names.append(node.name)
        return node

    torch.fx.node.map_arg(args, collect)
    return names


def _is_constant(value: Any) -> bool:
    found: list[torch.fx.Node] = []
    torch.fx.node.map_arg(value, lambda node: found.append(node) or node)
    return not found


def _constant_params(fx_node: torch.fx.Node) -> dict[str, Any]:
    params: dict[str, Any] = {"target": str(fx_node.target)}

    constant_args = [arg for arg in fx_node.args if _is_constant(arg)]
    if constant_args:
        params["args"] = constant_args

    for key, value in fx_node.kwargs.items():
        if _is_constant(value):
            params[key] = value

    return params


def net_from_fx(
    graph_module: torch.fx.GraphModule,
    loss_weights: Optional[dict[str, float]] = None,
    name: Optional[str] = None,
    include_output_layer: bool = True,
) -> NetGraph:
    """Convert a traced module to a NetGraph (see FxGraphImporter.import_graph)."""
    importer = FxGraphImporter(include_output_layer=include_output_layer)
    return importer.import_graph(graph_module, loss_weights=loss_weights, name=name)
