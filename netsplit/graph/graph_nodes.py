"""
Layer and network definitions for netsplit.

A network is an ordered list of layers. Each layer names the blobs it
reads (bottoms) and writes (tops); blobs are connected purely by name,
so a later layer may redefine a blob name produced earlier.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from ..utils.exceptions import InvalidGraphError


@dataclass
class LayerNode:
    """
    Represents a single layer in a network definition.

    ``loss_weights`` holds optional per-top objective weights; it may be
    shorter than ``tops`` and trailing tops then carry no weight.
    ``params`` is opaque layer configuration carried through unchanged.
    """
    name: str
    type: str
    bottoms: list[str] = field(default_factory=list)
    tops: list[str] = field(default_factory=list)
    loss_weights: list[float] = field(default_factory=list)
    params: dict[str, Any] = field(default_factory=dict)

    def loss_weight(self, top_index: int) -> float:
        """Return the objective weight of a top slot, 0 when unset."""
        if top_index < len(self.loss_weights):
            return self.loss_weights[top_index]
        return 0.0

    def clone(self) -> LayerNode:
        """Return a deep copy that shares no mutable state with this layer."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "bottom": list(self.bottoms),
            "top": list(self.tops),
        }
        if self.loss_weights:
            data["loss_weight"] = list(self.loss_weights)
        if self.params:
            data["params"] = copy.deepcopy(self.params)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], index: Optional[int] = None) -> LayerNode:
        """
        Build a layer from a plain dictionary.

        Args:
            data: Mapping with ``name``, ``type``, ``bottom``, ``top`` and
                optional ``loss_weight`` and ``params`` keys
            index: Position of the layer, used in error reports

        Raises:
            InvalidGraphError: If the mapping is malformed
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidGraphError("Layer is missing a name", layer_index=index)

        bottoms = _blob_list(data.get("bottom", []), "bottom", name, index)
        tops = _blob_list(data.get("top", []), "top", name, index)

        return cls(
            name=name,
            type=str(data.get("type", "")),
            bottoms=bottoms,
            tops=tops,
            loss_weights=_weight_list(data.get("loss_weight", []), name, index),
            params=copy.deepcopy(data.get("params", {})),
        )

    def __str__(self) -> str:
        return f"LayerNode(name={self.name}, type={self.type}, bottoms={self.bottoms}, tops={self.tops})"


def _blob_list(value: Any, field_name: str, layer_name: str, index: Optional[int]) -> list[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise InvalidGraphError(
            f"Layer '{layer_name}' {field_name} must be a list of blob names", layer_index=index
        )
    return list(value)


def _weight_list(value: Any, layer_name: str, index: Optional[int]) -> list[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = [value]
    if not isinstance(value, (list, tuple)) or not all(
        isinstance(w, (int, float)) and not isinstance(w, bool) for w in value
    ):
        raise InvalidGraphError(
            f"Layer '{layer_name}' loss_weight must be a list of numbers", layer_index=index
        )
    return [float(w) for w in value]


@dataclass
class NetGraph:
    """
    Represents a complete network definition.

    Layer order is execution order. ``attributes`` carries net-level
    settings that the pass copies to its output untouched.
    """
    name: str = ""
    layers: list[LayerNode] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)

    def add_layer(self, layer: LayerNode) -> None:
        """Append a layer to the network."""
        self.layers.append(layer)

    def copy_without_layers(self) -> NetGraph:
        """Return a copy of the net-level fields with an empty layer list."""
        return NetGraph(name=self.name, attributes=copy.deepcopy(self.attributes))

    def layer_by_name(self, name: str) -> Optional[LayerNode]:
        """Return the first layer with the given name, if any."""
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        data: dict[str, Any] = {"name": self.name}
        data.update(copy.deepcopy(self.attributes))
        data["layer"] = [layer.to_dict() for layer in self.layers]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NetGraph:
        """Build a network from a plain dictionary (``name`` plus a ``layer`` list)."""
        layers_data = data.get("layer", [])
        if not isinstance(layers_data, list):
            raise InvalidGraphError("Network 'layer' field must be a list")

        attributes = {k: copy.deepcopy(v) for k, v in data.items() if k not in ("name", "layer")}
        net = cls(name=str(data.get("name", "")), attributes=attributes)
        for i, layer_data in enumerate(layers_data):
            if not isinstance(layer_data, dict):
                raise InvalidGraphError("Layer entry must be a mapping", layer_index=i)
            net.add_layer(LayerNode.from_dict(layer_data, index=i))
        return net

    def __len__(self) -> int:
        return len(self.layers)
