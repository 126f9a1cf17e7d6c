"""
Def-use analysis of network definitions.

This module scans a network once, in layer order, and resolves every
bottom blob to the top slot that produced it. Blob names are not unique
across a network (a later layer may redefine a name), so producers are
identified structurally by ``(layer_index, slot)`` and the most recent
producer of a name wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from .graph_nodes import NetGraph
from ..utils.exceptions import UnknownBlobError
from ..utils.logging import NetsplitLogger

log = NetsplitLogger(__name__)


class BlobRef(NamedTuple):
    """A top or bottom slot of a layer, addressed by position."""

    layer_index: int
    slot: int


@dataclass
class AnalysisResult:
    """
    Def-use information for one network.

    Attributes:
        last_top: Most recent top slot seen for each blob name.
        bottom_sources: Producing top slot of every bottom slot.
        top_bottom_counts: Number of uses of each top slot, counting a
            nonzero objective weight as one extra use.
        top_loss_weights: Objective weight recorded for each top slot.
        layer_names: Layer name by layer index.
    """
    last_top: dict[str, BlobRef] = field(default_factory=dict)
    bottom_sources: dict[BlobRef, BlobRef] = field(default_factory=dict)
    top_bottom_counts: dict[BlobRef, int] = field(default_factory=dict)
    top_loss_weights: dict[BlobRef, float] = field(default_factory=dict)
    layer_names: dict[int, str] = field(default_factory=dict)

    def split_count(self, top: BlobRef) -> int:
        """Number of split outputs needed for a top slot."""
        return self.top_bottom_counts.get(top, 0)

    def needs_split(self, top: BlobRef) -> bool:
        """Check if a top slot is used more than once."""
        return self.split_count(top) > 1

    def loss_weight(self, top: BlobRef) -> float:
        """Objective weight recorded for a top slot, 0 when none."""
        return self.top_loss_weights.get(top, 0.0)

    def shared_tops(self) -> list[BlobRef]:
        """Top slots that need a Split layer, in layer order."""
        return sorted(top for top, count in self.top_bottom_counts.items() if count > 1)


class GraphAnalyzer:
    """
    Builds the def-use map of a network.

    The analyzer is read-only: it never modifies the network it is given.
    """

    def analyze(self, net: NetGraph) -> AnalysisResult:
        """
        Resolve bottoms to producers and count top uses.

        Args:
            net: Network to analyze

        Returns:
            AnalysisResult for the network

        Raises:
            UnknownBlobError: If a bottom has no producer earlier in the network
        """
        result = AnalysisResult()

        for i, layer in enumerate(net.layers):
            result.layer_names[i] = layer.name

            for j, blob_name in enumerate(layer.bottoms):
                top = result.last_top.get(blob_name)
                if top is None:
                    log.log_unknown_blob(layer.name, j, blob_name)
                    raise UnknownBlobError(layer.name, j, blob_name)
                result.bottom_sources[BlobRef(i, j)] = top
                result.top_bottom_counts[top] = result.top_bottom_counts.get(top, 0) + 1

            # Tops are registered after bottoms so a layer never feeds itself
            for k, blob_name in enumerate(layer.tops):
                result.last_top[blob_name] = BlobRef(i, k)

            # An objective use of a top counts like one more bottom
            last_loss = min(len(layer.loss_weights), len(layer.tops))
            for k in range(last_loss):
                top = result.last_top[layer.tops[k]]
                weight = layer.loss_weight(k)
                result.top_loss_weights[top] = weight
                if weight:
                    result.top_bottom_counts[top] = result.top_bottom_counts.get(top, 0) + 1

        return result
