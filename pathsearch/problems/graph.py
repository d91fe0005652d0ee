# pathsearch/problems/graph.py
# A GraphProblem over an explicit adjacency mapping {node: {neighbor: cost}}.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Collection, Hashable, Iterable, Mapping, Tuple


@dataclass
class WeightedGraph:
    edges: Mapping[Hashable, Mapping[Hashable, Any]]
    source: Hashable
    targets: Collection[Hashable]
    h: Mapping[Hashable, Any] = field(default_factory=dict)

    def start(self) -> Hashable:
        return self.source

    def is_target(self, node: Hashable) -> bool:
        return node in self.targets

    def neighbors(self, node: Hashable) -> Iterable[Tuple[Hashable, Any]]:
        # nodes without outgoing edges are sinks
        return list(self.edges.get(node, {}).items())

    def heuristic(self, node: Hashable) -> Any:
        return self.h.get(node, 0)


def weighted_graph(edges, start, targets, heuristic=None) -> WeightedGraph:
    if isinstance(targets, (str, bytes)) or not isinstance(targets, Collection):
        targets = {targets}
    return WeightedGraph(edges=edges, source=start, targets=set(targets), h=dict(heuristic or {}))


def diamond() -> WeightedGraph:
    """A -> B, A -> C, B -> D, C -> D, all cost 1; two equal-cost routes to D."""
    edges = {"A": {"B": 1, "C": 1}, "B": {"D": 1}, "C": {"D": 1}}
    return weighted_graph(edges, "A", "D")
