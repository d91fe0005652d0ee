# Defines the interface the problem-level wrappers expect (start, targets, edges, heuristic).
# pathsearch/core/problem.py
from __future__ import annotations
from typing import Any, Hashable, Iterable, Protocol, Tuple

Node = Hashable
Cost = Any


class GraphProblem(Protocol):
    """Implicit weighted graph: edges are produced on demand by neighbors()."""
    def start(self) -> Node: ...
    def is_target(self, node: Node) -> bool: ...
    def neighbors(self, node: Node) -> Iterable[Tuple[Node, Cost]]: ...
    # Optional heuristic for informed search; default 0 (admissible by construction)
    def heuristic(self, node: Node) -> Cost: return 0
