# pathsearch/core/search.py
# Generalized best-first search (A* / Dijkstra) over an implicit graph, with an exhaustive
# mode that keeps every equal-cost predecessor so all optimal routes can be rebuilt.
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Hashable, Iterable, Optional, Tuple

from .frontiers import PriorityQueue
from .predecessors import PredecessorTable, record_predecessor

logger = logging.getLogger(__name__)

Node = Hashable
Cost = Any
NeighborFn = Callable[[Node], Iterable[Tuple[Node, Cost]]]
SearchOutcome = Optional[Tuple[Cost, PredecessorTable]]


def a_star_ex(
    start: Node,
    target_test: Callable[[Node], bool],
    neighbors: NeighborFn,
    heuristic: Callable[[Node], Cost],
    exhaustive: bool = False,
    zero: Cost = 0,
) -> SearchOutcome:
    """
    Best-first search from `start` until a node satisfying `target_test` is popped.

    Returns (cost, predecessors) or None when no target is reachable.
    `predecessors` maps each reached node to (best cost, set of nodes reaching it at that cost).

    Non-exhaustive: stops at the first target popped; each node keeps only the predecessors
    that improved its cost. Exhaustive: keeps draining the frontier, prunes any edge whose
    cost exceeds the cheapest target found, and records every equal-cost predecessor.

    Contract (not checked): edge costs are non-negative and `heuristic` never overestimates
    the remaining cost to the nearest target. Nodes must be hashable; costs must support
    `+`, `<` and `==` with `zero` as the additive identity.
    """
    frontier = PriorityQueue()
    traversed: Dict[Node, Cost] = {start: zero}
    closed: Dict[Node, Cost] = {}  # node -> cost it was last expanded at
    prev: PredecessorTable = {}
    lowest_cost: Optional[Cost] = None

    frontier.push(heuristic(start), start)
    logger.debug(f"search from {start!r} (exhaustive={exhaustive})")

    while frontier:
        _, node = frontier.pop()
        total_cost = traversed[node]
        # stale duplicate: already expanded at its best cost
        if node in closed and closed[node] == total_cost:
            continue
        closed[node] = total_cost
        # queued before the lowest target cost was known; every edge out of it would be pruned
        if lowest_cost is not None and total_cost > lowest_cost:
            continue

        if target_test(node):
            if not exhaustive:
                logger.debug(f"target {node!r} reached at cost {total_cost!r} after {len(closed)} expansions")
                return total_cost, prev
            if lowest_cost is None:
                logger.debug(f"lowest target cost {total_cost!r} fixed at {node!r}")
                lowest_cost = total_cost

        for nei, cost in neighbors(node):
            if cost is None:
                raise ValueError(
                    f"neighbors returned a None cost for edge {node!r} -> {nei!r}. "
                    "Check your neighbor function."
                )
            next_cost = total_cost + cost
            if lowest_cost is not None and next_cost > lowest_cost:
                continue

            known = traversed.get(nei)
            if known is None or known > next_cost:
                record_predecessor(prev, nei, next_cost, node)
                frontier.push(next_cost + heuristic(nei), nei)
                traversed[nei] = next_cost
            elif exhaustive and known == next_cost:
                record_predecessor(prev, nei, next_cost, node)

    if lowest_cost is None:
        logger.debug(f"frontier exhausted after {len(closed)} expansions, no target reachable")
        return None
    logger.debug(f"exhaustive search done: cost {lowest_cost!r}, {len(prev)} predecessor entries")
    return lowest_cost, prev


def dijkstra_ex(
    start: Node,
    target_test: Callable[[Node], bool],
    neighbors: NeighborFn,
    exhaustive: bool = False,
    zero: Cost = 0,
) -> SearchOutcome:
    """a_star_ex with a heuristic that always returns `zero`."""
    return a_star_ex(start, target_test, neighbors, lambda _: zero, exhaustive, zero)


def a_star(
    start: Node,
    target_test: Callable[[Node], bool],
    neighbors: NeighborFn,
    heuristic: Callable[[Node], Cost],
    zero: Cost = 0,
) -> Optional[Cost]:
    """Cheapest cost to any target, or None."""
    result = a_star_ex(start, target_test, neighbors, heuristic, False, zero)
    return None if result is None else result[0]


def dijkstra(
    start: Node,
    target_test: Callable[[Node], bool],
    neighbors: NeighborFn,
    zero: Cost = 0,
) -> Optional[Cost]:
    result = dijkstra_ex(start, target_test, neighbors, False, zero)
    return None if result is None else result[0]
