from __future__ import annotations
import logging
from typing import Any, Callable, List, Optional
from ..core.metrics import SearchResult, MeasuredRun, CountingNeighbors
from ..core.predecessors import nodes_on_shortest_paths, optimal_targets, reconstruct_path
from ..core.problem import GraphProblem
from ..core.search import a_star_ex

logger = logging.getLogger(__name__)

def best_first_search(
    problem: GraphProblem,
    h: Optional[Callable[[Any], Any]] = None,
    name: str = "BestFirst",
    exhaustive: bool = False,
    zero: Any = 0,
) -> SearchResult:
    """Run the engine on `problem` and package cost, path and counters as a SearchResult."""
    start = problem.start()
    neighbors = CountingNeighbors(problem.neighbors)
    if h is None:
        h = lambda _: zero

    # targets popped by the engine, in pop order
    hits: List[Any] = []

    def target_test(node) -> bool:
        if problem.is_target(node):
            hits.append(node)
            return True
        return False

    with MeasuredRun() as meter:
        outcome = a_star_ex(start, target_test, neighbors, h, exhaustive, zero)

    if outcome is None:
        logger.info(f"{name}: no target reachable from {start!r}")
        return SearchResult(name, False, None, neighbors.calls, meter.elapsed, meter.peak_kb)

    cost, prev = outcome
    # the start has no predecessor entry; it can only be an optimal target at zero cost
    best = [t for t in hits if t == start and cost == zero] + optimal_targets(prev, cost, hits)
    path = reconstruct_path(prev, start, best[0])
    on_path = len(nodes_on_shortest_paths(prev, best)) if exhaustive else None
    logger.info(f"{name}: cost={cost!r} expanded={neighbors.calls}")
    return SearchResult(
        name, True, cost, neighbors.calls, meter.elapsed, meter.peak_kb,
        path=path, on_path=on_path,
    )
