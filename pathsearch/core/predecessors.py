# pathsearch/core/predecessors.py
# Helpers around the predecessor table produced by the search engine:
#   {node: (best_cost, {predecessor, ...})}
# Every predecessor in a node's set reaches it at exactly best_cost, so walking the sets
# backwards from a target enumerates every optimal route to it.
from __future__ import annotations
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Set, Tuple

Node = Hashable
PredecessorTable = Dict[Node, Tuple[Any, Set[Node]]]


def record_predecessor(table: PredecessorTable, node: Node, cost, predecessor: Node) -> None:
    """Same cost: add to the set. Strictly cheaper: replace the entry. Absent: create it."""
    entry = table.get(node)
    if entry is None or entry[0] > cost:
        table[node] = (cost, {predecessor})
    elif entry[0] == cost:
        entry[1].add(predecessor)


def _ordered(nodes: Iterable[Node]) -> List[Node]:
    nodes = list(nodes)
    try:
        return sorted(nodes)
    except TypeError:
        # mixed or unorderable node types keep set order
        return nodes


def nodes_on_shortest_paths(table: PredecessorTable, targets: Iterable[Node]) -> Set[Node]:
    """
    All nodes lying on some optimal path to any of `targets`, the targets and the start included.
    Pass only the targets whose cost equals the lowest target cost (see optimal_targets) to
    restrict the answer to globally optimal routes.
    """
    seen: Set[Node] = set()
    stack = list(targets)
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        entry = table.get(node)
        if entry is not None:
            stack.extend(p for p in entry[1] if p not in seen)
    return seen


def optimal_targets(table: PredecessorTable, cost, targets: Iterable[Node]) -> List[Node]:
    """Candidates from `targets` that were reached at exactly `cost`."""
    return [t for t in targets if t in table and table[t][0] == cost]


def reconstruct_path(table: PredecessorTable, start: Node, target: Node) -> List[Node]:
    """
    One optimal path [start, ..., target]; the first one all_shortest_paths yields.
    Raises KeyError if target was never reached.
    """
    if target == start:
        return [start]
    if target not in table:
        raise KeyError(f"target {target!r} was not reached by the search")
    path = next(all_shortest_paths(table, start, target), None)
    if path is None:
        raise KeyError(f"no predecessor chain from {target!r} back to {start!r}")
    return path


_EXHAUSTED = object()


def all_shortest_paths(table: PredecessorTable, start: Node, target: Node) -> Iterator[List[Node]]:
    """
    Lazily yield every distinct simple optimal path from start to target.
    Backtracks out of zero-cost cycles; iterative, so long paths don't hit the recursion limit.
    """
    if target == start:
        yield [start]
        return
    if target not in table:
        return

    # backwards depth-first walk; `suffix` holds target..cur, one predecessor iterator per entry
    suffix = [target]
    on_path = {target}
    stack = [iter(_ordered(table[target][1]))]
    while stack:
        p = next(stack[-1], _EXHAUSTED)
        if p is _EXHAUSTED:
            stack.pop()
            on_path.discard(suffix.pop())
            continue
        if p == start:
            yield [start] + suffix[::-1]
            continue
        if p in on_path or p not in table:
            continue
        suffix.append(p)
        on_path.add(p)
        stack.append(iter(_ordered(table[p][1])))
