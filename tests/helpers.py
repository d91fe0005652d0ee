"""
Graph helpers shared by the test modules.

Graphs are plain adjacency dicts {node: {neighbor: cost}}; these turn them
into the callables the search engine expects and compute reference distances
by brute-force relaxation.
"""

import random


def neighbors_of(edges):
    """Neighbor function over an adjacency dict."""
    return lambda node: list(edges.get(node, {}).items())


def reference_distances(edges, start):
    """Bellman-Ford style relaxation; returns {node: shortest distance} for reachable nodes."""
    dist = {start: 0}
    nodes = set(edges) | {m for nbrs in edges.values() for m in nbrs}
    for _ in range(len(nodes)):
        changed = False
        for u, nbrs in edges.items():
            if u not in dist:
                continue
            for v, w in nbrs.items():
                if v not in dist or dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
                    changed = True
        if not changed:
            break
    return dist


def perfect_heuristic(edges, targets):
    """Exact remaining distance to the nearest target (infinite where none is reachable)."""
    reverse = {}
    for u, nbrs in edges.items():
        for v, w in nbrs.items():
            reverse.setdefault(v, {})[u] = w
    best = {}
    for t in targets:
        for node, d in reference_distances(reverse, t).items():
            if node not in best or d < best[node]:
                best[node] = d
    return lambda node: best.get(node, float("inf"))


def random_graph(seed, n=30, max_degree=3, max_weight=5):
    """Directed graph on nodes 0..n-1 with positive integer weights."""
    rng = random.Random(seed)
    edges = {}
    for u in range(n):
        for _ in range(rng.randint(0, max_degree)):
            v = rng.randrange(n)
            if v != u:
                edges.setdefault(u, {})[v] = rng.randint(1, max_weight)
    targets = set(rng.sample(range(1, n), 2))
    return edges, targets

