"""
Tests for measurement helpers and the priority frontier.
"""

import tracemalloc

from pathsearch.core.frontiers import PriorityQueue
from pathsearch.core.metrics import CountingNeighbors, MeasuredRun, SearchResult


class TestPriorityQueue:
    def test_pops_smallest_priority_first(self):
        pq = PriorityQueue()
        for p, n in [(3, "c"), (1, "a"), (2, "b")]:
            pq.push(p, n)
        assert pq.peek() == (1, "a")
        assert [pq.pop()[1] for _ in range(3)] == ["a", "b", "c"]
        assert not pq

    def test_ties_pop_in_insertion_order(self):
        pq = PriorityQueue()
        for n in ["z", "a", "m"]:
            pq.push(0, n)
        assert len(pq) == 3
        assert [pq.pop()[1] for _ in range(3)] == ["z", "a", "m"]

    def test_duplicates_allowed(self):
        pq = PriorityQueue()
        pq.push(5, "x")
        pq.push(2, "x")
        assert pq.pop() == (2, "x")
        assert pq.pop() == (5, "x")


class TestMeasuredRun:
    def test_elapsed_and_peak(self):
        with MeasuredRun() as meter:
            data = [0] * 100_000
            assert meter.elapsed >= 0.0
        assert len(data) == 100_000
        assert meter.elapsed > 0.0
        assert meter.peak_kb > 0

    def test_elapsed_before_enter(self):
        assert MeasuredRun().elapsed == 0.0

    def test_leaves_outer_trace_running(self):
        tracemalloc.start()
        try:
            with MeasuredRun():
                pass
            assert tracemalloc.is_tracing()
        finally:
            tracemalloc.stop()


class TestCountingNeighbors:
    def test_counts_calls_and_edges(self):
        edges = {"A": [("B", 1), ("C", 2)], "B": []}
        counted = CountingNeighbors(lambda n: iter(edges.get(n, [])))
        assert counted("A") == [("B", 1), ("C", 2)]
        counted("B")
        assert counted.calls == 2
        assert counted.edges == 2
        assert counted.expanded == ["A", "B"]


class TestSearchResult:
    def test_as_row(self):
        r = SearchResult("UCS", True, 3, 4, 0.5, 12, path=["A", "B"], on_path=2)
        row = r.as_row()
        assert row["algo"] == "UCS"
        assert row["path_len"] == 2
        assert row["on_path"] == 2
        assert row["error"] is None
