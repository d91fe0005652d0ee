"""
Tests for the benchmark runner and plotting CLI.
"""

import json

import pytest

from pathsearch.benchmarks import plot_results, run_all


class TestRunAll:
    def test_writes_results(self, tmp_path, capsys):
        out = tmp_path / "results.json"
        assert run_all.main(["--problem", "diamond", "--exhaustive", "--repeats", "2", "--out", str(out)]) == 0

        data = json.loads(out.read_text())
        assert data["problem"] == "diamond"
        algos = [r["algo"] for r in data["results"]]
        assert algos == ["UCS", "A*", "UCS-exhaustive", "A*-exhaustive"]
        assert all(r["cost"] == 2 for r in data["results"])
        assert data["results"][2]["on_path"] == 4
        assert "Running UCS" in capsys.readouterr().out

    def test_grid_paths_serialize(self, tmp_path):
        out = tmp_path / "grid.json"
        run_all.main(["--problem", "grid", "--repeats", "1", "--out", str(out)])
        row = json.loads(out.read_text())["results"][0]
        assert row["path"][0] == [0, 0]
        assert row["cost"] == 10

    def test_failing_algorithm_is_recorded(self):
        def broken(problem):
            raise RuntimeError("boom")
        rows = run_all.run(run_all._load_problem("diamond"), [("broken", broken)], repeats=1)
        assert rows[0]["success"] is False
        assert "boom" in rows[0]["error"]

    def test_unknown_problem(self):
        with pytest.raises(ValueError):
            run_all._load_problem("nowhere")


class TestPlotResults:
    def test_renders_table_and_charts(self, tmp_path):
        out = tmp_path / "results.json"
        run_all.main(["--problem", "romania", "--repeats", "1", "--out", str(out)])
        assert plot_results.main(["--results", str(out)]) == 0
        for name in ["results.md", "nodes_expanded.png", "time.png", "cost.png"]:
            assert (tmp_path / name).exists()
        table = (tmp_path / "results.md").read_text()
        assert "| UCS | 418 |" in table

    def test_missing_results_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            plot_results.main(["--results", str(tmp_path / "nope.json")])

    def test_only_failures_exits(self, tmp_path):
        out = tmp_path / "results.json"
        out.write_text(json.dumps({"results": [{"algo": "x", "success": False}]}))
        with pytest.raises(SystemExit):
            plot_results.main(["--results", str(out)])


class TestLogLevelFlag:
    def test_bad_level_is_a_usage_error(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            run_all.main(["--problem", "diamond", "--log-level", "verbose", "--out", str(tmp_path / "r.json")])
        assert exc.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_level_is_case_insensitive(self, tmp_path):
        out = tmp_path / "r.json"
        assert run_all.main(["--problem", "diamond", "--repeats", "1", "--log-level", "info", "--out", str(out)]) == 0
        assert out.exists()
