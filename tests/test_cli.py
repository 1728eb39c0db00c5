"""Tests for the generate_graphs script."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "generate_graphs.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("generate_graphs", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestGenerateGraphsScript:
    def test_writes_output_file(self, cli, tmp_path):
        out = tmp_path / "graphs.json"
        rc = cli.main(["--size", "5", "--size", "8", "--count", "2", "--seed", "42", "-o", str(out)])
        assert rc == 0
        data = json.loads(out.read_text())
        assert [d["instance_name"] for d in data] == [
            "scale_free_n5_0", "scale_free_n5_1", "scale_free_n8_0", "scale_free_n8_1",
        ]
        first = [(e["source"], e["target"]) for e in data[0]["edges"]]
        assert first == [(1, 0), (2, 0), (1, 2), (0, 3), (4, 0)]

    def test_stdout(self, cli, capsys):
        rc = cli.main(["-n", "3", "-s", "1", "--rng", "python", "--undirected"])
        assert rc == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 1
        assert data[0]["metadata"]["params"]["random_source"] == "python"
        assert data[0]["metadata"]["params"]["directed"] is False

    def test_invalid_size(self, cli):
        assert cli.main(["--size", "-1"]) == 1

    def test_size_required(self, cli):
        with pytest.raises(SystemExit):
            cli.main([])

    def test_custom_file_appended(self, cli, tmp_path):
        custom = tmp_path / "mine.json"
        custom.write_text(json.dumps({
            "nodes": ["a", "b"],
            "edges": [{"source": "a", "target": "b"}],
        }))
        out = tmp_path / "all.json"
        rc = cli.main(["-n", "4", "-s", "3", "--custom", str(custom), "-o", str(out)])
        assert rc == 0
        data = json.loads(out.read_text())
        assert [d["instance_name"] for d in data] == ["scale_free_n4_0", "custom_0"]
        assert data[1]["metadata"]["generator"] == "custom"
        assert data[1]["nodes"] == ["a", "b"]

    def test_missing_custom_file(self, cli, tmp_path):
        assert cli.main(["-n", "4", "--custom", str(tmp_path / "nope.json")]) == 1

    def test_malformed_custom_file(self, cli, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"nodes": [0], "edges": [{"source": 0, "target": 9}]}))
        assert cli.main(["-n", "4", "--custom", str(bad)]) == 1
