"""
Tests for the cve-projects command line interface.
"""

import io
import json

import pytest
import yaml

from cve_projects.__version__ import __version__
from cve_projects.cli.main import main


@pytest.fixture
def names_file(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("node\nNode.js\n\nreact\n  Postgres  \n", encoding="utf-8")
    return path


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_normalize(capsys):
    assert main(["normalize", "Node.js", "k8s"]) == 0
    out = capsys.readouterr().out
    assert "Node.js -> " in out
    assert "nodejs" in out
    assert "kubernetes" in out


def test_normalize_json(capsys):
    assert main(["--json", "normalize", "Postgres", "!!!"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"original": "Postgres", "normalized": "postgresql"},
        {"original": "!!!", "normalized": ""},
    ]


def test_parse_file(capsys, names_file):
    assert main(["parse", str(names_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["nodejs", "react", "postgresql"]
    assert "react" in captured.err


def test_parse_known_only_json(capsys, names_file):
    assert main(["--json", "parse", "--known-only", str(names_file)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {"projects": ["nodejs", "postgresql"], "unknown": ["react"]}


def test_parse_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("k8s\nkubernetes\n"))
    assert main(["parse"]) == 0
    assert capsys.readouterr().out.splitlines() == ["kubernetes"]


def test_show_keeps_every_line(capsys, names_file):
    assert main(["--json", "show", str(names_file)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"original": "node", "normalized": "nodejs"},
        {"original": "Node.js", "normalized": "nodejs"},
        {"original": "react", "normalized": "react"},
        {"original": "Postgres", "normalized": "postgresql"},
    ]


def test_show_empty_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n\n"))
    assert main(["show", "-"]) == 0
    assert "No project names" in capsys.readouterr().err


def test_lookup(capsys):
    assert main(["lookup", "postgres"]) == 0
    out = capsys.readouterr().out
    assert "PostgreSQL" in out
    assert "cpe:2.3:a:postgresql:postgresql:*" in out


def test_lookup_json(capsys):
    assert main(["--json", "lookup", "Go"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["golang"]["name"] == "Go"
    assert data["golang"]["cpePatterns"] == ["cpe:2.3:a:golang:go:*"]


def test_lookup_unknown(capsys):
    assert main(["lookup", "SomeRandomTool"]) == 1
    assert "somerandomtool" in capsys.readouterr().err


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "nginx" in out
    assert "32 tracked projects" in out


def test_custom_registry(capsys, tmp_path):
    registry = tmp_path / "registry.yaml"
    registry.write_text(yaml.safe_dump({
        "react": {"name": "React", "cpePatterns": ["cpe:2.3:a:facebook:react:*"]}
    }), encoding="utf-8")
    assert main(["--registry", str(registry), "--json", "list"]) == 0
    assert json.loads(capsys.readouterr().out) == {"react": "React"}


def test_missing_registry_file(capsys, tmp_path):
    assert main(["--registry", str(tmp_path / "missing.json"), "list"]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_missing_input_file(capsys, tmp_path):
    assert main(["parse", str(tmp_path / "missing.txt")]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_config_file_sets_output_format(capsys, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text(yaml.safe_dump({"output": {"format": "json"}}), encoding="utf-8")
    assert main(["--config", str(config), "normalize", "python"]) == 0
    assert json.loads(capsys.readouterr().out) == [{"original": "python", "normalized": "python3"}]


def test_invalid_config_file(capsys, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text(yaml.safe_dump({"output": {"format": "xml"}}), encoding="utf-8")
    assert main(["--config", str(config), "list"]) == 1
    assert "output.format" in capsys.readouterr().err


def test_init_config(capsys, tmp_path):
    output = tmp_path / "generated.yaml"
    assert main(["init-config", "--output", str(output)]) == 0
    assert yaml.safe_load(output.read_text(encoding="utf-8"))["output"]["format"] == "text"


def test_version(capsys):
    assert main(["version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_input_file_not_utf8(capsys, tmp_path):
    path = tmp_path / "names.txt"
    path.write_bytes(b"node\n\xff\xfe\n")
    assert main(["parse", str(path)]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_config_file_not_utf8(capsys, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_bytes(b"output:\n  format: \xff\n")
    assert main(["--config", str(config), "list"]) == 1
    assert "UTF-8" in capsys.readouterr().err
