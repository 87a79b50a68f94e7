from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from pacedraw.cli import main as cli
from pacedraw.cli.main import app, parse_edge_style, parse_vertex_style
from pacedraw.parsers import UnsupportedFormat

runner = CliRunner()


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_render_prints_tikz(tmp_path: Path) -> None:
    path = _write(tmp_path, "g.gr", "p tw 2 1\n1 2\n")
    result = runner.invoke(app, ["render", str(path)])
    assert result.exit_code == 0
    assert result.stdout == "\\graph[pace/dimacs]{  1[];  2[];  1 --[] 2;};\n"


def test_render_applies_styles(tmp_path: Path) -> None:
    path = _write(tmp_path, "g.graph", "1 2\n2 3\n")
    result = runner.invoke(
        app,
        [
            "render",
            str(path),
            "--graph-style",
            "tree layout",
            "--vertex-style",
            "1,3:fill=red",
            "--edge-style",
            "3-2:thick",
            "--pretty",
        ],
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "\\graph[tree layout, pace/edgelist]{",
        "  1[fill=red];",
        "  2[];",
        "  3[fill=red];",
        "  1 --[] 2;",
        "  2 --[thick] 3;",
        "};",
    ]


def test_render_edge_weights_flag_and_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = _write(tmp_path, "s.stp", "Nodes 2\nE 1 2 9\n")
    plain = runner.invoke(app, ["render", str(path)])
    flagged = runner.invoke(app, ["render", str(path), "--show-edge-weights"])
    monkeypatch.setenv("PACEDRAW_SHOW_EDGE_WEIGHTS", "true")
    from_env = runner.invoke(app, ["render", str(path)])
    assert "1 --[] 2;" in plain.stdout
    assert '1 --["9"] 2;' in flagged.stdout
    assert '1 --["9"] 2;' in from_env.stdout


def test_render_writes_output_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "g.td", "b 1 1 2\n")
    out = tmp_path / "out.tex"
    result = runner.invoke(app, ["render", str(path), "-o", str(out)])
    assert result.exit_code == 0
    assert out.read_text() == "\\graph[pace/treedecomposition]{  1 / \\{1{,}2\\};};"


def test_render_reports_malformed_line(tmp_path: Path) -> None:
    path = _write(tmp_path, "g.graph", "1 2\nlonely\n")
    result = runner.invoke(app, ["render", str(path)])
    assert result.exit_code == 1
    assert "line 2" in result.output


def test_render_reports_unknown_format(tmp_path: Path) -> None:
    path = _write(tmp_path, "g.txt", "1 2\n")
    result = runner.invoke(app, ["render", str(path)])
    assert result.exit_code == 1
    assert "error:" in result.output


def test_render_rejects_bad_style_option(tmp_path: Path) -> None:
    path = _write(tmp_path, "g.graph", "1 2\n")
    result = runner.invoke(app, ["render", str(path), "--edge-style", "12:red"])
    assert result.exit_code != 0


def test_detect_prints_format(tmp_path: Path) -> None:
    stp = _write(tmp_path, "s.gr", "SECTION Comment\n")
    result = runner.invoke(app, ["detect", str(stp)])
    assert result.exit_code == 0
    assert result.stdout.strip() == "steiner-tree"

    unknown = _write(tmp_path, "x.txt", "")
    assert runner.invoke(app, ["detect", str(unknown)]).stdout.strip() == "unknown"


def test_detect_without_extension_fails(tmp_path: Path) -> None:
    path = _write(tmp_path, "instance", "1 2\n")
    result = runner.invoke(app, ["detect", str(path)])
    assert result.exit_code == 1


def test_run_invokes_flow(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []

    def fake_flow(**kwargs: object) -> str:
        calls.append(kwargs)
        return "out/graph.tex"

    monkeypatch.setattr(cli, "render_flow", fake_flow)
    result = runner.invoke(app, ["run", "s3://bucket/g.gr", "--output", "out/graph.tex"])
    assert result.exit_code == 0
    assert calls == [
        {
            "source": "s3://bucket/g.gr",
            "output_path": "out/graph.tex",
            "show_edge_weights": False,
        }
    ]
    assert "out/graph.tex" in result.stdout


def test_style_option_parsing() -> None:
    assert parse_vertex_style("1,2:draw=blue") == (["1", "2"], "draw=blue")
    assert parse_edge_style("1-2,3-4:dashed") == ([("1", "2"), ("3", "4")], "dashed")
    with pytest.raises(typer.BadParameter):
        parse_vertex_style("red")


def test_render_accepts_non_utf8_comment(tmp_path: Path) -> None:
    path = tmp_path / "latin1.gr"
    path.write_bytes(b"c instance by Ren\xe9\np tw 2 1\n1 2\n")
    result = runner.invoke(app, ["render", str(path)])
    assert result.exit_code == 0
    assert result.stdout == "\\graph[pace/dimacs]{  1[];  2[];  1 --[] 2;};\n"


def test_run_reports_flow_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_flow(**kwargs: object) -> str:
        raise UnsupportedFormat("notes.txt", "extension 'txt'")

    monkeypatch.setattr(cli, "render_flow", failing_flow)
    result = runner.invoke(app, ["run", "notes.txt", "--output", "out/graph.tex"])
    assert result.exit_code == 1
    assert "error:" in result.output
    assert "notes.txt" in result.output


def test_edge_style_slash_separator_allows_hyphenated_ids(tmp_path: Path) -> None:
    assert parse_edge_style("a-b/c,1-2:red") == ([("a-b", "c"), ("1", "2")], "red")
    path = _write(tmp_path, "g.graph", "a-b c\n")
    result = runner.invoke(app, ["render", str(path), "--edge-style", "c/a-b:dashed"])
    assert result.exit_code == 0
    assert "  a-b --[dashed] c;" in result.stdout
