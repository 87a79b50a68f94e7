from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from pacedraw.config import DrawingConfig
from pacedraw.drawing import PaceDrawing
from pacedraw.errors import PaceDrawError
from pacedraw.flows.pipeline import render_flow
from pacedraw.parsers import guess_file_format

app = typer.Typer(help="Draw PACE graphs and tree decompositions with TikZ")


def _split_target(value: str, option: str) -> tuple[list[str], str]:
    """Split "IDS:STYLE" at the first colon; the style may contain '=' and ':'."""
    ids, sep, style = value.partition(":")
    if not sep or not ids or not style:
        raise typer.BadParameter(f"expected IDS:STYLE, got {value!r}", param_hint=option)
    return [i for i in ids.split(",") if i], style


def parse_vertex_style(value: str) -> tuple[list[str], str]:
    return _split_target(value, "--vertex-style")


def parse_edge_style(value: str) -> tuple[list[tuple[str, str]], str]:
    pairs, style = _split_target(value, "--edge-style")
    edges: list[tuple[str, str]] = []
    for pair in pairs:
        # "/" takes precedence so ids containing "-" can be written as U/V
        u, sep, v = pair.partition("/") if "/" in pair else pair.partition("-")
        if not sep or not u or not v:
            raise typer.BadParameter(
                f"expected U-V or U/V, got {pair!r}", param_hint="--edge-style"
            )
        edges.append((u, v))
    return edges, style


@app.command()
def render(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Instance file"),
    show_edge_weights: bool = typer.Option(
        False, "--show-edge-weights", help="Label Steiner tree edges with their weight"
    ),
    graph_style: Optional[List[str]] = typer.Option(
        None, "--graph-style", help="Style applied to the whole graph"
    ),
    vertex_style: Optional[List[str]] = typer.Option(
        None, "--vertex-style", help="IDS:STYLE, e.g. 1,2:fill=red"
    ),
    edge_style: Optional[List[str]] = typer.Option(
        None,
        "--edge-style",
        help="PAIRS:STYLE, e.g. 1-2,2-3:thick; write U/V when an id contains '-'",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="One TikZ statement per line"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file"),
) -> None:
    """
    Print the TikZ \\graph code for an instance file.
    """
    config = DrawingConfig.from_env()
    if show_edge_weights:
        config.show_edge_weights = True
    vertex_styles = [parse_vertex_style(s) for s in vertex_style or []]
    edge_styles = [parse_edge_style(s) for s in edge_style or []]

    drawing = PaceDrawing(config)
    try:
        with drawing.cycle():
            for style in graph_style or []:
                drawing.apply_graph_style(style)
            drawing.load(file)
            for ids, style in vertex_styles:
                drawing.apply_vertex_style(ids, style)
            for edges, style in edge_styles:
                drawing.apply_edge_style(edges, style)
            tikz = drawing.render(pretty=pretty)
            drawing.clear_all()
    except PaceDrawError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(tikz)
    else:
        output.write_text(tikz, encoding="utf-8", errors="surrogateescape")
        typer.echo(f"TikZ code written to: {output}")


@app.command()
def detect(file: Path = typer.Argument(..., exists=True, dir_okay=False)) -> None:
    """Print the detected format of an instance file."""
    try:
        fmt = guess_file_format(file)
    except PaceDrawError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(fmt.value)


@app.command()
def run(
    source: str = typer.Argument(..., help="Local file or S3 URI, e.g. s3://bucket/key.gr"),
    output: str = typer.Option("./outputs/graph.tex", help="File to write the TikZ code to"),
    show_edge_weights: bool = typer.Option(False, "--show-edge-weights"),
) -> None:
    """
    Run the Prefect flow for a single instance.
    """
    try:
        result_path = render_flow(
            source=source, output_path=output, show_edge_weights=show_edge_weights
        )
    except PaceDrawError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"TikZ code written to: {result_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
