from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import cast

import boto3
from prefect import flow, get_run_logger, task

from pacedraw.config import DrawingConfig
from pacedraw.drawing import PaceDrawing
from pacedraw.parsers import get_extension, resolve_file_format


@task
def download_from_s3(s3_uri: str) -> Path:
    """
    Download an instance from S3 to a temporary file. s3_uri like s3://bucket/key
    Requires AWS credentials in environment.
    """
    logger = get_run_logger()
    if not s3_uri.startswith("s3://"):
        raise ValueError("s3_uri must start with s3://")
    _, rest = s3_uri.split("s3://", 1)
    bucket, key = rest.split("/", 1)
    s3 = boto3.client("s3")
    # keep the extension, format detection depends on it
    suffix = "." + get_extension(key)
    fd, name = tempfile.mkstemp(prefix="pacedraw_", suffix=suffix)
    os.close(fd)
    tmp = Path(name)
    s3.download_file(bucket, key, str(tmp))
    logger.info(f"Downloaded {s3_uri} to {tmp}")
    return tmp


@task
def locate_source(source: str) -> Path:
    path = Path(source)
    if not path.is_file():
        raise ValueError(f"Source is neither an s3:// URI nor an existing file: {source}")
    return path


@task
def detect_format(local_path: Path) -> str:
    logger = get_run_logger()
    fmt = resolve_file_format(local_path)
    logger.info(f"Detected {fmt.value} for {local_path}")
    return fmt.value


@task
def render_instance(
    local_path: Path, show_edge_weights: bool, graph_styles: list[str]
) -> str:
    logger = get_run_logger()
    drawing = PaceDrawing(DrawingConfig(show_edge_weights=show_edge_weights))
    for style in graph_styles:
        drawing.apply_graph_style(style)
    tikz = drawing.pace(local_path)
    logger.info(f"Rendered {local_path} ({len(tikz)} characters)")
    return tikz


@task
def export_rendering(output_path: str, tikz: str) -> str:
    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(tikz, encoding="utf-8", errors="surrogateescape")
    return str(out_path)


@flow(name="pacedraw-render")
def render_flow(
    source: str,
    output_path: str,
    show_edge_weights: bool = False,
    graph_styles: list[str] | None = None,
) -> str:
    """
    Orchestrates one drawing cycle:
    S3 or local file → detect format → parse + render → export
    """
    downloaded = source.startswith("s3://")
    if downloaded:
        path = download_from_s3(source)
    else:
        path = locate_source(source)
    try:
        detect_format(path)
        tikz = render_instance(path, show_edge_weights, list(graph_styles or []))
    finally:
        if downloaded:
            path.unlink(missing_ok=True)
    out = export_rendering(output_path, tikz)
    return cast(str, out)
