from __future__ import annotations

from enum import Enum
from pathlib import Path

from pacedraw.parsers.base import ParseError


class FileFormat(str, Enum):
    PACE_GRAPH = "pace-graph"
    STEINER_TREE = "steiner-tree"
    TREE_DECOMPOSITION = "tree-decomposition"
    EDGE_LIST = "edge-list"
    UNKNOWN = "unknown"


class MalformedFilename(ParseError):
    def __init__(self, filename: str | Path) -> None:
        super().__init__(f"File name has no extension: {filename}", code="EFILENAME")
        self.filename = str(filename)


class UnsupportedFormat(ParseError):
    def __init__(self, filename: str | Path, detail: str = "") -> None:
        message = f"Unable to detect the file format of {filename}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, code="EFORMAT")
        self.filename = str(filename)


_BY_EXTENSION = {
    "td": FileFormat.TREE_DECOMPOSITION,
    "dgf": FileFormat.PACE_GRAPH,
    "stp": FileFormat.STEINER_TREE,
    "graph": FileFormat.EDGE_LIST,
}


def get_extension(filename: str | Path) -> str:
    """
    Return the last extension of a file name: "gr" for "example.gr" and
    "td" for "example2.gr.td".
    """
    name = Path(filename).name
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem.strip(".") or not ext:
        raise MalformedFilename(filename)
    return ext


def _first_line(path: str | Path) -> str:
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        return handle.readline()


def guess_file_format(filename: str | Path) -> FileFormat:
    """
    Guess the format from the extension. ``.gr`` is shared by PACE graphs and
    PACE 2018 Steiner tree instances, so for it the first line is inspected.
    """
    ext = get_extension(filename).lower()
    if ext == "gr":
        if "SECTION" in _first_line(filename):
            return FileFormat.STEINER_TREE
        return FileFormat.PACE_GRAPH
    return _BY_EXTENSION.get(ext, FileFormat.UNKNOWN)


def resolve_file_format(filename: str | Path) -> FileFormat:
    fmt = guess_file_format(filename)
    if fmt is FileFormat.UNKNOWN:
        raise UnsupportedFormat(filename, f"extension '{get_extension(filename)}'")
    return fmt
