"""Parsers for the PACE graph and tree decomposition file formats."""

from .base import MalformedLine, ParseError, Parser
from .detect import (
    FileFormat,
    MalformedFilename,
    UnsupportedFormat,
    get_extension,
    guess_file_format,
    resolve_file_format,
)
from .dimacs import DimacsParser
from .edgelist import EdgeListParser
from .stp import SteinerTreeParser
from .td import TreeDecompositionParser, bag_label

__all__ = [
    "Parser",
    "ParseError",
    "MalformedLine",
    "MalformedFilename",
    "UnsupportedFormat",
    "FileFormat",
    "get_extension",
    "guess_file_format",
    "resolve_file_format",
    "DimacsParser",
    "SteinerTreeParser",
    "TreeDecompositionParser",
    "EdgeListParser",
    "bag_label",
]
