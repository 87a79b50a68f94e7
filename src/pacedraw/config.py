from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class DrawingConfig:
    """Options that change how input files are turned into a graph."""

    show_edge_weights: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DrawingConfig:
        env = os.environ if environ is None else environ
        raw = env.get("PACEDRAW_SHOW_EDGE_WEIGHTS", "")
        return cls(show_edge_weights=raw.strip().lower() in _TRUTHY)
