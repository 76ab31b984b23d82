"""Configuration helpers for tolerance-based comparisons."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class GeometryConfig:
    """Tolerances used by ``approx_eq`` on ranges and rects."""

    abs_tol: float = 1e-9
    rel_tol: float = 0.0


_GEOMETRY_CONFIG = GeometryConfig()


def get_geometry_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_geometry_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    _GEOMETRY_CONFIG = copy.deepcopy(config)
