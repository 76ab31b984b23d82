import logging

from .config import GeometryConfig, get_geometry_config, set_geometry_config
from .quad import Quad, Tri, Triangles
from .range import Range
from .rect import (
    NUM_CORNERS,
    NUM_SUBDIVISIONS,
    NUM_TRIANGLES,
    Corners,
    Padding,
    Rect,
    SubdivisionRanges,
    Subdivisions,
)
from .types import Align, Corner, Edge, GeometryError, Point2, Vector2

logger = logging.getLogger(__name__)

_TRACING_ENABLED = False


def enable_call_tracing() -> None:
    """Log every public ``Range``/``Rect``/``Quad`` call at DEBUG level.

    Wrapping happens once per process; later calls are no-ops.
    """

    global _TRACING_ENABLED
    if _TRACING_ENABLED:
        return

    from . import quad, range as range_module, rect
    from .logging_utils import apply_debug_logging

    for module in (range_module, rect, quad):
        apply_debug_logging(vars(module))
    _TRACING_ENABLED = True
    logger.info("Call tracing enabled for range, rect and quad")


__all__ = [
    'Range',
    'Rect',
    'Padding',
    'SubdivisionRanges',
    'Corners',
    'Subdivisions',
    'NUM_CORNERS',
    'NUM_SUBDIVISIONS',
    'NUM_TRIANGLES',
    'Quad',
    'Tri',
    'Triangles',
    'Align',
    'Corner',
    'Edge',
    'GeometryError',
    'Point2',
    'Vector2',
    'GeometryConfig',
    'get_geometry_config',
    'set_geometry_config',
    'enable_call_tracing',
]
