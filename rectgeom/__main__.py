import argparse
import logging
import sys
from typing import List, Optional, Sequence

from rectgeom import Rect, enable_call_tracing

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def _fmt_point(point: Sequence[float]) -> str:
    return f"({_fmt(point[0])}, {_fmt(point[1])})"


def _describe_lines(rect: Rect) -> List[str]:
    left, right, bottom, top = rect.l_r_b_t()
    w, h = rect.w_h()
    return [
        f"left: {_fmt(left)}",
        f"right: {_fmt(right)}",
        f"bottom: {_fmt(bottom)}",
        f"top: {_fmt(top)}",
        f"size: {_fmt(w)} x {_fmt(h)}",
        f"center: {_fmt_point(rect.xy())}",
        "corners:",
        *(f"  {_fmt_point(corner)}" for corner in rect.corners()),
    ]


def _rect_line(rect: Rect) -> str:
    left, right, bottom, top = rect.l_r_b_t()
    return f"x=[{_fmt(left)}, {_fmt(right)}] y=[{_fmt(bottom)}, {_fmt(top)}]"


def _add_rect_arguments(parser: argparse.ArgumentParser, prefix: str = "") -> None:
    for name, meaning in (("x", "center x"), ("y", "center y"), ("w", "width"), ("h", "height")):
        parser.add_argument(f"{prefix}{name}", type=float, help=f"Rect {meaning}")


def _rect_from(args: argparse.Namespace, prefix: str = "") -> Rect:
    return Rect.from_x_y_w_h(
        getattr(args, f"{prefix}x"),
        getattr(args, f"{prefix}y"),
        getattr(args, f"{prefix}w"),
        getattr(args, f"{prefix}h"),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rectgeom", description="Inspect axis-aligned rectangles")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every geometry call at DEBUG level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    describe = commands.add_parser("describe", help="Print edges, size, center and corners")
    _add_rect_arguments(describe)

    subdivide = commands.add_parser("subdivide", help="Print the four quadrant subdivisions")
    _add_rect_arguments(subdivide)

    overlap = commands.add_parser("overlap", help="Print the overlap of two rects")
    _add_rect_arguments(overlap, "a_")
    _add_rect_arguments(overlap, "b_")

    closest = commands.add_parser("closest-corner", help="Print the corner nearest to a point")
    _add_rect_arguments(closest)
    closest.add_argument("px", type=float, help="Point x")
    closest.add_argument("py", type=float, help="Point y")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    if args.trace:
        if args.log_level.upper() != "DEBUG":
            logger.warning("--trace output is only visible with --log-level DEBUG")
        enable_call_tracing()

    if args.command == "describe":
        rect = _rect_from(args)
        logger.info("Describing %s", _rect_line(rect))
        for line in _describe_lines(rect):
            print(line)
    elif args.command == "subdivide":
        rect = _rect_from(args)
        labels = ("bottom-left", "bottom-right", "top-left", "top-right")
        for label, sub in zip(labels, rect.subdivisions()):
            print(f"{label}: {_rect_line(sub)}")
    elif args.command == "overlap":
        a = _rect_from(args, "a_")
        b = _rect_from(args, "b_")
        result = a.overlap(b)
        if result is None:
            logger.info("Rects %s and %s are disjoint", _rect_line(a), _rect_line(b))
            print("none")
        else:
            print(_rect_line(result))
    elif args.command == "closest-corner":
        rect = _rect_from(args)
        corner = rect.closest_corner((args.px, args.py))
        print(corner.value)
    else:  # pragma: no cover - argparse rejects unknown commands
        parser.error(f"unknown command {args.command!r}")


if __name__ == "__main__":
    main(sys.argv[1:])
