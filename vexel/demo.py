"""Walk through the vector operations and print each result.

Run with ``python -m vexel.demo [--precision float32]``.
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .errors import DegenerateVector, DivisionByZero
from .scalar import FLOAT32, FLOAT64, Precision
from .swizzle import Axis
from .vector2 import Vector2
from .vector3 import Vector3
from .vector4 import Vector4

LOGGER = logging.getLogger(__name__)

SEPARATOR = "=" * 40

PRECISIONS = {"float32": FLOAT32, "float64": FLOAT64}


def create_parser() -> argparse.ArgumentParser:
    # //1.- Keep the parser separate so tests can inspect defaults.
    parser = argparse.ArgumentParser(description="Print a walkthrough of vexel vector operations")
    parser.add_argument("--precision", choices=sorted(PRECISIONS), default="float64", help="Element precision")
    parser.add_argument("--decimals", type=int, default=3, help="Decimals printed per component")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def walkthrough(precision: Precision, decimals: int = 3) -> List[str]:
    """Return the demonstration lines for ``precision``."""
    v2_a = Vector2.from_iter((1.0, 2.0), precision)
    v2_b = Vector2.from_iter((3.0, 4.0), precision)
    v3_a = Vector3.from_iter((1.0, 2.0, 3.0), precision)
    v3_b = Vector3.from_iter((4.0, 5.0, 6.0), precision)
    v4_a = Vector4.from_iter((1.0, 2.0, 3.0, 4.0), precision)
    v4_b = Vector4.from_iter((5.0, 6.0, 7.0, 8.0), precision)
    pairs = (("Vector2", v2_a, v2_b), ("Vector3", v3_a, v3_b), ("Vector4", v4_a, v4_b))

    lines: List[str] = []

    def fmt(value: object) -> str:
        return format(value, f".{decimals}f")

    # //2.- Component-wise arithmetic for every arity.
    for symbol, operation in (("+", "add"), ("-", "sub"), ("*", "componentwise_mul"), ("/", "componentwise_div")):
        lines.append(SEPARATOR)
        for name, a, b in pairs:
            lines.append(f"{name} a {symbol} b = {fmt(getattr(a, operation)(b))}")

    # //3.- Scalar reductions.
    lines.append(SEPARATOR)
    for name, a, b in pairs:
        lines.append(f"{name} length(a) = {fmt(a.length())}, dot(a, b) = {fmt(a.dot(b))}")

    lines.append(SEPARATOR)
    lines.append(f"Vector2 cross(a, b) = {fmt(v2_a.cross(v2_b))}")
    lines.append(f"Vector3 cross(a, b) = {fmt(v3_a.cross(v3_b))}")
    lines.append("Vector4 cross(a, b) is not defined")

    # //4.- Projection, interpolation and angles.
    lines.append(SEPARATOR)
    for name, a, b in pairs:
        lines.append(f"{name} project(a, b) = {fmt(a.project(b))}")
        lines.append(f"{name} lerp(a, b, 0.5) = {fmt(a.lerp(b, 0.5))}")
        lines.append(f"{name} angle_between(a, b) = {fmt(a.angle_between(b))} rad")

    # //5.- Swizzles using named axes.
    lines.append(SEPARATOR)
    lines.append(f"Vector2 a.swizzle(y, x) = {fmt(v2_a.swizzle(Axis.Y, Axis.X))}")
    lines.append(f"Vector3 a.swizzle(y, x, z) = {fmt(v3_a.swizzle(Axis.Y, Axis.X, Axis.Z))}")
    lines.append(f"Vector4 a.swizzle(w, z, y, x) = {fmt(v4_a.swizzle(Axis.W, Axis.Z, Axis.Y, Axis.X))}")

    # //6.- Failure modes of the checked operations.
    lines.append(SEPARATOR)
    lines.append(f"raw a / 0 = {fmt(v2_a.div(0.0))}")
    try:
        v2_a.checked_div(0.0)
    except DivisionByZero as exc:
        lines.append(f"checked a / 0 -> DivisionByZero: {exc}")
    try:
        Vector3.zero(precision).normalize()
    except DegenerateVector as exc:
        lines.append(f"normalize(zero) -> DegenerateVector: {exc}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(message)s",
    )
    LOGGER.info("Running vector walkthrough with %s elements", args.precision)
    for line in walkthrough(PRECISIONS[args.precision], args.decimals):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
