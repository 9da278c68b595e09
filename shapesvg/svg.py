"""Rendering of shapes into a static SVG document."""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from .shapes import (
    CircleShape,
    Color32,
    FontFamily,
    LineSegment,
    Mesh,
    PathShape,
    PathStroke,
    RectShape,
    ShapeGroup,
    Stroke,
    TextShape,
)

_log = logging.getLogger(__name__)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _fmt(value: float) -> str:
    """Shortest single-precision decimal text, without exponent."""
    v = _f32(float(value))
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    text = repr(v)
    for precision in range(1, 10):
        candidate = f"{v:.{precision}g}"
        if _f32(float(candidate)) == v:
            text = candidate
            break
    text = format(Decimal(text), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _as_u32(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    return min(int(value), 2**32 - 1)


def snap_forward_half(value: float) -> float:
    """Move a coordinate forward onto the next half-pixel position."""
    base = math.floor(value)
    return base + 0.5 if value < base + 0.5 else base + 1.5


def _element(name: str, attrs: dict[str, str], content: str | None = None) -> str:
    rendered = "".join(f' {key}="{value}"' for key, value in attrs.items())
    if content is None:
        return f"<{name}{rendered}/>"
    return f"<{name}{rendered}>{content}</{name}>"


def _stroke_attrs(stroke: Stroke) -> dict[str, str]:
    return {"stroke": stroke.color.to_hex(), "stroke-width": _fmt(stroke.width)}


def _path_stroke_attrs(stroke: PathStroke) -> dict[str, str]:
    # Per-point colour callbacks have no SVG counterpart and are dropped.
    if not isinstance(stroke.color, Color32):
        return {}
    return {"stroke": stroke.color.to_hex(), "stroke-width": _fmt(stroke.width)}


def _circle(shape: CircleShape) -> Iterable[str]:
    attrs = {
        "r": _fmt(shape.radius),
        "cx": _fmt(shape.center.x),
        "cy": _fmt(shape.center.y),
        "fill": shape.fill.to_hex(),
        **_stroke_attrs(shape.stroke),
    }
    yield _element("circle", attrs)


def _rect(shape: RectShape) -> Iterable[str]:
    rect = shape.rect
    stroke_empty = shape.stroke.is_empty()
    if not rect.is_positive() or (shape.fill.is_additive() and stroke_empty):
        return

    attrs: dict[str, str] = {}
    snap_to_half = False
    width = _f32(rect.width())
    height = _f32(rect.height())

    if not stroke_empty:
        attrs.update(_stroke_attrs(shape.stroke))
        # Odd stroke widths need half-pixel positions to render crisply.
        snap_to_half = _as_u32(shape.stroke.width) % 2 == 1
        if snap_to_half:
            width = _round(width) - 1.0
            height = _round(height) - 1.0
        else:
            width = snap_forward_half(width)
            height = snap_forward_half(height)

    attrs["width"] = _fmt(width)
    attrs["height"] = _fmt(height)

    snap = snap_forward_half if snap_to_half else _round
    if rect.min.x != 0.0:
        attrs["x"] = _fmt(snap(rect.min.x))
    if rect.min.y != 0.0:
        attrs["y"] = _fmt(snap(rect.min.y))

    if shape.fill != Color32.BLACK:
        attrs["fill"] = shape.fill.to_hex()
    if shape.corner_radius > 0:
        attrs["rx"] = str(shape.corner_radius)

    yield _element("rect", attrs)


def _text_color(shape: TextShape) -> Color32:
    if shape.color != Color32.PLACEHOLDER:
        return shape.color
    if shape.fallback_color != Color32.PLACEHOLDER:
        return shape.fallback_color
    _log.warning("couldnt find font color")
    return Color32.PLACEHOLDER


def _text(shape: TextShape) -> Iterable[str]:
    family = "p" if shape.font_family is FontFamily.PROPORTIONAL else "m"
    for row in shape.rows:
        attrs = {
            "x": _fmt(shape.pos.x + row.rect.min.x),
            "y": _fmt(shape.pos.y + row.rect.max.y - 3.0),
            "font-size": _fmt(shape.font_size),
            "font-family": family,
            "fill": _text_color(shape).to_hex(),
        }
        yield _element("text", attrs, row.text)


def _line(shape: LineSegment) -> Iterable[str]:
    start, end = shape.points
    attrs = {
        "x1": _fmt(start.x),
        "y1": _fmt(snap_forward_half(start.y)),
        "x2": _fmt(end.x),
        "y2": _fmt(snap_forward_half(end.y)),
        "stroke": shape.stroke.color.to_hex(),
        "stroke-width": _fmt(shape.stroke.width),
    }
    yield _element("line", attrs)


def _path(shape: PathShape) -> Iterable[str]:
    data = ""
    if shape.points:
        first, *rest = shape.points
        data = f"M{_fmt(first.x)} {_fmt(first.y)} "
        data += "".join(f"{_fmt(p.x)} {_fmt(p.y)} " for p in rest)
        if shape.closed:
            data += "Z"
    attrs = {"d": data}
    if not shape.stroke.is_empty():
        attrs.update(_path_stroke_attrs(shape.stroke))
    if shape.fill != Color32.BLACK:
        attrs["fill"] = shape.fill.to_hex()
    yield _element("path", attrs)


def _mesh(shape: Mesh) -> Iterable[str]:
    # Textures and UV coordinates are not supported; each triangle takes
    # the colour of its first vertex.
    triangles = zip(*[iter(shape.indices)] * 3)
    for triangle in triangles:
        vertices = [shape.vertices[i] for i in triangle]
        points = " ".join(f"{_f32(v.pos.x):.3f},{_f32(v.pos.y):.3f}" for v in vertices)
        attrs = {"points": points}
        if vertices[0].color != Color32.BLACK:
            attrs["fill"] = vertices[0].color.to_hex()
        attrs["shape-rendering"] = "crispEdges"
        yield _element("polygon", attrs)


def _render(shapes: Iterable[object]) -> Iterable[str]:
    for shape in shapes:
        match shape:
            case None:
                continue
            case ShapeGroup():
                yield from _render(shape.shapes)
            case CircleShape():
                yield from _circle(shape)
            case RectShape():
                yield from _rect(shape)
            case TextShape():
                yield from _text(shape)
            case LineSegment():
                yield from _line(shape)
            case PathShape():
                yield from _path(shape)
            case Mesh():
                yield from _mesh(shape)
            case _:
                _log.warning("unsupported shape:\n%r", shape)


def shapes_to_svg(shapes: Iterable[object]) -> str:
    """Render shapes, in painting order, to SVG elements."""
    return "".join(_render(shapes))


@dataclass(frozen=True)
class SvgExporter:
    """Writes shapes into an SVG document of a fixed size."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative int, got {value!r}")

    def generate_svg(self, shapes: Iterable[object]) -> str:
        header = f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}">'
        return header + shapes_to_svg(shapes) + "</svg>"