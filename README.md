# shapesvg

Turn a list of GUI paint shapes into a static SVG document.

An immediate-mode GUI hands its renderer a flat list of shapes to paint:
circles, rounded rectangles, lines, paths, triangle meshes and laid-out text.
`shapesvg` writes those shapes out as one SVG image. The result can be dropped
into documentation, compared across versions, or viewed in a browser.

The package depends on nothing outside the standard library.

## Usage

Build shapes from the classes in `shapesvg.shapes` and give them to an
`SvgExporter` of the size you want:

```python
from shapesvg.shapes import CircleShape, Color32, Pos2, Rect, RectShape, Stroke
from shapesvg.svg import SvgExporter

shapes = [
    RectShape(
        rect=Rect(Pos2(10, 10), Pos2(110, 60)),
        fill=Color32(40, 40, 40),
        stroke=Stroke(1.0, Color32(200, 200, 200)),
    ),
    CircleShape(center=Pos2(150, 35), radius=20, fill=Color32(255, 0, 0)),
]

document = SvgExporter(300, 100).generate_svg(shapes)

with open("out.svg", "w", encoding="utf-8") as fh:
    fh.write(document)
```

`SvgExporter(width, height)` raises `ValueError` unless both sizes are
non-negative ints. `generate_svg(shapes)` wraps the rendered elements in an
`<svg>` element of that width and height.

`shapes_to_svg(shapes)` returns only the element markup, with no enclosing
`<svg>` element. `snap_forward_half(value)` moves a coordinate forward onto the
next half-pixel position, so that one-pixel strokes render sharply.

## The shape classes

`shapesvg.shapes` holds plain value types:

- `Color32(r, g, b, a=255)`: a colour with premultiplied alpha, each channel an
  int in 0..255 (anything else raises `ValueError`). `to_hex()` gives
  `#rrggbbaa` with the alpha divided back out of the colour channels;
  `is_additive()` is true when alpha is zero. `Color32.BLACK`, `WHITE`,
  `TRANSPARENT` and `PLACEHOLDER` are predefined.
- `Pos2(x, y)` and `Rect(min, max)`, with `Rect.is_positive()`, `width()` and
  `height()`.
- `Stroke(width, color)` and `PathStroke(width, color)`; both are empty when the
  width is not positive or the colour is transparent. A `PathStroke` colour may
  also be a callable, which cannot be expressed in SVG and is left out.
- `FontFamily.PROPORTIONAL` and `FontFamily.MONOSPACE`.
- The shapes: `CircleShape`, `RectShape`, `TextShape` (with `TextRow`s),
  `LineSegment`, `PathShape`, `Mesh` (with `Vertex`es) and `ShapeGroup`.

## What is rendered

| Shape          | SVG element           | Notes |
|----------------|-----------------------|-------|
| `None`         | nothing               | Skipped. |
| `ShapeGroup`   | its children          | Nested groups are flattened. |
| `CircleShape`  | `<circle>`            | Fill and stroke are always written. |
| `RectShape`    | `<rect>`              | Skipped when not positive, or when the fill has zero alpha and there is no stroke. Stroked rectangles are snapped to the pixel grid: odd stroke widths put the corner on half pixels. `x`/`y` are left out when zero. Only the north-west corner radius is used, as `rx`. |
| `LineSegment`  | `<line>`              | The y coordinates are snapped to half pixels. |
| `PathShape`    | `<path>`              | A polyline, ending in `Z` when closed. |
| `Mesh`         | one `<polygon>` each  | One per triangle, filled with the colour of its first vertex, with `shape-rendering="crispEdges"`. Leftover indices that do not make a whole triangle are ignored. |
| `TextShape`    | one `<text>` each     | One per row, its baseline 3 pixels above the row's bottom. Font family `p` means proportional and `m` means monospace. |

For rectangles, paths and meshes a fill of opaque black is left out, since
that is the SVG default. Text takes its `color`, or else its `fallback_color`;
when both are `Color32.PLACEHOLDER` a warning is logged and the placeholder
colour is used. Any other object in the list is logged as unsupported and
skipped. Numbers are written as the shortest decimal that round-trips through
single precision, with no exponent.

## What it does not do

`shapesvg` does not run a GUI or lay out widgets: you supply the shapes,
already positioned, and text rows already broken into lines. It ships no fonts
and does not embed any; the viewer must provide font families named `p` and
`m`, for example through a stylesheet. Textures and UV coordinates on meshes
are ignored. There is no command-line program.