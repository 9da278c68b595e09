"""Value types describing the painted shapes that can be exported to SVG."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Sequence, Union


@dataclass(frozen=True)
class Color32:
    """An sRGBA colour with premultiplied alpha, one byte per channel."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar[Color32]
    WHITE: ClassVar[Color32]
    TRANSPARENT: ClassVar[Color32]
    PLACEHOLDER: ClassVar[Color32]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
                raise ValueError(f"colour component {name} must be an int in 0..=255, got {value!r}")

    def _unmultiplied(self) -> tuple[int, int, int, int]:
        if self.a in (0, 255):
            return self.r, self.g, self.b, self.a
        factor = 255.0 / self.a

        def channel(value: int) -> int:
            return min(255, int(factor * value + 0.5))

        return channel(self.r), channel(self.g), channel(self.b), self.a

    def to_hex(self) -> str:
        """Return the colour as ``#rrggbbaa`` with unmultiplied channels."""
        r, g, b, a = self._unmultiplied()
        return f"#{r:02x}{g:02x}{b:02x}{a:02x}"

    def is_additive(self) -> bool:
        """True when the colour has zero alpha."""
        return self.a == 0


Color32.BLACK = Color32(0, 0, 0, 255)
Color32.WHITE = Color32(255, 255, 255, 255)
Color32.TRANSPARENT = Color32(0, 0, 0, 0)
Color32.PLACEHOLDER = Color32(64, 254, 0, 128)


@dataclass(frozen=True)
class Pos2:
    """A point in screen coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle spanned by two corners."""

    min: Pos2
    max: Pos2

    def is_positive(self) -> bool:
        """True when the rectangle has a positive width and height."""
        return self.min.x < self.max.x and self.min.y < self.max.y

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y


@dataclass(frozen=True)
class Stroke:
    """A solid outline."""

    width: float = 0.0
    color: Color32 = Color32.TRANSPARENT

    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.color == Color32.TRANSPARENT


ColorCallback = Callable[[Rect, Pos2], Color32]


@dataclass(frozen=True)
class PathStroke:
    """An outline for paths; the colour is either solid or computed per point."""

    width: float = 0.0
    color: Union[Color32, ColorCallback] = Color32.TRANSPARENT

    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.color == Color32.TRANSPARENT


class FontFamily(Enum):
    PROPORTIONAL = "proportional"
    MONOSPACE = "monospace"


@dataclass
class CircleShape:
    center: Pos2
    radius: float
    fill: Color32 = Color32.TRANSPARENT
    stroke: Stroke = field(default_factory=Stroke)


@dataclass
class RectShape:
    """A rectangle; ``corner_radius`` is the radius of the north-west corner."""

    rect: Rect
    fill: Color32 = Color32.TRANSPARENT
    stroke: Stroke = field(default_factory=Stroke)
    corner_radius: int = 0


@dataclass
class TextRow:
    """One laid-out line of text, positioned relative to its text shape."""

    text: str
    rect: Rect


@dataclass
class TextShape:
    pos: Pos2
    rows: Sequence[TextRow]
    font_size: float
    font_family: FontFamily = FontFamily.PROPORTIONAL
    color: Color32 = Color32.PLACEHOLDER
    fallback_color: Color32 = Color32.PLACEHOLDER


@dataclass
class LineSegment:
    points: tuple[Pos2, Pos2]
    stroke: Stroke


@dataclass
class PathShape:
    points: Sequence[Pos2]
    closed: bool = False
    fill: Color32 = Color32.TRANSPARENT
    stroke: PathStroke = field(default_factory=PathStroke)


@dataclass(frozen=True)
class Vertex:
    pos: Pos2
    color: Color32 = Color32.WHITE


@dataclass
class Mesh:
    """Triangles given as vertex indices, three per triangle."""

    indices: Sequence[int]
    vertices: Sequence[Vertex]


@dataclass
class ShapeGroup:
    """A list of shapes painted in order."""

    shapes: Sequence[object]


Shape = Union[CircleShape, RectShape, TextShape, LineSegment, PathShape, Mesh, ShapeGroup, None]