from __future__ import annotations

from dataclasses import dataclass, field, replace, InitVar
from typing import Iterator, List, Optional, Protocol, Tuple
import logging
import math
import numpy as np

from .color import Color, random_color

logger = logging.getLogger(__name__)

# Number of angular steps used to approximate a circle (one per degree).
CIRCLE_SEGMENTS = 360


class InvalidBounds(ValueError):
    """
    Raised when a bounded-random factory gets an empty coordinate range.
    """
    def __init__(self, width: int, height: int):
        super().__init__(f"width and height must be positive, got {width}x{height}")
        self.width = width
        self.height = height


def check_bounds(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidBounds(width, height)


def to_pixel(v: float) -> int:
    """
    Round half up to the nearest integer pixel: 0.5 -> 1, -0.5 -> 0.
    """
    return int(math.floor(v + 0.5))


def random_vertex(rng: np.random.Generator, width: int, height: int) -> "Point":
    """
    Uncolored point uniform in [0, width) x [0, height), used as a vertex.
    """
    check_bounds(width, height)
    return Point(int(rng.integers(0, width)), int(rng.integers(0, height)))


class Displayable(Protocol):
    """
    Pixel sink. Out-of-range coordinates are the sink's concern.
    """
    def display(self, x: int, y: int, color: Color) -> None:
        ...


class Shape:
    def draw(self, image: Displayable) -> None:
        raise NotImplementedError

    # ---- Color ----
    def color(self, rng: Optional[np.random.Generator] = None) -> Color:
        """
        Default color: uniformly random RGB. No two calls are guaranteed equal.
        """
        return random_color(rng)

    def with_color(self, color: Color) -> "Shape":
        return replace(self, rgb=color)


class Colored(Shape):
    """
    Shape carrying a single color resolved once at construction.

    Subclasses are dataclasses with an ``rgb`` field and an ``rng`` InitVar;
    when ``rgb`` is not given it is drawn from ``self.color(rng)``.
    """
    rgb: Optional[Color]

    def __post_init__(self, rng: Optional[np.random.Generator]):
        if self.rgb is None:
            self.rgb = self.color(rng)


@dataclass(frozen=True)
class Point(Shape):
    x: int
    y: int
    rgb: Optional[Color] = field(default=None, compare=False, repr=False)

    @staticmethod
    def random(rng: np.random.Generator, width: int, height: int) -> "Point":
        """
        Uniform point in [0, width) x [0, height) with its draw color taken
        from the same generator.
        """
        p = random_vertex(rng, width, height)
        return p.with_color(p.color(rng))

    def draw(self, image: Displayable) -> None:
        color = self.rgb if self.rgb is not None else self.color()
        image.display(self.x, self.y, color)


@dataclass
class Line(Colored):
    """
    Segment between two points, rasterized by a fixed-step walk.

    The walk takes ``steps = max(|dx|, |dy|)`` increments from p1, each
    accumulator converted with ``to_pixel`` before it advances, so exactly
    ``steps`` pixels are emitted and p2 itself is excluded. A zero-length
    line emits the single pixel p1.
    """
    p1: Point
    p2: Point
    rgb: Optional[Color] = None
    rng: InitVar[Optional[np.random.Generator]] = None

    @staticmethod
    def random(rng: np.random.Generator, width: int, height: int) -> "Line":
        return Line(random_vertex(rng, width, height), random_vertex(rng, width, height), rng=rng)

    def pixels(self) -> Iterator[Tuple[int, int]]:
        x1, y1 = self.p1.x, self.p1.y
        x2, y2 = self.p2.x, self.p2.y
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        steps = max(dx, dy)
        if steps == 0:
            yield x1, y1
            return
        step_x = dx / steps if x1 < x2 else -dx / steps
        step_y = dy / steps if y1 < y2 else -dy / steps
        cur_x, cur_y = float(x1), float(y1)
        for _ in range(steps):
            yield to_pixel(cur_x), to_pixel(cur_y)
            cur_x += step_x
            cur_y += step_y

    def draw(self, image: Displayable) -> None:
        n = 0
        for x, y in self.pixels():
            image.display(x, y, self.rgb)
            n += 1
        logger.debug(f"Line {self.p1} -> {self.p2}: {n} pixels in {self.rgb}")


@dataclass
class Triangle(Colored):
    a: Point
    b: Point
    c: Point
    rgb: Optional[Color] = None
    rng: InitVar[Optional[np.random.Generator]] = None

    @staticmethod
    def random(rng: np.random.Generator, width: int, height: int) -> "Triangle":
        a = random_vertex(rng, width, height)
        b = random_vertex(rng, width, height)
        c = random_vertex(rng, width, height)
        return Triangle(a, b, c, rng=rng)

    def edges(self) -> List[Line]:
        # ab, bc, ca; every edge shares the triangle's color
        return [
            Line(self.a, self.b, rgb=self.rgb),
            Line(self.b, self.c, rgb=self.rgb),
            Line(self.c, self.a, rgb=self.rgb),
        ]

    def draw(self, image: Displayable) -> None:
        for edge in self.edges():
            edge.draw(image)
        logger.debug(f"Triangle {self.a}, {self.b}, {self.c} drawn in {self.rgb}")


@dataclass
class Rectangle(Colored):
    """
    Axis-aligned box given by two opposite corners.

    Corners are used as given: if ``left`` is not the min corner the outline
    is still the box spanned by both points, traversed mirrored.
    """
    left: Point
    right: Point
    rgb: Optional[Color] = None
    rng: InitVar[Optional[np.random.Generator]] = None

    @staticmethod
    def random(rng: np.random.Generator, width: int, height: int) -> "Rectangle":
        p = random_vertex(rng, width, height)
        q = random_vertex(rng, width, height)
        left = Point(min(p.x, q.x), min(p.y, q.y))
        right = Point(max(p.x, q.x), max(p.y, q.y))
        return Rectangle(left, right, rng=rng)

    def corners(self) -> List[Point]:
        """
        Cyclic order: left, (left.x, right.y), right, (right.x, left.y).
        """
        return [
            self.left,
            Point(self.left.x, self.right.y),
            self.right,
            Point(self.right.x, self.left.y),
        ]

    def edges(self) -> List[Line]:
        pts = self.corners()
        n = len(pts)
        return [Line(pts[i], pts[(i + 1) % n], rgb=self.rgb) for i in range(n)]

    def draw(self, image: Displayable) -> None:
        for edge in self.edges():
            edge.draw(image)
        logger.debug(f"Rectangle {self.left} - {self.right} drawn in {self.rgb}")


@dataclass
class Circle(Colored):
    """
    Circle outline approximated by a closed polyline, one segment per degree.

    Samples are taken at every integer degree from 0 to 360 inclusive, so
    the 0 and 360 degree samples coincide and the loop closes on itself.
    The first segment joins the 0 degree sample to itself. A zero radius
    renders as the single center pixel.
    """
    center: Point
    radius: int
    rgb: Optional[Color] = None
    rng: InitVar[Optional[np.random.Generator]] = None

    def __post_init__(self, rng: Optional[np.random.Generator]):
        if self.radius < 0:
            raise ValueError(f"Circle radius must be non-negative, got {self.radius}")
        super().__post_init__(rng)

    @staticmethod
    def random(rng: np.random.Generator, width: int, height: int) -> "Circle":
        center = random_vertex(rng, width, height)
        radius = int(rng.integers(0, min(width, height)))
        return Circle(center, radius, rng=rng)

    def samples(self) -> List[Point]:
        cx, cy, r = self.center.x, self.center.y, self.radius
        pts: List[Point] = []
        for i in range(CIRCLE_SEGMENTS + 1):
            theta = math.radians(i)
            pts.append(Point(to_pixel(cx + r * math.cos(theta)), to_pixel(cy + r * math.sin(theta))))
        return pts

    def edges(self) -> List[Line]:
        if self.radius == 0:
            return [Line(self.center, self.center, rgb=self.rgb)]
        pts = self.samples()
        lines: List[Line] = []
        last = pts[0]
        for cur in pts:
            lines.append(Line(last, cur, rgb=self.rgb))
            last = cur
        return lines

    def draw(self, image: Displayable) -> None:
        if self.radius == 0:
            image.display(self.center.x, self.center.y, self.rgb)
            logger.debug(f"Circle at {self.center} r=0 drawn as one pixel in {self.rgb}")
            return
        for edge in self.edges():
            edge.draw(image)
        logger.debug(f"Circle at {self.center} r={self.radius} drawn in {self.rgb}")
