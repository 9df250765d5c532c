from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Literal, Optional, Sequence, Tuple
import logging
import numpy as np

from shapes import (
    Color,
    Displayable,
    Shape,
    Point,
    Line,
    Triangle,
    Rectangle,
    Circle,
    check_bounds,
)

logger = logging.getLogger(__name__)


ShapeKind = Literal["point", "line", "triangle", "rectangle", "circle"]

# Order in which random_scene emits shape kinds.
SHAPE_KINDS: Tuple[ShapeKind, ...] = ("point", "line", "triangle", "rectangle", "circle")


RANDOM_FACTORIES: Dict[ShapeKind, Callable[[np.random.Generator, int, int], Shape]] = {
    "point": Point.random,
    "line": Line.random,
    "triangle": Triangle.random,
    "rectangle": Rectangle.random,
    "circle": Circle.random,
}


@dataclass(frozen=True)
class SceneConfig:
    width: int = 1000
    height: int = 1000
    random_seed: Optional[int] = None
    num_points: int = 0
    num_lines: int = 0
    num_triangles: int = 0
    num_rectangles: int = 0
    num_circles: int = 0
    background: Color = Color(0, 0, 0)

    def __post_init__(self):
        check_bounds(self.width, self.height)
        for kind in SHAPE_KINDS:
            if self.count(kind) < 0:
                raise ValueError(f"number of {kind}s must be non-negative, got {self.count(kind)}")

    def count(self, kind: ShapeKind) -> int:
        return int(getattr(self, f"num_{kind}s"))

    @property
    def total_shapes(self) -> int:
        return sum(self.count(kind) for kind in SHAPE_KINDS)


def random_shape(rng: np.random.Generator, kind: ShapeKind, width: int, height: int) -> Shape:
    if kind not in RANDOM_FACTORIES:
        raise ValueError(f"unknown shape kind: {kind}")
    return RANDOM_FACTORIES[kind](rng, width, height)


def random_scene(rng: np.random.Generator, cfg: SceneConfig) -> List[Shape]:
    shapes: List[Shape] = []
    for kind in SHAPE_KINDS:
        for _ in range(cfg.count(kind)):
            shapes.append(random_shape(rng, kind, cfg.width, cfg.height))
    logger.debug(f"Built random scene with {len(shapes)} shapes ({cfg.width}x{cfg.height})")
    return shapes


def demo_scene(rng: np.random.Generator, cfg: SceneConfig, num_circles: int = 50) -> List[Shape]:
    """
    Showcase composition: a random line and point, a fixed rectangle and
    triangle, then a batch of random circles.
    """
    shapes: List[Shape] = [
        Line.random(rng, cfg.width, cfg.height),
        Point.random(rng, cfg.width, cfg.height),
        Rectangle(Point(150, 150), Point(50, 50), rng=rng),
        Triangle(Point(500, 500), Point(250, 700), Point(700, 800), rng=rng),
    ]
    for _ in range(num_circles):
        shapes.append(Circle.random(rng, cfg.width, cfg.height))
    return shapes


def initialize_scene(cfg: SceneConfig) -> Tuple[np.random.Generator, List[Shape]]:
    rng = np.random.default_rng(cfg.random_seed)
    return rng, random_scene(rng, cfg)


def draw_scene(image: Displayable, shapes: Sequence[Shape]) -> int:
    n = 0
    for shape in shapes:
        shape.draw(image)
        n += 1
    logger.debug(f"Drew {n} shapes")
    return n
