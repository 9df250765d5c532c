# Re-export core geometry API for convenience
from .color import Color, random_color
from .geometry import (
    CIRCLE_SEGMENTS,
    InvalidBounds,
    Displayable,
    Shape,
    Colored,
    Point,
    Line,
    Triangle,
    Rectangle,
    Circle,
    check_bounds,
    random_vertex,
    to_pixel,
)
