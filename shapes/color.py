from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np


@dataclass(frozen=True)
class Color:
    """
    RGB color with 8-bit channels in [0, 255].
    """
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
                raise ValueError(f"channel {name}={v!r} must be an integer")
            if not 0 <= v <= 255:
                raise ValueError(f"channel {name}={v} outside [0, 255]")
            object.__setattr__(self, name, int(v))

    @staticmethod
    def rgb(r: int, g: int, b: int) -> "Color":
        return Color(r, g, b)

    @staticmethod
    def white() -> "Color":
        return Color(255, 255, 255)

    @staticmethod
    def black() -> "Color":
        return Color(0, 0, 0)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=np.uint8)


def random_color(rng: Optional[np.random.Generator] = None) -> Color:
    """
    Three independent uniform channels in [0, 255].
    A fresh default generator is used when rng is None.
    """
    if rng is None:
        rng = np.random.default_rng()
    r, g, b = rng.integers(0, 256, size=3)
    return Color(int(r), int(g), int(b))
