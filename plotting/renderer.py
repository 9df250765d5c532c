from __future__ import annotations

from typing import Iterable, Optional, Union
import logging
import os
import numpy as np
import matplotlib.pyplot as plt
from PIL import Image

from shapes import Color, Shape, check_bounds

logger = logging.getLogger(__name__)


class RasterImage:
    """
    In-memory RGB image usable as a pixel sink.

    Pixels are stored row-major in a (height, width, 3) uint8 array.
    Writes outside the canvas are ignored.
    """
    def __init__(self, width: int, height: int, background: Optional[Color] = None):
        check_bounds(width, height)
        self.width = int(width)
        self.height = int(height)
        self.background = background if background is not None else Color.black()
        self.pixels = np.empty((self.height, self.width, 3), dtype=np.uint8)
        self.clear()

    def clear(self) -> None:
        self.pixels[:, :] = self.background.as_array()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def display(self, x: int, y: int, color: Color) -> None:
        if self.in_bounds(x, y):
            self.pixels[y, x] = color.as_tuple()

    def pixel(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def to_pil(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def save(self, out_path: str, format: Optional[str] = None) -> str:
        out_dir = os.path.dirname(out_path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        if format is None:
            format = "png" if not os.path.splitext(out_path)[1] else None
        self.to_pil().save(out_path, format=format)
        logger.info(f"Saved {self.width}x{self.height} image -> {out_path}")
        return out_path


def _as_shapes(shape_or_shapes: Union[Shape, Iterable[Shape]]) -> list:
    if isinstance(shape_or_shapes, Shape):
        return [shape_or_shapes]
    return list(shape_or_shapes)


def render_to_image(
    shape: Union[Shape, Iterable[Shape]],
    width: int,
    height: int,
    background: Optional[Color] = None,
) -> RasterImage:
    image = RasterImage(width, height, background=background)
    for s in _as_shapes(shape):
        s.draw(image)
    return image


def render_to_file(
    shape: Union[Shape, Iterable[Shape]],
    out_path: str,
    width: int = 1000,
    height: int = 1000,
    background: Optional[Color] = None,
) -> RasterImage:
    """
    Draw a shape (or shapes, in order) on a fresh image and save it.
    """
    image = render_to_image(shape, width, height, background=background)
    image.save(out_path)
    return image


def render_to_axes(ax, image: RasterImage, title: Optional[str] = None, show_axes: bool = False) -> None:
    ax.imshow(image.pixels, origin="upper", interpolation="none", aspect="equal")
    if title:
        ax.set_title(title)
    if show_axes:
        ax.set_xlim(0, image.width)
        ax.set_ylim(image.height, 0)
    else:
        ax.axis("off")


def preview(image: RasterImage, title: Optional[str] = None, figsize=(6.0, 6.0)) -> None:
    fig, ax = plt.subplots(1, 1, figsize=figsize, constrained_layout=True)
    render_to_axes(ax, image, title=title)
    plt.show()
    plt.close(fig)
